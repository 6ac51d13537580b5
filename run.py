#!/usr/bin/env python3
"""
Flask application entry point for the DOCX compliance corrector.
"""

from dotenv import load_dotenv
load_dotenv()

from app import create_app
import os

app = create_app(os.environ.get('APP_CONFIG', 'default'))

if __name__ == "__main__":
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('DEBUG', 'True').lower() == 'true'

    app.run(
        host='0.0.0.0',
        port=port,
        debug=debug
    )
