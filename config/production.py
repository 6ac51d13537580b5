"""
Production Configuration
"""

import os

from config.default import DefaultConfig


class ProductionConfig(DefaultConfig):
    """Production settings. SECRET_KEY must come from the environment."""

    DEBUG: bool = False
    SECRET_KEY: str | None = os.environ.get('FLASK_SECRET_KEY')
