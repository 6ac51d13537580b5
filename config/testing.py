"""
Testing Configuration
"""

import os
import tempfile

from config.default import DefaultConfig


class TestingConfig(DefaultConfig):
    """Settings for the test suite: no real secrets, no real store."""

    TESTING: bool = True
    DEBUG: bool = False
    SECRET_KEY: str = 'testing-secret-key'

    DEEPSEEK_API_KEY: str | None = 'sk-test-0000000000000000'
    COMPLETION_API_URL: str = 'https://completion.test/v1/chat/completions'
    MONGO_URI: str | None = None

    TEMP_UPLOAD_FOLDER: str = os.path.join(tempfile.gettempdir(), 'docx_corrector_test_uploads')
