"""
Default Configuration

Configuration settings for the DOCX compliance corrector.
"""

import os
import tempfile


def _optional_float(value: str | None) -> float | None:
    """Parse an optional numeric environment value; empty means unset."""
    if value is None or not value.strip():
        return None
    return float(value)


class DefaultConfig:
    """Default configuration settings."""

    SECRET_KEY: str = os.environ.get('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG: bool = os.environ.get('DEBUG', 'True').lower() == 'true'
    TESTING: bool = False

    CORS_ORIGINS: str = os.environ.get('CORS_ORIGINS', '*')

    # Completion endpoint (DeepSeek-compatible chat completions)
    DEEPSEEK_API_KEY: str | None = os.environ.get("DEEPSEEK_API_KEY")
    COMPLETION_API_URL: str = os.environ.get(
        "COMPLETION_API_URL", "https://api.deepseek.com/v1/chat/completions"
    )
    MODEL_NAME: str = os.environ.get("MODEL_NAME", "deepseek-reasoner")
    TEMPERATURE: float = float(os.environ.get("TEMPERATURE", "0.2"))
    MAX_TOKENS: int = int(os.environ.get("MAX_TOKENS", "1000"))
    # Unset means requests waits indefinitely for the completion endpoint
    COMPLETION_TIMEOUT: float | None = _optional_float(os.environ.get("COMPLETION_TIMEOUT"))

    # Health probe store
    MONGO_URI: str | None = os.environ.get("MONGO_URI")
    DB_NAME: str = os.environ.get("DB_NAME", "docx_corrector_db")
    USERS_COLLECTION: str = os.environ.get("USERS_COLLECTION", "User")
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = int(
        os.environ.get("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
    )

    TEMP_UPLOAD_FOLDER: str = os.environ.get(
        "TEMP_UPLOAD_FOLDER",
        os.path.join(tempfile.gettempdir(), 'docx_corrector_uploads')
    )
