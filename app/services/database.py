"""
Database Service

MongoDB client used by the health probe.
"""

import threading
from pymongo import MongoClient
from flask import current_app

from app.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Process-wide client, created on first use and kept for the process lifetime
_client = None
_client_lock = threading.Lock()


class DatabaseUnavailableError(Exception):
    """No MongoDB connection string is configured."""


def get_client() -> MongoClient:
    """Return the shared MongoClient, creating it once."""
    global _client

    if _client is not None:
        return _client

    with _client_lock:
        if _client is None:
            mongo_uri = current_app.config.get('MONGO_URI')
            if not mongo_uri:
                raise DatabaseUnavailableError("MONGO_URI not configured")
            logger.info("Creating MongoDB client...")
            _client = MongoClient(
                mongo_uri,
                serverSelectionTimeoutMS=current_app.config.get('MONGO_SERVER_SELECTION_TIMEOUT_MS', 5000),
            )
    return _client


def get_database():
    """Database named in the URI, falling back to DB_NAME."""
    client = get_client()
    return client.get_default_database(default=current_app.config.get('DB_NAME'))


def get_users_collection():
    return get_database()[current_app.config.get('USERS_COLLECTION', 'User')]


def count_users() -> int:
    """Count user records; read-only."""
    users = get_users_collection().count_documents({})
    logger.info(f"User count: {users}")
    return users
