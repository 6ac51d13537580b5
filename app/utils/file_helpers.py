"""
File handling utilities for uploaded documents.
"""

import os
import uuid
import re
import logging
from unidecode import unidecode

logger = logging.getLogger(__name__)


def ensure_dir(dir_path: str):
    """Ensures that a directory exists, creating it if necessary."""
    try:
        os.makedirs(dir_path, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create directory '{dir_path}': {e}")
        raise


def clean_filename(filename: str) -> str:
    """
    Cleans a filename by removing potentially problematic characters and
    ensuring it's a valid name for most filesystems.
    Uses unidecode for broader character support before basic sanitization.
    """
    if not filename:
        return f"document_{uuid.uuid4().hex[:8]}"

    ascii_filename = unidecode(os.path.basename(filename))

    safe_filename = ascii_filename.replace(" ", "_")

    safe_filename = re.sub(r'[^\w\s.-]', '', safe_filename).strip()

    if not safe_filename or safe_filename.strip('.') == '':
        return f"document_{uuid.uuid4().hex[:8]}"

    max_len = 200
    if len(safe_filename) > max_len:
        name, ext = os.path.splitext(safe_filename)
        safe_filename = name[:max_len - len(ext) - 1] + ext
    return safe_filename


def save_upload(file_storage, upload_folder: str) -> str | None:
    """
    Writes an uploaded FileStorage to the upload folder under a unique name.
    Returns the stored path, or None when nothing ended up on disk.
    """
    ensure_dir(upload_folder)
    target_path = os.path.join(
        upload_folder, f"{uuid.uuid4().hex}_{clean_filename(file_storage.filename)}"
    )
    file_storage.save(target_path)
    if not os.path.isfile(target_path):
        logger.warning(f"Upload was not written to {target_path}")
        return None
    return target_path


def remove_file_quietly(path: str | None):
    """Deletes a temporary file; failures are logged, never raised."""
    if not path:
        return
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove temporary file {path}: {e}")
