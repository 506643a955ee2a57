import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DIR_MODE = 0o755


def get_home_path(path: str) -> str:
    """Expand a leading '~' to the user's home directory and clean the path.

    Repeated separators, '.' and '..' segments and trailing separators are
    removed lexically; nothing on disk is consulted.
    """
    if path.startswith("~"):
        path = str(Path.home()) + path[1:]
    cleaned = os.path.normpath(path)
    # normpath keeps a leading '//' (POSIX allows it), we do not
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def ensure_dir_exists(file_path: str) -> None:
    """Create the parent directory of file_path (and its ancestors) if missing.

    Raises OSError if the directory cannot be created.
    """
    directory = os.path.dirname(file_path) or "."
    if os.path.isdir(directory):
        return
    logger.debug(f"Creating directory {directory}")
    os.makedirs(directory, mode=DIR_MODE, exist_ok=True)
