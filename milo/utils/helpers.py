"""Shared utility functions for Milo."""

import os
from pathlib import Path

from loguru import logger
from platformdirs import user_config_dir

from milo.utils.constants import Constants


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def default_history_path() -> Path:
    """Return the history file location under the user's configuration directory."""
    return Path(user_config_dir(Constants.APP_NAME, appauthor=False)) / Constants.HISTORY_FILENAME


def ensure_directory_exists(dir_path: str | Path) -> None:
    """Create directory if it doesn't exist, with consistent error handling.

    Raises:
        PermissionError: If directory creation is denied
        OSError: If directory creation fails for other OS-related reasons
    """
    dir_str = str(dir_path)
    try:
        os.makedirs(dir_str, exist_ok=True)
    except PermissionError:
        logger.error(f"✗ Permission denied creating directory: {dir_str}")
        logger.error("  Please check directory permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ Failed to create directory {dir_str}: {e}")
        raise


def clean_text(text: str) -> str:
    """Trim every line of text, preserving the line structure."""
    return "\n".join(line.strip() for line in (text or "").splitlines())
