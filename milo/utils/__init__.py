"""Utility functions for Milo."""

from milo.utils.constants import Constants
from milo.utils.helpers import (
    clean_text,
    default_history_path,
    ensure_directory_exists,
    expand_file_path,
)
from milo.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "clean_text",
    "default_history_path",
    "ensure_directory_exists",
    "expand_file_path",
    "setup_logger",
]
