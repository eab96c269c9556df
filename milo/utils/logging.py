"""Logging for Milo: loguru sinks plus a bridge for jieba's standard-library logger."""

import logging
from pathlib import Path
import sys

import jieba
from loguru import logger

DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_DEBUG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
)


def _resolve_level(verbose: bool, debug: bool) -> str:
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return "WARNING"


class LoguruBridge(logging.Handler):
    """Re-emit standard-library log records through loguru.

    jieba reports dictionary loading on its own ``logging`` logger with a
    stderr handler attached at import time. Replacing that handler with this
    one puts its messages behind the same level and sinks as ours.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Report the caller of the logging call, not the logging module itself
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def route_jieba_logs(level: str) -> None:
    """Send jieba's log records to loguru, filtered at ``level``."""
    jieba_logger = jieba.default_logger
    jieba_logger.handlers = [LoguruBridge()]
    jieba_logger.propagate = False
    jieba.setLogLevel(logging.getLevelName(level))


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru logger based on verbose and debug flags.

    Only WARNING and above reach stderr by default, including jieba's
    dictionary loading chatter, which is logged at DEBUG.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    level = _resolve_level(verbose, debug)
    logger.remove()
    logger.add(
        sys.stderr,
        format=DEBUG_FORMAT if debug else "<level>{message}</level>",
        level=level,
        colorize=True,
    )
    route_jieba_logs(level)


def add_log_file_handler(log_file: str | Path, verbose: bool = False, debug: bool = False) -> None:
    """Add a file sink next to the stderr one.

    Non-debug file logs carry a timestamp since they outlive the session.
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path,
        format=FILE_DEBUG_FORMAT if debug else "{time:YYYY-MM-DD HH:mm:ss} | {message}",
        level=_resolve_level(verbose, debug),
        colorize=False,
        encoding="utf-8",
    )
