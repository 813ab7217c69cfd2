"""
File-only logger — NEVER writes to stdout (would corrupt MCP protocol)
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import Config

_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def _secure_handler(log_path: Path, level: int, fmt: str) -> RotatingFileHandler:
    """Create a rotating file handler with restricted permissions."""
    handler = RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))

    # Campaign payloads end up in here
    try:
        os.chmod(log_path, 0o600)
    except OSError:
        pass

    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to file only"""
    logger = logging.getLogger(f"synter.{name}")
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    # Never propagate to root (which might have stdout handlers)
    logger.propagate = False

    try:
        Config.ensure_dirs()
        logger.addHandler(_secure_handler(Config.LOG_FILE, logging.DEBUG, _FORMAT))
        logger.addHandler(_secure_handler(Config.ERROR_LOG, logging.ERROR, _FORMAT))
    except OSError:
        # Read-only home: run silent rather than fall back to stdout
        logger.addHandler(logging.NullHandler())

    return logger
