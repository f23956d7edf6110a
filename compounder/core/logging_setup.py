"""Logging configuration for applications embedding the calculator."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List

_installed_handlers: List[logging.Handler] = []


def setup_logging(log_level: str, log_file: Path) -> None:
    """Configure logging for the application.

    Calling it again replaces the handlers installed by the previous call.
    """
    # Create log directory if needed
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    # Console handler
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_format)

    # File handler (rotating)
    file_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
    )
    file_handler.setFormatter(file_format)

    for handler in (console_handler, file_handler):
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)
