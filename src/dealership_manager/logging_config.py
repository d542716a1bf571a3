"""Logging configuration for DealershipManager."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from dealership_manager.config import LOG_BACKUP_COUNT, LOG_FILENAME, LOG_MAX_BYTES
from dealership_manager.paths import get_logs_dir


def configure_logging(level: int = logging.INFO, *, log_to_file: bool = True) -> None:
    """Configure file and console logging for the application."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    handlers: list[logging.Handler] = []
    if log_to_file:
        log_file = get_logs_dir() / LOG_FILENAME
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    def handle_exception(
        exc_type: type[BaseException],
        exc: BaseException,
        traceback: object,
    ) -> None:
        root_logger.error("Unhandled exception", exc_info=(exc_type, exc, traceback))

    sys.excepthook = handle_exception


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger."""
    return logging.getLogger(name)
