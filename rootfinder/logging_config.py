"""Logging configuration utilities for rootfinder.

The library is silent by default: the ``rootfinder`` logger only carries a
NullHandler. Searches log per-iteration detail at DEBUG, converged results
at INFO and failed searches at WARNING.

Example usage:
    import rootfinder

    # Watch every iteration on stderr
    rootfinder.enable_console_logging(level="DEBUG")

    # Only the driver, not the builder
    rootfinder.set_module_level("builder", "WARNING")

    # Configure from environment variables
    rootfinder.configure_from_env()

Environment variables:
    RF_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    RF_LOG_FILE: Path to log file (enables rotating file logging)
    RF_LOG_JSON: Set to "1" for JSON output
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "JsonFormatter",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "rootfinder"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Formats log records as one JSON object per line.

    Example output:
        {"timestamp": "2024-01-15T10:30:00.123456+00:00", "level": "INFO",
         "logger": "rootfinder.driver", "message": "secant converged to ..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def _get_level(level: str | int) -> int:
    """Convert a level string or int to a logging level constant."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close every handler on the rootfinder logger except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _attach(handler: logging.Handler, level: LogLevel | int) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    logger.addHandler(handler)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Send rootfinder logs to stderr.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created StreamHandler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format, date_format))
    _attach(handler, level)
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    json_format: bool = False,
) -> RotatingFileHandler:
    """Write rootfinder logs to a size-rotated file.

    Args:
        path: Path to the log file. Parent directories are created.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.
        max_bytes: Size at which the file is rotated. Default 10 MB.
        backup_count: Number of rotated files to keep. Default 5.
        json_format: Write JSON lines instead of plain text.

    Returns:
        The created RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    _attach(handler, level)
    return handler


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Send rootfinder logs to stderr as JSON lines.

    Returns:
        The created StreamHandler with JsonFormatter.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    _attach(handler, level)
    return handler


def configure_from_env() -> None:
    """Configure logging from RF_LOGGING, RF_LOG_FILE and RF_LOG_JSON.

    Does nothing when neither RF_LOGGING nor RF_LOG_FILE is set.
    """
    level = os.environ.get("RF_LOGGING", "").upper()
    log_file = os.environ.get("RF_LOG_FILE", "")
    use_json = os.environ.get("RF_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if log_file:
        enable_file_logging(log_file, level=level, json_format=use_json)
    elif use_json:
        enable_json_logging(level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Set the level of the rootfinder logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level for one submodule, e.g. ``"driver"`` or ``"brent"``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the rootfinder logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
