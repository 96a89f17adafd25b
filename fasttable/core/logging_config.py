"""
Centralized logging configuration with structured JSON output.

Provides:
- JSON structured logging for log aggregation
- Human-readable console logging for development
- Automatic context injection (timestamp, module, level)

The library itself never configures the root logger; applications (and the
``fasttable`` command line tool) call :func:`setup_logging` once at startup.

Usage:
    from fasttable.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Rendered table", extra={"table_id": "viewTable1", "row_count": 42})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class JSONFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging.

    Produces machine-readable logs suitable for log aggregation tools.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Added by log_with_context()
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class ContextFormatter(logging.Formatter):
    """
    Human-readable formatter for console output.

    Includes color coding for log levels (when supported).
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color coding"""
        levelname = record.levelname
        if sys.stderr.isatty():
            color = self.COLORS.get(levelname, "")
            record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_output: bool = False,
) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        json_output: If True, use JSON formatter; if False, use human-readable format

    Example:
        # Development (human-readable, stderr)
        setup_logging(level="DEBUG")

        # Production (JSON to file)
        setup_logging(level="INFO", log_file=Path(".tmp/logs/fasttable.log"), json_output=True)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    # stdout is reserved for rendered HTML when the CLI writes to it
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            ContextFormatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)

        # Always use JSON for file output
        file_handler.setFormatter(JSONFormatter())

        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: Module name (use __name__ in calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **context: Additional context fields (key-value pairs)

    Example:
        log_with_context(logger, "debug", "Rendered markup", table_id="viewTable1", row_count=15)
    """
    log_func = getattr(logger, level.lower())
    log_func(message, extra={"extra_fields": context})
