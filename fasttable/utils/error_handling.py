"""
Error Handling Utility Module

Provides the structured error logging patterns used across the package so
failures are reported with context before they reach the caller.

1. log_and_raise() - Log error with context and re-raise (for errors the caller must see)
2. log_and_return_default() - Log error and return a default value
"""

import logging
from typing import Any


def log_and_raise(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    error_type: str = "Operation",
) -> None:
    """
    Log an error with context and re-raise it.

    Args:
        logger: Logger instance
        error: The exception to report
        context: Structured data about what failed
        error_type: Human-readable description

    Raises:
        The original exception after logging

    Example:
        try:
            first_row = rows[0]
        except IndexError as e:
            log_and_raise(logger, e, {"row_count": 0}, "Column derivation")
    """
    logger.error(
        f"{error_type} failed: {error}",
        exc_info=error.__traceback__ is not None,
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
        },
    )
    raise error


def log_and_return_default(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    default_value: Any = None,
    error_type: str = "Operation",
) -> Any:
    """
    Log an error and return a default value.

    Args:
        logger: Logger instance
        error: The caught exception
        context: Structured data about what failed
        default_value: Value to return on error (None, 1, {}, etc.)
        error_type: Human-readable description

    Returns:
        default_value

    Example:
        try:
            rows = read_rows(path)
        except InputError as e:
            return log_and_return_default(logger, e, {"path": str(path)}, default_value=1, error_type="Input loading")
    """
    logger.error(
        f"{error_type} failed: {error}",
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
            "default_value": str(default_value),
        },
    )
    return default_value
