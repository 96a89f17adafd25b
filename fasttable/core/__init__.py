"""
Core Infrastructure - Logging and Configuration

Usage:
    from fasttable.core import get_config, get_logger

    logger = get_logger(__name__)
    options = get_config().to_table_options()
"""

from ..config import ConfigurationError, FastTableConfig, get_config
from .logging_config import get_logger, log_with_context, setup_logging

__all__ = [
    # Configuration
    "get_config",
    "ConfigurationError",
    "FastTableConfig",
    # Logging
    "get_logger",
    "log_with_context",
    "setup_logging",
]
