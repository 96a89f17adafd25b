"""
Configuration Management

Provides validated, environment-driven defaults for rendered tables.
Values are read from the process environment (and a ``.env`` file when
present) and validated up front so a bad setting fails at startup rather than
producing broken markup in the browser.

Usage:
    from fasttable.config import get_config

    config = get_config()
    renderer = TableRenderer(config.to_table_options())

Environment variables (all optional):
    FASTTABLE_THEME              tablesorter theme (default: bootstrap)
    FASTTABLE_TABLE_CLASSES      CSS classes for <table> (default: table)
    FASTTABLE_WIDGETS            Comma separated widget names
    FASTTABLE_POPOVER_PLACEMENT  top, bottom, left, right or auto (default: top)
    FASTTABLE_RESOURCE_URL       Base URL of tablesorter assets (default: resources)
    FASTTABLE_LOG_LEVEL          Logging level for the CLI (default: INFO)

Raises:
    ConfigurationError: If configuration is invalid
"""

import os
import re
from dataclasses import dataclass, field

from dotenv import find_dotenv, load_dotenv

from .domain.table import (
    DEFAULT_POPOVER_PLACEMENT,
    DEFAULT_RESOURCE_BASE_URL,
    DEFAULT_WIDGETS,
    TableOptions,
    normalize_widgets,
)

NAME_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")
POPOVER_PLACEMENTS = ("top", "bottom", "left", "right", "auto")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass
class FastTableConfig:
    """
    Validated table rendering configuration.
    """

    theme: str = "bootstrap"
    table_classes: str = "table"
    widgets: list[str] = field(default_factory=lambda: normalize_widgets(DEFAULT_WIDGETS))
    popover_placement: str = DEFAULT_POPOVER_PLACEMENT
    resource_base_url: str = DEFAULT_RESOURCE_BASE_URL
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not NAME_PATTERN.match(self.theme):
            raise ConfigurationError(f"FASTTABLE_THEME contains invalid characters: {self.theme!r}")

        for widget in self.widgets:
            if not NAME_PATTERN.match(widget):
                raise ConfigurationError(f"FASTTABLE_WIDGETS contains an invalid widget name: {widget!r}")

        if self.popover_placement not in POPOVER_PLACEMENTS:
            raise ConfigurationError(
                f"FASTTABLE_POPOVER_PLACEMENT must be one of {', '.join(POPOVER_PLACEMENTS)}: "
                f"{self.popover_placement!r}"
            )

        if '"' in self.table_classes or "'" in self.table_classes or "<" in self.table_classes:
            raise ConfigurationError(f"FASTTABLE_TABLE_CLASSES contains invalid characters: {self.table_classes!r}")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"FASTTABLE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {self.log_level!r}")

    def to_table_options(self) -> TableOptions:
        """
        Build rendering options from this configuration.

        Returns:
            TableOptions with theme, classes, widgets, placement and resource URL applied
        """
        return TableOptions(
            table_classes=self.table_classes,
            theme=self.theme,
            widgets=list(self.widgets),
            popover_default_placement=self.popover_placement,
            resource_base_url=self.resource_base_url,
        )


def parse_widget_list(value: str) -> list[str]:
    """
    Split a comma separated widget list.

    Example:
        >>> parse_widget_list("filter, zebra,,pager")
        ['filter', 'zebra', 'pager']
    """
    return normalize_widgets(part.strip() for part in value.split(",") if part.strip())


def get_config(load_env_file: bool = True) -> FastTableConfig:
    """
    Load and validate configuration from the environment.

    Args:
        load_env_file: Read a ``.env`` file found from the working directory first (existing variables win)

    Returns:
        FastTableConfig with defaults applied for unset variables

    Raises:
        ConfigurationError: If any value is invalid
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    kwargs = {}

    theme = os.getenv("FASTTABLE_THEME")
    if theme is not None:
        kwargs["theme"] = theme.strip()

    table_classes = os.getenv("FASTTABLE_TABLE_CLASSES")
    if table_classes is not None:
        kwargs["table_classes"] = table_classes.strip()

    widgets = os.getenv("FASTTABLE_WIDGETS")
    if widgets is not None:
        kwargs["widgets"] = parse_widget_list(widgets)

    placement = os.getenv("FASTTABLE_POPOVER_PLACEMENT")
    if placement is not None:
        kwargs["popover_placement"] = placement.strip().lower()

    resource_url = os.getenv("FASTTABLE_RESOURCE_URL")
    if resource_url is not None:
        kwargs["resource_base_url"] = resource_url.strip().rstrip("/") or DEFAULT_RESOURCE_BASE_URL

    log_level = os.getenv("FASTTABLE_LOG_LEVEL")
    if log_level is not None:
        kwargs["log_level"] = log_level.strip().upper()

    return FastTableConfig(**kwargs)
