"""
Domain models for FastTable

Typed configuration and results shared by the renderer, the script
framework and the command line tool.
"""

from .table import (
    DEFAULT_POPOVER_PLACEMENT,
    DEFAULT_RESOURCE_BASE_URL,
    DEFAULT_WIDGETS,
    PopoverOptions,
    RenderedTable,
    Row,
    TableOptions,
    Widget,
    normalize_widgets,
)

__all__ = [
    "DEFAULT_POPOVER_PLACEMENT",
    "DEFAULT_RESOURCE_BASE_URL",
    "DEFAULT_WIDGETS",
    "PopoverOptions",
    "RenderedTable",
    "Row",
    "TableOptions",
    "Widget",
    "normalize_widgets",
]
