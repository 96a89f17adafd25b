"""
FastTable - server-rendered tables backed by jQuery tablesorter

Renders rows of key/value records into an HTML table plus the client-side
script that enables sorting, filtering, paging, column visibility and export.

Usage::

    from fasttable import TableRenderer

    renderer = TableRenderer()
    renderer.load_array([{"Animal": "Dog", "Color": "Brown"}, {"Animal": "Cat", "Color": "Black"}])

    table = renderer.render_markup()
    script = renderer.render_script(table.table_id)
"""

from .config import ConfigurationError, FastTableConfig, get_config
from .domain.table import PopoverOptions, RenderedTable, TableOptions, Widget
from .framework.resources import get_resource_tags
from .renderer import TableRenderer, generate_table_id, render_page

__version__ = "1.0.0"

__all__ = [
    "TableRenderer",
    "TableOptions",
    "PopoverOptions",
    "RenderedTable",
    "Widget",
    "generate_table_id",
    "render_page",
    "get_resource_tags",
    "get_config",
    "FastTableConfig",
    "ConfigurationError",
]
