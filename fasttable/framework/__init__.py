"""
Client-side framework for rendered tables

Package Structure:
    - javascript.py: tablesorter, pager, output widget and popover scripts
    - resources.py: Stylesheet and script tags for the tablesorter assets

Usage::

    from fasttable.framework import get_table_javascript

    script = get_table_javascript("orders", theme="bootstrap", widgets=["filter", "pager"])
"""

from .javascript import (
    get_output_menu_script,
    get_output_widget_options,
    get_pager_script,
    get_popover_script,
    get_table_javascript,
    get_tablesorter_init_script,
    js_literal,
)
from .resources import get_resource_tags

__all__ = [
    "get_table_javascript",
    "get_tablesorter_init_script",
    "get_pager_script",
    "get_output_widget_options",
    "get_output_menu_script",
    "get_popover_script",
    "get_resource_tags",
    "js_literal",
]
