"""
Domain models for table rendering

Provides the typed configuration consumed by the renderer:
    - Widget: Recognized tablesorter widget names
    - PopoverOptions: Bootstrap popover settings for one column header
    - TableOptions: Rendering options for one table
    - RenderedTable: Markup plus the table id it was rendered with
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

Row = Mapping[str, Any]

DEFAULT_POPOVER_PLACEMENT = "top"
DEFAULT_RESOURCE_BASE_URL = "resources"


class Widget(str, Enum):
    """
    Widget names understood by tablesorter and its add-ons.

    The renderer accepts any string as a widget name; members of this enum are
    the ones with known meaning. ``PAGER`` and ``OUTPUT`` additionally change
    the generated markup and script.
    """

    FILTER = "filter"
    COLUMNS = "columns"
    ZEBRA = "zebra"
    PAGER = "pager"
    OUTPUT = "output"
    STICKY_HEADERS = "stickyHeaders"
    RESIZABLE = "resizable"
    SAVE_SORT = "saveSort"
    UITHEME = "uitheme"

    def __str__(self) -> str:
        return self.value


DEFAULT_WIDGETS = (Widget.FILTER, Widget.COLUMNS, Widget.ZEBRA, Widget.PAGER, Widget.OUTPUT)


def normalize_widgets(widgets: Iterable[str | Widget]) -> list[str]:
    """
    Convert widget names to plain strings, dropping repeats.

    Args:
        widgets: Widget enum members or raw names

    Returns:
        List of widget names in first-seen order

    Example:
        >>> normalize_widgets([Widget.FILTER, "zebra", "filter"])
        ['filter', 'zebra']
    """
    names: list[str] = []
    for widget in widgets:
        name = widget.value if isinstance(widget, Widget) else str(widget)
        if name not in names:
            names.append(name)
    return names


@dataclass
class PopoverOptions:
    """
    Bootstrap popover configuration for a column header.

    Attributes:
        title: Popover title (falls back to the column name)
        content: Popover body (falls back to an empty string)
        is_html: Whether the popover content is HTML
        placement: Popover placement (falls back to the table default)
    """

    title: str | None = None
    content: str | None = None
    is_html: bool = False
    placement: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PopoverOptions":
        """
        Build options from a plain mapping.

        Accepts ``html`` as an alias of ``is_html``; unknown keys are ignored.

        Example:
            >>> PopoverOptions.from_dict({"title": "Type of Animal", "html": True}).is_html
            True
        """
        is_html = data.get("is_html", data.get("html", False))
        return cls(
            title=data.get("title"),
            content=data.get("content"),
            is_html=bool(is_html),
            placement=data.get("placement"),
        )

    def resolve(self, column: str, default_placement: str) -> dict[str, str]:
        """
        Resolve fallbacks for a column header.

        Empty title or content count as unset.

        Args:
            column: Column name used when no title is set
            default_placement: Placement used when none is set

        Returns:
            Dictionary with title, content, placement and html keys (unescaped)
        """
        return {
            "title": str(self.title) if self.title else column,
            "content": str(self.content) if self.content else "",
            "placement": self.placement if self.placement else default_placement,
            "html": "true" if self.is_html else "false",
        }


@dataclass
class TableOptions:
    """
    Rendering options for a table.

    Construction never fails: unknown widget names are kept as-is and popover
    entries given as dictionaries are converted to :class:`PopoverOptions`.

    Attributes:
        table_classes: CSS classes applied to the <table> element
        theme: tablesorter theme name
        widgets: Enabled widgets, in the order emitted to the script
        popover_default_placement: Placement for popovers that do not set one
        extra_buttons: HTML placed in the top-right button group
        hidden_columns: Columns kept in the data but not rendered
        column_popovers: Popover configuration keyed by column name
        escape_columns: Columns whose cell values are HTML-escaped
        resource_base_url: Base URL of the tablesorter asset files
    """

    table_classes: str = "table"
    theme: str = "bootstrap"
    widgets: list[str] = field(default_factory=lambda: normalize_widgets(DEFAULT_WIDGETS))
    popover_default_placement: str = DEFAULT_POPOVER_PLACEMENT
    extra_buttons: str = ""
    hidden_columns: set[str] = field(default_factory=set)
    column_popovers: dict[str, PopoverOptions] = field(default_factory=dict)
    escape_columns: set[str] = field(default_factory=set)
    resource_base_url: str = DEFAULT_RESOURCE_BASE_URL

    def __post_init__(self) -> None:
        self.widgets = normalize_widgets(self.widgets)
        self.hidden_columns = set(self.hidden_columns)
        self.escape_columns = set(self.escape_columns)
        self.column_popovers = {
            column: popover if isinstance(popover, PopoverOptions) else PopoverOptions.from_dict(popover)
            for column, popover in self.column_popovers.items()
        }

    def widget_names(self) -> list[str]:
        """
        Return the enabled widget names, normalized.

        Attributes may be reassigned after construction, so the widget list
        is normalized again on every read.
        """
        return normalize_widgets(self.widgets)

    def has_widget(self, widget: str | Widget) -> bool:
        """Return True if the widget is enabled."""
        name = widget.value if isinstance(widget, Widget) else widget
        return name in self.widget_names()

    def popover_for(self, column: str) -> PopoverOptions | None:
        """
        Return the popover configuration for a column, if any.

        Entries added as plain dictionaries after construction are converted
        the same way the constructor converts them.
        """
        popover = self.column_popovers.get(column)
        if popover is None or isinstance(popover, PopoverOptions):
            return popover
        return PopoverOptions.from_dict(popover)


class RenderedTable(NamedTuple):
    """Table markup and the id it was rendered with."""

    markup: str
    table_id: str

    def __str__(self) -> str:
        return self.markup
