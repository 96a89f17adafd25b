"""
Table Renderer

Renders rows of key/value records into an HTML table wired to jQuery
tablesorter (sorting, filtering, paging, column visibility, export).

Rendering happens in two steps that share the table id explicitly:

    renderer = TableRenderer()
    renderer.load_array(rows)

    table = renderer.render_markup()          # RenderedTable(markup, table_id)
    script = renderer.render_script(table.table_id)

Cell values are inserted as raw HTML unless their column is listed in
``TableOptions.escape_columns``. Header labels and popover text are always
escaped.

Requires Bootstrap 3 and the tablesorter assets on the page (see
fasttable.framework.resources).
"""

import itertools
import time
from collections.abc import Iterable, Sequence
from typing import Any

from markupsafe import Markup, escape

from .core import get_logger, log_with_context
from .domain.table import RenderedTable, Row, TableOptions, Widget
from .framework.javascript import OUTPUT_FILENAME, PAGER_SIZE, get_table_javascript
from .framework.resources import get_resource_tags
from .template_engine import render_template
from .utils.error_handling import log_and_raise

logger = get_logger(__name__)

TABLE_ID_PREFIX = "viewTable"
PAGE_SIZES = (5, 10, 20, 30, "all")

_table_counter = itertools.count(1)


def generate_table_id(prefix: str = TABLE_ID_PREFIX) -> str:
    """
    Generate a table id unique within this process.

    Combines a nanosecond timestamp with a process-wide counter, so two calls
    never return the same id even within the same clock tick.

    Example:
        >>> generate_table_id().startswith("viewTable")
        True
    """
    return f"{prefix}{time.time_ns():x}{next(_table_counter)}"


class TableRenderer:
    """
    Holds table data and options and renders markup and script for it.

    Instances are mutable and meant for one render cycle; build one renderer
    per request rather than sharing one between threads.

    Attributes:
        options: Rendering options (classes, theme, widgets, popovers, ...)
    """

    def __init__(self, options: TableOptions | None = None):
        self.options = options if options is not None else TableOptions()
        self._columns: list[str] = []
        self._rows: list[Row] = []

    def get_columns(self) -> list[str]:
        """Return the column names in display order."""
        return self._columns

    def get_rows(self) -> list[Row]:
        """Return the loaded rows."""
        return self._rows

    def set_columns(self, columns: Iterable[str]) -> None:
        self._columns = list(columns)

    def set_rows(self, rows: Iterable[Row]) -> None:
        self._rows = list(rows)

    def append_row(self, row: Row) -> None:
        """Append a row to the end of the table."""
        self._rows.append(row)

    def load_array(self, rows: Sequence[Row]) -> None:
        """
        Populate the table from a sequence of rows.

        Columns are taken from the keys of the first row, in key order.
        Later rows are expected to share those keys.

        Args:
            rows: Row mappings, e.g. the result of a database query

        Raises:
            IndexError: If rows is empty
        """
        try:
            first_row = rows[0]
        except IndexError as e:
            log_and_raise(
                logger,
                e,
                context={"row_count": len(rows)},
                error_type="Column derivation from empty row sequence",
            )

        self.set_columns(first_row.keys())
        self.set_rows(rows)

    def visible_columns(self) -> list[str]:
        """Return the columns that are not hidden, in display order."""
        hidden = self.options.hidden_columns
        return [column for column in self._columns if column not in hidden]

    def _build_headers(self, columns: list[str]) -> list[dict[str, Any]]:
        default_placement = self.options.popover_default_placement

        headers = []
        for column in columns:
            popover = self.options.popover_for(column)
            headers.append(
                {
                    "name": column,
                    "popover": popover.resolve(column, default_placement) if popover is not None else None,
                }
            )
        return headers

    def _build_body(self, columns: list[str]) -> list[list[str | Markup]]:
        escaped = self.options.escape_columns

        body = []
        for row in self._rows:
            cells: list[str | Markup] = []
            for column in columns:
                value = row.get(column)
                text = "" if value is None else str(value)
                # Unescaped unless the column opted in to escaping
                cells.append(escape(text) if column in escaped else Markup(text))
            body.append(cells)
        return body

    def render_markup(self, table_id: str | None = None) -> RenderedTable:
        """
        Render the table fragment.

        Produces a container <div> holding the top-right button group (extra
        buttons and, with the "output" widget, the export menu) and the
        <table> with head, optional pager footer and body.

        Args:
            table_id: id for the <table>; a fresh unique id is generated when omitted

        Returns:
            RenderedTable with the markup and the id to pass to render_script()
        """
        if not table_id:
            table_id = generate_table_id()

        columns = self.visible_columns()

        markup = render_template(
            "fasttable/table.html",
            table_id=table_id,
            table_classes=self.options.table_classes,
            extra_buttons=Markup(self.options.extra_buttons),
            headers=self._build_headers(columns),
            rows=self._build_body(columns),
            include_output=self.options.has_widget(Widget.OUTPUT),
            include_pager=self.options.has_widget(Widget.PAGER),
            column_count=len(columns),
            page_sizes=PAGE_SIZES,
            default_page_size=PAGER_SIZE,
            output_filename=OUTPUT_FILENAME,
        )

        log_with_context(
            logger,
            "debug",
            "Rendered table markup",
            table_id=table_id,
            column_count=len(columns),
            row_count=len(self._rows),
        )

        return RenderedTable(markup=markup, table_id=table_id)

    def render_script(self, table_id: str) -> str:
        """
        Render the <script> block that activates tablesorter on the table.

        Args:
            table_id: The id returned by render_markup()

        Returns:
            Script configuring theme, widgets, and the pager/output/popover blocks
        """
        widgets = self.options.widget_names()
        script = get_table_javascript(
            table_id,
            theme=self.options.theme,
            widgets=widgets,
            include_popovers=bool(self.options.column_popovers),
        )

        log_with_context(logger, "debug", "Rendered table script", table_id=table_id, widgets=widgets)

        return script

    def render(self, table_id: str | None = None) -> tuple[RenderedTable, str]:
        """
        Render markup and script for the same table id.

        Returns:
            Tuple of (RenderedTable, script)
        """
        table = self.render_markup(table_id)
        return table, self.render_script(table.table_id)


def render_page(renderer: TableRenderer, title: str = "FastTable", table_id: str | None = None) -> str:
    """
    Render a standalone HTML page containing one table.

    The page loads jQuery and Bootstrap from public CDNs and the tablesorter
    assets from ``renderer.options.resource_base_url``.

    Args:
        renderer: Renderer holding the data
        title: Page title and heading
        table_id: Optional table id

    Returns:
        Complete HTML document
    """
    table, script = renderer.render(table_id)

    return render_template(
        "fasttable/page.html",
        title=title,
        resource_tags=Markup(get_resource_tags(renderer.options.resource_base_url)),
        table_markup=Markup(table.markup),
        table_script=Markup(script),
    )
