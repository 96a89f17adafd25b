"""
Render a JSON file of rows into a standalone tablesorter page.

Usage:
    fasttable rows.json --hide id --output table.html
    cat rows.json | fasttable --widgets filter,zebra,pager --title "Animals"
    fasttable rows.json --log-file logs/fasttable.log --json-logs

The input must be a JSON array of objects; the keys of the first object
become the columns.
"""

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigurationError, get_config, parse_widget_list
from .core import get_logger, setup_logging
from .renderer import TableRenderer, render_page
from .utils.error_handling import log_and_return_default

logger = get_logger(__name__)


class InputError(Exception):
    """Raised when the row input cannot be used to build a table."""

    pass


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Render JSON rows as a sortable, filterable HTML table")

    parser.add_argument("input", nargs="?", help="JSON file with an array of row objects (default: stdin)")

    parser.add_argument("--output", "-o", help="Write the page to this file (default: stdout)")

    parser.add_argument("--title", default="FastTable", help="Page title (default: FastTable)")

    parser.add_argument("--table-id", help="id for the <table> element (default: generated)")

    parser.add_argument(
        "--hide", action="append", default=[], metavar="COLUMN", help="Column to hide (repeatable)"
    )

    parser.add_argument("--widgets", help="Comma separated widget list (default: from configuration)")

    parser.add_argument("--theme", help="tablesorter theme (default: from configuration)")

    parser.add_argument("--log-level", help="Logging level (default: from configuration)")

    parser.add_argument("--log-file", help="Also write JSON logs to this file")

    parser.add_argument("--json-logs", action="store_true", help="Emit console logs as JSON")

    return parser.parse_args(argv)


def configure_logging(args: argparse.Namespace, default_level: str) -> None:
    """Apply the logging options from the command line."""
    setup_logging(
        level=args.log_level or default_level,
        log_file=Path(args.log_file) if args.log_file else None,
        json_output=args.json_logs,
    )


def load_rows(source: str | None) -> list[dict]:
    """
    Read rows from a JSON file, or stdin when source is None or "-".

    Raises:
        InputError: If the input is unreadable, not a JSON array of objects, or empty
    """
    try:
        if source is None or source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"cannot read {source}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"invalid JSON: {e}") from e

    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise InputError("input must be a JSON array of objects")

    if not data:
        raise InputError("input contains no rows")

    return data


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the ``fasttable`` command.

    Returns:
        Process exit code (0 on success, 1 on invalid input or configuration)
    """
    args = parse_arguments(argv)

    try:
        config = get_config()
    except ConfigurationError as e:
        configure_logging(args, "INFO")
        return log_and_return_default(logger, e, {}, default_value=1, error_type="Configuration")

    configure_logging(args, config.log_level)

    options = config.to_table_options()
    options.hidden_columns.update(args.hide)
    if args.widgets is not None:
        options.widgets = parse_widget_list(args.widgets)
    if args.theme:
        options.theme = args.theme

    try:
        rows = load_rows(args.input)
    except InputError as e:
        return log_and_return_default(logger, e, {"input": args.input}, default_value=1, error_type="Input loading")

    renderer = TableRenderer(options)
    renderer.load_array(rows)

    html = render_page(renderer, title=args.title, table_id=args.table_id)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.info("Table page written", extra={"output": str(output_path), "rows": len(rows)})
    else:
        sys.stdout.write(html)

    return 0


if __name__ == "__main__":
    sys.exit(main())
