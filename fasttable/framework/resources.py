"""
Asset Tags

Stylesheet and script tags for the tablesorter files the rendered markup
depends on. The files themselves are not bundled; ``base_url`` points at
wherever the page serves them from.
"""

from ..domain.table import DEFAULT_RESOURCE_BASE_URL

STYLESHEETS = (
    "css/theme.bootstrap.css",
    "css/jquery.tablesorter.pager.css",
)

SCRIPTS = (
    "js/jquery.tablesorter.min.js",
    "js/jquery.tablesorter.widgets.min.js",
    "js/jquery.tablesorter.pager.min.js",
    "js/parser-input-select.min.js",
    "js/widget-output.min.js",
)


def get_resource_tags(base_url: str = DEFAULT_RESOURCE_BASE_URL) -> str:
    """
    Returns <link> and <script> tags for the tablesorter assets.

    jQuery and Bootstrap must be loaded before these tags.

    Args:
        base_url: URL prefix of the asset directory (default: resources)

    Returns:
        String of HTML tags, one per line

    Example:
        >>> print(get_resource_tags("/static")[:60])
        <link href="/static/css/theme.bootstrap.css" rel="styleshee
    """
    prefix = base_url.rstrip("/")

    tags = [f'<link href="{prefix}/{path}" rel="stylesheet" />' for path in STYLESHEETS]
    tags.extend(f'<script src="{prefix}/{path}"></script>' for path in SCRIPTS)

    return "\n".join(tags)
