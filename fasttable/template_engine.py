"""
Jinja2 Template Engine for Safe HTML Generation

Provides centralized template loading and rendering with automatic XSS
protection for the table markup templates shipped in ``fasttable/templates``.
Values that must reach the page unescaped are passed in as
``markupsafe.Markup``.

Usage:
    from fasttable.template_engine import render_template

    html = render_template("fasttable/pager.html", column_count=3)
"""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


class TemplateEngine:
    """
    Centralized template engine with security features.
    """

    def __init__(self, template_dir: Path | str | None = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing templates (default: fasttable/templates)
        """
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template with given context.

        Args:
            template_name: Name of template file (relative to templates dir)
            **context: Template variables

        Returns:
            Rendered HTML string

        Raises:
            jinja2.TemplateNotFound: If the template does not exist
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


_engine: TemplateEngine | None = None


def get_template_engine() -> TemplateEngine:
    """
    Get the global template engine instance (singleton pattern).

    Returns:
        TemplateEngine: The template engine
    """
    global _engine
    if _engine is None:
        _engine = TemplateEngine()
    return _engine


def render_template(template_name: str, **context: Any) -> str:
    """
    Convenience function to render a template with the global engine.

    Args:
        template_name: Name of template file
        **context: Template variables

    Returns:
        Rendered HTML string
    """
    engine = get_template_engine()
    return engine.render(template_name, **context)
