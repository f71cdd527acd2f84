"""
Jinja2 template engine for StateCU file generation.

Jinja2 renders the documentation headers; the fixed-width data records
are formatted directly by the writers.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, select_autoescape

from pystatecu.templates.headers import HEADER_TEMPLATES


class TemplateEngine:
    """
    Template engine for StateCU file headers.

    Built-in header templates are always available; a custom template
    directory can override them by file name.
    """

    def __init__(self, template_dir: Path | str | None = None) -> None:
        """
        Initialize the template engine.

        Args:
            template_dir: Custom template directory (optional), searched
                before the built-in templates
        """
        loaders = []
        if template_dir:
            loaders.append(FileSystemLoader(str(template_dir)))
        loaders.append(DictLoader(HEADER_TEMPLATES))

        self.env = Environment(
            loader=ChoiceLoader(loaders) if len(loaders) > 1 else loaders[0],
            autoescape=select_autoescape(default=False, default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._register_filters()

    def _register_filters(self) -> None:
        """Register custom Jinja2 filters for StateCU formatting."""
        from pystatecu.templates.filters import register_all_filters

        register_all_filters(self.env)

    def render_string(self, template_str: str, **context) -> str:
        """
        Render a template from a string.

        Args:
            template_str: Template string
            **context: Template context variables

        Returns:
            Rendered string
        """
        template = self.env.from_string(template_str)
        return template.render(**context)

    def render_template(self, template_name: str, **context) -> str:
        """
        Render a named template.

        Args:
            template_name: Template name, e.g. ``crop_pattern_header.txt``
            **context: Template context variables

        Returns:
            Rendered string
        """
        template = self.env.get_template(template_name)
        return template.render(**context)
