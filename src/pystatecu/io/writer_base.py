"""
Base writer class for StateCU file generation.

Writers render the documentation header through Jinja2 templates and
format the fixed-width data records directly.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pystatecu.templates.engine import TemplateEngine

logger = logging.getLogger(__name__)


class TemplateWriter(ABC):
    """
    Base class for template-based StateCU file writers.

    Uses Jinja2 templates for the ``#>`` documentation header and leaves
    the data records to subclasses.
    """

    def __init__(
        self,
        template_engine: TemplateEngine | None = None,
        comments: Sequence[str] | None = None,
    ) -> None:
        """
        Initialize the template writer.

        Args:
            template_engine: Optional TemplateEngine instance
            comments: Extra comment lines written at the top of the header
        """
        self._engine = template_engine or TemplateEngine()
        self.comments = list(comments or [])

    def render_header(self, template_name: str, **context: Any) -> str:
        """
        Render a template header.

        Args:
            template_name: Name of the template
            **context: Template context variables

        Returns:
            Rendered header string
        """
        context.setdefault("comments", self.comments)
        return self._engine.render_template(template_name, **context)

    def render_string(self, template_str: str, **context: Any) -> str:
        """
        Render a template from a string.

        Args:
            template_str: Template string
            **context: Template context variables

        Returns:
            Rendered string
        """
        return self._engine.render_string(template_str, **context)

    @abstractmethod
    def write(
        self,
        data: Sequence[Any],
        filepath: Path | str,
        year1: int | None = None,
        year2: int | None = None,
    ) -> Path:
        """
        Write data to a file.

        Args:
            data: Aggregates to write
            filepath: Output file path
            year1: First year to write (default: from the data)
            year2: Last year to write (default: from the data)

        Returns:
            Path to the written file
        """
        pass

    @property
    @abstractmethod
    def format(self) -> str:
        """Return the file format identifier (file tag)."""
        pass
