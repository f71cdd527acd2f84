"""Jinja2 templates and filters for StateCU file headers."""

from __future__ import annotations

from pystatecu.templates.engine import TemplateEngine

__all__ = ["TemplateEngine"]
