"""
Custom Jinja2 filters for StateCU file formatting.

This module provides the formatting filters used by the header templates
and by the fixed-width record writers.
"""

from __future__ import annotations

from typing import Any

from pystatecu.core.series import is_missing

COMMENT_PREFIX = "#>"


# =============================================================================
# Number Formatting
# =============================================================================


def fixed_float(value: float, width: int = 10, decimals: int = 3) -> str:
    """
    Format a float right-aligned in a fixed-width field.

    If the value does not fit with *decimals* places it is written with no
    decimals. A value that still does not fit widens the field; digits are
    never dropped.

    Args:
        value: Float value to format
        width: Minimum field width
        decimals: Number of decimal places

    Returns:
        Formatted string of at least *width* characters
    """
    text = f"{float(value):{width}.{decimals}f}"
    if len(text) > width:
        text = f"{float(value):{width}.0f}"
    return text


def fixed_int(value: int, width: int = 10) -> str:
    """
    Format an integer right-aligned in a fixed-width field.

    Args:
        value: Integer value to format
        width: Total field width

    Returns:
        Formatted string of at least *width* characters
    """
    return f"{int(value):{width}d}"


def fixed_text(value: Any, width: int, left: bool = True) -> str:
    """Pad or truncate text to exactly *width* characters."""
    text = str(value)[:width]
    return f"{text:<{width}}" if left else f"{text:>{width}}"


def area_field(value: float, width: int = 8, precision: int = 0, big: float = 1000000.0) -> str:
    """
    Format an acreage value.

    Values at or above *big* are written with no decimals regardless of
    *precision* so they keep their integer part.
    """
    if value >= big:
        return fixed_float(value, width, 0)
    return fixed_float(value, width, precision)


def mode_field(value: float, width: int = 3) -> str:
    """Format the groundwater use mode code; missing is written blank."""
    if is_missing(value):
        return " " * width
    return fixed_int(int(value + 0.1), width)


# =============================================================================
# StateCU Formatting
# =============================================================================


def statecu_comment(text: str, prefix: str = COMMENT_PREFIX) -> str:
    """
    Prefix every line of *text* with the StateCU generated-comment marker.

    Args:
        text: One or more lines of comment text
        prefix: Comment marker

    Returns:
        Comment lines joined with newlines
    """
    lines = str(text).splitlines() or [""]
    return "\n".join(f"{prefix}  {line}".rstrip() if line else prefix for line in lines)


def register_all_filters(env) -> None:
    """
    Register all StateCU filters with a Jinja2 environment.

    Args:
        env: Jinja2 Environment instance
    """
    env.filters["fixed_float"] = fixed_float
    env.filters["fixed_int"] = fixed_int
    env.filters["fixed_text"] = fixed_text
    env.filters["statecu_comment"] = statecu_comment
