"""
StateCU file line-reading utilities.

StateCU text files use ``#`` in column 1 for comments (``#>`` for
comments generated by the writer) and fixed columns for data. Every
``io/`` reader should import helpers from this module rather than
defining its own copy.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import TextIO

from pystatecu.core.exceptions import ParseError
from pystatecu.core.series import MISSING

COMMENT_CHAR = "#"
END_HEADER = "#>EndHeader"


class ReaderState(Enum):
    """States of a StateCU record reader."""

    AWAITING_HEADER = "awaiting-header"
    READING_RECORDS = "reading-records"


def is_comment_line(line: str) -> bool:
    """Check if line is a StateCU comment or blank.

    Only ``#`` in **column 1** marks a comment. Blank lines are skipped
    like comments.
    """
    if not line or not line.strip():
        return True
    return line[0] == COMMENT_CHAR


def clean_line(line: str) -> str:
    """Remove the line terminator, keeping leading columns intact."""
    return line.rstrip("\r\n")


class LineReader:
    """Iterate over the data lines of a file, tracking line numbers.

    Comments and blank lines are skipped. ``line_number`` is the
    1-based number of the last line returned.

    Example
    -------
    >>> import io
    >>> reader = LineReader(io.StringIO("# comment\\n1950 A\\n"))
    >>> next(iter(reader))
    '1950 A'
    >>> reader.line_number
    2
    """

    def __init__(self, f: TextIO) -> None:
        self._f = f
        self.line_number = 0
        self.line = ""

    def __iter__(self) -> Iterator[str]:
        for raw in self._f:
            self.line_number += 1
            if is_comment_line(raw):
                continue
            self.line = clean_line(raw)
            yield self.line


def next_data_line(f: TextIO) -> str:
    """Read the next non-comment line, or ``""`` at end of file."""
    for line in f:
        if is_comment_line(line):
            continue
        return clean_line(line)
    return ""


def read_header_comments(filepath: Path | str) -> list[str]:
    """Return the comment lines before the first data line."""
    comments = []
    with open(filepath, errors="replace") as f:
        for line in f:
            if not line.strip():
                continue
            if line[0] != COMMENT_CHAR:
                break
            comments.append(clean_line(line))
    return comments


def parse_int(value: str, context: str = "", line_number: int | None = None, line: str | None = None) -> int:
    """Parse a fixed-column field as an integer.

    Parameters
    ----------
    value : str
        The field text.
    context : str
        Description of what was being parsed (for error messages).
    line_number : int, optional
        Line number in the source file (for error messages).
    line : str, optional
        Raw line, kept on the error.
    """
    try:
        return int(value.strip())
    except (ValueError, TypeError, AttributeError) as exc:
        msg = f"Expected integer for {context}, got {value!r}" if context else f"Expected integer, got {value!r}"
        raise ParseError(msg, line_number=line_number, line=line) from exc


def parse_float(
    value: str, context: str = "", line_number: int | None = None, line: str | None = None
) -> float:
    """Parse a fixed-column field as a float.

    A blank field gives ``MISSING``.

    Parameters
    ----------
    value : str
        The field text.
    context : str
        Description of what was being parsed (for error messages).
    line_number : int, optional
        Line number in the source file (for error messages).
    line : str, optional
        Raw line, kept on the error.
    """
    text = value.strip() if isinstance(value, str) else value
    if text == "":
        return MISSING
    try:
        return float(text)
    except (ValueError, TypeError) as exc:
        msg = f"Expected number for {context}, got {value!r}" if context else f"Expected number, got {value!r}"
        raise ParseError(msg, line_number=line_number, line=line) from exc
