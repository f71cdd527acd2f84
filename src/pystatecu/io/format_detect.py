"""
Layout detection for StateCU crop pattern and irrigation practice files.

Three layouts exist and files do not say which one they use:

* **no period** (oldest): no header line, the period is inferred by
  scanning the years at the start and end of the file;
* **version 10**: header line ``    1/YYYY        12/YYYY UNITCYR``;
* **version 12+**: header line starting with six spaces.

The header line is recognised by two leading blanks; data lines start
with the year in column 1. Version 10 and 12 are told apart by the first
data record after the header. An explicit version always wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pystatecu.core.exceptions import FormatError
from pystatecu.io.fixed_format import FileKind, FileLayout, fixed_read, get_record_format
from pystatecu.io.statecu_reader import next_data_line

logger = logging.getLogger(__name__)

# Bytes read at each end of a file without a period header.
SCAN_WINDOW = 5000
# Larger year tokens are not plausible years.
MAX_REASONABLE_YEAR = 2050
# Version 12 crop pattern records are about 55 characters, version 10 about 45.
CDS_VERSION_10_MAX_LENGTH = 50
# Version 12 irrigation practice records have at least 12 tokens.
IPY_VERSION_12_MIN_TOKENS = 12


@dataclass
class HeaderInfo:
    """Values from the header line of a file."""

    year1: int
    year2: int
    units: str = ""
    year_type: str = "CYR"


def first_data_line(filepath: Path | str) -> str:
    """Return the first non-comment, non-blank line.

    Raises:
        FormatError: If the file has no such line.
    """
    with open(filepath, errors="replace") as f:
        line = next_data_line(f)
    if not line:
        raise FormatError(f"No data found in file: {filepath}", path=filepath)
    return line


def is_period_header_line(line: str) -> bool:
    """Header lines begin with two blanks; data lines begin with the year."""
    return len(line) > 2 and line[:2] == "  "


def is_period_in_header(filepath: Path | str) -> bool:
    """Return True if the file states its period in a header line."""
    in_header = is_period_header_line(first_data_line(filepath))
    logger.debug("Period in header for %s: %s", filepath, in_header)
    return in_header


def is_version_10(filepath: Path | str, kind: FileKind) -> bool:
    """Return True if a file with a period header uses the version 10 records.

    The first data record after the header is checked: crop pattern
    records shorter than 50 characters, or irrigation practice records with
    fewer than 12 tokens, are version 10.
    """
    with open(filepath, errors="replace") as f:
        header = next_data_line(f)
        if not header:
            raise FormatError(f"No data found in file: {filepath}", path=filepath)
        line = next_data_line(f) if is_period_header_line(header) else header

    if kind is FileKind.CROP_PATTERN:
        return len(line) < CDS_VERSION_10_MAX_LENGTH
    return len(line.split()) < IPY_VERSION_12_MIN_TOKENS


def detect_layout(filepath: Path | str, kind: FileKind, version: str | None = None) -> FileLayout:
    """Classify a file into one of the known layouts.

    Args:
        filepath: File to inspect.
        kind: Crop pattern or irrigation practice.
        version: ``"10"`` forces the version 10 layout for files with a
            period header.

    Returns:
        The detected layout.

    Raises:
        FormatError: If the file contains no data lines.
    """
    if not is_period_in_header(filepath):
        layout = FileLayout.NO_PERIOD
    elif version is not None and version.strip() == "10":
        layout = FileLayout.VERSION_10
    elif is_version_10(filepath, kind):
        layout = FileLayout.VERSION_10
    else:
        layout = FileLayout.VERSION_12
    logger.debug("Detected %s layout %s for %s", kind.name, layout.value, filepath)
    return layout


def _year_token(line: str) -> int | None:
    stripped = line.strip()
    if not stripped or stripped[0] == "#" or line[0] == " ":
        return None
    token = stripped.split()[0]
    if not token.isdigit():
        return None
    year = int(token)
    if year >= MAX_REASONABLE_YEAR:
        return None
    return year


def scan_period(filepath: Path | str) -> tuple[int, int]:
    """Infer the period of a file that has no period header.

    The first plausible year in the first 5000 bytes is the start year,
    the last one in the final 5000 bytes is the end year.

    Raises:
        FormatError: If no year can be found.
    """
    filepath = Path(filepath)
    with open(filepath, "rb") as f:
        head = f.read(SCAN_WINDOW)
        f.seek(0, 2)
        length = f.tell()
        truncated = length > SCAN_WINDOW
        f.seek(max(0, length - SCAN_WINDOW))
        tail = f.read(SCAN_WINDOW)

    year1 = None
    for line in head.decode(errors="replace").splitlines():
        year1 = _year_token(line)
        if year1 is not None:
            break

    tail_lines = tail.decode(errors="replace").splitlines()
    if truncated:
        # The first line of a truncated window is probably partial.
        tail_lines = tail_lines[1:]
    year2 = None
    for line in tail_lines:
        year = _year_token(line)
        if year is not None:
            year2 = year

    if year1 is None or year2 is None:
        raise FormatError(f"Unable to determine period from data in file: {filepath}", path=filepath)
    logger.info("No period in file header. Period determined from data to be %d to %d", year1, year2)
    return year1, year2


def parse_header_line(line: str, kind: FileKind, layout: FileLayout = FileLayout.VERSION_12) -> HeaderInfo:
    """Parse the header line stating the period.

    Lines with six leading blanks are the newest dialect and are split on
    whitespace; older headers are read by fixed columns.

    Raises:
        FormatError: If the years cannot be read.
    """
    if line.startswith("      "):
        tokens = line.split()
        try:
            year1, year2 = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError) as exc:
            raise FormatError(f"Invalid header line: {line!r}") from exc
        units = tokens[2] if len(tokens) > 3 else ""
        year_type = tokens[-1] if len(tokens) > 2 else "CYR"
        return HeaderInfo(year1, year2, units=units, year_type=year_type)

    if layout is FileLayout.NO_PERIOD:
        layout = FileLayout.VERSION_10
    values = fixed_read(line, get_record_format(kind, layout, "header"))
    try:
        year1, year2 = int(values["year1"]), int(values["year2"])
    except ValueError as exc:
        raise FormatError(f"Invalid header line: {line!r}") from exc
    return HeaderInfo(
        year1,
        year2,
        units=values.get("units", ""),
        year_type=values.get("year_type") or "CYR",
    )

