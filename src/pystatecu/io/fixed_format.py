"""
Fixed-column record layouts for StateCU files.

Column widths are data, not code: each layout is a :class:`RecordFormat`
made of :class:`FieldSpec` entries, and the readers look formats up in
:data:`RECORD_FORMATS` by file kind, layout and record type. Supporting
another dialect means adding a table entry.

Record types
------------
``header``
    The line stating the period (``year1``, ``year2``, units, year type).
``primary``
    First line of a year/location record (non-blank column 1).
``detail``
    Continuation line of a record (blank column 1), one per crop.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pystatecu.core.exceptions import FormatError


class FileKind(Enum):
    """StateCU file kinds handled by this package."""

    CROP_PATTERN = "cds"
    IRRIGATION_PRACTICE = "ipy"


class FileLayout(Enum):
    """Historical file layouts."""

    NO_PERIOD = "no-period"  # oldest, no header line with the period
    VERSION_10 = "10"
    VERSION_12 = "12"  # version 12 and newer

    @property
    def has_period_header(self) -> bool:
        return self is not FileLayout.NO_PERIOD


@dataclass(frozen=True)
class FieldSpec:
    """One fixed-width field. ``skip`` fields are consumed but not returned."""

    name: str
    width: int
    skip: bool = False


def _skip(width: int) -> FieldSpec:
    return FieldSpec("", width, skip=True)


@dataclass(frozen=True)
class RecordFormat:
    """An ordered list of fixed-width fields."""

    name: str
    fields: tuple[FieldSpec, ...]

    @property
    def width(self) -> int:
        return sum(f.width for f in self.fields)

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields if not f.skip]

    def has_field(self, name: str) -> bool:
        return name in self.names


def fixed_read(line: str, fmt: RecordFormat) -> dict[str, str]:
    """Split *line* into the fields of *fmt*.

    Fields beyond the end of the line are empty strings; text past the
    last field is ignored. Values are stripped.

    Example
    -------
    >>> fmt = RecordFormat("t", (FieldSpec("year", 4), _skip(1), FieldSpec("id", 12)))
    >>> fixed_read("1950 0100503     ", fmt)
    {'year': '1950', 'id': '0100503'}
    """
    values: dict[str, str] = {}
    pos = 0
    for spec in fmt.fields:
        chunk = line[pos : pos + spec.width]
        pos += spec.width
        if not spec.skip:
            values[spec.name] = chunk.strip()
    return values


def is_detail_line(line: str) -> bool:
    """A line starting with a blank continues the previous record."""
    return bool(line) and line[0] == " "


# =============================================================================
# Layout tables
# =============================================================================

_CDS_HEADER = RecordFormat(
    "cds-header",
    (_skip(6), FieldSpec("year1", 4), _skip(11), FieldSpec("year2", 4), FieldSpec("units", 5), FieldSpec("year_type", 5)),
)

_IPY_HEADER = RecordFormat(
    "ipy-header",
    (_skip(6), FieldSpec("year1", 4), _skip(11), FieldSpec("year2", 4)),
)

_CDS_PRIMARY_V12 = RecordFormat(
    "cds-primary-v12",
    (FieldSpec("year", 4), _skip(1), FieldSpec("location", 12), _skip(18), FieldSpec("total", 10), FieldSpec("ncrops", 10)),
)

_CDS_PRIMARY_V10 = RecordFormat(
    "cds-primary-v10",
    (FieldSpec("year", 4), _skip(1), FieldSpec("location", 12), _skip(8), FieldSpec("total", 10), FieldSpec("ncrops", 10)),
)

_CDS_PRIMARY_NO_PERIOD = RecordFormat(
    "cds-primary-no-period",
    (FieldSpec("year", 4), _skip(1), FieldSpec("location", 12), _skip(3), FieldSpec("total", 10)),
)

_CDS_DETAIL_V12_AREA = RecordFormat(
    "cds-detail-v12-area",
    (_skip(5), FieldSpec("crop", 30), FieldSpec("fraction", 10), FieldSpec("area", 10)),
)

_CDS_DETAIL_V12 = RecordFormat(
    "cds-detail-v12",
    (_skip(5), FieldSpec("crop", 30), FieldSpec("fraction", 10)),
)

_CDS_DETAIL_V10 = RecordFormat(
    "cds-detail-v10",
    (_skip(5), FieldSpec("crop", 20), FieldSpec("fraction", 10)),
)

_CDS_DETAIL_NO_PERIOD = RecordFormat(
    "cds-detail-no-period",
    (_skip(4), FieldSpec("crop", 20), FieldSpec("fraction", 10)),
)

_IPY_LEAD = (
    FieldSpec("year", 4),
    _skip(1),
    FieldSpec("location", 12),
    FieldSpec("ceff", 6),
    FieldSpec("feff", 6),
    FieldSpec("seff", 6),
)

_IPY_PRIMARY_V12 = RecordFormat(
    "ipy-primary-v12",
    _IPY_LEAD
    + (
        FieldSpec("acswfl", 8),
        FieldSpec("acswspr", 8),
        FieldSpec("acgwfl", 8),
        FieldSpec("acgwspr", 8),
        FieldSpec("mprate", 12),
        FieldSpec("gmode", 3),
        FieldSpec("tacre", 8),
    ),
)

_IPY_PRIMARY_NO_PERIOD = RecordFormat(
    "ipy-primary-no-period",
    _IPY_LEAD + (FieldSpec("gacre", 8), FieldSpec("sacre", 8), FieldSpec("mprate", 12), FieldSpec("gmode", 3)),
)

_IPY_PRIMARY_V10 = RecordFormat(
    "ipy-primary-v10",
    _IPY_PRIMARY_NO_PERIOD.fields + (FieldSpec("tacre", 8),),
)

# (kind, layout, record type) -> format
RECORD_FORMATS: dict[tuple[FileKind, FileLayout, str], RecordFormat] = {
    (FileKind.CROP_PATTERN, FileLayout.VERSION_12, "header"): _CDS_HEADER,
    (FileKind.CROP_PATTERN, FileLayout.VERSION_10, "header"): _CDS_HEADER,
    (FileKind.CROP_PATTERN, FileLayout.VERSION_12, "primary"): _CDS_PRIMARY_V12,
    (FileKind.CROP_PATTERN, FileLayout.VERSION_10, "primary"): _CDS_PRIMARY_V10,
    (FileKind.CROP_PATTERN, FileLayout.NO_PERIOD, "primary"): _CDS_PRIMARY_NO_PERIOD,
    (FileKind.CROP_PATTERN, FileLayout.VERSION_12, "detail-area"): _CDS_DETAIL_V12_AREA,
    (FileKind.CROP_PATTERN, FileLayout.VERSION_12, "detail"): _CDS_DETAIL_V12,
    (FileKind.CROP_PATTERN, FileLayout.VERSION_10, "detail"): _CDS_DETAIL_V10,
    (FileKind.CROP_PATTERN, FileLayout.NO_PERIOD, "detail"): _CDS_DETAIL_NO_PERIOD,
    (FileKind.IRRIGATION_PRACTICE, FileLayout.VERSION_12, "header"): _IPY_HEADER,
    (FileKind.IRRIGATION_PRACTICE, FileLayout.VERSION_10, "header"): _IPY_HEADER,
    (FileKind.IRRIGATION_PRACTICE, FileLayout.VERSION_12, "primary"): _IPY_PRIMARY_V12,
    (FileKind.IRRIGATION_PRACTICE, FileLayout.VERSION_10, "primary"): _IPY_PRIMARY_V10,
    (FileKind.IRRIGATION_PRACTICE, FileLayout.NO_PERIOD, "primary"): _IPY_PRIMARY_NO_PERIOD,
}


def get_record_format(kind: FileKind, layout: FileLayout, record: str) -> RecordFormat:
    """Look up the record format for a file kind and layout.

    Raises:
        FormatError: If the layout has no such record.
    """
    try:
        return RECORD_FORMATS[(kind, layout, record)]
    except KeyError:
        raise FormatError(f"No {record} record defined for {kind.name} layout {layout.value}") from None
