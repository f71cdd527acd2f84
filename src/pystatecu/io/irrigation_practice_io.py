"""
Irrigation practice (IPY) file reader and writer for StateCU.

Each data line holds one year of one CU location::

    #> comments
          1950           1952       CYR
    1950 0100503       0.80  0.70  0.80      60      40      30      20      50000  2     150      100       50

Version 12 files give the four acreage parts (surface/groundwater by
flood/sprinkler); the surface and groundwater subtotals that follow them
are recomputed on read. Version 10 and older files only carry
efficiencies, pumping and mode; their groundwater and sprinkler acreage
columns are not used.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pystatecu.core.exceptions import ParseError
from pystatecu.core.irrigation_practice import ACREAGE_PART_NAMES, EFFICIENCY_NAMES, IrrigationPracticeTS
from pystatecu.core.series import MISSING, is_missing
from pystatecu.io.config import IrrigationPracticeReadConfig, IrrigationPracticeWriteConfig
from pystatecu.io.fixed_format import FileKind, FileLayout, fixed_read, get_record_format
from pystatecu.io.format_detect import detect_layout, parse_header_line, scan_period
from pystatecu.io.statecu_reader import LineReader, ReaderState, parse_float, parse_int
from pystatecu.io.statecu_writer import open_for_write
from pystatecu.io.writer_base import TemplateWriter
from pystatecu.templates.engine import TemplateEngine
from pystatecu.templates.filters import area_field, fixed_float, fixed_text, mode_field

logger = logging.getLogger(__name__)


def read_irrigation_practice_file(
    filepath: Path | str,
    year1: int | None = None,
    year2: int | None = None,
    config: IrrigationPracticeReadConfig | None = None,
) -> list[IrrigationPracticeTS]:
    """Read a StateCU irrigation practice (IPY) file.

    Args:
        filepath: Path to the IPY file.
        year1: First year to keep (default: from the file).
        year2: Last year to keep (default: from the file).
        config: Read options; the default detects the layout.

    Returns:
        One IrrigationPracticeTS per CU location, in file order.

    Raises:
        FileNotFoundError: If file does not exist.
        FormatError: If the file has no data or an unreadable header.
        ParseError: If a record cannot be decoded. The locations read so
            far are attached as ``partial``.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Irrigation practice file not found: {filepath}")
    config = config or IrrigationPracticeReadConfig()

    layout = detect_layout(filepath, FileKind.IRRIGATION_PRACTICE, config.version)
    fmt = get_record_format(FileKind.IRRIGATION_PRACTICE, layout, "primary")
    version = 12 if layout is FileLayout.VERSION_12 else 10

    aggregates: list[IrrigationPracticeTS] = []
    by_id: dict[str, IrrigationPracticeTS] = {}
    year_type = "CYR"
    file_year1 = period1 = period2 = 0
    not_in_first_year = 0

    def set_period(y1: int, y2: int) -> None:
        nonlocal file_year1, period1, period2
        file_year1 = y1
        period1 = y1 if year1 is None else year1
        period2 = y2 if year2 is None else year2

    def new_aggregate(location_id: str) -> IrrigationPracticeTS:
        ipy = IrrigationPracticeTS(
            location_id, period1, period2, year_type=year_type, source=str(filepath), version=version
        )
        aggregates.append(ipy)
        by_id[location_id.upper()] = ipy
        return ipy

    if layout is FileLayout.NO_PERIOD:
        set_period(*scan_period(filepath))
        state = ReaderState.READING_RECORDS
    else:
        state = ReaderState.AWAITING_HEADER

    with open(filepath, errors="replace") as f:
        reader = LineReader(f)
        try:
            for line in reader:
                if state is ReaderState.AWAITING_HEADER:
                    header = parse_header_line(line, FileKind.IRRIGATION_PRACTICE, layout)
                    year_type = header.year_type
                    set_period(header.year1, header.year2)
                    state = ReaderState.READING_RECORDS
                    continue

                values = fixed_read(line, fmt)
                year = parse_int(values["year"], "year", reader.line_number, line)
                location_id = values["location"]
                ipy = by_id.get(location_id.upper())
                if year == file_year1:
                    if ipy is not None:
                        logger.warning('CU Location "%s" is listed more than once in the first year.', location_id)
                    else:
                        ipy = new_aggregate(location_id)
                elif ipy is None:
                    logger.warning(
                        'CU Location "%s" found in year %d but was not listed in the first year.',
                        location_id,
                        year,
                    )
                    not_in_first_year += 1
                    ipy = new_aggregate(location_id)

                _store_record(ipy, year, values, layout, reader.line_number, line)
        except ParseError as exc:
            logger.warning("Error processing near line %d: %s", reader.line_number, reader.line)
            exc.partial = list(aggregates)
            raise

    if not_in_first_year:
        logger.warning(
            "%d CU Locations were not listed in the first year of %s. Data may be incomplete.",
            not_in_first_year,
            filepath,
        )
    logger.info(
        "Read irrigation practice: %d locations, %d-%d, layout %s from %s",
        len(aggregates),
        period1,
        period2,
        layout.value,
        filepath,
    )
    return aggregates


def _store_record(
    ipy: IrrigationPracticeTS,
    year: int,
    values: dict[str, str],
    layout: FileLayout,
    line_number: int,
    line: str,
) -> None:
    def number(name: str) -> float:
        return parse_float(values[name], name, line_number, line)

    for name in EFFICIENCY_NAMES:
        ipy.set(name, year, number(name))
    if layout is FileLayout.VERSION_12:
        for name in ACREAGE_PART_NAMES:
            ipy.set(name, year, number(name))
        ipy.refresh_acsw(year)
        ipy.refresh_acgw(year)
    ipy.set("mprate", year, number("mprate"))
    ipy.set("gmode", year, number("gmode"))
    if layout is not FileLayout.NO_PERIOD:
        ipy.set("tacre", year, number("tacre"))


def _sum_or_missing(a: float, b: float) -> float:
    if is_missing(a) or is_missing(b):
        return MISSING
    return a + b


class IrrigationPracticeWriter(TemplateWriter):
    """Writer for StateCU irrigation practice (IPY) files."""

    def __init__(
        self,
        config: IrrigationPracticeWriteConfig | None = None,
        template_engine: TemplateEngine | None = None,
        comments: Sequence[str] | None = None,
    ) -> None:
        super().__init__(template_engine, comments)
        self.config = config or IrrigationPracticeWriteConfig()

    @property
    def format(self) -> str:
        return "ipy"

    def header_line(self, year1: int, year2: int) -> str:
        if self.config.is_version_10:
            return f"    1/{year1:04d}        12/{year2:04d} ACRE  CYR"
        return f"      {year1:04d}           {year2:04d}       CYR"

    def _area(self, ipy: IrrigationPracticeTS, name: str, year: int) -> str:
        return area_field(ipy.get(name, year), 8, self.config.precision_for_area)

    def record_line(self, year: int, ipy: IrrigationPracticeTS) -> str:
        parts = [f"{year:4d} ", fixed_text(ipy.location_id, 12)]
        if self.config.is_version_10:
            parts.extend("  " + fixed_float(ipy.get(name, year), 4, 2) for name in EFFICIENCY_NAMES)
            gacre = _sum_or_missing(ipy.get("acgwfl", year), ipy.get("acgwspr", year))
            sacre = _sum_or_missing(ipy.get("acswspr", year), ipy.get("acgwspr", year))
            precision = self.config.precision_for_area
            parts.append(area_field(gacre, 8, precision))
            parts.append(area_field(sacre, 8, precision))
        else:
            parts.extend(fixed_float(ipy.get(name, year), 6, 2) for name in EFFICIENCY_NAMES)
            parts.extend(self._area(ipy, name, year) for name in ACREAGE_PART_NAMES)
        parts.append(fixed_float(ipy.get("mprate", year), 12, 0))
        parts.append(mode_field(ipy.get("gmode", year), 3))
        parts.append(self._area(ipy, "tacre", year))
        if not self.config.is_version_10:
            parts.append(self._area(ipy, "acsw", year))
            parts.append(self._area(ipy, "acgw", year))
        return "".join(parts)

    def write(
        self,
        data: Sequence[IrrigationPracticeTS],
        filepath: Path | str,
        year1: int | None = None,
        year2: int | None = None,
    ) -> Path:
        """Write irrigation practice data to an IPY file.

        Both supply subtotals of every aggregate are refreshed from their
        flood and sprinkler parts first so stale subtotals are never
        written. The period comes from the first aggregate unless
        *year1*/*year2* are given.
        """
        filepath = Path(filepath)
        for ipy in data:
            ipy.refresh()

        with open_for_write(filepath) as f:
            f.write(
                self.render_header(
                    "irrigation_practice_header.txt",
                    version10=self.config.is_version_10,
                    precision=self.config.precision_for_area,
                )
            )
            if not data:
                return filepath
            year1 = data[0].year1 if year1 is None else year1
            year2 = data[0].year2 if year2 is None else year2
            f.write(self.header_line(year1, year2) + "\n")
            for year in range(year1, year2 + 1):
                for ipy in data:
                    f.write(self.record_line(year, ipy) + "\n")

        logger.info("Wrote irrigation practice: %d locations, %d-%d to %s", len(data), year1, year2, filepath)
        return filepath


def write_irrigation_practice_file(
    data: Sequence[IrrigationPracticeTS],
    filepath: Path | str,
    year1: int | None = None,
    year2: int | None = None,
    config: IrrigationPracticeWriteConfig | None = None,
    comments: Sequence[str] | None = None,
) -> Path:
    """Write a StateCU irrigation practice (IPY) file.

    Args:
        data: Irrigation practice aggregates to write.
        filepath: Output file path.
        year1: First year to write (default: first aggregate's period).
        year2: Last year to write (default: first aggregate's period).
        config: Write options (layout version, acreage precision).
        comments: Extra comment lines for the header.

    Returns:
        Path to the written file.

    Raises:
        StateCUWriteError: If the file cannot be written.
    """
    return IrrigationPracticeWriter(config, comments=comments).write(data, filepath, year1, year2)
