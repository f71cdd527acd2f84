"""
Crop pattern (CDS) file reader and writer for StateCU.

StateCU crop pattern files list, for every year and CU location, the
total irrigated acreage followed by one line per crop::

    #> comments
          1950           1952 ACRE CYR
    1950 0100503                        100.000         2
         ALFALFA                            0.600    60.000
         GRASS_PASTURE                      0.400    40.000

Record lines starting in column 1 open a new year/location; lines
starting with a blank are crops of the open record. The number of crops
in the record line is informational only, crop lines are counted.

Three layouts are supported (see :mod:`pystatecu.io.format_detect`).
Version 10 and the oldest layout only carry crop fractions, so crop
areas are always computed as total x fraction for them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pystatecu.core.crop_pattern import CropPatternTS
from pystatecu.core.exceptions import ParseError
from pystatecu.core.series import MISSING, is_missing
from pystatecu.io.config import CropPatternReadConfig, CropPatternWriteConfig, ReadDataFrom
from pystatecu.io.fixed_format import (
    FileKind,
    FileLayout,
    RecordFormat,
    fixed_read,
    get_record_format,
    is_detail_line,
)
from pystatecu.io.format_detect import detect_layout, parse_header_line, scan_period
from pystatecu.io.statecu_reader import LineReader, ReaderState, parse_float, parse_int
from pystatecu.io.statecu_writer import open_for_write
from pystatecu.io.writer_base import TemplateWriter
from pystatecu.templates.engine import TemplateEngine
from pystatecu.templates.filters import fixed_float, fixed_int, fixed_text

logger = logging.getLogger(__name__)

DEFAULT_UNITS = "ACRE"


class _CropPatternParser:
    """Accumulates crop lines and flushes them into aggregates."""

    def __init__(
        self,
        filepath: Path,
        layout: FileLayout,
        read_areas: bool,
        auto_adjust: bool,
        year1_req: int | None,
        year2_req: int | None,
    ) -> None:
        self.filepath = filepath
        self.layout = layout
        self.read_areas = read_areas
        self.auto_adjust = auto_adjust
        self.year1_req = year1_req
        self.year2_req = year2_req
        self.primary_fmt: RecordFormat = get_record_format(FileKind.CROP_PATTERN, layout, "primary")
        self.detail_fmt: RecordFormat = get_record_format(
            FileKind.CROP_PATTERN, layout, "detail-area" if read_areas else "detail"
        )

        self.aggregates: list[CropPatternTS] = []
        self._by_id: dict[str, CropPatternTS] = {}
        self.file_year1 = 0
        self.year1 = 0
        self.year2 = 0
        self.units = DEFAULT_UNITS

        self._current: CropPatternTS | None = None
        self._year = 0
        self._total = MISSING
        self._names: list[str] = []
        self._fractions: list[float] = []
        self._areas: list[float] = []
        self._area_fallback_logged = False

    def set_period(self, year1: int, year2: int, units: str) -> None:
        self.file_year1 = year1
        self.year1 = self.year1_req if self.year1_req is not None else year1
        self.year2 = self.year2_req if self.year2_req is not None else year2
        self.units = units

    def _new_aggregate(self, location_id: str) -> CropPatternTS:
        cds = CropPatternTS(location_id, self.year1, self.year2, units=self.units, source=str(self.filepath))
        self.aggregates.append(cds)
        self._by_id[location_id.upper()] = cds
        return cds

    def _lookup(self, location_id: str, year: int) -> CropPatternTS:
        existing = self._by_id.get(location_id.upper())
        if year == self.file_year1:
            if existing is not None:
                logger.warning('CU Location "%s" is listed more than once in the first year.', location_id)
                return existing
            return self._new_aggregate(location_id)
        if existing is None:
            logger.warning(
                'CU Location "%s" found in year %d but was not listed in the first year.',
                location_id,
                year,
            )
            return self._new_aggregate(location_id)
        return existing

    def flush(self) -> None:
        """Store the accumulated crops for the open year/location."""
        if self._current is None:
            return
        if self.read_areas:
            self._current.set_pattern_by_areas(self._year, self._names, self._areas)
        else:
            self._current.set_pattern_by_fractions(self._year, self._total, self._names, self._fractions)
        self._names, self._fractions, self._areas = [], [], []

    def primary(self, line: str, line_number: int) -> None:
        self.flush()
        values = fixed_read(line, self.primary_fmt)
        self._year = parse_int(values["year"], "year", line_number, line)
        location_id = values["location"]
        self._total = parse_float(values["total"], "total area", line_number, line)
        self._current = self._lookup(location_id, self._year)

    def detail(self, line: str, line_number: int) -> None:
        if self._current is None:
            raise ParseError("Crop line found before any year/location record", line_number, line)
        values = fixed_read(line, self.detail_fmt)
        name = values["crop"]
        if self.auto_adjust:
            name = name.replace(".", "-")
        fraction = parse_float(values["fraction"], "crop fraction", line_number, line)
        self._names.append(name)
        self._fractions.append(fraction)
        if not self.read_areas:
            return
        if values["area"]:
            self._areas.append(parse_float(values["area"], "crop area", line_number, line))
            return
        # file written without the crop area column
        if not self._area_fallback_logged:
            logger.info(
                "No crop area on line %d of %s, using total and crop fractions where the area is blank",
                line_number,
                self.filepath,
            )
            self._area_fallback_logged = True
        if is_missing(self._total) or is_missing(fraction):
            self._areas.append(MISSING)
        else:
            self._areas.append(self._total * fraction)


def read_crop_pattern_file(
    filepath: Path | str,
    year1: int | None = None,
    year2: int | None = None,
    config: CropPatternReadConfig | None = None,
) -> list[CropPatternTS]:
    """Read a StateCU crop pattern (CDS) file.

    Args:
        filepath: Path to the CDS file.
        year1: First year to keep (default: from the file).
        year2: Last year to keep (default: from the file).
        config: Read options; defaults detect the layout and read crop areas.

    Returns:
        One CropPatternTS per CU location, in file order.

    Raises:
        FileNotFoundError: If file does not exist.
        FormatError: If the file has no data or an unreadable header.
        ParseError: If a record cannot be decoded. The locations read so
            far are attached as ``partial``.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Crop pattern file not found: {filepath}")
    config = config or CropPatternReadConfig()

    layout = detect_layout(filepath, FileKind.CROP_PATTERN, config.version)
    read_areas = config.read_data_from is ReadDataFrom.CROP_AREA
    if read_areas and layout is not FileLayout.VERSION_12:
        logger.info("Layout %s has no crop area column, using total and crop fractions", layout.value)
        read_areas = False

    parser = _CropPatternParser(filepath, layout, read_areas, config.auto_adjust, year1, year2)
    if layout is FileLayout.NO_PERIOD:
        file_year1, file_year2 = scan_period(filepath)
        parser.set_period(file_year1, file_year2, DEFAULT_UNITS)
        state = ReaderState.READING_RECORDS
    else:
        state = ReaderState.AWAITING_HEADER

    with open(filepath, errors="replace") as f:
        reader = LineReader(f)
        try:
            for line in reader:
                if state is ReaderState.AWAITING_HEADER:
                    header = parse_header_line(line, FileKind.CROP_PATTERN, layout)
                    parser.set_period(header.year1, header.year2, header.units or DEFAULT_UNITS)
                    logger.debug("Units from file are %r", header.units)
                    state = ReaderState.READING_RECORDS
                elif is_detail_line(line):
                    parser.detail(line, reader.line_number)
                else:
                    parser.primary(line, reader.line_number)
            parser.flush()
        except ParseError as exc:
            logger.warning("Error processing near line %d: %s", reader.line_number, reader.line)
            exc.partial = list(parser.aggregates)
            raise

    logger.info(
        "Read crop pattern: %d locations, %d-%d, layout %s from %s",
        len(parser.aggregates),
        parser.year1,
        parser.year2,
        layout.value,
        filepath,
    )
    return parser.aggregates


class CropPatternWriter(TemplateWriter):
    """Writer for StateCU crop pattern (CDS) files."""

    def __init__(
        self,
        config: CropPatternWriteConfig | None = None,
        template_engine: TemplateEngine | None = None,
        comments: Sequence[str] | None = None,
    ) -> None:
        super().__init__(template_engine, comments)
        self.config = config or CropPatternWriteConfig()

    @property
    def format(self) -> str:
        return "cds"

    def header_line(self, year1: int, year2: int, units: str) -> str:
        if self.config.is_version_10:
            return f"    1/{year1:4d}        12/{year2:4d} {fixed_text(units, 4, left=False)} CYR"
        return f"      {year1:4d}           {year2:4d} {fixed_text(units, 4)} CYR "

    def primary_line(self, year: int, cds: CropPatternTS) -> str:
        gap = " " * (8 if self.config.is_version_10 else 18)
        return (
            f"{year:4d} {fixed_text(cds.location_id, 12)}{gap}"
            f"{fixed_float(cds.get_total_area(year), 10, 3)}{fixed_int(cds.n_crops, 10)}"
        )

    def detail_line(self, year: int, cds: CropPatternTS, crop_name: str) -> str:
        width = 20 if self.config.is_version_10 else 30
        line = f"     {fixed_text(crop_name, width)}{fixed_float(cds.get_crop_area(crop_name, year, fraction=True), 10, 3)}"
        if self.config.write_crop_area:
            line += fixed_float(cds.get_crop_area(crop_name, year), 10, 3)
        return line

    def write(
        self,
        data: Sequence[CropPatternTS],
        filepath: Path | str,
        year1: int | None = None,
        year2: int | None = None,
    ) -> Path:
        """Write crop patterns to a CDS file.

        Every aggregate is refreshed first so stale totals are never
        written. The period and units come from the first aggregate unless
        *year1*/*year2* are given.
        """
        filepath = Path(filepath)
        for cds in data:
            cds.refresh()

        with open_for_write(filepath) as f:
            f.write(
                self.render_header(
                    "crop_pattern_header.txt",
                    version10=self.config.is_version_10,
                    write_crop_area=self.config.write_crop_area,
                    write_only_total=self.config.write_only_total,
                    crop_width=20 if self.config.is_version_10 else 30,
                )
            )
            if not data:
                return filepath
            first = data[0]
            year1 = first.year1 if year1 is None else year1
            year2 = first.year2 if year2 is None else year2
            f.write(self.header_line(year1, year2, first.units) + "\n")
            for year in range(year1, year2 + 1):
                for cds in data:
                    f.write(self.primary_line(year, cds) + "\n")
                    if self.config.write_only_total:
                        continue
                    for crop_name in cds.crop_names:
                        f.write(self.detail_line(year, cds, crop_name) + "\n")

        logger.info("Wrote crop pattern: %d locations, %d-%d to %s", len(data), year1, year2, filepath)
        return filepath


def write_crop_pattern_file(
    data: Sequence[CropPatternTS],
    filepath: Path | str,
    year1: int | None = None,
    year2: int | None = None,
    config: CropPatternWriteConfig | None = None,
    comments: Sequence[str] | None = None,
) -> Path:
    """Write a StateCU crop pattern (CDS) file.

    Args:
        data: Crop patterns to write.
        filepath: Output file path.
        year1: First year to write (default: first aggregate's period).
        year2: Last year to write (default: first aggregate's period).
        config: Write options (layout version, crop area column, totals only).
        comments: Extra comment lines for the header.

    Returns:
        Path to the written file.

    Raises:
        StateCUWriteError: If the file cannot be written.
    """
    return CropPatternWriter(config, comments=comments).write(data, filepath, year1, year2)
