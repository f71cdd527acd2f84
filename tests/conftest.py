"""Pytest configuration and fixtures for pystatecu tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pystatecu.core.crop_pattern import CropPatternTS
from pystatecu.core.irrigation_practice import IrrigationPracticeTS


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "property: property-based tests using Hypothesis")


# =============================================================================
# Record builders
# =============================================================================


def cds_v12_record(year: int, loc: str, total: float, ncrops: int) -> str:
    return f"{year:4d} {loc:<12}{'':18}{total:10.3f}{ncrops:10d}"


def cds_v12_crop(crop: str, fraction: float, area: float | None = None) -> str:
    line = f"     {crop:<30}{fraction:10.3f}"
    if area is not None:
        line += f"{area:10.3f}"
    return line


def cds_v10_record(year: int, loc: str, total: float, ncrops: int) -> str:
    return f"{year:4d} {loc:<12}{'':8}{total:10.3f}{ncrops:10d}"


def cds_v10_crop(crop: str, fraction: float) -> str:
    return f"     {crop:<20}{fraction:10.3f}"


def cds_old_record(year: int, loc: str, total: float) -> str:
    return f"{year:4d} {loc:<12}{'':3}{total:10.3f}"


def cds_old_crop(crop: str, fraction: float) -> str:
    return f"    {crop:<20}{fraction:10.3f}"


def ipy_v12_record(
    year: int,
    loc: str,
    eff: tuple[float, float, float],
    parts: tuple[float, float, float, float],
    mprate: float,
    gmode: int,
    tacre: float,
) -> str:
    acsw = parts[0] + parts[1]
    acgw = parts[2] + parts[3]
    return (
        f"{year:4d} {loc:<12}"
        + "".join(f"{e:6.2f}" for e in eff)
        + "".join(f"{p:8.0f}" for p in parts)
        + f"{mprate:12.0f}{gmode:3d}{tacre:8.0f}{acsw:8.0f}{acgw:8.0f}"
    )


def ipy_v10_record(
    year: int,
    loc: str,
    eff: tuple[float, float, float],
    gacre: float,
    sacre: float,
    mprate: float,
    gmode: int,
    tacre: float | None = None,
) -> str:
    line = (
        f"{year:4d} {loc:<12}"
        + "".join(f"  {e:4.2f}" for e in eff)
        + f"{gacre:8.0f}{sacre:8.0f}{mprate:12.0f}{gmode:3d}"
    )
    if tacre is not None:
        line += f"{tacre:8.0f}"
    return line


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n")
    return path


# =============================================================================
# Sample files
# =============================================================================


@pytest.fixture
def cds_v12_file(tmp_path: Path) -> Path:
    """Version 12 crop pattern file with crop areas, two locations, 1950-1951."""
    return write_lines(
        tmp_path / "sample.cds",
        [
            "# Sample crop pattern file",
            "#>EndHeader",
            "      1950           1951 ACRE CYR",
            cds_v12_record(1950, "0100503", 100.0, 2),
            cds_v12_crop("ALFALFA", 0.6, 60.0),
            cds_v12_crop("GRASS_PASTURE", 0.4, 40.0),
            cds_v12_record(1950, "0100504", 50.0, 1),
            cds_v12_crop("CORN_GRAIN", 1.0, 50.0),
            cds_v12_record(1951, "0100503", 120.0, 2),
            cds_v12_crop("ALFALFA", 0.5, 60.0),
            cds_v12_crop("GRASS_PASTURE", 0.5, 60.0),
            cds_v12_record(1951, "0100504", 55.0, 1),
            cds_v12_crop("CORN_GRAIN", 1.0, 55.0),
        ],
    )


@pytest.fixture
def cds_v10_file(tmp_path: Path) -> Path:
    """Version 10 crop pattern file (fractions only)."""
    return write_lines(
        tmp_path / "sample_v10.cds",
        [
            "# Version 10 crop pattern file",
            "    1/1950        12/1951 ACRE CYR",
            cds_v10_record(1950, "0100503", 100.0, 2),
            cds_v10_crop("ALFALFA", 0.6),
            cds_v10_crop("GRASS_PASTURE", 0.4),
            cds_v10_record(1951, "0100503", 200.0, 2),
            cds_v10_crop("ALFALFA", 0.25),
            cds_v10_crop("GRASS_PASTURE", 0.75),
        ],
    )


@pytest.fixture
def cds_old_file(tmp_path: Path) -> Path:
    """Crop pattern file without a period header."""
    return write_lines(
        tmp_path / "sample_old.cds",
        [
            "# Old crop pattern file",
            cds_old_record(1950, "0100503", 100.0),
            cds_old_crop("ALFALFA", 0.5),
            cds_old_crop("GRASS.PASTURE", 0.5),
            cds_old_record(1951, "0100503", 80.0),
            cds_old_crop("ALFALFA", 0.25),
            cds_old_crop("GRASS.PASTURE", 0.75),
            cds_old_record(1952, "0100503", 40.0),
            cds_old_crop("ALFALFA", 1.0),
            cds_old_crop("GRASS.PASTURE", 0.0),
        ],
    )


@pytest.fixture
def ipy_v12_file(tmp_path: Path) -> Path:
    """Version 12 irrigation practice file, two locations, 1950-1951."""
    return write_lines(
        tmp_path / "sample.ipy",
        [
            "# Sample irrigation practice file",
            "#>EndHeader",
            "      1950           1951       CYR",
            ipy_v12_record(1950, "0100503", (0.6, 0.5, 0.75), (60, 40, 30, 20), 5000, 2, 150),
            ipy_v12_record(1950, "0100504", (0.8, 0.7, 0.8), (0, 0, 10, 40), 800, 3, 50),
            ipy_v12_record(1951, "0100503", (0.6, 0.5, 0.75), (50, 50, 25, 25), 5000, 1, 150),
            ipy_v12_record(1951, "0100504", (0.8, 0.7, 0.8), (0, 0, 20, 30), 800, 3, 50),
        ],
    )


@pytest.fixture
def ipy_v10_file(tmp_path: Path) -> Path:
    """Version 10 irrigation practice file."""
    return write_lines(
        tmp_path / "sample_v10.ipy",
        [
            "    1/1950        12/1951 ACRE  CYR",
            ipy_v10_record(1950, "0100503", (0.6, 0.5, 0.75), 50, 60, 5000, 2, 150),
            ipy_v10_record(1951, "0100503", (0.65, 0.55, 0.7), 40, 30, 4000, 1, 140),
        ],
    )


@pytest.fixture
def ipy_old_file(tmp_path: Path) -> Path:
    """Irrigation practice file without a period header or total acres."""
    return write_lines(
        tmp_path / "sample_old.ipy",
        [
            ipy_v10_record(1950, "0100503", (0.6, 0.5, 0.75), 50, 60, 5000, 2),
            ipy_v10_record(1951, "0100503", (0.65, 0.55, 0.7), 40, 30, 4000, 1),
            ipy_v10_record(1952, "0100503", (0.7, 0.6, 0.8), 30, 20, 3000, 3),
        ],
    )


# =============================================================================
# In-memory aggregates
# =============================================================================


@pytest.fixture
def crop_pattern() -> CropPatternTS:
    """Crop pattern with two crops over 1950-1952."""
    cds = CropPatternTS("0100503", 1950, 1952)
    cds.set_pattern_by_areas(1950, ["ALFALFA", "CORN_GRAIN"], [60.0, 40.0])
    cds.set_pattern_by_areas(1951, ["ALFALFA", "CORN_GRAIN"], [30.0, 70.0])
    cds.set_pattern_by_areas(1952, ["ALFALFA", "CORN_GRAIN"], [0.0, 0.0])
    return cds


@pytest.fixture
def irrigation_practice() -> IrrigationPracticeTS:
    """Consistent irrigation practice for 1950-1951."""
    ipy = IrrigationPracticeTS("0100503", 1950, 1951)
    for year in (1950, 1951):
        ipy.set("acswfl", year, 60.0)
        ipy.set("acswspr", year, 40.0)
        ipy.set("acgwfl", year, 30.0)
        ipy.set("acgwspr", year, 20.0)
        ipy.set("tacre", year, 150.0)
        ipy.set("mprate", year, 5000.0)
    ipy.refresh()
    return ipy
