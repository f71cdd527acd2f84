"""
Consistency checks for StateCU aggregates.

Validation is a separate pass from reading and reconciliation: each
function returns a list of :class:`ValidationProblem` and never raises,
so callers can report every problem in a data set at once.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pystatecu.core import crop_pattern as cds_mod
from pystatecu.core.crop_pattern import CropPatternTS
from pystatecu.core.irrigation_practice import ACREAGE_PART_NAMES, IrrigationPracticeTS

if TYPE_CHECKING:
    from pystatecu.core.dataset import StateCUDataSet


@dataclass(frozen=True)
class ValidationProblem:
    """A single validation problem.

    Attributes:
        location_id: CU location the problem belongs to.
        message: What is wrong.
        recommendation: How to fix it.
    """

    location_id: str
    message: str
    recommendation: str = ""

    def __str__(self) -> str:
        if self.recommendation:
            return f"{self.message} {self.recommendation}"
        return self.message


_EFFICIENCY_LABELS = {
    "ceff": "maximum surface efficiency",
    "feff": "maximum flood efficiency",
    "seff": "maximum sprinkler efficiency",
}

_PART_LABELS = {
    "acswfl": "acres surface flood",
    "acswspr": "acres surface sprinkler",
    "acgwfl": "acres groundwater flood",
    "acgwspr": "acres groundwater sprinkler",
}


def _valid_nonnegative(value: float) -> bool:
    # The missing sentinel is negative, so missing values fail too.
    return value >= 0.0


def validate_crop_pattern(cds: CropPatternTS) -> list[ValidationProblem]:
    """Check crop pattern totals and crop areas are non-negative."""
    problems: list[ValidationProblem] = []
    loc = cds.location_id
    if cds.year1 <= 0 or cds.year2 <= 0:
        problems.append(
            ValidationProblem(
                loc,
                f'Location "{loc}" period for crop pattern time series is not set.',
                "Verify that the time series are properly defined.",
            )
        )
        return problems

    for year in range(cds.year1, cds.year2 + 1):
        total = cds.get_total_area(year)
        if not _valid_nonnegative(total):
            problems.append(
                ValidationProblem(
                    loc,
                    f'Location "{loc}" year {year} total area ({total}) is invalid.',
                    "Verify that crop areas are >= 0 for year.",
                )
            )
        for crop in cds.crop_names:
            area = cds.get_crop_area(crop, year)
            if not _valid_nonnegative(area):
                problems.append(
                    ValidationProblem(
                        loc,
                        f'Location "{loc}" crop "{crop}" year {year} area ({area}) is invalid.',
                        "Verify that crop area is >= 0 for year.",
                    )
                )
    return problems


def validate_irrigation_practice(
    ipy: IrrigationPracticeTS,
    crop_patterns: Sequence[CropPatternTS] | None = None,
) -> list[ValidationProblem]:
    """Check irrigation practice values for one location.

    Parameters
    ----------
    ipy : IrrigationPracticeTS
        Location to check.
    crop_patterns : sequence of CropPatternTS, optional
        If given and it contains the same location, its total area must
        match the irrigation practice total acres.

    Notes
    -----
    Totals are compared after formatting to one decimal place, the
    precision the files are written with.
    """
    problems: list[ValidationProblem] = []
    loc = ipy.location_id
    if ipy.year1 <= 0 or ipy.year2 <= 0:
        problems.append(
            ValidationProblem(
                loc,
                f'Location "{loc}" period for irrigation practice time series is not set.',
                "Verify that the time series are properly defined.",
            )
        )
        return problems

    cds = cds_mod.find_location(crop_patterns, loc) if crop_patterns else None

    def add(year: int, what: str, recommendation: str) -> None:
        problems.append(ValidationProblem(loc, f'Location "{loc}" year {year} {what}', recommendation))

    for year in range(ipy.year1, ipy.year2 + 1):
        for name, label in _EFFICIENCY_LABELS.items():
            eff = ipy.get(name, year)
            if not (0.0 <= eff <= 1.0):
                add(year, f"{label} ({eff:.2f}) is invalid.", "Verify that the efficiency is in range 0 to 1.")

        part_problem = False
        for name in ACREAGE_PART_NAMES:
            value = ipy.get(name, year)
            if not _valid_nonnegative(value):
                add(year, f"{_PART_LABELS[name]} ({value:.1f}) is invalid.", "Verify that the acres value is >= 0.")
                part_problem = True

        mprate = ipy.get("mprate", year)
        if not _valid_nonnegative(mprate):
            add(
                year,
                f"maximum pumping rate ({mprate:.1f}) is invalid.",
                "Verify that the maximum pumping value is >= 0.",
            )

        gmode = int(ipy.get("gmode", year) + 0.01)
        if not (1 <= gmode <= 3):
            add(year, f"groundwater mode ({gmode}) is invalid.", "Verify that the groundwater mode is in range 1 to 3.")

        tacre = ipy.get("tacre", year)
        if not _valid_nonnegative(tacre):
            add(year, f"total acres ({tacre:.1f}) is invalid.", "Verify that the total acres value is >= 0.")
        tacre_formatted = f"{tacre:.1f}"

        if not part_problem:
            part_sum = sum(ipy.get(name, year) for name in ACREAGE_PART_NAMES)
            sum_formatted = f"{part_sum:.1f}"
            if sum_formatted != tacre_formatted:
                add(
                    year,
                    f"total acres ({tacre_formatted}) does not match total of acreage parts ({sum_formatted}).",
                    "Verify that commands to set parts are consistent with total.",
                )

        if cds is not None:
            cds_formatted = f"{cds.get_total_area(year):.1f}"
            if cds_formatted != tacre_formatted:
                add(
                    year,
                    f"total acres ({tacre_formatted}) does not match crop pattern time series "
                    f"total acreage ({cds_formatted}).",
                    "Verify that irrigation practice total acreage is set to the crop pattern "
                    "total before other acreage is adjusted.",
                )
    return problems


def validate_dataset(dataset: StateCUDataSet) -> list[ValidationProblem]:
    """Validate every crop pattern and irrigation practice location in *dataset*."""
    from pystatecu.core.components import ComponentType

    problems: list[ValidationProblem] = []
    crop_patterns = dataset.get(ComponentType.CROP_PATTERN_TS_YEARLY)
    for cds in crop_patterns:
        problems.extend(validate_crop_pattern(cds))
    for ipy in dataset.get(ComponentType.IRRIGATION_PRACTICE_TS_YEARLY):
        problems.extend(validate_irrigation_practice(ipy, crop_patterns))
    return problems
