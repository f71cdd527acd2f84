"""
Irrigation practice time series for StateCU CU locations.

An :class:`IrrigationPracticeTS` holds a fixed set of annual series for
one CU location: maximum efficiencies, acreage by supply type and
irrigation method, total acreage, maximum monthly pumping and the
groundwater use mode.

The acreage series are kept consistent by the functions in
:mod:`pystatecu.core.reconcile`; individual :meth:`~IrrigationPracticeTS.set`
calls do not reconcile anything on their own.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pystatecu.core import reconcile
from pystatecu.core.parcel import Parcel, filter_parcels
from pystatecu.core.series import MISSING, AnnualSeries, is_missing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PracticeVariable:
    """Definition of one irrigation practice series."""

    name: str
    data_type: str
    units: str
    default: float
    description: str


PRACTICE_VARIABLES: tuple[PracticeVariable, ...] = (
    PracticeVariable("ceff", "Eff-SurfaceMax", "FRACTION", 0.8, "maximum surface delivery efficiency"),
    PracticeVariable("feff", "Eff-FloodMax", "FRACTION", 0.7, "maximum flood application efficiency"),
    PracticeVariable("seff", "Eff-SprinklerMax", "FRACTION", 0.8, "maximum sprinkler application efficiency"),
    PracticeVariable("tacre", "CropArea-Total", "ACRE", MISSING, "total irrigated acres"),
    PracticeVariable("acsw", "CropArea-SurfaceWaterOnly", "ACRE", MISSING, "surface water only acres"),
    PracticeVariable("acgw", "CropArea-GroundWater", "ACRE", MISSING, "groundwater acres"),
    PracticeVariable("acswfl", "CropArea-SurfaceWaterOnlyFlood", "ACRE", MISSING, "surface water only flood acres"),
    PracticeVariable(
        "acswspr", "CropArea-SurfaceWaterOnlySprinkler", "ACRE", MISSING, "surface water only sprinkler acres"
    ),
    PracticeVariable("acgwfl", "CropArea-GroundWaterFlood", "ACRE", MISSING, "groundwater flood acres"),
    PracticeVariable("acgwspr", "CropArea-GroundWaterSprinkler", "ACRE", MISSING, "groundwater sprinkler acres"),
    PracticeVariable("mprate", "PumpingMax", "ACFT", MISSING, "maximum monthly pumping"),
    PracticeVariable("gmode", "GWUseMode", "", 2.0, "groundwater use mode"),
)

EFFICIENCY_NAMES = ("ceff", "feff", "seff")
ACREAGE_PART_NAMES = ("acswfl", "acswspr", "acgwfl", "acgwspr")

# part -> (subtotal, sibling part)
_PART_SIBLINGS = {
    "acswfl": ("acsw", "acswspr"),
    "acswspr": ("acsw", "acswfl"),
    "acgwfl": ("acgw", "acgwspr"),
    "acgwspr": ("acgw", "acgwfl"),
}


class IrrigationPracticeTS:
    """
    Irrigation practice series for one CU location.

    Parameters
    ----------
    location_id : str
        CU location identifier.
    year1, year2 : int
        Inclusive period shared by every series.
    year_type : str, optional
        Year type tag, always ``CYR`` in current files.
    source : str, optional
        File the data were read from.
    version : int, optional
        File version the data came from (10 or 12).
    """

    def __init__(
        self,
        location_id: str,
        year1: int,
        year2: int,
        year_type: str = "CYR",
        source: str = "",
        version: int = 12,
    ) -> None:
        self.location_id = location_id
        self.year1 = int(year1)
        self.year2 = int(year2)
        self.year_type = year_type
        self.source = source
        self.version = version
        self.parcels: list[Parcel] = []
        self._series: dict[str, AnnualSeries] = {
            var.name: AnnualSeries(
                location_id,
                var.data_type,
                self.year1,
                self.year2,
                units=var.units,
                description=f"{location_id} {var.description}",
                initial_value=var.default,
            )
            for var in PRACTICE_VARIABLES
        }

    # ------------------------------------------------------------------
    # Series access
    # ------------------------------------------------------------------

    def series(self, name: str) -> AnnualSeries:
        """Return the series for a variable name such as ``"acgwfl"``."""
        try:
            return self._series[name]
        except KeyError:
            raise KeyError(f"Unknown irrigation practice variable: {name!r}") from None

    def series_list(self) -> list[AnnualSeries]:
        return [self._series[var.name] for var in PRACTICE_VARIABLES]

    def get(self, name: str, year: int) -> float:
        return self.series(name).get(year)

    def set(self, name: str, year: int, value: float) -> None:
        self.series(name).set(year, value)

    def is_missing_at(self, name: str, year: int) -> bool:
        return is_missing(self.get(name, year))

    def get_gmode(self, year: int) -> int:
        """Groundwater use mode as an integer code, ``-999`` if missing."""
        value = self.get("gmode", year)
        if is_missing(value):
            return -999
        return int(value + 0.1)

    # ------------------------------------------------------------------
    # Subtotals
    # ------------------------------------------------------------------

    def _refresh_subtotal(self, year: int, subtotal: str, flood: str, sprinkler: str) -> None:
        fl = self.get(flood, year)
        spr = self.get(sprinkler, year)
        if is_missing(fl) or is_missing(spr):
            self.set(subtotal, year, MISSING)
        else:
            self.set(subtotal, year, fl + spr)

    def refresh_acsw(self, year: int) -> None:
        """Set surface water only acres to the sum of its flood and sprinkler parts."""
        self._refresh_subtotal(year, "acsw", "acswfl", "acswspr")

    def refresh_acgw(self, year: int) -> None:
        """Set groundwater acres to the sum of its flood and sprinkler parts."""
        self._refresh_subtotal(year, "acgw", "acgwfl", "acgwspr")

    def refresh(self) -> None:
        """Refresh both supply subtotals for every year."""
        for year in range(self.year1, self.year2 + 1):
            self.refresh_acsw(year)
            self.refresh_acgw(year)

    # ------------------------------------------------------------------
    # Part setters that keep the subtotal fixed
    # ------------------------------------------------------------------

    def _set_part_and_adjust(self, part: str, year: int, value: float) -> None:
        subtotal_name, sibling = _PART_SIBLINGS[part]
        subtotal = self.get(subtotal_name, year)
        if is_missing(subtotal):
            logger.info(
                'Location "%s" %d %s is missing. Cannot set %s and adjust %s.',
                self.location_id,
                year,
                subtotal_name,
                part,
                sibling,
            )
            return
        if value > subtotal:
            logger.info(
                'Location "%s" %d %s (%.1f) exceeds %s (%.1f), reducing to %s.',
                self.location_id,
                year,
                part,
                value,
                subtotal_name,
                subtotal,
                subtotal_name,
            )
            value = subtotal
        self.set(part, year, value)
        self.set(sibling, year, subtotal - value)

    def set_acswfl_and_adjust(self, year: int, value: float) -> None:
        """Set surface flood acres, giving the rest of acsw to sprinkler."""
        self._set_part_and_adjust("acswfl", year, value)

    def set_acswspr_and_adjust(self, year: int, value: float) -> None:
        """Set surface sprinkler acres, giving the rest of acsw to flood."""
        self._set_part_and_adjust("acswspr", year, value)

    def set_acgwfl_and_adjust(self, year: int, value: float) -> None:
        """Set groundwater flood acres, giving the rest of acgw to sprinkler."""
        self._set_part_and_adjust("acgwfl", year, value)

    def set_acgwspr_and_adjust(self, year: int, value: float) -> None:
        """Set groundwater sprinkler acres, giving the rest of acgw to flood."""
        self._set_part_and_adjust("acgwspr", year, value)

    # ------------------------------------------------------------------
    # Reconciliation
    # ------------------------------------------------------------------

    def adjust_groundwater_to_total(self, year: int, gw_only: bool = False) -> None:
        reconcile.adjust_groundwater_to_total(self, year, gw_only)

    def adjust_surface_to_total_minus_groundwater(self, year: int, gw_only: bool = False) -> None:
        reconcile.adjust_surface_to_total_minus_groundwater(self, year, gw_only)

    # ------------------------------------------------------------------
    # Parcels
    # ------------------------------------------------------------------

    def add_parcel(self, parcel: Parcel) -> None:
        self.parcels.append(parcel)

    def get_parcels(self, year: int | None = None, crop: str | None = None) -> list[Parcel]:
        return filter_parcels(self.parcels, year=year, crop=crop)

    def has_groundwater_supply(self, year: int | None = None) -> bool:
        """Return True if any parcel (optionally for *year*) has a groundwater supply."""
        return any(p.has_groundwater_supply() for p in self.get_parcels(year=year))

    def __repr__(self) -> str:
        return f"IrrigationPracticeTS({self.location_id!r}, {self.year1}-{self.year2})"


def find_location(
    aggregates: Iterable[IrrigationPracticeTS], location_id: str
) -> IrrigationPracticeTS | None:
    """Return the aggregate for *location_id* (case-insensitive), or None."""
    target = location_id.upper()
    for ipy in aggregates:
        if ipy.location_id.upper() == target:
            return ipy
    return None
