"""
Parcel observations used as filling input for CU locations.

A parcel is a field-level record (crop, irrigation method and water
supplies) collected for one year. Parcels are kept verbatim on the
aggregates; the reconciliation code never changes them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pystatecu.core.series import MISSING


@dataclass
class Supply:
    """A single water supply serving a parcel.

    Attributes:
        amount: Supply amount (area served), missing if unknown.
        is_ground: True for a groundwater (well) supply.
        is_surface: True for a surface water (ditch) supply.
        source_id: Identifier of the ditch or well, if known.
    """

    amount: float = MISSING
    is_ground: bool = False
    is_surface: bool = False
    source_id: str = ""


@dataclass
class Parcel:
    """A parcel observation for one year.

    Attributes:
        year: Calendar year of the observation.
        crop: Crop grown on the parcel.
        area: Parcel area, missing if unknown.
        area_units: Units for ``area``.
        irrigation_method: Irrigation method (e.g. ``FLOOD``, ``SPRINKLER``).
        parcel_id: Identifier of the parcel.
        supplies: Water supplies serving the parcel.
    """

    year: int
    crop: str = ""
    area: float = MISSING
    area_units: str = ""
    irrigation_method: str = ""
    parcel_id: str = ""
    supplies: list[Supply] = field(default_factory=list)

    def add_supply(self, supply: Supply) -> None:
        self.supplies.append(supply)

    def has_groundwater_supply(self) -> bool:
        """Return True if any supply for the parcel is groundwater."""
        return any(s.is_ground for s in self.supplies)

    def has_surface_supply(self) -> bool:
        return any(s.is_surface for s in self.supplies)


def filter_parcels(
    parcels: Iterable[Parcel],
    year: int | None = None,
    crop: str | None = None,
) -> list[Parcel]:
    """Return the parcels matching *year* and *crop*.

    ``None`` matches everything. Crop names compare case-insensitively.
    """
    crop_upper = crop.upper() if crop is not None else None
    result = []
    for parcel in parcels:
        if year is not None and parcel.year != year:
            continue
        if crop_upper is not None and parcel.crop.upper() != crop_upper:
            continue
        result.append(parcel)
    return result
