"""
Crop pattern time series for StateCU CU locations.

A :class:`CropPatternTS` holds, for one CU location, an ordered set of
per-crop annual area series and a cached total area per year. The total
is a cache: setting a crop series directly does not update it, and
:meth:`CropPatternTS.refresh` must be called before any total-dependent
read (the crop pattern writer always refreshes first).

Module-level helpers work on lists of aggregates, as returned by
:func:`pystatecu.io.crop_pattern_io.read_crop_pattern_file`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from pystatecu.core.exceptions import CropNotFoundError, ProrationError
from pystatecu.core.parcel import Parcel, filter_parcels
from pystatecu.core.series import MISSING, AnnualSeries, is_missing

logger = logging.getLogger(__name__)

CROP_AREA_PREFIX = "CropArea-"
ALL_CROPS = "AllCrops"
DATASET_LOCATION = "DataSet"


class CropPatternTS:
    """
    Crop areas by crop for one CU location.

    Parameters
    ----------
    location_id : str
        CU location identifier.
    year1, year2 : int
        Inclusive period shared by every crop series.
    units : str, optional
        Area units, normally ``ACRE``.
    source : str, optional
        File the data were read from.
    """

    def __init__(
        self,
        location_id: str,
        year1: int,
        year2: int,
        units: str = "ACRE",
        source: str = "",
    ) -> None:
        self.location_id = location_id
        self.year1 = int(year1)
        self.year2 = int(year2)
        self.units = units
        self.source = source
        self._crops: list[AnnualSeries] = []
        self._total: NDArray[np.float64] = np.full(self.year2 - self.year1 + 1, MISSING)
        self.parcels: list[Parcel] = []

    # ------------------------------------------------------------------
    # Crop series access
    # ------------------------------------------------------------------

    @property
    def crop_names(self) -> list[str]:
        """Crop names in the order they were added."""
        return [_crop_name(ts) for ts in self._crops]

    @property
    def crop_series(self) -> list[AnnualSeries]:
        return list(self._crops)

    @property
    def n_crops(self) -> int:
        return len(self._crops)

    def _index_of(self, crop_name: str) -> int | None:
        target = crop_name.upper()
        for i, ts in enumerate(self._crops):
            if _crop_name(ts).upper() == target:
                return i
        return None

    def has_crop(self, crop_name: str) -> bool:
        return self._index_of(crop_name) is not None

    def get_crop_series(self, crop_name: str) -> AnnualSeries | None:
        """Return the series for *crop_name* (case-insensitive), or None."""
        i = self._index_of(crop_name)
        return self._crops[i] if i is not None else None

    def _new_series(self, crop_name: str) -> AnnualSeries:
        return AnnualSeries(
            self.location_id,
            CROP_AREA_PREFIX + crop_name,
            self.year1,
            self.year2,
            units=self.units,
            description=f"{self.location_id} {crop_name} crop area",
        )

    def add_or_replace_crop(self, crop_name: str, overwrite: bool = False) -> AnnualSeries:
        """Add a crop series, or replace an existing one.

        Args:
            crop_name: Crop to add.
            overwrite: If True and the crop exists, the existing series is
                replaced in place by an empty (all missing) series.

        Returns:
            The series now registered for the crop.
        """
        i = self._index_of(crop_name)
        if i is None:
            ts = self._new_series(crop_name)
            self._crops.append(ts)
            return ts
        if overwrite:
            self._crops[i] = self._new_series(crop_name)
        return self._crops[i]

    def remove_crop(self, crop_name: str) -> None:
        target = crop_name.upper()
        self._crops = [ts for ts in self._crops if _crop_name(ts).upper() != target]

    def remove_all(self) -> None:
        """Remove all crop series. Cached totals are left unchanged."""
        self._crops.clear()

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def _in_period(self, year: int) -> bool:
        return self.year1 <= year <= self.year2

    def get_total_area(self, year: int) -> float:
        if not self._in_period(year):
            return MISSING
        return float(self._total[year - self.year1])

    def _set_total(self, year: int, value: float) -> None:
        if self._in_period(year):
            self._total[year - self.year1] = value

    def get_crop_area(self, crop_name: str, year: int, fraction: bool = False) -> float:
        """Return a crop's area, or its fraction of the total.

        An unknown crop gives ``MISSING``. As a fraction the result is 0
        when the total is 0 and missing when the total or area is missing.
        """
        ts = self.get_crop_series(crop_name)
        if ts is None:
            return MISSING
        area = ts.get(year)
        if not fraction:
            return area
        total = self.get_total_area(year)
        if is_missing(total) or total < 0.0 or is_missing(area):
            return MISSING
        if total == 0.0:
            return 0.0
        return area / total

    def set_crop_area(self, crop_name: str, year: int, area: float) -> None:
        """Set a crop area and update the total for the year.

        Raises:
            CropNotFoundError: If the crop is not defined for the location.
        """
        if not self._in_period(year):
            return
        ts = self.get_crop_series(crop_name)
        if ts is None:
            raise CropNotFoundError(self.location_id, crop_name)
        ts.set(year, area)
        self._refresh_year(year)

    def set_crop_areas_to_zero(self, year: int, set_all: bool = False) -> None:
        """Set crop areas to zero.

        Args:
            year: Year to process; a negative year processes the whole period.
            set_all: If True every crop is zeroed, otherwise only missing
                values are replaced.
        """
        if year < 0:
            years = range(self.year1, self.year2 + 1)
        elif self._in_period(year):
            years = range(year, year + 1)
        else:
            return
        for y in years:
            if not self._crops:
                logger.debug("Setting %s %d crop total to zero since no crops", self.location_id, y)
                self._set_total(y, 0.0)
                continue
            for ts in self._crops:
                if set_all or ts.is_missing_at(y):
                    ts.set(y, 0.0)

    def set_pattern_by_areas(
        self,
        year: int,
        crop_names: Sequence[str],
        crop_areas: Sequence[float],
    ) -> None:
        """Set the crop pattern for a year from explicit crop areas.

        Crops that do not exist yet are added. The total is the sum of the
        non-missing areas; an empty crop list gives a total of 0.
        """
        if not self._in_period(year):
            return
        total = 0.0 if len(crop_names) == 0 else MISSING
        for name, area in zip(crop_names, crop_areas):
            ts = self.get_crop_series(name)
            if ts is None:
                ts = self.add_or_replace_crop(name)
            ts.set(year, area)
            if is_missing(area):
                continue
            total = area if is_missing(total) else total + area
        self._set_total(year, total)

    def set_pattern_by_fractions(
        self,
        year: int,
        total_area: float,
        crop_names: Sequence[str],
        fractions: Sequence[float],
    ) -> None:
        """Set the crop pattern for a year from a total and crop fractions."""
        if not self._in_period(year):
            return
        self._set_total(year, total_area)
        for name, fraction in zip(crop_names, fractions):
            ts = self.get_crop_series(name)
            if ts is None:
                ts = self.add_or_replace_crop(name)
            if is_missing(total_area) or is_missing(fraction):
                ts.set(year, MISSING)
            else:
                ts.set(year, total_area * fraction)

    def set_total_area(self, year: int, total_area: float) -> None:
        """Set the total area for a year, prorating the crop areas.

        Raises:
            ProrationError: If crops exist but the old total is not positive,
                so there is nothing to prorate from.
        """
        if not self._in_period(year):
            return
        old_total = self.get_total_area(year)
        if is_missing(old_total) or old_total <= 0.0:
            if self._crops:
                raise ProrationError(
                    f'No initial crop data for "{self.location_id}" in {year}. '
                    f"Cannot prorate crops to new total {total_area:.3f}."
                )
            self._set_total(year, total_area)
            return
        factor = total_area / old_total
        for ts in self._crops:
            area = ts.get(year)
            if not is_missing(area):
                ts.set(year, area * factor)
        self._refresh_year(year)

    def translate_crop_name(self, old_name: str, new_name: str) -> None:
        """Rename a crop, merging into an existing crop of the new name."""
        i_old = self._index_of(old_name)
        if i_old is None:
            return
        i_new = self._index_of(new_name)
        if i_new is None or i_new == i_old:
            ts = self._crops[i_old]
            ts.data_type = CROP_AREA_PREFIX + new_name
            ts.description = f"{self.location_id} {new_name} crop area"
            return
        self._crops[i_new].add(self._crops[i_old])
        del self._crops[i_old]

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------

    def _refresh_year(self, year: int) -> None:
        total = MISSING
        for ts in self._crops:
            area = ts.get(year)
            if is_missing(area):
                continue
            total = area if is_missing(total) else total + area
        self._set_total(year, total)

    def refresh(self) -> None:
        """Recompute the total for every year from the crop series.

        The total is missing only when all crops are missing for the year.
        Without crops the cached totals are left as they are.
        """
        if not self._crops:
            return
        for year in range(self.year1, self.year2 + 1):
            self._refresh_year(year)

    def total_series(self, location_id: str | None = None) -> AnnualSeries:
        """Return the cached totals as an ``AllCrops`` series."""
        ts = AnnualSeries(
            location_id or self.location_id,
            CROP_AREA_PREFIX + ALL_CROPS,
            self.year1,
            self.year2,
            units=self.units,
            description=f"{self.location_id} {ALL_CROPS} area",
        )
        for year in ts.years():
            ts.set(year, self.get_total_area(year))
        return ts

    # ------------------------------------------------------------------
    # Parcels
    # ------------------------------------------------------------------

    def add_parcel(self, parcel: Parcel) -> None:
        self.parcels.append(parcel)

    def get_parcels(self, year: int | None = None, crop: str | None = None) -> list[Parcel]:
        return filter_parcels(self.parcels, year=year, crop=crop)

    def __repr__(self) -> str:
        return f"CropPatternTS({self.location_id!r}, crops={self.crop_names})"


def _crop_name(ts: AnnualSeries) -> str:
    if ts.data_type.startswith(CROP_AREA_PREFIX):
        return ts.data_type[len(CROP_AREA_PREFIX) :]
    return ts.data_type


def find_location(aggregates: Iterable[CropPatternTS], location_id: str) -> CropPatternTS | None:
    """Return the aggregate for *location_id* (case-insensitive), or None."""
    target = location_id.upper()
    for cds in aggregates:
        if cds.location_id.upper() == target:
            return cds
    return None


def distinct_crop_names(aggregates: Iterable[CropPatternTS]) -> list[str]:
    """Return the sorted crop names used by any aggregate, without duplicates."""
    seen: dict[str, str] = {}
    for cds in aggregates:
        for name in cds.crop_names:
            seen.setdefault(name.upper(), name)
    return sorted(seen.values(), key=str.upper)


def to_series_list(
    aggregates: Sequence[CropPatternTS],
    include_location_totals: bool = False,
    include_dataset_totals: bool = False,
    dataset_location: str = DATASET_LOCATION,
) -> list[AnnualSeries]:
    """Flatten aggregates into a list of series.

    Parameters
    ----------
    aggregates : sequence of CropPatternTS
        Crop patterns to flatten.
    include_location_totals : bool
        Append a ``CropArea-AllCrops`` series after each location's crops.
    include_dataset_totals : bool
        Append one series per distinct crop, plus ``AllCrops``, summing
        every location. These use *dataset_location* as the location id.
    dataset_location : str
        Location id for the data-set totals.
    """
    result: list[AnnualSeries] = []
    dataset_totals: dict[str, AnnualSeries] = {}
    if include_dataset_totals and aggregates:
        year1 = min(cds.year1 for cds in aggregates)
        year2 = max(cds.year2 for cds in aggregates)
        units = next((cds.units for cds in aggregates if cds.units), "")
        for name in distinct_crop_names(aggregates) + [ALL_CROPS]:
            dataset_totals[name.upper()] = AnnualSeries(
                dataset_location,
                CROP_AREA_PREFIX + name,
                year1,
                year2,
                units=units,
                description=f"{dataset_location} {name} crop area",
            )

    for cds in aggregates:
        for ts in cds.crop_series:
            result.append(ts)
            if dataset_totals:
                dataset_totals[_crop_name(ts).upper()].add(ts)
                dataset_totals[ALL_CROPS.upper()].add(ts)
        if include_location_totals:
            result.append(cds.total_series())

    result.extend(dataset_totals.values())
    return result
