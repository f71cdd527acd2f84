"""
Year-indexed time series for StateCU data.

Every StateCU quantity (a crop area, an efficiency, a pumping limit) is
stored as an :class:`AnnualSeries`: one slot per calendar year in a fixed
``[year1, year2]`` period, with missing data encoded by a sentinel value
rather than ``None``.

Example
-------
>>> from pystatecu.core.series import AnnualSeries
>>> ts = AnnualSeries("0100503", "CropArea-ALFALFA", 1950, 1952, units="ACRE")
>>> ts.set(1951, 120.5)
>>> ts.get(1951)
120.5
>>> AnnualSeries.is_missing(ts.get(1950))
True
>>> ts.set(2000, 10.0)  # outside the period, ignored
>>> ts.year2
1952
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

MISSING = -999.0
MISSING_INT = -999

# Values are read back from formatted text, so the sentinel is matched
# within a band instead of by equality.
_MISSING_FLOOR = -999.1
_MISSING_CEILING = -998.9


def is_missing(value: float) -> bool:
    """Return True if *value* is the missing sentinel or NaN."""
    if value is None:
        return True
    value = float(value)
    if math.isnan(value):
        return True
    return _MISSING_FLOOR < value < _MISSING_CEILING


class AnnualSeries:
    """
    A time series with one value per calendar year.

    Parameters
    ----------
    location_id : str
        CU location that owns the series.
    data_type : str
        Variable name, e.g. ``"CropArea-ALFALFA"`` or ``"Eff-FloodMax"``.
    year1, year2 : int
        Inclusive period. Values can only be stored inside it.
    units : str, optional
        Data units (``ACRE``, ``FRACTION``, ...). Never converted.
    description : str, optional
        Free-text description.
    initial_value : float, optional
        Value used to fill every slot, missing by default.
    """

    def __init__(
        self,
        location_id: str,
        data_type: str,
        year1: int,
        year2: int,
        units: str = "",
        description: str = "",
        initial_value: float = MISSING,
    ) -> None:
        if year2 < year1:
            raise ValueError(f"Invalid period {year1}-{year2} for {location_id} {data_type}")
        self.location_id = location_id
        self.data_type = data_type
        self.units = units
        self.description = description
        self._year1 = int(year1)
        self._year2 = int(year2)
        self._data: NDArray[np.float64] = np.full(
            self._year2 - self._year1 + 1, initial_value, dtype=np.float64
        )

    @staticmethod
    def is_missing(value: float) -> bool:
        """Return True if *value* counts as missing data."""
        return is_missing(value)

    @property
    def year1(self) -> int:
        """First year of the period."""
        return self._year1

    @property
    def year2(self) -> int:
        """Last year of the period."""
        return self._year2

    @property
    def n_years(self) -> int:
        return len(self._data)

    @property
    def tsid(self) -> str:
        """Time series identifier in ``Location.Source.DataType.Interval`` form."""
        return f"{self.location_id}.StateCU.{self.data_type}.Year"

    def in_period(self, year: int) -> bool:
        return self._year1 <= year <= self._year2

    def get(self, year: int) -> float:
        """Return the value for *year*, or ``MISSING`` outside the period."""
        if not self.in_period(year):
            return MISSING
        return float(self._data[year - self._year1])

    def set(self, year: int, value: float) -> None:
        """Set the value for *year*.

        Years outside ``[year1, year2]`` are ignored; the period is never
        extended by a write.
        """
        if not self.in_period(year):
            return
        self._data[year - self._year1] = MISSING if value is None else float(value)

    def is_missing_at(self, year: int) -> bool:
        return is_missing(self.get(year))

    def fill(self, value: float) -> None:
        self._data[:] = value

    def years(self) -> range:
        """Years covered by the period."""
        return range(self._year1, self._year2 + 1)

    def values(self) -> NDArray[np.float64]:
        """Return a copy of the underlying values."""
        return self._data.copy()

    def has_data(self) -> bool:
        """Return True if at least one year holds a non-missing value."""
        return any(not is_missing(v) for v in self._data)

    def add(self, other: AnnualSeries) -> None:
        """Add *other* into this series for the overlapping years.

        Missing values are treated as absent: ``missing + x`` gives ``x``
        and the slot stays missing only if both sides are missing.
        """
        for year in range(max(self._year1, other.year1), min(self._year2, other.year2) + 1):
            value = other.get(year)
            if is_missing(value):
                continue
            current = self.get(year)
            self.set(year, value if is_missing(current) else current + value)

    def copy(self) -> AnnualSeries:
        new = AnnualSeries(
            self.location_id,
            self.data_type,
            self._year1,
            self._year2,
            units=self.units,
            description=self.description,
        )
        new._data = self._data.copy()
        return new

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"AnnualSeries(location_id={self.location_id!r}, "
            f"data_type={self.data_type!r}, period={self._year1}-{self._year2})"
        )
