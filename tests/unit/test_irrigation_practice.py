"""Unit tests for IrrigationPracticeTS."""

from __future__ import annotations

import logging

import pytest

from pystatecu.core.irrigation_practice import (
    PRACTICE_VARIABLES,
    IrrigationPracticeTS,
    find_location,
)
from pystatecu.core.parcel import Parcel, Supply
from pystatecu.core.series import MISSING


class TestDefaults:
    """Tests for series defaults."""

    def test_twelve_series(self) -> None:
        ipy = IrrigationPracticeTS("0100503", 1950, 1951)
        assert len(ipy.series_list()) == 12
        assert len(PRACTICE_VARIABLES) == 12

    def test_efficiency_defaults(self) -> None:
        ipy = IrrigationPracticeTS("0100503", 1950, 1951)
        assert ipy.get("ceff", 1950) == 0.8
        assert ipy.get("feff", 1950) == 0.7
        assert ipy.get("seff", 1951) == 0.8

    def test_gmode_default(self) -> None:
        ipy = IrrigationPracticeTS("0100503", 1950, 1951)
        assert ipy.get_gmode(1950) == 2

    def test_acreage_defaults_missing(self) -> None:
        ipy = IrrigationPracticeTS("0100503", 1950, 1951)
        for name in ("tacre", "acsw", "acgw", "acswfl", "acswspr", "acgwfl", "acgwspr", "mprate"):
            assert ipy.is_missing_at(name, 1950)

    def test_series_metadata(self) -> None:
        ipy = IrrigationPracticeTS("0100503", 1950, 1951)
        ts = ipy.series("acgwfl")
        assert ts.data_type == "CropArea-GroundWaterFlood"
        assert ts.units == "ACRE"
        assert ts.tsid == "0100503.StateCU.CropArea-GroundWaterFlood.Year"

    def test_unknown_series(self) -> None:
        ipy = IrrigationPracticeTS("0100503", 1950, 1951)
        with pytest.raises(KeyError, match="Unknown irrigation practice variable"):
            ipy.series("acres")

    def test_gmode_missing(self) -> None:
        ipy = IrrigationPracticeTS("0100503", 1950, 1951)
        ipy.set("gmode", 1950, MISSING)
        assert ipy.get_gmode(1950) == -999


class TestSubtotals:
    """Tests for the supply subtotals."""

    def test_refresh(self, irrigation_practice: IrrigationPracticeTS) -> None:
        assert irrigation_practice.get("acsw", 1950) == 100.0
        assert irrigation_practice.get("acgw", 1951) == 50.0

    def test_refresh_missing_part(self) -> None:
        ipy = IrrigationPracticeTS("X", 1950, 1950)
        ipy.set("acgwfl", 1950, 10.0)
        ipy.refresh_acgw(1950)
        assert ipy.is_missing_at("acgw", 1950)


class TestPartSetters:
    """Tests for setting one part and adjusting its sibling."""

    def test_set_acswfl(self, irrigation_practice: IrrigationPracticeTS) -> None:
        irrigation_practice.set_acswfl_and_adjust(1950, 70.0)
        assert irrigation_practice.get("acswfl", 1950) == 70.0
        assert irrigation_practice.get("acswspr", 1950) == 30.0
        assert irrigation_practice.get("acsw", 1950) == 100.0

    def test_set_acswspr(self, irrigation_practice: IrrigationPracticeTS) -> None:
        irrigation_practice.set_acswspr_and_adjust(1950, 100.0)
        assert irrigation_practice.get("acswfl", 1950) == 0.0

    def test_set_acgwfl_clamped(self, irrigation_practice: IrrigationPracticeTS) -> None:
        irrigation_practice.set_acgwfl_and_adjust(1950, 80.0)
        assert irrigation_practice.get("acgwfl", 1950) == 50.0
        assert irrigation_practice.get("acgwspr", 1950) == 0.0

    def test_set_acgwspr(self, irrigation_practice: IrrigationPracticeTS) -> None:
        irrigation_practice.set_acgwspr_and_adjust(1951, 10.0)
        assert irrigation_practice.get("acgwfl", 1951) == 40.0

    def test_missing_subtotal_no_change(self, caplog: pytest.LogCaptureFixture) -> None:
        ipy = IrrigationPracticeTS("X", 1950, 1950)
        with caplog.at_level(logging.INFO):
            ipy.set_acgwfl_and_adjust(1950, 10.0)
        assert ipy.is_missing_at("acgwfl", 1950)
        assert "is missing" in caplog.text


class TestParcels:
    """Tests for parcel storage."""

    def test_groundwater_supply(self) -> None:
        ipy = IrrigationPracticeTS("X", 1950, 1951)
        ipy.add_parcel(Parcel(1950, crop="ALFALFA", supplies=[Supply(5.0, is_surface=True)]))
        ipy.add_parcel(Parcel(1951, crop="ALFALFA", supplies=[Supply(5.0, is_ground=True)]))
        assert ipy.has_groundwater_supply()
        assert not ipy.has_groundwater_supply(1950)
        assert ipy.has_groundwater_supply(1951)
        assert len(ipy.get_parcels(crop="alfalfa")) == 2


class TestFindLocation:
    def test_find(self) -> None:
        items = [IrrigationPracticeTS("A", 1950, 1950), IrrigationPracticeTS("B", 1950, 1950)]
        assert find_location(items, "a") is items[0]
        assert find_location(items, "Z") is None
