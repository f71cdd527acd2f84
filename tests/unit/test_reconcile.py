"""Unit tests for irrigation practice acreage reconciliation."""

from __future__ import annotations

import logging

import pytest

from pystatecu.core.irrigation_practice import IrrigationPracticeTS
from pystatecu.core.reconcile import SupplyPair, reconcile_parts


def _practice(**values: float) -> IrrigationPracticeTS:
    ipy = IrrigationPracticeTS("0100503", 1950, 1950)
    for name, value in values.items():
        ipy.set(name, 1950, value)
    return ipy


class TestSupplyPair:
    def test_names(self) -> None:
        assert SupplyPair.GROUNDWATER.subtotal == "acgw"
        assert SupplyPair.GROUNDWATER.flood == "acgwfl"
        assert SupplyPair.SURFACE.sprinkler == "acswspr"
        assert SupplyPair.SURFACE.label == "surface water only"


class TestReconcileParts:
    """Tests for reconcile_parts."""

    def test_prorates_known_parts(self) -> None:
        ipy = _practice(acgw=50.0, acgwfl=30.0, acgwspr=70.0)
        reconcile_parts(ipy, 1950, SupplyPair.GROUNDWATER)
        assert ipy.get("acgwfl", 1950) == pytest.approx(15.0)
        assert ipy.get("acgwspr", 1950) == pytest.approx(35.0)

    def test_zero_parts_split_evenly(self) -> None:
        ipy = _practice(acgw=10.0, acgwfl=0.0, acgwspr=0.0)
        reconcile_parts(ipy, 1950, SupplyPair.GROUNDWATER)
        assert ipy.get("acgwfl", 1950) == 5.0
        assert ipy.get("acgwspr", 1950) == 5.0

    def test_one_part_missing_takes_remainder(self) -> None:
        ipy = _practice(acsw=40.0, acswfl=25.0)
        reconcile_parts(ipy, 1950, SupplyPair.SURFACE)
        assert ipy.get("acswfl", 1950) == 25.0
        assert ipy.get("acswspr", 1950) == 15.0

    def test_known_part_clamped(self) -> None:
        ipy = _practice(acsw=40.0, acswspr=60.0)
        reconcile_parts(ipy, 1950, SupplyPair.SURFACE)
        assert ipy.get("acswspr", 1950) == 40.0
        assert ipy.get("acswfl", 1950) == 0.0

    def test_zero_subtotal(self) -> None:
        ipy = _practice(acgw=0.0, acgwfl=10.0, acgwspr=20.0)
        reconcile_parts(ipy, 1950, SupplyPair.GROUNDWATER)
        assert ipy.get("acgwfl", 1950) == 0.0
        assert ipy.get("acgwspr", 1950) == 0.0

    def test_missing_subtotal_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        ipy = _practice(acgwfl=10.0, acgwspr=20.0)
        with caplog.at_level(logging.WARNING):
            reconcile_parts(ipy, 1950, SupplyPair.GROUNDWATER)
        assert ipy.get("acgwfl", 1950) == 10.0
        assert "groundwater acres are missing" in caplog.text
        assert caplog.records[-1].category == "ReconciliationWarning"

    def test_both_parts_missing_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        ipy = _practice(acgw=10.0)
        with caplog.at_level(logging.WARNING):
            reconcile_parts(ipy, 1950, SupplyPair.GROUNDWATER)
        assert ipy.is_missing_at("acgwfl", 1950)
        assert "Cannot prorate" in caplog.text

    def test_consistent_year_unchanged(self) -> None:
        ipy = _practice(acgw=50.0, acgwfl=30.0, acgwspr=20.0)
        reconcile_parts(ipy, 1950, SupplyPair.GROUNDWATER)
        assert ipy.get("acgwfl", 1950) == pytest.approx(30.0)
        assert ipy.get("acgwspr", 1950) == pytest.approx(20.0)


class TestAdjustGroundwaterToTotal:
    """Tests for adjust_groundwater_to_total."""

    def test_groundwater_reduced_to_total(self) -> None:
        ipy = _practice(tacre=100.0, acgwfl=60.0, acgwspr=60.0, acswfl=10.0, acswspr=10.0)
        ipy.refresh()
        ipy.adjust_groundwater_to_total(1950)
        assert ipy.get("acgw", 1950) == 100.0
        assert ipy.get("acgwfl", 1950) == pytest.approx(50.0)
        assert ipy.get("acgwspr", 1950) == pytest.approx(50.0)
        assert ipy.get("acsw", 1950) == 0.0
        assert ipy.get("acswfl", 1950) == 0.0
        assert ipy.get("acswspr", 1950) == 0.0

    def test_groundwater_not_increased(self) -> None:
        ipy = _practice(tacre=200.0, acgwfl=30.0, acgwspr=20.0, acswfl=60.0, acswspr=40.0)
        ipy.refresh()
        ipy.adjust_groundwater_to_total(1950)
        assert ipy.get("acgw", 1950) == 50.0
        assert ipy.get("acsw", 1950) == 150.0
        assert ipy.get("acswfl", 1950) == pytest.approx(90.0)
        assert ipy.get("acswspr", 1950) == pytest.approx(60.0)

    def test_groundwater_only(self) -> None:
        ipy = _practice(tacre=80.0, acgwfl=30.0, acgwspr=10.0, acswfl=5.0, acswspr=5.0)
        ipy.refresh()
        ipy.adjust_groundwater_to_total(1950, gw_only=True)
        assert ipy.get("acgw", 1950) == 80.0
        assert ipy.get("acgwfl", 1950) == pytest.approx(60.0)
        assert ipy.get("acgwspr", 1950) == pytest.approx(20.0)
        assert ipy.get("acsw", 1950) == 0.0
        assert ipy.get("acswfl", 1950) == 0.0

    def test_groundwater_subtotal_rebuilt_from_parts(self) -> None:
        ipy = _practice(tacre=100.0, acgwfl=20.0, acgwspr=20.0, acswfl=30.0, acswspr=30.0)
        ipy.adjust_groundwater_to_total(1950)
        assert ipy.get("acgw", 1950) == 40.0
        assert ipy.get("acsw", 1950) == 60.0

    def test_missing_total_no_change(self, caplog: pytest.LogCaptureFixture) -> None:
        ipy = _practice(acgwfl=20.0, acgwspr=20.0)
        ipy.refresh()
        with caplog.at_level(logging.WARNING):
            ipy.adjust_groundwater_to_total(1950)
        assert ipy.get("acgw", 1950) == 40.0
        assert "total acres are missing" in caplog.text

    def test_idempotent(self, irrigation_practice: IrrigationPracticeTS) -> None:
        irrigation_practice.adjust_groundwater_to_total(1950)
        irrigation_practice.adjust_groundwater_to_total(1950)
        assert irrigation_practice.get("acgw", 1950) == 50.0
        assert irrigation_practice.get("acsw", 1950) == 100.0
        assert irrigation_practice.get("acswfl", 1950) == pytest.approx(60.0)
        assert irrigation_practice.get("acgwspr", 1950) == pytest.approx(20.0)


class TestAdjustSurface:
    """Tests for adjust_surface_to_total_minus_groundwater."""

    def test_surface_gets_remainder(self, irrigation_practice: IrrigationPracticeTS) -> None:
        irrigation_practice.set("tacre", 1950, 250.0)
        irrigation_practice.adjust_surface_to_total_minus_groundwater(1950)
        assert irrigation_practice.get("acsw", 1950) == 200.0
        assert irrigation_practice.get("acswfl", 1950) == pytest.approx(120.0)
        assert irrigation_practice.get("acswspr", 1950) == pytest.approx(80.0)

    def test_zero_remainder(self, irrigation_practice: IrrigationPracticeTS) -> None:
        irrigation_practice.set("tacre", 1950, 50.0)
        irrigation_practice.adjust_surface_to_total_minus_groundwater(1950)
        assert irrigation_practice.get("acsw", 1950) == 0.0
        assert irrigation_practice.get("acswfl", 1950) == 0.0

    def test_parts_missing_leaves_parts(self, caplog: pytest.LogCaptureFixture) -> None:
        ipy = _practice(tacre=100.0, acgw=40.0)
        with caplog.at_level(logging.WARNING):
            ipy.adjust_surface_to_total_minus_groundwater(1950)
        assert ipy.get("acsw", 1950) == 60.0
        assert ipy.is_missing_at("acswfl", 1950)
        assert "parts are missing" in caplog.text

    def test_groundwater_missing_no_change(self) -> None:
        ipy = _practice(tacre=100.0, acsw=10.0)
        ipy.adjust_surface_to_total_minus_groundwater(1950)
        assert ipy.get("acsw", 1950) == 10.0

    def test_groundwater_only_zeroes_surface(self, irrigation_practice: IrrigationPracticeTS) -> None:
        irrigation_practice.adjust_surface_to_total_minus_groundwater(1951, gw_only=True)
        assert irrigation_practice.get("acsw", 1951) == 0.0
        assert irrigation_practice.get("acswspr", 1951) == 0.0
