"""
Acreage reconciliation for irrigation practice time series.

The irrigation practice acreage forms a hierarchy::

    total (tacre)
      surface water only (acsw) = surface flood + surface sprinkler
      groundwater (acgw)        = groundwater flood + groundwater sprinkler

After one level is set independently (for example the total is copied
from the crop pattern), the functions here restore the other levels.
They never raise: when data are insufficient a warning is logged with
``ReconciliationWarning`` as its category and the affected values are
left as they were.

All functions are idempotent when applied to an already-consistent year.
Groundwater is only ever reduced to meet the total, never increased;
surface water absorbs whatever acreage remains.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pystatecu.core.exceptions import ReconciliationWarning
from pystatecu.core.series import is_missing

if TYPE_CHECKING:
    from pystatecu.core.irrigation_practice import IrrigationPracticeTS

logger = logging.getLogger(__name__)

# Differences below output precision are not reported.
_REPORT_TOLERANCE = 0.1
# Surface targets closer than this to zero are treated as zero.
_ZERO_TOLERANCE = 0.001


class SupplyPair(Enum):
    """A supply subtotal and its flood/sprinkler parts."""

    GROUNDWATER = ("acgw", "acgwfl", "acgwspr")
    SURFACE = ("acsw", "acswfl", "acswspr")

    @property
    def subtotal(self) -> str:
        return self.value[0]

    @property
    def flood(self) -> str:
        return self.value[1]

    @property
    def sprinkler(self) -> str:
        return self.value[2]

    @property
    def label(self) -> str:
        return "groundwater" if self is SupplyPair.GROUNDWATER else "surface water only"


def _warn(msg: str, *args: object) -> None:
    logger.warning(msg, *args, extra={"category": ReconciliationWarning.__name__})


def reconcile_parts(ipts: IrrigationPracticeTS, year: int, pair: SupplyPair) -> None:
    """Adjust the flood/sprinkler parts of *pair* to match its subtotal.

    * Missing subtotal, or both parts missing: warning, no change.
    * Subtotal of zero: both parts set to zero.
    * Both parts known: prorated to the subtotal keeping their ratio, or
      split evenly if both were zero.
    * One part missing: the known part is first reduced to the subtotal
      if it exceeds it, then the missing part takes the remainder.
    """
    subtotal = ipts.get(pair.subtotal, year)
    flood = ipts.get(pair.flood, year)
    sprinkler = ipts.get(pair.sprinkler, year)
    loc = ipts.location_id

    if is_missing(subtotal):
        _warn(
            'Location "%s" %d %s acres are missing. Cannot adjust flood and sprinkler parts.',
            loc,
            year,
            pair.label,
        )
        return

    if subtotal == 0.0:
        ipts.set(pair.flood, year, 0.0)
        ipts.set(pair.sprinkler, year, 0.0)
        return

    flood_missing = is_missing(flood)
    sprinkler_missing = is_missing(sprinkler)

    if flood_missing and sprinkler_missing:
        _warn(
            'Location "%s" %d %s flood and sprinkler acres are missing. '
            "Cannot prorate %s acres (%.1f) to parts.",
            loc,
            year,
            pair.label,
            pair.label,
            subtotal,
        )
        return

    if not flood_missing and not sprinkler_missing:
        old_sum = flood + sprinkler
        if old_sum == 0.0:
            new_flood = subtotal * 0.5
            new_sprinkler = subtotal * 0.5
        else:
            new_flood = subtotal * (flood / old_sum)
            new_sprinkler = subtotal * (sprinkler / old_sum)
        if abs(old_sum - subtotal) > _REPORT_TOLERANCE:
            logger.info(
                'Location "%s" %d prorating %s flood (%.1f) and sprinkler (%.1f) '
                "to new total (%.1f): flood=%.1f sprinkler=%.1f",
                loc,
                year,
                pair.label,
                flood,
                sprinkler,
                subtotal,
                new_flood,
                new_sprinkler,
            )
        ipts.set(pair.flood, year, new_flood)
        ipts.set(pair.sprinkler, year, new_sprinkler)
        return

    if flood_missing:
        known_name, missing_name, known = pair.sprinkler, pair.flood, sprinkler
    else:
        known_name, missing_name, known = pair.flood, pair.sprinkler, flood
    if known > subtotal:
        logger.info(
            'Location "%s" %d reducing %s (%.1f) to %s acres (%.1f)',
            loc,
            year,
            known_name,
            known,
            pair.label,
            subtotal,
        )
        known = subtotal
        ipts.set(known_name, year, known)
    ipts.set(missing_name, year, subtotal - known)


def adjust_groundwater_to_total(ipts: IrrigationPracticeTS, year: int, gw_only: bool) -> None:
    """Adjust groundwater acreage to the total, then the parts and surface.

    For a groundwater-only location the groundwater subtotal is set equal
    to the total. Otherwise it is only lowered when it exceeds the total.
    """
    total = ipts.get("tacre", year)
    loc = ipts.location_id
    if is_missing(total):
        _warn('Location "%s" %d total acres are missing. Cannot adjust groundwater acres.', loc, year)
        return

    if (
        ipts.is_missing_at("acgw", year)
        and not ipts.is_missing_at("acgwfl", year)
        and not ipts.is_missing_at("acgwspr", year)
    ):
        ipts.refresh_acgw(year)
    acgw = ipts.get("acgw", year)

    if gw_only:
        if is_missing(acgw) or abs(total - acgw) > _REPORT_TOLERANCE:
            logger.info(
                'Location "%s" %d GW acres (%.1f) != total acres (%.1f). '
                "Location is groundwater only, setting GW acres to total.",
                loc,
                year,
                acgw,
                total,
            )
        ipts.set("acgw", year, total)
    elif not is_missing(acgw) and acgw > total:
        logger.info(
            'Location "%s" %d adjusting GW acres (%.1f) down to total acres (%.1f)',
            loc,
            year,
            acgw,
            total,
        )
        ipts.set("acgw", year, total)

    reconcile_parts(ipts, year, SupplyPair.GROUNDWATER)
    adjust_surface_to_total_minus_groundwater(ipts, year, gw_only)


def adjust_surface_to_total_minus_groundwater(
    ipts: IrrigationPracticeTS, year: int, gw_only: bool
) -> None:
    """Set surface water only acreage to ``total - groundwater``.

    Groundwater-only locations get zero surface acreage. When neither
    surface part is known the subtotal is still set so it can be inspected.
    """
    loc = ipts.location_id
    if gw_only:
        ipts.set("acswfl", year, 0.0)
        ipts.set("acswspr", year, 0.0)
        ipts.set("acsw", year, 0.0)
        return

    total = ipts.get("tacre", year)
    acgw = ipts.get("acgw", year)
    if is_missing(total) or is_missing(acgw):
        logger.info(
            'Location "%s" %d total (%.1f) or GW acres (%.1f) missing. '
            "Cannot adjust surface water acres.",
            loc,
            year,
            total,
            acgw,
        )
        return

    target = total - acgw
    if abs(target) < _ZERO_TOLERANCE:
        target = 0.0

    if target == 0.0:
        ipts.set("acswfl", year, 0.0)
        ipts.set("acswspr", year, 0.0)
        ipts.set("acsw", year, 0.0)
        return

    ipts.set("acsw", year, target)
    if ipts.is_missing_at("acswfl", year) and ipts.is_missing_at("acswspr", year):
        _warn(
            'Location "%s" %d surface water acres set to %.1f but flood and sprinkler '
            "parts are missing. Leaving parts missing.",
            loc,
            year,
            target,
        )
        return
    reconcile_parts(ipts, year, SupplyPair.SURFACE)
