# piechart/core/allocate.py
"""
Angle allocation: data values -> per-item sector geometry.
Each item gets min_angle, the remaining budget is shared by value; sectors are
laid out back to back from start_angle in the direction of end_angle.
Degenerate input yields an empty list, never an exception.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from piechart.core.config import ANGLE_TOLERANCE_DEG, MAX_SPAN_DEG
from piechart.core.error_codes import (
    EMPTY_DATA,
    INFEASIBLE_MIN_ANGLE,
    INVALID_GEOMETRY,
    NON_POSITIVE_SUM,
)
from piechart.core.geometry import is_finite_number
from piechart.core.types import PieOptions, SectorGeometry

logger = logging.getLogger(__name__)


def item_field(item: Any, key: str, default: Any = None) -> Any:
    """Look up key on a mapping, or as an attribute on any other object."""
    if isinstance(item, Mapping):
        return item.get(key, default)
    return getattr(item, key, default)


def item_value(item: Any, key: str) -> float:
    """Numeric weight of an item; NaN when missing or not a real number."""
    v = item_field(item, key)
    if isinstance(v, bool) or not isinstance(v, Real):
        return math.nan
    return float(v)


def get_delta_angle(start_angle: float, end_angle: float) -> float:
    """Signed total span, magnitude capped at one full turn."""
    diff = end_angle - start_angle
    sign = (diff > 0) - (diff < 0)
    return sign * min(abs(diff), MAX_SPAN_DEG)


def _has_valid_geometry(options: PieOptions) -> bool:
    return all(
        is_finite_number(v)
        for v in (options.cx, options.cy, options.inner_radius, options.outer_radius)
    )


def diagnose_layout(items: Sequence[Any], options: PieOptions) -> list[str]:
    """
    Diagnostic keys explaining an empty or inconsistent layout.
    Empty list means allocate_sectors produces a consistent result.
    """
    out: list[str] = []
    if not items:
        out.append(EMPTY_DATA)
        return out
    if not _has_valid_geometry(options):
        out.append(INVALID_GEOMETRY)
    total = sum(item_value(it, options.value_key) for it in items)
    if not total > 0:
        out.append(NON_POSITIVE_SUM)
    budget = abs(get_delta_angle(options.start_angle, options.end_angle))
    if len(items) * options.min_angle > budget + ANGLE_TOLERANCE_DEG:
        out.append(INFEASIBLE_MIN_ANGLE)
    return out


def allocate_sectors(items: Sequence[Any], options: PieOptions) -> list[SectorGeometry]:
    """
    Convert items into sectors in input order.
    span_i = min_angle + percent_i * (|delta| - n * min_angle). When n * min_angle
    exceeds |delta| the spans drop below min_angle while still summing to |delta|;
    that is passed through.
    """
    if not items or not _has_valid_geometry(options):
        logger.debug("allocate_sectors: no items or unresolved geometry; empty layout")
        return []

    key = options.value_key
    values = [item_value(it, key) for it in items]
    total = sum(values)
    if not total > 0:
        logger.debug("allocate_sectors: value sum %r is not positive; empty layout", total)
        return []

    n = len(items)
    delta = get_delta_angle(options.start_angle, options.end_angle)
    abs_delta = abs(delta)
    sign = (delta > 0) - (delta < 0)
    free_budget = abs_delta - n * options.min_angle
    if free_budget < -ANGLE_TOLERANCE_DEG:
        logger.warning(
            "min_angle %.3f x %d items exceeds total span %.3f; sectors fall below the minimum",
            options.min_angle, n, abs_delta,
        )

    cx, cy = float(options.cx), float(options.cy)
    inner, outer = float(options.inner_radius), float(options.outer_radius)

    sectors: list[SectorGeometry] = []
    cursor = float(options.start_angle)
    for i, (entry, value) in enumerate(zip(items, values)):
        percent = value / total
        end = cursor + sign * (options.min_angle + percent * free_budget)
        sectors.append(
            SectorGeometry(
                index=i,
                cx=cx,
                cy=cy,
                inner_radius=inner,
                outer_radius=outer,
                start_angle=cursor,
                end_angle=end,
                mid_angle=(cursor + end) / 2.0,
                percent=percent,
                value=value,
                name=item_field(entry, options.name_key),
                payload=entry,
            )
        )
        cursor = end
    return sectors
