# piechart/core/geometry.py
"""
Polar geometry helpers: polar-to-cartesian in screen coordinates, finite-number
checks, percentage resolution, arc sampling and annular-sector polygons.
Angles are degrees, counter-clockwise from 3 o'clock; y grows downward.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

import numpy as np
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from piechart.core.config import ARC_SEGMENTS_PER_TURN, MAX_SPAN_DEG

RADIAN = math.pi / 180.0


def polar_to_cartesian(cx: float, cy: float, radius: float, angle_deg: float) -> tuple[float, float]:
    """Point at radius/angle around (cx, cy) in screen space (y down)."""
    return (
        cx + math.cos(-RADIAN * angle_deg) * radius,
        cy + math.sin(-RADIAN * angle_deg) * radius,
    )


def is_finite_number(value: Any) -> bool:
    """True for real, finite numbers. Booleans and strings are rejected."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(float(value))


def resolve_percent(value: float | str, total: float, default: float = 0.0) -> float:
    """
    Resolve '50%' against total; plain numbers and numeric strings pass through.
    Returns default for anything unparseable.
    """
    if is_finite_number(value):
        return float(value)
    if isinstance(value, str):
        s = value.strip()
        try:
            if s.endswith("%"):
                return float(s[:-1]) / 100.0 * total
            return float(s)
        except ValueError:
            return default
    return default


def arc_points(
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    segments_per_turn: int = ARC_SEGMENTS_PER_TURN,
) -> np.ndarray:
    """Sample the directed arc start->end as an (N, 2) array, N >= 2."""
    span = abs(end_angle - start_angle)
    n = max(2, int(math.ceil(span / 360.0 * segments_per_turn)) + 1)
    angles = np.linspace(start_angle, end_angle, n) * -RADIAN
    return np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))


def sector_polygon(
    cx: float,
    cy: float,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    segments_per_turn: int = ARC_SEGMENTS_PER_TURN,
) -> BaseGeometry:
    """
    Annular wedge as a shapely Polygon. Spans beyond one turn are capped;
    zero span or zero radius gives an empty polygon.
    """
    delta = end_angle - start_angle
    if outer_radius <= 0 or delta == 0:
        return Polygon()
    sign = 1.0 if delta > 0 else -1.0
    span = min(abs(delta), MAX_SPAN_DEG)
    end = start_angle + sign * span
    inner = max(0.0, min(inner_radius, outer_radius))

    if span >= MAX_SPAN_DEG:
        outer_ring = arc_points(cx, cy, outer_radius, start_angle, end, segments_per_turn)[:-1]
        if inner > 0:
            inner_ring = arc_points(cx, cy, inner, start_angle, end, segments_per_turn)[:-1]
            return Polygon(outer_ring, [inner_ring])
        return Polygon(outer_ring)

    outer_arc = arc_points(cx, cy, outer_radius, start_angle, end, segments_per_turn)
    if inner > 0:
        inner_arc = arc_points(cx, cy, inner, end, start_angle, segments_per_turn)
        ring = np.vstack([outer_arc, inner_arc])
    else:
        ring = np.vstack([outer_arc, [[cx, cy]]])
    poly = Polygon(ring)
    if not poly.is_valid:
        poly = poly.buffer(0)
    return poly
