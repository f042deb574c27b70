# tests/test_geometry.py
"""
Polar helpers and annular-sector polygons.
"""

from __future__ import annotations

import math

import pytest

from piechart.core.geometry import (
    arc_points,
    is_finite_number,
    polar_to_cartesian,
    resolve_percent,
    sector_polygon,
)


def test_polar_to_cartesian_screen_space() -> None:
    assert polar_to_cartesian(0.0, 0.0, 10.0, 0.0) == pytest.approx((10.0, 0.0))
    x, y = polar_to_cartesian(5.0, 5.0, 10.0, 90.0)
    assert x == pytest.approx(5.0, abs=1e-9)
    assert y == pytest.approx(-5.0)


def test_is_finite_number() -> None:
    assert is_finite_number(3)
    assert is_finite_number(2.5)
    assert not is_finite_number(math.nan)
    assert not is_finite_number(math.inf)
    assert not is_finite_number("3")
    assert not is_finite_number(True)
    assert not is_finite_number(None)


def test_resolve_percent() -> None:
    assert resolve_percent("50%", 400) == 200.0
    assert resolve_percent(" 80% ", 100) == pytest.approx(80.0)
    assert resolve_percent("12", 400) == 12.0
    assert resolve_percent(7, 400) == 7.0
    assert resolve_percent("abc", 400, default=-1.0) == -1.0


def test_arc_points_endpoints() -> None:
    pts = arc_points(0.0, 0.0, 10.0, 0.0, 90.0)
    assert pts.shape[1] == 2 and pts.shape[0] >= 2
    assert tuple(pts[0]) == pytest.approx((10.0, 0.0))
    assert tuple(pts[-1]) == pytest.approx((0.0, -10.0), abs=1e-9)


def test_sector_polygon_areas() -> None:
    r = 10.0
    disc = sector_polygon(0.0, 0.0, 0.0, r, 0.0, 360.0)
    assert disc.area == pytest.approx(math.pi * r * r, rel=1e-3)
    ring = sector_polygon(0.0, 0.0, 5.0, r, 0.0, 360.0)
    assert ring.area == pytest.approx(math.pi * (r * r - 25.0), rel=1e-3)
    quarter = sector_polygon(0.0, 0.0, 0.0, r, 0.0, -90.0)
    assert quarter.is_valid
    assert quarter.area == pytest.approx(math.pi * r * r / 4.0, rel=1e-3)
    annular_quarter = sector_polygon(0.0, 0.0, 5.0, r, 90.0, 180.0)
    assert annular_quarter.area == pytest.approx(math.pi * (r * r - 25.0) / 4.0, rel=1e-3)


def test_sector_polygon_degenerate_and_capped() -> None:
    assert sector_polygon(0.0, 0.0, 0.0, 10.0, 30.0, 30.0).is_empty
    assert sector_polygon(0.0, 0.0, 0.0, 0.0, 0.0, 90.0).is_empty
    over = sector_polygon(0.0, 0.0, 0.0, 10.0, 0.0, 500.0)
    assert over.area == pytest.approx(math.pi * 100.0, rel=1e-3)
