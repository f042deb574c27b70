# tests/test_easing.py
"""
Easing curves: endpoints, monotonic cubic-bezier presets, spring overshoot.
"""

from __future__ import annotations

import pytest

from piechart.core.easing import CUBIC_BEZIER_PRESETS, cubic_bezier, get_easing, linear, spring


@pytest.mark.parametrize("name", ["linear", "spring", *CUBIC_BEZIER_PRESETS])
def test_endpoints(name: str) -> None:
    f = get_easing(name)
    assert f(0.0) == 0.0
    assert f(1.0) == 1.0
    assert f(-0.5) == 0.0
    assert f(2.0) == 1.0


@pytest.mark.parametrize("name", list(CUBIC_BEZIER_PRESETS))
def test_presets_monotonic(name: str) -> None:
    f = get_easing(name)
    ys = [f(i / 50.0) for i in range(51)]
    assert all(b >= a - 1e-9 for a, b in zip(ys, ys[1:]))


def test_preset_shapes() -> None:
    assert get_easing("ease-in")(0.5) < 0.5
    assert get_easing("ease-out")(0.5) > 0.5
    assert get_easing("ease-in-out")(0.5) == pytest.approx(0.5, abs=1e-5)
    assert cubic_bezier(0.0, 0.0, 1.0, 1.0)(0.3) == pytest.approx(0.3, abs=1e-5)


def test_spring_overshoots_then_settles() -> None:
    f = spring()
    ys = [f(i / 200.0) for i in range(201)]
    assert max(ys) > 1.0
    assert ys[-1] == 1.0


def test_callable_passthrough() -> None:
    def square(t: float) -> float:
        return t * t

    assert get_easing(square) is square
    assert get_easing("linear") is linear


def test_linear_clamps_out_of_range_progress() -> None:
    assert linear(-0.5) == 0.0
    assert linear(0.25) == 0.25
    assert linear(2.0) == 1.0
