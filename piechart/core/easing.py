# piechart/core/easing.py
"""
Easing curves for the reveal animation: CSS cubic-bezier presets, linear, and a
damped spring. Each maps progress t in [0, 1] to an eased value with f(0)=0, f(1)=1.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

import numpy as np

from piechart.core.config import SPRING_DAMPING, SPRING_STEP_MS, SPRING_STIFFNESS

EasingFn = Callable[[float], float]

CUBIC_BEZIER_PRESETS: dict[str, tuple[float, float, float, float]] = {
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
}


def linear(t: float) -> float:
    return min(1.0, max(0.0, t))


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFn:
    """
    CSS cubic-bezier(x1, y1, x2, y2). Solves x(s) = t with Newton steps,
    falling back to bisection when the derivative vanishes.
    """

    def bez(s: float, p1: float, p2: float) -> float:
        return 3 * (1 - s) ** 2 * s * p1 + 3 * (1 - s) * s ** 2 * p2 + s ** 3

    def bez_d(s: float, p1: float, p2: float) -> float:
        return 3 * (1 - s) ** 2 * p1 + 6 * (1 - s) * s * (p2 - p1) + 3 * s ** 2 * (1 - p2)

    def solve_s(t: float) -> float:
        s = t
        for _ in range(8):
            err = bez(s, x1, x2) - t
            if abs(err) < 1e-7:
                return s
            d = bez_d(s, x1, x2)
            if abs(d) < 1e-6:
                break
            s -= err / d
            if not 0.0 <= s <= 1.0:
                break
        lo, hi = 0.0, 1.0
        s = t
        for _ in range(50):
            x = bez(s, x1, x2)
            if abs(x - t) < 1e-7:
                break
            if x < t:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2.0
        return s

    def ease(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return bez(solve_s(t), y1, y2)

    return ease


@lru_cache(maxsize=8)
def _spring_curve(stiffness: float, damping: float, step_ms: float) -> tuple[np.ndarray, np.ndarray]:
    """Integrate a unit spring from 0 until it settles at 1; returns (times, positions) normalized to [0, 1]."""
    dt = step_ms / 1000.0
    x, v = 0.0, 0.0
    xs = [0.0]
    for _ in range(10_000):
        a = -stiffness * (x - 1.0) - damping * v
        v += a * dt
        x += v * dt
        xs.append(x)
        if abs(x - 1.0) < 1e-4 and abs(v) < 1e-4:
            break
    xs[-1] = 1.0
    positions = np.asarray(xs, dtype=float)
    times = np.linspace(0.0, 1.0, len(positions))
    return times, positions


def spring(
    stiffness: float = SPRING_STIFFNESS,
    damping: float = SPRING_DAMPING,
    step_ms: float = SPRING_STEP_MS,
) -> EasingFn:
    """Damped spring resampled onto the run's duration; may overshoot 1 before settling."""
    times, positions = _spring_curve(stiffness, damping, step_ms)

    def ease(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return float(np.interp(t, times, positions))

    return ease


def get_easing(easing: str | EasingFn) -> EasingFn:
    """Resolve an easing name or pass a callable through. Unknown names raise ValueError."""
    if callable(easing):
        return easing
    if easing == "linear":
        return linear
    if easing == "spring":
        return spring()
    if easing in CUBIC_BEZIER_PRESETS:
        return cubic_bezier(*CUBIC_BEZIER_PRESETS[easing])
    raise ValueError(f"Unknown easing: {easing!r}")
