# tests/test_animation.py
"""
Reveal animation: state transitions, run-id guarding against stale completions,
clip interpolation over begin delay and duration, and the synthetic frame driver.
"""

from __future__ import annotations

import logging

import pytest

from piechart.core.animation import (
    FrameClock,
    FrameDriver,
    RevealAnimator,
    interpolate_clip,
)
from piechart.core.error_codes import STALE_COMPLETION
from piechart.core.types import AnimationOptions, RevealTarget

TARGET = RevealTarget(cx=100.0, cy=100.0, inner_radius=20.0, outer_radius=80.0, start_angle=0.0, end_angle=360.0)
LINEAR = AnimationOptions(is_active=True, begin_ms=0.0, duration_ms=1000.0, easing="linear")


def test_initial_state_not_finished() -> None:
    anim = RevealAnimator()
    assert anim.is_animation_finished is False
    assert anim.labels_visible is False
    assert anim.sample(0.0) is None


def test_completion_finishes_once() -> None:
    anim = RevealAnimator(LINEAR)
    on_end = anim.start("v1", TARGET)
    assert anim.is_animation_finished is False
    assert on_end() is True
    assert anim.is_animation_finished is True
    assert anim.labels_visible is True
    assert on_end() is False
    assert anim.is_animation_finished is True


def test_new_run_resets_state() -> None:
    anim = RevealAnimator(LINEAR)
    anim.start("v1", TARGET)()
    assert anim.is_animation_finished is True
    anim.start("v2", TARGET)
    assert anim.is_animation_finished is False


def test_stale_completion_after_new_run_is_ignored() -> None:
    anim = RevealAnimator(LINEAR)
    old_end = anim.start("v1", TARGET)
    new_end = anim.start("v2", TARGET)
    assert old_end() is False
    assert anim.is_animation_finished is False
    assert anim.complete("v1") is False
    assert anim.is_animation_finished is False
    assert new_end() is True
    assert anim.is_animation_finished is True


def test_stale_completion_with_reused_run_id_is_ignored() -> None:
    anim = RevealAnimator(LINEAR)
    first = anim.start(1, TARGET)
    anim.start(2, TARGET)
    third = anim.start(1, TARGET)
    assert first() is False
    assert anim.is_animation_finished is False
    assert third() is True


def test_stale_completion_is_logged_with_diagnostic_key(caplog: pytest.LogCaptureFixture) -> None:
    anim = RevealAnimator(LINEAR)
    old_end = anim.start("v1", TARGET)
    anim.start("v2", TARGET)
    with caplog.at_level(logging.WARNING, logger="piechart.core.animation"):
        assert old_end() is False
    assert any(STALE_COMPLETION in rec.getMessage() for rec in caplog.records)


def test_complete_by_run_id() -> None:
    anim = RevealAnimator(LINEAR)
    assert anim.complete("nothing") is False
    anim.start("v1", TARGET)
    assert anim.complete("v2") is False
    assert anim.complete("v1") is True


def test_sync_only_restarts_on_new_id() -> None:
    anim = RevealAnimator(LINEAR)
    assert anim.sync("v1", TARGET) is not None
    anim.complete("v1")
    bigger = RevealTarget(100.0, 100.0, 20.0, 90.0, 0.0, 360.0)
    assert anim.sync("v1", bigger) is None
    assert anim.is_animation_finished is True
    assert anim.target == bigger
    assert anim.sync("v2", bigger) is not None
    assert anim.is_animation_finished is False


def test_disabled_animation_is_finished_immediately() -> None:
    anim = RevealAnimator(AnimationOptions(is_active=False))
    anim.start("v1", TARGET)
    assert anim.is_animation_finished is True
    assert anim.labels_visible is True
    sample = anim.sample(0.0)
    assert sample is not None
    assert sample.end_angle == 360.0 and sample.outer_radius == 80.0


def test_sample_respects_begin_delay() -> None:
    anim = RevealAnimator(AnimationOptions(begin_ms=400.0, duration_ms=1000.0, easing="linear"))
    anim.start(0, TARGET)
    s = anim.sample(200.0)
    assert s is not None
    assert s.end_angle == 0.0 and s.outer_radius == 0.0 and s.inner_radius == 0.0
    mid = anim.sample(900.0)
    assert mid is not None
    assert mid.progress == pytest.approx(0.5)
    assert mid.end_angle == pytest.approx(180.0)
    assert mid.outer_radius == pytest.approx(40.0)
    assert mid.inner_radius == pytest.approx(10.0)
    end = anim.sample(5000.0)
    assert end is not None
    assert (end.end_angle, end.outer_radius, end.inner_radius) == (360.0, 80.0, 20.0)


def test_clip_starts_from_max_radius_cap() -> None:
    capped = RevealTarget(100.0, 100.0, 0.0, 80.0, 0.0, -180.0, max_radius=50.0)
    start = interpolate_clip(capped, 0.0)
    assert start.outer_radius == 50.0
    assert start.end_angle == 0.0
    end = interpolate_clip(capped, 1.0)
    assert end.outer_radius == 80.0
    assert end.end_angle == -180.0
    assert end.start_angle == 0.0


def test_invalid_options_raise() -> None:
    with pytest.raises(ValueError):
        RevealAnimator(AnimationOptions(duration_ms=-1.0))
    with pytest.raises(ValueError):
        RevealAnimator(AnimationOptions(easing="bouncy"))


def test_frame_clock_fixed_rate() -> None:
    clock = FrameClock(fps=50)
    assert clock.t_ms() == 0.0
    clock.tick()
    clock.tick()
    assert clock.frame_index == 2
    assert clock.t_ms() == pytest.approx(40.0)
    with pytest.raises(ValueError):
        FrameClock(fps=0)


def test_frame_driver_plays_to_completion() -> None:
    anim = RevealAnimator(AnimationOptions(begin_ms=100.0, duration_ms=500.0, easing="linear"))
    on_end = anim.start("run", TARGET)
    samples = FrameDriver(anim, fps=20).run(on_end)
    assert len(samples) == 13  # 0..600 ms in 50 ms steps
    angles = [s.end_angle for s in samples]
    assert angles == sorted(angles)
    assert samples[0].progress == 0.0
    assert samples[-1].progress == 1.0
    assert anim.is_animation_finished is True


def test_driver_of_superseded_run_cannot_finish_new_run() -> None:
    anim = RevealAnimator(LINEAR)
    old_end = anim.start("v1", TARGET)
    frames = FrameDriver(anim, fps=10).frames(old_end)
    next(frames)
    anim.start("v2", TARGET)
    for _ in frames:
        pass
    assert anim.is_animation_finished is False
