# piechart/core/animation.py
"""
Progressive-reveal animation.

RevealAnimator is a two-state machine (animating / finished) held in
AnimationState. Each run is identified by a caller-supplied run id; completion
callbacks are bound to the run (and generation) they were issued under, so a
late completion from an older run is discarded instead of finishing the new one.

The reveal itself is an interpolation of a clip sector from
{outer: min(outer, max_radius) or 0, inner: 0, end_angle: start_angle}
to {outer, inner, end_angle}, sampled as a pure function of elapsed time.
FrameClock/FrameDriver step it at a fixed frame rate for tests and the CLI.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from piechart.core.config import DEFAULT_FRAME_RATE
from piechart.core.easing import get_easing
from piechart.core.error_codes import STALE_COMPLETION, user_message
from piechart.core.types import (
    AnimationOptions,
    AnimationState,
    ClipSample,
    PieOptions,
    RevealTarget,
)

logger = logging.getLogger(__name__)

_NO_RUN = object()


def build_reveal_target(options: PieOptions) -> RevealTarget:
    """Clip target from resolved layout options (angles as requested, not capped)."""
    return RevealTarget(
        cx=float(options.cx),
        cy=float(options.cy),
        inner_radius=float(options.inner_radius),
        outer_radius=float(options.outer_radius),
        start_angle=float(options.start_angle),
        end_angle=float(options.end_angle),
        max_radius=options.max_radius,
    )


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def interpolate_clip(target: RevealTarget, progress: float) -> ClipSample:
    """Clip sector at eased progress (0 = collapsed at start_angle, 1 = full target)."""
    if target.max_radius is not None:
        from_outer = min(target.outer_radius, target.max_radius)
    else:
        from_outer = 0.0
    return ClipSample(
        cx=target.cx,
        cy=target.cy,
        inner_radius=_lerp(0.0, target.inner_radius, progress),
        outer_radius=_lerp(from_outer, target.outer_radius, progress),
        start_angle=target.start_angle,
        end_angle=_lerp(target.start_angle, target.end_angle, progress),
        progress=progress,
    )


class RevealAnimator:
    """
    Owns AnimationState. start() begins a run and returns its completion
    callback; complete() finishes the current run only.
    """

    def __init__(self, options: AnimationOptions | None = None) -> None:
        opts = options or AnimationOptions()
        if opts.duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {opts.duration_ms}")
        if opts.begin_ms < 0:
            raise ValueError(f"begin_ms must be >= 0, got {opts.begin_ms}")
        self.options = opts
        self._easing = get_easing(opts.easing)
        self.state = AnimationState()
        self._run_id: Any = _NO_RUN
        self._generation = 0
        self._target: RevealTarget | None = None

    @property
    def run_id(self) -> Any:
        return None if self._run_id is _NO_RUN else self._run_id

    @property
    def target(self) -> RevealTarget | None:
        return self._target

    @property
    def is_animation_finished(self) -> bool:
        return self.state.is_animation_finished

    @property
    def labels_visible(self) -> bool:
        return (not self.options.is_active) or self.state.is_animation_finished

    @property
    def end_ms(self) -> float:
        return self.options.begin_ms + self.options.duration_ms

    def start(self, run_id: Any, target: RevealTarget) -> Callable[[], bool]:
        """
        Begin a new run. Any callback from an earlier run becomes stale.
        With animation disabled the run is finished immediately.
        """
        self._generation += 1
        self._run_id = run_id
        self._target = target
        self.state.is_animation_finished = not self.options.is_active
        generation = self._generation
        logger.debug("reveal run %r started (generation %d)", run_id, generation)

        def on_animation_end() -> bool:
            return self._finish(run_id, generation)

        return on_animation_end

    def sync(self, run_id: Any, target: RevealTarget) -> Callable[[], bool] | None:
        """
        Start a run if run_id differs from the current one (or none has run yet);
        otherwise refresh the target in place. Returns the new callback or None.
        """
        if self._run_id is _NO_RUN or run_id != self._run_id:
            return self.start(run_id, target)
        self._target = target
        return None

    def complete(self, run_id: Any) -> bool:
        """Finish the current run if run_id matches it. Returns True on the transition."""
        return self._finish(run_id, self._generation)

    def _finish(self, run_id: Any, generation: int) -> bool:
        if self._run_id is _NO_RUN or generation != self._generation or run_id != self._run_id:
            logger.warning(
                "%s: %s (run %r, current run %r)",
                STALE_COMPLETION, user_message(STALE_COMPLETION), run_id, self.run_id,
            )
            return False
        if self.state.is_animation_finished:
            return False
        self.state.is_animation_finished = True
        logger.debug("reveal run %r finished", run_id)
        return True

    def progress(self, elapsed_ms: float) -> float:
        """Eased progress at elapsed_ms since the run started (begin delay included)."""
        if not self.options.is_active:
            return 1.0
        t = elapsed_ms - self.options.begin_ms
        if t <= 0:
            return 0.0
        if self.options.duration_ms == 0 or t >= self.options.duration_ms:
            return 1.0
        return self._easing(t / self.options.duration_ms)

    def sample(self, elapsed_ms: float) -> ClipSample | None:
        """Clip geometry for this tick, or None before the first run."""
        if self._target is None:
            return None
        return interpolate_clip(self._target, self.progress(elapsed_ms))


class FrameClock:
    """Fixed-rate timeline: t = frame_index / fps, independent of wall time."""

    def __init__(self, fps: float = DEFAULT_FRAME_RATE) -> None:
        _fps = float(fps)
        if _fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = _fps
        self._frame_index = 0

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def t_ms(self) -> float:
        return 1000.0 * self._frame_index / self._fps

    def tick(self) -> None:
        self._frame_index += 1


class FrameDriver:
    """Steps an animator to the end of its run, then fires the completion callback."""

    def __init__(self, animator: RevealAnimator, fps: float = DEFAULT_FRAME_RATE) -> None:
        self.animator = animator
        self.fps = fps

    def frames(self, on_end: Callable[[], Any] | None = None) -> Iterator[ClipSample]:
        clock = FrameClock(self.fps)
        end_ms = self.animator.end_ms if self.animator.options.is_active else 0.0
        while True:
            t = min(clock.t_ms(), end_ms)
            sample = self.animator.sample(t)
            if sample is not None:
                yield sample
            if t >= end_ms:
                break
            clock.tick()
        if on_end is not None:
            on_end()

    def run(self, on_end: Callable[[], Any] | None = None) -> list[ClipSample]:
        return list(self.frames(on_end))
