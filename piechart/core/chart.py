# piechart/core/chart.py
"""
Pie chart orchestration: allocate sectors, resolve the active shape, drive the
reveal animation, and gate labels on its completion. Returns plain data for an
external painter; nothing here draws.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Callable

from piechart.core.allocate import allocate_sectors, diagnose_layout
from piechart.core.animation import RevealAnimator, build_reveal_target
from piechart.core.highlight import resolve_sector_shapes, select_override
from piechart.core.labels import place_labels, resolve_label_shapes
from piechart.core.types import (
    AnimationOptions,
    ClipSample,
    LabelGeometry,
    LabelOptions,
    PieOptions,
    ResolvedShape,
    SectorGeometry,
)

logger = logging.getLogger(__name__)


@dataclass
class PieLayout:
    """Result of one layout pass. labels is None while hidden (disabled or reveal running)."""
    sectors: list[SectorGeometry]
    sector_shapes: list[ResolvedShape]
    labels: list[LabelGeometry] | None
    label_shapes: list[tuple[ResolvedShape, ResolvedShape | None]] | None
    active_index: int | None
    clip_path_id: str
    warnings: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.sectors


def new_clip_path_id() -> str:
    """Unique per chart instance; no process-wide counter involved."""
    return f"clipPath-{uuid.uuid4().hex[:12]}"


def _coerce_label_options(labels: LabelOptions | Mapping[str, Any] | bool | None) -> LabelOptions | None:
    if labels is None or labels is False:
        return None
    if labels is True:
        return LabelOptions()
    if isinstance(labels, Mapping):
        labels = LabelOptions(**labels)
    if labels.label is False:
        return None
    return labels


class PieChart:
    """
    One chart instance. layout() is recomputed wholesale on every call;
    the only state kept between calls is the reveal animator.
    """

    def __init__(
        self,
        options: PieOptions,
        labels: LabelOptions | Mapping[str, Any] | bool | None = None,
        animation: AnimationOptions | None = None,
        clip_path_id: str | None = None,
        base_style: Mapping[str, Any] | None = None,
    ) -> None:
        self.options = options
        self.label_options = _coerce_label_options(labels)
        self.animator = RevealAnimator(animation)
        self.clip_path_id = clip_path_id or new_clip_path_id()
        self.base_style = dict(base_style) if base_style is not None else None
        self._on_animation_end: Callable[[], bool] | None = None

    def update_options(self, **changes: Any) -> None:
        """Replace layout options; takes effect on the next layout()."""
        self.options = replace(self.options, **changes)

    def layout(
        self,
        items: Sequence[Any],
        animation_id: Any = None,
        active_index: int | None = None,
        active_shape: Any = None,
    ) -> PieLayout:
        """
        Compute sectors and shapes. A changed animation_id starts a new reveal run.
        Degenerate input gives an empty layout carrying diagnostic keys.
        """
        warnings = diagnose_layout(items, self.options)
        sectors = allocate_sectors(items, self.options)
        if not sectors:
            logger.debug("layout: empty (%s)", ", ".join(warnings) or "no sectors")
            return PieLayout([], [], None, None, None, self.clip_path_id, warnings)

        callback = self.animator.sync(animation_id, build_reveal_target(self.options))
        if callback is not None:
            self._on_animation_end = callback

        selected = select_override(sectors, active_index)
        sector_shapes = resolve_sector_shapes(sectors, selected, active_shape, self.base_style)

        labels: list[LabelGeometry] | None = None
        label_shapes = None
        if self.label_options is not None and self.animator.labels_visible:
            labels = place_labels(sectors, self.label_options)
            label_shapes = resolve_label_shapes(sectors, labels, self.label_options, self.base_style)

        return PieLayout(
            sectors=sectors,
            sector_shapes=sector_shapes,
            labels=labels,
            label_shapes=label_shapes,
            active_index=selected,
            clip_path_id=self.clip_path_id,
            warnings=warnings,
        )

    @property
    def animation_end_callback(self) -> Callable[[], bool] | None:
        """Completion hook for the current run, to hand to the frame driver."""
        return self._on_animation_end

    def tick(self, elapsed_ms: float) -> ClipSample | None:
        return self.animator.sample(elapsed_ms)

    def on_animation_end(self, run_id: Any) -> bool:
        return self.animator.complete(run_id)


def sector_event_handlers(
    handlers: Mapping[str, Callable[..., Any]],
    sector: SectorGeometry,
) -> dict[str, Callable[[Any], Any]]:
    """
    Bind pointer handlers (e.g. on_click, on_mouse_enter) to a sector so the
    external hit-testing layer only needs to call handler(event).
    """
    bound: dict[str, Callable[[Any], Any]] = {}
    for name, fn in handlers.items():
        if not callable(fn):
            continue

        def call(event: Any = None, _fn: Callable[..., Any] = fn) -> Any:
            return _fn(sector, sector.index, event)

        bound[name] = call
    return bound
