# piechart/core/types.py
"""
Dataclasses for layout options, sector and label geometry, animation state,
and the shape-override variant handed to painters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Mapping, Union

from piechart.core.config import (
    DEFAULT_ANIMATION_ACTIVE,
    DEFAULT_ANIMATION_BEGIN_MS,
    DEFAULT_ANIMATION_DURATION_MS,
    DEFAULT_ANIMATION_EASING,
    DEFAULT_CX,
    DEFAULT_CY,
    DEFAULT_END_ANGLE,
    DEFAULT_INNER_RADIUS,
    DEFAULT_LABEL_OFFSET_RADIUS,
    DEFAULT_MIN_ANGLE,
    DEFAULT_NAME_KEY,
    DEFAULT_OUTER_RADIUS,
    DEFAULT_START_ANGLE,
    DEFAULT_VALUE_KEY,
)


TextAnchor = Literal["start", "middle", "end"]
Point = tuple[float, float]
EasingFn = Callable[[float], float]


@dataclass(frozen=True)
class PieOptions:
    """
    Layout parameters. cx, cy and radii must already be resolved to pixels;
    percentage strings are left as-is and make layout produce nothing.
    """
    cx: float | str = DEFAULT_CX
    cy: float | str = DEFAULT_CY
    inner_radius: float | str = DEFAULT_INNER_RADIUS
    outer_radius: float | str = DEFAULT_OUTER_RADIUS
    start_angle: float = DEFAULT_START_ANGLE
    end_angle: float = DEFAULT_END_ANGLE
    min_angle: float = DEFAULT_MIN_ANGLE
    value_key: str = DEFAULT_VALUE_KEY
    name_key: str = DEFAULT_NAME_KEY
    max_radius: float | None = None


@dataclass(frozen=True)
class SectorGeometry:
    """
    One annular wedge per data item, in input order.
    (start_angle, end_angle) is the directed arc in traversal order.
    """
    index: int
    cx: float
    cy: float
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    mid_angle: float
    percent: float
    value: float
    name: Any
    payload: Any = field(repr=False, compare=False)

    @property
    def span(self) -> float:
        """Unsigned angular width (deg)."""
        return abs(self.end_angle - self.start_angle)


@dataclass(frozen=True)
class LabelGeometry:
    """Label anchor, alignment and leader-line polyline for one sector."""
    index: int
    x: float
    y: float
    text_anchor: TextAnchor
    leader_line: tuple[Point, ...]
    text: Any = None

    @property
    def anchor(self) -> Point:
        return (self.x, self.y)


@dataclass
class AnimationState:
    """Written only by RevealAnimator; read by the label path."""
    is_animation_finished: bool = False


@dataclass(frozen=True)
class AnimationOptions:
    is_active: bool = DEFAULT_ANIMATION_ACTIVE
    begin_ms: float = DEFAULT_ANIMATION_BEGIN_MS
    duration_ms: float = DEFAULT_ANIMATION_DURATION_MS
    easing: str | EasingFn = DEFAULT_ANIMATION_EASING


@dataclass(frozen=True)
class RevealTarget:
    """Requested end geometry of a reveal run."""
    cx: float
    cy: float
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    max_radius: float | None = None


@dataclass(frozen=True)
class ClipSample:
    """Interpolated clip sector for one animation tick. progress is the eased value."""
    cx: float
    cy: float
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    progress: float


# ----- Shape overrides: one tagged variant, resolved by highlight.resolve_shape -----

@dataclass(frozen=True)
class DefaultShape:
    """Paint the computed geometry unchanged."""


@dataclass(frozen=True)
class ExplicitShape:
    """A painter-native shape object; props are layered over the computed ones."""
    shape: Any
    props: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DerivedShape:
    """fn(props) returns either a props mapping (merged) or a painter-native shape."""
    fn: Callable[[dict[str, Any]], Any]


@dataclass(frozen=True)
class StyleOverride:
    style: Mapping[str, Any]


ShapeOverride = Union[DefaultShape, ExplicitShape, DerivedShape, StyleOverride]

ShapeKind = Literal["default", "explicit", "derived", "style"]


@dataclass
class ResolvedShape:
    """What a painter receives: final props and, for explicit/derived shapes, the shape object."""
    kind: ShapeKind
    props: dict[str, Any]
    shape: Any = None


@dataclass(frozen=True)
class LabelOptions:
    """
    Label configuration. label/label_line accept a ShapeOverride or loose input
    (mapping, callable, object); label=False disables labels entirely
    and label_line=False disables leader lines.
    """
    offset_radius: float = DEFAULT_LABEL_OFFSET_RADIUS
    label: Any = None
    label_line: Any = True
    style: Mapping[str, Any] = field(default_factory=dict)
    line_style: Mapping[str, Any] = field(default_factory=dict)
