# piechart/core/labels.py
"""
Label placement: anchor on the ray through each sector's mid angle at
outer_radius + offset_radius, a straight leader line from the outer edge to
the anchor, and text alignment away from the vertical axis through cx.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from piechart.core.geometry import polar_to_cartesian
from piechart.core.highlight import resolve_shape, sector_props
from piechart.core.types import (
    LabelGeometry,
    LabelOptions,
    ResolvedShape,
    SectorGeometry,
    TextAnchor,
)


def get_text_anchor(x: float, cx: float) -> TextAnchor:
    if x > cx:
        return "start"
    if x < cx:
        return "end"
    return "middle"


def _offset_radius(options: LabelOptions | None) -> float:
    if options is None or options.offset_radius is None:
        return LabelOptions().offset_radius
    return float(options.offset_radius)


def place_labels(
    sectors: Sequence[SectorGeometry],
    options: LabelOptions | None = None,
) -> list[LabelGeometry]:
    """One LabelGeometry per sector, in sector order."""
    offset = _offset_radius(options)
    out: list[LabelGeometry] = []
    for s in sectors:
        end_x, end_y = polar_to_cartesian(s.cx, s.cy, s.outer_radius + offset, s.mid_angle)
        start = polar_to_cartesian(s.cx, s.cy, s.outer_radius, s.mid_angle)
        out.append(
            LabelGeometry(
                index=s.index,
                x=end_x,
                y=end_y,
                text_anchor=get_text_anchor(end_x, s.cx),
                leader_line=(start, (end_x, end_y)),
                text=s.value,
            )
        )
    return out


def label_props(
    sector: SectorGeometry,
    label: LabelGeometry,
    options: LabelOptions,
    base_style: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Text props: sector props without stroke, caller style, then the placement itself."""
    props = sector_props(sector, base_style)
    props["stroke"] = "none"
    props.update(options.style)
    props.update(
        {
            "index": label.index,
            "text_anchor": label.text_anchor,
            "x": label.x,
            "y": label.y,
            "text": label.text,
        }
    )
    return props


def line_props(
    sector: SectorGeometry,
    label: LabelGeometry,
    options: LabelOptions,
    base_style: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Leader-line props: no fill, stroked in the sector's fill colour unless overridden."""
    props = sector_props(sector, base_style)
    props["stroke"] = props.get("fill")
    props["fill"] = "none"
    props.update(options.line_style)
    props["points"] = list(label.leader_line)
    return props


def resolve_label_shapes(
    sectors: Sequence[SectorGeometry],
    labels: Sequence[LabelGeometry],
    options: LabelOptions | None = None,
    base_style: Mapping[str, Any] | None = None,
) -> list[tuple[ResolvedShape, ResolvedShape | None]]:
    """
    Per label, the resolved text shape and leader-line shape.
    Empty when options.label is False; the line is None when options.label_line is False.
    """
    opts = options or LabelOptions()
    if opts.label is False:
        return []
    by_index = {s.index: s for s in sectors}
    out: list[tuple[ResolvedShape, ResolvedShape | None]] = []
    for lab in labels:
        sector = by_index[lab.index]
        text_shape = resolve_shape(opts.label, label_props(sector, lab, opts, base_style))
        line_shape = None
        if opts.label_line is not False and opts.label_line is not None:
            line_shape = resolve_shape(opts.label_line, line_props(sector, lab, opts, base_style))
        out.append((text_shape, line_shape))
    return out


def label_text(value: Any) -> str:
    """Display string for a label value; whole floats drop the trailing .0."""
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
