# piechart/core/render.py
"""
Matplotlib PNG painter: sectors (clipped against the reveal sample), leader
lines and labels, plus a debug overlay. Coordinates are screen pixels, y down.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any, Mapping

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from shapely.geometry.base import BaseGeometry

from piechart.core.chart import PieLayout
from piechart.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from piechart.core.geometry import polar_to_cartesian, sector_polygon
from piechart.core.labels import label_text
from piechart.core.types import ClipSample, ResolvedShape

_HA = {"start": "left", "middle": "center", "end": "right"}


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.set_xlim(0, width_px)
    ax.set_ylim(height_px, 0)  # screen space: y grows downward
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    return fig, ax


def _save(fig: plt.Figure, output_path: str | Path) -> None:
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white")
    plt.close(fig)


def clip_polygon(clip: ClipSample) -> BaseGeometry:
    return sector_polygon(
        clip.cx, clip.cy, clip.inner_radius, clip.outer_radius, clip.start_angle, clip.end_angle
    )


def shape_geometry(shape: ResolvedShape) -> BaseGeometry:
    """Geometry to paint: an explicit/derived shapely shape, else the wedge described by props."""
    if isinstance(shape.shape, BaseGeometry):
        return shape.shape
    p = shape.props
    return sector_polygon(
        float(p["cx"]),
        float(p["cy"]),
        float(p["inner_radius"]),
        float(p["outer_radius"]),
        float(p["start_angle"]),
        float(p["end_angle"]),
    )


def _fill_geometry(ax: plt.Axes, geom: BaseGeometry, props: Mapping[str, Any], **kwargs: Any) -> None:
    if geom is None or geom.is_empty:
        return
    parts = [geom] if geom.geom_type == "Polygon" else list(getattr(geom, "geoms", []))
    for g in parts:
        if g.geom_type != "Polygon" or g.is_empty:
            continue
        xy = np.array(g.exterior.coords)
        ax.fill(
            xy[:, 0], xy[:, 1],
            facecolor=props.get("fill", "none"),
            edgecolor=props.get("stroke", "none"),
            linewidth=1,
            **kwargs,
        )
        for hole in g.interiors:
            hxy = np.array(hole.coords)
            ax.fill(hxy[:, 0], hxy[:, 1], facecolor="white", edgecolor=props.get("stroke", "none"), linewidth=1)


def draw_layout(ax: plt.Axes, layout: PieLayout, clip: ClipSample | None = None) -> None:
    """Paint sectors then labels onto ax."""
    clip_geom = clip_polygon(clip) if clip is not None else None
    for shape in layout.sector_shapes:
        geom = shape_geometry(shape)
        if clip_geom is not None:
            geom = geom.intersection(clip_geom)
        _fill_geometry(ax, geom, shape.props, zorder=2)

    for text_shape, line_shape in layout.label_shapes or []:
        if line_shape is not None:
            pts = np.array(line_shape.props["points"])
            ax.plot(pts[:, 0], pts[:, 1], color=line_shape.props.get("stroke") or "black", linewidth=1, zorder=3)
        tp = text_shape.props
        ax.text(
            tp["x"], tp["y"], label_text(tp.get("text")),
            ha=_HA.get(tp.get("text_anchor", "middle"), "center"),
            va="center",
            fontsize=tp.get("font_size", 10),
            color=tp.get("color", "black"),
            zorder=4,
        )


def render_pie(
    layout: PieLayout,
    output_path: str | Path,
    clip: ClipSample | None = None,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
) -> None:
    """Render the layout to PNG. With clip, sectors are cut to the reveal sample."""
    fig, ax = _new_fig(width_px, height_px)
    draw_layout(ax, layout, clip)
    _save(fig, output_path)


def render_debug(
    layout: PieLayout,
    output_path: str | Path,
    clip: ClipSample | None = None,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
) -> None:
    """Render with overlays: clip outline, mid-angle rays and label anchors."""
    fig, ax = _new_fig(width_px, height_px)
    draw_layout(ax, layout, None)

    if clip is not None:
        cg = clip_polygon(clip)
        if not cg.is_empty:
            xy = np.array(cg.exterior.coords)
            ax.plot(xy[:, 0], xy[:, 1], linestyle="--", linewidth=1, color="orange", zorder=5)

    for s in layout.sectors:
        x, y = polar_to_cartesian(s.cx, s.cy, s.outer_radius, s.mid_angle)
        ax.plot([s.cx, x], [s.cy, y], linestyle=":", linewidth=0.8, color="gray", zorder=5)

    if layout.labels:
        ax.scatter([lab.x for lab in layout.labels], [lab.y for lab in layout.labels], s=8, color="red", zorder=6)

    _save(fig, output_path)
