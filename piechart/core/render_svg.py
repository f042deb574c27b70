# piechart/core/render_svg.py
"""
Export a pie layout as self-contained SVG: a <clipPath> carrying the reveal
sample under the chart's clip id, clipped sector paths, leader lines and labels.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from piechart.core.chart import PieLayout
from piechart.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from piechart.core.labels import label_text
from piechart.core.render import clip_polygon, shape_geometry
from piechart.core.types import ClipSample

SVG_NS = "http://www.w3.org/2000/svg"

# Props that become SVG presentation attributes when present
_SHAPE_ATTRS = ("fill", "stroke", "stroke-width", "opacity", "fill-opacity", "stroke-dasharray")
_TEXT_ATTRS = ("fill", "stroke", "font-family", "font-size", "font-weight", "opacity")


def _ring_d(coords: list[tuple[float, float]]) -> str:
    parts = [f"M {coords[0][0]:.4f} {coords[0][1]:.4f}"]
    for x, y in coords[1:]:
        parts.append(f"L {x:.4f} {y:.4f}")
    parts.append("Z")
    return " ".join(parts)


def _poly_to_svg_d(geom: BaseGeometry) -> str:
    """Polygon exterior and holes as SVG path d; use with fill-rule evenodd."""
    if geom is None or geom.is_empty:
        return ""
    if isinstance(geom, Polygon):
        rings = [list(geom.exterior.coords)] + [list(r.coords) for r in geom.interiors]
        return " ".join(_ring_d(r) for r in rings if len(r) >= 2)
    if isinstance(geom, MultiPolygon):
        return " ".join(_poly_to_svg_d(p) for p in geom.geoms if not p.is_empty)
    return ""


def _points_attr(points: list[tuple[float, float]]) -> str:
    return " ".join(f"{x:.4f},{y:.4f}" for x, y in points)


def _style_attrs(props: dict, keys: tuple[str, ...]) -> dict[str, str]:
    out: dict[str, str] = {}
    for key in keys:
        value = props.get(key, props.get(key.replace("-", "_")))
        if value is not None:
            out[key] = str(value)
    return out


def build_pie_svg(
    layout: PieLayout,
    clip: ClipSample | None = None,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
) -> ET.Element:
    """SVG element tree for the layout. Sectors reference the clip path only when clip is given."""
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": str(width_px),
            "height": str(height_px),
            "viewBox": f"0 0 {width_px} {height_px}",
        },
    )
    pie = ET.SubElement(root, "g", {"class": "pie"})

    sector_group_attrs = {"class": "pie-sectors"}
    if clip is not None:
        defs = ET.SubElement(pie, "defs")
        clip_el = ET.SubElement(defs, "clipPath", {"id": layout.clip_path_id})
        ET.SubElement(clip_el, "path", {"d": _poly_to_svg_d(clip_polygon(clip))})
        sector_group_attrs["clip-path"] = f"url(#{layout.clip_path_id})"
    sectors_g = ET.SubElement(pie, "g", sector_group_attrs)

    for shape in layout.sector_shapes:
        d = _poly_to_svg_d(shape_geometry(shape))
        if not d:
            continue
        attrs = {
            "class": "pie-sector",
            "data-index": str(shape.props["index"]),
            "d": d,
            "fill-rule": "evenodd",
        }
        attrs.update(_style_attrs(shape.props, _SHAPE_ATTRS))
        if shape.kind != "default":
            attrs["class"] += " pie-sector-active"
        ET.SubElement(sectors_g, "path", attrs)

    if layout.label_shapes:
        labels_g = ET.SubElement(pie, "g", {"class": "pie-labels"})
        for text_shape, line_shape in layout.label_shapes:
            item = ET.SubElement(labels_g, "g", {"class": "pie-label"})
            if line_shape is not None:
                line_attrs = {"class": "pie-label-line", "points": _points_attr(line_shape.props["points"])}
                line_attrs.update(_style_attrs(line_shape.props, ("fill", "stroke", "stroke-width")))
                ET.SubElement(item, "polyline", line_attrs)
            tp = text_shape.props
            text_attrs = {
                "class": "pie-label-text",
                "x": f"{tp['x']:.4f}",
                "y": f"{tp['y']:.4f}",
                "text-anchor": str(tp["text_anchor"]),
                "alignment-baseline": "middle",
            }
            text_attrs.update(_style_attrs(tp, _TEXT_ATTRS))
            text = ET.SubElement(item, "text", text_attrs)
            text.text = label_text(tp.get("text"))

    return root


def export_pie_svg(
    layout: PieLayout,
    out_path: str | Path,
    clip: ClipSample | None = None,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
) -> Path:
    """Write the SVG file and return its path."""
    root = build_pie_svg(layout, clip, width_px, height_px)
    out_str = ET.tostring(root, encoding="unicode", method="xml")
    path = Path(out_path)
    path.write_text('<?xml version="1.0" encoding="UTF-8"?>\n' + out_str, encoding="utf-8")
    return path
