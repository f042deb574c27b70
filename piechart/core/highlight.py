# piechart/core/highlight.py
"""
Active-sector selection and shape-override resolution.
Overrides are one tagged variant (DefaultShape | ExplicitShape | DerivedShape |
StyleOverride) resolved by resolve_shape; computed props are the base layer and
caller-supplied fields win.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, fields
from typing import Any

from piechart.core.config import DEFAULT_FILL, DEFAULT_STROKE
from piechart.core.types import (
    DefaultShape,
    DerivedShape,
    ExplicitShape,
    ResolvedShape,
    SectorGeometry,
    ShapeOverride,
    StyleOverride,
)

BASE_STYLE: dict[str, Any] = {"fill": DEFAULT_FILL, "stroke": DEFAULT_STROKE}

_SECTOR_FIELDS = tuple(f.name for f in fields(SectorGeometry) if f.name != "payload")


def select_override(sectors: Sequence[SectorGeometry], active_index: int | None) -> int | None:
    """Index of the sector to render with the active shape, or None."""
    if active_index is None or isinstance(active_index, bool):
        return None
    for s in sectors:
        if s.index == active_index:
            return s.index
    return None


def coerce_override(option: Any) -> ShapeOverride:
    """
    Map loose caller input onto the variant: None/True/False -> default,
    mapping -> style override, callable -> derived, other objects -> explicit.
    """
    if isinstance(option, (DefaultShape, ExplicitShape, DerivedShape, StyleOverride)):
        return option
    if option is None or option is True or option is False:
        return DefaultShape()
    if isinstance(option, Mapping):
        return StyleOverride(dict(option))
    if callable(option):
        return DerivedShape(option)
    return ExplicitShape(option)


def resolve_shape(option: Any, props: Mapping[str, Any]) -> ResolvedShape:
    """Single dispatch from an override (or loose input) to painter-ready props."""
    override = coerce_override(option)
    base = dict(props)
    if isinstance(override, StyleOverride):
        return ResolvedShape("style", {**base, **override.style})
    if isinstance(override, ExplicitShape):
        return ResolvedShape("explicit", {**base, **override.props}, override.shape)
    if isinstance(override, DerivedShape):
        result = override.fn(dict(base))
        if isinstance(result, Mapping):
            return ResolvedShape("derived", {**base, **result})
        return ResolvedShape("derived", base, result)
    return ResolvedShape("default", base)


def sector_props(sector: SectorGeometry, base_style: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Props for painting one sector: style, then payload fields, then geometry."""
    props: dict[str, Any] = dict(BASE_STYLE if base_style is None else base_style)
    if isinstance(sector.payload, Mapping):
        props.update(sector.payload)
    elif hasattr(sector.payload, "__dataclass_fields__"):
        props.update(asdict(sector.payload))
    props.update({name: getattr(sector, name) for name in _SECTOR_FIELDS})
    props["payload"] = sector.payload
    return props


def resolve_sector_shapes(
    sectors: Sequence[SectorGeometry],
    active_index: int | None = None,
    active_shape: Any = None,
    base_style: Mapping[str, Any] | None = None,
) -> list[ResolvedShape]:
    """One ResolvedShape per sector; only the active one sees active_shape."""
    selected = select_override(sectors, active_index)
    return [
        resolve_shape(active_shape if s.index == selected else None, sector_props(s, base_style))
        for s in sectors
    ]
