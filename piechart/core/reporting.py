# piechart/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json and run_metadata.json.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from piechart.core.chart import PieLayout
from piechart.core.config import (
    ARC_SEGMENTS_PER_TURN,
    DEFAULT_LABEL_OFFSET_RADIUS,
    MAX_SPAN_DEG,
    REPORTS_DIR,
)
from piechart.core.error_codes import user_message
from piechart.core.types import AnimationOptions, ClipSample, PieOptions, SectorGeometry


def _jsonable(value: Any) -> Any:
    """Payload values that json cannot encode are stringified."""
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


def sector_to_dict(sector: SectorGeometry) -> dict:
    return {
        "index": sector.index,
        "name": _jsonable(sector.name),
        "value": sector.value,
        "percent": sector.percent,
        "center": {"x": sector.cx, "y": sector.cy},
        "inner_radius": sector.inner_radius,
        "outer_radius": sector.outer_radius,
        "start_angle": sector.start_angle,
        "end_angle": sector.end_angle,
        "mid_angle": sector.mid_angle,
        "payload": _jsonable(sector.payload),
    }


def layout_to_dict(layout: PieLayout, clip: ClipSample | None = None) -> dict:
    """Structure for layout.json. labels is null while hidden."""
    out: dict[str, Any] = {
        "clip_path_id": layout.clip_path_id,
        "active_index": layout.active_index,
        "sectors": [sector_to_dict(s) for s in layout.sectors],
        "labels": None,
        "warnings": [{"code": w, "message": user_message(w)} for w in layout.warnings],
    }
    if layout.labels is not None:
        out["labels"] = [
            {
                "index": lab.index,
                "anchor": {"x": lab.x, "y": lab.y},
                "text_anchor": lab.text_anchor,
                "leader_line": [{"x": x, "y": y} for x, y in lab.leader_line],
                "text": _jsonable(lab.text),
            }
            for lab in layout.labels
        ]
    if clip is not None:
        out["clip"] = asdict(clip)
    return out


def run_metadata_dict(
    run_name: str,
    data_path: str,
    options: PieOptions,
    animation: AnimationOptions,
    width_px: int,
    height_px: int,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    anim = asdict(animation)
    if callable(anim.get("easing")):
        anim["easing"] = getattr(anim["easing"], "__name__", "custom")
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "data_path": data_path,
        "canvas": {"width_px": width_px, "height_px": height_px},
        "options": asdict(options),
        "animation": anim,
        "config": {
            "MAX_SPAN_DEG": MAX_SPAN_DEG,
            "DEFAULT_LABEL_OFFSET_RADIUS": DEFAULT_LABEL_OFFSET_RADIUS,
            "ARC_SEGMENTS_PER_TURN": ARC_SEGMENTS_PER_TURN,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(report_dir: Path, layout: PieLayout, clip: ClipSample | None = None) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    path.write_text(json.dumps(layout_to_dict(layout, clip), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    data_path: str,
    options: PieOptions,
    animation: AnimationOptions,
    width_px: int,
    height_px: int,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, data_path, options, animation, width_px, height_px)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
