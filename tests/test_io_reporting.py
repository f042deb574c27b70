# tests/test_io_reporting.py
"""
Data loading (JSON/CSV) and layout.json / run_metadata.json output.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from piechart.core.chart import PieChart
from piechart.core.error_codes import EMPTY_DATA
from piechart.core.io import load_items, parse_items_csv, parse_items_json
from piechart.core.reporting import (
    ensure_report_dir,
    layout_to_dict,
    write_layout_json,
    write_run_metadata_json,
)
from piechart.core.types import AnimationOptions, PieOptions

OPTS = PieOptions(cx=100.0, cy=100.0, inner_radius=0.0, outer_radius=50.0)


def test_parse_items_json_forms() -> None:
    assert parse_items_json('[{"value": 1}]') == [{"value": 1}]
    assert parse_items_json('{"data": [{"value": 2}]}') == [{"value": 2}]
    with pytest.raises(ValueError):
        parse_items_json('{"rows": []}')
    with pytest.raises(ValueError):
        parse_items_json("[1, 2]")


def test_parse_items_csv_numeric_values() -> None:
    items = parse_items_csv("name,value\na,1.5\nb,x\n")
    assert items == [{"name": "a", "value": 1.5}, {"name": "b", "value": None}]
    with pytest.raises(ValueError):
        parse_items_csv("name,amount\na,1\n")


def test_load_items_from_files(tmp_path: Path) -> None:
    (tmp_path / "d.json").write_text('[{"name": "a", "value": 3}]', encoding="utf-8")
    (tmp_path / "d.csv").write_text("name,share\na,4\n", encoding="utf-8")
    assert load_items("d.json", repo_root=tmp_path) == [{"name": "a", "value": 3}]
    assert load_items(tmp_path / "d.csv", value_key="share") == [{"name": "a", "share": 4.0}]
    with pytest.raises(FileNotFoundError):
        load_items(tmp_path / "missing.json")


def test_layout_dict_and_files(tmp_path: Path) -> None:
    chart = PieChart(OPTS, labels=True, animation=AnimationOptions(is_active=False), clip_path_id="c1")
    layout = chart.layout([{"name": "a", "value": 1}, {"name": "b", "value": 1}])
    data = layout_to_dict(layout)
    assert data["clip_path_id"] == "c1"
    assert [s["end_angle"] for s in data["sectors"]] == pytest.approx([180.0, 360.0])
    assert data["labels"][0]["text_anchor"] in ("start", "middle", "end")
    assert len(data["labels"][0]["leader_line"]) == 2

    report_dir = ensure_report_dir(tmp_path, "r1")
    path = write_layout_json(report_dir, layout)
    assert json.loads(path.read_text(encoding="utf-8"))["sectors"][1]["name"] == "b"

    meta_path = write_run_metadata_json(report_dir, "r1", "d.json", OPTS, AnimationOptions(), 400, 300)
    meta = json.loads(meta_path.read_text(encoding="utf-8"))
    assert meta["run_name"] == "r1"
    assert meta["options"]["outer_radius"] == 50.0
    assert meta["animation"]["easing"] == "ease"


def test_empty_layout_reports_warning_messages() -> None:
    layout = PieChart(OPTS).layout([])
    data = layout_to_dict(layout)
    assert data["sectors"] == [] and data["labels"] is None
    assert data["warnings"][0]["code"] == EMPTY_DATA
    assert data["warnings"][0]["message"]
