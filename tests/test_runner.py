# tests/test_runner.py
"""
CLI end to end: data file in, layout.json / PNG / SVG out under reports/<run_name>/.
"""

from __future__ import annotations

import json
from pathlib import Path

from piechart.core.runner import run


def test_runner_writes_outputs(tmp_path: Path) -> None:
    data = tmp_path / "data.json"
    data.write_text(
        json.dumps([{"name": "A", "value": 400}, {"name": "B", "value": 300}, {"name": "C", "value": 300}]),
        encoding="utf-8",
    )
    report_dir = run([
        "--data", str(data),
        "--repo-root", str(tmp_path),
        "--run-name", "t1",
        "--width", "300",
        "--height", "200",
        "--inner-radius", "20%",
        "--min-angle", "5",
        "--animation-begin", "0",
        "--animation-duration", "200",
        "--fps", "20",
        "--frame-ms", "100",
        "--active-index", "1",
    ])
    assert report_dir == (tmp_path / "reports" / "t1").resolve()
    for name in ("layout.json", "run_metadata.json", "pie.png", "debug.png", "pie.svg", "frame.png", "frame.svg"):
        assert (report_dir / name).exists(), name

    layout = json.loads((report_dir / "layout.json").read_text(encoding="utf-8"))
    assert layout["sectors"][0]["center"] == {"x": 150.0, "y": 100.0}
    assert layout["sectors"][0]["outer_radius"] == 80.0
    assert layout["sectors"][0]["inner_radius"] == 20.0
    assert layout["active_index"] == 1
    assert layout["labels"] is not None and len(layout["labels"]) == 3
    assert layout["clip"]["progress"] == 1.0


def test_runner_empty_data(tmp_path: Path) -> None:
    data = tmp_path / "data.csv"
    data.write_text("name,value\na,0\n", encoding="utf-8")
    report_dir = run(["--data", str(data), "--repo-root", str(tmp_path), "--no-animation"])
    layout = json.loads((report_dir / "layout.json").read_text(encoding="utf-8"))
    assert layout["sectors"] == []
    assert layout["warnings"][0]["code"] == "non_positive_sum"
