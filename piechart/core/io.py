# piechart/core/io.py
"""
Load data items from JSON (list of objects, or {"data": [...]}) or CSV.
CSV values under the value key are parsed as floats.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from piechart.core.config import DEFAULT_VALUE_KEY


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def parse_items_json(text: str) -> list[dict[str, Any]]:
    """Parse a JSON list of objects, or an object with a 'data' list."""
    data = json.loads(text)
    if isinstance(data, dict):
        data = data.get("data")
    if not isinstance(data, list):
        raise ValueError("Expected a JSON list of objects or {'data': [...]}")
    if not all(isinstance(d, dict) for d in data):
        raise ValueError("Every data item must be a JSON object")
    return data


def _to_number(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def parse_items_csv(text: str, value_key: str = DEFAULT_VALUE_KEY) -> list[dict[str, Any]]:
    """Rows as dicts; value_key column becomes float (None when unparseable)."""
    rows = list(csv.DictReader(text.splitlines()))
    if rows and value_key not in rows[0]:
        raise ValueError(f"CSV has no column {value_key!r}")
    out: list[dict[str, Any]] = []
    for r in rows:
        item: dict[str, Any] = dict(r)
        item[value_key] = _to_number(r.get(value_key))
        out.append(item)
    return out


def load_items(
    path: str | Path,
    value_key: str = DEFAULT_VALUE_KEY,
    repo_root: Path | None = None,
) -> list[dict[str, Any]]:
    """
    Load data items from a .json or .csv file.
    Raises FileNotFoundError if path is missing, ValueError on malformed content.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Data file not found: {resolved}")
    text = resolved.read_text(encoding="utf-8")
    if resolved.suffix.lower() == ".csv":
        return parse_items_csv(text, value_key=value_key)
    return parse_items_json(text)
