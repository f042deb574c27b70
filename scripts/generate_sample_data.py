#!/usr/bin/env python3
"""
Generate sample pie datasets for the CLI.

Categories:
01-05: Uniform shares
06-10: Long-tail shares (one dominant item, many slivers; try --min-angle)
11-13: Edge cases (single item, zero values, negative sum)
14-15: CSV with a custom value column
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

import numpy as np

# Output directory
OUTPUT_DIR = Path(__file__).parent.parent / "data" / "samples"
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)


def save_json(filename: str, items: list[dict]) -> None:
    path = OUTPUT_DIR / filename
    path.write_text(json.dumps(items, indent=2), encoding="utf-8")
    print(f"  Created: {filename}")


def save_csv(filename: str, items: list[dict], fields: list[str]) -> None:
    path = OUTPUT_DIR / filename
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fields)
        writer.writeheader()
        writer.writerows(items)
    print(f"  Created: {filename}")


def uniform_items(n: int, value: float = 10.0) -> list[dict]:
    return [{"name": f"Item {i + 1}", "value": value} for i in range(n)]


def long_tail_items(seed: int, n: int, alpha: float = 1.5) -> list[dict]:
    """Zipf-like shares: first item dominates, the tail gets tiny slices."""
    rng = np.random.default_rng(seed)
    ranks = np.arange(1, n + 1, dtype=float)
    values = 1000.0 / ranks ** alpha * rng.uniform(0.9, 1.1, size=n)
    return [{"name": f"Group {i + 1}", "value": round(float(v), 3)} for i, v in enumerate(values)]


def main() -> None:
    """Generate all sample files."""
    print(f"Generating samples in: {OUTPUT_DIR}")
    print("=" * 50)

    file_num = 1

    print("\n[01-05] Uniform shares...")
    for n in (2, 3, 4, 6, 12):
        save_json(f"pie_{file_num:02d}_uniform_{n}.json", uniform_items(n))
        file_num += 1

    print("\n[06-10] Long-tail shares...")
    for i, n in enumerate((5, 8, 12, 20, 40)):
        save_json(f"pie_{file_num:02d}_longtail_{n}.json", long_tail_items(seed=100 + i, n=n))
        file_num += 1

    print("\n[11-13] Edge cases...")
    save_json(f"pie_{file_num:02d}_single.json", [{"name": "Only", "value": 1}])
    file_num += 1
    save_json(f"pie_{file_num:02d}_all_zero.json", [{"name": "A", "value": 0}, {"name": "B", "value": 0}])
    file_num += 1
    save_json(f"pie_{file_num:02d}_negative_sum.json", [{"name": "A", "value": -5}, {"name": "B", "value": 2}])
    file_num += 1

    print("\n[14-15] CSV with custom value column...")
    for n in (4, 9):
        items = [{"label": row["name"], "share": row["value"]} for row in long_tail_items(seed=500 + n, n=n)]
        save_csv(f"pie_{file_num:02d}_share_{n}.csv", items, ["label", "share"])
        file_num += 1

    print("\n" + "=" * 50)
    print(f"Generated {file_num - 1} sample files in {OUTPUT_DIR}")


if __name__ == "__main__":
    main()
