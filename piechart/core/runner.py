# piechart/core/runner.py
"""
CLI entrypoint: load data items, resolve canvas-relative geometry, lay out the
pie, play the reveal on a synthetic clock, then render and export.
Outputs go to reports/<run_name>/.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from piechart.core.animation import FrameDriver
from piechart.core.chart import PieChart
from piechart.core.config import (
    DEFAULT_ANIMATION_BEGIN_MS,
    DEFAULT_ANIMATION_DURATION_MS,
    DEFAULT_ANIMATION_EASING,
    DEFAULT_CX,
    DEFAULT_CY,
    DEFAULT_END_ANGLE,
    DEFAULT_FRAME_RATE,
    DEFAULT_INNER_RADIUS,
    DEFAULT_LABEL_OFFSET_RADIUS,
    DEFAULT_MIN_ANGLE,
    DEFAULT_NAME_KEY,
    DEFAULT_OUTER_RADIUS,
    DEFAULT_START_ANGLE,
    DEFAULT_VALUE_KEY,
    LOG_LEVEL,
    RENDER_HEIGHT_PX,
    RENDER_WIDTH_PX,
    REPORTS_DIR,
)
from piechart.core.error_codes import user_message
from piechart.core.geometry import resolve_percent
from piechart.core.io import load_items
from piechart.core.render import render_debug, render_pie
from piechart.core.render_svg import export_pie_svg
from piechart.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)
from piechart.core.types import AnimationOptions, LabelOptions, PieOptions

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pie chart layout and reveal preview.")
    p.add_argument("--data", type=str, required=True, help="Data file (.json or .csv)")
    p.add_argument("--value-key", type=str, default=DEFAULT_VALUE_KEY, dest="value_key", help="Numeric field")
    p.add_argument("--name-key", type=str, default=DEFAULT_NAME_KEY, dest="name_key", help="Display-name field")
    p.add_argument("--width", type=int, default=RENDER_WIDTH_PX, help="Canvas width (px)")
    p.add_argument("--height", type=int, default=RENDER_HEIGHT_PX, help="Canvas height (px)")
    p.add_argument("--cx", type=str, default=str(DEFAULT_CX), help="Center x (px or %% of width)")
    p.add_argument("--cy", type=str, default=str(DEFAULT_CY), help="Center y (px or %% of height)")
    p.add_argument("--inner-radius", type=str, default=str(DEFAULT_INNER_RADIUS), dest="inner_radius",
                   help="Inner radius (px or %% of half the smaller side)")
    p.add_argument("--outer-radius", type=str, default=str(DEFAULT_OUTER_RADIUS), dest="outer_radius",
                   help="Outer radius (px or %% of half the smaller side)")
    p.add_argument("--start-angle", type=float, default=DEFAULT_START_ANGLE, dest="start_angle", help="Start angle (deg)")
    p.add_argument("--end-angle", type=float, default=DEFAULT_END_ANGLE, dest="end_angle", help="End angle (deg)")
    p.add_argument("--min-angle", type=float, default=DEFAULT_MIN_ANGLE, dest="min_angle", help="Minimum angle per item (deg)")
    p.add_argument("--max-radius", type=float, default=None, dest="max_radius", help="Reveal clip radius cap")
    p.add_argument("--no-labels", action="store_false", dest="labels", help="Disable labels")
    p.add_argument("--no-label-lines", action="store_false", dest="label_lines", help="Disable leader lines")
    p.add_argument("--offset-radius", type=float, default=DEFAULT_LABEL_OFFSET_RADIUS, dest="offset_radius",
                   help="Label distance beyond the outer radius")
    p.add_argument("--active-index", type=int, default=None, dest="active_index", help="Highlighted sector index")
    p.add_argument("--no-animation", action="store_false", dest="animate", help="Disable the reveal animation")
    p.add_argument("--animation-begin", type=float, default=DEFAULT_ANIMATION_BEGIN_MS, dest="animation_begin")
    p.add_argument("--animation-duration", type=float, default=DEFAULT_ANIMATION_DURATION_MS, dest="animation_duration")
    p.add_argument("--animation-easing", type=str, default=DEFAULT_ANIMATION_EASING, dest="animation_easing")
    p.add_argument("--fps", type=float, default=DEFAULT_FRAME_RATE, help="Synthetic frame rate")
    p.add_argument("--frame-ms", type=float, default=None, dest="frame_ms",
                   help="Also render the reveal frame at this elapsed time")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    return p.parse_args(argv)


def resolve_options(args: argparse.Namespace) -> PieOptions:
    """Resolve percentage geometry against the canvas."""
    max_r = min(args.width, args.height) / 2.0
    return PieOptions(
        cx=resolve_percent(args.cx, args.width),
        cy=resolve_percent(args.cy, args.height),
        inner_radius=resolve_percent(args.inner_radius, max_r),
        outer_radius=resolve_percent(args.outer_radius, max_r),
        start_angle=args.start_angle,
        end_angle=args.end_angle,
        min_angle=args.min_angle,
        value_key=args.value_key,
        name_key=args.name_key,
        max_radius=args.max_radius,
    )


def run(argv: list[str] | None = None) -> Path:
    """Run the full pipeline; returns the report directory."""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    items = load_items(args.data, value_key=args.value_key, repo_root=repo_root)
    options = resolve_options(args)
    animation = AnimationOptions(
        is_active=args.animate,
        begin_ms=args.animation_begin,
        duration_ms=args.animation_duration,
        easing=args.animation_easing,
    )
    labels = LabelOptions(offset_radius=args.offset_radius, label_line=args.label_lines) if args.labels else None
    chart = PieChart(options, labels=labels, animation=animation)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    layout = chart.layout(items, animation_id=args.run_name, active_index=args.active_index)
    for w in layout.warnings:
        logger.warning("%s: %s", w, user_message(w))

    if args.frame_ms is not None and not layout.is_empty:
        frame = chart.tick(args.frame_ms)
        render_pie(layout, report_dir / "frame.png", clip=frame, width_px=args.width, height_px=args.height)
        export_pie_svg(layout, report_dir / "frame.svg", clip=frame, width_px=args.width, height_px=args.height)

    final_clip = None
    if not layout.is_empty:
        samples = FrameDriver(chart.animator, fps=args.fps).run(chart.animation_end_callback)
        logger.info("reveal played over %d frames", len(samples))
        final_clip = samples[-1] if samples else None
        layout = chart.layout(items, animation_id=args.run_name, active_index=args.active_index)

    write_layout_json(report_dir, layout, final_clip)
    write_run_metadata_json(
        report_dir, args.run_name, args.data, options, animation, args.width, args.height
    )
    render_pie(layout, report_dir / "pie.png", clip=final_clip, width_px=args.width, height_px=args.height)
    render_debug(layout, report_dir / "debug.png", clip=final_clip, width_px=args.width, height_px=args.height)
    export_pie_svg(layout, report_dir / "pie.svg", clip=final_clip, width_px=args.width, height_px=args.height)

    for name in ("layout.json", "run_metadata.json", "pie.png", "debug.png", "pie.svg"):
        print(report_dir / name)
    return report_dir


def main() -> None:
    run()


if __name__ == "__main__":
    main()
