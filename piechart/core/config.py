# piechart/core/config.py
"""
Central configuration for pie layout, labels and the reveal animation.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Layout defaults -----
DEFAULT_CX: float | str = "50%"
"""Abscissa of the pole. Percentages are resolved against the canvas width by the caller."""

DEFAULT_CY: float | str = "50%"
"""Ordinate of the pole. Percentages are resolved against the canvas height by the caller."""

DEFAULT_START_ANGLE: float = 0.0
"""Start angle (deg) of the first sector."""

DEFAULT_END_ANGLE: float = 360.0
"""End angle (deg); its sign relative to the start angle sets the drawing direction."""

DEFAULT_INNER_RADIUS: float | str = 0.0
DEFAULT_OUTER_RADIUS: float | str = "80%"
"""Outer radius; percentages are resolved against half the smaller canvas side."""

DEFAULT_MIN_ANGLE: float = 0.0
"""Minimum angular budget (deg) given to every item before proportional allocation."""

DEFAULT_VALUE_KEY: str = "value"
DEFAULT_NAME_KEY: str = "name"

MAX_SPAN_DEG: float = 360.0
"""Total span is capped at one full turn."""

ANGLE_TOLERANCE_DEG: float = 1e-9
"""Tolerance (deg) when comparing angular budgets."""

# ----- Presentation defaults -----
DEFAULT_FILL: str = "#808080"
DEFAULT_STROKE: str = "#fff"

# ----- Labels -----
DEFAULT_LABEL_OFFSET_RADIUS: float = 20.0
"""Distance from the outer radius to the label anchor."""

# ----- Reveal animation -----
DEFAULT_ANIMATION_ACTIVE: bool = True
DEFAULT_ANIMATION_BEGIN_MS: float = 400.0
DEFAULT_ANIMATION_DURATION_MS: float = 1500.0
DEFAULT_ANIMATION_EASING: str = "ease"

DEFAULT_FRAME_RATE: float = 60.0
"""Frames per second used by the synthetic frame driver."""

SPRING_STIFFNESS: float = 100.0
SPRING_DAMPING: float = 8.0
SPRING_STEP_MS: float = 17.0
"""Spring easing integrates x'' = -k(x - 1) - c x' with this step."""

# ----- Rendering -----
ARC_SEGMENTS_PER_TURN: int = 180
"""Polyline resolution for arcs: segments per full 360 deg turn."""

RENDER_WIDTH_PX: int = 500
RENDER_HEIGHT_PX: int = 400

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for the CLI entry point. Set env LOG_LEVEL=DEBUG for development."""
