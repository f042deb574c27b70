# piechart/core/error_codes.py
"""
Structured diagnostic codes for layout and animation.
Layout never raises on numeric input; these keys travel in PieLayout.warnings
and are mapped to user-facing messages here.
"""

# Known diagnostic keys
EMPTY_DATA = "empty_data"
NON_POSITIVE_SUM = "non_positive_sum"
INVALID_GEOMETRY = "invalid_geometry"
INFEASIBLE_MIN_ANGLE = "infeasible_min_angle"
STALE_COMPLETION = "stale_completion"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    EMPTY_DATA: "No data items; nothing to draw.",
    NON_POSITIVE_SUM: "Values sum to zero or less; nothing to draw.",
    INVALID_GEOMETRY: "Center or radius is not a finite number. Resolve percentages before layout.",
    INFEASIBLE_MIN_ANGLE: "Minimum angle times item count exceeds the total span; sectors fall below the minimum.",
    STALE_COMPLETION: "An animation completion arrived for a run that is no longer current.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given diagnostic key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
