"""
Shared utilities (NOT business logic).

Usage:
    from race_points.shared import Gender, Venue, round_half_away
    from race_points.shared.formatters import format_mark
"""
from .formatters import (
    total_seconds,
    format_time,
    format_mark,
    parse_mark,
    split_mark,
)
from .formulas import (
    round_half_away,
    polynomial_points,
    polynomial_time,
    lerp,
)
from .constants import (
    Gender,
    Venue,
    ScoringBackend,
    GENDER_ALIASES,
    TRACK_TYPE_INDOOR,
    TRACK_TYPE_OUTDOOR,
    SURFACE_ROAD,
    TRACK_TYPE_TO_VENUE,
)

__all__ = [
    # formatters
    "total_seconds",
    "format_time",
    "format_mark",
    "parse_mark",
    "split_mark",
    # formulas
    "round_half_away",
    "polynomial_points",
    "polynomial_time",
    "lerp",
    # constants
    "Gender",
    "Venue",
    "ScoringBackend",
    "GENDER_ALIASES",
    "TRACK_TYPE_INDOOR",
    "TRACK_TYPE_OUTDOOR",
    "SURFACE_ROAD",
    "TRACK_TYPE_TO_VENUE",
]
