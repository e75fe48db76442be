"""
Unified constants for genders, venues and scoring backends.

This module provides a single source of truth for the enum values
shared by the scoring feature, its schemas and the CLI.
"""

from enum import Enum
from typing import Optional


class Gender(str, Enum):
    """
    Gender category of a scoring table.

    Values match the keys of the reference data files.
    """
    MEN = "men"
    WOMEN = "women"

    @classmethod
    def parse(cls, value) -> Optional["Gender"]:
        """
        Parse a gender from user-facing input.

        Accepts the enum itself, "men"/"women", "M"/"F" and
        "male"/"female" (case-insensitive).

        Returns:
            Gender, or None if the value is not recognized
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        return GENDER_ALIASES.get(value.strip().lower())


GENDER_ALIASES: dict[str, Gender] = {
    "men": Gender.MEN,
    "m": Gender.MEN,
    "male": Gender.MEN,
    "women": Gender.WOMEN,
    "f": Gender.WOMEN,
    "w": Gender.WOMEN,
    "female": Gender.WOMEN,
}


class Venue(str, Enum):
    """
    Where the result was achieved.

    ROAD also covers results with no venue information.
    """
    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    ROAD = "road"

    @classmethod
    def from_track_type(cls, track_type: Optional[str]) -> "Venue":
        """Map the stored track type label ("Pista Cubierta", ...) to a venue."""
        if not track_type:
            return cls.ROAD
        return TRACK_TYPE_TO_VENUE.get(track_type, cls.ROAD)


# Track/surface labels as stored by the race results form
TRACK_TYPE_INDOOR = "Pista Cubierta"
TRACK_TYPE_OUTDOOR = "Aire Libre"
SURFACE_ROAD = "Asfalto"

TRACK_TYPE_TO_VENUE: dict[str, Venue] = {
    TRACK_TYPE_INDOOR: Venue.INDOOR,
    TRACK_TYPE_OUTDOOR: Venue.OUTDOOR,
    SURFACE_ROAD: Venue.ROAD,
}


class ScoringBackend(str, Enum):
    """Which scorer owns a canonical event."""
    PARAMETRIC = "parametric"   # a*t^2 + b*t + c (or a*t + b)
    TABULAR = "tabular"         # Interpolation over breakpoints
