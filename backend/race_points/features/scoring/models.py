"""Data models for points scoring (frozen dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from race_points.shared.constants import Gender, ScoringBackend, Venue
from race_points.shared.formatters import total_seconds


@dataclass(frozen=True)
class RaceResult:
    """One performance to score. A value type: no identity, no persistence."""

    distance_label: str  # "5K", "Media maratón", "1500m"
    hours: int
    minutes: int  # 0-59
    seconds: float  # 0-59.99, fractional for sprints
    gender: Gender | str  # Gender or anything Gender.parse accepts
    venue: Venue = Venue.ROAD

    @property
    def total_seconds(self) -> float:
        return total_seconds(self.hours, self.minutes, self.seconds)


@dataclass(frozen=True)
class CanonicalEvent:
    """Backend-agnostic event key with its fixed scoring backend."""

    key: str  # "track5000", "Road 10 km", "200m sh"
    backend: ScoringBackend
    indoor: bool = False
    only_gender: Gender | None = None  # Set for men-only/women-only events


@dataclass(frozen=True)
class CoefficientEntry:
    """Quadratic (a, b, c) or linear (a, b) scoring coefficients."""

    coefficients: tuple[float, ...]

    @property
    def is_linear(self) -> bool:
        return len(self.coefficients) == 2


@dataclass(frozen=True)
class ScoreBreakpoint:
    """One (time, points) anchor of a tabular scoring curve."""

    time_seconds: float
    points: int


class UnscorableReason(str, Enum):
    """Why a result could not be scored."""
    INVALID_INPUT = "invalid_input"
    UNKNOWN_EVENT = "unknown_event"
    NO_REFERENCE_DATA = "no_reference_data"


@dataclass(frozen=True)
class Points:
    """A successfully computed score."""

    value: int
    event: CanonicalEvent | None = field(default=None, compare=False)

    @property
    def is_scorable(self) -> bool:
        return True

    @property
    def display_points(self) -> int:
        return self.value


@dataclass(frozen=True)
class Unscorable:
    """A typed failure: the engine could not produce a score."""

    reason: UnscorableReason
    detail: str = ""

    @property
    def is_scorable(self) -> bool:
        return False

    @property
    def display_points(self) -> int:
        # The UI shows unscorable results as "0 pts"
        return 0


ScoreResult = Union[Points, Unscorable]
