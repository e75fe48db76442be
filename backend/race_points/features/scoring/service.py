"""
Points Service

Orchestrates the scoring components:
- Input validation
- Event resolution (label + venue -> canonical event)
- Dispatch to the backend registered for the event
- Typed unscorable results

This is the main entry point for points calculations.
"""

import logging
import math
from functools import lru_cache
from typing import Optional, Union

from race_points.config import settings
from race_points.shared.constants import Gender, ScoringBackend, Venue

from .calculators import ParametricScorer, TabularScorer
from .events import is_event_valid_for_gender, resolve_event
from .models import (
    CanonicalEvent,
    Points,
    RaceResult,
    ScoreResult,
    Unscorable,
    UnscorableReason,
)
from .tables import ScoringTables, get_scoring_tables

logger = logging.getLogger(__name__)


class PointsService:
    """
    Main service for converting race results into points.

    Stateless per call: the tables and scorers are read-only after
    construction, so a single instance can serve concurrent callers.

    Example usage:
        service = PointsService()
        result = service.compute_points(
            RaceResult("5K", 0, 20, 0, Gender.MEN, Venue.OUTDOOR)
        )
        # Points(value=361)
    """

    def __init__(
        self,
        tables: Optional[ScoringTables] = None,
        clamp_parametric: Optional[bool] = None,
    ):
        """
        Initialize points service.

        Args:
            tables: Reference tables (default: process-wide packaged tables)
            clamp_parametric: Floor parametric scores at 0
                              (default: settings.clamp_parametric_points)
        """
        self.tables = tables if tables is not None else get_scoring_tables()
        if clamp_parametric is None:
            clamp_parametric = settings.clamp_parametric_points

        self.parametric = ParametricScorer(self.tables, clamp_at_zero=clamp_parametric)
        self.tabular = TabularScorer(self.tables)

    def compute_points(self, result: RaceResult) -> ScoreResult:
        """
        Score a race result.

        Never raises for bad input; failures come back as Unscorable
        with one of three reasons (invalid input, unknown event, no
        reference data for the gender/event).
        """
        problem = _validate(result)
        if problem:
            return self._unscorable(UnscorableReason.INVALID_INPUT, problem)
        gender = Gender.parse(result.gender)

        event = resolve_event(result.distance_label, result.venue)
        if event is None:
            return self._unscorable(
                UnscorableReason.UNKNOWN_EVENT,
                f"Unknown distance label: {result.distance_label!r}",
            )
        if not is_event_valid_for_gender(event, gender):
            return self._unscorable(
                UnscorableReason.NO_REFERENCE_DATA,
                f"{event.key} is {event.only_gender.value}-only",
            )

        value = self._scorer_for(event).score(event.key, gender, result.total_seconds)
        if value is None:
            return self._unscorable(
                UnscorableReason.NO_REFERENCE_DATA,
                f"No {event.backend.value} data for {gender.value} {event.key}",
            )

        logger.debug(
            f"{result.distance_label} ({result.venue.value}) -> {event.key}: "
            f"{result.total_seconds}s = {value} pts"
        )
        return Points(value=value, event=event)

    def points_for_entry(
        self,
        distance: str,
        hours: int,
        minutes: int,
        seconds: float,
        gender: Union[Gender, str],
        track_type: Optional[str] = None,
    ) -> int:
        """
        Display points for a stored race result row.

        Args:
            distance: Stored distance label
            hours, minutes, seconds: Stored time components
            gender: "men"/"women" (or any Gender.parse alias)
            track_type: Stored track type ("Pista Cubierta", "Aire Libre")

        Returns:
            Points, or 0 if the result is unscorable
        """
        result = RaceResult(
            distance_label=distance,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            gender=gender,
            venue=Venue.from_track_type(track_type),
        )
        return self.compute_points(result).display_points

    def time_for_points(
        self,
        distance_label: str,
        gender: Union[Gender, str],
        points: float,
        venue: Venue = Venue.ROAD,
    ) -> Optional[float]:
        """
        Time in seconds needed to score `points` at the given event.

        Returns:
            Seconds (0.01 precision), or None if the event is unknown,
            has no data for the gender, or the target is unreachable
        """
        parsed_gender = Gender.parse(gender)
        event = resolve_event(distance_label, venue)
        if parsed_gender is None or event is None:
            return None
        return self._scorer_for(event).time_for_points(event.key, parsed_gender, points)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _scorer_for(self, event: CanonicalEvent) -> Union[ParametricScorer, TabularScorer]:
        if event.backend == ScoringBackend.PARAMETRIC:
            return self.parametric
        return self.tabular

    def _unscorable(self, reason: UnscorableReason, detail: str) -> Unscorable:
        logger.warning(f"Cannot score result ({reason.value}): {detail}")
        return Unscorable(reason=reason, detail=detail)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate(result: RaceResult) -> Optional[str]:
    """Return a description of the first input problem, or None."""
    if not isinstance(result.distance_label, str) or not result.distance_label:
        return "Distance label is empty"

    if not _is_int(result.hours) or result.hours < 0:
        return f"Hours must be a non-negative integer, got {result.hours!r}"
    if not _is_int(result.minutes) or not 0 <= result.minutes < 60:
        return f"Minutes must be an integer in 0-59, got {result.minutes!r}"
    if (
        not isinstance(result.seconds, (int, float))
        or isinstance(result.seconds, bool)
        or not math.isfinite(result.seconds)
        or not 0 <= result.seconds < 60
    ):
        return f"Seconds must be a number in [0, 60), got {result.seconds!r}"

    if Gender.parse(result.gender) is None:
        return f"Unknown gender: {result.gender!r}"
    if not isinstance(result.venue, Venue):
        return f"Unknown venue: {result.venue!r}"
    return None


@lru_cache(maxsize=1)
def get_points_service() -> PointsService:
    """Process-wide service over the packaged tables."""
    return PointsService()


def compute_points(result: RaceResult) -> ScoreResult:
    """Score a race result with the process-wide service."""
    return get_points_service().compute_points(result)


def points_for_entry(
    distance: str,
    hours: int,
    minutes: int,
    seconds: float,
    gender: Union[Gender, str],
    track_type: Optional[str] = None,
) -> int:
    """Display points (0 when unscorable) with the process-wide service."""
    return get_points_service().points_for_entry(
        distance, hours, minutes, seconds, gender, track_type
    )
