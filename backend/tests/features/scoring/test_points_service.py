"""
Tests for PointsService.

Tests the main orchestrator: validation, resolution, dispatch and the
three distinguishable unscorable reasons.
"""

import logging

import pytest

from race_points.features.scoring import (
    Points,
    PointsService,
    RaceResult,
    Unscorable,
    UnscorableReason,
    compute_points,
    points_for_entry,
)
from race_points.shared.constants import Gender, ScoringBackend, Venue


def _result(distance="5K", hours=0, minutes=20, seconds=0, gender=Gender.MEN, venue=Venue.OUTDOOR):
    return RaceResult(distance, hours, minutes, seconds, gender, venue)


# =============================================================================
# Scoring
# =============================================================================

class TestComputePoints:

    def test_5k_example(self, service):
        """5K in 20:00 (men, outdoor) -> track5000 -> 361 pts."""
        score = service.compute_points(_result())
        assert score == Points(361)
        assert score.event.key == "track5000"
        assert score.event.backend == ScoringBackend.PARAMETRIC

    def test_module_level_helper(self):
        assert compute_points(_result()) == Points(361)

    @pytest.mark.parametrize("distance,hours,minutes", [
        ("5K", 0, 25),
        ("10K", 0, 40),
        ("Half Marathon", 1, 30),
        ("Media maratón", 1, 30),
        ("Marathon", 3, 0),
        ("Maratón", 2, 30),
    ])
    def test_road_races(self, service, distance, hours, minutes):
        score = service.compute_points(_result(distance, hours, minutes, 0, venue=Venue.ROAD))
        assert score.is_scorable
        assert score.value > 0

    @pytest.mark.parametrize("distance,minutes,seconds", [
        ("100m", 0, 10),
        ("1500m", 4, 0),
        ("5000m", 15, 0),
    ])
    def test_outdoor_track(self, service, distance, minutes, seconds):
        score = service.compute_points(_result(distance, 0, minutes, seconds))
        assert score.value > 0

    @pytest.mark.parametrize("distance,minutes,seconds,key", [
        ("60m", 0, 7, "60m"),
        ("200m", 0, 22, "200m sh"),
        ("1500m", 4, 0, "1500m sh"),
    ])
    def test_indoor_track(self, service, distance, minutes, seconds, key):
        score = service.compute_points(_result(distance, 0, minutes, seconds, venue=Venue.INDOOR))
        assert score.value > 0
        assert score.event.key == key
        assert score.event.backend == ScoringBackend.TABULAR

    def test_fractional_seconds(self, service):
        """60m in 6.5s."""
        score = service.compute_points(_result("60m", 0, 0, 6.5, venue=Venue.INDOOR))
        assert score.value > 1000

    def test_gender_changes_score(self, service):
        men = service.compute_points(_result(gender=Gender.MEN))
        women = service.compute_points(_result(gender=Gender.WOMEN))
        assert men.value != women.value

    def test_gender_aliases(self, service):
        for alias in ("men", "M", "male", "Male"):
            assert service.compute_points(_result(gender=alias)) == Points(361)

    def test_deterministic(self, service):
        result = _result("1500m", 0, 4, 5.25, venue=Venue.INDOOR)
        assert service.compute_points(result) == service.compute_points(result)

    @pytest.mark.parametrize("distance,gender,faster,slower", [
        ("Half Marathon", Gender.MEN, (2, 10, 0), (2, 30, 0)),
        ("Marathon", Gender.MEN, (4, 30, 0), (6, 0, 0)),
        ("10K", Gender.WOMEN, (1, 10, 0), (1, 20, 0)),
        ("5K", Gender.MEN, (0, 28, 0), (0, 40, 0)),
    ])
    def test_slower_recreational_time_never_scores_more(self, service, distance, gender, faster, slower):
        fast = service.compute_points(_result(distance, *faster, gender=gender, venue=Venue.ROAD))
        slow = service.compute_points(_result(distance, *slower, gender=gender, venue=Venue.ROAD))
        assert fast.value >= slow.value

    def test_zero_time_tabular_is_capped(self, service, tables):
        score = service.compute_points(_result("100m", 0, 0, 0))
        assert score.value == tables.get_breakpoints(Gender.MEN, "100m")[0].points


# =============================================================================
# Unscorable results
# =============================================================================

class TestUnknownEvent:

    def test_unknown_distance(self, service):
        score = service.compute_points(_result("Triatlón"))
        assert isinstance(score, Unscorable)
        assert score.reason == UnscorableReason.UNKNOWN_EVENT
        assert score != Points(0)

    def test_case_sensitive(self, service):
        assert service.compute_points(_result("5k")).reason == UnscorableReason.UNKNOWN_EVENT

    def test_logs_warning(self, service, caplog):
        with caplog.at_level(logging.WARNING, logger="race_points"):
            service.compute_points(_result("Triatlón"))
        assert "unknown_event" in caplog.text


class TestNoReferenceData:

    def test_men_only_event_for_women(self, service):
        score = service.compute_points(_result("110mH", 0, 0, 14, gender=Gender.WOMEN))
        assert score.reason == UnscorableReason.NO_REFERENCE_DATA

    def test_women_only_event_for_men(self, service):
        score = service.compute_points(_result("100mH", 0, 0, 14, gender=Gender.MEN))
        assert score.reason == UnscorableReason.NO_REFERENCE_DATA

    def test_matching_gender_scores(self, service):
        assert service.compute_points(_result("110mH", 0, 0, 14, gender=Gender.MEN)).value > 0
        assert service.compute_points(_result("100mH", 0, 0, 14, gender=Gender.WOMEN)).value > 0

    def test_missing_parametric_data(self, synthetic_tables):
        service = PointsService(synthetic_tables)
        score = service.compute_points(_result("Marathon", 3, 0, 0))
        assert score.reason == UnscorableReason.NO_REFERENCE_DATA


class TestInvalidInput:

    @pytest.mark.parametrize("kwargs", [
        {"distance": ""},
        {"distance": None},
        {"hours": -1},
        {"minutes": -1},
        {"seconds": -1},
        {"minutes": 60},
        {"seconds": 60},
        {"seconds": float("inf")},
        {"seconds": float("nan")},
        {"hours": float("inf")},
        {"hours": 1.5},
        {"minutes": True},
        {"gender": "X"},
        {"gender": None},
        {"venue": "indoor"},
    ])
    def test_invalid(self, service, kwargs):
        score = service.compute_points(_result(**kwargs))
        assert isinstance(score, Unscorable)
        assert score.reason == UnscorableReason.INVALID_INPUT
        assert score.display_points == 0

    def test_reasons_are_distinguishable(self, service):
        reasons = {
            service.compute_points(_result("")).reason,
            service.compute_points(_result("Triatlón")).reason,
            service.compute_points(_result("110mH", gender=Gender.WOMEN)).reason,
        }
        assert len(reasons) == 3


# =============================================================================
# Clamping (open question: parametric is unclamped by default)
# =============================================================================

class TestParametricClamping:

    def test_negative_passes_through_by_default(self, synthetic_tables):
        service = PointsService(synthetic_tables, clamp_parametric=False)
        score = service.compute_points(_result("10K", 1, 23, 20))  # 5000 s
        assert score == Points(-500)

    def test_clamped_when_enabled(self, synthetic_tables):
        service = PointsService(synthetic_tables, clamp_parametric=True)
        assert service.compute_points(_result("10K", 1, 23, 20)) == Points(0)


# =============================================================================
# Stored-row helper and inverse lookup
# =============================================================================

class TestPointsForEntry:

    def test_indoor_track_type(self, service):
        indoor = service.points_for_entry("1500m", 0, 4, 0, "men", "Pista Cubierta")
        expected = service.compute_points(_result("1500m", 0, 4, 0, venue=Venue.INDOOR)).value
        assert indoor == expected

    def test_outdoor_track_type(self, service):
        assert points_for_entry("100m", 0, 0, 10.0, "men", "Aire Libre") > 0

    def test_unscorable_collapses_to_zero(self, service):
        assert service.points_for_entry("invalid", 0, 0, 0, "men", "Aire Libre") == 0
        assert service.points_for_entry("5K", -1, 0, 0, "men") == 0


class TestTimeForPoints:

    def test_round_trip_parametric(self, service):
        t = service.time_for_points("Media maratón", Gender.WOMEN, 800)
        hours, rest = divmod(t, 3600)
        minutes, seconds = divmod(rest, 60)
        score = service.compute_points(
            _result("Media maratón", int(hours), int(minutes), seconds, gender=Gender.WOMEN)
        )
        assert score.value == 800

    def test_indoor_tabular(self, service, tables):
        table = tables.get_breakpoints(Gender.MEN, "800m sh")
        assert service.time_for_points("800m", "men", table[3].points, Venue.INDOOR) == table[3].time_seconds

    def test_unknown(self, service):
        assert service.time_for_points("Triatlón", Gender.MEN, 800) is None
        assert service.time_for_points("5K", "X", 800) is None
