"""
Tests for event resolution (labels + venue -> canonical events).
"""

import pytest

from race_points.features.scoring.events import (
    EVENTS,
    INDOOR_VARIANTS,
    display_label,
    is_event_valid_for_gender,
    labels_for_event,
    resolve_event,
    storage_label,
    supported_labels,
)
from race_points.shared.constants import Gender, ScoringBackend, Venue


# =============================================================================
# Road distances
# =============================================================================

class TestRoadLabels:
    """Road labels map to fixed keys regardless of venue."""

    @pytest.mark.parametrize("label,key", [
        ("5K", "track5000"),
        ("10K", "Road 10 km"),
        ("Half Marathon", "Road HM"),
        ("Media maratón", "Road HM"),
        ("Marathon", "Road Marathon"),
        ("Maratón", "Road Marathon"),
    ])
    @pytest.mark.parametrize("venue", list(Venue))
    def test_road_label(self, label, key, venue):
        event = resolve_event(label, venue)
        assert event.key == key
        assert event.backend == ScoringBackend.PARAMETRIC


# =============================================================================
# Track distances
# =============================================================================

class TestTrackLabels:
    """Track labels resolve to outdoor keys unless an indoor variant applies."""

    @pytest.mark.parametrize("label,key", [
        ("100m", "100m"),
        ("200m", "200m"),
        ("400m", "400m"),
        ("800m", "800m"),
        ("1500m", "1500m"),
        ("Mile", "Mile"),
        ("Milla", "Mile"),
        ("3000m", "3000m"),
        ("110mH", "110mH"),
        ("100mH", "100mH"),
    ])
    def test_outdoor_keys(self, label, key):
        assert resolve_event(label, Venue.OUTDOOR).key == key
        assert resolve_event(label, Venue.ROAD).key == key
        assert resolve_event(label, Venue.OUTDOOR).backend == ScoringBackend.TABULAR

    @pytest.mark.parametrize("label,key", [
        ("200m", "200m sh"),
        ("400m", "400m sh"),
        ("800m", "800m sh"),
        ("1500m", "1500m sh"),
        ("Mile", "Mile sh"),
        ("Milla", "Mile sh"),
        ("3000m", "3000m sh"),
    ])
    def test_indoor_variants(self, label, key):
        event = resolve_event(label, Venue.INDOOR)
        assert event.key == key
        assert event.indoor is True

    def test_60m_is_canonical_for_every_venue(self):
        """60m is indoor-only and already canonical: no ' sh' suffix."""
        for venue in Venue:
            assert resolve_event("60m", venue).key == "60m"

    @pytest.mark.parametrize("label", ["100m", "110mH", "100mH", "5000m", "10000m"])
    def test_no_indoor_counterpart(self, label):
        """Indoors, events without a registered variant keep the outdoor key."""
        assert resolve_event(label, Venue.INDOOR) == resolve_event(label, Venue.OUTDOOR)

    def test_long_track_is_parametric(self):
        assert resolve_event("5000m", Venue.OUTDOOR).key == "track5000"
        assert resolve_event("10000m", Venue.OUTDOOR).key == "track10000"
        assert resolve_event("10000m", Venue.OUTDOOR).backend == ScoringBackend.PARAMETRIC


# =============================================================================
# Unknown labels
# =============================================================================

class TestUnknownLabels:

    @pytest.mark.parametrize("label", ["Triatlón", "", "5k", "media maratón", "Half marathon", " 5K"])
    def test_unregistered_label(self, label):
        """Matching is exact and case-sensitive; no default event is picked."""
        assert resolve_event(label, Venue.ROAD) is None


# =============================================================================
# Registry invariants
# =============================================================================

class TestRegistry:

    def test_every_event_has_a_label(self):
        for key in EVENTS:
            assert labels_for_event(key), f"{key} is unreachable"

    def test_every_label_resolves_to_registered_event(self):
        for label in supported_labels():
            for venue in Venue:
                assert resolve_event(label, venue).key in EVENTS

    def test_indoor_variants_are_tabular_indoor_events(self):
        for outdoor, indoor in INDOOR_VARIANTS.items():
            assert EVENTS[outdoor].backend == EVENTS[indoor].backend == ScoringBackend.TABULAR
            assert EVENTS[indoor].indoor

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            EVENTS["new"] = EVENTS["100m"]


class TestGenderRestrictions:

    def test_hurdles(self):
        assert is_event_valid_for_gender(EVENTS["110mH"], Gender.MEN)
        assert not is_event_valid_for_gender(EVENTS["110mH"], Gender.WOMEN)
        assert is_event_valid_for_gender(EVENTS["100mH"], Gender.WOMEN)
        assert not is_event_valid_for_gender(EVENTS["100mH"], Gender.MEN)

    def test_open_events(self):
        for gender in Gender:
            assert is_event_valid_for_gender(EVENTS["track5000"], gender)


class TestDisplayLabels:

    def test_display(self):
        assert display_label("Half Marathon") == "Media maratón"
        assert display_label("Marathon") == "Maratón"
        assert display_label("5K") == "5K"

    def test_storage(self):
        assert storage_label("Media maratón") == "Half Marathon"
        assert storage_label("Maratón") == "Marathon"
        assert storage_label("10K") == "10K"

    def test_both_forms_resolve_identically(self):
        for stored in ("Half Marathon", "Marathon"):
            assert resolve_event(stored) == resolve_event(display_label(stored))
