"""
Event resolution: human-facing distance labels -> canonical events.

Labels are matched exactly (case-sensitive). The Spanish labels used by
the race results form ("Media maratón", "Milla", ...) are first-class keys,
not translations.

Each canonical event carries the backend that scores it. The mapping is
static, so dispatch never has to guess from the key.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from race_points.shared.constants import Gender, ScoringBackend, Venue

from .models import CanonicalEvent


PARAMETRIC = ScoringBackend.PARAMETRIC
TABULAR = ScoringBackend.TABULAR


# =============================================================================
# Canonical events
# =============================================================================

_EVENT_LIST = [
    # Road / long track (quadratic coefficients)
    CanonicalEvent("track5000", PARAMETRIC),
    CanonicalEvent("track10000", PARAMETRIC),
    CanonicalEvent("Road 10 km", PARAMETRIC),
    CanonicalEvent("Road HM", PARAMETRIC),
    CanonicalEvent("Road Marathon", PARAMETRIC),

    # Sprints, hurdles and middle distance (breakpoint tables)
    CanonicalEvent("60m", TABULAR, indoor=True),
    CanonicalEvent("100m", TABULAR),
    CanonicalEvent("200m", TABULAR),
    CanonicalEvent("400m", TABULAR),
    CanonicalEvent("800m", TABULAR),
    CanonicalEvent("1500m", TABULAR),
    CanonicalEvent("Mile", TABULAR),
    CanonicalEvent("3000m", TABULAR),
    CanonicalEvent("110mH", TABULAR, only_gender=Gender.MEN),
    CanonicalEvent("100mH", TABULAR, only_gender=Gender.WOMEN),

    # Indoor (short track) variants
    CanonicalEvent("200m sh", TABULAR, indoor=True),
    CanonicalEvent("400m sh", TABULAR, indoor=True),
    CanonicalEvent("800m sh", TABULAR, indoor=True),
    CanonicalEvent("1500m sh", TABULAR, indoor=True),
    CanonicalEvent("Mile sh", TABULAR, indoor=True),
    CanonicalEvent("3000m sh", TABULAR, indoor=True),
]

EVENTS: Mapping[str, CanonicalEvent] = MappingProxyType(
    {event.key: event for event in _EVENT_LIST}
)


# =============================================================================
# Label tables
# =============================================================================

# Road distances: same key whatever the venue
ROAD_LABELS: Mapping[str, str] = MappingProxyType({
    "5K": "track5000",
    "10K": "Road 10 km",
    "Half Marathon": "Road HM",
    "Media maratón": "Road HM",
    "Marathon": "Road Marathon",
    "Maratón": "Road Marathon",
})

# Track distances: outdoor key
TRACK_LABELS: Mapping[str, str] = MappingProxyType({
    "60m": "60m",  # Indoor-only, already canonical
    "100m": "100m",
    "200m": "200m",
    "400m": "400m",
    "800m": "800m",
    "1500m": "1500m",
    "Mile": "Mile",
    "Milla": "Mile",
    "3000m": "3000m",
    "5000m": "track5000",
    "10000m": "track10000",
    "110mH": "110mH",
    "110m vallas": "110mH",
    "100mH": "100mH",
    "100m vallas": "100mH",
})

# Outdoor key -> indoor key, used when venue is INDOOR
INDOOR_VARIANTS: Mapping[str, str] = MappingProxyType({
    "200m": "200m sh",
    "400m": "400m sh",
    "800m": "800m sh",
    "1500m": "1500m sh",
    "Mile": "Mile sh",
    "3000m": "3000m sh",
})

# Stored (English) label -> label shown in the UI
DISPLAY_LABELS: Mapping[str, str] = MappingProxyType({
    "Half Marathon": "Media maratón",
    "Marathon": "Maratón",
})


# =============================================================================
# Resolution
# =============================================================================

def resolve_event(distance_label: str, venue: Venue = Venue.ROAD) -> Optional[CanonicalEvent]:
    """
    Resolve a distance label and venue to a canonical event.

    Args:
        distance_label: Label exactly as entered/stored ("5K", "1500m")
        venue: Where the result was achieved

    Returns:
        CanonicalEvent, or None if the label is not registered
    """
    key = ROAD_LABELS.get(distance_label)
    if key is None:
        key = TRACK_LABELS.get(distance_label)
        if key is None:
            return None
        if venue == Venue.INDOOR:
            key = INDOOR_VARIANTS.get(key, key)
    return EVENTS[key]


def is_event_valid_for_gender(event: CanonicalEvent, gender: Gender) -> bool:
    """Whether the event is contested by the given gender (110mH is men-only, ...)."""
    return event.only_gender is None or event.only_gender == gender


def display_label(label: str) -> str:
    """'Half Marathon' → 'Media maratón'. Unmapped labels pass through."""
    return DISPLAY_LABELS.get(label, label)


def storage_label(label: str) -> str:
    """'Media maratón' → 'Half Marathon'. Unmapped labels pass through."""
    for stored, shown in DISPLAY_LABELS.items():
        if shown == label:
            return stored
    return label


def supported_labels() -> list[str]:
    """All labels the resolver knows, road first."""
    return list(ROAD_LABELS) + list(TRACK_LABELS)


def labels_for_event(key: str) -> list[str]:
    """Labels that resolve to the given canonical key (for any venue)."""
    labels = [label for label, target in ROAD_LABELS.items() if target == key]
    for label, target in TRACK_LABELS.items():
        if target == key or INDOOR_VARIANTS.get(target) == key:
            labels.append(label)
    return labels
