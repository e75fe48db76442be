"""
Race points scoring module.

Usage:
    from race_points.features.scoring import compute_points, RaceResult
    from race_points.features.scoring.calculators import TabularScorer

Components:
- PointsService: Validation, event resolution and backend dispatch
- ParametricScorer: Quadratic/linear coefficients
- TabularScorer: Breakpoint interpolation/extrapolation
- ScoringTables: Frozen reference data loaded from YAML
"""

from .models import (
    RaceResult,
    CanonicalEvent,
    CoefficientEntry,
    ScoreBreakpoint,
    Points,
    Unscorable,
    UnscorableReason,
    ScoreResult,
)
from .events import (
    EVENTS,
    resolve_event,
    is_event_valid_for_gender,
    display_label,
    storage_label,
    supported_labels,
)
from .tables import ScoringTables, ScoringDataError, load_scoring_tables, get_scoring_tables
from .schemas import PointsRequest, PointsResponse
from .service import PointsService, compute_points, points_for_entry, get_points_service

__all__ = [
    # Models
    "RaceResult",
    "CanonicalEvent",
    "CoefficientEntry",
    "ScoreBreakpoint",
    "Points",
    "Unscorable",
    "UnscorableReason",
    "ScoreResult",
    # Events
    "EVENTS",
    "resolve_event",
    "is_event_valid_for_gender",
    "display_label",
    "storage_label",
    "supported_labels",
    # Tables
    "ScoringTables",
    "ScoringDataError",
    "load_scoring_tables",
    "get_scoring_tables",
    # Schemas
    "PointsRequest",
    "PointsResponse",
    # Service
    "PointsService",
    "compute_points",
    "points_for_entry",
    "get_points_service",
]
