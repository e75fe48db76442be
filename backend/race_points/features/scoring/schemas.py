"""
Points scoring schemas.

Pydantic schemas for boundary request/response serialization.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from race_points.shared.constants import Gender, ScoringBackend, Venue

from .models import Points, RaceResult, ScoreResult, UnscorableReason


class PointsRequest(BaseModel):
    """Request to score one race result."""
    distance: str = Field(..., min_length=1, description="Distance label, e.g. '5K'")
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0, le=59)
    seconds: float = Field(default=0, ge=0, lt=60)
    gender: Gender
    venue: Optional[Venue] = Field(
        default=None,
        description="Explicit venue; overrides track_type"
    )
    track_type: Optional[str] = Field(
        default=None,
        description="Stored track type label ('Pista Cubierta', 'Aire Libre')"
    )

    @field_validator('gender', mode='before')
    @classmethod
    def parse_gender(cls, v):
        """Accept 'M'/'F'/'male'/'female' as well as 'men'/'women'."""
        parsed = Gender.parse(v)
        if parsed is None:
            raise ValueError(f"Unknown gender: {v!r}")
        return parsed

    @property
    def resolved_venue(self) -> Venue:
        if self.venue is not None:
            return self.venue
        return Venue.from_track_type(self.track_type)

    def to_race_result(self) -> RaceResult:
        return RaceResult(
            distance_label=self.distance,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            gender=self.gender,
            venue=self.resolved_venue,
        )


class PointsResponse(BaseModel):
    """Scoring outcome: points, or the reason there are none."""
    distance: str
    venue: Venue
    gender: Gender
    total_seconds: float
    event: Optional[str] = None
    backend: Optional[ScoringBackend] = None
    points: Optional[int] = None
    reason: Optional[UnscorableReason] = None
    detail: Optional[str] = None

    @property
    def display_points(self) -> int:
        return self.points if self.points is not None else 0

    @classmethod
    def from_score(cls, request: PointsRequest, score: ScoreResult) -> "PointsResponse":
        result = request.to_race_result()
        base = dict(
            distance=request.distance,
            venue=result.venue,
            gender=request.gender,
            total_seconds=result.total_seconds,
        )
        if isinstance(score, Points):
            event = score.event
            return cls(
                **base,
                event=event.key if event else None,
                backend=event.backend if event else None,
                points=score.value,
            )
        return cls(**base, reason=score.reason, detail=score.detail or None)
