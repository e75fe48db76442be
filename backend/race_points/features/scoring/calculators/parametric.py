"""
Parametric scorer: closed-form points for road and long track events.

Model (World Athletics style coefficients):
    points = a * t^2 + b * t + c     (quadratic entry [a, b, c])
    points = a * t + b               (linear entry [a, b])

where t is the elapsed time in seconds. Results are rounded to the
nearest integer, halves away from zero.

For an upward-opening quadratic, times slower than the vertex (-b / 2a)
score as the vertex, so points never rise with time.

Unlike the tabular scorer, nothing is clamped at 0 by default: a time
far outside the fitted range can produce a negative score. Pass
clamp_at_zero=True to floor results at 0.
"""

from typing import Optional

from race_points.shared.constants import Gender
from race_points.shared.formulas import (
    polynomial_points,
    polynomial_time,
    quadratic_vertex,
    round_half_away,
)

from ..tables import ScoringTables


class ParametricScorer:
    """
    Quadratic/linear coefficient scorer.

    Example usage:
        scorer = ParametricScorer(get_scoring_tables())
        scorer.score("track5000", Gender.MEN, 1200)   # 20:00 5K -> 361
    """

    def __init__(self, tables: ScoringTables, clamp_at_zero: bool = False):
        """
        Initialize parametric scorer.

        Args:
            tables: Frozen reference tables
            clamp_at_zero: Floor negative results at 0
        """
        self.tables = tables
        self.clamp_at_zero = clamp_at_zero

    def score(self, event_key: str, gender: Gender, total_seconds: float) -> Optional[int]:
        """
        Score an elapsed time.

        Returns:
            Integer points, or None if (gender, event) has no coefficients
        """
        entry = self.tables.get_coefficients(gender, event_key)
        if entry is None:
            return None

        vertex = quadratic_vertex(entry.coefficients)
        if vertex is not None and total_seconds > vertex:
            total_seconds = vertex

        points = round_half_away(polynomial_points(entry.coefficients, total_seconds))
        if self.clamp_at_zero:
            points = max(points, 0)
        return points

    def time_for_points(self, event_key: str, gender: Gender, points: float) -> Optional[float]:
        """
        Time (seconds, 0.01 precision) that scores the given points.

        Returns:
            Seconds, or None if there are no coefficients or no real solution
        """
        entry = self.tables.get_coefficients(gender, event_key)
        if entry is None:
            return None

        t = polynomial_time(entry.coefficients, points)
        if t is None or t < 0:
            return None

        # Only the decreasing branch is ever scored
        vertex = quadratic_vertex(entry.coefficients)
        if vertex is not None and t > vertex:
            return None
        return round(t, 2)
