"""
Tabular scorer: points from empirical breakpoint tables.

Used for sprints, hurdles and middle distance events. Each table is a
sequence of (time, points) breakpoints sorted by ascending time.

Regions:
- t <= fastest time:  capped at the table maximum (no extrapolation up)
- inside the table:   linear interpolation between bracketing breakpoints
- t >= slowest time:  linear extrapolation with the last segment's rate,
                      never below 0

Every region rounds down (floor).
"""

import math
from bisect import bisect_right
from typing import Optional, Sequence

from race_points.shared.constants import Gender
from race_points.shared.formulas import lerp

from ..models import ScoreBreakpoint
from ..tables import ScoringTables


class TabularScorer:
    """
    Breakpoint interpolation scorer.

    Example usage:
        scorer = TabularScorer(get_scoring_tables())
        scorer.score("100m", Gender.MEN, 10.02)   # exact breakpoint -> 1200
    """

    def __init__(self, tables: ScoringTables):
        self.tables = tables

    def score(self, event_key: str, gender: Gender, total_seconds: float) -> Optional[int]:
        """
        Score an elapsed time.

        Returns:
            Integer points (>= 0), or None if (gender, event) has no table
        """
        table = self.tables.get_breakpoints(gender, event_key)
        if table is None:
            return None
        return self._score_table(table, total_seconds)

    def time_for_points(self, event_key: str, gender: Gender, points: float) -> Optional[float]:
        """
        Time (seconds, 0.01 precision) that scores the given points.

        Points above the table maximum map to the fastest time; points
        below the table minimum follow the extrapolated last segment.

        Returns:
            Seconds, or None if (gender, event) has no table
        """
        table = self.tables.get_breakpoints(gender, event_key)
        if table is None:
            return None

        first = table[0]
        if points >= first.points or len(table) == 1:
            return first.time_seconds

        last = table[-1]
        if points <= last.points:
            prev = table[-2]
            rate = (prev.points - last.points) / (last.time_seconds - prev.time_seconds)
            return round(last.time_seconds + (last.points - max(points, 0)) / rate, 2)

        # Points descend, so search on negated points
        negated = [-bp.points for bp in table]
        i = bisect_right(negated, -points) - 1
        left, right = table[i], table[i + 1]
        t = lerp(left.points, left.time_seconds, right.points, right.time_seconds, points)
        return round(t, 2)

    # =========================================================================
    # Table evaluation
    # =========================================================================

    def _score_table(self, table: Sequence[ScoreBreakpoint], t: float) -> int:
        first = table[0]
        if t <= first.time_seconds:
            return first.points

        last = table[-1]
        if t >= last.time_seconds:
            return self._extrapolate(table, t)

        times = [bp.time_seconds for bp in table]
        i = bisect_right(times, t) - 1
        left, right = table[i], table[i + 1]
        interpolated = lerp(left.time_seconds, left.points, right.time_seconds, right.points, t)
        return math.floor(interpolated)

    def _extrapolate(self, table: Sequence[ScoreBreakpoint], t: float) -> int:
        """Project below the slowest breakpoint with the last segment's rate."""
        last = table[-1]
        if len(table) == 1:
            return 0

        prev = table[-2]
        rate = (prev.points - last.points) / (last.time_seconds - prev.time_seconds)
        projected = last.points - rate * (t - last.time_seconds)
        return max(math.floor(projected), 0)
