"""
Points calculators.

Components:
- ParametricScorer: Quadratic/linear coefficients (road, 5000m, 10000m)
- TabularScorer: Breakpoint interpolation (sprints, hurdles, middle distance)
"""

from .parametric import ParametricScorer
from .tabular import TabularScorer

__all__ = [
    "ParametricScorer",
    "TabularScorer",
]
