"""Shared fixtures: packaged reference tables and a small synthetic table set."""

import pytest

from race_points.features.scoring import PointsService, ScoringTables, get_scoring_tables


# Small hand-checkable tables for algorithm tests
SYNTHETIC_COEFFICIENTS = {
    "men": {
        "track5000": [0.001, -4.0, 4000.0],   # vertex at t=2000 -> 0 pts
        "Road 10 km": [-0.5, 2000.0],         # linear model
    },
    "women": {
        "track5000": [0.0, -1.0, 1000.5],     # degenerate quadratic (a = 0)
    },
}

SYNTHETIC_BREAKPOINTS = {
    "men": {
        "100m": [[10.0, 1000], [11.0, 900], [12.0, 700], [14.0, 300]],
        "400m": [[50.0, 500]],                # single breakpoint
    },
    "women": {
        "100mH": [[13.0, 1100], [15.0, 800]],
    },
}


@pytest.fixture(scope="session")
def tables():
    """Packaged reference tables (loaded once)."""
    return get_scoring_tables()


@pytest.fixture(scope="session")
def service(tables):
    """Points service over the packaged tables, no parametric clamping."""
    return PointsService(tables, clamp_parametric=False)


@pytest.fixture
def synthetic_tables():
    """Tables built from SYNTHETIC_* dicts."""
    return ScoringTables.from_dicts(SYNTHETIC_COEFFICIENTS, SYNTHETIC_BREAKPOINTS)
