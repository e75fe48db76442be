"""
Reference table registry: reads coefficients.yaml and breakpoints.yaml.

Tables are loaded once per process and frozen (read-only mappings of
tuples), so one instance can be shared by any number of threads.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml

from race_points.config import settings
from race_points.shared.constants import Gender, ScoringBackend

from .events import EVENTS, labels_for_event
from .models import CoefficientEntry, ScoreBreakpoint

logger = logging.getLogger(__name__)

COEFFICIENTS_FILE = "coefficients.yaml"
BREAKPOINTS_FILE = "breakpoints.yaml"


class ScoringDataError(Exception):
    """Reference data is missing or violates a table invariant."""
    pass


@dataclass(frozen=True)
class ScoringTables:
    """
    Immutable scoring reference data.

    Structure:
        coefficients: gender -> canonical event key -> CoefficientEntry
        breakpoints:  gender -> canonical event key -> (ScoreBreakpoint, ...)
    """
    coefficients: Mapping[Gender, Mapping[str, CoefficientEntry]]
    breakpoints: Mapping[Gender, Mapping[str, tuple[ScoreBreakpoint, ...]]]

    def get_coefficients(self, gender: Gender, event_key: str) -> Optional[CoefficientEntry]:
        return self.coefficients.get(gender, {}).get(event_key)

    def get_breakpoints(self, gender: Gender, event_key: str) -> Optional[tuple[ScoreBreakpoint, ...]]:
        return self.breakpoints.get(gender, {}).get(event_key)

    @classmethod
    def from_dicts(
        cls,
        coefficients: Mapping[str, Mapping[str, Any]],
        breakpoints: Mapping[str, Mapping[str, Any]],
    ) -> "ScoringTables":
        """
        Build validated, frozen tables from raw nested dicts.

        Args:
            coefficients: {"men": {"track5000": [a, b, c], ...}, ...}
            breakpoints: {"men": {"100m": [[9.46, 1400], ...], ...}, ...}

        Raises:
            ScoringDataError: If any entry violates a table invariant
        """
        parsed_coefficients = {}
        for gender, events in _iter_genders(coefficients, COEFFICIENTS_FILE):
            parsed_coefficients[gender] = MappingProxyType({
                key: _parse_coefficients(gender, key, raw)
                for key, raw in _iter_events(gender, events, ScoringBackend.PARAMETRIC)
            })

        parsed_breakpoints = {}
        for gender, events in _iter_genders(breakpoints, BREAKPOINTS_FILE):
            parsed_breakpoints[gender] = MappingProxyType({
                key: _parse_breakpoints(gender, key, raw)
                for key, raw in _iter_events(gender, events, ScoringBackend.TABULAR)
            })

        return cls(
            coefficients=MappingProxyType(parsed_coefficients),
            breakpoints=MappingProxyType(parsed_breakpoints),
        )


def load_scoring_tables(data_dir: Path) -> ScoringTables:
    """
    Load and validate scoring tables from a data directory.

    Raises:
        ScoringDataError: If a file is missing, unreadable or invalid
    """
    coefficients = _read_yaml(data_dir / COEFFICIENTS_FILE)
    breakpoints = _read_yaml(data_dir / BREAKPOINTS_FILE)
    _check_labels_cover_events()

    tables = ScoringTables.from_dicts(coefficients, breakpoints)
    logger.info(
        f"Loaded scoring tables from {data_dir}: "
        f"{sum(len(v) for v in tables.coefficients.values())} coefficient sets, "
        f"{sum(len(v) for v in tables.breakpoints.values())} breakpoint tables"
    )
    return tables


@lru_cache(maxsize=1)
def get_scoring_tables() -> ScoringTables:
    """Process-wide tables, loaded on first use from settings.data_dir."""
    return load_scoring_tables(settings.data_dir)


# =============================================================================
# Parsing helpers
# =============================================================================

def _read_yaml(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ScoringDataError(f"Scoring data file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ScoringDataError(f"Cannot parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ScoringDataError(f"{path} must contain a mapping of genders")
    logger.debug(f"Read {path.name}: genders={list(data)}")
    return data


def _iter_genders(data: Mapping[str, Any], source: str):
    for raw_gender, events in data.items():
        gender = Gender.parse(raw_gender)
        if gender is None:
            raise ScoringDataError(f"{source}: unknown gender {raw_gender!r}")
        if not isinstance(events, dict):
            raise ScoringDataError(f"{source}: {raw_gender} must map events to data")
        yield gender, events


def _iter_events(gender: Gender, events: Mapping[str, Any], backend: ScoringBackend):
    for key, raw in events.items():
        event = EVENTS.get(key)
        if event is None:
            raise ScoringDataError(f"{gender.value}/{key}: no canonical event registered")
        if event.backend != backend:
            raise ScoringDataError(
                f"{gender.value}/{key}: event is scored by {event.backend.value}, "
                f"not {backend.value}"
            )
        if event.only_gender is not None and event.only_gender != gender:
            raise ScoringDataError(
                f"{gender.value}/{key}: event is {event.only_gender.value}-only"
            )
        yield key, raw


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _parse_coefficients(gender: Gender, key: str, raw: Any) -> CoefficientEntry:
    if (
        not isinstance(raw, (list, tuple))
        or len(raw) not in (2, 3)
        or not all(_is_number(v) for v in raw)
    ):
        raise ScoringDataError(
            f"{gender.value}/{key}: expected [a, b] or [a, b, c], got {raw!r}"
        )
    return CoefficientEntry(tuple(float(v) for v in raw))


def _parse_breakpoints(gender: Gender, key: str, raw: Any) -> tuple[ScoreBreakpoint, ...]:
    if not isinstance(raw, (list, tuple)) or not raw:
        raise ScoringDataError(f"{gender.value}/{key}: breakpoint table is empty")

    table = []
    for entry in raw:
        if (
            not isinstance(entry, (list, tuple))
            or len(entry) != 2
            or not _is_number(entry[0])
            or not isinstance(entry[1], int)
            or isinstance(entry[1], bool)
        ):
            raise ScoringDataError(
                f"{gender.value}/{key}: expected [time_seconds, points], got {entry!r}"
            )
        time_seconds, points = float(entry[0]), entry[1]
        if time_seconds <= 0 or points <= 0:
            raise ScoringDataError(
                f"{gender.value}/{key}: time and points must be positive, got {entry!r}"
            )
        if table:
            previous = table[-1]
            if time_seconds <= previous.time_seconds:
                raise ScoringDataError(
                    f"{gender.value}/{key}: times must be strictly ascending "
                    f"({previous.time_seconds} then {time_seconds})"
                )
            if points >= previous.points:
                raise ScoringDataError(
                    f"{gender.value}/{key}: points must be strictly descending "
                    f"({previous.points} then {points})"
                )
        table.append(ScoreBreakpoint(time_seconds, points))

    return tuple(table)


def _check_labels_cover_events() -> None:
    for key in EVENTS:
        if not labels_for_event(key):
            raise ScoringDataError(f"Canonical event {key!r} has no label mapping")
