"""
Formatting and parsing utilities for race marks.

Used by the scoring service and the CLI.
"""

import math


def total_seconds(hours: int, minutes: int, seconds: float) -> float:
    """Convert time components to elapsed seconds."""
    return hours * 3600 + minutes * 60 + seconds


def format_time(hours: int, minutes: int, seconds: int) -> str:
    """
    Format stored time components for result lists.

    (1, 2, 3)  → "1h 02m 03s"
    (0, 20, 5) → "20:05"
    """
    if hours > 0:
        return f"{hours}h {minutes:02d}m {seconds:02d}s"
    return f"{minutes}:{seconds:02d}"


def format_mark(mark: float) -> str:
    """
    Format elapsed seconds as a mark with hundredths.

    9.58     → "9.58"
    226.5    → "3:46.50"
    7235.0   → "2:00:35.00"
    """
    if mark < 0 or not math.isfinite(mark):
        return "—"

    hundredths = int(round(mark * 100))
    whole, cs = divmod(hundredths, 100)
    hours, remainder = divmod(whole, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}.{cs:02d}"
    if minutes > 0:
        return f"{minutes}:{secs:02d}.{cs:02d}"
    return f"{secs}.{cs:02d}"


def parse_mark(text: str) -> float:
    """
    Parse a mark typed by a user into elapsed seconds.

    "9.58"      → 9.58
    "20:00"     → 1200.0
    "1:02:03.5" → 3723.5

    Raises:
        ValueError: If the text is not a [[h:]m:]s mark
    """
    parts = text.strip().split(":")
    if not parts[0] or len(parts) > 3:
        raise ValueError(f"Invalid mark: {text!r}")

    values = [float(p) for p in parts]
    if any(v < 0 or not math.isfinite(v) for v in values):
        raise ValueError(f"Invalid mark: {text!r}")

    seconds = values[-1]
    minutes = values[-2] if len(values) > 1 else 0.0
    hours = values[-3] if len(values) > 2 else 0.0
    return total_seconds(hours, minutes, seconds)


def split_mark(mark: float) -> tuple[int, int, float]:
    """
    Split elapsed seconds into (hours, minutes, seconds).

    3723.5 → (1, 2, 3.5)
    """
    whole, cs = divmod(int(round(mark * 100)), 100)
    hours, remainder = divmod(whole, 3600)
    minutes, secs = divmod(remainder, 60)
    return hours, minutes, secs + cs / 100
