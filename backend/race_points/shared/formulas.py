"""
Mathematical formulas for points calculations.

Used by both scorers.
"""

import math
from typing import Optional, Sequence


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Not the built-in round(), which rounds halves to even.

    Examples:
        2.5 -> 3, -2.5 -> -3, 2.49 -> 2
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def polynomial_points(coefficients: Sequence[float], t: float) -> float:
    """
    Evaluate a scoring polynomial at elapsed time t (seconds).

    Formula:
        [a, b, c] -> a*t^2 + b*t + c
        [a, b]    -> a*t + b

    Args:
        coefficients: Two (linear) or three (quadratic) coefficients
        t: Elapsed time in seconds

    Returns:
        Unrounded points value
    """
    if len(coefficients) == 2:
        a, b = coefficients
        return a * t + b
    a, b, c = coefficients
    return a * t * t + b * t + c


def quadratic_vertex(coefficients: Sequence[float]) -> Optional[float]:
    """
    Time of the minimum of an upward-opening scoring parabola.

    Past this time a*t^2 + b*t + c rises again, so scorers evaluate
    slower times at the vertex.

    Returns:
        -b / 2a for quadratic entries with a > 0, otherwise None
    """
    if len(coefficients) != 3:
        return None
    a, b, _ = coefficients
    if a <= 0:
        return None
    return -b / (2 * a)


def polynomial_time(coefficients: Sequence[float], points: float) -> Optional[float]:
    """
    Invert a scoring polynomial: time (seconds) that yields `points`.

    For the quadratic model the root on the decreasing branch is
    preferred: (-b - sqrt(D)) / 2a, falling back to the other root
    when that one is negative.

    Returns:
        Time in seconds, or None if there is no real solution
    """
    if len(coefficients) == 2:
        a, b = coefficients
        if a == 0:
            return None
        return (points - b) / a

    a, b, c = coefficients
    if a == 0:
        if b == 0:
            return None
        return (points - c) / b

    discriminant = b * b - 4 * a * (c - points)
    if discriminant < 0:
        return None

    root = math.sqrt(discriminant)
    t = (-b - root) / (2 * a)
    if t < 0:
        t = (-b + root) / (2 * a)
    return t


def lerp(x0: float, y0: float, x1: float, y1: float, x: float) -> float:
    """Linear interpolation of y at x on the line through (x0, y0), (x1, y1)."""
    ratio = (x - x0) / (x1 - x0)
    return y0 - ratio * (y0 - y1)
