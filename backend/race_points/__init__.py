"""
Race Points

Converts race results (distance, time, gender, venue) into
standardized World Athletics style points.
"""

__version__ = "0.1.0"
