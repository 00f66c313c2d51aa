"""
Interpolation helpers used by the reveal timeline.
"""


def linear_interpolation(start: float, end: float, k: float) -> float:
    """Linear interpolation between start and end for ratio k."""
    return start + (end - start) * k


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(value, high))
