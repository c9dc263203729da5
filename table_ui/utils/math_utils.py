"""Math utility functions for animations and layout."""

import math
from typing import Tuple, Union

Number = Union[int, float]


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def bearing(p1: Tuple[Number, Number], p2: Tuple[Number, Number]) -> float:
    """Angle in radians of the straight line from p1 towards p2."""
    return math.atan2(p2[1] - p1[1], p2[0] - p1[0])


def step_toward(
    p1: Tuple[Number, Number], p2: Tuple[Number, Number], step: float
) -> Tuple[float, float]:
    """Move p1 by ``step`` along the bearing towards p2.

    Args:
        p1: Current point (x, y)
        p2: Target point (x, y)
        step: Distance to move

    Returns:
        The new point
    """
    angle = bearing(p1, p2)
    return (p1[0] + math.cos(angle) * step, p1[1] + math.sin(angle) * step)
