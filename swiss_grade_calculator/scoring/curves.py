"""Curve shapes for the passing segment of the grading curve.

Each shape maps a normalised position ``t`` inside the segment
[points_for_4, points_for_6] to a normalised grade ``v`` inside
[4.0, grade_max]. Shapes fix (0, 0) and (1, 1) and extrapolate past 1.
"""

import math
from typing import Callable, NamedTuple

from ..config import AlgorithmType


class CurveShape(NamedTuple):
    """Forward and inverse of a normalised curve shape."""

    forward: Callable[[float], float]
    inverse: Callable[[float], float]


def _identity(value: float) -> float:
    return value


def _sqrt(value: float) -> float:
    return math.sqrt(max(0.0, value))


def _square(value: float) -> float:
    value = max(0.0, value)
    return value * value


CURVE_SHAPES = {
    AlgorithmType.LINEAR: CurveShape(forward=_identity, inverse=_identity),
    AlgorithmType.NICE: CurveShape(forward=_sqrt, inverse=_square),
    AlgorithmType.HARD: CurveShape(forward=_square, inverse=_sqrt),
}


def get_shape(algorithm: AlgorithmType | str) -> CurveShape:
    """Get the curve shape for an algorithm, LINEAR for unknown names."""
    try:
        return CURVE_SHAPES[AlgorithmType(algorithm)]
    except ValueError:
        return CURVE_SHAPES[AlgorithmType.LINEAR]
