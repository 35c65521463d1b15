"""Grading curve: forward and inverse grade calculation."""

from .calculator import (
    raw_grade,
    grade,
    quantize,
    is_passing,
    min_points_for_grade,
    grade_scale,
    sample_curve,
    grade_students,
)
from .curves import CurveShape, get_shape

__all__ = [
    "raw_grade",
    "grade",
    "quantize",
    "is_passing",
    "min_points_for_grade",
    "grade_scale",
    "sample_curve",
    "grade_students",
    "CurveShape",
    "get_shape",
]
