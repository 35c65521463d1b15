"""Grade calculation: points to grade, grade to minimum points."""

import logging
import math

from ..config import (
    CURVE_SAMPLE_STEPS,
    MAX_CURVE_POSITION,
    MIN_SEGMENT_WIDTH,
    PASSING_GRADE,
    QUANTIZE_TOLERANCE,
    SCALE_EPSILON,
    GradingConfig,
)
from .curves import get_shape

logger = logging.getLogger(__name__)


def raw_grade(points: float, config: GradingConfig) -> float:
    """
    Compute the unrounded, unclamped grade for a point total.

    Below points_for_4 the grade is linear from (0, grade_min) to
    (points_for_4, 4.0). Above it the configured curve shape runs from
    (points_for_4, 4.0) to (points_for_6, grade_max) and is extrapolated
    past points_for_6.

    Args:
        points: Point total; non-finite or negative values count as 0.
        config: Grading configuration.

    Returns:
        Raw grade as float.
    """
    points = _sanitize_points(points)
    points_for_4, points_for_6 = _segment_bounds(config)

    if points <= points_for_4:
        return config.grade_min + (points / points_for_4) * (PASSING_GRADE - config.grade_min)

    shape = get_shape(config.algorithm)
    t = min((points - points_for_4) / (points_for_6 - points_for_4), MAX_CURVE_POSITION)
    return PASSING_GRADE + shape.forward(t) * (config.grade_max - PASSING_GRADE)


def grade(points: float, config: GradingConfig) -> float:
    """Compute the clamped grade, rounded half-up to the configured step."""
    value = raw_grade(points, config)
    value = max(config.grade_min, min(config.grade_max, value))
    return quantize(value, config.rounding_step)


def quantize(value: float, step: float) -> float:
    """Round value to the nearest multiple of step, ties away from zero."""
    if step <= 0:
        return value
    steps = math.floor(abs(value) / step + 0.5 + QUANTIZE_TOLERANCE)
    return math.copysign(round(steps * step, 10), value)


def is_passing(grade_value: float) -> bool:
    """A grade passes at 4.0 or above, whatever the grade range."""
    return grade_value >= PASSING_GRADE


def min_points_for_grade(target_grade: float, config: GradingConfig) -> float:
    """
    Compute the smallest point total whose raw grade reaches target_grade.

    Inverts raw_grade in closed form on whichever segment holds the
    target. Targets above grade_max are extrapolated along the curve.

    Returns:
        Points, never negative.
    """
    if not math.isfinite(target_grade) or target_grade <= config.grade_min:
        return 0.0

    points_for_4, points_for_6 = _segment_bounds(config)

    if target_grade <= PASSING_GRADE:
        span = PASSING_GRADE - config.grade_min
        if span <= 0:
            return 0.0
        return (target_grade - config.grade_min) / span * points_for_4

    span = config.grade_max - PASSING_GRADE
    if span <= 0:
        logger.debug("Grade range ends at or below %s, using points for 6", PASSING_GRADE)
        return points_for_6

    shape = get_shape(config.algorithm)
    t = shape.inverse((target_grade - PASSING_GRADE) / span)
    return points_for_4 + t * (points_for_6 - points_for_4)


def grade_scale(config: GradingConfig) -> list[dict]:
    """
    Build the grade scale table from grade_max down to grade_min.

    Each row holds the minimum points that round up to that grade, i.e.
    the points reaching half a step below it. The grade_min row is
    always 0 points.

    Returns:
        List of dicts with keys grade, min_points.
    """
    step = config.rounding_step
    rows = []

    if step <= 0 or config.grade_max < config.grade_min:
        return rows

    row_count = math.floor((config.grade_max - config.grade_min) / step + QUANTIZE_TOLERANCE) + 1

    for i in range(row_count):
        current_grade = round(config.grade_max - i * step, 2)

        if math.isclose(current_grade, config.grade_min, abs_tol=QUANTIZE_TOLERANCE):
            rows.append({"grade": current_grade, "min_points": 0.0})
            continue

        boundary = max(config.grade_min, current_grade - step / 2)
        points = min_points_for_grade(boundary + SCALE_EPSILON, config)
        points = max(0.0, min(config.max_possible_points, points))

        rows.append({"grade": current_grade, "min_points": points})

    return rows


def sample_curve(config: GradingConfig, steps: int = CURVE_SAMPLE_STEPS) -> list[dict]:
    """
    Sample the raw grade curve for plotting.

    Returns:
        List of dicts with keys points, grade, sorted by points. Includes
        both anchors exactly.
    """
    steps = max(1, steps)
    step_size = config.max_possible_points / steps
    data = []

    for i in range(steps + 1):
        points = round(i * step_size, 1)
        data.append({"points": points, "grade": raw_grade(points, config)})

    # Exact anchors
    data.append({"points": config.points_for_4, "grade": PASSING_GRADE})
    data.append({"points": config.points_for_6, "grade": config.grade_max})

    return sorted(data, key=lambda x: x["points"])


def grade_students(students: list[dict], config: GradingConfig) -> list[dict]:
    """
    Grade a roster of student records.

    Args:
        students: Dicts with at least a 'points' key.
        config: Grading configuration.

    Returns:
        New dicts with grade and is_passing added; inputs are not modified.
    """
    graded = []
    for student in students:
        student_grade = grade(student.get("points", 0), config)
        graded.append({**student, "grade": student_grade, "is_passing": is_passing(student_grade)})
    return graded


def _sanitize_points(points: float) -> float:
    """Map non-finite and negative point totals to 0."""
    try:
        points = float(points)
    except (TypeError, ValueError):
        logger.debug("Non-numeric points %r treated as 0", points)
        return 0.0

    if not math.isfinite(points) or points < 0:
        logger.debug("Points %r treated as 0", points)
        return 0.0
    return points


def _segment_bounds(config: GradingConfig) -> tuple[float, float]:
    """Return (points_for_4, points_for_6) widened so both segments have positive width."""
    points_for_4 = config.points_for_4
    points_for_6 = config.points_for_6

    if not math.isfinite(points_for_4) or points_for_4 < MIN_SEGMENT_WIDTH:
        logger.debug("Points for 4 (%r) clamped to %s", points_for_4, MIN_SEGMENT_WIDTH)
        points_for_4 = MIN_SEGMENT_WIDTH

    if not math.isfinite(points_for_6) or points_for_6 - points_for_4 < MIN_SEGMENT_WIDTH:
        logger.debug("Points for 6 (%r) clamped above points for 4", points_for_6)
        points_for_6 = points_for_4 + MIN_SEGMENT_WIDTH

    return points_for_4, points_for_6
