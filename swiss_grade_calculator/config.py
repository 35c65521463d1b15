"""Configuration constants and grading configuration for Swiss Grade Calculator."""

from dataclasses import dataclass, replace
from enum import Enum


# Grade axis
PASSING_GRADE = 4.0
ROUNDING_STEPS = (0.1, 0.25, 0.5, 1.0)

# Numeric guards
MIN_SEGMENT_WIDTH = 1e-6  # smallest allowed width of a curve segment (points)
MAX_CURVE_POSITION = 1e100  # cap on the normalised position past points_for_6
QUANTIZE_TOLERANCE = 1e-9
SCALE_EPSILON = 0.0001  # nudge above the half-step boundary in the grade scale

# Display
CURVE_SAMPLE_STEPS = 50
PASS_RATE_GOOD = 80  # percent

# Fallback for a points_for_4 that is not below points_for_6
POINTS_FOR_4_RATIO = 0.6

DISTRIBUTION_BUCKETS = [
    {"name": "1.0-1.9", "min": 1.0, "max": 2.0},
    {"name": "2.0-2.9", "min": 2.0, "max": 3.0},
    {"name": "3.0-3.9", "min": 3.0, "max": 4.0},
    {"name": "4.0-4.9", "min": 4.0, "max": 5.0},
    {"name": "5.0-5.9", "min": 5.0, "max": 6.0},
    {"name": "6.0", "min": 6.0, "max": 7.0},
]


class AlgorithmType(str, Enum):
    """Shape of the curve between the 4.0 and the maximum grade anchors."""

    LINEAR = "LINEAR"
    NICE = "NICE"  # concave, generous near the passing mark
    HARD = "HARD"  # convex, strict near the passing mark


@dataclass(frozen=True)
class GradingConfig:
    """Immutable grading configuration supplied by the caller."""

    max_possible_points: float = 60.0
    points_for_6: float = 55.0
    points_for_4: float = 33.0
    grade_min: float = 1.0
    grade_max: float = 6.0
    rounding_step: float = 0.5
    algorithm: AlgorithmType = AlgorithmType.LINEAR


DEFAULT_CONFIG = GradingConfig()


def validate_config(config: GradingConfig) -> list[str]:
    """
    Check a configuration before handing it to the grading engine.

    The engine itself accepts any configuration and degrades gracefully,
    so this is the caller's gate.

    Returns:
        List of problems, empty when the configuration is valid.
    """
    problems = []

    if config.max_possible_points <= 0:
        problems.append("Maximum possible points must be greater than 0")
    if config.points_for_4 <= 0:
        problems.append("Points for grade 4 must be greater than 0")
    if config.points_for_4 >= config.points_for_6:
        problems.append("Points for grade 4 must be below points for grade 6")
    if config.points_for_6 > config.max_possible_points:
        problems.append("Points for grade 6 must not exceed the maximum possible points")
    if config.grade_min >= config.grade_max:
        problems.append("Minimum grade must be below maximum grade")
    elif not config.grade_min <= PASSING_GRADE <= config.grade_max:
        problems.append(f"Passing grade {PASSING_GRADE} must lie within the grade range")
    if config.rounding_step not in ROUNDING_STEPS:
        allowed = ", ".join(str(s) for s in ROUNDING_STEPS)
        problems.append(f"Rounding step must be one of {allowed}")

    return problems


def normalize_config(config: GradingConfig) -> GradingConfig:
    """Pull points_for_4 back below points_for_6 when an edit crossed them."""
    if config.points_for_4 >= config.points_for_6:
        return replace(config, points_for_4=config.points_for_6 * POINTS_FOR_4_RATIO)
    return config
