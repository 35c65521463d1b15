"""Roster statistics over computed grades."""

import logging
import math
import numbers
import statistics

from ..config import DISTRIBUTION_BUCKETS, PASSING_GRADE

logger = logging.getLogger(__name__)


def compute_stats(grades: list[float]) -> dict:
    """
    Compute descriptive statistics for a sequence of grades.

    Args:
        grades: Computed grades; non-finite entries are ignored.

    Returns:
        Dict with average, median, min, max, pass_rate, std_dev.
        Every field is 0 for an empty sequence.
    """
    grades = list(grades)
    values = [float(g) for g in grades if _is_number(g)]
    if len(values) < len(grades):
        logger.debug("Ignored %d non-finite grades", len(grades) - len(values))

    if not values:
        return {
            "average": 0,
            "median": 0,
            "min": 0,
            "max": 0,
            "pass_rate": 0,
            "std_dev": 0,
        }

    count = len(values)
    passing = sum(1 for g in values if g >= PASSING_GRADE)

    return {
        "average": round_half_up(sum(values) / count, 2),
        "median": round_half_up(statistics.median(values), 2),
        "min": min(values),
        "max": max(values),
        "pass_rate": int(round_half_up(passing / count * 100)),
        # Population standard deviation (divide by N)
        "std_dev": round_half_up(statistics.pstdev(values), 2) if count > 1 else 0,
    }


def grade_distribution(grades: list[float]) -> list[dict]:
    """
    Count grades per distribution bucket.

    A grade lands in the highest bucket whose lower bound it reaches;
    grades below every bucket count toward the first one.

    Returns:
        List of dicts with keys name, min, max, count.
    """
    buckets = [{**bucket, "count": 0} for bucket in DISTRIBUTION_BUCKETS]
    if not buckets:
        return buckets

    for g in grades:
        if not _is_number(g):
            continue
        target = buckets[0]
        for bucket in buckets:
            if float(g) >= bucket["min"]:
                target = bucket
        target["count"] += 1

    return buckets


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals, ties away from zero."""
    factor = 10 ** digits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)
