"""Roster statistics."""

from .aggregator import compute_stats, grade_distribution

__all__ = ["compute_stats", "grade_distribution"]
