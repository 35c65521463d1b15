"""Output formatting modules."""

from .formatters import (
    format_config,
    format_students_table,
    format_scale_table,
    format_stats,
    format_distribution,
    format_curve,
    format_json,
)

__all__ = [
    "format_config",
    "format_students_table",
    "format_scale_table",
    "format_stats",
    "format_distribution",
    "format_curve",
    "format_json",
]
