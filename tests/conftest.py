"""Pytest configuration and fixtures."""

from dataclasses import replace

import pytest

from swiss_grade_calculator.config import AlgorithmType, GradingConfig


@pytest.fixture
def default_config():
    """Return the default 60-point exam configuration (LINEAR, step 0.5)."""
    return GradingConfig(
        max_possible_points=60,
        points_for_6=55,
        points_for_4=33,
        grade_min=1.0,
        grade_max=6.0,
        rounding_step=0.5,
        algorithm=AlgorithmType.LINEAR,
    )


@pytest.fixture
def make_config(default_config):
    """Return a factory deriving configurations from the default one."""
    def _make(**overrides):
        return replace(default_config, **overrides)
    return _make


@pytest.fixture
def sample_students():
    """Return the sample roster used in the examples."""
    return [
        {"name": "Anna Muster", "points": 42},
        {"name": "Beat Beispiel", "points": 35},
        {"name": "Charlie Code", "points": 58},
        {"name": "Dora Demo", "points": 21},
        {"name": "Emil Example", "points": 49},
    ]
