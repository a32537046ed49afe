"""Pytest configuration for path tracer tests.

Shared fixtures: a seeded random generator (every stochastic call in the
renderer takes an explicit generator) and a few stock materials.
"""

import random

import pytest

from core.vector import Color
from materials.lambertian import Lambertian


class FixedRng:
    """Stand-in generator that replays a fixed list of draws."""

    def __init__(self, values):
        self._values = iter(values)

    def uniform(self, a, b):
        return next(self._values)

    def random(self):
        return next(self._values)


@pytest.fixture
def rng():
    """A seeded generator so each test sees the same draws."""
    return random.Random(1234)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def fixed_rng():
    """Factory for FixedRng instances."""
    return FixedRng
