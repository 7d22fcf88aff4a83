"""Pytest configuration for path tracer tests.

Provides seeded random generators and small scene helpers shared by the
test modules.
"""

import random

import pytest

from core.vector import Vector3
from materials.lambertian import Lambertian
from materials.material import MaterialTable


class FixedRng:
    """Stand-in generator whose uniform draws always return one value.

    Only used where a test needs to pin the dielectric's reflect/refract
    coin flip; rejection samplers still need a real generator.
    """

    def __init__(self, value: float):
        self.value = value

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.value

    def random(self) -> float:
        return self.value


@pytest.fixture
def rng():
    """Seeded generator so sampling tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def gray_materials():
    """Material table with a single 50% gray Lambertian at handle 0."""
    table = MaterialTable()
    table.add(Lambertian(Vector3(0.5, 0.5, 0.5)))
    return table
