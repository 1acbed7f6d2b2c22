"""Shared test fixtures."""

import numpy as np
import pytest

from pyquader.core.bounds import IntBounds
from pyquader.core.collision import get_geometry_queries, set_geometry_queries
from pyquader.core.ivec3 import IVec3


@pytest.fixture
def unit_box() -> IntBounds:
    """The 2x2x2 box used throughout: (0,0,0) to (2,2,2)."""
    return IntBounds(IVec3(0, 0, 0), IVec3(2, 2, 2))


@pytest.fixture
def random_points() -> np.ndarray:
    """200 random int32 points of shape (200, 3)."""
    rng = np.random.default_rng(42)
    return rng.integers(-10_000, 10_000, size=(200, 3), dtype=np.int32)


@pytest.fixture
def random_boxes() -> list[IntBounds]:
    """A handful of valid boxes with random corners."""
    rng = np.random.default_rng(7)
    boxes = []
    for _ in range(6):
        corners = rng.integers(-100, 100, size=(2, 3))
        boxes.append(IntBounds.from_points(corners))
    return boxes


@pytest.fixture
def restore_queries():
    """Put the original geometry queries back after a test swaps them."""
    original = get_geometry_queries()
    yield original
    set_geometry_queries(original)
