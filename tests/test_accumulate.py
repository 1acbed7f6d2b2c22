"""Tests for streaming bounds accumulation."""

import logging

import numpy as np
import pytest

from pyquader.accumulate import BoundsAccumulator
from pyquader.core.bounds import IntBounds
from pyquader.core.ivec3 import IVec3


class TestBoundsAccumulator:
    def test_starts_empty(self):
        acc = BoundsAccumulator()
        assert acc.bounds == IntBounds.EMPTY
        assert acc.num_points == 0
        assert acc.num_chunks == 0

    def test_add_point(self):
        acc = BoundsAccumulator()
        acc.add_point((1, 2, 3))
        acc.add_point(IVec3(-1, 5, 0))
        assert acc.bounds == IntBounds((-1, 2, 0), (1, 5, 3))
        assert acc.num_points == 2

    def test_add_points_array(self, random_points):
        acc = BoundsAccumulator()
        acc.add_points(random_points[:50])
        acc.add_points(random_points[50:])
        assert acc.bounds == IntBounds.from_points(random_points)
        assert acc.num_points == 200
        assert acc.num_chunks == 2

    def test_add_points_generator(self):
        acc = BoundsAccumulator()
        acc.add_points((i, i, i) for i in range(4))
        assert acc.bounds == IntBounds((0, 0, 0), (3, 3, 3))
        assert acc.num_points == 4

    def test_add_points_none_raises(self):
        with pytest.raises(ValueError, match="points"):
            BoundsAccumulator().add_points(None)

    def test_add_box(self, unit_box):
        acc = BoundsAccumulator()
        acc.add_box(unit_box)
        acc.add_box(IntBounds.EMPTY)
        assert acc.bounds == unit_box

    def test_consume_chunks(self, random_points):
        acc = BoundsAccumulator()
        chunks = (random_points[i:i + 30] for i in range(0, len(random_points), 30))
        result = acc.consume(chunks)
        assert result == IntBounds.from_points(random_points)
        assert acc.num_chunks == 7
        assert acc.num_points == 200

    def test_consume_nothing_warns(self, caplog):
        acc = BoundsAccumulator()
        with caplog.at_level(logging.WARNING, logger="pyquader.accumulate"):
            result = acc.consume([])
        assert result == IntBounds.EMPTY
        assert "No points" in caplog.text
        assert "bounds are empty" in caplog.text

    def test_consume_empty_stream_after_points_warns(self, caplog):
        acc = BoundsAccumulator()
        acc.add_points([(0, 0, 0), (1, 1, 1)])
        with caplog.at_level(logging.INFO, logger="pyquader.accumulate"):
            result = acc.consume([])
        assert result == IntBounds((0, 0, 0), (1, 1, 1))
        levels = [r.levelno for r in caplog.records]
        assert levels == [logging.WARNING]
        assert "No points in stream" in caplog.text
        assert "bounds unchanged" in caplog.text
        assert "Accumulated" not in caplog.text

    def test_consume_empty_stream_after_box_not_empty(self, unit_box, caplog):
        acc = BoundsAccumulator()
        acc.add_box(unit_box)
        with caplog.at_level(logging.WARNING, logger="pyquader.accumulate"):
            result = acc.consume([])
        assert result == unit_box
        assert "bounds are empty" not in caplog.text
        assert "bounds unchanged" in caplog.text

    def test_consume_logs_per_call_counts(self, caplog):
        acc = BoundsAccumulator()
        acc.add_points([(0, 0, 0), (1, 1, 1), (2, 2, 2)])
        with caplog.at_level(logging.INFO, logger="pyquader.accumulate"):
            acc.consume([[(5, 5, 5)], [(6, 6, 6), (7, 7, 7)]])
        assert "Accumulated 3 points from 2 chunks" in caplog.text
        assert acc.num_points == 6
        assert acc.num_chunks == 3

    def test_consume_empty_chunks(self):
        acc = BoundsAccumulator()
        result = acc.consume([np.empty((0, 3), dtype=np.int32), []])
        assert result == IntBounds.EMPTY
        assert acc.num_chunks == 2

    def test_reset(self):
        acc = BoundsAccumulator()
        acc.add_points([(5, 5, 5)])
        acc.reset()
        assert acc.bounds == IntBounds.EMPTY
        assert acc.num_points == 0

    def test_repr(self):
        acc = BoundsAccumulator()
        acc.add_points([(0, 0, 0), (1, 1, 1)])
        r = repr(acc)
        assert "BoundsAccumulator" in r
        assert "2 points" in r
