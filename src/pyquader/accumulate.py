"""Incremental bounds over a stream of point chunks."""

from __future__ import annotations

import logging
from typing import Iterable

from pyquader.core.bounds import IntBounds, PointsLike
from pyquader.core.ivec3 import IVec3Like

logger = logging.getLogger(__name__)


class BoundsAccumulator:
    """Grow a bounding box chunk by chunk without holding all points.

    Each chunk is reduced to its own box and merged into the running
    result, so memory stays bounded by the largest chunk. The running box
    starts at ``IntBounds.EMPTY`` and only ever grows.

    Examples:
        >>> acc = BoundsAccumulator()
        >>> acc.add_points([(0, 0, 0), (1, 2, 3)])
        >>> acc.add_point((-1, 0, 5))
        >>> acc.bounds
        IntBounds(x=[-1, 1], y=[0, 2], z=[0, 5])
    """

    def __init__(self) -> None:
        self._bounds: IntBounds = IntBounds.EMPTY
        self._num_points: int = 0
        self._num_chunks: int = 0

    @property
    def bounds(self) -> IntBounds:
        """The box enclosing everything added so far."""
        return self._bounds

    @property
    def num_points(self) -> int:
        return self._num_points

    @property
    def num_chunks(self) -> int:
        return self._num_chunks

    def add_point(self, point: IVec3Like) -> None:
        self._bounds = self._bounds.merge_point(point)
        self._num_points += 1

    def add_points(self, points: PointsLike) -> None:
        """Add one chunk of points (same inputs as ``IntBounds.from_points``)."""
        if points is None:
            raise ValueError("points must not be None")
        points = points if hasattr(points, "__len__") else list(points)
        chunk = IntBounds.from_points(points)
        self._bounds = self._bounds.merge_box(chunk)
        self._num_points += len(points)
        self._num_chunks += 1

    def add_box(self, box: IntBounds) -> None:
        self._bounds = self._bounds.merge_box(box)

    def consume(self, chunks: Iterable[PointsLike]) -> IntBounds:
        """Add every chunk from ``chunks`` and return the resulting box.

        Args:
            chunks: Iterable of point chunks, e.g. slices of a large array
                or batches from a reader.

        Returns:
            The accumulated bounds (``IntBounds.EMPTY`` if no points).
        """
        before_chunks = self._num_chunks
        before_points = self._num_points
        for chunk in chunks:
            self.add_points(chunk)

        new_chunks = self._num_chunks - before_chunks
        new_points = self._num_points - before_points
        if new_points == 0:
            if self._bounds == IntBounds.EMPTY:
                logger.warning(
                    "No points in stream (%d chunks), bounds are empty", new_chunks
                )
            else:
                logger.warning(
                    "No points in stream (%d chunks), bounds unchanged: %r",
                    new_chunks, self._bounds,
                )
        else:
            logger.info(
                "Accumulated %d points from %d chunks: %r",
                new_points, new_chunks, self._bounds,
            )
        return self._bounds

    def reset(self) -> None:
        self._bounds = IntBounds.EMPTY
        self._num_points = 0
        self._num_chunks = 0

    def __repr__(self) -> str:
        return (
            f"BoundsAccumulator({self._num_points:,} points, "
            f"{self._num_chunks} chunks, {self._bounds!r})"
        )
