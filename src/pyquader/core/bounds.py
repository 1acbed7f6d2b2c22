"""Integer axis-aligned 3D bounding box."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Union

import numpy as np

from pyquader.core.collision import get_geometry_queries
from pyquader.core.containment import ContainmentType
from pyquader.core.ivec3 import INT32_MAX, INT32_MIN, IVec3, IVec3Like

logger = logging.getLogger(__name__)

PointsLike = Union[Iterable[IVec3Like], np.ndarray]


def _point_extrema(points: PointsLike | None) -> tuple[IVec3, IVec3]:
    """Component-wise (min, max) over ``points``, seeded from the empty box."""
    if points is None:
        raise ValueError("points must not be None")

    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError(f"Expected points array of shape (N, 3), got {points.shape}")
        if points.dtype.kind not in "iuO":
            raise TypeError(f"Points array must have an integer dtype, got {points.dtype}")

    if isinstance(points, np.ndarray) and points.dtype.kind != "O":
        arr = points.astype(np.int32)
    else:
        # Object arrays hold Python ints; coerce them like any sequence
        coerced = [IVec3.of(p).to_tuple() for p in points]
        arr = np.array(coerced, dtype=np.int32).reshape(-1, 3)

    lo = IntBounds.EMPTY.minimum.to_array()
    hi = IntBounds.EMPTY.maximum.to_array()
    if len(arr) == 0:
        logger.debug("No points given, returning the empty box")
    else:
        lo = np.minimum(lo, arr.min(axis=0))
        hi = np.maximum(hi, arr.max(axis=0))
    return IVec3.of(lo), IVec3.of(hi)


def _check_box(value: Any) -> IntBounds:
    if not isinstance(value, IntBounds):
        raise TypeError(f"Expected an IntBounds, got {type(value).__name__}")
    return value


def _check_out(out: Any) -> np.ndarray:
    if not isinstance(out, np.ndarray):
        raise ValueError(f"out must be a numpy array, got {type(out).__name__}")
    if out.shape != (2, 3) or out.dtype.kind != "i" or out.dtype.itemsize < 4:
        raise ValueError(
            f"out must be an int32 or int64 array of shape (2, 3), "
            f"got {out.dtype} {out.shape}"
        )
    return out


@dataclass(frozen=True)
class IntBounds:
    """3D axis-aligned bounding box with int32 corners.

    Boxes are immutable values. Nothing enforces ``minimum <= maximum``:
    inverted boxes (most usefully ``IntBounds.EMPTY``) are accepted by every
    operation, which is what lets ``EMPTY`` act as the starting point for
    merging boxes or points one at a time.

    Attributes:
        minimum: Minimum corner.
        maximum: Maximum corner.

    Examples:
        >>> box = IntBounds.from_points([(0, 0, 0), (2, 4, 6)])
        >>> box.center
        IVec3(1, 2, 3)
        >>> IntBounds.EMPTY.merge((5, 5, 5))
        IntBounds(x=[5, 5], y=[5, 5], z=[5, 5])
    """

    EMPTY: ClassVar[IntBounds]

    minimum: IVec3
    maximum: IVec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "minimum", IVec3.of(self.minimum))
        object.__setattr__(self, "maximum", IVec3.of(self.maximum))

    # ── Construction ────────────────────────────────────────────────

    @classmethod
    def from_points(cls, points: PointsLike) -> IntBounds:
        """Smallest box containing every point.

        Args:
            points: Iterable of IVec3 / 3-sequences, or an integer array of
                shape (N, 3). An empty input yields ``IntBounds.EMPTY``.

        Raises:
            ValueError: If ``points`` is None or an array of the wrong shape.
            TypeError: If coordinates are not integers.
        """
        lo, hi = _point_extrema(points)
        return cls(lo, hi)

    @classmethod
    def merge_all(cls, items: Iterable[IntBounds | IVec3Like]) -> IntBounds:
        """Fold ``merge`` over boxes and/or points, starting from EMPTY."""
        result = cls.EMPTY
        for item in items:
            result = result.merge(item)
        return result

    # ── Derived values ──────────────────────────────────────────────

    @property
    def center(self) -> IVec3:
        """Approximate center; integer division drops the remainder."""
        return (self.minimum + self.maximum).trunc_div(2)

    @property
    def extent(self) -> IVec3:
        """Approximate half-size; integer division drops the remainder."""
        return (self.maximum - self.minimum).trunc_div(2)

    @property
    def size(self) -> IVec3:
        return self.maximum - self.minimum

    @property
    def is_valid(self) -> bool:
        """True when ``minimum <= maximum`` on every axis."""
        lo, hi = self.minimum, self.maximum
        return lo.x <= hi.x and lo.y <= hi.y and lo.z <= hi.z

    def corners(self) -> list[IVec3]:
        """The eight corners: the max-Z face first, then the min-Z face.

        Both faces are walked in the same order (-x+y, +x+y, +x-y, -x-y).
        Renderers index into this list, so the order is fixed.
        """
        lo, hi = self.minimum, self.maximum
        return [
            IVec3(lo.x, hi.y, hi.z),
            IVec3(hi.x, hi.y, hi.z),
            IVec3(hi.x, lo.y, hi.z),
            IVec3(lo.x, lo.y, hi.z),
            IVec3(lo.x, hi.y, lo.z),
            IVec3(hi.x, hi.y, lo.z),
            IVec3(hi.x, lo.y, lo.z),
            IVec3(lo.x, lo.y, lo.z),
        ]

    def corners_array(self) -> np.ndarray:
        """Corners as an int32 array of shape (8, 3), same order as corners()."""
        return np.array([c.to_tuple() for c in self.corners()], dtype=np.int32)

    # ── Queries ─────────────────────────────────────────────────────

    def intersects(self, other: IntBounds) -> bool:
        """Check if two boxes overlap (touching faces count)."""
        return get_geometry_queries().box_intersects_box(self, _check_box(other))

    def contains_point(self, point: IVec3Like) -> ContainmentType:
        return get_geometry_queries().box_contains_point(self, IVec3.of(point))

    def contains_box(self, other: IntBounds) -> ContainmentType:
        return get_geometry_queries().box_contains_box(self, _check_box(other))

    def contains(self, value: IntBounds | IVec3Like) -> ContainmentType:
        """Classify a point or a box against this box."""
        if isinstance(value, IntBounds):
            return self.contains_box(value)
        return self.contains_point(value)

    # ── Merging ─────────────────────────────────────────────────────

    def merge_point(self, point: IVec3Like) -> IntBounds:
        """Grow the box just enough to include ``point``."""
        point = IVec3.of(point)
        return IntBounds(
            IVec3.minimum(self.minimum, point),
            IVec3.maximum(self.maximum, point),
        )

    def merge_box(self, other: IntBounds) -> IntBounds:
        """Return the bounding box enclosing both boxes."""
        other = _check_box(other)
        return IntBounds(
            IVec3.minimum(self.minimum, other.minimum),
            IVec3.maximum(self.maximum, other.maximum),
        )

    def merge(self, value: IntBounds | IVec3Like) -> IntBounds:
        """Merge a box or a point into this box."""
        if isinstance(value, IntBounds):
            return self.merge_box(value)
        return self.merge_point(value)

    # ── Conversion ──────────────────────────────────────────────────

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"minimum": self.minimum.to_dict(), "maximum": self.maximum.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IntBounds:
        """Create from the mapping produced by ``to_dict``."""
        return cls(IVec3.from_dict(data["minimum"]), IVec3.from_dict(data["maximum"]))

    def to_numpy(self) -> np.ndarray:
        """Return an int32 array of shape (2, 3): row 0 minimum, row 1 maximum."""
        return np.stack([self.minimum.to_array(), self.maximum.to_array()])

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> IntBounds:
        arr = np.asarray(arr)
        if arr.shape != (2, 3):
            raise ValueError(f"Expected array of shape (2, 3), got {arr.shape}")
        return cls(IVec3.of(arr[0]), IVec3.of(arr[1]))

    def __format__(self, format_spec: str) -> str:
        return (
            f"Minimum:{self.minimum:{format_spec}} "
            f"Maximum:{self.maximum:{format_spec}}"
        )

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        lo, hi = self.minimum, self.maximum
        return (
            f"IntBounds(x=[{lo.x}, {hi.x}], "
            f"y=[{lo.y}, {hi.y}], "
            f"z=[{lo.z}, {hi.z}])"
        )


IntBounds.EMPTY = IntBounds(IVec3.full(INT32_MAX), IVec3.full(INT32_MIN))


# ── Output-slot variants ────────────────────────────────────────────


def from_points_into(points: PointsLike, out: np.ndarray) -> np.ndarray:
    """``IntBounds.from_points`` writing into a caller-owned (2, 3) array.

    Row 0 receives the minimum corner, row 1 the maximum. Returns ``out``.
    """
    _check_out(out)
    lo, hi = _point_extrema(points)
    out[0] = lo.to_tuple()
    out[1] = hi.to_tuple()
    return out


def merge_into(box: IntBounds, value: IntBounds | IVec3Like, out: np.ndarray) -> np.ndarray:
    """``box.merge(value)`` writing into a caller-owned (2, 3) array."""
    _check_out(out)
    merged = box.merge(value)
    out[0] = merged.minimum.to_tuple()
    out[1] = merged.maximum.to_tuple()
    return out
