"""Box/box and box/point queries shared by every bounding-volume type.

``IntBounds`` never tests geometry itself: it dispatches to the
implementation installed here, so a single tested algorithm serves every
caller and can be swapped without touching the box type.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pyquader.core.containment import ContainmentType

if TYPE_CHECKING:
    from pyquader.core.bounds import IntBounds
    from pyquader.core.ivec3 import IVec3

logger = logging.getLogger(__name__)


@runtime_checkable
class GeometryQueries(Protocol):
    """The three classification primitives a box delegates to."""

    def box_intersects_box(self, a: IntBounds, b: IntBounds) -> bool:
        ...

    def box_contains_point(self, box: IntBounds, point: IVec3) -> ContainmentType:
        ...

    def box_contains_box(self, outer: IntBounds, inner: IntBounds) -> ContainmentType:
        ...


class AabbQueries:
    """Closed-interval AABB tests: a point on a face counts as inside."""

    def box_intersects_box(self, a: IntBounds, b: IntBounds) -> bool:
        lo_a, hi_a = a.minimum, a.maximum
        lo_b, hi_b = b.minimum, b.maximum
        if lo_a.x > hi_b.x or lo_b.x > hi_a.x:
            return False
        if lo_a.y > hi_b.y or lo_b.y > hi_a.y:
            return False
        if lo_a.z > hi_b.z or lo_b.z > hi_a.z:
            return False
        return True

    def box_contains_point(self, box: IntBounds, point: IVec3) -> ContainmentType:
        lo, hi = box.minimum, box.maximum
        if (
            lo.x <= point.x <= hi.x
            and lo.y <= point.y <= hi.y
            and lo.z <= point.z <= hi.z
        ):
            return ContainmentType.CONTAINS
        return ContainmentType.DISJOINT

    def box_contains_box(self, outer: IntBounds, inner: IntBounds) -> ContainmentType:
        if not self.box_intersects_box(outer, inner):
            return ContainmentType.DISJOINT

        lo_o, hi_o = outer.minimum, outer.maximum
        lo_i, hi_i = inner.minimum, inner.maximum
        if (
            lo_o.x <= lo_i.x and hi_i.x <= hi_o.x
            and lo_o.y <= lo_i.y and hi_i.y <= hi_o.y
            and lo_o.z <= lo_i.z and hi_i.z <= hi_o.z
        ):
            return ContainmentType.CONTAINS
        return ContainmentType.INTERSECTS

    def __repr__(self) -> str:
        return "AabbQueries()"


_queries: GeometryQueries = AabbQueries()


def get_geometry_queries() -> GeometryQueries:
    """Return the implementation boxes currently dispatch to."""
    return _queries


def set_geometry_queries(queries: GeometryQueries) -> GeometryQueries:
    """Install a new implementation and return the previous one.

    Meant to be called once at start-up; boxes created before and after the
    swap all use whatever is installed at query time.

    Raises:
        TypeError: If ``queries`` lacks any of the three query methods.
    """
    global _queries
    if not isinstance(queries, GeometryQueries):
        raise TypeError(
            f"{queries!r} does not implement box_intersects_box, "
            f"box_contains_point and box_contains_box"
        )
    previous = _queries
    _queries = queries
    logger.info("Geometry queries: %r -> %r", previous, queries)
    return previous
