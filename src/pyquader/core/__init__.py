"""Core value types for pyquader."""

from pyquader.core.ivec3 import IVec3, INT32_MIN, INT32_MAX
from pyquader.core.bounds import IntBounds, from_points_into, merge_into
from pyquader.core.containment import ContainmentType
from pyquader.core.collision import (
    AabbQueries,
    GeometryQueries,
    get_geometry_queries,
    set_geometry_queries,
)

__all__ = [
    "IVec3",
    "INT32_MIN",
    "INT32_MAX",
    "IntBounds",
    "from_points_into",
    "merge_into",
    "ContainmentType",
    "AabbQueries",
    "GeometryQueries",
    "get_geometry_queries",
    "set_geometry_queries",
]
