"""pyquader — integer axis-aligned bounding boxes."""

from pyquader._version import __version__
from pyquader.core.ivec3 import IVec3
from pyquader.core.bounds import IntBounds, from_points_into, merge_into
from pyquader.core.containment import ContainmentType
from pyquader.core.collision import get_geometry_queries, set_geometry_queries
from pyquader.accumulate import BoundsAccumulator

__all__ = [
    "__version__",
    "IVec3",
    "IntBounds",
    "ContainmentType",
    "BoundsAccumulator",
    "from_points_into",
    "merge_into",
    "get_geometry_queries",
    "set_geometry_queries",
]
