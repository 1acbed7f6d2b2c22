"""Containment classification returned by box queries."""

from __future__ import annotations

from enum import Enum


class ContainmentType(Enum):
    """How one object relates to another in a containment test.

    Attributes:
        DISJOINT: The objects do not touch.
        CONTAINS: One object lies fully inside the other (boundary included).
        INTERSECTS: The objects overlap only partially.
    """

    DISJOINT = "disjoint"
    CONTAINS = "contains"
    INTERSECTS = "intersects"
