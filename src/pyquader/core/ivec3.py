"""Integer 3-vector with int32 two's-complement semantics."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Union

import numpy as np

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def wrap_int32(value: int) -> int:
    """Wrap an arbitrary Python int into the signed 32-bit range."""
    return ((value - INT32_MIN) & 0xFFFFFFFF) + INT32_MIN


def _trunc_div(a: int, b: int) -> int:
    # Python's // floors; C-style integer division truncates toward zero
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass(frozen=True)
class IVec3:
    """Three signed 32-bit integer components.

    Values outside the int32 range wrap around on construction, so every
    arithmetic result behaves like fixed-width integer math.

    Examples:
        >>> IVec3(1, 2, 3) + IVec3(1, 1, 1)
        IVec3(2, 3, 4)
        >>> IVec3(INT32_MAX, 0, 0) + IVec3(1, 0, 0)
        IVec3(-2147483648, 0, 0)
        >>> IVec3(-7, 7, 0).trunc_div(2)
        IVec3(-3, 3, 0)
    """

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            try:
                value = operator.index(getattr(self, name))
            except TypeError:
                raise TypeError(
                    f"IVec3.{name} must be an integer, got {getattr(self, name)!r}"
                ) from None
            object.__setattr__(self, name, wrap_int32(value))

    # ── Constructors ────────────────────────────────────────────────

    @classmethod
    def full(cls, value: int) -> IVec3:
        """Vector with all three components set to ``value``."""
        return cls(value, value, value)

    @classmethod
    def of(cls, value: IVec3Like) -> IVec3:
        """Coerce an IVec3, a 3-sequence or a length-3 array."""
        if isinstance(value, IVec3):
            return value
        if isinstance(value, np.ndarray):
            if value.shape != (3,):
                raise ValueError(f"Expected array of shape (3,), got {value.shape}")
            value = value.tolist()
        try:
            x, y, z = value
        except (TypeError, ValueError):
            raise TypeError(f"Cannot interpret {value!r} as an IVec3") from None
        return cls(x, y, z)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IVec3:
        """Create from a ``{"x": .., "y": .., "z": ..}`` mapping."""
        return cls(data["x"], data["y"], data["z"])

    # ── Component-wise operations ───────────────────────────────────

    @staticmethod
    def minimum(a: IVec3, b: IVec3) -> IVec3:
        """Component-wise minimum."""
        return IVec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))

    @staticmethod
    def maximum(a: IVec3, b: IVec3) -> IVec3:
        """Component-wise maximum."""
        return IVec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    def __add__(self, other: IVec3) -> IVec3:
        if not isinstance(other, IVec3):
            return NotImplemented
        return IVec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: IVec3) -> IVec3:
        if not isinstance(other, IVec3):
            return NotImplemented
        return IVec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> IVec3:
        return IVec3(-self.x, -self.y, -self.z)

    def trunc_div(self, divisor: int) -> IVec3:
        """Divide every component by ``divisor``, truncating toward zero.

        Raises:
            ZeroDivisionError: If ``divisor`` is 0.
        """
        divisor = operator.index(divisor)
        if divisor == 0:
            raise ZeroDivisionError("IVec3 division by zero")
        return IVec3(
            _trunc_div(self.x, divisor),
            _trunc_div(self.y, divisor),
            _trunc_div(self.z, divisor),
        )

    # ── Conversion ──────────────────────────────────────────────────

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Return the components as an int32 array of shape (3,)."""
        return np.array(self.to_tuple(), dtype=np.int32)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "z": self.z}

    def __format__(self, format_spec: str) -> str:
        return (
            f"X:{self.x:{format_spec}} "
            f"Y:{self.y:{format_spec}} "
            f"Z:{self.z:{format_spec}}"
        )

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"IVec3({self.x}, {self.y}, {self.z})"


IVec3Like = Union[IVec3, Sequence[int], np.ndarray]
