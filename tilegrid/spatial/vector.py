"""Signed and unsigned 2D integer vectors.

Provides the two coordinate types used throughout tilegrid:
- Vec2: signed vector for positions that may leave the grid, deltas and directions
- Vec2u: unsigned vector for valid grid coordinates and dimensions

Both are immutable value types; every operation returns a new instance.
Converting between them is explicit: ``Vec2u.sign`` always succeeds, while
``Vec2.unsign`` returns None for a vector with a negative component, which
callers treat as an "off-grid" signal.

y grows downwards, so "up" is ``Vec2(0, -1)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_GLYPHS = {
    (0, 0): "o",
    (0, -1): "^",
    (1, 0): ">",
    (0, 1): "v",
    (-1, 0): "<",
}
_FALLBACK_GLYPH = "*"


def _check_components(vec) -> None:
    if not all(isinstance(c, int) for c in (vec.x, vec.y)):
        raise TypeError(
            f"{type(vec).__name__} components must be integers, got ({vec.x!r}, {vec.y!r})."
        )


@dataclass(frozen=True, slots=True)
class Vec2:
    """A signed 2D integer vector.

    Attributes:
        x (int): horizontal component, growing to the right
        y (int): vertical component, growing downwards

    Raises:
        TypeError: if either component is not an integer
    """

    x: int
    y: int

    X: ClassVar[Vec2]
    Y: ClassVar[Vec2]
    ZERO: ClassVar[Vec2]

    def __post_init__(self):
        _check_components(self)

    @classmethod
    def from_tuple(cls, xy: tuple[int, int]) -> Vec2:
        """Create a vector from an ``(x, y)`` tuple."""
        x, y = xy
        return cls(x, y)

    @staticmethod
    def cardinal() -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """Return the four unit directions in the order up, right, down, left."""
        return (-Vec2.Y, Vec2.X, Vec2.Y, -Vec2.X)

    def unsign(self) -> Vec2u | None:
        """Convert to an unsigned vector, or None if either component is negative."""
        if self.x >= 0 and self.y >= 0:
            return Vec2u(self.x, self.y)
        return None

    def as_str(self) -> str:
        """Return the glyph for this vector.

        The zero vector and the four cardinal unit vectors map to
        ``o ^ > v <``; every other vector maps to ``*``.
        """
        return _GLYPHS.get((self.x, self.y), _FALLBACK_GLYPH)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return self.as_str()

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Vec2:
        if not isinstance(scalar, int):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __mod__(self, other: Vec2) -> Vec2:
        """Component-wise Euclidean remainder; results lie in ``[0, |divisor|)``."""
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x % abs(other.x), self.y % abs(other.y))

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


Vec2.X = Vec2(1, 0)
Vec2.Y = Vec2(0, 1)
Vec2.ZERO = Vec2(0, 0)


@dataclass(frozen=True, slots=True)
class Vec2u:
    """An unsigned 2D integer vector.

    Attributes:
        x (int): horizontal component, never negative
        y (int): vertical component, never negative

    Raises:
        TypeError: if either component is not an integer
        ValueError: if either component is negative
    """

    x: int
    y: int

    def __post_init__(self):
        _check_components(self)
        if self.x < 0 or self.y < 0:
            raise ValueError(
                f"Vec2u components must be non-negative, got ({self.x}, {self.y})."
            )

    def sign(self) -> Vec2:
        """Convert to a signed vector; always succeeds."""
        return Vec2(self.x, self.y)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __add__(self, other: Vec2u) -> Vec2u:
        if not isinstance(other, Vec2u):
            return NotImplemented
        return Vec2u(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: int) -> Vec2u:
        if not isinstance(scalar, int):
            return NotImplemented
        return Vec2u(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__
