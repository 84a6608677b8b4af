"""Fixed-size row-major grids indexed by 2D vectors.

A Map owns a flat sequence of ``width * height`` values where the cell at
``(x, y)`` lives at index ``y * width + x``. The dimensions never change after
construction.

Reads and writes follow two different policies:
- reads (``at``, ``get_pos``) return None for positions that are off the grid
- writes (``set_at``) to a position off the grid raise OutOfBoundsError, since
  that is a programming error rather than a condition to recover from
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

import numpy as np

from tilegrid.errors import GridDimensionError, OutOfBoundsError
from tilegrid.spatial.vector import Vec2, Vec2u
from tilegrid.tilegrid_logging import create_module_logger

_tilegrid_logger = create_module_logger()

T = TypeVar("T")


class Map(Generic[T]):
    """A generic 2D grid of values stored in row-major order.

    Attributes:
        width (int): number of columns
        height (int): number of rows
        dimensions (Vec2u): ``Vec2u(width, height)``

    Notes:
        Values are compared with ``==`` by ``find_all``, so T only needs
        equality. Cells are never handed out by reference; all writes go
        through ``set_at``.
    """

    __slots__ = ("_height", "_values", "_width")

    def __init__(self, width: int, height: int, values: Iterable[T]) -> None:
        """Create a new map.

        Args:
            width: number of columns, must be positive
            height: number of rows, must be positive
            values: the cell values in row-major order, exactly width * height of them

        Raises:
            GridDimensionError: if the dimensions are not positive integers or
                the number of values does not match them
        """
        if not all(isinstance(dim, int) and dim > 0 for dim in (width, height)):
            raise GridDimensionError(
                f"Dimensions must be positive integers, got width={width!r}, height={height!r}."
            )
        values = list(values)
        if len(values) != width * height:
            raise GridDimensionError(
                f"Expected {width * height} values for a {width}x{height} map, got {len(values)}."
            )

        self._width = width
        self._height = height
        self._values: list[T] = values
        _tilegrid_logger.debug(f"created {width}x{height} map")

    @classmethod
    def full(cls, dimensions: Vec2u, default_value: T) -> Map[T]:
        """Create a map with every cell set to ``default_value``."""
        return cls(
            dimensions.x,
            dimensions.y,
            [default_value] * (dimensions.x * dimensions.y),
        )

    @classmethod
    def from_array(cls, array: np.ndarray) -> Map[Any]:
        """Create a map from a 2D NumPy array shaped ``(height, width)``.

        Values are converted to Python scalars, so ``array[y, x]`` ends up at
        ``Vec2(x, y)``.
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise GridDimensionError(
                f"Expected a 2D array, got one with shape {array.shape}."
            )
        height, width = array.shape
        return cls(width, height, array.ravel().tolist())

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def dimensions(self) -> Vec2u:
        """The size of the map as ``Vec2u(width, height)``."""
        return Vec2u(self._width, self._height)

    @property
    def values(self) -> tuple[T, ...]:
        """A snapshot of all values in row-major order."""
        return tuple(self._values)

    def in_bounds(self, pos: Vec2) -> bool:
        """Return whether ``pos`` lies within ``[0, width) x [0, height)``."""
        return 0 <= pos.x < self._width and 0 <= pos.y < self._height

    def at(self, pos: Vec2) -> T | None:
        """Return the value at ``pos``, or None if it is off the grid."""
        if not self.in_bounds(pos):
            return None
        return self._values[pos.y * self._width + pos.x]

    def set_at(self, pos: Vec2, value: T) -> None:
        """Overwrite the value at ``pos``.

        Raises:
            OutOfBoundsError: if ``pos`` is off the grid
        """
        if not self.in_bounds(pos):
            _tilegrid_logger.warning(
                f"refusing to write {value!r} outside {self._width}x{self._height} map at {pos!r}"
            )
            raise OutOfBoundsError(pos, self.dimensions, value)
        upos = pos.unsign()
        self._values[upos.y * self._width + upos.x] = value

    def find_all(self, target: T) -> list[Vec2u]:
        """Return the positions of every cell equal to ``target`` in row-major order."""
        return [
            self.get_pos(i) for i, value in enumerate(self._values) if value == target
        ]

    def get_pos(self, index: int) -> Vec2u | None:
        """Convert a flat row-major index to a position, or None if out of range."""
        if not 0 <= index < len(self._values):
            return None
        y, x = divmod(index, self._width)
        return Vec2u(x, y)

    def items(self) -> Iterator[tuple[Vec2u, T]]:
        """Iterate over ``(position, value)`` pairs in row-major order."""
        for i, value in enumerate(self._values):
            yield self.get_pos(i), value

    def wrap(self, pos: Vec2) -> Vec2:
        """Wrap ``pos`` around the edges of the map as on a torus."""
        return pos % self.dimensions.sign()

    def neighbors(self, pos: Vec2, torus: bool = False) -> list[Vec2]:
        """Return the cardinal neighbors of ``pos`` that lie on the grid.

        Args:
            pos: the position whose neighbors to return
            torus: whether neighbors wrap around the edges of the map

        Returns:
            The neighbors in cardinal order (up, right, down, left). With
            ``torus=True`` a neighbor may repeat on maps one cell wide or high.
        """
        neighbors = []
        for direction in Vec2.cardinal():
            neighbor = pos + direction
            if torus:
                neighbor = self.wrap(neighbor)
            if self.in_bounds(neighbor):
                neighbors.append(neighbor)
        return neighbors

    def to_array(self, dtype=None) -> np.ndarray:
        """Return the values as a NumPy array shaped ``(height, width)``."""
        return np.array(self._values, dtype=dtype).reshape(self._height, self._width)

    def render(self, formatter: Callable[[T], str] = str) -> str:
        """Render the map as text, one line per row.

        Args:
            formatter: turns a single cell value into its text
        """
        rows = (
            "".join(
                formatter(value)
                for value in self._values[y * self._width : (y + 1) * self._width]
            )
            for y in range(self._height)
        )
        return "\n".join(rows)

    def copy(self) -> Map[T]:
        """Return an independent map with the same dimensions and values."""
        return Map(self._width, self._height, self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._values == other._values
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Map(width={self._width}, height={self._height}, values={self._values!r})"
