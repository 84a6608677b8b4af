"""Staging adapter that turns a rectangular block of text into a Map.

The text is trimmed, split into lines and flattened in row-major order. A
caller-supplied parser then turns the flat text into cell values, which is the
single point where a grid is specialized to a domain (tiles, terrain, glyphs).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from tilegrid.errors import GridDimensionError, IrregularTextError, SpaceError
from tilegrid.spatial.map import Map
from tilegrid.spatial.vector import Vec2u
from tilegrid.tilegrid_logging import create_module_logger, method_logger

_tilegrid_logger = create_module_logger()

T = TypeVar("T")


class ProxyMap:
    """Dimensions and flattened text of a grid that has not been parsed yet.

    Attributes:
        width (int): number of characters per line
        height (int): number of lines
        string (str): all lines concatenated without separators

    Notes:
        A ProxyMap is converted exactly once; a second conversion raises SpaceError.
    """

    def __init__(self, width: int, height: int, string: str) -> None:
        """Create a new proxy map.

        Args:
            width: number of characters per line
            height: number of lines
            string: the flattened text, width * height characters long
        """
        self.width = width
        self.height = height
        self.string = string
        self._converted = False

    @classmethod
    def from_text(cls, text: str) -> ProxyMap:
        """Read a block of text as a grid, one row per line.

        Surrounding whitespace and blank lines are trimmed from the whole block
        first. Lines are separated by "\\n" or "\\r\\n" only. Every remaining
        line must be as long as the first.

        Raises:
            GridDimensionError: if nothing is left after trimming
            IrregularTextError: if a line's length differs from the first line's
        """
        stripped = text.strip()
        if not stripped:
            raise GridDimensionError("Cannot build a grid from an empty text block.")
        lines = [line.removesuffix("\r") for line in stripped.split("\n")]

        width = len(lines[0])
        for line_number, line in enumerate(lines[1:], start=2):
            if len(line) != width:
                _tilegrid_logger.warning(
                    f"irregular text block: line {line_number} has {len(line)} characters, expected {width}"
                )
                raise IrregularTextError(line_number, len(line), width)

        _tilegrid_logger.debug(f"read {width}x{len(lines)} text block")
        return cls(width, len(lines), "".join(lines))

    @property
    def dimensions(self) -> Vec2u:
        return Vec2u(self.width, self.height)

    @method_logger(__name__)
    def convert(self, parser: Callable[[str], Sequence[T]]) -> Map[T]:
        """Parse the flattened text into a Map.

        Args:
            parser: turns the whole flattened text into the cell values in
                row-major order

        Raises:
            SpaceError: if this proxy map has already been converted
            GridDimensionError: if the parser does not return width * height values
        """
        if self._converted:
            raise SpaceError("ProxyMap has already been converted.")
        self._converted = True
        return Map(self.width, self.height, parser(self.string))

    def convert_each(self, cell_parser: Callable[[str], T]) -> Map[T]:
        """Parse the flattened text into a Map one character at a time."""
        return self.convert(lambda string: [cell_parser(char) for char in string])

    def __repr__(self) -> str:
        return f"ProxyMap(width={self.width}, height={self.height}, string={self.string!r})"
