"""Tilegrid exception hierarchy."""

import tilegrid


class TilegridError(Exception):
    """Base class for all tilegrid-specific exceptions.

    It automatically prepends the tilegrid version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.tilegrid_version = getattr(tilegrid, "__version__", "unknown")
        self.original_message = message
        super().__init__(f"[tilegrid {self.tilegrid_version}] {message}")


class SpaceError(TilegridError):
    """Generic errors related to grids and coordinates."""


class GridDimensionError(SpaceError):
    """Raised when grid dimensions are invalid.

    Examples: non-positive width/height, or a value sequence whose length
    does not match width * height.
    """


class IrregularTextError(GridDimensionError):
    """Raised when a text block cannot be read as a rectangular grid."""

    def __init__(self, line_number: int, length: int, expected: int):
        self.line_number = line_number
        self.length = length
        self.expected = expected
        message = (
            f"Line {line_number} has {length} characters, "
            f"expected {expected} to match the first line."
        )
        super().__init__(message)


class OutOfBoundsError(SpaceError):
    """Raised when writing to a position outside the grid."""

    def __init__(self, pos, dimensions, value):
        self.pos = pos
        self.dimensions = dimensions
        self.value = value
        message = (
            f"Map index is out of range: {pos!r} = {value!r} "
            f"(grid dimensions {dimensions!r})."
        )
        super().__init__(message)
