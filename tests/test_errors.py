"""Tests for the tilegrid exception hierarchy."""

import pytest

import tilegrid
from tilegrid.errors import (
    GridDimensionError,
    IrregularTextError,
    OutOfBoundsError,
    SpaceError,
    TilegridError,
)
from tilegrid.spatial import Vec2, Vec2u


def test_version_prefix():
    """Test messages carry the package version and keep the original text."""
    error = SpaceError("something broke")
    assert str(error) == f"[tilegrid {tilegrid.__version__}] something broke"
    assert error.original_message == "something broke"
    assert error.tilegrid_version == tilegrid.__version__


@pytest.mark.parametrize(
    "error_class, parent",
    [
        (SpaceError, TilegridError),
        (GridDimensionError, SpaceError),
        (IrregularTextError, GridDimensionError),
        (OutOfBoundsError, SpaceError),
        (TilegridError, Exception),
    ],
)
def test_hierarchy(error_class, parent):
    """Test each error derives from its parent."""
    assert issubclass(error_class, parent)


def test_out_of_bounds_attributes():
    """Test OutOfBoundsError keeps the position, dimensions and value."""
    error = OutOfBoundsError(Vec2(4, 0), Vec2u(2, 2), 9)
    assert error.pos == Vec2(4, 0)
    assert error.dimensions == Vec2u(2, 2)
    assert error.value == 9
    assert "out of range" in error.original_message


def test_irregular_text_message():
    """Test IrregularTextError names the offending line."""
    error = IrregularTextError(3, 1, 4)
    assert "Line 3 has 1 characters, expected 4" in str(error)
