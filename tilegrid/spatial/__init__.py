"""Coordinate and storage primitives for 2D grids.

This package provides:
- Vec2, Vec2u: signed and unsigned integer vectors with directional helpers
- Map: a fixed-size, row-major grid indexed by vectors
- ProxyMap: an adapter that parses a rectangular block of text into a Map

Consumers such as canvases or viewports own a Map and query or update it
through Vec2 coordinates.
"""

from tilegrid.spatial.vector import Vec2, Vec2u  # isort: skip
from tilegrid.spatial.map import Map
from tilegrid.spatial.proxy_map import ProxyMap

__all__ = ["Map", "ProxyMap", "Vec2", "Vec2u"]
