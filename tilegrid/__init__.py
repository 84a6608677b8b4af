"""tilegrid: integer vectors and row-major grids for 2D text canvases.

Core Objects: Vec2, Vec2u, Map, ProxyMap
"""

__version__ = "0.1.0"

from tilegrid.spatial import Map, ProxyMap, Vec2, Vec2u  # noqa: E402

__all__ = ["Map", "ProxyMap", "Vec2", "Vec2u", "__version__"]
