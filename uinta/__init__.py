"""Engine building blocks: vector math, cameras, metrics, a spatial quadtree and text meshing."""

__version__ = "0.1.0"

__all__ = [
    "buffers",
    "camera",
    "debug",
    "fonts",
    "linalg",
    "metrics",
    "quadtree",
    "textmesh",
]