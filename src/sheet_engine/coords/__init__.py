"""Point addressing and the sparse, immutable containers built on it."""

from .point import Field, Point
from .point_map import PointMap
from .point_set import PointSet

__all__ = [
    "Field",
    "Point",
    "PointSet",
    "PointMap",
]
