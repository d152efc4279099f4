"""Validation helpers for embedding layers that feed points into actions."""

from __future__ import annotations

from typing import Optional, Sequence

from sheet_engine.coords import Point

from .matrix import get_size


class GridValidationError(RuntimeError):
    """Raised when a caller supplies a point outside the grid."""

    def __init__(self, message: str, *, point: Optional[Point] = None) -> None:
        super().__init__(message)
        self.point = point


def ensure_point(grid: Sequence[Sequence[object]], point: Point) -> Point:
    size = get_size(grid)
    if point.row < 0 or point.row >= size.rows:
        raise GridValidationError("Row out of range", point=point)
    if point.column < 0 or point.column >= size.columns:
        raise GridValidationError("Column out of range", point=point)
    return point
