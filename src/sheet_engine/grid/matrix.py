"""Bounds-checked accessors over a rectangular array of rows.

A grid is a tuple of equally long tuples. Cells are arbitrary values with
``None`` standing for an absent cell. Every mutator returns a new grid and
leaves the input untouched; ``set``/``unset`` only rebuild the affected row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from sheet_engine.coords import Point

T = TypeVar("T")

Row = Tuple[Optional[T], ...]
Grid = Tuple[Tuple[Optional[T], ...], ...]


@dataclass(frozen=True, slots=True)
class Size:
    rows: int
    columns: int

    def __getitem__(self, field: str) -> int:
        # "row" -> rows, "column" -> columns
        return getattr(self, f"{field}s")


def create_empty_matrix(rows: int, columns: int) -> Grid:
    return tuple((None,) * columns for _ in range(rows))


def from_rows(rows: Iterable[Iterable[Optional[T]]]) -> Grid:
    """Normalize nested sequences into a rectangular tuple grid.

    Short rows are padded with ``None`` up to the widest row.
    """

    materialized = [tuple(row) for row in rows]
    width = max((len(row) for row in materialized), default=0)
    return tuple(row + (None,) * (width - len(row)) for row in materialized)


def get_size(grid: Sequence[Sequence[object]]) -> Size:
    return Size(rows=len(grid), columns=len(grid[0]) if grid else 0)


def has(row: int, column: int, grid: Sequence[Sequence[object]]) -> bool:
    if row < 0 or column < 0:
        return False
    if row >= len(grid):
        return False
    return column < len(grid[0])


def get(row: int, column: int, grid: Sequence[Sequence[Optional[T]]]) -> Optional[T]:
    if not has(row, column, grid):
        return None
    return grid[row][column]


def set(
    row: int, column: int, value: Optional[T], grid: Sequence[Sequence[Optional[T]]]
) -> Grid:
    """Return ``grid`` with ``value`` stored at ``(row, column)``.

    Writes outside the current extent grow the grid with empty cells.
    """

    rows: List[Tuple[Optional[T], ...]] = [tuple(r) for r in grid]
    width = max(get_size(grid).columns, column + 1)
    while len(rows) <= row:
        rows.append((None,) * width)
    target = list(rows[row])
    if len(target) <= column:
        target.extend([None] * (column + 1 - len(target)))
    target[column] = value
    rows[row] = tuple(target)
    if width > get_size(grid).columns:
        return from_rows(rows)
    return tuple(rows)


def unset(row: int, column: int, grid: Sequence[Sequence[Optional[T]]]) -> Grid:
    if not has(row, column, grid):
        return tuple(tuple(r) for r in grid)
    return set(row, column, None, grid)


def pad_matrix(grid: Sequence[Sequence[Optional[T]]], total_rows: int) -> Grid:
    """Grow ``grid`` downward to ``total_rows`` rows. Never shrinks."""

    columns = get_size(grid).columns
    missing = total_rows - len(grid)
    padding = create_empty_matrix(missing, columns) if missing > 0 else ()
    return tuple(tuple(r) for r in grid) + padding


def inclusive_range(start: Point, end: Point) -> List[Point]:
    """Every point of the rectangle spanned by ``start`` and ``end``, row-major."""

    top, bottom = sorted((start.row, end.row))
    left, right = sorted((start.column, end.column))
    return [
        Point(row, column)
        for row in range(top, bottom + 1)
        for column in range(left, right + 1)
    ]


__all__ = [
    "Grid",
    "Row",
    "Size",
    "create_empty_matrix",
    "from_rows",
    "get_size",
    "has",
    "get",
    "set",
    "unset",
    "pad_matrix",
    "inclusive_range",
]
