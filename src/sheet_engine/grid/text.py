"""Clipboard text interchange: tab separated cells, newline separated rows."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

from sheet_engine.coords import PointMap

from .matrix import Grid, create_empty_matrix, set

T = TypeVar("T")

ROW_SEPARATOR = "\n"
CELL_SEPARATOR = "\t"


def split(text: str, cell_factory: Callable[[str], T]) -> Grid:
    """Parse clipboard text into a grid, building each cell with ``cell_factory``.

    Every newline starts a row, so ``join`` and ``split`` round-trip exactly,
    including empty trailing cells. Ragged rows are padded with ``None``.
    """

    normalized = text.replace("\r\n", ROW_SEPARATOR)
    lines = normalized.split(ROW_SEPARATOR)
    rows = [
        tuple(cell_factory(raw) for raw in line.split(CELL_SEPARATOR))
        for line in lines
    ]
    width = max(len(row) for row in rows)
    return tuple(row + (None,) * (width - len(row)) for row in rows)


def _default_cell_text(cell: Any) -> str:
    if cell is None:
        return ""
    if isinstance(cell, Mapping):
        value = cell.get("value")
        return "" if value is None else str(value)
    return str(cell)


def join(
    grid: Sequence[Sequence[Optional[T]]],
    cell_text: Callable[[Optional[T]], str] = _default_cell_text,
) -> str:
    """Serialize ``grid`` into clipboard text. Inverse of ``split``."""

    return ROW_SEPARATOR.join(
        CELL_SEPARATOR.join(cell_text(cell) for cell in row) for row in grid
    )


def copied_to_text(
    copied: PointMap[T],
    cell_text: Callable[[Optional[T]], str] = _default_cell_text,
) -> str:
    """Render clipboard contents as text anchored at their top-left point."""

    if not copied:
        return ""
    origin = copied.min()
    corner = copied.max()
    grid: Grid = create_empty_matrix(
        corner.row - origin.row + 1, corner.column - origin.column + 1
    )
    for point, value in copied:
        grid = set(point.row - origin.row, point.column - origin.column, value, grid)
    return join(grid, cell_text)


__all__ = ["split", "join", "copied_to_text", "ROW_SEPARATOR", "CELL_SEPARATOR"]
