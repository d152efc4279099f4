"""Grid coordinate type."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

Field = Literal["row", "column"]


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """``(row, column)`` address of a cell. Orders row-major."""

    row: int
    column: int

    def __getitem__(self, field: Field) -> int:
        if field == "row":
            return self.row
        if field == "column":
            return self.column
        raise KeyError(field)

    def with_field(self, field: Field, value: int) -> "Point":
        if field not in ("row", "column"):
            raise KeyError(field)
        return replace(self, **{field: value})

    def offset(self, rows: int, columns: int) -> "Point":
        return Point(self.row + rows, self.column + columns)


__all__ = ["Field", "Point"]
