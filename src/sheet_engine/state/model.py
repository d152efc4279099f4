"""Store state, layout metadata and change records."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Literal, Mapping, Optional, Tuple

from sheet_engine.coords import Point, PointMap, PointSet
from sheet_engine.grid import Grid, from_rows

Mode = Literal["view", "edit"]
Cell = Mapping[str, Any]
Patch = Dict[str, Any]

VALUE = "value"
READ_ONLY = "read_only"


@dataclass(frozen=True, slots=True)
class AxisDimensions:
    """Layout of a single row or column: where it starts and how big it is."""

    offset: float
    size: float


@dataclass(frozen=True, slots=True)
class CellDimensions:
    """Measured box of a rendered cell."""

    top: float
    left: float
    height: float
    width: float

    @property
    def row(self) -> AxisDimensions:
        return AxisDimensions(offset=self.top, size=self.height)

    @property
    def column(self) -> AxisDimensions:
        return AxisDimensions(offset=self.left, size=self.width)


@dataclass(frozen=True, slots=True)
class CommitEntry:
    """One cell transition; ``point`` is the cell it happened to."""

    prev_cell: Optional[Cell]
    next_cell: Optional[Cell]
    point: Optional[Point] = None


@dataclass(frozen=True, slots=True)
class StoreState:
    """Everything the action engine reads and patches.

    Actions return a ``Patch`` (field name -> new value) rather than a new
    state; ``merge`` applies one. ``None`` patches leave the state as is.
    """

    data: Grid = ()
    selected: PointSet = field(default_factory=PointSet)
    active: Optional[Point] = None
    mode: Mode = "view"
    copied: PointMap[Cell] = field(default_factory=PointMap)
    cut: bool = False
    has_pasted: bool = False
    bindings: PointMap[PointSet] = field(default_factory=PointMap)
    row_dimensions: Mapping[int, AxisDimensions] = field(default_factory=dict)
    column_dimensions: Mapping[int, AxisDimensions] = field(default_factory=dict)
    last_changed: Optional[Point] = None
    last_commit: Optional[Tuple[CommitEntry, ...]] = None
    dragging: bool = False

    def merge(self, patch: Optional[Patch]) -> "StoreState":
        if not patch:
            return self
        return replace(self, **patch)

    def cell(self, point: Point) -> Optional[Cell]:
        row, column = point.row, point.column
        if 0 <= row < len(self.data) and 0 <= column < len(self.data[row]):
            return self.data[row][column]
        return None


def initial_state(data: Iterable[Iterable[Optional[Cell]]] = ()) -> StoreState:
    return StoreState(data=from_rows(data))


__all__ = [
    "AxisDimensions",
    "CellDimensions",
    "CommitEntry",
    "StoreState",
    "initial_state",
    "Mode",
    "Cell",
    "Patch",
    "VALUE",
    "READ_ONLY",
]
