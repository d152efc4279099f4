"""Selection, mode and cell editing actions.

Every action takes the current ``StoreState`` first and returns either a
patch for the caller to merge or ``None`` when nothing should change.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sheet_engine.coords import Point, PointMap, PointSet
from sheet_engine.grid import from_rows, has, inclusive_range
from sheet_engine.grid import set as set_cell
from sheet_engine.runtime import telemetry
from sheet_engine.state import (
    READ_ONLY,
    VALUE,
    Cell,
    CellDimensions,
    CommitEntry,
    Patch,
    StoreState,
)

from .types import KeyEvent


def active_cell(state: StoreState) -> Optional[Cell]:
    if state.active is None:
        return None
    return state.cell(state.active)


def is_active_read_only(state: StoreState) -> bool:
    cell = active_cell(state)
    return bool(cell and cell.get(READ_ONLY))


def within(data: Sequence[Sequence[object]], points: PointSet) -> PointSet:
    return points.filter(lambda point: has(point.row, point.column, data))


def set_data(state: StoreState, data: Iterable[Iterable[Optional[Cell]]]) -> Patch:
    """Replace the grid and drop every reference that fell out of bounds."""

    grid = from_rows(data)
    active = state.active
    next_active = active if active and has(active.row, active.column, grid) else None
    next_bindings = _prune_bindings(state.bindings, grid)
    telemetry.record_event(
        "data.replace", data={"rows": len(grid), "active_kept": next_active is not None}
    )
    return {
        "data": grid,
        "active": next_active,
        "selected": within(grid, state.selected),
        "bindings": next_bindings,
    }


def select(state: StoreState, point: Point) -> Optional[Patch]:
    """Select the rectangle between the active cell and ``point``."""

    if state.active is None or state.active == point:
        return None
    return {
        "selected": PointSet.from_points(inclusive_range(point, state.active)),
        "mode": "view",
    }


def activate(state: StoreState, point: Point) -> Optional[Patch]:
    """Focus ``point``; activating the already active cell starts editing."""

    if state.active == point:
        if is_active_read_only(state):
            return None
        mode = "edit"
    else:
        mode = "view"
    return {
        "selected": PointSet.from_points([point]),
        "active": point,
        "mode": mode,
    }


def set_cell_data(
    state: StoreState,
    active: Point,
    cell: Cell,
    bindings: Iterable[Point] = (),
) -> Optional[Patch]:
    if is_active_read_only(state):
        return None
    return {
        "mode": "edit",
        "data": set_cell(active.row, active.column, cell, state.data),
        "last_changed": active,
        "bindings": state.bindings.set(active, PointSet.from_points(bindings)),
    }


def set_cell_dimensions(
    state: StoreState, point: Point, dimensions: CellDimensions
) -> Optional[Patch]:
    previous_row = state.row_dimensions.get(point.row)
    previous_column = state.column_dimensions.get(point.column)
    if previous_row == dimensions.row and previous_column == dimensions.column:
        return None
    return {
        "row_dimensions": {**state.row_dimensions, point.row: dimensions.row},
        "column_dimensions": {
            **state.column_dimensions,
            point.column: dimensions.column,
        },
    }


def edit(state: StoreState, event: Optional[KeyEvent] = None) -> Optional[Patch]:
    del event
    if state.active is None or is_active_read_only(state):
        return None
    return {"mode": "edit"}


def view(state: StoreState, event: Optional[KeyEvent] = None) -> Patch:
    del state, event
    return {"mode": "view"}


def blur(state: StoreState, event: Optional[KeyEvent] = None) -> Patch:
    del state, event
    return {"active": None}


def clear(state: StoreState, event: Optional[KeyEvent] = None) -> Optional[Patch]:
    """Empty the value of every selected cell, keeping its other attributes."""

    del event
    if state.active is None or is_active_read_only(state):
        return None

    data = state.data
    changes = []
    for point in state.selected:
        previous = state.cell(point)
        cleared = {**(previous or {}), VALUE: ""}
        data = set_cell(point.row, point.column, cleared, data)
        changes.append(CommitEntry(prev_cell=previous, next_cell=cleared, point=point))
    return {"data": data, **commit(state, changes)}


def key_press(state: StoreState, event: KeyEvent) -> Optional[Patch]:
    """A character key in view mode starts editing the active cell."""

    if is_active_read_only(state) or event.meta:
        return None
    if state.mode == "view" and state.active is not None:
        return {"mode": "edit"}
    return None


def drag_start(state: StoreState) -> Patch:
    del state
    return {"dragging": True}


def drag_end(state: StoreState) -> Patch:
    del state
    return {"dragging": False}


def commit(state: StoreState, changes: Iterable[CommitEntry]) -> Patch:
    del state
    return {"last_commit": tuple(changes)}


def _prune_bindings(
    bindings: PointMap[PointSet], data: Sequence[Sequence[object]]
) -> PointMap[PointSet]:
    return bindings.filter(lambda _, point: has(point.row, point.column, data)).map(
        lambda points: within(data, points)
    )


__all__ = [
    "active_cell",
    "is_active_read_only",
    "set_data",
    "select",
    "activate",
    "set_cell_data",
    "set_cell_dimensions",
    "edit",
    "view",
    "blur",
    "clear",
    "key_press",
    "drag_start",
    "drag_end",
    "commit",
]
