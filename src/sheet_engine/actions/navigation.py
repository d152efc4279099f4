"""Handler factories for moving the active cell and resizing the selection.

Each factory returns a ``KeyDownHandler`` so the results can be placed
directly into the keymap tables.
"""

from __future__ import annotations

from typing import Optional

from sheet_engine.coords import Field, Point, PointSet
from sheet_engine.grid import get_size, has
from sheet_engine.state import Patch, StoreState

from .core import within
from .types import KeyDownHandler, KeyEvent


def go(row_delta: int, column_delta: int) -> KeyDownHandler:
    """Move the active cell by the given offsets (arrow keys, Tab, Enter)."""

    def handler(state: StoreState, event: Optional[KeyEvent] = None) -> Optional[Patch]:
        del event
        if state.active is None:
            return None
        target = state.active.offset(row_delta, column_delta)
        if not has(target.row, target.column, state.data):
            return {"mode": "view"}
        return {
            "active": target,
            "selected": PointSet.from_points([target]),
            "mode": "view",
        }

    return handler


def _distance_to_edge(direction: int, current: int, last: int) -> int:
    if direction == 1:
        return last - current
    if direction == -1:
        return -current
    return 0


def go_to_end(row_direction: int, column_direction: int) -> KeyDownHandler:
    """Jump to the grid edge (ctrl+arrow).

    Directions are -1 (towards row/column 0), 0 (keep) or +1 (towards the
    last row/column), independently per axis. ``go_to_end(-1, -1)`` lands on
    the top-left cell.
    """

    def handler(state: StoreState, event: Optional[KeyEvent] = None) -> Optional[Patch]:
        if state.active is None:
            return None
        size = get_size(state.data)
        return go(
            _distance_to_edge(row_direction, state.active.row, size.rows - 1),
            _distance_to_edge(column_direction, state.active.column, size.columns - 1),
        )(state, event)

    return handler


def grow_smaller(field: Field) -> KeyDownHandler:
    """ctrl+shift+up/left.

    Pushes the near edge of the selection out to index 0, then pulls the
    far edge back one step at a time until it reaches the active cell.
    """

    def handler(state: StoreState, event: Optional[KeyEvent] = None) -> Optional[Patch]:
        del event
        if state.active is None:
            return None
        active_index = state.active[field]
        max_selected = state.selected.max()[field]
        min_selected = state.selected.min()[field]

        selected = state.selected
        for _ in range(min_selected):
            selected = selected.extend_edge(field, -1)
        for _ in range(max_selected - active_index):
            selected = selected.shrink_edge(field, 1)

        return {"selected": within(state.data, selected)}

    return handler


def grow_larger(field: Field) -> KeyDownHandler:
    """ctrl+shift+down/right, the mirror of ``grow_smaller``."""

    def handler(state: StoreState, event: Optional[KeyEvent] = None) -> Optional[Patch]:
        del event
        if state.active is None:
            return None
        active_index = state.active[field]
        # steps to the size, one past the last index; the bounds filter trims it
        limit = get_size(state.data)[field]
        max_selected = state.selected.max()[field]
        min_selected = state.selected.min()[field]

        selected = state.selected
        for _ in range(limit - max_selected):
            selected = selected.extend_edge(field, 1)
        for _ in range(active_index - min_selected):
            selected = selected.shrink_edge(field, -1)

        return {"selected": within(state.data, selected)}

    return handler


def modify_edge(field: Field, delta: int) -> KeyDownHandler:
    """shift+arrow: shrink the opposite edge if selected, else extend."""

    def handler(state: StoreState, event: Optional[KeyEvent] = None) -> Optional[Patch]:
        del event
        if state.active is None:
            return None
        behind: Point = state.active.with_field(field, state.active[field] - delta)
        if behind in state.selected:
            selected = state.selected.shrink_edge(field, -delta)
        else:
            selected = state.selected.extend_edge(field, delta)
        return {"selected": within(state.data, selected)}

    return handler


__all__ = [
    "go",
    "go_to_end",
    "grow_smaller",
    "grow_larger",
    "modify_edge",
]
