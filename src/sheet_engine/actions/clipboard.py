"""Copy, cut and paste over the selection."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from sheet_engine.coords import Point, PointMap, PointSet
from sheet_engine.grid import get, get_size, has, pad_matrix, split, unset
from sheet_engine.grid import set as set_cell
from sheet_engine.runtime import telemetry
from sheet_engine.state import VALUE, Cell, CommitEntry, Patch, StoreState


def text_cell(raw: str) -> Cell:
    return {VALUE: raw}


def copy(state: StoreState) -> Patch:
    """Capture the selected cells as the clipboard contents."""

    copied = state.selected.reduce(
        lambda acc, point: acc.set(point, get(point.row, point.column, state.data)),
        PointMap(),
    )
    telemetry.record_event("clipboard.copy", data={"cells": len(copied)})
    return {"copied": copied, "cut": False, "has_pasted": False}


def cut(state: StoreState) -> Patch:
    return {**copy(state), "cut": True}


def _cut_sources(
    state: StoreState, pasted: PointMap[Cell], origin: Point
) -> Dict[Point, Point]:
    """Map each pasted point back to the copied cell it came from."""

    if not state.copied:
        return {}
    copied_origin = state.copied.min()
    sources = {}
    for point, _ in pasted:
        source = copied_origin.offset(point.row - origin.row, point.column - origin.column)
        if source in state.copied:
            sources[point] = source
    return sources


def paste(
    state: StoreState,
    text: str,
    cell_factory: Callable[[str], Cell] = text_cell,
) -> Optional[Patch]:
    """Merge clipboard ``text`` into the grid at the active cell.

    Pasted fields override the destination cell's fields, everything else
    on the destination survives. Rows are added below the grid when the
    paste runs past the bottom; columns past the right edge are dropped.
    When the clipboard came from ``cut`` the source cells are emptied first
    and each one is logged as a change with no next cell.
    """

    if not text or state.active is None:
        return None

    pasted_grid = split(text, cell_factory)
    pasted: PointMap[Cell] = PointMap.from_matrix(pasted_grid)
    if not pasted:
        return None
    origin = pasted.min()
    active = state.active

    data = pad_matrix(state.data, active.row + get_size(pasted_grid).rows)
    sources = _cut_sources(state, pasted, origin) if state.cut else {}
    for source in sources.values():
        data = unset(source.row, source.column, data)

    selected = PointSet()
    changes: List[CommitEntry] = []
    for point, value in pasted:
        if point in sources:
            changes.append(
                CommitEntry(
                    prev_cell=state.copied.get(sources[point]),
                    next_cell=None,
                    point=sources[point],
                )
            )

        target = point.offset(active.row - origin.row, active.column - origin.column)
        if not has(target.row, target.column, data):
            continue
        current = get(target.row, target.column, data)
        merged = {**(current or {}), **value}
        changes.append(CommitEntry(prev_cell=current, next_cell=merged, point=target))
        data = set_cell(target.row, target.column, merged, data)
        selected = selected.add(target)

    telemetry.record_event(
        "clipboard.paste",
        data={"cells": len(selected), "cut": state.cut, "rows": len(data)},
    )
    return {
        "data": data,
        "selected": selected,
        "cut": False,
        "has_pasted": True,
        "mode": "view",
        "last_commit": tuple(changes),
    }


__all__ = ["copy", "cut", "paste", "text_cell"]
