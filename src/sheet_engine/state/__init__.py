"""Aggregate editing state and the reference store that owns it."""

from .model import (
    READ_ONLY,
    VALUE,
    AxisDimensions,
    Cell,
    CellDimensions,
    CommitEntry,
    Mode,
    Patch,
    StoreState,
    initial_state,
)
from .store import SheetStore, StoreBus

__all__ = [
    "READ_ONLY",
    "VALUE",
    "AxisDimensions",
    "Cell",
    "CellDimensions",
    "CommitEntry",
    "Mode",
    "Patch",
    "StoreState",
    "initial_state",
    "SheetStore",
    "StoreBus",
]
