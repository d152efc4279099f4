"""Pure state transitions: ``(state, *args) -> patch | None``."""

from .clipboard import copy, cut, paste, text_cell
from .core import (
    activate,
    blur,
    clear,
    commit,
    drag_end,
    drag_start,
    edit,
    is_active_read_only,
    key_press,
    select,
    set_cell_data,
    set_cell_dimensions,
    set_data,
    view,
)
from .navigation import go, go_to_end, grow_larger, grow_smaller, modify_edge
from .types import KeyDownHandler, KeyEvent

__all__ = [
    "KeyEvent",
    "KeyDownHandler",
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
    "is_active_read_only",
    "go",
    "go_to_end",
    "grow_smaller",
    "grow_larger",
    "modify_edge",
    "copy",
    "cut",
    "paste",
    "text_cell",
]
