"""Shared signatures for action handlers and key events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from sheet_engine.state import Patch, StoreState


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Keyboard event reduced to what dispatch needs."""

    key: str
    ctrl: bool = False
    shift: bool = False
    meta: bool = False


KeyDownHandler = Callable[[StoreState, Optional[KeyEvent]], Optional[Patch]]

__all__ = ["KeyEvent", "KeyDownHandler"]
