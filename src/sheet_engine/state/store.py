"""Reference store: holds a ``StoreState`` and merges action patches into it.

The engine itself never keeps state between calls. Embedding layers that
do not have their own store can use ``SheetStore`` directly; it runs on a
single thread and is not safe to share across threads.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from sheet_engine.runtime import telemetry

from .model import Patch, StoreState

Action = Callable[..., Optional[Patch]]

CHANGE = "change"
MODE_CHANGE = "mode_change"
SELECT = "select"
ACTIVATE = "activate"
CELL_COMMIT = "cell_commit"


class StoreBus:
    """Minimal event bus for observers of state transitions."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[Any], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[Any], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: Any = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


class SheetStore:
    """Owns the authoritative state and dispatches actions against it."""

    def __init__(
        self, state: Optional[StoreState] = None, *, bus: Optional[StoreBus] = None
    ) -> None:
        self.state = state or StoreState()
        self.bus = bus or StoreBus()
        self.logger = telemetry.get_logger("sheet_engine.store")

    def dispatch(self, action: Action, *args: Any) -> Optional[Patch]:
        """Run ``action(state, *args)`` and merge the patch it returns."""

        name = getattr(action, "__name__", "handler")
        with telemetry.span(
            name=f"store::{name}",
            component="store",
            metadata={"action": name},
        ) as handle:
            patch = action(self.state, *args)
            handle.add_metadata("noop", patch is None)
        if patch is None:
            return None
        previous = self.state
        self.state = previous.merge(patch)
        self._notify(previous, patch)
        return patch

    def _notify(self, previous: StoreState, patch: Patch) -> None:
        current = self.state
        if "data" in patch and current.data is not previous.data:
            self.bus.emit(CHANGE, current.data)
        if current.mode != previous.mode:
            self.bus.emit(MODE_CHANGE, current.mode)
        if current.selected != previous.selected:
            self.bus.emit(SELECT, current.selected.to_list())
        if current.active is not None and current.active != previous.active:
            self.bus.emit(ACTIVATE, current.active)
        if "last_commit" in patch and current.last_commit:
            for entry in current.last_commit:
                self.bus.emit(CELL_COMMIT, entry)


__all__ = [
    "SheetStore",
    "StoreBus",
    "Action",
    "CHANGE",
    "MODE_CHANGE",
    "SELECT",
    "ACTIVATE",
    "CELL_COMMIT",
]
