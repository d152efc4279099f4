"""Modifier-aware table selection and key lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from sheet_engine.actions import KeyDownHandler, KeyEvent
from sheet_engine.runtime.telemetry import span
from sheet_engine.state import Mode, Patch, StoreState

from .models import ActionRef, Binding, KeyTable
from .registry import KeymapRegistry


def select_table(mode: Mode, event: KeyEvent) -> KeyTable:
    """Pick exactly one table; the checks run in priority order."""

    if mode == "edit":
        return KeyTable.EDIT
    if event.shift and event.meta:
        return KeyTable.SHIFT_META
    if event.ctrl and event.shift:
        return KeyTable.CTRL_SHIFT
    if event.shift:
        return KeyTable.SHIFT
    if event.ctrl:
        return KeyTable.CTRL
    if event.meta:
        return KeyTable.META
    return KeyTable.PLAIN


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    table: KeyTable
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Resolves key events against a registry and runs the bound handler."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: Mode, event: KeyEvent) -> ResolutionResult:
        table = select_table(mode, event)
        binding = self._registry.lookup(table, event.key)
        if binding is None:
            return ResolutionResult(status="miss", table=table)
        action = self._registry.get_action(binding.action_id)
        return ResolutionResult(
            status="match",
            table=table,
            match=ResolutionMatch(binding=binding, action=action),
        )

    def handler_for(
        self, state: StoreState, event: KeyEvent
    ) -> Optional[KeyDownHandler]:
        result = self.resolve(state.mode, event)
        if result.match is None:
            return None
        return result.match.action.handler

    def key_down(self, state: StoreState, event: KeyEvent) -> Optional[Patch]:
        with span(
            "keymaps::key_down",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": event.key, "mode": state.mode},
        ) as handle:
            result = self.resolve(state.mode, event)
            handle.add_metadata("table", result.table.value)
            handle.add_metadata("status", result.status)
            if result.match is None:
                return None
            handle.add_metadata("action", result.match.action.telemetry_name)
            return result.match.action.handler(state, event)


__all__ = [
    "select_table",
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
]
