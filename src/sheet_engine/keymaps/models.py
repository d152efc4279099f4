"""Dataclasses describing key tables, bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from sheet_engine.actions import KeyDownHandler


class KeyTable(str, Enum):
    """Handler table picked from the mode and the modifier keys held."""

    EDIT = "edit"
    SHIFT_META = "shift+meta"
    CTRL_SHIFT = "ctrl+shift"
    SHIFT = "shift"
    CTRL = "ctrl"
    META = "meta"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Key-down handler plus metadata used during dispatch."""

    id: str
    handler: KeyDownHandler
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key name in one table with an action."""

    id: str
    table: KeyTable
    key: str
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "table", KeyTable(self.table))

    @property
    def key_signature(self) -> str:
        return f"{self.table.value}:{self.key}"


__all__ = [
    "KeyTable",
    "ActionRef",
    "Binding",
]
