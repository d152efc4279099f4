"""Built-in key tables for view and edit mode."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional, Sequence

from sheet_engine.actions import KeyEvent, core, navigation
from sheet_engine.state import Patch, StoreState

from .models import ActionRef, Binding, KeyTable
from .registry import KeymapRegistry
from .resolver import KeymapResolver

_ARROWS = {
    "ArrowUp": ("row", -1),
    "ArrowDown": ("row", 1),
    "ArrowLeft": ("column", -1),
    "ArrowRight": ("column", 1),
}


def _delta(field: str, step: int) -> tuple[int, int]:
    return (step, 0) if field == "row" else (0, step)


def _build_actions() -> tuple[ActionRef, ...]:
    actions = [
        ActionRef(id="core.edit", handler=core.edit, description="Start editing"),
        ActionRef(id="core.view", handler=core.view, description="Stop editing"),
        ActionRef(id="core.clear", handler=core.clear, description="Clear selection"),
        ActionRef(id="core.blur", handler=core.blur, description="Drop focus"),
    ]
    for key, (field, step) in _ARROWS.items():
        name = key[len("Arrow"):].lower()
        actions.append(
            ActionRef(
                id=f"navigation.go_{name}",
                handler=navigation.go(*_delta(field, step)),
                description=f"Move {name}",
            )
        )
        actions.append(
            ActionRef(
                id=f"navigation.go_to_end_{name}",
                handler=navigation.go_to_end(*_delta(field, step)),
                description=f"Jump to the {name} edge",
            )
        )
        grow = navigation.grow_larger if step > 0 else navigation.grow_smaller
        actions.append(
            ActionRef(
                id=f"selection.grow_{name}",
                handler=grow(field),
                description=f"Grow selection {name} to the edge",
            )
        )
        actions.append(
            ActionRef(
                id=f"selection.modify_edge_{name}",
                handler=navigation.modify_edge(field, step),
                description=f"Move selection edge {name}",
            )
        )
    return tuple(actions)


def _build_bindings() -> tuple[Binding, ...]:
    bindings = [
        Binding("plain.tab", KeyTable.PLAIN, "Tab", "navigation.go_right"),
        Binding("plain.enter", KeyTable.PLAIN, "Enter", "core.edit"),
        Binding("plain.backspace", KeyTable.PLAIN, "Backspace", "core.clear"),
        Binding("plain.escape", KeyTable.PLAIN, "Escape", "core.blur"),
        Binding("edit.escape", KeyTable.EDIT, "Escape", "core.view"),
        Binding("edit.tab", KeyTable.EDIT, "Tab", "navigation.go_right"),
        Binding("edit.enter", KeyTable.EDIT, "Enter", "navigation.go_down"),
    ]
    for key in _ARROWS:
        name = key[len("Arrow"):].lower()
        bindings.append(
            Binding(f"plain.{key}", KeyTable.PLAIN, key, f"navigation.go_{name}")
        )
        bindings.append(
            Binding(f"ctrl.{key}", KeyTable.CTRL, key, f"navigation.go_to_end_{name}")
        )
        bindings.append(
            Binding(f"ctrl+shift.{key}", KeyTable.CTRL_SHIFT, key, f"selection.grow_{name}")
        )
        bindings.append(
            Binding(f"shift.{key}", KeyTable.SHIFT, key, f"selection.modify_edge_{name}")
        )
    # SHIFT_META and META are reserved and intentionally left empty.
    return tuple(bindings)


DEFAULT_ACTIONS: tuple[ActionRef, ...] = _build_actions()
DEFAULT_BINDINGS: tuple[Binding, ...] = _build_bindings()


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings."""

    allowed_actions = _build_filters(include_actions, exclude_actions)
    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        if not _selected(action.id, allowed_actions):
            continue
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        if not _selected(binding.action_id, allowed_actions):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


@lru_cache(maxsize=None)
def default_resolver() -> KeymapResolver:
    """Process-wide resolver over the built-in tables, built on first use."""

    registry = KeymapRegistry(logger_name="sheet_engine.keymaps")
    load_default_keymaps(registry)
    return KeymapResolver(registry, logger_name="sheet_engine.keymaps")


def get_key_down_handler(
    state: StoreState, event: KeyEvent, resolver: Optional[KeymapResolver] = None
):
    return (resolver or default_resolver()).handler_for(state, event)


def key_down(
    state: StoreState, event: KeyEvent, resolver: Optional[KeymapResolver] = None
) -> Optional[Patch]:
    """Dispatch a named control key; unbound keys are a no-op."""

    return (resolver or default_resolver()).key_down(state, event)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
    "default_resolver",
    "get_key_down_handler",
    "key_down",
]
