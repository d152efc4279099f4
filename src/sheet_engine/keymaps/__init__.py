"""Key tables mapping modifier combinations and key names to handlers."""

from .models import ActionRef, Binding, KeyTable
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult, select_table
from .defaults import (
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    default_resolver,
    get_key_down_handler,
    key_down,
    load_default_keymaps,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeyTable",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
    "select_table",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "default_resolver",
    "get_key_down_handler",
    "key_down",
    "load_default_keymaps",
]
