"""UI-agnostic spreadsheet grid editing engine."""

__all__ = [
    "actions",
    "coords",
    "grid",
    "keymaps",
    "runtime",
    "state",
]

__version__ = "0.1.0"
