"""Rectangular grid helpers and clipboard text (de)serialization."""

from .matrix import (
    Grid,
    Row,
    Size,
    create_empty_matrix,
    from_rows,
    get,
    get_size,
    has,
    inclusive_range,
    pad_matrix,
    set,
    unset,
)
from .text import copied_to_text, join, split
from .validation import GridValidationError, ensure_point

__all__ = [
    "Grid",
    "Row",
    "Size",
    "create_empty_matrix",
    "from_rows",
    "get",
    "get_size",
    "has",
    "inclusive_range",
    "pad_matrix",
    "set",
    "unset",
    "split",
    "join",
    "copied_to_text",
    "GridValidationError",
    "ensure_point",
]
