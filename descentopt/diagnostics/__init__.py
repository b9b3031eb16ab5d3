"""Diagnostics and debugging utilities for descentopt."""

from .core import (
    assert_finite,
    assert_positive_definite,
    assert_symmetric,
    is_pos_def,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_finite",
    "assert_positive_definite",
    "assert_symmetric",
    "is_pos_def",
    "is_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
