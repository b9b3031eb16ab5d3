"""Reporting helpers for descent results."""

from .summary import (
    HAS_MATPLOTLIB,
    format_result,
    plot_gradient_norms,
    print_result,
    result_summary,
)

__all__ = [
    "HAS_MATPLOTLIB",
    "format_result",
    "plot_gradient_norms",
    "print_result",
    "result_summary",
]
