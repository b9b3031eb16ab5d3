"""descentopt - line-search descent optimizers (steepest descent and BFGS)."""

__version__ = "0.1.0"

from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from .logging import configure_logging, get_logger, set_log_level
from .objectives import Multilateration, Quadratic, Rosenbrock
from .optimize import (
    BFGS,
    DescentEngine,
    DescentResult,
    IterationRecord,
    LineSearch,
    LineSearchResult,
    ObjectiveFunction,
    Problem,
    Status,
    SteepestDescent,
    bfgs,
    bfgs_inverse_update,
    steepest_descent,
)
from .viz import format_result, print_result, result_summary

__all__ = [
    "__version__",
    # Optimizers
    "BFGS",
    "DescentEngine",
    "SteepestDescent",
    "bfgs",
    "bfgs_inverse_update",
    "steepest_descent",
    # Line search
    "LineSearch",
    "LineSearchResult",
    # Problem and result types
    "DescentResult",
    "IterationRecord",
    "ObjectiveFunction",
    "Problem",
    "Status",
    # Objectives
    "Multilateration",
    "Quadratic",
    "Rosenbrock",
    # Reporting
    "format_result",
    "print_result",
    "result_summary",
    # Logging and diagnostics
    "configure_logging",
    "get_logger",
    "set_log_level",
    "debug_context",
    "is_debug_enabled",
    "set_debug_enabled",
]
