"""Steepest descent with inexact line search."""

from __future__ import annotations

from typing import Optional

from .core import (
    DEFAULT_MAX_TRIALS,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Array,
    DescentResult,
    ObjectiveFunction,
)
from .engine import DescentEngine, IterationCallback
from .line_search import LineSearch


class SteepestDescent(DescentEngine):
    """Gradient method: every search direction is the negative gradient."""

    name = "steepest_descent"
    default_miniter = 50

    def direction(self, grad: Array) -> Array:
        return -grad


def steepest_descent(
    objective: ObjectiveFunction,
    x0: Array,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
    miniter: int = SteepestDescent.default_miniter,
    line_search: Optional[LineSearch] = None,
    max_trials: int = DEFAULT_MAX_TRIALS,
    callback: Optional[IterationCallback] = None,
) -> DescentResult:
    """Run :class:`SteepestDescent` once on a fresh instance."""
    method = SteepestDescent(line_search=line_search, max_trials=max_trials)
    return method.optimize(
        objective, x0, tol=tol, maxiter=maxiter, miniter=miniter, callback=callback
    )


__all__ = ["SteepestDescent", "steepest_descent"]
