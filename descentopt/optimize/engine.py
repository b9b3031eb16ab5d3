"""Iteration skeleton shared by the line-search descent methods.

A concrete method only decides the search direction and how its internal
state reacts to the secant pair ``(s, y)`` of each step; the loop,
termination policy, evaluation accounting and result assembly live here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from ..diagnostics import assert_finite, is_debug_enabled
from ..logging import get_logger
from .core import (
    DEFAULT_MAX_TRIALS,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Array,
    DescentResult,
    ObjectiveFunction,
    Status,
)
from .line_search import LineSearch
from .utils import as_point, check_gradient_shape

logger = get_logger(__name__)


@dataclass(frozen=True)
class IterationRecord:
    """Snapshot handed to the ``callback`` of :meth:`DescentEngine.optimize`.

    ``direction`` and ``alpha`` describe the step that produced ``x``;
    ``grad`` is the gradient at ``x``.
    """

    nit: int
    x: Array
    fun: float
    grad: Array
    direction: Array
    alpha: float
    line_search_success: bool
    hessian_reset: bool
    nfev: int


IterationCallback = Callable[[IterationRecord], None]


class DescentEngine(ABC):
    """Abstract line-search descent method.

    Parameters
    ----------
    line_search:
        Step-length search used every iteration. Defaults to
        :class:`LineSearch` with its default constants.
    max_trials:
        Trial budget handed to the line search each iteration.
    """

    name: str = "descent"
    default_miniter: int = 0

    def __init__(
        self,
        line_search: Optional[LineSearch] = None,
        max_trials: int = DEFAULT_MAX_TRIALS,
    ) -> None:
        if max_trials < 1:
            raise ValueError("max_trials must be at least 1")
        self.line_search = line_search if line_search is not None else LineSearch()
        self.max_trials = int(max_trials)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(line_search={self.line_search!r}, max_trials={self.max_trials})"

    def reset(self, n: int) -> None:
        """Prepare internal state for a run in ``n`` dimensions."""

    @abstractmethod
    def direction(self, grad: Array) -> Array:
        """Return the search direction for the current gradient."""

    def update(self, s: Array, y: Array) -> bool:
        """Absorb the secant pair of the last step.

        Returns True when accumulated curvature information was discarded.
        """
        return False

    def check_invariants(self) -> None:
        """Validate strategy state; only called in debug mode."""

    def optimize(
        self,
        objective: ObjectiveFunction,
        x0: Array,
        tol: float = DEFAULT_TOL,
        maxiter: int = DEFAULT_MAXITER,
        miniter: Optional[int] = None,
        callback: Optional[IterationCallback] = None,
    ) -> DescentResult:
        """Minimize ``objective`` starting from ``x0``.

        Iteration stops once more than ``miniter`` iterations have run and
        the objective value drops below ``tol``, or after ``maxiter``
        iterations. The run counts as successful iff the final objective
        value is at most ``tol``, whichever branch fired.

        Raises
        ------
        ValueError
            On invalid parameters, a malformed start point, or a gradient
            whose shape differs from the start point.
        """
        if miniter is None:
            miniter = self.default_miniter
        if tol < 0:
            raise ValueError("tol must be non-negative")
        if maxiter < 0:
            raise ValueError("maxiter must be non-negative")
        if miniter < 0:
            raise ValueError("miniter must be non-negative")

        x = as_point(x0, getattr(objective, "dim", None))
        debug = is_debug_enabled()
        self.reset(x.size)

        nfev = 0
        njev = 0
        fx = float(objective.value(x))
        nfev += 1
        grad = check_gradient_shape(objective.gradient(x), x)
        njev += 1
        grad_norms = [float(np.linalg.norm(grad))]
        n_ls_failures = 0
        n_resets = 0
        logger.debug(
            "%s start: n=%d f=%.6e |g|=%.3e", self.name, x.size, fx, grad_norms[0]
        )

        k = 1
        while not ((k > miniter and fx < tol) or k > maxiter):
            d = self.direction(grad)
            ls = self.line_search.step(
                objective, x, d, self.max_trials, fx=fx, grad=grad
            )
            nfev += ls.nfev
            njev += ls.njev
            if not ls.success:
                n_ls_failures += 1

            s = ls.alpha * d
            x = x + s
            fx = float(objective.value(x))
            nfev += 1
            grad_prev = grad
            grad = check_gradient_shape(objective.gradient(x), x)
            njev += 1
            reset = self.update(s, grad - grad_prev)
            if reset:
                n_resets += 1
            grad_norms.append(float(np.linalg.norm(grad)))

            if debug:
                assert_finite("iterate", x)
                assert_finite("objective value", fx)
                assert_finite("gradient", grad)
                self.check_invariants()

            logger.debug(
                "%s iter %d: f=%.6e |g|=%.3e alpha=%.3e%s",
                self.name,
                k,
                fx,
                grad_norms[-1],
                ls.alpha,
                "" if ls.success else " (line search failed)",
            )
            if callback is not None:
                callback(
                    IterationRecord(
                        nit=k,
                        x=x.copy(),
                        fun=fx,
                        grad=grad.copy(),
                        direction=np.array(d, dtype=float, copy=True),
                        alpha=float(ls.alpha),
                        line_search_success=ls.success,
                        hessian_reset=reset,
                        nfev=nfev,
                    )
                )
            k += 1

        nit = k - 1
        if k > miniter and fx < tol:
            status = Status.CONVERGED
            message = "Objective value below tolerance."
        else:
            status = Status.MAX_ITER
            message = "Maximum iterations reached."
        success = fx <= tol
        logger.info(
            "%s finished after %d iterations: f=%.6e nfev=%d success=%s",
            self.name,
            nit,
            fx,
            nfev,
            success,
        )
        return DescentResult(
            x=x,
            fun=fx,
            success=success,
            nit=nit,
            nfev=nfev,
            njev=njev,
            grad_norms=grad_norms,
            status=status,
            message=message,
            n_line_search_failures=n_ls_failures,
            n_hessian_resets=n_resets,
            method=self.name,
        )


__all__ = ["DescentEngine", "IterationCallback", "IterationRecord"]
