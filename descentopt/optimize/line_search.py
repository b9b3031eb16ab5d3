"""Inexact line search shared by the descent strategies.

The search brackets a step length satisfying the sufficient-decrease
(Armijo) condition together with the weak curvature condition, bisecting
the bracket once it is closed and expanding the step while it is open
(Nocedal & Wright, ch. 3; Lewis & Overton, 2013).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..logging import get_logger
from .core import DEFAULT_MAX_TRIALS, Array, ObjectiveFunction

logger = get_logger(__name__)


@dataclass(frozen=True)
class LineSearchResult:
    """Outcome of a single line search.

    Attributes:
        alpha: Step length to apply along the search direction.
        success: False when the trial budget ran out before both
            conditions held; ``alpha`` is then the largest trial that
            achieved sufficient decrease, or the last trial if none did.
        fun: Objective value at ``x + alpha * d``.
        nfev: Objective evaluations spent (one per trial).
        njev: Gradient evaluations spent.
    """

    alpha: float
    success: bool
    fun: float
    nfev: int
    njev: int


class LineSearch:
    """Bounded bracketing line search.

    Parameters
    ----------
    c1:
        Sufficient-decrease constant.
    c2:
        Curvature constant, ``c1 < c2 < 1``.
    alpha0:
        First trial step.
    expand:
        Growth factor applied while no upper bracket is known.
    """

    def __init__(
        self,
        c1: float = 1e-4,
        c2: float = 0.9,
        alpha0: float = 1.0,
        expand: float = 2.0,
    ) -> None:
        if not (0 < c1 < c2 < 1):
            raise ValueError("Require 0 < c1 < c2 < 1 for the line search conditions.")
        if alpha0 <= 0:
            raise ValueError("alpha0 must be positive")
        if expand <= 1:
            raise ValueError("expand must be greater than 1")
        self.c1 = float(c1)
        self.c2 = float(c2)
        self.alpha0 = float(alpha0)
        self.expand = float(expand)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(c1={self.c1}, c2={self.c2}, "
            f"alpha0={self.alpha0}, expand={self.expand})"
        )

    def step(
        self,
        objective: ObjectiveFunction,
        x: Array,
        d: Array,
        max_trials: int = DEFAULT_MAX_TRIALS,
        fx: Optional[float] = None,
        grad: Optional[Array] = None,
    ) -> LineSearchResult:
        """Search for a step length along ``d`` starting from ``x``.

        ``fx`` and ``grad`` are the value and gradient at ``x``; when
        omitted they are evaluated here and counted in the result.
        """
        if max_trials < 1:
            raise ValueError("max_trials must be at least 1")
        nfev = 0
        njev = 0
        if fx is None:
            fx = objective.value(x)
            nfev += 1
        if grad is None:
            grad = objective.gradient(x)
            njev += 1
        slope = float(np.dot(grad, d))
        if slope >= 0:
            logger.debug("Search direction is not a descent direction (slope=%g).", slope)

        lo, hi = 0.0, math.inf
        alpha = self.alpha0
        best: Optional[tuple[float, float]] = None
        last = (alpha, float(fx))
        for _ in range(max_trials):
            trial = x + alpha * d
            f_trial = float(objective.value(trial))
            nfev += 1
            last = (alpha, f_trial)
            if not f_trial <= fx + self.c1 * alpha * slope:
                hi = alpha
            else:
                best = last
                g_trial = objective.gradient(trial)
                njev += 1
                if float(np.dot(g_trial, d)) >= self.c2 * slope:
                    return LineSearchResult(alpha, True, f_trial, nfev, njev)
                lo = alpha
            alpha = 0.5 * (lo + hi) if math.isfinite(hi) else self.expand * alpha

        alpha_out, f_out = best if best is not None else last
        logger.debug(
            "Line search exhausted %d trials; returning alpha=%g.", max_trials, alpha_out
        )
        return LineSearchResult(alpha_out, False, f_out, nfev, njev)


__all__ = ["LineSearch", "LineSearchResult"]
