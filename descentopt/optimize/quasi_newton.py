"""BFGS quasi-Newton method with inexact line search."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..diagnostics import assert_symmetric
from ..logging import get_logger
from .core import (
    DEFAULT_MAX_TRIALS,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    EPS,
    Array,
    DescentResult,
    ObjectiveFunction,
)
from .engine import DescentEngine, IterationCallback
from .line_search import LineSearch

logger = get_logger(__name__)


def bfgs_inverse_update(
    inv_hessian: Array, s: Array, y: Array, eps: float = EPS
) -> tuple[Array, bool]:
    """Apply the BFGS secant update to an inverse-Hessian approximation.

    The update is written as

        v = sqrt(yHy) * (s / ys - Hy / yHy)
        H + s s^T / ys - Hy Hy^T / yHy + v v^T

    with ``ys = y.s``, ``Hy = H y`` and ``yHy = y.Hy``. When either scalar is
    below ``eps`` the curvature condition fails and the identity is returned
    instead.

    Returns
    -------
    tuple[np.ndarray, bool]
        The new matrix and whether it was reset to the identity.
    """
    hy = inv_hessian @ y
    ys = float(np.dot(y, s))
    yhy = float(np.dot(y, hy))
    if ys < eps or yhy < eps:
        return np.eye(s.size), True
    v = math.sqrt(yhy) * (s / ys - hy / yhy)
    updated = (
        inv_hessian
        + np.outer(s, s) / ys
        - np.outer(hy, hy) / yhy
        + np.outer(v, v)
    )
    return updated, False


class BFGS(DescentEngine):
    """Full-memory BFGS.

    The inverse-Hessian approximation starts as the identity on every
    :meth:`optimize` call and falls back to the identity whenever the
    secant pair violates the curvature condition.
    """

    name = "bfgs"
    default_miniter = 30

    def __init__(
        self,
        line_search: Optional[LineSearch] = None,
        max_trials: int = DEFAULT_MAX_TRIALS,
        eps: float = EPS,
    ) -> None:
        super().__init__(line_search=line_search, max_trials=max_trials)
        if eps <= 0:
            raise ValueError("eps must be positive")
        self.eps = float(eps)
        self.inv_hessian = np.eye(1)

    def reset(self, n: int) -> None:
        self.inv_hessian = np.eye(n)

    def direction(self, grad: Array) -> Array:
        return -self.inv_hessian @ grad

    def update(self, s: Array, y: Array) -> bool:
        self.inv_hessian, reset = bfgs_inverse_update(self.inv_hessian, s, y, self.eps)
        if reset:
            logger.debug("Curvature condition failed; inverse Hessian reset to identity.")
        return reset

    def check_invariants(self) -> None:
        assert_symmetric(self.inv_hessian)


def bfgs(
    objective: ObjectiveFunction,
    x0: Array,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
    miniter: int = BFGS.default_miniter,
    line_search: Optional[LineSearch] = None,
    max_trials: int = DEFAULT_MAX_TRIALS,
    callback: Optional[IterationCallback] = None,
) -> DescentResult:
    """Run :class:`BFGS` once on a fresh instance."""
    method = BFGS(line_search=line_search, max_trials=max_trials)
    return method.optimize(
        objective, x0, tol=tol, maxiter=maxiter, miniter=miniter, callback=callback
    )


__all__ = ["BFGS", "bfgs", "bfgs_inverse_update"]
