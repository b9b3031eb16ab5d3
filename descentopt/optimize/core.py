"""Core interfaces shared across the descent optimizers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Tuple, runtime_checkable

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]

# Threshold of the BFGS curvature safeguard.
EPS = float(np.finfo(float).eps)

DEFAULT_TOL = 1e-6
DEFAULT_MAXITER = 1000
DEFAULT_MAX_TRIALS = 100


@runtime_checkable
class ObjectiveFunction(Protocol):
    """Anything exposing a scalar value and a gradient of matching shape."""

    def value(self, x: Array) -> float:
        ...

    def gradient(self, x: Array) -> Array:
        ...


@dataclass(frozen=True)
class Problem:
    """Adapter turning plain callables into an :class:`ObjectiveFunction`.

    When ``grad`` is omitted the gradient is approximated by central
    differences.
    """

    fun: Objective
    grad: Optional[Gradient] = None
    dim: Optional[int] = None

    def value(self, x: Array) -> float:
        return float(self.fun(x))

    def gradient(self, x: Array) -> Array:
        if self.grad is not None:
            return np.asarray(self.grad(x), dtype=float)
        from .utils import approx_grad

        return approx_grad(self.fun, x)


class Status(Enum):
    """Exit state of a descent run."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"


@dataclass(frozen=True, eq=False)
class DescentResult:
    """Immutable result returned by every descent optimizer.

    Attributes:
        x: Final iterate.
        fun: Objective value at ``x``.
        success: True iff ``fun <= tol``.
        nit: Number of outer iterations performed.
        nfev: Objective value evaluations (outer loop and line-search trials).
        njev: Gradient evaluations.
        grad_norms: Gradient norm at the start point and after each iteration.
        status: Which termination branch fired.
        message: Human-readable description of ``status``.
        n_line_search_failures: Iterations whose line search ran out of trials.
        n_hessian_resets: Times the inverse Hessian was reset to identity.
        method: Name of the direction strategy that produced the result.
    """

    x: Array
    fun: float
    success: bool
    nit: int
    nfev: int
    njev: int
    grad_norms: Tuple[float, ...]
    status: Status
    message: str
    n_line_search_failures: int = 0
    n_hessian_resets: int = 0
    method: str = ""

    def __post_init__(self) -> None:
        x = np.array(self.x, dtype=float, copy=True)
        x.setflags(write=False)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "grad_norms", tuple(float(v) for v in self.grad_norms))

    @property
    def optimal_point(self) -> Array:
        return self.x

    @property
    def minimal_value(self) -> float:
        return self.fun

    @property
    def gradient_norm_trace(self) -> Tuple[float, ...]:
        return self.grad_norms

    @property
    def iteration_count(self) -> int:
        return self.nit

    @property
    def is_success(self) -> bool:
        return self.success

    @property
    def function_evaluation_count(self) -> int:
        return self.nfev


__all__ = [
    "Array",
    "Objective",
    "Gradient",
    "EPS",
    "DEFAULT_TOL",
    "DEFAULT_MAXITER",
    "DEFAULT_MAX_TRIALS",
    "ObjectiveFunction",
    "Problem",
    "Status",
    "DescentResult",
]
