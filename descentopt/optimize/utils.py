"""Utility helpers for finite differences and input validation.

Pure NumPy, deterministic, intended for small to medium dimensional problems.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import Array, Objective


def approx_grad(
    fun: Objective, x: Array, eps: float = 1e-6, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Compute a central-difference gradient approximation.

    Parameters
    ----------
    fun:
        Objective function returning a scalar given x.
    x:
        Point where the gradient is approximated.
    eps:
        Perturbation size for finite differences.
    return_evals:
        Also return the number of function evaluations used.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float).copy()
    grad = np.zeros_like(x, dtype=float)
    evals = 0
    for i in range(x.size):
        ei = np.zeros_like(x)
        ei[i] = eps
        fx_plus = fun(x + ei)
        fx_minus = fun(x - ei)
        evals += 2
        grad[i] = (fx_plus - fx_minus) / (2.0 * eps)
    if return_evals:
        return grad, evals
    return grad


def as_point(x0: Array, dim: Optional[int] = None) -> Array:
    """Return a float copy of ``x0`` after checking it is a usable start point.

    Raises
    ------
    ValueError
        If ``x0`` is not a non-empty finite 1-D array, or its size differs
        from ``dim``.
    """
    x = np.array(x0, dtype=float, copy=True)
    if x.ndim != 1:
        raise ValueError(f"Initial point must be 1-D, got shape {x.shape}.")
    if x.size == 0:
        raise ValueError("Initial point must have at least one component.")
    if not np.all(np.isfinite(x)):
        raise ValueError("Initial point contains non-finite values.")
    if dim is not None and x.size != dim:
        raise ValueError(
            f"Initial point has {x.size} components but the objective expects {dim}."
        )
    return x


def check_gradient_shape(grad: Array, x: Array) -> Array:
    """Ensure a gradient matches the dimensionality of the point it was taken at."""
    grad = np.asarray(grad, dtype=float)
    if grad.shape != x.shape:
        raise ValueError(
            f"Gradient shape {grad.shape} does not match point shape {x.shape}."
        )
    return grad


__all__ = [
    "approx_grad",
    "as_point",
    "check_gradient_shape",
]
