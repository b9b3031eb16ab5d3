"""Smooth textbook objectives with analytic gradients."""

from __future__ import annotations

from typing import Optional

import numpy as np


class Quadratic:
    """
    Convex quadratic bowl centred at ``center``:

        f(x) = (x - c)^T A (x - c)

    With the default ``matrix`` (identity) this is the squared distance to
    ``center``.

    Parameters
    ----------
    center:
        Minimizer ``c``, a 1-D array.
    matrix:
        Symmetric positive definite ``A`` of shape (n, n).
    """

    def __init__(self, center: np.ndarray, matrix: Optional[np.ndarray] = None) -> None:
        self.center = np.asarray(center, dtype=float)
        if self.center.ndim != 1:
            raise ValueError("center must be a 1-D array.")
        n = self.center.size
        if matrix is None:
            matrix = np.eye(n)
        self.matrix = np.asarray(matrix, dtype=float)
        if self.matrix.shape != (n, n):
            raise ValueError(
                f"matrix must have shape ({n}, {n}), got {self.matrix.shape}."
            )

    @property
    def dim(self) -> int:
        return self.center.size

    def value(self, x: np.ndarray) -> float:
        r = np.asarray(x, dtype=float) - self.center
        return float(r @ self.matrix @ r)

    def gradient(self, x: np.ndarray) -> np.ndarray:
        r = np.asarray(x, dtype=float) - self.center
        return (self.matrix + self.matrix.T) @ r


class Rosenbrock:
    """
    Chained Rosenbrock function in ``dim`` variables,

        f(x) = sum_i 100 (x_{i+1} - x_i^2)^2 + (1 - x_i)^2,

    with its minimum 0 at ``x = (1, ..., 1)``.
    """

    def __init__(self, dim: int = 2) -> None:
        if dim < 2:
            raise ValueError("Rosenbrock needs at least two variables.")
        self.dim = int(dim)

    def value(self, x: np.ndarray) -> float:
        x = np.asarray(x, dtype=float)
        return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))

    def gradient(self, x: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        g = np.zeros_like(x)
        t = x[1:] - x[:-1] ** 2
        g[:-1] = -400.0 * x[:-1] * t - 2.0 * (1.0 - x[:-1])
        g[1:] += 200.0 * t
        return g


__all__ = ["Quadratic", "Rosenbrock"]
