"""Numeric invariant checks for iterates and inverse-Hessian approximations."""

from __future__ import annotations

import numpy as np


def is_symmetric(mat: np.ndarray, atol: float = 1e-8) -> bool:
    """
    Check whether a square matrix is symmetric.

    Parameters
    ----------
    mat:
        Real array of shape (n, n).
    atol:
        Absolute tolerance, scaled by the largest entry of ``mat``.

    Returns
    -------
    bool
        True if ``mat`` is symmetric within the tolerance.
    """
    mat = np.asarray(mat)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False

    max_dev = np.max(np.abs(mat - mat.T)) if mat.size else 0.0
    if not np.isfinite(max_dev):
        return False

    scale = max(1.0, float(np.max(np.abs(mat)))) if mat.size else 1.0
    return bool(max_dev <= atol * scale)


def is_pos_def(mat: np.ndarray, tol: float = 1e-12) -> bool:
    """Check if a matrix is positive definite via eigenvalues."""
    mat = np.asarray(mat, dtype=float)
    if not np.all(np.isfinite(mat)):
        return False
    sym = 0.5 * (mat + mat.T)
    eigvals = np.linalg.eigvalsh(sym)
    return bool(np.all(eigvals > tol))


def assert_symmetric(mat: np.ndarray, atol: float = 1e-8) -> None:
    """
    Assert that a matrix is symmetric.

    Raises
    ------
    ValueError
        If the matrix is not symmetric within the tolerance.
    """
    if not is_symmetric(mat, atol=atol):
        raise ValueError(f"Matrix is not symmetric within tolerance {atol}.")


def assert_positive_definite(mat: np.ndarray, tol: float = 1e-12) -> None:
    """
    Assert that a matrix is symmetric positive definite.

    Raises
    ------
    ValueError
        If the smallest eigenvalue of the symmetric part is not above ``tol``.
    """
    if not is_pos_def(mat, tol=tol):
        raise ValueError("Matrix is not positive definite.")


def assert_finite(name: str, value: np.ndarray | float) -> None:
    """
    Assert that a scalar or array contains only finite values.

    Raises
    ------
    ValueError
        If any entry is NaN or infinite.
    """
    if not np.all(np.isfinite(value)):
        raise ValueError(f"{name} contains non-finite values.")
