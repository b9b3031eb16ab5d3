"""Human-readable reports for descent results.

``plot_gradient_norms`` needs matplotlib, which is an optional dependency.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Dict, Optional

import numpy as np

from descentopt.optimize.core import DescentResult

try:
    from matplotlib import pyplot as plt

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def result_summary(result: DescentResult) -> Dict[str, Any]:
    """
    Collect the headline numbers of a run into a plain dictionary.

    Returns
    -------
    Dict[str, Any]
        Keys: method, success, status, nit, nfev, njev, fun, x,
        final_grad_norm, line_search_failures, hessian_resets.
    """
    return {
        "method": result.method,
        "success": result.success,
        "status": result.status.value,
        "nit": result.nit,
        "nfev": result.nfev,
        "njev": result.njev,
        "fun": result.fun,
        "x": result.x.tolist(),
        "final_grad_norm": result.grad_norms[-1],
        "line_search_failures": result.n_line_search_failures,
        "hessian_resets": result.n_hessian_resets,
    }


def format_result(result: DescentResult, precision: int = 4) -> str:
    """
    Render the console report printed by the example driver.

    A failed run only reports that no solution was found, since its point
    and value are not trustworthy.
    """
    if not result.success:
        return "The optimal solution can't be found!"

    with np.printoptions(precision=precision, suppress=True):
        point = np.array2string(result.x)
    lines = [
        f"Method: {result.method}",
        f"The iterative number is:   {result.nit}",
        f"The number of function calculation is:   {result.nfev}",
        f"The optimal value of x is:   {point}",
        f"The minimum value of f(x) is:   {result.fun:.{precision}f}",
        f"The gradient's norm at x is:   {result.grad_norms[-1]:.{precision}f}",
    ]
    return "\n".join(lines)


def print_result(
    result: DescentResult,
    file: Optional[IO[str]] = None,
    precision: int = 4,
) -> None:
    """
    Pretty-print a result to stdout or a file.

    This is a utility function for human-readable output, so it uses print()
    intentionally. For programmatic access, use result_summary() instead.
    """
    if file is None:
        file = sys.stdout
    print(format_result(result, precision=precision), file=file)


def plot_gradient_norms(result: DescentResult, ax: Optional[Any] = None) -> Any:
    """
    Plot the gradient-norm trace of a run on a logarithmic axis.

    Parameters
    ----------
    result:
        Finished descent run.
    ax:
        Axes to draw on. A new figure is created when omitted.

    Returns
    -------
    matplotlib.axes.Axes
        The axes holding the plot.

    Raises
    ------
    RuntimeError
        If matplotlib is not installed.
    """
    if not HAS_MATPLOTLIB:
        raise RuntimeError(
            "matplotlib required for plotting; install with pip install matplotlib"
        )

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))
    norms = np.asarray(result.grad_norms, dtype=float)
    # Exact zeros cannot be drawn on a log axis.
    floor = np.finfo(float).tiny
    ax.semilogy(np.arange(norms.size), np.maximum(norms, floor), marker=".", linewidth=1)
    ax.set_xlabel("Iteration", fontsize=12)
    ax.set_ylabel("Gradient norm", fontsize=12)
    ax.set_title(result.method or "descent")
    ax.grid(True, alpha=0.3)
    return ax


__all__ = [
    "HAS_MATPLOTLIB",
    "format_result",
    "plot_gradient_norms",
    "print_result",
    "result_summary",
]
