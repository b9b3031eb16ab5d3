"""Benchmark steepest descent against BFGS on standard objectives."""

import time
from typing import Dict

import numpy as np

from descentopt import BFGS, Multilateration, Quadratic, Rosenbrock, SteepestDescent
from descentopt.optimize import DescentEngine, ObjectiveFunction


def benchmark_method(
    method: DescentEngine,
    objective: ObjectiveFunction,
    x0: np.ndarray,
    tol: float = 1e-6,
    repeats: int = 5,
) -> Dict[str, float]:
    """Benchmark repeated optimize calls of one method on one objective.

    Args:
        method: Descent method instance.
        objective: Objective to minimize.
        x0: Start point.
        tol: Objective-value tolerance.
        repeats: Number of timed runs.

    Returns:
        Dictionary with timing results and the work counters of the last run.
    """
    # Warmup
    method.optimize(objective, x0, tol=tol)

    start = time.perf_counter()
    for _ in range(repeats):
        result = method.optimize(objective, x0, tol=tol)
    end = time.perf_counter()

    return {
        "method": method.name,
        "time_per_run_sec": (end - start) / repeats,
        "nit": result.nit,
        "nfev": result.nfev,
        "fun": result.fun,
        "success": result.success,
    }


if __name__ == "__main__":
    cases = [
        ("quadratic", Quadratic(np.array([1.0, 2.0])), np.zeros(2), 1e-6),
        ("ill-conditioned quadratic", Quadratic(np.zeros(4), np.diag([1.0, 10.0, 100.0, 1000.0])), np.ones(4), 1e-6),
        ("rosenbrock", Rosenbrock(2), np.array([-1.2, 1.0]), 1e-6),
        ("multilateration", Multilateration.reference(), np.zeros(3), 1e-3),
    ]
    print(f"{'Problem':<28} {'Method':<18} {'Time (ms)':<12} {'nit':<6} {'nfev':<8} {'f':<12}")
    print("-" * 88)
    for label, objective, x0, tol in cases:
        for method in (SteepestDescent(), BFGS()):
            res = benchmark_method(method, objective, x0, tol=tol)
            print(
                f"{label:<28} {res['method']:<18} {res['time_per_run_sec'] * 1e3:<12.3f} "
                f"{res['nit']:<6} {res['nfev']:<8} {res['fun']:<12.3e}"
            )
