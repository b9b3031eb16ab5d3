"""
Example: locating a point from range measurements with BFGS.

Four anchors hang at height 3000 above the corners of a 4000 x 4000 square.
Given the measured distance from each anchor to an unknown point, the
least-absolute-deviation multilateration objective is minimized from the
origin, first with BFGS and then with steepest descent for comparison.
"""

import time

import numpy as np

from descentopt import BFGS, Multilateration, SteepestDescent, print_result


def run(method, objective, x0, tol):
    start = time.perf_counter()
    result = method.optimize(objective, x0, tol=tol)
    elapsed = time.perf_counter() - start
    print(f"The running time is : {elapsed:.6f} s")
    print()
    print_result(result)
    print()
    return result


def main():
    objective = Multilateration.reference()
    x0 = np.zeros(objective.dim)
    tol = 1e-3

    print("=" * 60)
    print("BFGS quasi-Newton method")
    print("=" * 60)
    result = run(BFGS(), objective, x0, tol)

    print("=" * 60)
    print("Steepest descent method")
    print("=" * 60)
    run(SteepestDescent(), objective, x0, tol)

    if result.success:
        residuals = objective.residuals(result.x)
        print(f"Squared-range residuals at the BFGS solution: {residuals}")


if __name__ == "__main__":
    main()
