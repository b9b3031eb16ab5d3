"""Line-search descent methods: steepest descent and BFGS.

Example
-------
>>> import numpy as np
>>> from descentopt.optimize import BFGS, Problem
>>> def fun(x):
...     return (x[0] - 1) ** 2 + (x[1] - 2) ** 2
>>> def grad(x):
...     return np.array([2 * (x[0] - 1), 2 * (x[1] - 2)])
>>> res = BFGS().optimize(Problem(fun=fun, grad=grad, dim=2), np.zeros(2))
>>> res.success, res.nit
(True, 30)
"""

from .core import (
    DEFAULT_MAX_TRIALS,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    EPS,
    DescentResult,
    ObjectiveFunction,
    Problem,
    Status,
)
from .engine import DescentEngine, IterationCallback, IterationRecord
from .gradient import SteepestDescent, steepest_descent
from .line_search import LineSearch, LineSearchResult
from .quasi_newton import BFGS, bfgs, bfgs_inverse_update
from .utils import approx_grad, as_point, check_gradient_shape

__all__ = [
    "BFGS",
    "DEFAULT_MAX_TRIALS",
    "DEFAULT_MAXITER",
    "DEFAULT_TOL",
    "DescentEngine",
    "DescentResult",
    "EPS",
    "IterationCallback",
    "IterationRecord",
    "LineSearch",
    "LineSearchResult",
    "ObjectiveFunction",
    "Problem",
    "Status",
    "SteepestDescent",
    "approx_grad",
    "as_point",
    "bfgs",
    "bfgs_inverse_update",
    "check_gradient_shape",
    "steepest_descent",
]
