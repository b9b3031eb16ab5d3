import numpy as np
import pytest

from descentopt.objectives import Multilateration, Quadratic
from descentopt.optimize import BFGS, SteepestDescent


def test_bfgs_needs_fewer_iterations_than_steepest_descent():
    objective = Quadratic(np.array([1.0, 2.0]))
    x0 = np.zeros(2)
    res_sd = SteepestDescent().optimize(objective, x0, tol=1e-6)
    res_qn = BFGS().optimize(objective, x0, tol=1e-6)
    assert res_qn.nit < res_sd.nit
    for res in (res_sd, res_qn):
        assert res.success
        assert np.allclose(res.x, [1.0, 2.0], atol=1e-3)
        assert res.fun == pytest.approx(0.0, abs=1e-6)


def test_multilateration_scenario_converges_with_bfgs(multilateration):
    res = BFGS().optimize(multilateration, np.zeros(3), tol=1e-3)
    assert res.success
    assert res.fun < 1e-3
    assert len(res.grad_norms) == res.nit + 1


def test_multilateration_solution_fits_the_horizontal_position(multilateration):
    res = BFGS().optimize(multilateration, np.zeros(3), tol=1e-3)
    # The ranges are consistent with x = 123, y = 432 in the anchor plane frame.
    assert np.allclose(res.x[:2], [123.0, 432.0], atol=1e-2)


def test_multilateration_start_outside_the_anchor_square():
    objective = Multilateration.reference()
    res = BFGS().optimize(objective, np.array([5000.0, -1000.0, 0.0]), tol=1e-3)
    assert res.fun < objective.value(np.array([5000.0, -1000.0, 0.0]))
