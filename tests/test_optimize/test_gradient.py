import numpy as np

from descentopt.objectives import Quadratic, Rosenbrock
from descentopt.optimize import SteepestDescent, steepest_descent


def test_direction_is_negative_gradient():
    g = np.array([0.5, -2.0, 3.0])
    assert np.array_equal(SteepestDescent().direction(g), -g)


def test_steepest_descent_quadratic_matches_solution():
    a = np.array([[2.0, 0.2], [0.2, 3.0]])
    center = np.array([0.5, -0.25])
    res = steepest_descent(Quadratic(center, a), np.array([3.0, 2.0]))
    assert res.success
    assert np.allclose(res.x, center, atol=1e-3)
    assert res.nit >= 50


def test_steepest_descent_reduces_rosenbrock():
    x0 = np.array([-1.2, 1.0])
    objective = Rosenbrock(2)
    res = steepest_descent(objective, x0, maxiter=200)
    assert res.fun < objective.value(x0)
    assert res.grad_norms[-1] < res.grad_norms[0]


def test_steepest_descent_never_resets_anything():
    res = steepest_descent(Quadratic(np.ones(3)), np.zeros(3))
    assert res.n_hessian_resets == 0
    assert res.method == "steepest_descent"
