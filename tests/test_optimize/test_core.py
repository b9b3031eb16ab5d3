import numpy as np
import pytest

from descentopt.optimize import (
    DescentResult,
    ObjectiveFunction,
    Problem,
    Status,
    approx_grad,
    as_point,
    check_gradient_shape,
)


def test_problem_uses_analytic_gradient_when_given():
    calls = []

    def grad(x):
        calls.append(x)
        return 2 * x

    problem = Problem(fun=lambda x: float(x @ x), grad=grad, dim=2)
    g = problem.gradient(np.array([1.0, -1.0]))
    assert np.array_equal(g, [2.0, -2.0])
    assert len(calls) == 1
    assert problem.value(np.array([1.0, 2.0])) == 5.0
    assert isinstance(problem, ObjectiveFunction)


def test_problem_falls_back_to_finite_differences():
    problem = Problem(fun=lambda x: float(np.sum(x**3)))
    x = np.array([1.0, 2.0])
    assert np.allclose(problem.gradient(x), 3 * x**2, atol=1e-6)


def test_approx_grad_reports_evaluations():
    grad, evals = approx_grad(lambda x: float(x @ x), np.ones(3), return_evals=True)
    assert evals == 6
    assert np.allclose(grad, 2 * np.ones(3), atol=1e-8)
    with pytest.raises(ValueError):
        approx_grad(lambda x: 0.0, np.ones(2), eps=0.0)


def test_as_point_copies_and_checks_dimension():
    x0 = np.array([1, 2, 3])
    x = as_point(x0, dim=3)
    assert x.dtype == float
    x[0] = 10.0
    assert x0[0] == 1
    with pytest.raises(ValueError):
        as_point(x0, dim=2)
    with pytest.raises(ValueError):
        as_point(np.array([1.0, np.inf]))


def test_check_gradient_shape():
    x = np.zeros(3)
    assert check_gradient_shape([1, 2, 3], x).dtype == float
    with pytest.raises(ValueError):
        check_gradient_shape(np.zeros((3, 1)), x)


def test_result_copies_inputs():
    x = np.array([1.0, 2.0])
    norms = [3.0, 1.0]
    res = DescentResult(
        x=x,
        fun=0.5,
        success=False,
        nit=1,
        nfev=4,
        njev=3,
        grad_norms=norms,
        status=Status.MAX_ITER,
        message="Maximum iterations reached.",
    )
    x[0] = 99.0
    norms.append(0.0)
    assert res.x[0] == 1.0
    assert res.grad_norms == (3.0, 1.0)
    assert not res.x.flags.writeable
