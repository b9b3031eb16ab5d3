import numpy as np
import pytest

from descentopt.objectives import Quadratic
from descentopt.optimize import LineSearch, Problem


def bowl() -> Quadratic:
    return Quadratic(np.array([1.0, 2.0]))


def test_step_satisfies_both_conditions():
    f = bowl()
    x = np.zeros(2)
    grad = f.gradient(x)
    direction = -grad
    ls = LineSearch()
    res = ls.step(f, x, direction)
    assert res.success
    assert res.alpha > 0
    slope = grad @ direction
    assert f.value(x + res.alpha * direction) <= f.value(x) + ls.c1 * res.alpha * slope
    assert f.gradient(x + res.alpha * direction) @ direction >= ls.c2 * slope
    assert res.fun == pytest.approx(f.value(x + res.alpha * direction))


def test_overshooting_first_trial_is_bisected():
    # The unit step lands on the mirror image of the start point.
    f = bowl()
    x = np.zeros(2)
    res = LineSearch().step(f, x, -f.gradient(x))
    assert res.success
    assert res.alpha == 0.5
    assert res.fun == 0.0


def test_short_direction_is_expanded():
    f = bowl()
    x = np.zeros(2)
    direction = -0.01 * f.gradient(x)
    res = LineSearch().step(f, x, direction)
    assert res.success
    assert res.alpha > 1.0


def test_evaluation_counts_with_supplied_value_and_gradient():
    f = bowl()
    x = np.zeros(2)
    grad = f.gradient(x)
    res = LineSearch().step(f, x, -grad, fx=f.value(x), grad=grad)
    # Two trials: the rejected unit step and the accepted half step.
    assert res.nfev == 2
    assert res.njev == 1


def test_evaluation_counts_include_start_point_when_not_supplied():
    f = bowl()
    x = np.zeros(2)
    res = LineSearch().step(f, x, -f.gradient(x))
    assert res.nfev == 3
    assert res.njev == 2


def test_budget_exhaustion_reports_failure():
    f = bowl()
    x = np.zeros(2)
    grad = f.gradient(x)
    res = LineSearch().step(f, x, -grad, max_trials=1, fx=f.value(x), grad=grad)
    assert not res.success
    assert res.alpha == 1.0
    assert res.nfev == 1
    assert res.njev == 0


def test_failure_returns_largest_sufficient_decrease_step():
    # Linear objective: sufficient decrease always holds, curvature never does.
    problem = Problem(fun=lambda x: -float(np.sum(x)), grad=lambda x: -np.ones_like(x))
    x = np.zeros(3)
    res = LineSearch().step(problem, x, np.ones(3), max_trials=5)
    assert not res.success
    assert res.alpha == 16.0
    assert res.fun == pytest.approx(-48.0)


def test_ascent_direction_exhausts_with_tiny_step():
    f = bowl()
    x = np.zeros(2)
    grad = f.gradient(x)
    res = LineSearch().step(f, x, grad, max_trials=20)
    assert not res.success
    assert 0 < res.alpha <= 2.0**-19


def test_zero_direction_accepts_initial_step():
    f = bowl()
    x = np.array([1.0, 2.0])
    res = LineSearch(alpha0=1.0).step(f, x, np.zeros(2))
    assert res.success
    assert res.alpha == 1.0
    assert res.nfev == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"c1": 0.0},
        {"c1": 0.5, "c2": 0.4},
        {"c2": 1.0},
        {"alpha0": 0.0},
        {"expand": 1.0},
    ],
)
def test_invalid_parameters_raise(kwargs):
    with pytest.raises(ValueError):
        LineSearch(**kwargs)


def test_invalid_trial_budget_raises():
    f = bowl()
    x = np.zeros(2)
    with pytest.raises(ValueError):
        LineSearch().step(f, x, -f.gradient(x), max_trials=0)
