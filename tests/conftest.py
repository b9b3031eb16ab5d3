"""Pytest configuration and shared fixtures for descentopt tests.

This module provides:
- Deterministic RNG fixtures for numpy
- Common objectives used across the optimizer tests
"""

import os

import numpy as np
import pytest

from descentopt.diagnostics import set_debug_enabled
from descentopt.objectives import Multilateration, Quadratic, Rosenbrock


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Run every test with debug mode off unless the test turns it on."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def shifted_bowl() -> Quadratic:
    """f(x) = (x1 - 1)^2 + (x2 - 2)^2."""
    return Quadratic(np.array([1.0, 2.0]))


@pytest.fixture
def rosenbrock() -> Rosenbrock:
    return Rosenbrock(2)


@pytest.fixture
def multilateration() -> Multilateration:
    return Multilateration.reference()
