"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def predictable_random_numbers():
    """
    Called at start of each test, guarantees that calls to random produce the same output over subsequent tests runs,
    see http://docs.scipy.org/doc/numpy-1.10.1/reference/generated/numpy.random.seed.html
    """
    np.random.seed(0)


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """
    Ensure any numerical errors raise a warning in our test suite
    The point is that we enforce such cases to be handled explicitly in our code
    Preferably using local `with np.errstate(...)` constructs
    """
    np.seterr(all="raise")


@pytest.fixture(autouse=True)
def clean_spacescroll_env(monkeypatch):
    """Make sure environment variables of the developer do not leak into tests."""
    import os

    for name in list(os.environ):
        if name.startswith("SPACESCROLL_"):
            monkeypatch.delenv(name)
