import warnings

import numpy as np
import pytest

import refellipsoid
from refellipsoid import Ellipsoid


@pytest.fixture(autouse=True)
def _restore_options():
    """Every test starts and ends with built-in option values"""
    refellipsoid.reset_options()
    yield
    refellipsoid.reset_options()


@pytest.fixture
def no_warnings():
    """Turn any warning raised inside the test into an error"""
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        yield


@pytest.fixture
def sphere():
    """ Returns a sphere of the Earth's mean radius """
    return Ellipsoid(6371008.8, 0.0)


@pytest.fixture(scope="session")
def latitudes():
    """ Returns geodetic latitudes (degrees) away from the poles """
    return np.linspace(-89.9, 89.9, 181)
