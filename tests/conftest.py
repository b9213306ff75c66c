# conftest.py

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from upwind_advection import GaussianConfig, HaloGrid, LogLawVelocity, VelocityConfig


@pytest.fixture
def unit_grid():
    """10 x 10 cells over [0, 1] x [0, 1]."""
    return HaloGrid(Nx=10, Ny=10, xmin=0.0, xmax=1.0, ymin=0.0, ymax=1.0)


@pytest.fixture
def centered_gaussian():
    return GaussianConfig(x0=0.5, y0=0.5, sigmax=0.1, sigmay=0.1)


@pytest.fixture
def still_velocity():
    return LogLawVelocity(VelocityConfig(profile="uniform", ux_uniform=0.0, uy=0.0))


@pytest.fixture
def uniform_velocity():
    return LogLawVelocity(VelocityConfig(profile="uniform", ux_uniform=1.0, uy=0.0))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
