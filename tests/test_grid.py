import numpy as np
import pytest

from upwind_advection import HaloGrid


@pytest.mark.parametrize("nx, ny", [(1, 1), (1, 7), (10, 10), (33, 17), (200, 50)])
def test_coordinates_strictly_increasing_and_uniform(nx, ny):
    grid = HaloGrid(Nx=nx, Ny=ny, xmin=0.0, xmax=3.0, ymin=0.0, ymax=2.0)

    assert grid.x.shape == (nx + 2,)
    assert grid.y.shape == (ny + 2,)
    assert np.all(np.diff(grid.x) > 0)
    assert np.all(np.diff(grid.y) > 0)
    np.testing.assert_allclose(np.diff(grid.x), grid.dx, rtol=1e-12)
    np.testing.assert_allclose(np.diff(grid.y), grid.dy, rtol=1e-12)


def test_cell_widths_and_centres():
    grid = HaloGrid(Nx=4, Ny=5, xmin=0.0, xmax=2.0, ymin=0.0, ymax=10.0)

    assert grid.dx == pytest.approx(0.5)
    assert grid.dy == pytest.approx(2.0)
    # first interior centre sits half a cell inside the domain
    assert grid.x[1] == pytest.approx(0.25)
    assert grid.y[1] == pytest.approx(1.0)
    # halo cells mirror each other about the domain ends
    assert grid.x[0] == pytest.approx(-0.25)
    assert grid.x[-1] == pytest.approx(2.0 + 0.25)
    assert grid.y[-1] == pytest.approx(10.0 + 1.0)


def test_meshgrid_is_x_major(unit_grid):
    assert unit_grid.shape == (12, 12)
    assert unit_grid.X.shape == unit_grid.shape
    np.testing.assert_array_equal(unit_grid.X[:, 3], unit_grid.x)
    np.testing.assert_array_equal(unit_grid.Y[4, :], unit_grid.y)


def test_interior_and_zeros(unit_grid):
    u = unit_grid.zeros()
    assert u.shape == (12, 12)
    assert u.dtype == np.float64
    assert u[unit_grid.interior].shape == (10, 10)


def test_float32_grid():
    grid = HaloGrid(Nx=8, Ny=8, dtype=np.float32)
    assert grid.x.dtype == np.float32
    assert grid.zeros().dtype == np.float32


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(Nx=0, Ny=4),
        dict(Nx=4, Ny=-1),
        dict(Nx=4, Ny=4, xmin=1.0, xmax=1.0),
        dict(Nx=4, Ny=4, ymin=2.0, ymax=1.0),
    ],
)
def test_invalid_grid_raises(kwargs):
    with pytest.raises(ValueError):
        HaloGrid(**kwargs)
