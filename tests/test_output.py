import json

import numpy as np
import pytest

from upwind_advection import (
    HaloGrid,
    UpwindAdvectionSolver,
    save_json,
    snapshot_triples,
    vertical_average,
    write_average,
    write_snapshot,
)


def test_snapshot_is_x_major(rng):
    grid = HaloGrid(Nx=3, Ny=2)
    u = rng.normal(size=grid.shape)

    triples = snapshot_triples(grid, u)

    assert triples.shape == (5 * 4, 3)
    row = 0
    for i in range(grid.Nx + 2):
        for j in range(grid.Ny + 2):
            assert triples[row, 0] == grid.x[i]
            assert triples[row, 1] == grid.y[j]
            assert triples[row, 2] == u[i, j]
            row += 1


def test_vertical_average_over_all_y_indices(rng):
    grid = HaloGrid(Nx=4, Ny=6)
    u = rng.normal(size=grid.shape)

    avg = vertical_average(grid, u)

    assert avg.shape == (grid.Nx + 2, 2)
    np.testing.assert_array_equal(avg[:, 0], grid.x)
    for i in range(grid.Nx + 2):
        assert avg[i, 1] == pytest.approx(sum(u[i, :]) / (grid.Ny + 2))


def test_snapshot_right_after_initialisation_is_stable(unit_grid, centered_gaussian):
    solver = UpwindAdvectionSolver(unit_grid)
    u0 = solver.create_gaussian_initial_condition(centered_gaussian)
    first = snapshot_triples(unit_grid, u0)
    second = snapshot_triples(unit_grid, u0)
    np.testing.assert_array_equal(first, second)
    # the query returns fresh arrays
    first[:, 2] = -1.0
    assert np.all(u0 > 0)


def test_shape_mismatch_raises(unit_grid):
    with pytest.raises(ValueError):
        snapshot_triples(unit_grid, np.zeros((3, 3)))
    with pytest.raises(ValueError):
        vertical_average(unit_grid, np.zeros((12, 3)))


def test_writers_produce_text_records(tmp_path, unit_grid, centered_gaussian):
    u = UpwindAdvectionSolver(unit_grid).create_gaussian_initial_condition(centered_gaussian)

    snap_path = write_snapshot(tmp_path / "initial.dat", unit_grid, u)
    avg_path = write_average(tmp_path / "average.dat", unit_grid, u)

    lines = snap_path.read_text().splitlines()
    assert len(lines) == 12 * 12
    assert len(lines[0].split()) == 3
    data = np.loadtxt(snap_path)
    np.testing.assert_allclose(data, snapshot_triples(unit_grid, u), rtol=1e-5, atol=1e-12)

    avg = np.loadtxt(avg_path)
    assert avg.shape == (12, 2)
    np.testing.assert_allclose(avg, vertical_average(unit_grid, u), rtol=1e-5, atol=1e-12)


def test_save_json(tmp_path):
    path = save_json(tmp_path / "run_config.json", {"nx": 10, "cfl": 0.9})
    assert json.loads(path.read_text()) == {"cfl": 0.9, "nx": 10}
