import importlib.util
import json
import sys
from pathlib import Path

import numpy as np
import pytest

from upwind_advection import AdvectionAPI, AdvectionConfig, GaussianConfig, VelocityConfig

REPO_ROOT = Path(__file__).resolve().parent.parent


def load_example_script():
    path = REPO_ROOT / "examples" / "run_loglaw_advection.py"
    spec = importlib.util.spec_from_file_location("run_loglaw_advection", path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def test_defaults_follow_reference_domain():
    api = AdvectionAPI(Nx=40, Ny=40)
    assert api.grid.dx == pytest.approx(0.75)
    assert api.grid.ymax == 30.0
    params = api.plan()
    assert params.n_steps == 800
    assert params.cfl == pytest.approx(0.9)


def test_quick_simulation_moves_mass_downstream():
    api = AdvectionAPI(Nx=60, Ny=60)
    u0, u_final, diagnostics = api.quick_simulation(
        GaussianConfig(x0=6.0, y0=15.0, sigmax=1.5, sigmay=5.0),
        AdvectionConfig(n_steps=40),
        verbose=False,
    )

    assert diagnostics.n_steps == 40
    avg0 = api.vertical_average(u0)
    avg1 = api.vertical_average(u_final)
    centroid0 = np.sum(avg0[:, 0] * avg0[:, 1]) / np.sum(avg0[:, 1])
    centroid1 = np.sum(avg1[:, 0] * avg1[:, 1]) / np.sum(avg1[:, 1])
    assert centroid1 > centroid0
    assert api.snapshot(u_final).shape == (62 * 62, 3)


def test_plots_are_written(tmp_path):
    api = AdvectionAPI(Nx=16, Ny=16, xmax=1.0, ymax=1.0)
    u0 = api.gaussian_initial_condition(GaussianConfig(x0=0.5, y0=0.5, sigmax=0.1, sigmay=0.1))

    api.plot_field(u0, fname=tmp_path / "initial.png", title="initial")
    api.plot_vertical_average(u0, u0, fname=tmp_path / "average.png")

    assert (tmp_path / "initial.png").stat().st_size > 0
    assert (tmp_path / "average.png").stat().st_size > 0


def test_example_script_end_to_end(tmp_path):
    script = load_example_script()
    out_dir = tmp_path / "run"

    code = script.main(
        [
            "--nx", "20",
            "--ny", "20",
            "--steps", "10",
            "--output-dir", str(out_dir),
            "--no-plots",
            "--quiet",
        ]
    )

    assert code == 0
    for name in ("initial.dat", "final.dat", "average.dat", "run_config.json", "summary.json"):
        assert (out_dir / name).exists()
    assert np.loadtxt(out_dir / "final.dat").shape == (22 * 22, 3)
    assert np.loadtxt(out_dir / "average.dat").shape == (22, 2)
    config = json.loads((out_dir / "run_config.json").read_text())
    assert config["nx"] == 20
    summary = json.loads((out_dir / "summary.json").read_text())
    assert summary["n_steps"] == 10
    assert summary["dt"] > 0
    assert summary["end_time"] == pytest.approx(10 * summary["dt"])


def test_uniform_profile_from_config():
    api = AdvectionAPI(Nx=8, Ny=8, xmax=1.0, ymax=1.0, velocity_config=VelocityConfig(profile="uniform"))
    np.testing.assert_array_equal(api.solver.ux_profile, 1.0)
