#!/usr/bin/env python3
"""
Advect a Gaussian through a log-law boundary-layer velocity profile.

Writes the initial and final fields as ``x y u`` text records, the y-averaged
final profile as ``x mean`` records, the run configuration as JSON, and
(unless ``--no-plots``) PNG quick-looks.

Example quick test (smaller grid):
    python examples/run_loglaw_advection.py --nx 200 --ny 200 --steps 160 --quiet

Reference run (1000 x 1000 over [0, 30]^2, 800 steps):
    python examples/run_loglaw_advection.py
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import numpy as np

import matplotlib

matplotlib.use("Agg")

from upwind_advection import (  # noqa: E402
    AdvectionAPI,
    AdvectionConfig,
    BoundaryValues,
    GaussianConfig,
    VelocityConfig,
    save_json,
    write_average,
    write_snapshot,
)


@dataclass
class RunConfig:
    nx: int
    ny: int
    domain: Tuple[float, float, float, float]
    center: Tuple[float, float]
    sigma: Tuple[float, float]
    boundary: Tuple[float, float, float, float]
    cfl: float
    n_steps: int
    t_end: Optional[float]
    bound: str
    profile: str
    uy: float
    dtype: np.dtype
    plots: bool
    verbose: bool


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="2D upwind advection of a Gaussian in a log-law velocity profile."
    )
    parser.add_argument("--nx", type=int, default=1000, help="Interior cells along x.")
    parser.add_argument("--ny", type=int, default=1000, help="Interior cells along y.")
    parser.add_argument(
        "--domain",
        type=float,
        nargs=4,
        default=(0.0, 30.0, 0.0, 30.0),
        metavar=("XMIN", "XMAX", "YMIN", "YMAX"),
        help="Domain bounds.",
    )
    parser.add_argument(
        "--center",
        type=float,
        nargs=2,
        default=(3.0, 15.0),
        metavar=("X0", "Y0"),
        help="Centre of the Gaussian initial condition.",
    )
    parser.add_argument(
        "--sigma",
        type=float,
        nargs=2,
        default=(1.0, 5.0),
        metavar=("SX", "SY"),
        help="Widths of the Gaussian initial condition.",
    )
    parser.add_argument(
        "--boundary",
        type=float,
        nargs=4,
        default=(0.0, 0.0, 0.0, 0.0),
        metavar=("LEFT", "RIGHT", "LOWER", "UPPER"),
        help="Dirichlet halo values.",
    )
    parser.add_argument("--cfl", type=float, default=0.9, help="CFL number.")
    parser.add_argument("--steps", type=int, default=800, help="Number of time steps.")
    parser.add_argument("--t-end", type=float, help="End time (overrides --steps).")
    parser.add_argument(
        "--bound",
        choices=("profile_max", "reference"),
        default="profile_max",
        help="Streamwise speed used in the CFL estimate.",
    )
    parser.add_argument("--profile", choices=("loglaw", "uniform"), default="loglaw")
    parser.add_argument("--uy", type=float, default=0.0, help="Cross-stream velocity.")
    parser.add_argument(
        "--dtype",
        choices=("float32", "float64"),
        default="float64",
        help="Real-space dtype for the solver.",
    )
    parser.add_argument(
        "--output-root",
        type=Path,
        default=Path("examples") / "loglaw_runs",
        help="Root directory for outputs.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Explicit output directory (otherwise a timestamped folder is created).",
    )
    parser.add_argument("--no-plots", action="store_true", help="Skip PNG output.")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress parameter report and solver progress output.",
    )
    return parser.parse_args(argv)


def build_run_config(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        nx=args.nx,
        ny=args.ny,
        domain=tuple(float(v) for v in args.domain),
        center=(float(args.center[0]), float(args.center[1])),
        sigma=(float(args.sigma[0]), float(args.sigma[1])),
        boundary=tuple(float(v) for v in args.boundary),
        cfl=args.cfl,
        n_steps=args.steps,
        t_end=args.t_end,
        bound=args.bound,
        profile=args.profile,
        uy=args.uy,
        dtype=np.float32 if args.dtype == "float32" else np.float64,
        plots=not args.no_plots,
        verbose=not args.quiet,
    )


def build_output_dir(args: argparse.Namespace) -> Path:
    if args.output_dir:
        return args.output_dir
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return args.output_root / f"Nx{args.nx}_Ny{args.ny}_{timestamp}"


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def run(run_cfg: RunConfig, out_dir: Path) -> dict:
    ensure_dir(out_dir)
    xmin, xmax, ymin, ymax = run_cfg.domain
    api = AdvectionAPI(
        Nx=run_cfg.nx,
        Ny=run_cfg.ny,
        xmin=xmin,
        xmax=xmax,
        ymin=ymin,
        ymax=ymax,
        dtype=run_cfg.dtype,
        velocity_config=VelocityConfig(profile=run_cfg.profile, uy=run_cfg.uy),
    )
    gaussian = GaussianConfig(
        x0=run_cfg.center[0],
        y0=run_cfg.center[1],
        sigmax=run_cfg.sigma[0],
        sigmay=run_cfg.sigma[1],
    )
    config = AdvectionConfig(
        cfl=run_cfg.cfl,
        n_steps=run_cfg.n_steps,
        t_end=run_cfg.t_end,
        bound=run_cfg.bound,
        boundary=BoundaryValues(*run_cfg.boundary),
    )

    u0 = api.gaussian_initial_condition(gaussian)
    write_snapshot(out_dir / "initial.dat", api.grid, u0)

    u_final, diagnostics = api.evolve(u0, config, verbose=run_cfg.verbose)

    write_snapshot(out_dir / "final.dat", api.grid, u_final)
    write_average(out_dir / "average.dat", api.grid, u_final)

    if run_cfg.plots:
        api.plot_field(u0, fname=out_dir / "initial.png", title="initial")
        api.plot_field(u_final, fname=out_dir / "final.png", title="final")
        api.plot_vertical_average(u0, u_final, fname=out_dir / "average.png")

    params = diagnostics.params
    return {
        "dx": params.dx,
        "dy": params.dy,
        "dt": params.dt,
        "n_steps": params.n_steps,
        "end_time": params.end_time,
        "velocity_bound": params.velocity_bound,
        "profile_max": params.profile_max,
        "courant_x": params.courant_x,
        "final_max_abs": float(diagnostics.max_abs[-1]),
    }


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    run_cfg = build_run_config(args)
    out_dir = build_output_dir(args)
    ensure_dir(out_dir)

    save_json(
        out_dir / "run_config.json",
        {
            "nx": run_cfg.nx,
            "ny": run_cfg.ny,
            "domain": list(run_cfg.domain),
            "center": list(run_cfg.center),
            "sigma": list(run_cfg.sigma),
            "boundary": list(run_cfg.boundary),
            "cfl": run_cfg.cfl,
            "n_steps": run_cfg.n_steps,
            "t_end": run_cfg.t_end,
            "bound": run_cfg.bound,
            "profile": run_cfg.profile,
            "uy": run_cfg.uy,
            "dtype": str(np.dtype(run_cfg.dtype)),
        },
    )

    summary = run(run_cfg, out_dir)
    save_json(out_dir / "summary.json", summary)

    if args.quiet:
        return 0

    print(f"\nRun complete in: {out_dir}")
    print(f"  steps:  {summary['n_steps']} (dt ≈ {summary['dt']:.3e})")
    print(f"  max|u|: {summary['final_max_abs']:.6g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
