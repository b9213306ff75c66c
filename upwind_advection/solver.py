"""
Explicit first-order upwind solver for 2D scalar advection.

The scalar lives on a :class:`HaloGrid`; each time step overwrites the halo
with Dirichlet values, evaluates the upwind rate of change on the interior and
advances the field with a forward Euler update.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .grid import HaloGrid
from .velocity import LogLawVelocity, VelocityConfig


@dataclass(frozen=True)
class BoundaryValues:
    """Dirichlet values written to the left/right (x) and lower/upper (y) halo cells."""

    left: float = 0.0
    right: float = 0.0
    lower: float = 0.0
    upper: float = 0.0


@dataclass(frozen=True)
class GaussianConfig:
    """
    Gaussian bump ``exp(-[(x-x0)^2/(2 sigmax^2) + (y-y0)^2/(2 sigmay^2)])``.
    """

    x0: float = 3.0
    y0: float = 15.0
    sigmax: float = 1.0
    sigmay: float = 5.0

    @property
    def sigmax2(self) -> float:
        return self.sigmax * self.sigmax

    @property
    def sigmay2(self) -> float:
        return self.sigmay * self.sigmay


@dataclass(frozen=True)
class AdvectionConfig:
    """Configuration for an upwind advection run.

    Parameters
    ----------
    cfl : float
        CFL number used when ``dt`` is derived from the velocity bound.
    n_steps : int
        Number of time steps. Ignored when ``t_end`` is given.
    t_end : float, optional
        Simulation end time; the step count becomes ``ceil(t_end / dt)`` and
        ``dt`` is shrunk to land exactly on ``t_end``.
    dt : float, optional
        Explicit time step, bypassing the CFL estimate.
    velocity_bound : float, optional
        Explicit characteristic streamwise speed for the CFL estimate.
    bound : str
        ``'profile_max'`` (default) bounds dt with the largest streamwise speed
        over the interior cells; ``'reference'`` uses ``kappa_ratio * ln(ymax / y_floor)``.
    boundary : BoundaryValues
        Dirichlet halo values.
    save_every : int, optional
        Keep a copy of the field every ``save_every`` steps.
    """

    cfl: float = 0.9
    n_steps: int = 800
    t_end: Optional[float] = None
    dt: Optional[float] = None
    velocity_bound: Optional[float] = None
    bound: str = "profile_max"
    boundary: BoundaryValues = field(default_factory=BoundaryValues)
    save_every: Optional[int] = None


@dataclass(frozen=True)
class TimeStepParameters:
    """Constants fixed for the whole run."""

    dx: float
    dy: float
    dt: float
    n_steps: int
    cfl: float
    velocity_bound: float
    uy: float
    profile_max: float

    @property
    def end_time(self) -> float:
        return self.dt * self.n_steps

    @property
    def courant_x(self) -> float:
        return self.profile_max * self.dt / self.dx

    @property
    def courant_y(self) -> float:
        return abs(self.uy) * self.dt / self.dy

    @property
    def distance_x(self) -> float:
        return self.velocity_bound * self.end_time

    @property
    def distance_y(self) -> float:
        return self.uy * self.end_time


@dataclass
class SimulationDiagnostics:
    """Data collected during the time loop."""

    snapshots: List[np.ndarray] = field(default_factory=list)
    times: np.ndarray = field(default_factory=lambda: np.array([]))
    max_abs: np.ndarray = field(default_factory=lambda: np.array([]))
    dt: float = 0.0
    n_steps: int = 0
    velocity_bound: float = 0.0
    params: Optional[TimeStepParameters] = None


def plan_time_step(
    grid: HaloGrid,
    velocity: LogLawVelocity,
    config: AdvectionConfig,
) -> TimeStepParameters:
    """
    Derive ``dt`` and the step count from the CFL condition

        dt <= cfl / (|u_char| / dx + |u_y| / dy)
    """
    if config.cfl <= 0:
        raise ValueError("CFL number must be positive")
    if config.n_steps < 0:
        raise ValueError("n_steps must be non-negative")
    if config.t_end is not None and config.t_end <= 0:
        raise ValueError("t_end must be positive")
    if config.dt is not None and config.dt <= 0:
        raise ValueError("dt must be positive")
    if config.save_every is not None and config.save_every < 1:
        raise ValueError("save_every must be at least 1")

    bound = config.bound.lower()
    if bound not in {"profile_max", "reference"}:
        raise ValueError("bound must be 'profile_max' or 'reference'")

    profile_max = velocity.max_streamwise(grid.y[1 : grid.Ny + 1])

    if config.velocity_bound is not None:
        vbound = abs(float(config.velocity_bound))
    elif bound == "profile_max":
        vbound = profile_max
    else:
        vbound = velocity.reference_streamwise(grid.ymax)
    if not np.isfinite(vbound):
        raise ValueError(f"Velocity bound must be finite, got {vbound}")

    uy = velocity.cross_stream
    inv_dt = vbound / grid.dx + abs(uy) / grid.dy

    if config.dt is not None:
        dt = float(config.dt)
    elif inv_dt > 0:
        dt = config.cfl / inv_dt
    elif config.t_end is not None and config.n_steps > 0:
        # nothing moves, any dt is stable
        dt = config.t_end / config.n_steps
    else:
        dt = 1.0

    n_steps = int(config.n_steps)
    if config.t_end is not None:
        n_steps = max(1, int(np.ceil(config.t_end / dt - 1e-12)))
        dt = config.t_end / n_steps

    return TimeStepParameters(
        dx=grid.dx,
        dy=grid.dy,
        dt=float(dt),
        n_steps=n_steps,
        cfl=config.cfl,
        velocity_bound=float(vbound),
        uy=float(uy),
        profile_max=float(profile_max),
    )


def report_parameters(params: TimeStepParameters) -> None:
    """Print the run constants."""
    print(f"Grid spacing dx     = {params.dx:g}")
    print(f"Grid spacing dy     = {params.dy:g}")
    print(f"CFL number          = {params.cfl:g}")
    print(f"Time step           = {params.dt:g}")
    print(f"No. of time steps   = {params.n_steps:d}")
    print(f"End time            = {params.end_time:g}")
    print(f"Distance advected x = {params.distance_x:g}")
    print(f"Distance advected y = {params.distance_y:g}")
    if params.velocity_bound < params.profile_max:
        print(
            f"  Warning: velocity bound {params.velocity_bound:g} is below the profile "
            f"maximum {params.profile_max:g}; effective Courant number {params.courant_x:g}"
        )


class UpwindAdvectionSolver:
    """
    First-order upwind / forward Euler solver on a halo grid.
    """

    def __init__(self, grid: HaloGrid, velocity: LogLawVelocity | None = None):
        self.grid = grid
        self.dtype = grid.dtype
        self.velocity = velocity or LogLawVelocity(VelocityConfig())
        # streamwise speed at each interior y index j = 1..Ny
        self.ux_profile = self.velocity.streamwise(grid.y[1 : grid.Ny + 1]).astype(self.dtype)
        self.uy = float(self.velocity.cross_stream)

    # ------------------------------------------------------------------
    # Initial conditions
    # ------------------------------------------------------------------
    def create_gaussian_initial_condition(self, gaussian: GaussianConfig | None = None) -> np.ndarray:
        gaussian = gaussian or GaussianConfig()
        if gaussian.sigmax <= 0 or gaussian.sigmay <= 0:
            raise ValueError("Gaussian widths must be positive")
        x2 = (self.grid.X - gaussian.x0) ** 2
        y2 = (self.grid.Y - gaussian.y0) ** 2
        u = np.exp(-1.0 * ((x2 / (2.0 * gaussian.sigmax2)) + (y2 / (2.0 * gaussian.sigmay2))))
        return u.astype(self.dtype)

    # ------------------------------------------------------------------
    # Per-step kernels
    # ------------------------------------------------------------------
    def apply_boundary_conditions(self, u: np.ndarray, boundary: BoundaryValues | None = None) -> np.ndarray:
        """Overwrite the halo cells of ``u`` in place."""
        boundary = boundary or BoundaryValues()
        nx, ny = self.grid.Nx, self.grid.Ny
        u[0, :] = boundary.left
        u[nx + 1, :] = boundary.right
        u[:, 0] = boundary.lower
        u[:, ny + 1] = boundary.upper
        return u

    def compute_rate(self, u: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
        """
        Upwind (backward difference) rate of change on the interior cells.

        Reads ``u`` only; halo entries of ``out`` are left untouched.
        """
        if out is None:
            out = self.grid.zeros()
        I, J = self.grid.interior
        core = u[I, J]
        dudx = (core - u[:-2, J]) / self.grid.dx
        dudy = (core - u[I, :-2]) / self.grid.dy
        out[I, J] = -1 * (self.ux_profile[np.newaxis, :] * dudx + self.uy * dudy)
        return out

    def update(self, u: np.ndarray, rate: np.ndarray, dt: float) -> np.ndarray:
        """Forward Euler update of the interior cells."""
        I, J = self.grid.interior
        u[I, J] += rate[I, J] * dt
        return u

    def single_iteration(
        self,
        u: np.ndarray,
        rate: np.ndarray,
        dt: float,
        boundary: BoundaryValues | None = None,
    ) -> np.ndarray:
        """
        Advance ``u`` by one step in place: halo, rate, update.
        """
        self.apply_boundary_conditions(u, boundary)
        self.compute_rate(u, out=rate)
        return self.update(u, rate, dt)

    # ------------------------------------------------------------------
    # Time integration
    # ------------------------------------------------------------------
    def plan(self, config: AdvectionConfig | None = None) -> TimeStepParameters:
        return plan_time_step(self.grid, self.velocity, config or AdvectionConfig())

    def evolve(
        self,
        u0: np.ndarray,
        config: AdvectionConfig | None = None,
        *,
        verbose: bool = True,
    ) -> Tuple[np.ndarray, SimulationDiagnostics]:
        config = config or AdvectionConfig()
        u = np.array(u0, dtype=self.dtype, copy=True)
        if u.shape != self.grid.shape:
            raise ValueError(f"Field shape {u.shape} does not match grid shape {self.grid.shape}")

        params = self.plan(config)
        if verbose:
            report_parameters(params)

        diagnostics = SimulationDiagnostics(
            dt=params.dt,
            n_steps=params.n_steps,
            velocity_bound=params.velocity_bound,
            params=params,
        )
        rate = self.grid.zeros()
        max_abs = np.empty(params.n_steps + 1)
        max_abs[0] = np.max(np.abs(u))
        times = [0.0]
        if config.save_every is not None:
            diagnostics.snapshots.append(u.copy())

        for n in range(1, params.n_steps + 1):
            self.single_iteration(u, rate, params.dt, config.boundary)
            max_abs[n] = np.max(np.abs(u))

            tnow = n * params.dt
            if config.save_every is not None and (n % config.save_every == 0 or n == params.n_steps):
                diagnostics.snapshots.append(u.copy())
                times.append(tnow)

            if verbose and n % max(1, params.n_steps // 10) == 0:
                print(f"  Step {n}/{params.n_steps} (t={tnow:.3f}/{params.end_time:.3f})")

        if verbose:
            print(f"Simulation complete. Final time: {params.end_time:.3f}")

        diagnostics.times = np.asarray(times)
        diagnostics.max_abs = max_abs
        return u, diagnostics


__all__ = [
    "AdvectionConfig",
    "BoundaryValues",
    "GaussianConfig",
    "SimulationDiagnostics",
    "TimeStepParameters",
    "UpwindAdvectionSolver",
    "plan_time_step",
    "report_parameters",
]
