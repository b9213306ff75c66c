"""
High-level, user-friendly API for the upwind advection toolkit.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .grid import HaloGrid
from .velocity import LogLawVelocity, VelocityConfig
from .solver import (
    AdvectionConfig,
    GaussianConfig,
    SimulationDiagnostics,
    TimeStepParameters,
    UpwindAdvectionSolver,
)
from .output import snapshot_triples, vertical_average
from .plotting import plot_field, plot_vertical_average


class AdvectionAPI:
    """
    Facade that bundles the grid, velocity profile, solver and output queries.
    """

    def __init__(
        self,
        Nx: int = 1000,
        Ny: int = 1000,
        xmin: float = 0.0,
        xmax: float = 30.0,
        ymin: float = 0.0,
        ymax: float = 30.0,
        dtype=np.float64,
        velocity_config: VelocityConfig | None = None,
    ):
        self.grid = HaloGrid(Nx=Nx, Ny=Ny, xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax, dtype=dtype)
        self.velocity = LogLawVelocity(velocity_config or VelocityConfig())
        self.solver = UpwindAdvectionSolver(self.grid, self.velocity)

    # ------------------------------------------------------------------
    # Initial conditions
    # ------------------------------------------------------------------
    def gaussian_initial_condition(self, gaussian: GaussianConfig | None = None) -> np.ndarray:
        return self.solver.create_gaussian_initial_condition(gaussian)

    # ------------------------------------------------------------------
    # Scalar evolution
    # ------------------------------------------------------------------
    def plan(self, config: AdvectionConfig | None = None) -> TimeStepParameters:
        return self.solver.plan(config)

    def evolve(
        self,
        u0: np.ndarray,
        config: AdvectionConfig | None = None,
        *,
        verbose: bool = True,
    ) -> Tuple[np.ndarray, SimulationDiagnostics]:
        return self.solver.evolve(u0, config, verbose=verbose)

    # ------------------------------------------------------------------
    # Output queries
    # ------------------------------------------------------------------
    def snapshot(self, u: np.ndarray) -> np.ndarray:
        return snapshot_triples(self.grid, u)

    def vertical_average(self, u: np.ndarray) -> np.ndarray:
        return vertical_average(self.grid, u)

    def plot_field(self, u: np.ndarray, **kwargs):
        return plot_field(self.grid, u, **kwargs)

    def plot_vertical_average(self, u_initial: np.ndarray, u_final: np.ndarray | None = None, **kwargs):
        return plot_vertical_average(self.grid, u_initial, u_final, **kwargs)

    # ------------------------------------------------------------------
    # Convenience driver
    # ------------------------------------------------------------------
    def quick_simulation(
        self,
        gaussian: GaussianConfig | None = None,
        config: AdvectionConfig | None = None,
        *,
        verbose: bool = True,
    ) -> Tuple[np.ndarray, np.ndarray, SimulationDiagnostics]:
        """
        Gaussian initial condition evolved with the given (or default) settings.
        """
        u0 = self.gaussian_initial_condition(gaussian)
        u_final, diagnostics = self.evolve(u0, config, verbose=verbose)
        return u0, u_final, diagnostics


__all__ = [
    "AdvectionAPI",
    "AdvectionConfig",
    "GaussianConfig",
    "SimulationDiagnostics",
    "VelocityConfig",
]
