"""
Upwind advection toolkit: halo grid, log-law velocity, explicit solver and output queries.
"""

from .api import AdvectionAPI
from .grid import HaloGrid
from .velocity import LogLawVelocity, VelocityConfig, streamwise_velocity
from .solver import (
    AdvectionConfig,
    BoundaryValues,
    GaussianConfig,
    SimulationDiagnostics,
    TimeStepParameters,
    UpwindAdvectionSolver,
    plan_time_step,
    report_parameters,
)
from .output import save_json, snapshot_triples, vertical_average, write_average, write_snapshot
from .plotting import plot_field, plot_vertical_average

__all__ = [
    "AdvectionAPI",
    "HaloGrid",
    "LogLawVelocity",
    "VelocityConfig",
    "streamwise_velocity",
    "AdvectionConfig",
    "BoundaryValues",
    "GaussianConfig",
    "SimulationDiagnostics",
    "TimeStepParameters",
    "UpwindAdvectionSolver",
    "plan_time_step",
    "report_parameters",
    "save_json",
    "snapshot_triples",
    "vertical_average",
    "write_average",
    "write_snapshot",
    "plot_field",
    "plot_vertical_average",
]
