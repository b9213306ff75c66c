"""
Boundary-layer velocity profile driving the advection.

The streamwise component follows a logarithmic wall law in the cross-stream
coordinate and is clipped to zero close to the wall, where the logarithm would
diverge. The cross-stream component is a constant.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class VelocityConfig:
    """
    Configuration for the advecting velocity.

    Parameters
    ----------
    profile : str
        ``'loglaw'`` (default) or ``'uniform'``.
    kappa_ratio : float
        Prefactor of the logarithm (0.2 / 0.41, a von Karman-like constant).
    y_floor : float
        Cross-stream coordinate at and below which the streamwise velocity is zero.
    ux_uniform : float
        Streamwise velocity used by the ``'uniform'`` profile.
    uy : float
        Constant cross-stream velocity.
    """

    profile: str = "loglaw"
    kappa_ratio: float = 0.2 / 0.41
    y_floor: float = 1.0
    ux_uniform: float = 1.0
    uy: float = 0.0


class LogLawVelocity:
    """Evaluate the streamwise/cross-stream velocity for a :class:`VelocityConfig`."""

    def __init__(self, config: VelocityConfig | None = None):
        self.config = config or VelocityConfig()
        if self.config.profile.lower() not in {"loglaw", "uniform"}:
            raise ValueError("profile must be 'loglaw' or 'uniform'")
        if self.config.y_floor <= 0.0:
            raise ValueError("y_floor must be positive")

    @property
    def cross_stream(self) -> float:
        return float(self.config.uy)

    def streamwise(self, y) -> np.ndarray:
        """
        Streamwise velocity at cross-stream coordinate(s) ``y``.

        Each entry depends only on its own coordinate, so the result can be
        evaluated for a whole column of cells at once.
        """
        y = np.asarray(y, dtype=np.float64)
        if self.config.profile.lower() == "uniform":
            return np.full_like(y, self.config.ux_uniform)

        ux = np.zeros_like(y)
        above = y > self.config.y_floor
        ux[above] = self.config.kappa_ratio * np.log(y[above] / self.config.y_floor)
        return ux

    def max_streamwise(self, y) -> float:
        """Largest streamwise speed attained over the coordinates ``y``."""
        ux = self.streamwise(y)
        if ux.size == 0:
            return 0.0
        return float(np.max(np.abs(ux)))

    def reference_streamwise(self, ymax: float) -> float:
        """
        Fixed estimate ``kappa_ratio * ln(ymax / y_floor)`` of the peak streamwise speed.

        This ignores the actual profile; it can understate the real maximum,
        e.g. for the uniform profile.
        """
        if not ymax > 0:
            raise ValueError("ymax must be positive for the reference velocity estimate")
        return abs(self.config.kappa_ratio * np.log(ymax / self.config.y_floor))


def streamwise_velocity(y, config: VelocityConfig | None = None) -> np.ndarray:
    """
    Convenience wrapper around :meth:`LogLawVelocity.streamwise`.
    """
    return LogLawVelocity(config).streamwise(y)


__all__ = ["VelocityConfig", "LogLawVelocity", "streamwise_velocity"]
