"""
Cell-centred rectangular grid with a one-cell halo on every side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class HaloGrid:
    """
    Uniform cell-centred grid over a rectangular domain.

    Parameters
    ----------
    Nx, Ny : int
        Number of interior cells along x and y.
    xmin, xmax, ymin, ymax : float
        Domain bounds. Only the extents enter the cell widths; cell centres are
        placed at ``(i - 0.5) * dx`` and ``(j - 0.5) * dy``.
    dtype : np.dtype
        Floating-point dtype for coordinate and field arrays.

    Arrays carry ``N + 2`` entries per axis: index 0 and ``N + 1`` are the halo
    cells holding boundary values, ``1..N`` are the interior cells.
    """

    Nx: int
    Ny: int
    xmin: float = 0.0
    xmax: float = 1.0
    ymin: float = 0.0
    ymax: float = 1.0
    dtype: np.dtype = np.float64

    def __post_init__(self) -> None:
        if self.Nx < 1 or self.Ny < 1:
            raise ValueError("Grid resolution Nx and Ny must be positive")
        if self.xmax <= self.xmin or self.ymax <= self.ymin:
            raise ValueError("Domain bounds must satisfy xmin < xmax and ymin < ymax")

        dx = (self.xmax - self.xmin) / self.Nx
        dy = (self.ymax - self.ymin) / self.Ny
        object.__setattr__(self, "dx", dx)
        object.__setattr__(self, "dy", dy)

        x = ((np.arange(self.Nx + 2) - 0.5) * dx).astype(self.dtype)
        y = ((np.arange(self.Ny + 2) - 0.5) * dy).astype(self.dtype)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

        # x-major, matching u[i, j]
        X, Y = np.meshgrid(x, y, indexing="ij")
        object.__setattr__(self, "X", X)
        object.__setattr__(self, "Y", Y)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.Nx + 2, self.Ny + 2)

    @property
    def interior(self) -> Tuple[slice, slice]:
        """Index pair selecting the interior cells ``[1..Nx] x [1..Ny]``."""
        return (slice(1, self.Nx + 1), slice(1, self.Ny + 1))

    def zeros(self) -> np.ndarray:
        """Return a zero array covering interior and halo cells."""
        return np.zeros(self.shape, dtype=self.dtype)


__all__ = ["HaloGrid"]
