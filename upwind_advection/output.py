"""
Snapshot and reduction queries plus the text/JSON writers built on them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np

from .grid import HaloGrid

PathLike = Union[str, Path]


def _check_shape(grid: HaloGrid, u: np.ndarray) -> np.ndarray:
    u = np.asarray(u)
    if u.shape != grid.shape:
        raise ValueError(f"Field shape {u.shape} does not match grid shape {grid.shape}")
    return u


def snapshot_triples(grid: HaloGrid, u: np.ndarray) -> np.ndarray:
    """
    Return an ``((Nx+2)*(Ny+2), 3)`` array of ``(x, y, u)`` rows.

    Rows are ordered x-major: all y indices for ``i = 0`` first, then ``i = 1``,
    and so on. Halo cells are included.
    """
    u = _check_shape(grid, u)
    return np.column_stack((grid.X.ravel(), grid.Y.ravel(), u.ravel()))


def vertical_average(grid: HaloGrid, u: np.ndarray) -> np.ndarray:
    """
    Return an ``(Nx+2, 2)`` array of ``(x, mean over y of u)`` rows.

    The mean runs over every y index, halo cells included.
    """
    u = _check_shape(grid, u)
    return np.column_stack((grid.x, u.mean(axis=1)))


def write_snapshot(path: PathLike, grid: HaloGrid, u: np.ndarray) -> Path:
    """Write ``x y u`` lines, one per grid point."""
    path = Path(path)
    np.savetxt(path, snapshot_triples(grid, u), fmt="%g")
    return path


def write_average(path: PathLike, grid: HaloGrid, u: np.ndarray) -> Path:
    """Write ``x mean`` lines, one per x index."""
    path = Path(path)
    np.savetxt(path, vertical_average(grid, u), fmt="%g")
    return path


def save_json(path: PathLike, payload: Dict[str, Any]) -> Path:
    path = Path(path)
    path.write_text(json.dumps(payload, indent=2, sort_keys=True))
    return path


__all__ = [
    "snapshot_triples",
    "vertical_average",
    "write_snapshot",
    "write_average",
    "save_json",
]
