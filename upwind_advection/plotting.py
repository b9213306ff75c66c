"""
Quick-look plots of the advected scalar.
"""

from __future__ import annotations

from typing import Optional

import cmasher as cmr
import matplotlib.pyplot as plt
import numpy as np

from .grid import HaloGrid
from .output import vertical_average


def plot_field(
    grid: HaloGrid,
    u: np.ndarray,
    *,
    fname: str | None = None,
    title: str | None = None,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """
    Colour map of ``u`` over the physical domain (halo included).

    Parameters
    ----------
    grid : HaloGrid
        Grid the field lives on.
    u : np.ndarray
        Field of shape ``grid.shape``, indexed ``u[i, j]``.
    fname : str, optional
        Save path for figure.
    title : str, optional
        Plot title.
    ax : matplotlib.axes.Axes, optional
        Existing axes to draw on.

    Returns
    -------
    matplotlib.axes.Axes
        Axes containing the plot.
    """
    created = ax is None
    if created:
        fig, ax = plt.subplots(figsize=(6.2, 6.2), dpi=150, constrained_layout=True)
    else:
        fig = ax.figure

    extent = (grid.x[0], grid.x[-1], grid.y[0], grid.y[-1])
    # imshow wants rows along y
    im = ax.imshow(
        np.asarray(u).T,
        cmap=cmr.rainforest,
        origin="lower",
        extent=extent,
        aspect="auto",
    )
    ax.set_xlabel(r"$x$")
    ax.set_ylabel(r"$y$")
    if title:
        ax.set_title(title)
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label=r"$u$")

    if fname:
        fig.savefig(fname, bbox_inches="tight")
    if created and fname:
        plt.close(fig)
    return ax


def plot_vertical_average(
    grid: HaloGrid,
    u_initial: np.ndarray,
    u_final: Optional[np.ndarray] = None,
    *,
    fname: str | None = None,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """
    Plot the y-averaged profile of the initial (and optionally final) field.
    """
    created = ax is None
    if created:
        fig, ax = plt.subplots(figsize=(7, 4), dpi=150, constrained_layout=True)
    else:
        fig = ax.figure

    avg0 = vertical_average(grid, u_initial)
    ax.plot(avg0[:, 0], avg0[:, 1], "k--", lw=1.2, label="initial")
    if u_final is not None:
        avg1 = vertical_average(grid, u_final)
        ax.plot(avg1[:, 0], avg1[:, 1], color="C0", lw=1.6, label="final")
    ax.set_xlabel(r"$x$")
    ax.set_ylabel(r"$\langle u \rangle_y$")
    ax.grid(True, alpha=0.3)
    ax.legend(frameon=False)

    if fname:
        fig.savefig(fname, bbox_inches="tight")
    if created and fname:
        plt.close(fig)
    return ax


__all__ = ["plot_field", "plot_vertical_average"]
