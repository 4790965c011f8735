"""
Offline previews of pattern fields.

Samples a pattern tree over a virtual terminal grid and plots it, which
is handy for designing new shape/transform combinations without
watching them in a terminal:
- level heatmaps (the raw field)
- state maps (Clear / Draw / Keep per cell)
- a strip of states across several steps

All plots use matplotlib. Rows are drawn top to bottom like the terminal,
with a 2:1 cell aspect.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.colors import LinearSegmentedColormap, ListedColormap
from matplotlib.figure import Figure

from termsweep.core.vector import Vector
from termsweep.patterns.base import Config

if TYPE_CHECKING:
    from termsweep.patterns.base import PatternFactory


# Cell states as stored by classify_field
STATE_CLEAR = -1
STATE_DRAW = 0
STATE_KEEP = 1


def _create_level_cmap():
    """Dark (cleared) → teal (band) → warm white (kept)."""
    colors = [
        (0.05, 0.02, 0.02),
        (0.192, 0.407, 0.556),
        (0.127, 0.566, 0.550),
        (0.565, 0.820, 0.376),
        (0.993, 0.978, 0.925),
    ]
    return LinearSegmentedColormap.from_list("level", colors)


CMAP_LEVEL = _create_level_cmap()
CMAP_STATE = ListedColormap([(0.05, 0.02, 0.02), (0.127, 0.566, 0.550), (0.993, 0.978, 0.925)])


def sample_field(
    factory: "PatternFactory",
    width: int,
    height: int,
    step: float,
) -> np.ndarray:
    """
    Sample a pattern tree over a width x height terminal grid.

    Args:
        factory: Outermost factory of the pattern tree
        width, height: Grid size in cells
        step: Animation progress in [0, 1]

    Returns:
        Array of levels, shape [height, width]
    """
    config = Config(size=Vector.from_terminal(width, height), step=step)
    pattern = factory.create(config)

    levels = np.empty((height, width), dtype=np.float64)
    for y in range(height):
        for x in range(width):
            levels[y, x] = pattern.sample(Vector.from_terminal(x, y))
    return levels


def classify_field(levels: np.ndarray) -> np.ndarray:
    """Map levels to STATE_CLEAR / STATE_DRAW / STATE_KEEP like the glyph converter."""
    return np.select(
        [levels < 0.0, levels < 1.0],
        [STATE_CLEAR, STATE_DRAW],
        default=STATE_KEEP,
    ).astype(np.int8)


def plot_field(
    field: np.ndarray,
    title: str = "",
    cmap=None,
    vmin: float | None = None,
    vmax: float | None = None,
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (8, 4),
) -> tuple[Figure, Axes]:
    """
    Plot a grid as a heatmap.

    Args:
        field: 2D array [rows, columns]
        title: Plot title
        cmap: Colormap (CMAP_LEVEL if None)
        vmin, vmax: Color scale limits (auto if None)
        ax: Existing axes to plot on (creates new figure if None)
        colorbar: Whether to add a colorbar
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if cmap is None:
        cmap = CMAP_LEVEL

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    im = ax.imshow(
        field,
        origin="upper",
        cmap=cmap,
        vmin=vmin,
        vmax=vmax,
        aspect=2.0,  # Terminal cells are twice as tall as wide
        interpolation="nearest",
    )

    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_title(title)
    ax.set_xlabel("column")
    ax.set_ylabel("row")

    return fig, ax


def plot_level_field(
    factory: "PatternFactory",
    step: float,
    width: int = 80,
    height: int = 24,
    title: str | None = None,
    ax: Axes | None = None,
    **kwargs,
) -> tuple[Figure, Axes]:
    """Plot the raw levels of a pattern tree at one step."""
    levels = sample_field(factory, width, height, step)
    if title is None:
        title = f"Level at step {step:.2f}"
    return plot_field(levels, title=title, cmap=CMAP_LEVEL, ax=ax, **kwargs)


def plot_steps(
    factory: "PatternFactory",
    steps: Sequence[float] = (0.0, 0.25, 0.5, 0.75, 1.0),
    width: int = 80,
    height: int = 24,
    title: str = "",
    figsize: tuple[float, float] | None = None,
) -> Figure:
    """
    Plot cell states (Clear / Draw / Keep) for several steps side by side.

    Returns:
        Figure with one subplot per step
    """
    if figsize is None:
        figsize = (4 * len(steps), 3)
    fig, axes = plt.subplots(1, len(steps), figsize=figsize, squeeze=False)

    for ax, step in zip(axes[0], steps):
        states = classify_field(sample_field(factory, width, height, step))
        plot_field(
            states,
            title=f"step {step:.2f}",
            cmap=CMAP_STATE,
            vmin=STATE_CLEAR,
            vmax=STATE_KEEP,
            ax=ax,
            colorbar=False,
        )

    if title:
        fig.suptitle(title)
    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
