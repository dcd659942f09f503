import os
from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from ..envs.grid import Coord, Grid
from ..planners.distance_field import DistanceField


def _figsize(grid: Grid):
    H, W = grid.shape
    return max(3, W / 2), max(3, H / 2)


def _markers(grid: Grid, ax):
    # Start/finish markers
    for label, color, text in ((2, "lime", "S"), (3, "red", "E")):
        for r, c in np.argwhere(grid.labels == label):
            ax.plot(c, r, marker="*", markersize=12, markeredgecolor="k", markerfacecolor=color, lw=0)
            ax.text(c + 0.2, r - 0.2, text, color="k", fontsize=8)


def render_grid(grid: Grid, ax=None, title=None):
    """
    Render a Grid.

    Layers:
      - background (white), obstacles (dark gray)
      - start (green star), finish (red star)
    """
    if ax is None:
        _, ax = plt.subplots(figsize=_figsize(grid), dpi=120)

    H, W = grid.shape
    rgb = np.ones((H, W, 3), dtype=float)
    rgb[grid.blocked] = 0.2
    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])
    _markers(grid, ax)

    if title:
        ax.set_title(title, fontsize=10)
    return ax


def render_distance_field(grid: Grid, field: DistanceField, ax=None, title=None, annotate=True):
    """Heatmap of hop counts; blocked and unreached cells are left uncoloured."""
    if ax is None:
        _, ax = plt.subplots(figsize=_figsize(grid), dpi=120)

    H, W = grid.shape
    if field.empty:
        values = np.full((H, W), -1, dtype=np.int32)
    else:
        values = field.as_array()
    masked = np.ma.masked_where(values < 0, values)

    ax.imshow(np.where(grid.blocked[..., None], 0.2, 1.0) * np.ones((H, W, 3)),
              interpolation="nearest", origin="upper")
    ax.imshow(masked, cmap="viridis", interpolation="nearest", origin="upper", alpha=0.85)
    ax.set_xticks([]); ax.set_yticks([])

    if annotate:
        for r in range(H):
            for c in range(W):
                if grid.blocked[r, c]:
                    continue
                ax.text(c, r, str(int(values[r, c])), color="k", fontsize=7, ha="center", va="center")

    if title:
        ax.set_title(title, fontsize=10)
    return ax


def render_paths(grid: Grid, paths: Sequence[Sequence[Coord]], ax=None, title=None):
    """Grid with every path drawn as a polyline (row = y, col = x)."""
    ax = render_grid(grid, ax=ax, title=title)
    cmap = plt.get_cmap("tab10")
    n = max(1, len(paths))
    for i, path in enumerate(paths):
        if not path:
            continue
        rr, cc = zip(*path)
        # small offset so overlapping paths stay visible
        off = (i - (n - 1) / 2) * 0.08
        ax.plot(np.array(cc) + off, np.array(rr) + off, color=cmap(i % 10), lw=2, alpha=0.8)
    return ax


def save_report_figures(grid: Grid, field: DistanceField, paths: Sequence[Sequence[Coord]],
                        outdir: str, prefix: str = "maze") -> List[str]:
    """Write <prefix>_grid.png, <prefix>_steps.png and <prefix>_paths.png; return their paths."""
    os.makedirs(outdir, exist_ok=True)
    saved = []
    jobs = (
        ("grid", lambda ax: render_grid(grid, ax=ax, title="maze")),
        ("steps", lambda ax: render_distance_field(grid, field, ax=ax, title="step map")),
        ("paths", lambda ax: render_paths(grid, paths, ax=ax, title=f"{len(paths)} shortest paths")),
    )
    for name, draw in jobs:
        fig, ax = plt.subplots(figsize=_figsize(grid), dpi=120)
        draw(ax)
        out_path = os.path.join(outdir, f"{prefix}_{name}.png")
        fig.tight_layout()
        fig.savefig(out_path, bbox_inches="tight")
        plt.close(fig)
        saved.append(out_path)
    return saved
