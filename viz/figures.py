import os
import numpy as np
import matplotlib.pyplot as plt

from envs.grid import Grid


def render_grid(grid: Grid, ax=None, path=None, title=None, show_labels=False):
    """
    Render a labeled Grid.

    Layers:
      - labels (viridis, lighter = farther), unlabeled cells white
      - barriers (dark gray)
      - path (lime line), source (green star), target (red star)
    """
    H, W = grid.shape

    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W/4), max(3, H/4)), dpi=120)

    # Base = white
    rgb = np.ones((H, W, 3), dtype=float)

    labels = grid.labels()
    max_label = int(labels.max())
    if max_label > 0:
        cmap = plt.get_cmap("viridis")
        colored = cmap(labels / max_label)[..., :3]
        mask = labels > 0
        rgb[mask] = colored[mask]
    rgb[grid.occupancy()] = 0.2

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if show_labels:
        for r, c in np.argwhere(labels > 0):
            ax.text(c, r, str(int(labels[r, c])), color="w", fontsize=6, ha="center", va="center")

    if path:
        rr, cc = zip(*path)
        ax.plot(cc, rr, color="lime", lw=2, alpha=0.8)
        ax.plot(path[0][1], path[0][0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
        ax.plot(path[-1][1], path[-1][0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)

    if title:
        ax.set_title(title, fontsize=10)

    return ax


def save_grid_figure(grid: Grid, out_path, path=None, title=None, show_labels=False):
    H, W = grid.shape
    fig, ax = plt.subplots(figsize=(max(3, W/4), max(3, H/4)), dpi=120)
    render_grid(grid, ax=ax, path=path, title=title, show_labels=show_labels)
    fig.tight_layout()
    out_dir = os.path.dirname(str(out_path))
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path
