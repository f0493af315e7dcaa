"""
Cluster visualization utilities.

Draws an engine state the way the interactive K-means view shows it: axes
through the origin with a light grid, points coloured by cluster (red while
unassigned), centroids as black triangles, and the iteration number.
"""

from typing import Optional, List
import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import UNASSIGNED, Snapshot

UNASSIGNED_COLOR = 'red'
DEFAULT_COLORS = ['green', 'blue', 'orange']


def cluster_colors(n_clusters: int, colors: Optional[List[str]] = None) -> List:
    """One color per cluster: the given list, then a colormap for the rest."""
    colors = list(colors if colors is not None else DEFAULT_COLORS)
    if n_clusters > len(colors):
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        extra = n_clusters - len(colors)
        colors.extend(cmap(i % cmap.N) for i in range(extra))
    return colors[:n_clusters]


def plot_snapshot(snapshot: Snapshot,
                  ax: Optional[plt.Axes] = None,
                  colors: Optional[List[str]] = None,
                  point_size: int = 50,
                  center_size: int = 200,
                  show_grid: bool = True,
                  show_iteration: bool = True,
                  title: Optional[str] = None) -> plt.Axes:
    """Plot one engine state.

    Args:
        snapshot: State to draw
        ax: Matplotlib axes (created if None)
        colors: Colors for clusters 0, 1, ...
        point_size: Size of data points
        center_size: Size of centroid markers
        show_grid: Draw axes through the origin and a grid
        show_iteration: Write the iteration number in the corner
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    points = snapshot.points.cpu().numpy()
    labels = snapshot.labels.cpu().numpy()
    centroids = snapshot.centroids.cpu().numpy()
    palette = cluster_colors(snapshot.n_clusters, colors)

    if show_grid:
        ax.axhline(0, color='black', linewidth=1.5, zorder=1)
        ax.axvline(0, color='black', linewidth=1.5, zorder=1)
        ax.grid(True, color='0.8', alpha=0.5, linewidth=0.5)

    unassigned = labels == UNASSIGNED
    if unassigned.any():
        ax.scatter(points[unassigned, 0], points[unassigned, 1],
                   c=UNASSIGNED_COLOR, s=point_size, label='Unassigned', zorder=5)

    for k in np.unique(labels[~unassigned]):
        mask = labels == k
        ax.scatter(points[mask, 0], points[mask, 1],
                   c=[palette[k]], s=point_size,
                   label=f'Cluster {k + 1}', zorder=5)

    ax.scatter(centroids[:, 0], centroids[:, 1],
               c='black', marker='^', s=center_size,
               label='Centroids', zorder=10)

    if show_iteration:
        ax.text(0.02, 0.97, f"Iteration: {snapshot.iteration}",
                transform=ax.transAxes, fontsize=14, va='top')

    if title:
        ax.set_title(title)

    return ax


def plot_engine(engine, ax: Optional[plt.Axes] = None, **kwargs) -> plt.Axes:
    """Plot the engine's current state; see `plot_snapshot` for options."""
    return plot_snapshot(engine.state, ax=ax, **kwargs)
