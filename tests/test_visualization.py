# tests/test_visualization.py
"""
Rendering smoke tests (Agg backend, nothing is shown).
"""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from kstep.visualization import cluster_colors, plot_engine, plot_snapshot  # noqa: E402


def test_cluster_colors_extend_past_defaults():
    assert cluster_colors(2) == ['green', 'blue']
    colors = cluster_colors(5)
    assert len(colors) == 5
    assert colors[:3] == ['green', 'blue', 'orange']


def test_plot_unassigned_state(square_engine):
    ax = plot_engine(square_engine)
    labels = [h.get_label() for h in ax.collections]
    assert labels == ['Unassigned', 'Centroids']
    assert any("Iteration: 1" == t.get_text() for t in ax.texts)
    plt.close(ax.figure)


def test_plot_after_step_on_given_axes(square_engine):
    square_engine.step()
    fig, ax = plt.subplots()
    out = plot_snapshot(square_engine.state, ax=ax, title="K-means", show_grid=False)

    assert out is ax
    assert [h.get_label() for h in ax.collections] == ['Cluster 1', 'Cluster 2', 'Centroids']
    assert ax.get_title() == "K-means"
    plt.close(fig)
