"""
Plain-text reports of the engine state.

Clusters and points are numbered from 1 for display; internally they stay
0-based. A point that has not been assigned yet shows ``-`` as its cluster.
"""

import sys
from typing import IO, List, Optional

from ..base.data_structures import UNASSIGNED, Snapshot


def _format_coord(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def format_snapshot(snapshot: Snapshot, precision: int = 3) -> str:
    """Render one engine state as a multi-line report.

    Args:
        snapshot: State to describe
        precision: Decimal places for coordinates

    Returns:
        Report text ending with a newline
    """
    lines: List[str] = [f"Iteration {snapshot.iteration}"]

    sizes = snapshot.cluster_sizes().tolist()
    for k, (x, y) in enumerate(snapshot.centroids.tolist()):
        lines.append(f"  Centroid {k + 1}: ({_format_coord(x, precision)}, "
                     f"{_format_coord(y, precision)}) members={sizes[k]}")

    for i, ((x, y), label) in enumerate(zip(snapshot.points.tolist(),
                                             snapshot.labels.tolist())):
        cluster = '-' if label == UNASSIGNED else str(label + 1)
        lines.append(f"  Point {i + 1}: ({_format_coord(x, precision)}, "
                     f"{_format_coord(y, precision)}) cluster={cluster}")

    return "\n".join(lines) + "\n"


def format_iteration(engine, precision: int = 3) -> str:
    """Report the engine's current iteration."""
    return format_snapshot(engine.state, precision=precision)


def write_report(engine, stream: Optional[IO[str]] = None, precision: int = 3) -> None:
    """Write the current iteration's report to a stream (stdout if None)."""
    stream = stream if stream is not None else sys.stdout
    stream.write(format_iteration(engine, precision=precision))
