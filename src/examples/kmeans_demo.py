"""
Demo of the step-by-step K-means engine.

This example shows how to:
1. Load points and initial centroids from a data file
2. Drive the engine from a background thread, printing every iteration
3. Step back once after convergence and plot the final clustering

Run with a data file path, or without arguments to use a small built-in set.
"""

import argparse
import io

import matplotlib.pyplot as plt

# Add parent directory to path for imports
import sys
sys.path.append('..')

from kstep import ClusteringEngine, SteppingDriver, load_data, write_report
from kstep.visualization import plot_engine


SAMPLE_DATA = """\
9
-6 -5
-5 -6
-6 -6
0 1
1 0
1 1
6 5
5 6
6 6
3
-1 -1
0 0
1 1
"""


def parse_args():
    parser = argparse.ArgumentParser(description="Step through K-means iterations")
    parser.add_argument('data_file', nargs='?', help="Data file (built-in sample if omitted)")
    parser.add_argument('--delay-ms', type=float, default=200.0,
                        help="Delay between automatic steps")
    parser.add_argument('--max-iter', type=int, default=None,
                        help="Stop after this many steps even without convergence")
    parser.add_argument('--plot', default=None,
                        help="Save the final clustering to this image file")
    return parser.parse_args()


def main():
    """Run the demo."""
    args = parse_args()
    print("=== Step-by-step K-means Demo ===\n")

    source = args.data_file if args.data_file else io.StringIO(SAMPLE_DATA)
    data = load_data(source)
    print(f"Read {len(data.points)} points and {len(data.centroids)} centroids\n")

    engine = ClusteringEngine(verbose=1)
    engine.load(data.points, data.centroids)

    driver = SteppingDriver(engine,
                            delay_ms=args.delay_ms,
                            paused=False,
                            max_iter=args.max_iter,
                            on_update=write_report)
    driver.start()
    driver.join()

    print(f"\nFinished after {driver.n_steps_} steps, iteration {engine.iteration}")

    if driver.step_back():
        print("Stepped back one iteration:")
        write_report(engine)

    if args.plot:
        ax = plot_engine(engine, title="K-means")
        ax.figure.savefig(args.plot)
        plt.close(ax.figure)
        print(f"Saved plot to {args.plot}")


if __name__ == "__main__":
    main()
