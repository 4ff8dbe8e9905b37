#!/usr/bin/env python3
"""
Demo script running the seed point search on x = y.

Prints the seed samples along the scan line and the refined points, and
optionally saves a scatter plot of both.
"""

from py_pluma.config import settings
from py_pluma.core import BoundingRect, Equation, RefinementOptions
from py_pluma.logging_config import configure_logging


def plot_points(seeds, refined, bounds, filename):
    """Scatter seeds and refined points over the search region."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.add_patch(
        plt.Rectangle(
            (bounds.x, bounds.y), bounds.width, bounds.height,
            facecolor="lightblue", alpha=0.3,
        )
    )
    ax.scatter([p.x for p in seeds], [p.y for p in seeds], s=8, c="gray", label="Seeds")
    ax.scatter([p.x for p in refined], [p.y for p in refined], s=30, c="red", label="Refined")
    ax.plot([bounds.x, bounds.right], [bounds.x, bounds.right], "k--", linewidth=0.8, label="x = y")
    ax.set_xlim(bounds.x, bounds.right)
    ax.set_ylim(bounds.y, bounds.bottom)
    ax.set_aspect("equal")
    ax.legend()

    plt.tight_layout()
    plt.savefig(filename, dpi=150, bbox_inches="tight")
    print(f"Plot saved to {filename}")


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Find seed points of x = y on a vertical scan line")
    parser.add_argument("--x", type=float, default=0.0, help="Abscissa of the scan line")
    parser.add_argument("--plot", metavar="FILENAME", help="Save a scatter plot to FILENAME")
    args = parser.parse_args()

    configure_logging(settings.log_level, settings.log_format)

    equation = Equation(
        lambda x, y: x,
        lambda x, y: y,
        options=RefinementOptions.from_settings(settings),
    )
    bounds = BoundingRect.from_center_with_size(0, 0, 10, 8)

    print("Seed Point Search Demo")
    print("=" * 40)

    seeds = equation.seed_along_y_axis(args.x, bounds).get_points()
    print(f"\nSeed points ({len(seeds)}):")
    for point in seeds:
        print(f"  {point}")

    refined = equation.find_starting_points_along_y_axis(args.x, bounds)
    print(f"\nRefined points ({len(refined)}):")
    for point in refined:
        print(f"  {point}  squared distance={equation.squared_distance(point.x, point.y):.6f}")

    if args.plot:
        plot_points(seeds, refined, bounds, args.plot)


if __name__ == "__main__":
    main()
