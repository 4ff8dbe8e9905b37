"""
Seed point search for implicit equations of the form left(x, y) = right(x, y).

The curve is the zero set of the squared difference of the two sides.
Starting points for plotting are found by sampling a scan line, then
repeatedly stepping every sample against the finite-difference gradient of
that field and deduplicating the samples through a PointSet.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

import structlog

from .geometry import BoundingRect, Point
from .point_set import PointSet

logger = structlog.get_logger()

Expression2D = Callable[[float, float], float]


@dataclass
class RefinementOptions:
    """Numeric constants driving the seed-and-descend search."""

    delta: float = 0.001  # Finite-difference step
    resolution: int = 100  # Seed samples per scan line
    sub_resolution: int = 200  # Point set cells along the shorter side
    step_size: float = 0.05  # Distance moved per pass
    iterations: int = 100  # Fixed number of refinement passes

    def __post_init__(self):
        for name in ("delta", "resolution", "sub_resolution", "step_size", "iterations"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_settings(cls, settings) -> "RefinementOptions":
        """Build options from a ``py_pluma.config.Settings`` instance."""
        return cls(
            delta=settings.delta,
            resolution=settings.resolution,
            sub_resolution=settings.sub_resolution,
            step_size=settings.step_size,
            iterations=settings.iterations,
        )


class Equation:
    """An implicit equation between two scalar fields."""

    def __init__(
        self,
        left: Expression2D,
        right: Expression2D,
        options: Optional[RefinementOptions] = None,
    ):
        """
        Initialize the equation.

        Args:
            left: Left-hand side field
            right: Right-hand side field
            options: Refinement constants, defaults to RefinementOptions()
        """
        self.left = left
        self.right = right
        self.options = options or RefinementOptions()

    @property
    def delta(self) -> float:
        return self.options.delta

    def squared_distance(self, x: float, y: float) -> float:
        d = self.left(x, y) - self.right(x, y)
        return d * d

    def x_gradient(self, x: float, y: float) -> float:
        h1 = self.squared_distance(x, y)
        h2 = self.squared_distance(x + self.delta, y)
        return (h2 - h1) / self.delta

    def y_gradient(self, x: float, y: float) -> float:
        h1 = self.squared_distance(x, y)
        h2 = self.squared_distance(x, y + self.delta)
        return (h2 - h1) / self.delta

    def point_set_cell_size(self, bounds: BoundingRect) -> float:
        return min(bounds.width, bounds.height) / self.options.sub_resolution

    def seed_along_y_axis(self, x: float, bounds: BoundingRect) -> PointSet:
        """
        Sample `resolution` points down the vertical line through x.

        A sample landing in an already occupied cell is skipped, so each
        cell keeps the first sample that reached it.
        """
        points = PointSet(self.point_set_cell_size(bounds), bounds)
        step = bounds.height / self.options.resolution
        for i in range(self.options.resolution):
            self._seed(points, Point(x, bounds.y + i * step))
        return points

    def seed_along_x_axis(self, y: float, bounds: BoundingRect) -> PointSet:
        points = PointSet(self.point_set_cell_size(bounds), bounds)
        step = bounds.width / self.options.resolution
        for i in range(self.options.resolution):
            self._seed(points, Point(bounds.x + i * step, y))
        return points

    @staticmethod
    def _seed(points: PointSet, point: Point) -> None:
        if not points.has_point(point):
            points.add_point(point)

    def find_starting_points_along_y_axis(
        self, x: float, bounds: BoundingRect
    ) -> List[Point]:
        """
        Find approximate curve points on the vertical line through ``x``.

        Samples ``resolution`` points from the top of ``bounds`` downwards,
        then runs ``iterations`` passes moving each point by ``step_size``
        in y against the sign of the y-gradient. Points that leave
        ``bounds`` are dropped; points landing in the same cell collapse
        into one.

        Args:
            x: Abscissa of the scan line, must lie inside ``bounds``
            bounds: Search region

        Returns:
            Refined points in cell insertion order

        Raises:
            OutOfBoundsError: If the scan line lies outside ``bounds``
        """
        points = self.seed_along_y_axis(x, bounds)
        logger.info("Refining scan line", axis="y", x=x, seeds=points.size)
        self._descend(points, self.y_gradient, "y")
        logger.info("Scan line refined", axis="y", x=x, points=points.size)

        return points.get_points()

    def find_starting_points_along_x_axis(
        self, y: float, bounds: BoundingRect
    ) -> List[Point]:
        """Horizontal counterpart of find_starting_points_along_y_axis."""
        points = self.seed_along_x_axis(y, bounds)
        logger.info("Refining scan line", axis="x", y=y, seeds=points.size)
        self._descend(points, self.x_gradient, "x")
        logger.info("Scan line refined", axis="x", y=y, points=points.size)

        return points.get_points()

    def _descend(
        self,
        points: PointSet,
        gradient: Callable[[float, float], float],
        axis: str,
    ) -> None:
        step_size = self.options.step_size

        for iteration in range(self.options.iterations):
            current = points.get_points()

            for point in current:
                grad = gradient(point.x, point.y)
                if grad > 0:
                    setattr(point, axis, getattr(point, axis) - step_size)
                elif grad < 0:
                    setattr(point, axis, getattr(point, axis) + step_size)

            points.reconstruct_from_points_array(
                [p for p in current if not points.is_out_of_bounds(p)]
            )
            logger.debug(
                "Refinement pass", iteration=iteration, survivors=points.size
            )
