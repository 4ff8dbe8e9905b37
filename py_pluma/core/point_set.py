"""
Bounded spatial grid holding at most one representative point per cell.

The grid is an approximate spatial hash used to deduplicate points that
drift into the same place while the equation solver refines them. Storage
is a set of parallel flat arrays indexed by row-major cell id, allocated
once and reused across clear/reconstruct cycles.
"""

import math
from typing import Iterable, List

import numpy as np
import structlog

from .geometry import BoundingRect, Point

logger = structlog.get_logger()


class OutOfBoundsError(IndexError):
    """Raised when a point maps to a cell outside the grid."""

    def __init__(self, point: Point):
        super().__init__(f"Point {point} out of bounds")
        self.point = point


class PointSet:
    """
    Fixed-size cell grid over a bounding rectangle.

    Attributes:
        bounds: Region covered by the grid
        cell_size: Side length of a square cell
        resolution_x: Number of cell columns
        resolution_y: Number of cell rows
        size: Number of occupied cells
    """

    def __init__(self, cell_size: float, bounds: BoundingRect):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")

        self.bounds = bounds
        self.cell_size = cell_size

        self.resolution_x = math.ceil(bounds.width / cell_size)
        self.resolution_y = math.ceil(bounds.height / cell_size)
        self._array_size = self.resolution_x * self.resolution_y

        self._set_cells = np.zeros(self._array_size, dtype=np.uint8)
        self._coord_x = np.zeros(self._array_size, dtype=np.float64)
        self._coord_y = np.zeros(self._array_size, dtype=np.float64)
        self._set_cells_idx: List[int] = []

        self.size = 0

        logger.debug(
            "Point set allocated",
            resolution_x=self.resolution_x,
            resolution_y=self.resolution_y,
            cell_size=cell_size,
        )

    def __len__(self) -> int:
        return self.size

    def __contains__(self, point: Point) -> bool:
        if self.is_out_of_bounds(point):
            return False
        return self.has_point(point)

    def has_point(self, point: Point) -> bool:
        idx = self.point_to_cell_idx(point)
        return bool(self._set_cells[idx])

    def add_point(self, point: Point, wrt_equation=None) -> None:
        """
        Store a point in its cell.

        An empty cell is always filled. For an occupied cell the new point
        replaces the stored one unless ``wrt_equation`` is given, in which
        case it only replaces it when its squared distance is not greater.

        Args:
            point: Point to insert
            wrt_equation: Optional object exposing ``squared_distance(x, y)``
                used to arbitrate cell collisions

        Raises:
            OutOfBoundsError: If the point lies outside the grid
        """
        idx = self.point_to_cell_idx(point)

        if not self._set_cells[idx]:
            self._set_cells[idx] = 1
            self._set_cells_idx.append(idx)
            self.size += 1
        elif wrt_equation is not None:
            old_dist = wrt_equation.squared_distance(
                float(self._coord_x[idx]), float(self._coord_y[idx])
            )
            new_dist = wrt_equation.squared_distance(point.x, point.y)
            if new_dist > old_dist:
                return

        self._coord_x[idx] = point.x
        self._coord_y[idx] = point.y

    def point_to_cell_coord(self, point: Point) -> Point:
        """Column/row of the cell containing ``point``, unchecked."""
        return Point(
            math.floor((point.x - self.bounds.x) / self.cell_size),
            math.floor((point.y - self.bounds.y) / self.cell_size),
        )

    def _cell_in_range(self, column: int, row: int) -> bool:
        return 0 <= column < self.resolution_x and 0 <= row < self.resolution_y

    def _in_bounds(self, point: Point, cell: Point) -> bool:
        # The last row and column of cells can reach past the rectangle
        return (
            self._cell_in_range(cell.x, cell.y)
            and point.x <= self.bounds.right
            and point.y <= self.bounds.bottom
        )

    def point_to_cell_idx(self, point: Point) -> int:
        cell = self.point_to_cell_coord(point)
        if not self._in_bounds(point, cell):
            raise OutOfBoundsError(point)
        return cell.y * self.resolution_x + cell.x

    def is_out_of_bounds(self, point: Point) -> bool:
        return not self._in_bounds(point, self.point_to_cell_coord(point))

    def get_points(self) -> List[Point]:
        """Occupied cells' points in the order the cells were first filled."""
        return [
            Point(float(self._coord_x[idx]), float(self._coord_y[idx]))
            for idx in self._set_cells_idx
        ]

    def clear(self) -> None:
        # Only touch occupied cells so the cost follows occupancy
        if self._set_cells_idx:
            occupied = np.array(self._set_cells_idx, dtype=np.intp)
            self._set_cells[occupied] = 0
            self._coord_x[occupied] = 0.0
            self._coord_y[occupied] = 0.0
        self.size = 0
        self._set_cells_idx = []

    def reconstruct_from_points_array(self, points: Iterable[Point]) -> None:
        """Refill the grid from ``points``; later points win cell collisions."""
        self.clear()
        for point in points:
            self.add_point(point)
