"""Geometric value types shared by the point set and the equation solver."""

from dataclasses import dataclass


@dataclass
class Point:
    """A mutable 2D point."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"<{self.x}, {self.y}>"


@dataclass(frozen=True)
class BoundingRect:
    """
    Axis-aligned rectangle stored as top-left corner plus size.

    Use the named constructors rather than the raw initializer so the
    anchoring is explicit at the call site.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"BoundingRect size must be positive, got {self.width}x{self.height}"
            )

    @classmethod
    def from_top_left_with_size(
        cls, x: float, y: float, w: float, h: float
    ) -> "BoundingRect":
        return cls(x, y, w, h)

    @classmethod
    def from_center_with_size(
        cls, x: float, y: float, w: float, h: float
    ) -> "BoundingRect":
        return cls(x - w / 2, y - h / 2, w, h)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)
