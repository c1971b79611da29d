from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.point import Point, PointOrdering, compare_points


class Orientation(Enum):
    """
    Axis a segment runs along, named as in the original puzzle solution:

        HORIZONTAL → both endpoints share x, y is stepped
        VERTICAL   → both endpoints share y, x is stepped

    The labels are inverted relative to screen geometry; the stepped axis
    is the part that matters and is kept as is.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Segment:
    """
    A line between two grid points.

    Endpoints are normalized on construction so that start <= end under
    compare_points(). Pairs that are not ordered that way (including
    incomparable ones) are swapped.
    """

    start: Point
    end: Point

    def __post_init__(self):
        if compare_points(self.start, self.end) not in (PointOrdering.LESS, PointOrdering.EQUAL):
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    # ------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------
    @property
    def orientation(self) -> Optional[Orientation]:
        """None for diagonal segments."""
        if self.start.x == self.end.x:
            return Orientation.HORIZONTAL
        if self.start.y == self.end.y:
            return Orientation.VERTICAL
        return None

    @property
    def is_diagonal(self) -> bool:
        return self.orientation is None

    @property
    def length(self) -> int:
        """Number of grid points covered, counting both ends."""
        return max(abs(self.end.x - self.start.x), abs(self.end.y - self.start.y)) + 1
