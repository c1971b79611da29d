"""
Segment discretization on top of the pybresenham library.

This module provides:
    • discretize_segment(segment)
    • segment_points(segment)

Only axis-aligned segments are rasterized. For those, Bresenham's walk
is exact: every point from start to end, one unit apart.
"""

from typing import Iterator, Optional

import pybresenham as bres

from models.point import Point
from models.segment import Orientation, Segment


# -----------------------------------------------------------
#   Point sequence
# -----------------------------------------------------------

def segment_points(segment: Segment) -> Iterator[Point]:
    """
    Lazily yields the points of an axis-aligned segment, start first.

    HORIZONTAL segments step y, VERTICAL segments step x; a single-point
    segment yields that point once.
    """
    if segment.orientation is None:
        raise ValueError(f"Cannot rasterize diagonal segment {segment}")

    s, e = segment.start, segment.end
    for x, y in bres.line(s.x, s.y, e.x, e.y):
        yield Point(int(x), int(y))


def discretize_segment(segment: Segment) -> Optional[Iterator[Point]]:
    """
    Returns the lazy point sequence of a segment, or None when the segment
    is diagonal and must be skipped.
    """
    if segment.orientation not in (Orientation.HORIZONTAL, Orientation.VERTICAL):
        return None
    return segment_points(segment)
