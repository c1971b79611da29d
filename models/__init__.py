"""
Data Models

Defines the core data structures:
- Point (+ the endpoint partial order)
- Segment
- Orientation
"""

from .point import Point, PointOrdering, compare_points
from .segment import Segment, Orientation

__all__ = ["Point", "PointOrdering", "compare_points", "Segment", "Orientation"]
