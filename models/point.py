from dataclasses import dataclass
from enum import Enum


class PointOrdering(Enum):
    """Result of comparing two points under the endpoint partial order."""

    LESS = -1
    EQUAL = 0
    GREATER = 1
    INCOMPARABLE = None


@dataclass(frozen=True)
class Point:
    """
    An immutable grid coordinate.

    Points hash and compare equal by value. They deliberately have no
    total order; use compare_points() to order segment endpoints.
    """

    x: int
    y: int


def _cmp(a: int, b: int) -> PointOrdering:
    if a < b:
        return PointOrdering.LESS
    if a > b:
        return PointOrdering.GREATER
    return PointOrdering.EQUAL


def compare_points(a: Point, b: Point) -> PointOrdering:
    """
    Partial order on points:

        both axes agree          → that ordering
        y equal                  → ordering of x
        x equal                  → ordering of y
        axes disagree (e.g. a.x < b.x but a.y > b.y) → INCOMPARABLE
    """
    ord_x = _cmp(a.x, b.x)
    ord_y = _cmp(a.y, b.y)

    if ord_x == ord_y:
        return ord_x
    if ord_y is PointOrdering.EQUAL:
        return ord_x
    if ord_x is PointOrdering.EQUAL:
        return ord_y
    return PointOrdering.INCOMPARABLE
