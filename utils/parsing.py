"""
Text parsers for the vent list format.

This module provides:
    • parse_point("x,y")
    • parse_segment("x0,y0 -> x1,y1")
    • format_point(point) / format_segment(segment)

Separators come from config so the format lives in one place.
"""

import re

from models.point import Point
from models.segment import Segment
from utils.errors import PointParseError, SegmentParseError
from config import get_active_params


# Plain ASCII digits only: no sign, no spaces, no underscores
_UINT_RE = re.compile(r"[0-9]+")


def _parse_uint(component: str, token: str) -> int:
    if not _UINT_RE.fullmatch(component):
        raise PointParseError(f"Invalid coordinate {component!r}", token)
    return int(component)


# -------------------------------------------------------------------------
#  POINTS
# -------------------------------------------------------------------------

def parse_point(token: str) -> Point:
    """
    Parse a "<x>,<y>" token into a Point.

    Splits on the first separator only, so "1,2,3" fails on the y part.
    """
    sep = get_active_params()["POINT_SEPARATOR"]

    x, found, y = token.partition(sep)
    if not found:
        raise PointParseError("Failed to split point", token)

    return Point(_parse_uint(x, token), _parse_uint(y, token))


def format_point(point: Point) -> str:
    return f"{point.x}{get_active_params()['POINT_SEPARATOR']}{point.y}"


# -------------------------------------------------------------------------
#  SEGMENTS
# -------------------------------------------------------------------------

def parse_segment(line: str) -> Segment:
    """
    Parse "<x0>,<y0> -> <x1>,<y1>" into a normalized Segment.

    A bad endpoint is reported as a SegmentParseError chained to the
    PointParseError that caused it.
    """
    sep = get_active_params()["SEGMENT_SEPARATOR"]

    p0, found, p1 = line.partition(sep)
    if not found:
        raise SegmentParseError("Failed to split segment", line)

    try:
        start = parse_point(p0)
        end = parse_point(p1)
    except PointParseError as exc:
        raise SegmentParseError(f"Bad endpoint ({exc.message})", line) from exc

    return Segment(start, end)


def format_segment(segment: Segment) -> str:
    sep = get_active_params()["SEGMENT_SEPARATOR"]
    return f"{format_point(segment.start)}{sep}{format_point(segment.end)}"
