"""
Overlap detection over a stream of vent segments.

This module provides:
    • detect_overlaps(lines)
    • detect_overlaps_in_file(path)
    • count_overlaps(lines)
    • format_overlaps(points)
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Set

from models.point import Point
from utils.bresenham_utils import discretize_segment
from utils.errors import ParseError
from utils.parsing import format_segment, parse_segment
from utils.segment_io import iter_input_lines, read_input_lines
from config import get_active_params


@dataclass
class OverlapResult:
    """
    Accumulators for one run over the input.

    visited     : every point covered by at least one segment
    overlapping : every point covered by at least two segments

    Both sets only ever grow.
    """

    visited: Set[Point] = field(default_factory=set)
    overlapping: Set[Point] = field(default_factory=set)
    segments_read: int = 0
    segments_skipped: int = 0

    @property
    def count(self) -> int:
        return len(self.overlapping)

    def add_point(self, point: Point):
        if point in self.visited:
            self.overlapping.add(point)
        self.visited.add(point)


# ========================================================================
# 1. DRIVER
# ========================================================================

def detect_overlaps(lines: Iterable[str]) -> OverlapResult:
    """
    Runs the whole pipeline over raw input lines, in order:
      1. Parse the line into a normalized Segment (any failure aborts)
      2. Skip diagonal segments
      3. Fold every discretized point into the accumulators

    Parameters
    ----------
    lines : Iterable[str]
        Raw lines; a trailing line break on each is ignored.

    Returns
    -------
    OverlapResult
    """
    verbose = get_active_params()["VERBOSE"]
    result = OverlapResult()

    for line_number, line in enumerate(iter_input_lines(lines), start=1):
        try:
            segment = parse_segment(line)
        except ParseError as exc:
            exc.at_line(line_number)
            raise

        result.segments_read += 1

        points = discretize_segment(segment)
        if points is None:
            result.segments_skipped += 1
            if verbose:
                print(f"[SKIP] Diagonal segment on line {line_number}: {format_segment(segment)}")
            continue

        for point in points:
            result.add_point(point)

    if verbose:
        print(
            f"[OK] Read {result.segments_read} segments "
            f"({result.segments_skipped} diagonal skipped), "
            f"{result.count} overlapping points"
        )

    return result


def detect_overlaps_in_file(path) -> OverlapResult:
    """Streams the file at `path` through detect_overlaps()."""
    return detect_overlaps(read_input_lines(path))


def count_overlaps(lines: Iterable[str]) -> int:
    return detect_overlaps(lines).count


# ========================================================================
# 2. OUTPUT FORMATTING
# ========================================================================

def format_overlaps(points: Iterable[Point]) -> List[str]:
    """
    Debug listing of a point set, one point per line, sorted by (x, y)
    so repeated runs print identically:

        {
            Point(x=0, y=9),
            ...
        }
    """
    ordered = sorted(points, key=lambda p: (p.x, p.y))
    if not ordered:
        return ["{}"]
    return ["{"] + [f"    {p!r}," for p in ordered] + ["}"]
