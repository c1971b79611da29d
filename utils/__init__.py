"""
Utility Functions

Provides the error types, text parsers, segment rasterization and
input reading used by the overlap detector.
"""

from .errors import (
    VentMapError,
    InputReadError,
    ParseError,
    PointParseError,
    SegmentParseError,
)
from .parsing import parse_point, parse_segment, format_point, format_segment
from .bresenham_utils import discretize_segment, segment_points
from .segment_io import iter_input_lines, read_input_lines

__all__ = [
    "VentMapError",
    "InputReadError",
    "ParseError",
    "PointParseError",
    "SegmentParseError",
    "parse_point",
    "parse_segment",
    "format_point",
    "format_segment",
    "discretize_segment",
    "segment_points",
    "iter_input_lines",
    "read_input_lines",
]
