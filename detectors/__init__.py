"""
Detectors Package

Contains the overlap detector that drives the pipeline:
parse → discretize → accumulate → report.
"""

from .overlap_detector import (
    OverlapResult,
    detect_overlaps,
    detect_overlaps_in_file,
    count_overlaps,
    format_overlaps,
)

__all__ = [
    "OverlapResult",
    "detect_overlaps",
    "detect_overlaps_in_file",
    "count_overlaps",
    "format_overlaps",
]
