"""
Error types raised while reading and parsing vent segments.

Every error is fatal for a run: library code raises, and only main.py
catches, reports, and turns the failure into an exit status.
"""

from typing import Optional


class VentMapError(Exception):
    """Base class for all errors raised by this project."""


class InputReadError(VentMapError):
    """The input source could not be opened or read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read input '{path}': {reason}")


class ParseError(VentMapError, ValueError):
    """
    Raised when raw text is not a valid point or segment.

    `text` holds the offending raw text; `line_number` (1-based) is
    attached by the overlap detector when the text came from an input line.
    """

    kind = "input"

    def __init__(self, message: str, text: str, line_number: Optional[int] = None):
        self.message = message
        self.text = text
        self.line_number = line_number
        super().__init__(message)

    def at_line(self, line_number: int) -> "ParseError":
        self.line_number = line_number
        return self

    def __str__(self):
        location = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{location}{self.message}: {self.text!r}"


class PointParseError(ParseError):
    kind = "point"


class SegmentParseError(ParseError):
    kind = "segment"
