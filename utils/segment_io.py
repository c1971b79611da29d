"""
Input utilities for the overlap counter.

This module provides:
    • iter_input_lines(lines)
    • read_input_lines(path)

Handles all filesystem interaction in one place. Lines are streamed one
at a time; the file is never read into a list.
"""

from typing import Iterable, Iterator

from utils.errors import InputReadError


# -------------------------------------------------------------------------
#  LINE CLEANUP
# -------------------------------------------------------------------------

def iter_input_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Strips the trailing line break from every raw line.

    Nothing else is stripped, so a blank line stays blank and is later
    rejected by the segment parser.
    """
    for raw in lines:
        yield raw.rstrip("\r\n")


# -------------------------------------------------------------------------
#  FILE READING
# -------------------------------------------------------------------------

def read_input_lines(path) -> Iterator[str]:
    """
    Streams the lines of a text file.

    Raises InputReadError if the file cannot be opened or read.

    Example:
        for line in read_input_lines('05.txt'): ...
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            yield from iter_input_lines(fh)
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise InputReadError(path, str(exc)) from exc
