"""
Configuration file for the vent overlap counter.

Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_FILE = "05.txt"


# ---------------------------------------------------------------
# INPUT FORMAT
# ---------------------------------------------------------------

POINT_SEPARATOR = ","              # "x,y"
SEGMENT_SEPARATOR = " -> "         # "x0,y0 -> x1,y1"


# ---------------------------------------------------------------
# REPORTING
# ---------------------------------------------------------------

# Print [OK] / [SKIP] progress tags while reading segments
VERBOSE = False

# Print the overlapping point set before the final count
PRINT_OVERLAP_POINTS = True


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as a single dictionary,
    so parsers and detectors only import one thing.
    """
    return {
        "INPUT_FILE": INPUT_FILE,
        "POINT_SEPARATOR": POINT_SEPARATOR,
        "SEGMENT_SEPARATOR": SEGMENT_SEPARATOR,
        "VERBOSE": VERBOSE,
        "PRINT_OVERLAP_POINTS": PRINT_OVERLAP_POINTS,
    }
