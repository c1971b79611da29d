import sys

from detectors.overlap_detector import detect_overlaps_in_file, format_overlaps
from utils.errors import VentMapError

from config import get_active_params


def run(path):
    """
    Runs the complete pipeline for one input file:
      1. Stream and parse segments
      2. Discretize the axis-aligned ones
      3. Collect points covered more than once
      4. Print the overlapping set and its size
    """
    params = get_active_params()

    result = detect_overlaps_in_file(path)

    if params["PRINT_OVERLAP_POINTS"]:
        for row in format_overlaps(result.overlapping):
            print(row)
    print(result.count)

    return result


def main(path=None):
    """
    Main entry point. Returns the process exit status:
    0 after printing the results, 1 on any read or parse failure.
    """
    if path is None:
        path = get_active_params()["INPUT_FILE"]

    try:
        run(path)
    except VentMapError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
