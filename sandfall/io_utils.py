"""
io_utils.py - Scan input and result reporting

Scan format, one rock path per line:
    498,4 -> 498,6 -> 496,6
    503,4 -> 502,4 -> 502,9 -> 494,9
"""
import logging
import os
from typing import List, Optional

from .geometry import Polyline, parse_polyline, scan_bounds

logger = logging.getLogger(__name__)


def find_input_path() -> str:
    """Find the scan file."""
    candidates = [
        "./input/day14.txt",
        "./data/scan.txt",
        "./scan.txt",
    ]
    for path in candidates:
        if os.path.isfile(path):
            return path
    return "scan.txt"


def read_scan(path: str) -> List[str]:
    """Read the non-blank lines of a scan file."""
    logger.info(f"Reading scan: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f if line.strip()]


def load_polylines(lines: List[str]) -> List[Polyline]:
    return [parse_polyline(line) for line in lines if line.strip()]


def print_scan_summary(polylines: List[Polyline], n_cells: Optional[int] = None):
    """Print scan summary."""
    min_x, min_y, max_x, max_y = scan_bounds(polylines)
    print(f"Rock paths: {len(polylines)}")
    if n_cells is not None:
        print(f"Rock cells: {n_cells}")
    print(f"Rock extent: x {min_x}..{max_x}, y {min_y}..{max_y}")
