"""
cli.py - Command line runner

Usage:
    python run.py [input] [--source-x 500] [--source-y 0] [--log-level INFO]
"""
import argparse
import logging
import sys
import time
from typing import List, Optional

from .field import build_field
from .geometry import MalformedPath, MalformedPoint
from .io_utils import find_input_path, load_polylines, print_scan_summary, read_scan
from .logging_config import setup_logging
from .simulation import BOUNDED, OPEN_FIELD, SandSimulator, SimulationConfig, SimulationResult
from .validate import check_field_growth, validate_scan

logger = logging.getLogger(__name__)


def solve(path: str, config: SimulationConfig) -> SimulationResult:
    """Build the rock field from `path` and run both boundary policies."""
    setup_start = time.time()
    lines = read_scan(path)
    polylines = load_polylines(lines)

    valid, msg = validate_scan(polylines, config.source)
    if not valid:
        logger.warning(f"Scan check: {msg}")

    rock = build_field(lines)
    print_scan_summary(polylines, n_cells=len(rock))
    print(f"Setup took {(time.time() - setup_start) * 1e6:.0f} µs")

    simulator = SandSimulator(rock, config)
    result = simulator.run_all()

    for name, count in ((OPEN_FIELD, result.open_field_count), (BOUNDED, result.bounded_count)):
        if not check_field_growth(simulator.rock, simulator.fields[name], count):
            logger.warning(f"{name} field does not match its grain count {count}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Falling sand simulator")
    parser.add_argument("input", nargs="?", default=None, help="Scan file (one rock path per line)")
    parser.add_argument("--source-x", type=int, default=500)
    parser.add_argument("--source-y", type=int, default=0)
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level), args.log_file)

    path = args.input or find_input_path()
    config = SimulationConfig.from_source(args.source_x, args.source_y)

    print("=" * 60)
    print("FALLING SAND SIMULATOR")
    print("=" * 60)
    print(f"Input: {path}")
    print(f"Source: {config.source.x},{config.source.y}")
    print()

    try:
        result = solve(path, config)
    except FileNotFoundError:
        print(f"✗ Input not found: {path}")
        return 1
    except (MalformedPoint, MalformedPath) as e:
        print(f"✗ Malformed scan: {e}")
        return 1
    except ValueError as e:
        print(f"✗ Invalid scan: {e}")
        return 1

    print(f"Open field run took {result.open_field_seconds * 1000:.1f} ms")
    print(f"Bounded run took {result.bounded_seconds * 1000:.1f} ms")
    print()
    print(f"Open field result: {result.open_field_count}")
    print(f"Bounded result: {result.bounded_count}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
