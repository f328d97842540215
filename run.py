#!/usr/bin/env python3
"""
run.py - Falling sand simulator

Usage:
    python run.py [input] [--source-x 500] [--source-y 0] [--log-level INFO]

Reports:
    open field: grains at rest before sand flows into the abyss
    bounded:    grains at rest once the pile blocks the source
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sandfall.cli import main


if __name__ == "__main__":
    sys.exit(main())
