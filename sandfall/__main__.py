"""Entry point for `python -m sandfall`."""
import sys

from sandfall.cli import main

sys.exit(main())
