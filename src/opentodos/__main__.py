"""Module entry point for running with python -m opentodos."""

import sys

from opentodos.cli import main

if __name__ == "__main__":
    sys.exit(main())
