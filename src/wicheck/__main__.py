# SPDX-License-Identifier: MIT
"""Package entry point: run the checker via `python -m wicheck`."""

import sys

from wicheck.cli import main

if __name__ == "__main__":
    sys.exit(main())
