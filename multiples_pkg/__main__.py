"""Main entry point for running multiples_pkg as a module.

This allows running the calculator with:
    python -m multiples_pkg input.txt output.txt
    python -m multiples_pkg --health-check
    python -m multiples_pkg --version

This is equivalent to running:
    python -m multiples_pkg.cli
    python multiples.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
