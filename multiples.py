#!/usr/bin/env python3
"""
Multiples - numbers divisible by either of two divisors

Main entry point for the multiples calculator. This file is a thin
wrapper that delegates all functionality to the multiples_pkg package.

Usage:
    python multiples.py input.txt output.txt     # Process a file
    python multiples.py --health-check           # Verify dependencies
    python multiples.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for the multiples calculator.

    Delegates to multiples_pkg.cli, which handles argument parsing,
    the file pipeline, and error reporting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from multiples_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        return 1
    except ImportError as e:
        print(f"Error: Failed to import multiples_pkg: {e}", file=sys.stderr)
        print("Please ensure all dependencies are installed: pip install -e .", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
