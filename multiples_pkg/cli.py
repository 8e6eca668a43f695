from __future__ import annotations

import argparse
import json
import sys

from .config import DEFAULT_LINE_FORMAT, DEFAULT_LOG_LEVEL, LINE_FORMATS, LOG_LEVELS, VERSION
from .logging_config import get_logger, setup_logging
from .pipeline import run
from .types import MultiplesError

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running multiples health check...")
    print("-" * 50)

    try:
        import numpy as np

        print(f"[OK] NumPy {np.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        from .api import compute_line

        line = compute_line("2 3 10").format_line()
        if line == "2 3 4 6 8 9 10":
            print("[OK] Basic computation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Basic computation: expected '2 3 4 6 8 9 10', got {line!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Computation check failed: {e}")
        checks_failed += 1

    try:
        from .calculator import compute, count_multiples

        mismatches = [
            (a, b, end)
            for a, b, end in [(2, 3, 1000), (4, 6, 999), (7, 7, 100), (13, 1, 50)]
            if len(compute(a, b, end)) != count_multiples(a, b, end)
        ]
        if not mismatches:
            print("[OK] Listing agrees with inclusion-exclusion count")
            checks_passed += 1
        else:
            print(f"[FAIL] Count mismatch for {mismatches}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Count check failed: {e}")
        checks_failed += 1

    try:
        from .api import validate_line

        ok, _ = validate_line("0 3 10")
        if not ok:
            print("[OK] Zero divisor is rejected")
            checks_passed += 1
        else:
            print("[FAIL] Zero divisor was accepted")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Validation check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Health check: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multiples",
        description="List the numbers in [1, end] divisible by a or b, "
        "for each 'a b end' line of the input file.",
    )
    parser.add_argument("input", nargs="?", help="Input file with one 'a b end' record per line")
    parser.add_argument("output", nargs="?", help="Output file (created or truncated)")
    parser.add_argument(
        "--line-format",
        type=str,
        choices=list(LINE_FORMATS),
        default=DEFAULT_LINE_FORMAT,
        help="Output line layout: plain ('2 3 4') or bounded ('4:2 3 4')",
    )
    parser.add_argument(
        "--sort-by-end",
        action="store_true",
        help="Order output lines by ascending bound instead of input order",
    )
    parser.add_argument(
        "--echo", action="store_true", help="Also print every output line to stdout"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Summary format: json (machine-readable) or human (silent on success)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=list(LOG_LEVELS),
        default=DEFAULT_LOG_LEVEL,
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    return parser


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the multiples CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for errors; usage errors exit with 2)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.echo and args.format == "json":
        parser.error("--echo cannot be combined with --format json")

    try:
        setup_logging(level=args.log_level, log_file=args.log_file)
    except OSError as e:
        print(f"Error: Failed to open log file {args.log_file}: {e.strerror or e}", file=sys.stderr)
        return 1

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.input is None or args.output is None:
        parser.error("the following arguments are required: input, output")

    try:
        summary = run(
            args.input,
            args.output,
            line_format=args.line_format,
            sort_by_end=args.sort_by_end,
            echo=print if args.echo else None,
        )
    except MultiplesError as e:
        logger.debug("Run failed with %s", e.code, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        if args.format == "json":
            print(json.dumps(e.to_dict()))
        return 1

    if args.format == "json":
        print(json.dumps(summary.to_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
