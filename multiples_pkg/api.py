"""Public API for the multiples calculator - returns structured objects without side effects."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .calculator import compute, multiples_for
from .logging_config import get_logger
from .parser import parse_record
from .pipeline import iter_records, run
from .types import MultiplesError, MultiplesResult, RunSummary


def multiples(a: int, b: int, end: int) -> MultiplesResult:
    """Compute the multiples of a or b in [1, end].

    Example:
        >>> from multiples_pkg.api import multiples
        >>> multiples(2, 3, 10).numbers
        [2, 3, 4, 6, 8, 9, 10]
    """
    return MultiplesResult(end=end, numbers=compute(a, b, end))


def compute_line(line: str) -> MultiplesResult:
    """Parse a single ``a b end`` line and compute its multiples.

    Example:
        >>> from multiples_pkg.api import compute_line
        >>> compute_line("5 5 20").format_line()
        '5 10 15 20'
    """
    return multiples_for(parse_record(line))


def compute_lines(lines: str | Iterable[str]) -> list[MultiplesResult]:
    """Compute results for several lines, in order.

    Args:
        lines: Either a block of text or an iterable of lines

    Returns:
        One MultiplesResult per record; trailing blank lines are ignored
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    return [multiples_for(record) for record in iter_records(lines)]


def validate_line(line: str) -> tuple[bool, str | None]:
    """Check whether a line would be accepted, without keeping the result.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from multiples_pkg.api import validate_line
        >>> validate_line("2 3 10")
        (True, None)
        >>> validate_line("0 3 10")[0]
        False
    """
    try:
        record = parse_record(line)
        # Divisor checks live in the calculator; a zero bound keeps this cheap
        compute(record.a, record.b, 0)
    except MultiplesError as e:
        get_logger("api").debug("Rejected line %r: %s", line, e)
        return False, str(e)
    return True, None


def process_file(
    input_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    line_format: str = "plain",
    sort_by_end: bool = False,
) -> RunSummary:
    """Run the file pipeline; see pipeline.run for the failure modes."""
    return run(input_path, output_path, line_format=line_format, sort_by_end=sort_by_end)
