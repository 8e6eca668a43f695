"""Input line parsing and validation.

This module handles:
- Splitting a line into whitespace-separated fields
- Validating each field as a bounded, non-negative decimal integer
- Building a Record with the originating line number for error reporting
"""

from __future__ import annotations

from .config import (
    FIELD_NAMES,
    FIELDS_PER_RECORD,
    INTEGER_TOKEN_RE,
    MAX_FIELD_VALUE,
)
from .types import ParseError, Record


def _location(line_number: int | None) -> str:
    return f"Line {line_number}: " if line_number is not None else ""


def is_blank(line: str) -> bool:
    """Return True if the line holds nothing but whitespace."""
    return not line.strip()


def parse_field(
    token: str, name: str, line: str, line_number: int | None = None
) -> int:
    """Convert a single token to an integer in [0, MAX_FIELD_VALUE].

    Raises:
        ParseError: NOT_AN_INTEGER for anything but ASCII digits,
                    OUT_OF_RANGE for values above MAX_FIELD_VALUE
    """
    if not INTEGER_TOKEN_RE.match(token):
        raise ParseError(
            f"{_location(line_number)}field '{name}' is not a non-negative integer: "
            f"{token!r} (line: {line!r})",
            code="NOT_AN_INTEGER",
            line_number=line_number,
            line=line,
        )
    value = int(token)
    if value > MAX_FIELD_VALUE:
        raise ParseError(
            f"{_location(line_number)}field '{name}' exceeds {MAX_FIELD_VALUE}: "
            f"{token} (line: {line!r})",
            code="OUT_OF_RANGE",
            line_number=line_number,
            line=line,
        )
    return value


def parse_record(line: str, line_number: int | None = None) -> Record:
    """Parse ``"a b end"`` into a Record.

    Fields may be separated by any run of whitespace. Divisor validity
    (a, b >= 1) is left to the calculator; this only checks the shape.

    Args:
        line: Raw input line, with or without its newline
        line_number: 1-based position in the input, used in error messages

    Returns:
        Record carrying the three values and the line number

    Raises:
        ParseError: If the line does not hold exactly three valid integers
    """
    line = line.rstrip("\r\n")
    tokens = line.split()
    if len(tokens) != FIELDS_PER_RECORD:
        raise ParseError(
            f"{_location(line_number)}expected exactly {FIELDS_PER_RECORD} numbers, "
            f"found {len(tokens)}: {line!r}",
            code="FIELD_COUNT",
            line_number=line_number,
            line=line,
        )
    a, b, end = (
        parse_field(token, name, line, line_number)
        for token, name in zip(tokens, FIELD_NAMES)
    )
    return Record(a=a, b=b, end=end, line_number=line_number)
