"""Multiples of two divisors up to a bound.

The core rule: n in [1, end] is kept when ``n % a == 0 or n % b == 0``.
Candidates are checked with numpy in fixed-size batches so that large
bounds don't need one huge temporary array.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable

import numpy as np
import sympy as sp

from . import config
from .types import InvalidInputError, MultiplesResult, Record


def _require_integer(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInputError(
            f"'{name}' must be an integer, got {value!r}", code="NOT_AN_INTEGER"
        )
    return int(value)


def _require_divisor(name: str, value: object) -> int:
    divisor = _require_integer(name, value)
    if divisor < 1:
        raise InvalidInputError(
            f"Divisor '{name}' must be at least 1, got {divisor} "
            "(divisibility by zero is undefined)"
        )
    return divisor


def is_multiple_of_either(n: int, a: int, b: int) -> bool:
    """Return True if n is divisible by a or by b."""
    return n % a == 0 or n % b == 0


def compute(a: int, b: int, end: int) -> list[int]:
    """Return the ascending integers in [1, end] divisible by a or b.

    Args:
        a: First divisor, at least 1
        b: Second divisor, at least 1
        end: Inclusive upper bound; values below 1 give an empty list

    Returns:
        Strictly ascending list without duplicates

    Raises:
        InvalidInputError: If a or b is zero, negative or not an integer

    Example:
        >>> compute(2, 3, 10)
        [2, 3, 4, 6, 8, 9, 10]
    """
    a = _require_divisor("a", a)
    b = _require_divisor("b", b)
    end = _require_integer("end", end)
    if end < 1:
        return []

    # A divisor above the bound has no multiple in range
    divisors = sorted({d for d in (a, b) if d <= end})
    if not divisors:
        return []
    if divisors[0] == 1:
        return list(range(1, end + 1))

    chunk = config.RANGE_CHUNK_SIZE
    result: list[int] = []
    for start in range(1, end + 1, chunk):
        values = np.arange(start, min(start + chunk, end + 1), dtype=np.int64)
        mask = np.zeros(values.shape, dtype=bool)
        for divisor in divisors:
            mask |= values % divisor == 0
        result.extend(values[mask].tolist())
    return result


def count_multiples(a: int, b: int, end: int) -> int:
    """Count the integers in [1, end] divisible by a or b, without listing them.

    Inclusion-exclusion: multiples of a, plus multiples of b, minus the
    multiples of lcm(a, b) counted twice.
    """
    a = _require_divisor("a", a)
    b = _require_divisor("b", b)
    end = _require_integer("end", end)
    if end < 1:
        return 0
    lcm = int(sp.ilcm(a, b))
    return end // a + end // b - end // lcm


def format_multiples(values: Iterable[int], delimiter: str = config.OUTPUT_DELIMITER) -> str:
    """Join numbers into one output line; an empty sequence gives ''."""
    return delimiter.join(str(value) for value in values)


def multiples_for(record: Record) -> MultiplesResult:
    """Apply compute() to a parsed record."""
    return MultiplesResult(end=record.end, numbers=compute(record.a, record.b, record.end))
