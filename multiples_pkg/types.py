"""Record and result dataclasses plus the error types raised by the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import BOUND_SEPARATOR


@dataclass(frozen=True)
class Record:
    """One parsed input line: find multiples of ``a`` or ``b`` up to ``end``."""

    a: int
    b: int
    end: int
    line_number: int | None = None


@dataclass
class MultiplesResult:
    """Ascending multiples of a record's divisors within [1, end]."""

    end: int
    numbers: list[int] = field(default_factory=list)

    def format_line(self, line_format: str = "plain") -> str:
        """Render the result as one output line (without the trailing newline).

        ``plain`` gives ``"2 3 4"``; ``bounded`` prefixes the bound, ``"4:2 3 4"``.
        """
        from .calculator import format_multiples

        body = format_multiples(self.numbers)
        if line_format == "bounded":
            return f"{self.end}{BOUND_SEPARATOR}{body}"
        if line_format == "plain":
            return body
        raise ValueError(f"Unknown line format: {line_format!r}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"end": self.end, "numbers": list(self.numbers)}

    def __repr__(self) -> str:
        """Return string representation of the result."""
        return f"MultiplesResult(end={self.end!r}, count={len(self.numbers)})"


@dataclass
class RunSummary:
    """Outcome of a successful pipeline run."""

    input_path: Path
    output_path: Path
    records: int = 0
    numbers: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "ok": True,
            "input": str(self.input_path),
            "output": str(self.output_path),
            "records": self.records,
            "numbers": self.numbers,
        }


class MultiplesError(Exception):
    """Base class for every failure reported by the calculator and pipeline."""

    default_code = "MULTIPLES_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"ok": False, "error": self.message, "code": self.code}


class PipelineIOError(MultiplesError):
    """Raised when the input or output file cannot be opened, read or written."""

    default_code = "IO_ERROR"

    def __init__(
        self, message: str, path: Path | str | None = None, code: str | None = None
    ):
        self.path = Path(path) if path is not None else None
        super().__init__(message, code)


class ParseError(MultiplesError):
    """Raised when an input line is not exactly three non-negative integers."""

    default_code = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ):
        self.line_number = line_number
        self.line = line
        super().__init__(message, code)


class InvalidInputError(MultiplesError):
    """Raised when a divisor is zero, negative or not an integer."""

    default_code = "INVALID_INPUT"

    def __init__(
        self, message: str, code: str | None = None, line_number: int | None = None
    ):
        self.line_number = line_number
        super().__init__(message, code)
