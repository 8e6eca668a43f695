"""Line-oriented file pipeline: read records, compute multiples, write results.

Each input line ``a b end`` produces exactly one output line, in input
order. Processing stops at the first bad line; lines already written stay
in the output file.

Blank lines: any blank lines at the end of the input are ignored. A blank
line that is followed by another record is rejected with BLANK_LINE.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import IO

from .calculator import multiples_for
from .config import DEFAULT_LINE_FORMAT, INPUT_ENCODING, LINE_FORMATS
from .logging_config import get_logger
from .parser import is_blank, parse_record
from .types import (
    InvalidInputError,
    MultiplesResult,
    ParseError,
    PipelineIOError,
    Record,
    RunSummary,
)

logger = get_logger("pipeline")


def _describe(error: OSError) -> str:
    return error.strerror or str(error)


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    """Parse lines into Records, numbering them from 1.

    Raises:
        ParseError: For a malformed line, or a blank line followed by a record
    """
    first_blank: int | None = None
    for line_number, line in enumerate(lines, start=1):
        if is_blank(line):
            if first_blank is None:
                first_blank = line_number
            continue
        if first_blank is not None:
            raise ParseError(
                f"Line {first_blank} is blank but more records follow at line {line_number}",
                code="BLANK_LINE",
                line_number=first_blank,
                line="",
            )
        yield parse_record(line, line_number)


def _read_lines(handle: IO[bytes], path: Path) -> Iterator[str]:
    # Decoded per line so a bad byte is reported on its own line
    line_number = 0
    try:
        for line_number, raw in enumerate(handle, start=1):
            try:
                line = raw.decode(INPUT_ENCODING)
            except UnicodeDecodeError as e:
                raise PipelineIOError(
                    f"Failed to read line {line_number} of {path}: "
                    f"not valid {INPUT_ENCODING} text",
                    path=path,
                    code="DECODE_ERROR",
                ) from e
            yield line
    except OSError as e:
        raise PipelineIOError(
            f"Failed to read line {line_number + 1} of {path}: {_describe(e)}", path=path
        ) from e


def _compute(record: Record) -> MultiplesResult:
    try:
        result = multiples_for(record)
    except InvalidInputError as e:
        raise InvalidInputError(
            f"Line {record.line_number}: {e.message}",
            code=e.code,
            line_number=record.line_number,
        ) from e
    logger.debug(
        "Line %s: a=%d b=%d end=%d -> %d numbers",
        record.line_number,
        record.a,
        record.b,
        record.end,
        len(result.numbers),
    )
    return result


def run(
    input_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    *,
    line_format: str = DEFAULT_LINE_FORMAT,
    sort_by_end: bool = False,
    echo: Callable[[str], object] | None = None,
) -> RunSummary:
    """Compute multiples for every record in input_path and write them to output_path.

    Args:
        input_path: Text file with one ``a b end`` record per line
        output_path: File to create or truncate; one result line per record
        line_format: "plain" (``2 3 4``) or "bounded" (``4:2 3 4``)
        sort_by_end: Order output lines by ascending bound instead of input order
        echo: Optional callable that also receives every output line

    Returns:
        RunSummary with the number of records and numbers written

    Raises:
        PipelineIOError: If a file cannot be opened, read or written
        ParseError: If a line is malformed
        InvalidInputError: If a record has a zero divisor
    """
    if line_format not in LINE_FORMATS:
        raise ValueError(f"Unknown line format: {line_format!r}")
    input_path = Path(input_path)
    output_path = Path(output_path)
    summary = RunSummary(input_path=input_path, output_path=output_path)
    logger.info("Reading records from %s", input_path)

    try:
        source = input_path.open("rb")
    except OSError as e:
        raise PipelineIOError(
            f"Failed to open input file {input_path}: {_describe(e)}", path=input_path
        ) from e

    with source:
        if output_path.exists() and output_path.samefile(input_path):
            raise PipelineIOError(
                f"Output file {output_path} is the input file; refusing to overwrite it",
                path=output_path,
                code="SAME_FILE",
            )
        try:
            sink = output_path.open("w", encoding=INPUT_ENCODING, newline="\n")
        except OSError as e:
            raise PipelineIOError(
                f"Failed to create output file {output_path}: {_describe(e)}",
                path=output_path,
            ) from e

        try:
            with sink:
                results: Iterable[MultiplesResult] = (
                    _compute(record)
                    for record in iter_records(_read_lines(source, input_path))
                )
                if sort_by_end:
                    results = sorted(results, key=lambda result: result.end)
                for index, result in enumerate(results, start=1):
                    line = result.format_line(line_format)
                    try:
                        sink.write(line + "\n")
                    except OSError as e:
                        raise PipelineIOError(
                            f"Failed to write result {index} to {output_path}: {_describe(e)}",
                            path=output_path,
                        ) from e
                    if echo is not None:
                        echo(line)
                    summary.records += 1
                    summary.numbers += len(result.numbers)
        except OSError as e:
            # flush/close on exit of the with-block
            raise PipelineIOError(
                f"Failed to flush output file {output_path}: {_describe(e)}",
                path=output_path,
            ) from e

    logger.info(
        "Wrote %d lines (%d numbers) to %s",
        summary.records,
        summary.numbers,
        output_path,
    )
    return summary
