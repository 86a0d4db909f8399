"""
Line-level orchestration: parse, solve, decode and sum.

Lines are independent, so a list of lines can be spread across worker
processes and the per-line values reduced by summation.
"""

import multiprocessing as mp
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from .classifier import Reading, is_unique_count
from .decoder import decode_digits, digits_to_value
from .errors import LineFormatError, SegmentDecodeError
from .segments import SegmentSet, parse_patterns
from .solver import Mapping, MappingSolver
from .verify import print_line_result

SEPARATOR = " | "


@dataclass(frozen=True)
class ParsedLine:
    """One input line split into its reading and its output patterns."""

    reading: Reading
    outputs: tuple[SegmentSet, ...]


@dataclass(frozen=True)
class LineResult:
    """Decoded output of one input line."""

    line_number: int
    digits: tuple[int, ...]
    value: int
    mapping: Mapping


def parse_line(line: str) -> ParsedLine:
    """
    Split a line into ten reading patterns and four output patterns.

    Raises:
        LineFormatError: separator missing or repeated, wrong token counts
        InvalidSegmentError: a token is not a valid pattern
        MalformedReadingError: the ten patterns are not one of each digit
    """
    parts = line.strip().split(SEPARATOR)
    if len(parts) != 2:
        raise LineFormatError(
            f"Expected exactly one {SEPARATOR.strip()!r} separator, found {len(parts) - 1}"
        )

    left, right = parts
    if len(left.split()) != 10:
        raise LineFormatError(
            f"Expected 10 patterns before the separator, got {len(left.split())}"
        )
    if len(right.split()) != 4:
        raise LineFormatError(
            f"Expected 4 output patterns, got {len(right.split())}"
        )

    reading = Reading.from_patterns(parse_patterns(left))
    return ParsedLine(reading=reading, outputs=parse_patterns(right))


def process_line(
    line: str, line_number: int = 1, exact: bool = False, verbose: bool = False
) -> LineResult:
    """
    Decode a single line.

    Args:
        line: Input line in "p1 ... p10 | o1 o2 o3 o4" form
        line_number: 1-based position in the input, attached to errors
        exact: Use the SAT solver instead of set-algebra deduction
        verbose: Print the deduction steps
    """
    try:
        parsed = parse_line(line)
        solver = MappingSolver(parsed.reading)
        mapping = solver.solve_exact() if exact else solver.solve(verbose)
        digits = tuple(decode_digits(parsed.outputs, mapping))
    except SegmentDecodeError as e:
        if e.line_number is not None:
            raise
        raise type(e)(e.message, line_number) from e

    return LineResult(
        line_number=line_number,
        digits=digits,
        value=digits_to_value(digits),
        mapping=mapping,
    )


def _numbered(lines: Iterable[str]) -> list[tuple[int, str]]:
    """Pair lines with their 1-based numbers, dropping blank lines."""
    return [(n, line) for n, line in enumerate(lines, start=1) if line.strip()]


def _process_chunk(chunk: list[tuple[int, str]], exact: bool) -> list[LineResult]:
    """Decode a chunk of numbered lines. Run in a worker process."""
    return [process_line(line, n, exact=exact) for n, line in chunk]


def process_lines(
    lines: Iterable[str],
    workers: int = 1,
    exact: bool = False,
    verbose: bool = False,
) -> list[LineResult]:
    """
    Decode every non-blank line, in input order.

    Args:
        lines: Input lines
        workers: Number of worker processes (1 = in-process; 0 = one per CPU)
        exact: Use the SAT solver
        verbose: Print progress

    Raises:
        SegmentDecodeError: the lowest-numbered failing line, with its line number
    """
    numbered = _numbered(lines)

    if workers == 0:
        workers = mp.cpu_count()

    if workers <= 1 or len(numbered) < 2:
        results = []
        for n, line in numbered:
            if verbose:
                print(f"Line {n}:")
            result = process_line(line, n, exact=exact, verbose=verbose)
            if verbose:
                print_line_result(result)
            results.append(result)
        return results

    chunk_size = max(1, -(-len(numbered) // workers))
    chunks = [
        numbered[i:i + chunk_size] for i in range(0, len(numbered), chunk_size)
    ]
    if verbose:
        print(f"Decoding {len(numbered)} lines in {len(chunks)} chunks "
              f"on {workers} workers...", flush=True)

    results = []
    failures = []
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(_process_chunk, chunk, exact): chunk for chunk in chunks}

        for future in as_completed(futures):
            chunk = futures[future]
            try:
                results.extend(future.result())
            except SegmentDecodeError as e:
                # A chunk stops at its first bad line
                failures.append(e)
                continue
            if verbose:
                print(f"  lines {chunk[0][0]}-{chunk[-1][0]}: done", flush=True)

    if failures:
        raise min(failures, key=lambda e: e.line_number)

    return sorted(results, key=lambda r: r.line_number)


def sum_readings(
    lines: Iterable[str],
    workers: int = 1,
    exact: bool = False,
    verbose: bool = False,
) -> int:
    """Sum the decoded values of every non-blank line."""
    return sum(r.value for r in process_lines(lines, workers, exact, verbose))


def count_unique_digits(lines: Iterable[str]) -> int:
    """
    Count output digits shown with 2, 3, 4 or 7 segments (1, 7, 4 and 8).

    Only segment counts are used, no wiring is solved.
    """
    total = 0
    for n, line in _numbered(lines):
        try:
            parsed = parse_line(line)
        except SegmentDecodeError as e:
            raise type(e)(e.message, n) from e
        total += sum(1 for pattern in parsed.outputs if is_unique_count(pattern))
    return total


def read_lines(path: Union[str, Path]) -> list[str]:
    """Read an input file into lines."""
    return Path(path).read_text().splitlines()
