"""Command-line interface for decoding scrambled 7-segment readings."""

import argparse
import sys

from .errors import SegmentDecodeError
from .export import to_csv, to_json, to_text
from .processor import count_unique_digits, parse_line, process_lines, read_lines
from .segments import print_digit_table
from .solver import MappingSolver
from .verify import print_line_result, print_mapping_comparison, verify_mapping


def verify_results(lines, results, verbose=False) -> int:
    """Re-check every solved line. Returns the number of failing lines."""
    failures = 0
    for result in results:
        reading = parse_line(lines[result.line_number - 1]).reading
        correct, errors = verify_mapping(reading, result.mapping)

        exact = MappingSolver(reading).solve_exact(require_unique=True)
        if exact != result.mapping:
            correct = False
            errors.append(f"SAT solver found a different wiring: {exact}")

        if verbose:
            print()
            print_line_result(result)
            print_mapping_comparison(reading, result.mapping)

        if not correct:
            failures += 1
            print(f"Line {result.line_number}: verification FAILED")
            for err in errors:
                print(f"  {err}")

    return failures


def main():
    parser = argparse.ArgumentParser(
        description="Decode scrambled 7-segment display readings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  segment-decode input.txt                 Sum all decoded readings
  segment-decode input.txt --part 1        Count 1, 4, 7, 8 in the outputs
  segment-decode input.txt --exact         Solve wirings with the SAT solver
  segment-decode input.txt --workers 0     Use one worker per CPU
  segment-decode input.txt --verify        Cross-check every wiring
  segment-decode input.txt --format json   Output per-line results as JSON
  segment-decode --digit-table             Show the canonical digit patterns
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Puzzle input file, one reading per line",
    )
    parser.add_argument(
        "--part",
        choices=["1", "2", "both"],
        default="both",
        help="1: count unique digits, 2: sum readings (default: both)",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Use SAT-based solving instead of set-algebra deduction",
    )
    parser.add_argument(
        "--workers", "-j",
        type=int,
        default=1,
        help="Worker processes, 0 for one per CPU (default: 1)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json", "csv"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Verify every wiring and cross-check it with the SAT solver",
    )
    parser.add_argument(
        "--digit-table",
        action="store_true",
        help="Print the canonical 7-segment digit patterns and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()

    if args.digit_table:
        print_digit_table()
        return 0

    if args.input is None:
        parser.error("the input file is required")

    # Suppress progress output for non-text formats
    quiet = args.format != "text"
    verbose = args.verbose and not quiet

    try:
        lines = read_lines(args.input)

        unique_count = None
        if args.part in ("1", "both"):
            unique_count = count_unique_digits(lines)
            if args.part == "1":
                if args.format == "json":
                    print(to_json([], unique_count))
                else:
                    print(unique_count)
                return 0

        if not quiet:
            print("Seven-Segment Decoder")
            print("=" * 40)
            print(f"Input: {args.input}")
            print(f"Method: {'exact (SAT)' if args.exact else 'deduction'}")
            print()

        results = process_lines(
            lines, workers=args.workers, exact=args.exact, verbose=verbose
        )

        failures = 0
        if args.verify:
            failures = verify_results(lines, results, verbose=verbose)

        if args.format == "json":
            print(to_json(results, unique_count))
        elif args.format == "csv":
            print(to_csv(results), end="")
        else:
            print(to_text(results, unique_count))
            if args.verify:
                if failures:
                    print(f"\n✗ Verification failed on {failures} line(s)")
                else:
                    print(f"\n✓ All {len(results)} wirings verified")

        return 1 if failures else 0

    except (SegmentDecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
