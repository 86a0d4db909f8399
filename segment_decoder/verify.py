"""
Verification module for solved wirings.

Ensures a Mapping turns every pattern of its reading into a distinct
canonical digit.
"""

from .classifier import Reading
from .decoder import remap
from .segments import DIGIT_TABLE, SEGMENT_NAMES, SEGMENT_BITS
from .solver import Mapping


def verify_mapping(reading: Reading, mapping: Mapping) -> tuple[bool, list[str]]:
    """
    Verify that a Mapping decodes a reading to the ten digits exactly once.

    Args:
        reading: The reading the mapping was solved from
        mapping: The solved mapping

    Returns:
        Tuple of (all_correct, list of error messages)
    """
    errors = []
    seen = {}

    for i, pattern in enumerate(reading.patterns):
        canonical = remap(pattern, mapping)
        digit = DIGIT_TABLE.get(canonical.mask)

        if digit is None:
            errors.append(
                f"Pattern {i} ({pattern}): remaps to {canonical}, not a digit"
            )
        elif digit in seen:
            errors.append(
                f"Pattern {i} ({pattern}): digit {digit} already shown by pattern {seen[digit]}"
            )
        else:
            seen[digit] = i

    return len(errors) == 0, errors


def print_mapping_comparison(reading: Reading, mapping: Mapping):
    """Print every pattern of a reading next to its remapped digit."""
    print("Wiring Verification")
    print("=" * 60)
    print(f"{'Pattern':>8} | Scrambled | Canonical | " + "".join(SEGMENT_NAMES) + " | Digit")
    print("-" * 60)

    all_match = True

    for i, pattern in enumerate(reading.patterns):
        canonical = remap(pattern, mapping)
        digit = DIGIT_TABLE.get(canonical.mask)
        lit = "".join(
            "1" if canonical.mask & SEGMENT_BITS[s] else "0" for s in SEGMENT_NAMES
        )
        if digit is None:
            all_match = False

        shown = "X" if digit is None else str(digit)
        print(f"{i:>8} | {str(pattern):>9} | {str(canonical):>9} | {lit} | {shown:>5}")

    print("-" * 60)
    print(f"Wiring: {mapping}")
    print(f"All correct: {all_match}")
    return all_match


def print_line_result(result):
    """Print one decoded line: digits, value and wiring."""
    digits = " ".join(str(d) for d in result.digits)
    print(f"  Line {result.line_number}: {digits} -> {result.value:04d} ({result.mapping.method})")
    print(f"  Wiring: {result.mapping}")
