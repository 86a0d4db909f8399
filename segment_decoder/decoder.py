"""
Translate scrambled patterns into digits with a solved Mapping.
"""

from typing import Sequence

from .errors import UnknownDigitError
from .segments import DIGIT_TABLE, SegmentSet
from .solver import Mapping


def remap(pattern: SegmentSet, mapping: Mapping) -> SegmentSet:
    """Express a scrambled pattern in canonical segments."""
    mask = 0
    for position in pattern.positions():
        mask |= mapping[position].mask
    return SegmentSet(mask)


def decode(canonical: SegmentSet) -> int:
    """Look up the digit shown by a canonical pattern."""
    digit = DIGIT_TABLE.get(canonical.mask)
    if digit is None:
        raise UnknownDigitError(
            f"Pattern {canonical!r} is not a canonical digit"
        )
    return digit


def decode_digits(outputs: Sequence[SegmentSet], mapping: Mapping) -> list[int]:
    """Decode each scrambled output pattern, most significant first."""
    return [decode(remap(pattern, mapping)) for pattern in outputs]


def digits_to_value(digits: Sequence[int]) -> int:
    """Combine digits into an integer, first digit most significant."""
    value = 0
    for digit in digits:
        value = value * 10 + digit
    return value


def decode_output(outputs: Sequence[SegmentSet], mapping: Mapping) -> int:
    """Decode the output patterns of a line into its numeric value."""
    return digits_to_value(decode_digits(outputs, mapping))
