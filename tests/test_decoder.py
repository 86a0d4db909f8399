"""
Tests for remapping and digit lookup.
"""

import pytest

from segment_decoder.classifier import Reading
from segment_decoder.decoder import decode, decode_digits, decode_output, digits_to_value, remap
from segment_decoder.errors import UnknownDigitError
from segment_decoder.segments import DIGIT_PATTERNS, parse_pattern, parse_patterns
from segment_decoder.solver import solve_mapping


@pytest.fixture
def example_mapping():
    return solve_mapping(Reading.from_patterns(parse_patterns(
        "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab"
    )))


def test_remap_to_canonical(example_mapping):
    assert remap(parse_pattern("dab"), example_mapping) == DIGIT_PATTERNS[7]
    assert remap(parse_pattern("cdfbe"), example_mapping) == DIGIT_PATTERNS[5]


def test_decode_every_digit():
    for digit, pattern in DIGIT_PATTERNS.items():
        assert decode(pattern) == digit


def test_decode_unknown_pattern():
    with pytest.raises(UnknownDigitError):
        decode(parse_pattern("ab"))
    with pytest.raises(UnknownDigitError):
        decode(parse_pattern("abcdf"))


def test_decode_output(example_mapping):
    outputs = parse_patterns("cdfeb fcadb cdfeb cdbaf")
    assert decode_digits(outputs, example_mapping) == [5, 3, 5, 3]
    assert decode_output(outputs, example_mapping) == 5353


def test_digits_to_value_keeps_leading_zero_place():
    assert digits_to_value([0, 0, 4, 2]) == 42
    assert digits_to_value([1, 0, 0, 0]) == 1000
