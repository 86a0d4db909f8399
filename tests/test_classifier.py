"""
Tests for Reading validation and count-based classification.
"""

import pytest

from segment_decoder.classifier import Reading, is_unique_count
from segment_decoder.errors import AmbiguousCountError, MalformedReadingError
from segment_decoder.segments import DIGIT_PATTERNS, parse_pattern, parse_patterns


class TestReading:

    def test_from_canonical_patterns(self, canonical_reading):
        assert len(canonical_reading.patterns) == 10

    def test_by_count_keeps_input_order(self, canonical_reading):
        assert canonical_reading.by_count(5) == [
            DIGIT_PATTERNS[2], DIGIT_PATTERNS[3], DIGIT_PATTERNS[5],
        ]
        assert canonical_reading.by_count(6) == [
            DIGIT_PATTERNS[0], DIGIT_PATTERNS[6], DIGIT_PATTERNS[9],
        ]

    def test_unique_by_count(self, canonical_reading):
        assert canonical_reading.unique_by_count(2) == DIGIT_PATTERNS[1]
        assert canonical_reading.unique_by_count(7) == DIGIT_PATTERNS[8]

    def test_unique_by_count_ambiguous(self, canonical_reading):
        with pytest.raises(AmbiguousCountError):
            canonical_reading.unique_by_count(5)
        with pytest.raises(AmbiguousCountError):
            canonical_reading.unique_by_count(1)

    def test_known_digits(self, canonical_reading):
        known = canonical_reading.known_digits()
        assert set(known) == {1, 4, 7, 8}
        assert known[4] == DIGIT_PATTERNS[4]

    def test_four_five_segment_patterns_is_malformed(self):
        patterns = list(DIGIT_PATTERNS.values())
        patterns[0] = parse_pattern("abcde")
        with pytest.raises(MalformedReadingError):
            Reading.from_patterns(patterns)

    def test_wrong_pattern_count_is_malformed(self):
        patterns = list(DIGIT_PATTERNS.values())[:9]
        with pytest.raises(MalformedReadingError):
            Reading.from_patterns(patterns)

    def test_scrambled_example_is_valid(self):
        reading = Reading.from_patterns(parse_patterns(
            "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab"
        ))
        assert reading.unique_by_count(3) == parse_pattern("abd")


def test_is_unique_count():
    assert is_unique_count(parse_pattern("ab"))
    assert is_unique_count(parse_pattern("abcdefg"))
    assert not is_unique_count(parse_pattern("abcde"))
