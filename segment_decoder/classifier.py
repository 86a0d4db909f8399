"""
Classification of a reading's ten patterns by segment count.

Digits 1, 7, 4 and 8 are the only ones lit with 2, 3, 4 and 7 segments.
The other six split into two triples: {2, 3, 5} with five segments and
{0, 6, 9} with six.
"""

from dataclasses import dataclass
from typing import Iterable

from .errors import AmbiguousCountError, MalformedReadingError
from .segments import READING_COUNTS, UNIQUE_COUNTS, SegmentSet


@dataclass(frozen=True)
class Reading:
    """The ten scrambled patterns of one display unit, one per digit."""

    patterns: tuple[SegmentSet, ...]

    @classmethod
    def from_patterns(cls, patterns: Iterable[SegmentSet]) -> "Reading":
        """Build a Reading, checking the segment count multiset."""
        patterns = tuple(patterns)
        if len(patterns) != 10:
            raise MalformedReadingError(
                f"Reading needs 10 patterns, got {len(patterns)}"
            )

        counts = sorted(p.count for p in patterns)
        if counts != READING_COUNTS:
            raise MalformedReadingError(
                f"Segment counts {counts} do not match {READING_COUNTS}"
            )

        return cls(patterns)

    def by_count(self, n: int) -> list[SegmentSet]:
        """Patterns with exactly n active segments, in input order."""
        return [p for p in self.patterns if p.count == n]

    def unique_by_count(self, n: int) -> SegmentSet:
        """The single pattern with n active segments."""
        matches = self.by_count(n)
        if len(matches) != 1:
            raise AmbiguousCountError(
                f"Expected one pattern with {n} segments, found {len(matches)}"
            )
        return matches[0]

    def known_digits(self) -> dict[int, SegmentSet]:
        """Digit -> pattern for the digits identified by count alone."""
        return {
            digit: self.unique_by_count(count)
            for count, digit in UNIQUE_COUNTS.items()
        }


def is_unique_count(pattern: SegmentSet) -> bool:
    """True if the pattern's length alone identifies its digit (1, 4, 7, 8)."""
    return pattern.count in UNIQUE_COUNTS
