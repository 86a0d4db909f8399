"""
Segment sets and canonical digit patterns for a 7-segment display.

7-segment display layout:
     aaa
    b   c
    b   c
     ddd
    e   f
    e   f
     ggg

Each pattern is stored as a 7-bit mask, MSB first:
- Bit 6 = a
- Bit 5 = b
- ...
- Bit 0 = g
"""

from dataclasses import dataclass

from .errors import InvalidSegmentError, MappingError

SEGMENT_NAMES = ['a', 'b', 'c', 'd', 'e', 'f', 'g']

# Letter -> single-bit mask ('a' is the MSB)
SEGMENT_BITS = {name: 1 << (6 - i) for i, name in enumerate(SEGMENT_NAMES)}

FULL_MASK = 0b1111111


@dataclass(frozen=True)
class SegmentSet:
    """
    Immutable set of active segments.

    Set algebra maps onto bitwise operators. Subtraction is AND-NOT and is
    only defined when the right operand is contained in the left one.
    """

    mask: int

    def __post_init__(self):
        if not 0 <= self.mask <= FULL_MASK:
            raise ValueError(f"Segment mask out of range: {self.mask:#b}")

    @property
    def count(self) -> int:
        """Number of active segments."""
        return bin(self.mask).count('1')

    @property
    def is_singleton(self) -> bool:
        return self.count == 1

    def issubset(self, other: "SegmentSet") -> bool:
        return (self.mask & other.mask) == self.mask

    def isdisjoint(self, other: "SegmentSet") -> bool:
        return (self.mask & other.mask) == 0

    def positions(self) -> list[int]:
        """Bit positions of the active segments, lowest first."""
        return [p for p in range(7) if (self.mask >> p) & 1]

    def __or__(self, other: "SegmentSet") -> "SegmentSet":
        return SegmentSet(self.mask | other.mask)

    def __and__(self, other: "SegmentSet") -> "SegmentSet":
        return SegmentSet(self.mask & other.mask)

    def __xor__(self, other: "SegmentSet") -> "SegmentSet":
        return SegmentSet(self.mask ^ other.mask)

    def __sub__(self, other: "SegmentSet") -> "SegmentSet":
        if not other.issubset(self):
            raise MappingError(
                f"Cannot remove {other} from {self}: not a subset"
            )
        return SegmentSet(self.mask & ~other.mask & FULL_MASK)

    def __len__(self):
        return self.count

    def __str__(self):
        return segment_string(self)

    def __repr__(self):
        return f"SegmentSet({segment_string(self) or '-'})"


def scramble(pattern: SegmentSet, perm) -> SegmentSet:
    """Move canonical segment bit s to scrambled position perm[s]."""
    mask = 0
    for s in pattern.positions():
        mask |= 1 << perm[s]
    return SegmentSet(mask)


def parse_pattern(token: str) -> SegmentSet:
    """
    Convert a token such as "cdfbe" into a SegmentSet.

    Raises InvalidSegmentError for characters outside a-g, repeated letters,
    or tokens that are not 2-7 letters long.
    """
    if not 2 <= len(token) <= 7:
        raise InvalidSegmentError(
            f"Pattern {token!r} must have 2-7 segments, got {len(token)}"
        )

    mask = 0
    for letter in token:
        bit = SEGMENT_BITS.get(letter)
        if bit is None:
            raise InvalidSegmentError(
                f"Invalid segment character {letter!r} in pattern {token!r}"
            )
        if mask & bit:
            raise InvalidSegmentError(
                f"Segment {letter!r} repeated in pattern {token!r}"
            )
        mask |= bit

    return SegmentSet(mask)


def parse_patterns(text: str) -> tuple[SegmentSet, ...]:
    """Parse a whitespace-separated group of pattern tokens."""
    return tuple(parse_pattern(token) for token in text.split())


def segment_string(segments: SegmentSet) -> str:
    """Render a SegmentSet as its letters in a-g order."""
    return "".join(
        name for name in SEGMENT_NAMES if segments.mask & SEGMENT_BITS[name]
    )


# Lit segments of each decimal digit
DIGIT_SEGMENTS = {
    0: "abcefg",
    1: "cf",
    2: "acdeg",
    3: "acdfg",
    4: "bcdf",
    5: "abdfg",
    6: "abdefg",
    7: "acf",
    8: "abcdefg",
    9: "abcdfg",
}

DIGIT_PATTERNS = {
    digit: parse_pattern(letters) for digit, letters in DIGIT_SEGMENTS.items()
}

# Canonical mask -> digit, the lookup used by the decoder
DIGIT_TABLE = {pattern.mask: digit for digit, pattern in DIGIT_PATTERNS.items()}

# Segment counts that identify a digit on their own
UNIQUE_COUNTS = {2: 1, 3: 7, 4: 4, 7: 8}

# Segment counts of a complete reading, sorted
READING_COUNTS = sorted(p.count for p in DIGIT_PATTERNS.values())


def print_digit_table():
    """Print the canonical pattern of every digit."""
    print("Canonical 7-Segment Digits")
    print("=" * 40)
    print(f"{'Digit':>5} | {'Mask':>7} | ", end="")
    print(" ".join(SEGMENT_NAMES) + " | Count")
    print("-" * 40)

    for digit, pattern in DIGIT_PATTERNS.items():
        lit = " ".join(
            "1" if pattern.mask & SEGMENT_BITS[s] else "0" for s in SEGMENT_NAMES
        )
        print(f"{digit:>5} | {pattern.mask:07b} | {lit} | {pattern.count:>5}")


if __name__ == "__main__":
    print_digit_table()
