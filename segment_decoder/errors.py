"""
Exceptions raised while parsing, solving and decoding segment readings.

Every error is local to one input line. The processor attaches the 1-based
line number before re-raising so the caller can report where the input broke.
"""

from typing import Optional


class SegmentDecodeError(ValueError):
    """Base class for all decoding failures."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        # Both go in args so the error survives pickling across processes
        super().__init__(message, line_number)
        self.message = message
        self.line_number = line_number

    def __str__(self):
        if self.line_number is not None:
            return f"line {self.line_number}: {self.message}"
        return self.message


class InvalidSegmentError(SegmentDecodeError):
    """A pattern token contains something other than distinct letters a-g."""


class LineFormatError(SegmentDecodeError):
    """Missing or repeated ' | ' separator, or wrong token counts."""


class MalformedReadingError(SegmentDecodeError):
    """The ten patterns do not have segment counts {2,3,4,5,5,5,6,6,6,7}."""


class AmbiguousCountError(SegmentDecodeError):
    """Zero or several patterns share a count that should be unique."""


class MappingError(SegmentDecodeError):
    """The deduction produced an inconsistent intermediate set."""


class NotBijectiveError(MappingError):
    """The derived segments do not cover all seven positions exactly once."""


class UnknownDigitError(SegmentDecodeError):
    """A remapped pattern matches none of the ten canonical digits."""
