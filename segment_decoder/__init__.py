"""Seven-segment wiring deduction and decoding using set algebra over bitmasks."""

from .segments import (
    SegmentSet,
    SEGMENT_NAMES,
    DIGIT_PATTERNS,
    DIGIT_TABLE,
    parse_pattern,
    parse_patterns,
)
from .classifier import Reading
from .solver import Mapping, MappingSolver, solve_mapping, solve_mapping_exact
from .decoder import remap, decode, decode_output
from .processor import (
    LineResult,
    parse_line,
    process_line,
    process_lines,
    sum_readings,
    count_unique_digits,
)
from .verify import verify_mapping
from .errors import (
    SegmentDecodeError,
    InvalidSegmentError,
    LineFormatError,
    MalformedReadingError,
    AmbiguousCountError,
    MappingError,
    NotBijectiveError,
    UnknownDigitError,
)

__all__ = [
    "SegmentSet",
    "SEGMENT_NAMES",
    "DIGIT_PATTERNS",
    "DIGIT_TABLE",
    "parse_pattern",
    "parse_patterns",
    "Reading",
    "Mapping",
    "MappingSolver",
    "solve_mapping",
    "solve_mapping_exact",
    "remap",
    "decode",
    "decode_output",
    "LineResult",
    "parse_line",
    "process_line",
    "process_lines",
    "sum_readings",
    "count_unique_digits",
    "verify_mapping",
    "SegmentDecodeError",
    "InvalidSegmentError",
    "LineFormatError",
    "MalformedReadingError",
    "AmbiguousCountError",
    "MappingError",
    "NotBijectiveError",
    "UnknownDigitError",
]
__version__ = "0.1.0"
