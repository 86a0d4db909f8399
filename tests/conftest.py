import itertools
import random

import pytest

from segment_decoder.classifier import Reading
from segment_decoder.segments import DIGIT_PATTERNS, scramble

SINGLE_LINE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf"
)

EXAMPLE_LINES = [
    "be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe",
    "edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc",
    "fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg",
    "fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb",
    "aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea",
    "fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb",
    "dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe",
    "bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef",
    "egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb",
    "gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce",
]

EXAMPLE_VALUES = [8394, 9781, 1197, 9361, 4873, 8418, 4548, 1625, 8717, 4315]

# Unscrambled reading, digits 0-9 in order
CANONICAL_LINE = (
    "abcefg cf acdeg acdfg bcdf abdfg abdefg acf abcdefg abcdfg | "
    "abcdefg cf acf abdfg"
)


def scrambled_reading(perm, seed=None) -> Reading:
    patterns = [scramble(p, perm) for p in DIGIT_PATTERNS.values()]
    if seed is not None:
        random.Random(seed).shuffle(patterns)
    return Reading.from_patterns(patterns)


ALL_PERMUTATIONS = list(itertools.permutations(range(7)))


@pytest.fixture
def example_lines():
    return list(EXAMPLE_LINES)


@pytest.fixture
def canonical_reading():
    return Reading.from_patterns(DIGIT_PATTERNS.values())
