"""
Wire-to-segment deduction for scrambled 7-segment readings.

This module recovers the bijection between scrambled wires and canonical
segments from the ten patterns of a reading:
1. Set-algebra deduction over the patterns (fixed twelve-step order)
2. SAT-based exact solving as an independent cross-check
"""

from dataclasses import dataclass, field
from functools import reduce
from operator import and_
from typing import Optional

from pysat.formula import CNF
from pysat.solvers import Solver

from .classifier import Reading
from .errors import MappingError, NotBijectiveError
from .segments import (
    DIGIT_PATTERNS,
    FULL_MASK,
    SEGMENT_BITS,
    SEGMENT_NAMES,
    SegmentSet,
)


@dataclass(frozen=True)
class Mapping:
    """
    Bijection from scrambled bit position to canonical segment.

    targets[p] is the single-bit canonical SegmentSet lit by the wire at
    scrambled bit position p (0 = 'g' wire, 6 = 'a' wire).
    """

    targets: tuple[SegmentSet, ...]
    method: str = field(default="deduction", compare=False)

    def __post_init__(self):
        if len(self.targets) != 7:
            raise NotBijectiveError(
                f"Mapping needs 7 positions, got {len(self.targets)}"
            )
        covered = 0
        for position, target in enumerate(self.targets):
            if not target.is_singleton:
                raise NotBijectiveError(
                    f"Position {position} maps to {target!r}, not one segment"
                )
            if covered & target.mask:
                raise NotBijectiveError(
                    f"Segment {target} is the target of two positions"
                )
            covered |= target.mask
        if covered != FULL_MASK:
            raise NotBijectiveError("Mapping does not cover all seven segments")

    @classmethod
    def from_segments(
        cls, derived: dict[str, SegmentSet], method: str = "deduction"
    ) -> "Mapping":
        """
        Assemble a Mapping from canonical name -> scrambled singleton.

        Each scrambled position must be claimed by exactly one segment.
        """
        targets: list[Optional[SegmentSet]] = [None] * 7
        assigned = 0

        for name in SEGMENT_NAMES:
            scrambled = derived[name]
            if not scrambled.is_singleton:
                raise NotBijectiveError(
                    f"Segment {name} derived as {scrambled!r}, not a single wire"
                )
            if assigned & scrambled.mask:
                raise NotBijectiveError(
                    f"Wire {scrambled} derived for segment {name} twice"
                )
            assigned |= scrambled.mask
            position = scrambled.positions()[0]
            targets[position] = SegmentSet(SEGMENT_BITS[name])

        if assigned != FULL_MASK:
            raise NotBijectiveError("Derived segments leave a wire unassigned")

        return cls(tuple(targets), method=method)

    def __getitem__(self, position: int) -> SegmentSet:
        return self.targets[position]

    def wiring(self) -> dict[str, str]:
        """Scrambled letter -> canonical letter, in a-g order."""
        return {
            SEGMENT_NAMES[6 - p]: str(self.targets[p])
            for p in reversed(range(7))
        }

    def __str__(self):
        return " ".join(f"{w}->{s}" for w, s in self.wiring().items())


class MappingSolver:
    """
    Deduce the wiring of one display unit from its ten patterns.

    The deduction relies on the following containments between digits:
    - 7 minus 1 leaves the top segment
    - 4 minus 1 leaves the upper-left and middle segments
    - {2, 3, 5} share the three horizontal segments
    - {0, 6, 9} share top, upper-left, lower-right and bottom
    - 2 is the only five-segment digit without the lower-right segment
    """

    def __init__(self, reading: Reading):
        self.reading = reading
        self.steps: list[tuple[str, SegmentSet]] = []

    def _record(self, name: str, value: SegmentSet, verbose: bool) -> SegmentSet:
        self.steps.append((name, value))
        if verbose:
            print(f"  {name:>5} = {value!r}")
        return value

    def deduce(self, verbose: bool = False) -> dict[str, SegmentSet]:
        """
        Run the twelve deduction steps.

        The order matters: every subtraction removes a set already known to
        be contained in the left operand.

        Returns:
            Canonical segment name -> scrambled singleton
        """
        self.steps = []
        reading = self.reading

        known = reading.known_digits()
        one, seven, four, eight = known[1], known[7], known[4], known[8]
        fives = reading.by_count(5)
        sixes = reading.by_count(6)

        a = self._record("a", seven - one, verbose)
        bd = self._record("bd", four - one, verbose)
        adg = self._record("adg", reduce(and_, fives), verbose)
        abfg = self._record("abfg", reduce(and_, sixes), verbose)
        # a and g are common to both and cancel
        bdf = self._record("bdf", adg ^ abfg, verbose)
        f = self._record("f", bdf - bd, verbose)
        c = self._record("c", one - f, verbose)

        twos = [p for p in fives if p.isdisjoint(f)]
        if len(twos) != 1:
            raise MappingError(
                f"Expected one five-segment pattern without {f}, found {len(twos)}"
            )
        two = self._record("two", twos[0], verbose)

        b = self._record("b", eight - two - f, verbose)
        d = self._record("d", bd - b, verbose)
        g = self._record("g", adg - a - d, verbose)
        e = self._record("e", eight - a - b - c - d - f - g, verbose)

        return {"a": a, "b": b, "c": c, "d": d, "e": e, "f": f, "g": g}

    def solve(self, verbose: bool = False) -> Mapping:
        """Deduce the Mapping by set algebra."""
        if verbose:
            print("Deducing wiring...")
        return Mapping.from_segments(self.deduce(verbose))

    def solve_exact(self, require_unique: bool = False) -> Mapping:
        """
        Find the Mapping with a SAT solver.

        Encodes the problem as CNF where:
        - x[p][s] = scrambled position p lights canonical segment bit s
        - y[i][d] = pattern i shows digit d (only for equal segment counts)
        - x is a permutation, y is a permutation
        - y[i][d] and p in pattern i imply p lights some segment of digit d

        Args:
            require_unique: If True, also prove no second wiring exists

        Raises:
            NotBijectiveError: No wiring explains the reading
            MappingError: require_unique and a second wiring exists
        """
        patterns = self.reading.patterns

        cnf = CNF()
        var_counter = [1]

        def new_var():
            v = var_counter[0]
            var_counter[0] += 1
            return v

        x = {p: {s: new_var() for s in range(7)} for p in range(7)}
        y = {
            i: {
                d: new_var()
                for d, digit in DIGIT_PATTERNS.items()
                if digit.count == pattern.count
            }
            for i, pattern in enumerate(patterns)
        }

        # Constraint 1: x is a permutation
        for p in range(7):
            _exactly_one(cnf, [x[p][s] for s in range(7)])
        for s in range(7):
            _exactly_one(cnf, [x[p][s] for p in range(7)])

        # Constraint 2: y is a permutation
        for i in y:
            if not y[i]:
                raise NotBijectiveError(
                    f"Pattern {patterns[i]} has no digit with {patterns[i].count} segments"
                )
            _exactly_one(cnf, list(y[i].values()))
        for d in DIGIT_PATTERNS:
            shows_d = [y[i][d] for i in y if d in y[i]]
            if not shows_d:
                raise NotBijectiveError(f"No pattern can show digit {d}")
            _exactly_one(cnf, shows_d)

        # Constraint 3: pattern segments land inside the digit it shows
        for i, pattern in enumerate(patterns):
            for d, sel in y[i].items():
                lit = DIGIT_PATTERNS[d].positions()
                for p in pattern.positions():
                    cnf.append([-sel] + [x[p][s] for s in lit])

        with Solver(bootstrap_with=cnf) as solver:
            if not solver.solve():
                raise NotBijectiveError("No wiring is consistent with the reading")
            model = set(solver.get_model())
            chosen = [x[p][s] for p in range(7) for s in range(7) if x[p][s] in model]

            if require_unique:
                solver.add_clause([-v for v in chosen])
                if solver.solve():
                    raise MappingError("Reading admits more than one wiring")

        targets = []
        for p in range(7):
            for s in range(7):
                if x[p][s] in model:
                    targets.append(SegmentSet(1 << s))
                    break

        return Mapping(tuple(targets), method="exact")


def _exactly_one(cnf: CNF, literals: list[int]):
    """Pairwise exactly-one encoding."""
    cnf.append(literals)  # At least one
    for idx1, lit1 in enumerate(literals):
        for lit2 in literals[idx1 + 1:]:
            cnf.append([-lit1, -lit2])  # At most one


def solve_mapping(reading: Reading, verbose: bool = False) -> Mapping:
    """Deduce the Mapping of a reading by set algebra."""
    return MappingSolver(reading).solve(verbose)


def solve_mapping_exact(reading: Reading, require_unique: bool = False) -> Mapping:
    """Find the Mapping of a reading with the SAT solver."""
    return MappingSolver(reading).solve_exact(require_unique)
