#!/usr/bin/env python3
"""
Check the wiring deduction against every possible scrambling.
Scrambles the canonical digits with all 5040 wire permutations and checks,
in parallel, that the deduction recovers each one.
"""

import itertools
import multiprocessing as mp
from concurrent.futures import ProcessPoolExecutor, as_completed
import random
import sys
import time

from segment_decoder.classifier import Reading
from segment_decoder.segments import DIGIT_PATTERNS, SegmentSet, scramble
from segment_decoder.solver import Mapping, MappingSolver
from segment_decoder.verify import verify_mapping


def expected_mapping(perm):
    targets = [None] * 7
    for s, p in enumerate(perm):
        targets[p] = SegmentSet(1 << s)
    return Mapping(tuple(targets))


def check_chunk(args):
    """Check a chunk of permutations. Run in separate process."""
    perms, exact, seed = args
    rng = random.Random(seed)
    failures = []

    for perm in perms:
        patterns = [scramble(p, perm) for p in DIGIT_PATTERNS.values()]
        rng.shuffle(patterns)
        reading = Reading.from_patterns(patterns)
        solver = MappingSolver(reading)

        try:
            mapping = solver.solve_exact() if exact else solver.solve()
        except Exception as e:
            failures.append((perm, f"Error: {e}"))
            continue

        if mapping != expected_mapping(perm):
            failures.append((perm, f"Wrong wiring: {mapping}"))
            continue

        valid, errors = verify_mapping(reading, mapping)
        if not valid:
            failures.append((perm, errors[0]))

    return len(perms), failures


def main():
    exact = "--exact" in sys.argv

    print("=" * 60)
    print("7-Segment Wiring Deduction: Exhaustive Check")
    print("=" * 60)
    print()
    print(f"Method: {'exact (SAT)' if exact else 'deduction'}")

    perms = list(itertools.permutations(range(7)))
    n_workers = mp.cpu_count()
    chunk_size = -(-len(perms) // (n_workers * 4))
    chunks = [perms[i:i + chunk_size] for i in range(0, len(perms), chunk_size)]

    print(f"Checking {len(perms)} wirings in {len(chunks)} chunks")
    print(f"Using {n_workers} CPU cores")
    print()

    checked = 0
    all_failures = []
    start_time = time.time()

    with ProcessPoolExecutor(max_workers=n_workers) as executor:
        futures = {
            executor.submit(check_chunk, (chunk, exact, i)): i
            for i, chunk in enumerate(chunks)
        }

        for future in as_completed(futures):
            n, failures = future.result()
            checked += n
            all_failures.extend(failures)
            print(f"  {checked}/{len(perms)} checked, {len(all_failures)} failures", flush=True)

    elapsed = time.time() - start_time

    print()
    print("=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(f"Check time: {elapsed:.1f} seconds")

    if all_failures:
        print(f"{len(all_failures)} wirings not recovered:")
        for perm, msg in all_failures[:10]:
            print(f"  {perm}: {msg}")
        return 1

    print(f"All {checked} wirings recovered.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
