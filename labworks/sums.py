"""Repeated sums of the array elements that are at least 128, four ways."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Sequence

NUM_ELEMS = (1 << 16) + 10
OUTER_ITERATIONS = 1 << 16
THRESHOLD = 127
LANES = 4
UNROLL = 4


def _check_iterations(iterations: int) -> None:
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")


def _groups(values: Sequence[int], width: int):
    """Yield consecutive tuples of ``width`` items; a short tail is dropped."""
    return zip(*[iter(values)] * width)


def sum_plain(vals: Sequence[int], iterations: int = OUTER_ITERATIONS) -> int:
    """Sum the elements >= 128, ``iterations`` times over."""
    _check_iterations(iterations)
    total = 0
    for _ in range(iterations):
        for value in vals:
            if value >= 128:
                total += value
    return total


def sum_unrolled(vals: Sequence[int], iterations: int = OUTER_ITERATIONS) -> int:
    """Same as ``sum_plain``, four elements per step with a scalar tail."""
    _check_iterations(iterations)
    body = len(vals) // 4 * 4
    total = 0
    for _ in range(iterations):
        for a, b, c, d in _groups(vals[:body], 4):
            if a >= 128:
                total += a
            if b >= 128:
                total += b
            if c >= 128:
                total += c
            if d >= 128:
                total += d
        for value in vals[body:]:
            if value >= 128:
                total += value
    return total


def _masked_tail(values: Sequence[int]) -> int:
    return sum(value for value in values if value > THRESHOLD)


def sum_simd(vals: Sequence[int], iterations: int = OUTER_ITERATIONS) -> int:
    """Same result, accumulating four lanes at once with masked adds."""
    _check_iterations(iterations)
    body = len(vals) // LANES * LANES
    result = 0
    for _ in range(iterations):
        acc = (0,) * LANES
        for vector in _groups(vals[:body], LANES):
            acc = tuple(lane + (v if v > THRESHOLD else 0) for lane, v in zip(acc, vector))
        result += sum(acc) + _masked_tail(vals[body:])
    return result


def sum_simd_unrolled(vals: Sequence[int], iterations: int = OUTER_ITERATIONS) -> int:
    """Same result, four lane-vectors per step, then a vector and a scalar tail."""
    _check_iterations(iterations)
    wide = len(vals) // (LANES * UNROLL) * (LANES * UNROLL)
    narrow = len(vals) // LANES * LANES
    result = 0
    for _ in range(iterations):
        acc = [0] * LANES
        for block in _groups(vals[:wide], LANES * UNROLL):
            acc = [
                lane + _masked_tail(block[index::LANES]) for index, lane in enumerate(acc)
            ]
        for vector in _groups(vals[wide:narrow], LANES):
            acc = [lane + (v if v > THRESHOLD else 0) for lane, v in zip(acc, vector)]
        result += sum(acc) + _masked_tail(vals[narrow:])
    return result


def _timed(func: Callable[[Sequence[int], int], int], vals: Sequence[int], iterations: int) -> int:
    start = time.process_time()
    result = func(vals, iterations)
    print(f"Time taken: {time.process_time() - start:f} s")
    return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sums")
    parser.add_argument("--iterations", type=int, default=OUTER_ITERATIONS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    print("Let's generate a randomized array.")
    rng = random.Random(args.seed)
    vals = [rng.randrange(256) for _ in range(NUM_ELEMS)]

    print("Starting randomized sum.")
    reference = _timed(sum_plain, vals, args.iterations)
    print(f"Sum: {reference}")

    print("Starting randomized unrolled sum.")
    print(f"Sum: {_timed(sum_unrolled, vals, args.iterations)}")

    print("Starting randomized SIMD sum.")
    simd = _timed(sum_simd, vals, args.iterations)
    print(f"Sum: {simd}")
    if simd != reference:
        print(f"OH NO! SIMD sum {simd} doesn't match reference sum {reference}!")

    print("Starting randomized SIMD unrolled sum.")
    simdu = _timed(sum_simd_unrolled, vals, args.iterations)
    print(f"Sum: {simdu}")
    if simdu != reference:
        print(f"OH NO! SIMD_UNROLLED sum {simdu} doesn't match reference sum {reference}!")
    return 0


if __name__ == "__main__":
    sys.exit(main())