"""Column-major square matrix multiply in each of the six loop orderings."""

from __future__ import annotations

import argparse
import itertools
import operator
import random
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

ORDERINGS = ("ijk", "ikj", "jik", "jki", "kij", "kji")
DEFAULT_N = 1000


@dataclass(frozen=True)
class OrderingTiming:
    """Throughput measured for one loop ordering."""

    name: str
    n: int
    gflops: float


def mult_mat(
    n: int,
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    order: str = "ijk",
) -> list[float]:
    """Return ``c + a @ b`` for column-major ``n`` by ``n`` matrices.

    The loops run in ``order``, one of ``ORDERINGS``; the outermost index is
    the first letter.
    """
    if order not in ORDERINGS:
        raise ValueError(f"unknown loop order {order!r}; expected one of {ORDERINGS}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    size = n * n
    for label, matrix in (("a", a), ("b", b), ("c", c)):
        if len(matrix) != size:
            raise ValueError(f"matrix {label} has {len(matrix)} elements, expected {size}")
    pick_ijk = operator.itemgetter(*(order.index(letter) for letter in "ijk"))
    result = list(c)
    for indices in itertools.product(range(n), repeat=3):
        i, j, k = pick_ijk(indices)
        result[i + j * n] += a[i + k * n] * b[k + j * n]
    return result


def benchmark_orderings(n: int = DEFAULT_N, seed: int | None = None) -> list[OrderingTiming]:
    """Time every ordering on random matrices, accumulating into one result."""
    rng = random.Random(seed)
    a = [rng.random() * 2 - 1 for _ in range(n * n)]
    b = [rng.random() * 2 - 1 for _ in range(n * n)]
    c = [rng.random() * 2 - 1 for _ in range(n * n)]
    timings = []
    for name in ORDERINGS:
        start = time.perf_counter()
        c = mult_mat(n, a, b, c, name)
        seconds = time.perf_counter() - start
        gflops = 2e-9 * n * n * n / seconds if seconds > 0 else float("inf")
        timings.append(OrderingTiming(name, n, gflops))
    return timings


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="matmul")
    parser.add_argument("-n", type=int, default=DEFAULT_N, help="matrix dimension")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    for timing in benchmark_orderings(args.n, args.seed):
        print(f"{timing.name}:\tn = {timing.n}, {timing.gflops:.3f} Gflop/s")
    print("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())