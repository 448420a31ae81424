"""Element-wise vector addition split across threads, plus a threaded greeting."""

from __future__ import annotations

import argparse
import os
import random
import sys
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

ARRAY_SIZE = 10_000_000
REPEAT = 100

AddFunc = Callable[[Sequence[float], Sequence[float], int], list[float]]


def _check(x: Sequence[float], y: Sequence[float], threads: int) -> None:
    if threads < 1:
        raise ValueError(f"threads must be positive, got {threads}")
    if len(x) != len(y):
        raise ValueError(f"length mismatch: {len(x)} and {len(y)}")


def _chunk_bounds(n: int, parts: int) -> list[tuple[int, int]]:
    """Split ``range(n)`` into ``parts`` contiguous, near-equal pieces."""
    size, extra = divmod(n, parts)
    bounds = []
    for part in range(parts):
        start = part * size + min(part, extra)
        bounds.append((start, start + size + (part < extra)))
    return bounds


def _run(threads: int, task: Callable[[int], object]) -> list[object]:
    with ThreadPoolExecutor(max_workers=threads) as pool:
        return list(pool.map(task, range(threads)))


def gen_array(n: int, rng: random.Random | None = None) -> list[float]:
    """Return ``n`` uniform values in [0, 1)."""
    rng = rng or random.Random()
    return [rng.random() for _ in range(n)]


def v_add_naive(x: Sequence[float], y: Sequence[float], threads: int = 1) -> list[float]:
    """Add ``x`` and ``y``; every thread redundantly computes the whole sum."""
    _check(x, y, threads)
    z = [0.0] * len(x)

    def work(_: int) -> None:
        z[:] = [a + b for a, b in zip(x, y)]

    _run(threads, work)
    return z


def v_add_optimized_adjacent(
    x: Sequence[float], y: Sequence[float], threads: int = 1
) -> list[float]:
    """Add ``x`` and ``y``; thread ``t`` handles every ``threads``-th element from ``t``."""
    _check(x, y, threads)
    z = [0.0] * len(x)

    def work(t: int) -> None:
        z[t::threads] = [a + b for a, b in zip(x[t::threads], y[t::threads])]

    _run(threads, work)
    return z


def v_add_optimized_chunks(
    x: Sequence[float], y: Sequence[float], threads: int = 1
) -> list[float]:
    """Add ``x`` and ``y``; each thread handles one contiguous chunk."""
    _check(x, y, threads)
    z = [0.0] * len(x)
    bounds = _chunk_bounds(len(x), threads)

    def work(t: int) -> None:
        start, stop = bounds[t]
        z[start:stop] = [a + b for a, b in zip(x[start:stop], y[start:stop])]

    _run(threads, work)
    return z


def verify(x: Sequence[float], y: Sequence[float], func: AddFunc, threads: int = 1) -> bool:
    """Return True if ``func`` gives exactly the element-wise sum."""
    oracle = [a + b for a, b in zip(x, y)]
    return func(x, y, threads) == oracle


def parallel_hello(threads: int | None = None) -> list[str]:
    """Greet from each of ``threads`` threads; lines come in completion order."""
    threads = threads if threads is not None else os.cpu_count() or 1
    if threads < 1:
        raise ValueError(f"threads must be positive, got {threads}")
    lines: list[str] = []
    lock = threading.Lock()

    def work(thread_id: int) -> None:
        with lock:
            lines.append(f" hello world {thread_id}")

    _run(threads, work)
    return lines


def _sweep(label: str, func: AddFunc, x, y, repeat: int, max_threads: int, check: bool) -> bool:
    for threads in range(1, max_threads + 1):
        start = time.perf_counter()
        for _ in range(repeat):
            func(x, y, threads)
        run_time = time.perf_counter() - start
        if check and not verify(x, y, func, threads):
            print(f"v_add {label.lower()} does not match oracle")
            return False
        print(f"{label}: {threads} thread(s) took {run_time:f} seconds")
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="vadd")
    parser.add_argument("--size", type=int, default=ARRAY_SIZE)
    parser.add_argument("--repeat", type=int, default=REPEAT)
    parser.add_argument("--max-threads", type=int, default=os.cpu_count() or 1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--hello", action="store_true", help="only greet from each thread")
    args = parser.parse_args(argv)

    if args.hello:
        for line in parallel_hello(args.max_threads):
            print(line)
        return 0

    rng = random.Random(args.seed)
    x = gen_array(args.size, rng)
    y = gen_array(args.size, rng)
    sweeps = (
        ("Optimized adjacent", v_add_optimized_adjacent, True),
        ("Optimized chunks", v_add_optimized_chunks, True),
        ("Naive", v_add_naive, False),
    )
    for label, func, check in sweeps:
        if not _sweep(label, func, x, y, args.repeat, args.max_threads, check):
            return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())