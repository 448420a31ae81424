"""Threaded dot products and a report that times them against a serial sum."""

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
TOLERANCE = 0.001

__all__ = [
    "gen_array",
    "dotp_naive",
    "dotp_manual_optimized",
    "dotp_reduction_optimized",
    "compute_dotp",
    "main",
]


def gen_array(n: int, rng: random.Random | None = None) -> list[float]:
    """Return ``n`` random floats drawn uniformly from [0, 1)."""
    rng = rng if rng is not None else random.Random()
    return [rng.random() for _ in range(n)]


def _bounds(x: Sequence[float], y: Sequence[float], threads: int) -> list[tuple[int, int]]:
    if threads < 1:
        raise ValueError(f"threads must be positive, got {threads}")
    if len(x) != len(y):
        raise ValueError(f"length mismatch: {len(x)} and {len(y)}")
    size, extra = divmod(len(x), threads)
    bounds = []
    for part in range(threads):
        start = part * size + min(part, extra)
        bounds.append((start, start + size + (part < extra)))
    return bounds


def _run(bounds: list[tuple[int, int]], task: Callable[[tuple[int, int]], float]) -> list[float]:
    with ThreadPoolExecutor(max_workers=len(bounds)) as pool:
        return list(pool.map(task, bounds))


def dotp_naive(x: Sequence[float], y: Sequence[float], threads: int = 1) -> float:
    """Dot product where every single product is added under a shared lock."""
    bounds = _bounds(x, y, threads)
    lock = threading.Lock()
    total = 0.0

    def work(span: tuple[int, int]) -> float:
        nonlocal total
        start, stop = span
        for a, b in zip(x[start:stop], y[start:stop]):
            with lock:
                total += a * b
        return 0.0

    _run(bounds, work)
    return total


def dotp_manual_optimized(x: Sequence[float], y: Sequence[float], threads: int = 1) -> float:
    """Dot product where each thread sums privately and takes the lock once."""
    bounds = _bounds(x, y, threads)
    lock = threading.Lock()
    total = 0.0

    def work(span: tuple[int, int]) -> float:
        nonlocal total
        start, stop = span
        local = sum(a * b for a, b in zip(x[start:stop], y[start:stop]))
        with lock:
            total += local
        return local

    _run(bounds, work)
    return total


def dotp_reduction_optimized(x: Sequence[float], y: Sequence[float], threads: int = 1) -> float:
    """Dot product where per-thread partial sums are reduced at the end."""
    bounds = _bounds(x, y, threads)

    def work(span: tuple[int, int]) -> float:
        start, stop = span
        return sum(a * b for a, b in zip(x[start:stop], y[start:stop]))

    return sum(_run(bounds, work))


def _timed(func, x, y, threads: int, repeat: int) -> tuple[float, float]:
    result = 0.0
    start = time.perf_counter()
    for _ in range(repeat):
        result = func(x, y, threads)
    return result, time.perf_counter() - start


def compute_dotp(
    arr_size: int = ARRAY_SIZE, repeat: int = REPEAT, max_threads: int | None = None
) -> str:
    """Return a timing report for the dot product variants on random vectors.

    The report stops with ``Incorrect result!`` as soon as a variant strays
    from the serial sum by more than ``TOLERANCE``.
    """
    max_threads = max_threads if max_threads is not None else os.cpu_count() or 1
    rng = random.Random()
    x, y = gen_array(arr_size, rng), gen_array(arr_size, rng)
    serial_result = sum(a * b for a, b in zip(x, y))

    lines: list[str] = []
    sweeps = (
        ("Manual Optimized", dotp_manual_optimized),
        ("Reduction Optimized", dotp_reduction_optimized),
    )
    for label, func in sweeps:
        for threads in range(1, max_threads + 1):
            result, run_time = _timed(func, x, y, threads, repeat)
            lines.append(f"{label}: {threads} thread(s) took {run_time:f} seconds\n")
            if abs(serial_result - result) > TOLERANCE:
                lines.append("Incorrect result!\n")
                return "".join(lines)

    _, run_time = _timed(dotp_naive, x, y, 1, repeat)
    lines.append(f"Naive: 1 thread(s) took {run_time:f} seconds\n")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dotp")
    parser.add_argument("--size", type=int, default=ARRAY_SIZE)
    parser.add_argument("--repeat", type=int, default=REPEAT)
    parser.add_argument("--max-threads", type=int, default=None)
    args = parser.parse_args(argv)
    print(compute_dotp(args.size, args.repeat, args.max_threads))
    return 0


if __name__ == "__main__":
    sys.exit(main())