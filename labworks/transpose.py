"""Square matrix transposition, naive and cache-blocked, with a checker."""

from __future__ import annotations

import itertools
import random
import re
import sys
import time
from collections.abc import Callable, Sequence

TransposeFunc = Callable[[int, int, Sequence[int]], list[int]]

_USAGE = "Usage: transpose <n> <blocksize>\nExiting."
_INCORRECT = "Error!!!! Transpose does not result in correct answer!!"


def _check_matrix(n: int, src: Sequence[int]) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if len(src) != n * n:
        raise ValueError(f"matrix has {len(src)} elements, expected {n * n}")


def transpose_naive(n: int, blocksize: int, src: Sequence[int]) -> list[int]:
    """Return the transpose of ``src``; ``blocksize`` is ignored."""
    _check_matrix(n, src)
    dst = [0] * (n * n)
    for x, y in itertools.product(range(n), repeat=2):
        dst[y + x * n] = src[x + y * n]
    return dst


def transpose_blocking(n: int, blocksize: int, src: Sequence[int]) -> list[int]:
    """Return the transpose of ``src``, walking it in ``blocksize`` square tiles.

    ``n`` need not be a multiple of ``blocksize``.
    """
    _check_matrix(n, src)
    if blocksize < 1:
        raise ValueError(f"blocksize must be positive, got {blocksize}")
    dst = [0] * (n * n)
    for bx, by in itertools.product(range(0, n, blocksize), repeat=2):
        for x in range(bx, min(bx + blocksize, n)):
            for y in range(by, min(by + blocksize, n)):
                dst[y + x * n] = src[x + y * n]
    return dst


def benchmark(n: int, blocksize: int, transpose: TransposeFunc, description: str = "") -> float:
    """Transpose a random matrix, check the result and return elapsed milliseconds.

    Raises RuntimeError if the result is not the transpose.
    """
    rng = random.Random(time.time())
    src = [rng.getrandbits(31) for _ in range(n * n)]
    start = time.perf_counter()
    dst = transpose(n, blocksize, src)
    seconds = time.perf_counter() - start
    if len(dst) != n * n or any(
        dst[j + i * n] != src[i + j * n] for i, j in itertools.product(range(n), repeat=2)
    ):
        raise RuntimeError(f"{description}: {_INCORRECT}" if description else _INCORRECT)
    return seconds * 1e3


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(_USAGE)
        return 1
    n, blocksize = _atoi(args[0]), _atoi(args[1])
    runs = ((transpose_naive, "naive transpose"), (transpose_blocking, "transpose with blocking"))
    for func, description in runs:
        print(f"Testing {description}: ", end="")
        try:
            millis = benchmark(n, blocksize, func, description)
        except RuntimeError:
            print(_INCORRECT)
            return -1
        except ValueError as error:
            print(error)
            return 1
        print(f"{millis:g} milliseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())