import random

import pytest

from labworks.transpose import benchmark, main, transpose_blocking, transpose_naive


def _matrix(n, seed=0):
    rng = random.Random(seed)
    return [rng.randrange(1000) for _ in range(n * n)]


def test_naive_small_example():
    assert transpose_naive(2, 1, [1, 2, 3, 4]) == [1, 3, 2, 4]


@pytest.mark.parametrize("n", [0, 1, 2, 5, 7, 16])
def test_naive_round_trip(n):
    src = _matrix(n, n)
    assert transpose_naive(n, 4, transpose_naive(n, 4, src)) == src


@pytest.mark.parametrize(
    "n, blocksize",
    [(1, 1), (4, 2), (5, 2), (7, 3), (10, 4), (9, 20), (12, 12), (13, 5)],
)
def test_blocking_matches_naive(n, blocksize):
    src = _matrix(n, n + blocksize)
    assert transpose_blocking(n, blocksize, src) == transpose_naive(n, blocksize, src)


def test_blocking_round_trip():
    src = _matrix(11, 3)
    assert transpose_blocking(11, 4, transpose_blocking(11, 4, src)) == src


def test_blocking_rejects_bad_blocksize():
    with pytest.raises(ValueError):
        transpose_blocking(3, 0, _matrix(3))


def test_wrong_matrix_size_raises():
    with pytest.raises(ValueError):
        transpose_naive(3, 1, [1, 2, 3])


def test_benchmark_returns_elapsed_time():
    assert benchmark(8, 3, transpose_blocking, "blocking") >= 0.0


def test_benchmark_detects_wrong_transpose():
    def identity(n, blocksize, src):
        return list(src)

    with pytest.raises(RuntimeError, match="does not result in correct answer"):
        benchmark(4, 2, identity, "identity")


def test_main_usage(capsys):
    assert main(["5"]) == 1
    assert capsys.readouterr().out == "Usage: transpose <n> <blocksize>\nExiting.\n"


def test_main_runs_both(capsys):
    assert main(["6", "4"]) == 0
    out = capsys.readouterr().out
    assert "Testing naive transpose: " in out
    assert "Testing transpose with blocking: " in out
    assert out.count("milliseconds") == 2