import random

import pytest

from labworks.sums import main, sum_plain, sum_simd, sum_simd_unrolled, sum_unrolled

VARIANTS = [sum_unrolled, sum_simd, sum_simd_unrolled]


@pytest.mark.parametrize("length", range(0, 40))
@pytest.mark.parametrize("func", VARIANTS)
def test_variants_match_plain_for_every_tail(func, length):
    vals = [(index * 37) % 256 for index in range(length)]
    assert func(vals, 2) == sum_plain(vals, 2)


@pytest.mark.parametrize("func", VARIANTS)
def test_variants_match_plain_on_random_data(func):
    rng = random.Random(11)
    vals = [rng.randrange(256) for _ in range(1001)]
    assert func(vals, 3) == sum_plain(vals, 3)


@pytest.mark.parametrize("func", [sum_plain, *VARIANTS])
def test_small_values_are_ignored(func):
    assert func([0, 1, 64, 127] * 5, 4) == 0


@pytest.mark.parametrize("func", [sum_plain, *VARIANTS])
def test_single_large_value(func):
    assert func([128], 1) == 128


def test_sum_scales_with_iterations():
    rng = random.Random(12)
    vals = [rng.randrange(256) for _ in range(77)]
    assert sum_plain(vals, 5) == 5 * sum_plain(vals, 1)


@pytest.mark.parametrize("func", [sum_plain, *VARIANTS])
def test_zero_iterations(func):
    assert func([200, 255], 0) == 0


@pytest.mark.parametrize("func", [sum_plain, *VARIANTS])
def test_negative_iterations_raise(func):
    with pytest.raises(ValueError):
        func([200], -1)


def test_main_reports_matching_sums(capsys):
    assert main(["--iterations", "1", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Let's generate a randomized array.\n")
    sums = {line for line in out.splitlines() if line.startswith("Sum: ")}
    assert len(sums) == 1
    assert out.count("Time taken: ") == 4
    assert "OH NO!" not in out