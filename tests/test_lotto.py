import random

import pytest

from hdlab.lotto import draw_lotto, draw_unique, main


def test_draw_unique_invariants():
    numbers = draw_unique(6, 1, 91, random.Random(1))
    assert len(numbers) == 6
    assert len(set(numbers)) == 6
    assert numbers == sorted(numbers)
    assert all(1 <= n < 91 for n in numbers)


def test_draw_whole_range():
    assert draw_unique(5, 10, 15, random.Random(2)) == [10, 11, 12, 13, 14]


def test_same_seed_same_result():
    first = draw_lotto(rng=random.Random(42))
    second = draw_lotto(rng=random.Random(42))
    assert first == second
    assert len(first) == 5
    assert all(len(d) == 6 and d == sorted(d) for d in first)


def test_draw_lotto_shape():
    drawings = draw_lotto(3, 4, 1, 20, random.Random(0))
    assert len(drawings) == 3
    assert all(len(d) == 4 and len(set(d)) == 4 for d in drawings)


@pytest.mark.parametrize(
    "count, lo, hi", [(7, 1, 7), (-1, 1, 10), (1, 5, 5), (1, 6, 5)]
)
def test_invalid_requests(count, lo, hi):
    with pytest.raises(ValueError):
        draw_unique(count, lo, hi)


def test_main_output(capsys):
    assert main(["--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("Ziehung  1: ")
    for line in lines:
        numbers = [int(n) for n in line.split(":", 1)[1].split()]
        assert len(numbers) == 6
        assert numbers == sorted(numbers)
        assert all(1 <= n <= 90 for n in numbers)