import random

import pytest

from algolab.select import insertion_sort, main, partition, select

SOURCE = [1, 33, 7, 3, 51, 10, 6, 13, 2, 64, 103, 9, 4, 24]


def _lists():
    rng = random.Random(5)
    return [
        SOURCE,
        [42],
        [3, 3, 3, 3, 3, 3, 3],
        [rng.randint(0, 9) for _ in range(37)],
        [rng.randint(-500, 500) for _ in range(101)],
    ]


@pytest.mark.parametrize("values", _lists())
def test_select_every_rank(values):
    expected = sorted(values)
    for rank in range(len(values)):
        items = list(values)
        assert select(items, rank) == expected[rank]
        assert sorted(items) == expected


@pytest.mark.parametrize("rank", [-1, len(SOURCE)])
def test_select_rank_out_of_range(rank):
    with pytest.raises(IndexError):
        select(list(SOURCE), rank)


def test_select_empty():
    with pytest.raises(IndexError):
        select([], 0)


def test_insertion_sort_subrange():
    values = [9, 8, 7, 6, 5, 4, 3]
    insertion_sort(values, 2, 4)
    assert values == [9, 8] + sorted([7, 6, 5, 4]) + [3]


def test_partition_invariant():
    original = [33, 7, 51, 3, 10, 6, 13, 2, 64]
    values = list(original)
    pivot_value = original[3]
    index = partition(values, 0, len(values) - 1, 3)
    assert values[index] == pivot_value
    assert all(v < pivot_value for v in values[:index])
    assert all(v >= pivot_value for v in values[index + 1 :])
    assert sorted(values) == sorted(original)


def test_main_output(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out
    assert f"The element with rank 3 is {sorted(SOURCE)[3]}" in out


def test_main_rejects_bad_rank():
    assert main([str(len(SOURCE))]) == 1