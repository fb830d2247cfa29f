"""Order statistics: selecting the element of a given rank in linear time."""

from __future__ import annotations

import argparse
import sys
from typing import MutableSequence

from algolab.heap import format_array

GROUP_SIZE = 5
SAMPLE = [1, 33, 7, 3, 51, 10, 6, 13, 2, 64, 103, 9, 4, 24]


def partition(values: MutableSequence, start: int, end: int, pivot: int) -> int:
    """Partition ``values[start:end+1]`` around ``values[pivot]`` and return the pivot's final index."""
    pivot_value = values[pivot]
    values[pivot], values[end] = values[end], values[pivot]
    store = start
    for index in range(start, end):
        if values[index] < pivot_value:
            values[store], values[index] = values[index], values[store]
            store += 1
    values[store], values[end] = values[end], values[store]
    return store


def insertion_sort(values: MutableSequence, start: int, length: int) -> None:
    """Sort the ``length`` values beginning at ``start`` in place."""
    for index in range(start + 1, start + length):
        key = values[index]
        pos = index - 1
        while pos >= start and values[pos] > key:
            values[pos + 1] = values[pos]
            pos -= 1
        values[pos + 1] = key


def _select(values: MutableSequence, start: int, end: int, rank: int):
    while True:
        length = end - start + 1
        if length <= GROUP_SIZE:
            insertion_sort(values, start, length)
            return values[start + rank]

        medians = 0
        for group_start in range(start, end + 1, GROUP_SIZE):
            size = min(GROUP_SIZE, end - group_start + 1)
            insertion_sort(values, group_start, size)
            median = group_start + (size - 1) // 2
            target = start + medians
            values[target], values[median] = values[median], values[target]
            medians += 1

        pivot_value = _select(values, start, start + medians - 1, (medians - 1) // 2)
        split = partition(values, start, end, values.index(pivot_value, start, end + 1))
        offset = split - start
        if rank == offset:
            return values[split]
        if rank < offset:
            end = split - 1
        else:
            rank -= offset + 1
            start = split + 1


def select(values: MutableSequence, rank: int):
    """Return the element of 0-based ``rank`` in sorted order; ``values`` is rearranged."""
    if not 0 <= rank < len(values):
        raise IndexError("rank out of range")
    return _select(values, 0, len(values) - 1, rank)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Select the element of a given rank.")
    parser.add_argument("rank", nargs="?", type=int, default=0)
    options = parser.parse_args(argv)
    values = list(SAMPLE)
    print(format_array(values))
    try:
        value = select(values, options.rank)
    except IndexError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"The element with rank {options.rank} is {value}")
    print(format_array(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())