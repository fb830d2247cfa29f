"""Binary max-heaps: heap sort and a bounded max priority queue."""

from __future__ import annotations

import argparse
import math
from typing import Iterable, MutableSequence

DEFAULT_CAPACITY = 101
SAMPLE = [1, 33, 7, 3, 51, 10, 6, 13, 2, 64, 103, 9, 4, 24]


class HeapError(Exception):
    """Raised when a heap operation cannot be carried out."""


def format_array(items: Iterable) -> str:
    """Join items with ", "."""
    return ", ".join(str(item) for item in items)


def max_heapify(items: MutableSequence, heap_size: int, node: int) -> None:
    """Sift ``items[node]`` down until its subtree within ``heap_size`` is a max-heap."""
    while True:
        left, right = 2 * node + 1, 2 * node + 2
        largest = node
        if left < heap_size and items[left] > items[largest]:
            largest = left
        if right < heap_size and items[right] > items[largest]:
            largest = right
        if largest == node:
            return
        items[node], items[largest] = items[largest], items[node]
        node = largest


def build_max_heap(items: MutableSequence, heap_size: int) -> None:
    """Arrange the first ``heap_size`` items into a max-heap."""
    for node in reversed(range(heap_size // 2)):
        max_heapify(items, heap_size, node)


def heap_sort(items: MutableSequence) -> None:
    """Sort ``items`` in place in ascending order."""
    build_max_heap(items, len(items))
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        max_heapify(items, end, 0)


class MaxPriorityQueue:
    """A max priority queue kept in a list, holding fewer than ``capacity`` keys."""

    def __init__(self, items: Iterable = (), capacity: int = DEFAULT_CAPACITY):
        self._items = list(items)
        self._capacity = capacity
        if len(self._items) >= capacity:
            raise HeapError("too many items for the heap's capacity")
        build_max_heap(self._items, len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def increase_key(self, node: int, new_key) -> None:
        """Raise the key at index ``node`` to ``new_key`` and restore the heap."""
        if not 0 <= node < len(self._items):
            raise IndexError("node index out of range")
        if self._items[node] > new_key:
            raise HeapError("new key does not exceed the key of the requested node")
        items = self._items
        items[node] = new_key
        while node > 0:
            parent = (node - 1) // 2
            if items[node] <= items[parent]:
                break
            items[node], items[parent] = items[parent], items[node]
            node = parent

    def insert(self, new_key) -> None:
        """Add ``new_key`` to the queue."""
        if len(self._items) + 1 >= self._capacity:
            raise HeapError("heap is full")
        self._items.append(-math.inf)
        self.increase_key(len(self._items) - 1, new_key)

    def maximum(self):
        """Return the largest key without removing it."""
        if not self._items:
            raise HeapError("heap underflow")
        return self._items[0]

    def extract_max(self):
        """Remove and return the largest key."""
        top = self.maximum()
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            max_heapify(self._items, len(self._items), 0)
        return top


def _sort_demo() -> None:
    values = list(SAMPLE)
    print(f"Original array: {format_array(values)}")
    heap_sort(values)
    print(f"Sorted array: {format_array(values)}")


def _queue_demo() -> None:
    print(f"Original array: {format_array(SAMPLE)}")
    queue = MaxPriorityQueue(SAMPLE)
    print(f"Priority queue as an array: {format_array(queue._items)}")
    print(f"The current max is: {queue.maximum()}")
    insert_num = 150
    print(f"Inserting {insert_num} into priority queue")
    queue.insert(insert_num)
    print(f"Priority queue after {insert_num} was added: {format_array(queue._items)}")
    print("Extracting max")
    print(f"The extracted max was: {queue.extract_max()}")
    print(f"The priority queue after extraction is: {format_array(queue._items)}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Heap sort and priority queue demonstrations.")
    parser.add_argument("demo", nargs="?", choices=("sort", "queue"), default=None)
    options = parser.parse_args(argv)
    if options.demo in (None, "sort"):
        _sort_demo()
    if options.demo in (None, "queue"):
        _queue_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())