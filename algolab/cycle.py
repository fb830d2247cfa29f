"""Singly linked lists that may loop back on themselves, and loop detection."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

USAGE = (
    "Usage:\n"
    "\t-h\t help\n"
    "\t-f [file]\t specify data stream [mandatory]\n"
    "\t-l[loop index]\t add loop to data [optional] (note: no space)\n"
    "\t-a [algorithm]\t specify algorithm (Floyd/Brent) [optional]"
)


@dataclass(eq=False)
class Node:
    """One element of a singly linked list."""

    data: int = 0
    next: Node | None = None

    def __str__(self) -> str:
        return str(self.data)


@dataclass(frozen=True)
class CycleInfo:
    """Where a loop starts (as an element index) and how many nodes it holds."""

    start: int
    length: int


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Yield each node reachable from ``head`` once, stopping when the list loops."""
    seen: set[Node] = set()
    node = head
    while node is not None and node not in seen:
        seen.add(node)
        yield node
        node = node.next


def find_node(head: Node | None, value: int) -> Node | None:
    """Return the first node holding ``value``, or None."""
    return next((node for node in iter_nodes(head) if node.data == value), None)


def build_list(values: Iterable[int]) -> Node:
    """Link ``values`` into a list; a repeated value links back to its first node and ends the list."""
    items = iter(values)
    try:
        head = Node(next(items))
    except StopIteration:
        raise ValueError("cannot build a list from no values") from None
    by_value = {head.data: head}
    tail = head
    for value in items:
        existing = by_value.get(value)
        if existing is not None:
            tail.next = existing
            break
        tail.next = Node(value)
        tail = tail.next
        by_value[value] = tail
    return head


def read_list(path: str | Path) -> Node:
    """Read whitespace-separated integers from a file and link them into a list."""
    values = []
    for token in Path(path).read_text().split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return build_list(values)


def add_tail_loop(head: Node | None, loop_dest: int) -> None:
    """Point the tail at the node with index ``loop_dest``, or at itself if there is none."""
    if head is None:
        return
    visited: set[Node] = set()
    dest = None
    node = head
    index = 0
    while node.next is not None:
        if node in visited:
            raise ValueError("the list already loops")
        visited.add(node)
        if index == loop_dest:
            dest = node
        node = node.next
        index += 1
    node.next = dest if dest is not None else node


def _advance(node: Node) -> Node:
    if node.next is None:
        raise ValueError("the list does not loop")
    return node.next


def floyd(head: Node) -> CycleInfo:
    """Locate the loop with Floyd's tortoise and hare."""
    tortoise = _advance(head)
    hare = _advance(_advance(head))
    while tortoise.data != hare.data:
        tortoise = _advance(tortoise)
        hare = _advance(_advance(hare))

    tortoise = head
    start = 0
    while tortoise.data != hare.data:
        tortoise = _advance(tortoise)
        hare = _advance(hare)
        start += 1

    length = 1
    hare = _advance(tortoise)
    while tortoise.data != hare.data:
        hare = _advance(hare)
        length += 1
    return CycleInfo(start, length)


def brent(head: Node) -> CycleInfo:
    """Locate the loop with Brent's power-of-two search."""
    power = length = 1
    tortoise = head
    hare = _advance(head)
    while tortoise.data != hare.data:
        if power == length:
            tortoise = hare
            power *= 2
            length = 0
        hare = _advance(hare)
        length += 1

    tortoise = hare = head
    for _ in range(length):
        hare = _advance(hare)

    start = 0
    while tortoise.data != hare.data:
        tortoise = _advance(tortoise)
        hare = _advance(hare)
        start += 1
    return CycleInfo(start, length)


_ALGORITHMS = {"floyd": (floyd, "Floyd"), "brent": (brent, "Brent")}


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _UsageError(message)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print(USAGE)
        return 1

    parser = _Parser(add_help=False)
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-f", dest="file")
    parser.add_argument("-l", dest="loop", nargs="?", const=0, type=int)
    parser.add_argument("-a", dest="algorithm", default="floyd")
    try:
        options = parser.parse_args(args)
    except _UsageError:
        print(USAGE)
        return 1

    if options.help:
        print(USAGE)
        return 0
    if options.file is None:
        print("Error: no data file specified")
        print(USAGE)
        return 1

    try:
        head = read_list(options.file)
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if options.loop is not None:
        add_tail_loop(head, options.loop)

    choice = _ALGORITHMS.get(options.algorithm.lower())
    if choice is None:
        print("Error: Unknown algorithm specified")
        print(USAGE)
        return 1
    detect, name = choice

    try:
        info = detect(head)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(
        f"{name}'s algorithm found a loop starting at element index {info.start} "
        f"with loop length {info.length}."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())