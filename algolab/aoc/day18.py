"""Snailfish numbers: nested pairs that are added and then reduced."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence

MAX_DEPTH = 4
SPLIT_ABOVE = 9
DIGITS = "0123456789"


@dataclass(eq=False)
class Pair:
    """A regular number (``value``) or a pair of two snailfish numbers."""

    value: int | None = None
    left: Pair | None = None
    right: Pair | None = None

    def __post_init__(self) -> None:
        if self.value is None and (self.left is None or self.right is None):
            raise ValueError("a pair needs a value or two halves")

    @property
    def is_literal(self) -> bool:
        return self.value is not None


def _parse(text: str, pos: int) -> tuple[Pair, int]:
    if pos >= len(text):
        raise ValueError("An error has occured while parsing")
    char = text[pos]
    if char in DIGITS:
        return Pair(int(char)), pos + 1
    if char != "[":
        raise ValueError(f"unexpected {char!r} at position {pos}")
    left, pos = _parse(text, pos + 1)
    _expect(text, pos, ",")
    right, pos = _parse(text, pos + 1)
    _expect(text, pos, "]")
    return Pair(left=left, right=right), pos + 1


def _expect(text: str, pos: int, char: str) -> None:
    if pos >= len(text) or text[pos] != char:
        raise ValueError(f"expected {char!r} at position {pos}")


def parse_pair(text: str) -> Pair:
    """Read a snailfish number such as "[[1,2],3]"."""
    text = text.strip()
    pair, end = _parse(text, 0)
    if end != len(text):
        raise ValueError(f"unexpected text after position {end}")
    return pair


def format_pair(pair: Pair) -> str:
    """Write a snailfish number back in bracket notation."""
    if pair.is_literal:
        return str(pair.value)
    return f"[{format_pair(pair.left)},{format_pair(pair.right)}]"


@dataclass
class _Pass:
    previous: list[Pair] = field(default_factory=list)
    pending: int | None = None


def _resolve(node: Pair, depth: int, state: _Pass) -> bool:
    if node.is_literal:
        if state.pending is not None:
            node.value += state.pending
            state.pending = None
            return True
        if node.value > SPLIT_ABOVE:
            half = node.value // 2
            node.left = Pair(half)
            node.right = Pair(node.value - half)
            node.value = None
            return True
        state.previous.append(node)
        return False
    if depth > MAX_DEPTH:
        left, right = node.left, node.right
        if not (left.is_literal and right.is_literal):
            raise ValueError("cannot explode a pair that holds pairs")
        state.pending = right.value
        if state.previous:
            state.previous[-1].value += left.value
        node.value = 0
        node.left = node.right = None
        return False
    return _resolve(node.left, depth + 1, state) or _resolve(node.right, depth + 1, state)


def _reduce_steps(pair: Pair) -> Iterator[Pair]:
    while True:
        state = _Pass()
        changed = _resolve(pair, 1, state)
        if not changed and state.pending is None:
            return
        yield pair


def reduce_pair(pair: Pair) -> Pair:
    """Explode and split ``pair`` in place until nothing changes; return it."""
    for _ in _reduce_steps(pair):
        pass
    return pair


def add_all(pairs: Sequence[Pair]) -> Pair:
    """Add the numbers left to right, reducing after each addition."""
    if not pairs:
        raise ValueError("no numbers to add")
    total = pairs[0]
    for pair in pairs[1:]:
        total = reduce_pair(Pair(left=total, right=pair))
    return total


def _read_pairs(text: str) -> list[Pair]:
    pairs = []
    for raw in text.splitlines():
        line = raw.split("\r", 1)[0].strip()
        if not line:
            break
        pairs.append(parse_pair(line))
    if not pairs:
        raise ValueError("no numbers to add")
    return pairs


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Add snailfish numbers.")
    parser.add_argument("path")
    options = parser.parse_args(argv)
    try:
        text = Path(options.path).read_text()
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    try:
        pairs = _read_pairs(text)
        total = pairs[0]
        print(format_pair(total))
        for pair in pairs[1:]:
            total = Pair(left=total, right=pair)
            print(f"New Pair: {format_pair(total)}")
            for _ in _reduce_steps(total):
                print(format_pair(total))
            print(format_pair(total))
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())