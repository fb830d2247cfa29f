"""Binary diagnostic: power rates and life-support ratings from bit columns."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Iterator


def _words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        parts = line.split()
        if parts:
            yield parts[0]


def power_rates(lines: Iterable[str]) -> tuple[int, int]:
    """Gamma (majority bits, ties to 0) and epsilon (the complement)."""
    balance: list[int] | None = None
    for word in _words(lines):
        if balance is None:
            balance = [0] * len(word)
        if len(word) > len(balance):
            raise ValueError(f"{word!r} is longer than the first report line")
        for position, char in enumerate(word):
            balance[position] += 1 if char == "1" else -1
    if balance is None:
        raise ValueError("the report is empty")
    gamma = epsilon = 0
    for total in balance:
        gamma = (gamma << 1) | (total > 0)
        epsilon = (epsilon << 1) | (total <= 0)
    return gamma, epsilon


class _TrieNode:
    __slots__ = ("count", "zero", "one")

    def __init__(self) -> None:
        self.count = 0
        self.zero: _TrieNode | None = None
        self.one: _TrieNode | None = None


class BitTrie:
    """A binary trie counting how many words pass through each prefix."""

    def __init__(self, words: Iterable[str] = ()):
        self._root = _TrieNode()
        for word in words:
            self.add(word)

    def add(self, word: str) -> None:
        node = self._root
        for char in word:
            if char == "0":
                if node.zero is None:
                    node.zero = _TrieNode()
                node = node.zero
            elif char == "1":
                if node.one is None:
                    node.one = _TrieNode()
                node = node.one
            else:
                raise ValueError(f"{word!r} is not a binary word")
            node.count += 1

    def most_common(self) -> int:
        """Follow the more common bit at each step, 1 on ties."""
        node, value = self._root, 0
        while node.zero is not None or node.one is not None:
            value <<= 1
            zero, one = node.zero, node.one
            if one is not None and (zero is None or one.count >= zero.count):
                value |= 1
                node = one
            else:
                node = zero
        return value

    def least_common(self) -> int:
        """Follow the less common bit at each step, 0 on ties."""
        node, value = self._root, 0
        while node.zero is not None or node.one is not None:
            value <<= 1
            zero, one = node.zero, node.one
            if zero is not None and (one is None or zero.count <= one.count):
                node = zero
            else:
                value |= 1
                node = one
        return value


def life_support(lines: Iterable[str]) -> tuple[int, int]:
    """Oxygen generator and CO2 scrubber ratings."""
    trie = BitTrie(_words(lines))
    return trie.most_common(), trie.least_common()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Decode the diagnostic report.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        lines = Path(options.path).read_text().splitlines()
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    try:
        if options.part in (None, 1):
            gamma, epsilon = power_rates(lines)
            print(f"Gamma {gamma}")
            print(f"Epsilon {epsilon}")
            print(gamma * epsilon)
        if options.part in (None, 2):
            oxygen, co2 = life_support(lines)
            print(oxygen)
            print(co2)
            print(f"Answer: {oxygen * co2}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())