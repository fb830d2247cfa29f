"""Seven segment search: work out scrambled digit wiring and read the displays."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from pathlib import Path
from typing import Callable, Iterable


def _pick(candidates: list[str], predicate: Callable[[str], bool], what: str) -> str:
    found = [word for word in candidates if predicate(word)]
    if len(found) != 1:
        raise ValueError(f"cannot identify {what}")
    return found[0]


def _only(by_length: dict[int, list[str]], length: int, digit: int) -> str:
    words = by_length[length]
    if len(words) != 1:
        raise ValueError(f"expected one pattern of length {length} for {digit}")
    return words[0]


def decode_patterns(patterns: Iterable[str]) -> dict[str, int]:
    """Map each of the ten patterns, letters sorted, to the digit it shows."""
    words = ["".join(sorted(pattern)) for pattern in patterns]
    if len(words) != 10 or len(set(words)) != 10:
        raise ValueError("expected ten distinct patterns")
    by_length: dict[int, list[str]] = defaultdict(list)
    for word in words:
        by_length[len(word)].append(word)

    one = _only(by_length, 2, 1)
    seven = _only(by_length, 3, 7)
    four = _only(by_length, 4, 4)
    eight = _only(by_length, 7, 8)
    sixes = by_length[6]
    fives = by_length[5]
    if len(sixes) != 3 or len(fives) != 3:
        raise ValueError("expected three patterns each of lengths 5 and 6")

    six = _pick(sixes, lambda word: not set(one) <= set(word), "6")
    upper_right = (set(one) - set(six)).pop()
    five = _pick(fives, lambda word: upper_right not in word, "5")
    lower_left_set = set(six) - set(five)
    if len(lower_left_set) != 1:
        raise ValueError("cannot identify the lower left segment")
    lower_left = lower_left_set.pop()

    other_sixes = [word for word in sixes if word != six]
    nine = _pick(other_sixes, lambda word: lower_left not in word, "9")
    zero = next(word for word in other_sixes if word != nine)
    other_fives = [word for word in fives if word != five]
    three = _pick(other_fives, lambda word: lower_left not in word, "3")
    two = next(word for word in other_fives if word != three)

    digits = (zero, one, two, three, four, five, six, seven, eight, nine)
    return {word: digit for digit, word in enumerate(digits)}


def decode_entry(line: str) -> int:
    """Read "ten patterns | output digits" and return the output as a number."""
    if "|" not in line:
        raise ValueError(f"missing separator: {line!r}")
    left, right = line.split("|", 1)
    mapping = decode_patterns(left.split())
    value = 0
    for output in right.split():
        key = "".join(sorted(output))
        if key not in mapping:
            raise ValueError(f"unknown output pattern {output!r}")
        value = value * 10 + mapping[key]
    return value


def total_output(lines: Iterable[str]) -> int:
    """Sum of the decoded outputs of all non-blank lines."""
    return sum(decode_entry(line) for line in lines if line.strip())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Decode seven-segment displays.")
    parser.add_argument("path")
    options = parser.parse_args(argv)
    try:
        lines = Path(options.path).read_text().splitlines()
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    try:
        total = total_output(lines)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"The total is: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())