"""Passage pathing: count routes through a cave system."""

from __future__ import annotations

import argparse
import sys
from collections import Counter, defaultdict
from pathlib import Path
from typing import Mapping, Sequence

START = "start"
END = "end"

Adjacency = Mapping[str, Sequence[str]]


def parse_caves(text: str) -> dict[str, list[str]]:
    """Read "a-b" lines into an undirected adjacency list."""
    adjacency: dict[str, list[str]] = defaultdict(list)
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        ends = parts[0].split("-")
        if len(ends) != 2 or not all(ends):
            raise ValueError(f"malformed passage: {line!r}")
        first, second = ends
        adjacency[first].append(second)
        adjacency[second].append(first)
    return dict(adjacency)


def _is_big(cave: str) -> bool:
    return cave[0] <= "Z"


def _walk(adjacency: Adjacency, visits: Counter, current: str, revisit_used: bool) -> int:
    if current == END:
        return 1
    visits[current] += 1
    count = 0
    for cave in adjacency.get(current, ()):
        if cave == START:
            continue
        if not _is_big(cave) and visits[cave]:
            if not revisit_used:
                count += _walk(adjacency, visits, cave, True)
            continue
        count += _walk(adjacency, visits, cave, revisit_used)
    visits[current] -= 1
    return count


def count_paths(adjacency: Adjacency) -> int:
    """Paths from start to end visiting each small cave at most once."""
    return _walk(adjacency, Counter(), START, True)


def count_paths_with_revisit(adjacency: Adjacency) -> int:
    """Paths from start to end where one small cave may be visited twice."""
    return _walk(adjacency, Counter(), START, False)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count paths through the caves.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        adjacency = parse_caves(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    if options.part in (None, 1):
        print(f"There were {count_paths(adjacency)} paths through the cave system")
    if options.part in (None, 2):
        print(f"There were {count_paths_with_revisit(adjacency)} paths through the cave system")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())