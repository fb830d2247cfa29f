"""Hydrothermal venture: count points where vent lines overlap."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator

Point = tuple[int, int]
Segment = tuple[Point, Point]


def _point(text: str) -> Point:
    x, y = (int(part) for part in text.split(","))
    return x, y


def parse_segments(text: str) -> list[Segment]:
    """Read "x1,y1 -> x2,y2" lines, skipping blank ones."""
    segments = []
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            start, end = line.split("->")
            segments.append((_point(start), _point(end)))
        except ValueError:
            raise ValueError(f"malformed segment: {line!r}") from None
    return segments


def _points(segment: Segment, diagonals: bool) -> Iterator[Point]:
    (x1, y1), (x2, y2) = segment
    if x1 == x2:
        low, high = sorted((y1, y2))
        for y in range(low, high + 1):
            yield x1, y
    elif y1 == y2:
        low, high = sorted((x1, x2))
        for x in range(low, high + 1):
            yield x, y1
    elif diagonals:
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        step = 1 if y1 < y2 else -1
        for offset in range(x2 - x1 + 1):
            yield x1 + offset, y1 + step * offset


def count_overlaps(segments: Iterable[Segment], diagonals: bool = False) -> int:
    """Number of points covered by at least two segments."""
    counts = Counter(point for segment in segments for point in _points(segment, diagonals))
    return sum(count >= 2 for count in counts.values())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count overlapping vent lines.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        segments = parse_segments(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    if options.part in (None, 1):
        print(f"Intersections: {count_overlaps(segments)}")
    if options.part in (None, 2):
        print(f"Intersections: {count_overlaps(segments, diagonals=True)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())