"""Smoke basin: low points and basins of a height map."""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import Iterator, Sequence

Grid = Sequence[Sequence[int]]
BASIN_EDGE = 9


def parse_heightmap(text: str) -> list[list[int]]:
    """Read rows of single-digit heights, skipping blank lines."""
    grid = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        word = parts[0]
        if not word.isdigit():
            raise ValueError(f"malformed row: {line!r}")
        grid.append([int(char) for char in word])
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("rows differ in length")
    return grid


def _neighbours(grid: Grid, row: int, col: int) -> Iterator[tuple[int, int]]:
    for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield r, c


def risk_level_sum(grid: Grid) -> int:
    """Sum of one plus the height of every point lower than all its neighbours."""
    return sum(
        height + 1
        for row, heights in enumerate(grid)
        for col, height in enumerate(heights)
        if all(grid[r][c] > height for r, c in _neighbours(grid, row, col))
    )


def basin_sizes(grid: Grid) -> list[int]:
    """Sizes of the regions bounded by height 9, in the order they are first met."""
    seen: set[tuple[int, int]] = set()
    sizes = []
    for row, heights in enumerate(grid):
        for col, height in enumerate(heights):
            if height == BASIN_EDGE or (row, col) in seen:
                continue
            seen.add((row, col))
            stack = [(row, col)]
            size = 0
            while stack:
                cell = stack.pop()
                size += 1
                for r, c in _neighbours(grid, *cell):
                    if grid[r][c] != BASIN_EDGE and (r, c) not in seen:
                        seen.add((r, c))
                        stack.append((r, c))
            sizes.append(size)
    return sizes


def largest_basins_product(grid: Grid) -> int:
    """Product of the sizes of the (up to) three largest basins."""
    return math.prod(sorted(basin_sizes(grid), reverse=True)[:3])


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Find low points and basins.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        grid = parse_heightmap(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    if options.part in (None, 1):
        print(f"Total: {risk_level_sum(grid)}")
    if options.part in (None, 2):
        print(f"Three Largest Basins: {largest_basins_product(grid)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())