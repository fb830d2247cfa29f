"""Dumbo octopus: energy levels that flash and spread to neighbours."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator

FLASH_LEVEL = 10
DEFAULT_STEPS = 100


def parse_grid(text: str) -> list[list[int]]:
    """Read rows of single-digit energy levels."""
    grid = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if not parts[0].isdigit():
            raise ValueError(f"malformed row: {line!r}")
        grid.append([int(char) for char in parts[0]])
    if not grid:
        raise ValueError("the grid is empty")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("rows differ in length")
    return grid


def _neighbours(grid: list[list[int]], row: int, col: int) -> Iterator[tuple[int, int]]:
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == dc == 0:
                continue
            r, c = row + dr, col + dc
            if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
                yield r, c


def step(grid: list[list[int]]) -> int:
    """Advance the grid in place by one step; return how many octopuses flashed."""
    for row in grid:
        row[:] = [level + 1 for level in row]
    flashes = 0
    for row, levels in enumerate(grid):
        for col in range(len(levels)):
            if grid[row][col] != FLASH_LEVEL:
                continue
            grid[row][col] = 0
            flashes += 1
            pending = [(row, col)]
            while pending:
                cell = pending.pop()
                for r, c in _neighbours(grid, *cell):
                    if grid[r][c] == 0:
                        continue
                    grid[r][c] += 1
                    if grid[r][c] >= FLASH_LEVEL:
                        grid[r][c] = 0
                        flashes += 1
                        pending.append((r, c))
    return flashes


def _copy(grid: list[list[int]]) -> list[list[int]]:
    if not grid or not grid[0]:
        raise ValueError("the grid is empty")
    return [list(row) for row in grid]


def count_flashes(grid: list[list[int]], steps: int = DEFAULT_STEPS) -> int:
    """Total flashes over ``steps`` steps, leaving ``grid`` unchanged."""
    work = _copy(grid)
    return sum(step(work) for _ in range(steps))


def first_synchronized_step(grid: list[list[int]]) -> int:
    """The first step on which every octopus flashes."""
    work = _copy(grid)
    cells = sum(len(row) for row in work)
    count = 1
    while step(work) != cells:
        count += 1
    return count


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate flashing octopuses.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    options = parser.parse_args(argv)
    try:
        grid = parse_grid(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    if options.part in (None, 1):
        print(f"Flash count: {count_flashes(grid, options.steps)}")
    if options.part in (None, 2):
        print(f"Everyone flashed at: {first_synchronized_step(grid)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())