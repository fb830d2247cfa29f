"""Chiton: the lowest-risk path across a cavern."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from pathlib import Path
from typing import Sequence

Grid = Sequence[Sequence[int]]
FULL_TILES = 5


def parse_risk(text: str) -> list[list[int]]:
    """Read rows of single-digit risk levels up to the first blank line."""
    grid = []
    for raw in text.splitlines():
        line = raw.split("\r", 1)[0].strip()
        if not line:
            break
        if not line.isdigit():
            raise ValueError(f"malformed row: {line!r}")
        grid.append([int(char) for char in line])
    _check_grid(grid)
    return grid


def _check_grid(grid: Grid) -> None:
    if not grid or not grid[0]:
        raise ValueError("the map is empty")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("rows differ in length")


def right_down_risk(grid: Grid) -> int:
    """Lowest total risk from top left to bottom right moving only right or down."""
    _check_grid(grid)
    best = [[0] * len(row) for row in grid]
    for r, row in enumerate(grid):
        for c, risk in enumerate(row):
            if r == 0 and c == 0:
                continue
            above = best[r - 1][c] if r > 0 else math.inf
            left = best[r][c - 1] if c > 0 else math.inf
            best[r][c] = min(above, left) + risk
    return best[-1][-1]


def expand_map(grid: Grid, times: int = FULL_TILES) -> list[list[int]]:
    """Tile the map ``times`` by ``times``, each tile right or down one higher, 9 wrapping to 1."""
    if times < 1:
        raise ValueError("times must be at least 1")
    _check_grid(grid)
    return [
        [(value + tile_row + tile_col - 1) % 9 + 1 for tile_col in range(times) for value in row]
        for tile_row in range(times)
        for row in grid
    ]


def lowest_risk(grid: Grid) -> int:
    """Lowest total risk from top left to bottom right moving in any direction."""
    _check_grid(grid)
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)
    best = {(0, 0): 0}
    visited: set[tuple[int, int]] = set()
    queue = [(0, 0, 0)]
    while queue:
        risk, r, c = heapq.heappop(queue)
        if (r, c) in visited:
            continue
        visited.add((r, c))
        if (r, c) == target:
            return risk
        for nr, nc in ((r - 1, c), (r, c - 1), (r + 1, c), (r, c + 1)):
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in visited:
                total = risk + grid[nr][nc]
                if total < best.get((nr, nc), math.inf):
                    best[(nr, nc)] = total
                    heapq.heappush(queue, (total, nr, nc))
    raise ValueError("the bottom right corner cannot be reached")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Find the safest path through the cavern.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        grid = parse_risk(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    if options.part in (None, 1):
        print(f"Minimum calculated risk level: {right_down_risk(grid)}")
    if options.part in (None, 2):
        print(f"Minimum calculated risk level: {lowest_risk(expand_map(grid))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())