"""Treachery of whales: align crab positions with the least fuel."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence


def parse_positions(text: str) -> list[int]:
    """Read comma-separated positions."""
    return [int(token) for token in text.strip().split(",") if token.strip()]


def median_alignment(positions: Sequence[int]) -> tuple[int, int]:
    """Best position and total fuel when each step costs one unit."""
    if not positions:
        raise ValueError("no positions given")
    ordered = sorted(positions)
    location = ordered[(len(ordered) - 1) // 2]
    return location, sum(abs(position - location) for position in positions)


def _triangular_cost(positions: Sequence[int], location: int) -> int:
    return sum(
        distance * (distance + 1) // 2
        for distance in (abs(position - location) for position in positions)
    )


def triangular_alignment(positions: Sequence[int]) -> tuple[int, int]:
    """Best position and total fuel when the n-th step costs n units."""
    if not positions:
        raise ValueError("no positions given")
    lower = int(sum(positions) / len(positions))
    upper = lower + 1
    lower_cost = _triangular_cost(positions, lower)
    upper_cost = _triangular_cost(positions, upper)
    if lower_cost < upper_cost:
        return lower, lower_cost
    return upper, upper_cost


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Align the crabs.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        positions = parse_positions(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    try:
        if options.part in (None, 1):
            location, fuel = median_alignment(positions)
            print(f"Most efficient fuel location: {location}")
            print(f"This consumes {fuel} units of fuel")
        if options.part in (None, 2):
            location, fuel = triangular_alignment(positions)
            print(f"Minimal fuel found at location {location} with a total of {fuel} units.")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())