"""Sonar sweep: count how often depth readings increase."""

from __future__ import annotations

import argparse
import sys
from itertools import pairwise
from pathlib import Path
from typing import Sequence


def parse_depths(text: str) -> list[int]:
    """Read one depth per line, ignoring blank lines."""
    return [int(token) for token in text.split()]


def count_increases(depths: Sequence[int]) -> int:
    """Number of readings larger than the one before."""
    return sum(after > before for before, after in pairwise(depths))


def count_window_increases(depths: Sequence[int]) -> int:
    """Number of three-reading window sums larger than the window before."""
    return sum(new > old for old, new in zip(depths, depths[3:]))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count depth increases.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        depths = parse_depths(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    if options.part in (None, 1):
        print(count_increases(depths))
    if options.part in (None, 2):
        print(count_window_increases(depths))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())