"""Lanternfish: count a population whose members spawn on a timer."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from pathlib import Path
from typing import Iterable

NEW_TIMER = 8
RESET_TIMER = 6
PART_DAYS = {1: 80, 2: 256}


def parse_timers(text: str) -> list[int]:
    """Read comma-separated timer values."""
    return [int(token) for token in text.strip().split(",") if token.strip()]


def simulate(timers: Iterable[int], days: int) -> int:
    """Number of fish after ``days`` days."""
    if days < 0:
        raise ValueError("days must not be negative")
    counts = deque([0] * (NEW_TIMER + 1))
    for timer in timers:
        if not 0 <= timer <= NEW_TIMER:
            raise ValueError(f"timer {timer} is out of range")
        counts[timer] += 1
    for _ in range(days):
        counts.rotate(-1)
        counts[RESET_TIMER] += counts[NEW_TIMER]
    return sum(counts)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate lanternfish growth.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    parser.add_argument("--days", type=int)
    options = parser.parse_args(argv)
    try:
        timers = parse_timers(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    if options.days is not None:
        spans = [options.days]
    elif options.part is not None:
        spans = [PART_DAYS[options.part]]
    else:
        spans = list(PART_DAYS.values())
    try:
        for days in spans:
            print(f"Total fish after {days} days: {simulate(timers, days)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())