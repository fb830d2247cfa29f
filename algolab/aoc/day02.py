"""Dive: follow submarine movement commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable


def parse_commands(text: str) -> list[tuple[str, int]]:
    """Read "direction amount" lines, skipping blank ones."""
    commands = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2:
            raise ValueError(f"malformed command: {line!r}")
        commands.append((parts[0], int(parts[1])))
    return commands


def navigate(commands: Iterable[tuple[str, int]]) -> int:
    """Horizontal position times depth; stops at the first unknown command."""
    x = depth = 0
    for direction, amount in commands:
        if direction == "forward":
            x += amount
        elif direction == "down":
            depth += amount
        elif direction == "up":
            depth -= amount
        else:
            break
    return x * depth


def navigate_with_aim(commands: Iterable[tuple[str, int]]) -> int:
    """Like navigate, but up and down change the aim and forward dives by it."""
    x = depth = aim = 0
    for direction, amount in commands:
        if direction == "forward":
            x += amount
            depth += amount * aim
        elif direction == "down":
            aim += amount
        elif direction == "up":
            aim -= amount
        else:
            break
    return x * depth


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Follow submarine commands.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        commands = parse_commands(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    if options.part in (None, 1):
        print(navigate(commands))
    if options.part in (None, 2):
        print(navigate_with_aim(commands))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())