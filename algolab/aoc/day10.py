"""Syntax scoring: corrupted and incomplete bracket lines."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Iterator

OPENERS = "([{<"
PAIRS = {")": "(", "]": "[", "}": "{", ">": "<"}
ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
COMPLETION_POINTS = {"(": 1, "[": 2, "{": 3, "<": 4}


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        parts = line.split()
        if parts:
            yield parts[0]


def error_score(line: str) -> int:
    """Points for every closing character that does not match its opener."""
    stack: list[str] = []
    score = 0
    for char in line:
        if char in OPENERS:
            stack.append(char)
            continue
        if not stack:
            raise ValueError(f"unbalanced closing {char!r} in {line!r}")
        top = stack.pop()
        if PAIRS.get(char) != top:
            score += ERROR_POINTS.get(char, 0)
    return score


def completion_score(line: str) -> int | None:
    """Score of the characters that would close the line; None if it is corrupted."""
    stack: list[str] = []
    for char in line:
        if char in OPENERS:
            stack.append(char)
            continue
        if not stack:
            raise ValueError(f"unbalanced closing {char!r} in {line!r}")
        top = stack.pop()
        if char in PAIRS and PAIRS[char] != top:
            return None
    score = 0
    for opener in reversed(stack):
        score = score * 5 + COMPLETION_POINTS[opener]
    return score


def syntax_error_score(lines: Iterable[str]) -> int:
    """Total error score over all non-blank lines."""
    return sum(error_score(token) for token in _tokens(lines))


def median_completion_score(lines: Iterable[str]) -> int:
    """Middle completion score of the lines that are not corrupted."""
    scores = sorted(
        score for token in _tokens(lines) if (score := completion_score(token)) is not None
    )
    if not scores:
        raise ValueError("no incomplete lines")
    return scores[(len(scores) - 1) // 2]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Score bracket lines.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        lines = Path(options.path).read_text().splitlines()
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    try:
        if options.part in (None, 1):
            print(f"Score: {syntax_error_score(lines)}")
        if options.part in (None, 2):
            print(f"Median score is: {median_completion_score(lines)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())