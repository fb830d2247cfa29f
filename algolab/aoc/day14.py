"""Extended polymerization: grow a polymer by pair insertion."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from itertools import pairwise
from pathlib import Path
from typing import Mapping

Rules = Mapping[str, str]


def parse_polymer(text: str) -> tuple[str, dict[str, str]]:
    """Read the template, a blank line, then "AB -> C" insertion rules."""
    lines = [line.split("\r", 1)[0] for line in text.splitlines()]
    if not lines or not lines[0].strip():
        raise ValueError("the input holds no polymer template")
    template = lines[0].strip()
    rules: dict[str, str] = {}
    for line in lines[2:]:
        if not line.strip():
            break
        parts = line.split()
        if len(parts) != 3 or parts[1] != "->" or len(parts[0]) != 2 or not parts[2]:
            raise ValueError(f"malformed rule: {line!r}")
        rules[parts[0]] = parts[2][0]
    return template, rules


def _check_template(template: str, steps: int) -> None:
    if not template:
        raise ValueError("the template is empty")
    if steps < 0:
        raise ValueError("steps must not be negative")


def expand(template: str, rules: Rules, steps: int) -> str:
    """The polymer after ``steps`` rounds of insertion; pairs without a rule stay joined."""
    _check_template(template, steps)
    polymer = template
    for _ in range(steps):
        parts = [polymer[0]]
        for left, right in pairwise(polymer):
            parts.append(rules.get(left + right, ""))
            parts.append(right)
        polymer = "".join(parts)
    return polymer


def _spread(counts: Counter) -> tuple[int, int]:
    values = [count for count in counts.values() if count]
    return max(values), min(values)


def element_spread(template: str, rules: Rules, steps: int) -> tuple[int, int]:
    """Counts of the most and the least common element, by building the polymer."""
    return _spread(Counter(expand(template, rules, steps)))


def pair_count_spread(template: str, rules: Rules, steps: int) -> tuple[int, int]:
    """Counts of the most and the least common element, by counting pairs only."""
    _check_template(template, steps)
    pairs = Counter(left + right for left, right in pairwise(template))
    elements = Counter(template)
    for _ in range(steps):
        grown: Counter = Counter()
        for pair, count in pairs.items():
            inserted = rules.get(pair)
            if inserted is None:
                grown[pair] += count
                continue
            elements[inserted] += count
            grown[pair[0] + inserted] += count
            grown[inserted + pair[1]] += count
        pairs = grown
    return _spread(elements)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Grow a polymer by pair insertion.")
    parser.add_argument("path")
    parser.add_argument("steps", nargs="?", type=int, default=1)
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        template, rules = parse_polymer(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    try:
        if options.part in (None, 1):
            most, least = element_spread(template, rules, options.steps)
            print(f"Max: {most}\tMin: {least}")
            print(f"Difference is: {most - least}")
        if options.part in (None, 2):
            most, least = pair_count_spread(template, rules, options.steps)
            print(f"The max is {most} and the min is {least}")
            print(f"The difference is {most - least}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())