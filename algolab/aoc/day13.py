"""Transparent origami: fold a sheet of dots."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Sequence

Point = tuple[int, int]
Fold = tuple[str, int]


def parse_manual(text: str) -> tuple[list[Point], list[Fold]]:
    """Read "x,y" dots, a blank line, then "fold along axis=value" lines."""
    points: list[Point] = []
    folds: list[Fold] = []
    lines = iter(text.splitlines())
    for raw in lines:
        line = raw.split("\r", 1)[0].strip()
        if not line:
            break
        try:
            x, y = (int(part) for part in line.split(","))
        except ValueError:
            raise ValueError(f"malformed point: {line!r}") from None
        points.append((x, y))
    for raw in lines:
        line = raw.split("\r", 1)[0].strip()
        if not line:
            break
        axis, sep, value = line.split()[-1].partition("=")
        if not sep or axis not in ("x", "y"):
            raise ValueError(f"malformed fold: {line!r}")
        folds.append((axis, int(value)))
    return points, folds


class Paper:
    """A sheet of dots within the bounds that remain after folding."""

    def __init__(self, points: Iterable[Point]):
        self.points = set(points)
        if not self.points:
            raise ValueError("the paper has no dots")
        xs = [x for x, _ in self.points]
        ys = [y for _, y in self.points]
        self.x_min, self.x_max = min(xs), max(xs)
        self.y_min, self.y_max = min(ys), max(ys)

    def fold(self, axis: str, value: int) -> None:
        """Fold the part beyond ``value`` along ``axis`` back over the rest."""
        if axis not in ("x", "y"):
            raise ValueError(f"unknown fold axis {axis!r}")
        index = 0 if axis == "x" else 1
        folded = set()
        for point in self.points:
            coord = point[index]
            if coord == value:
                continue
            if coord > value:
                coord = 2 * value - coord
                if coord < 0:
                    raise ValueError("fold maps a dot off the paper")
            folded.add((coord, point[1]) if index == 0 else (point[0], coord))
        self.points = folded
        if axis == "x":
            self.x_max = value - 1
        else:
            self.y_max = value - 1

    def visible_count(self) -> int:
        return len(self.points)

    def render(self) -> str:
        """Draw the paper with "X" for dots and spaces elsewhere."""
        return "".join(
            "".join(
                "X" if (x, y) in self.points else " " for x in range(self.x_min, self.x_max + 1)
            )
            + "\n"
            for y in range(self.y_min, self.y_max + 1)
        )


def first_fold_count(points: Iterable[Point], folds: Sequence[Fold]) -> int:
    """Dots visible after the first fold only."""
    if not folds:
        raise ValueError("no fold instructions")
    paper = Paper(points)
    paper.fold(*folds[0])
    return paper.visible_count()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Fold the transparent paper.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        points, folds = parse_manual(Path(options.path).read_text())
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    try:
        if options.part in (None, 1):
            print(f"Point count: {first_fold_count(points, folds)}")
        if options.part in (None, 2):
            paper = Paper(points)
            for axis, value in folds:
                paper.fold(axis, value)
            print(paper.render(), end="")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())