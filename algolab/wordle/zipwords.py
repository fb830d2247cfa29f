"""Merge two word lists into one and report how they overlap."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

OUTPUT_PATH = Path("dict") / "zippedWords.txt"


@dataclass(frozen=True)
class ZipReport:
    """The merged words and how many came from each list."""

    words: tuple[str, ...]
    both: int
    only_first: int
    only_second: int

    @property
    def total(self) -> int:
        return len(self.words)

    def __str__(self) -> str:
        return (
            "\nZip Report:\n"
            f"Total words zipped: {self.total}\n"
            f"Words found in both files: {self.both}\n"
            f"Words exclusive to file 1: {self.only_first}\n"
            f"Words exclusive to file 2: {self.only_second}\n"
        )


def read_words(path: str | Path) -> list[str]:
    """Return the non-empty lines of a file, each cut at its first carriage return."""
    with open(path, newline="") as handle:
        words = [line.rstrip("\n").split("\r", 1)[0] for line in handle]
    return [word for word in words if word]


def zip_words(first: Iterable[str], second: Iterable[str]) -> ZipReport:
    """Merge two word lists without duplicates, keeping first-seen order."""
    first_words = dict.fromkeys(first)
    second_words = dict.fromkeys(second)
    merged = dict(first_words)
    merged.update(second_words)
    both = sum(1 for word in first_words if word in second_words)
    return ZipReport(
        words=tuple(merged),
        both=both,
        only_first=len(first_words) - both,
        only_second=len(second_words) - both,
    )


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Two few arguments", file=sys.stderr)
        return 1
    try:
        first = read_words(args[0])
        second = read_words(args[1])
    except OSError:
        print("Can't open dictionary file", file=sys.stderr)
        return 1
    report = zip_words(first, second)
    try:
        OUTPUT_PATH.write_text("".join(f"{word}\n" for word in report.words))
    except OSError:
        print("Failed to write zipped words file", file=sys.stderr)
        return 1
    print(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())