"""Giant squid bingo: find the first and the last board to win."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Sequence

BOARD_SIZE = 5


class Board:
    """A bingo board that tracks marked rows, columns and the sum of unmarked numbers."""

    def __init__(self, size: int = BOARD_SIZE):
        self.size = size
        self.total = 0
        self._cells: dict[int, tuple[int, int]] = {}
        self._rows = [0] * size
        self._cols = [0] * size

    def add_number(self, row: int, col: int, value: int) -> None:
        """Place ``value`` at (row, col)."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError("cell lies outside the board")
        self._cells[value] = (row, col)
        self.total += value

    def check(self, value: int) -> bool:
        """Mark ``value`` if present; True when that completes a row or column."""
        cell = self._cells.pop(value, None)
        if cell is None:
            return False
        self.total -= value
        row, col = cell
        self._rows[row] += 1
        self._cols[col] += 1
        return self._rows[row] >= self.size or self._cols[col] >= self.size

    def clear(self) -> None:
        """Remove every number so the board can no longer score."""
        self._cells.clear()
        self.total = 0


def parse_bingo(text: str) -> tuple[list[int], list[Board]]:
    """Read the called numbers and the boards that follow them."""
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("the input holds no called numbers")
    calls = [int(token) for token in lines[0].split(",") if token.strip()]
    rows = [line.split() for line in lines[1:] if line.strip()]
    if len(rows) % BOARD_SIZE:
        raise ValueError("the boards are incomplete")
    boards = []
    for first in range(0, len(rows), BOARD_SIZE):
        board = Board()
        for row, numbers in enumerate(rows[first : first + BOARD_SIZE]):
            if len(numbers) != BOARD_SIZE:
                raise ValueError(f"a board row must hold {BOARD_SIZE} numbers")
            for col, number in enumerate(numbers):
                board.add_number(row, col, int(number))
        boards.append(board)
    return calls, boards


def first_winner_score(calls: Iterable[int], boards: Sequence[Board]) -> int:
    """Unmarked sum of the first winning board times the number that won it."""
    for number in calls:
        for board in boards:
            if board.check(number):
                return board.total * number
    raise ValueError("no board wins")


def last_winner_score(calls: Iterable[int], boards: Sequence[Board]) -> int:
    """Unmarked sum of the last board to win times the number that won it."""
    remaining = list(boards)
    for number in calls:
        for board in list(remaining):
            if board.check(number):
                if len(remaining) > 1:
                    board.clear()
                    remaining.remove(board)
                else:
                    return board.total * number
    raise ValueError("not every board wins")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Play bingo against the squid.")
    parser.add_argument("path")
    parser.add_argument("--part", type=int, choices=(1, 2))
    options = parser.parse_args(argv)
    try:
        text = Path(options.path).read_text()
    except OSError:
        print("Can't open file", file=sys.stderr)
        return 1
    try:
        if options.part in (None, 1):
            calls, boards = parse_bingo(text)
            print(first_winner_score(calls, boards))
        if options.part in (None, 2):
            calls, boards = parse_bingo(text)
            print(f"Answer: {last_winner_score(calls, boards)}")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())