"""A console word-guessing game with positional feedback."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

WORD_LENGTH = 5
DEFAULT_WORD = "GUESS"


@dataclass(frozen=True)
class Feedback:
    """Exact-position letters and letters present elsewhere for one guess."""

    exact: str
    misplaced: tuple[str, ...]
    matches: int

    @property
    def solved(self) -> bool:
        return self.matches == WORD_LENGTH

    def __str__(self) -> str:
        text = self.exact
        if self.misplaced:
            text += "\tLetters in the incorrect position: " + "".join(
                f"{letter} " for letter in self.misplaced
            )
        return text


def score_guess(hidden: str, guess: str) -> Feedback:
    """Compare ``guess`` with ``hidden`` letter by letter."""
    if len(hidden) != WORD_LENGTH or len(guess) != WORD_LENGTH:
        raise ValueError(f"Word must be length {WORD_LENGTH}")
    exact = ["_"] * WORD_LENGTH
    hit = [False] * WORD_LENGTH
    remaining: set[str] = set()
    for position, (want, got) in enumerate(zip(hidden, guess)):
        if want == got:
            exact[position] = want
            hit[position] = True
        else:
            remaining.add(want)
    misplaced = []
    for position, got in enumerate(guess):
        if not hit[position] and got in remaining:
            misplaced.append(got)
            remaining.discard(got)
    return Feedback(" ".join(exact), tuple(misplaced), sum(hit))


def play(hidden: str, lines: Iterable[str], out: TextIO) -> bool:
    """Read guesses from ``lines`` until one is right; False if the input runs out."""
    out.write("Welcome to Wordle!\nTry to guess the word\n\n")
    for line in lines:
        for guess in line.split():
            if len(guess) != WORD_LENGTH:
                out.write(f"Word must be length {WORD_LENGTH}\n")
                continue
            feedback = score_guess(hidden, guess)
            out.write(f"{feedback}\n\n")
            if feedback.solved:
                out.write("That's it!\n")
                return True
    return False


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Guess the hidden five-letter word.")
    parser.add_argument("word", nargs="?", default=DEFAULT_WORD)
    options = parser.parse_args(argv)
    if len(options.word) != WORD_LENGTH:
        parser.error(f"the hidden word must be length {WORD_LENGTH}")
    return 0 if play(options.word, sys.stdin, sys.stdout) else 1


if __name__ == "__main__":
    raise SystemExit(main())