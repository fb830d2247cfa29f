"""Interactive helper that narrows an encoded dictionary using guess feedback."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, MutableSequence

WORD_LENGTH = 5
LETTER_BITS = 5
LETTER_MASK = 0x1F
KEY_SHIFT = 25
SUGGEST_LIMIT = 5


def decode_word(encoded: int) -> str:
    """Recover the five letters stored in the low 25 bits."""
    letters = []
    for _ in range(WORD_LENGTH):
        letters.append(chr(ord("a") + (encoded & LETTER_MASK)))
        encoded >>= LETTER_BITS
    return "".join(reversed(letters))


def contains(encoded: int, check: int) -> bool:
    """True if every bit of ``check`` is set in ``encoded``."""
    return encoded & check == check


def does_not_contain(encoded: int, check: int) -> bool:
    """True if no bit of ``check`` is set in ``encoded``."""
    return not encoded & check


def has_exact(encoded: int, check: int, mask: int) -> bool:
    """True if ``encoded`` equals ``check`` wherever ``mask`` is set."""
    masked = encoded & mask
    return masked & check == masked | check


@dataclass
class Constraints:
    """What is known so far: letters required, letters excluded, fixed positions."""

    can_have: int = 0
    cannot_have: int = 0
    exactly: int = 0
    exact_mask: int = 0

    def apply_round(
        self, guess: str, exact_pattern: str, misplaced: str, translate: Mapping[str, int]
    ) -> int:
        """Fold one round of feedback in; return how many letters were in place."""
        _check_guess(guess)
        exactly, mask, placed = parse_exact(exact_pattern)
        absent = set(guess)
        self.exactly = exactly
        self.exact_mask = mask
        for char in placed:
            self.can_have |= translate.get(char, 0)
            absent.discard(char)
        for char in misplaced[:WORD_LENGTH]:
            if "a" <= char <= "z":
                self.can_have |= translate.get(char, 0)
                absent.discard(char)
        for char in absent:
            self.cannot_have |= translate.get(char, 0)
        return len(placed)


def keep_word(encoded: int, constraints: Constraints) -> bool:
    """True if the word satisfies every constraint."""
    return (
        contains(encoded, constraints.can_have)
        and does_not_contain(encoded, constraints.cannot_have)
        and has_exact(encoded, constraints.exactly, constraints.exact_mask)
    )


def _check_guess(guess: str) -> None:
    if len(guess) != WORD_LENGTH:
        raise ValueError("Guess was not length 5.  Try again.")
    if any(not "a" <= char <= "z" for char in guess):
        raise ValueError("Guess contained an invalid character. Try again.")


def parse_exact(pattern: str) -> tuple[int, int, list[str]]:
    """Read a pattern such as "a*c**" into (letters, mask, placed letters)."""
    if len(pattern) != WORD_LENGTH:
        raise ValueError("Input was not five characters in length. Please try again.")
    exactly = mask = 0
    placed = []
    for char in pattern:
        exactly <<= LETTER_BITS
        mask <<= LETTER_BITS
        if char == "*":
            continue
        if not "a" <= char <= "z":
            raise ValueError("Unknown character given. Please try again.")
        placed.append(char)
        exactly |= ord(char) - ord("a")
        mask |= LETTER_MASK
    return exactly, mask, placed


def load_key(path: str | Path) -> dict[str, int]:
    """Read "letter value" lines; each value is moved up to the letter-set bits."""
    translate = {}
    for line in Path(path).read_text().splitlines():
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2 or len(parts[0]) != 1 or not "a" <= parts[0] <= "z":
            raise ValueError(f"malformed key line: {line!r}")
        translate[parts[0]] = int(parts[1]) << KEY_SHIFT
    return translate


def load_words(path: str | Path) -> list[int]:
    """Read one encoded word per line."""
    return [int(line.split()[0]) for line in Path(path).read_text().splitlines() if line.strip()]


def suggestions(
    words: MutableSequence[int], constraints: Constraints, limit: int = SUGGEST_LIMIT
) -> list[str]:
    """Return up to ``limit`` fitting words; rejected words passed on the way are removed."""
    found: list[int] = []
    kept: list[int] = []
    rest = len(words)
    for position, encoded in enumerate(words):
        if len(found) >= limit:
            rest = position
            break
        if keep_word(encoded, constraints):
            found.append(encoded)
            kept.append(encoded)
    words[:] = kept + list(words[rest:])
    return [decode_word(encoded) for encoded in found]


def _read(lines: Iterator[str]) -> str:
    line = next(lines, None)
    if line is None:
        raise EOFError
    print()
    return line.rstrip("\r\n")


def _session(words: list[int], translate: Mapping[str, int], lines: Iterator[str]) -> int:
    constraints = Constraints()
    correct = 0
    while correct < WORD_LENGTH:
        print("Suggested Guesses:")
        found = suggestions(words, constraints)
        for word in found:
            print(f" {word}")
        if not found:
            print("No suggestions remaining\n")
            return 0

        while True:
            print(
                "\nType in what guess was submitted. 5 characters in total. "
                "Press enter when done.\n"
            )
            guess = _read(lines)
            try:
                _check_guess(guess)
            except ValueError as error:
                print(error)
                continue
            break

        while True:
            print("\nType the letters of your guess that were in the correct position")
            print(
                "For every other position, type a star (*).  5 characters total. "
                "Press enter when done.\n"
            )
            pattern = _read(lines)
            try:
                parse_exact(pattern)
            except ValueError as error:
                print(error)
                continue
            break

        print("\nType the letters that were in the word, but not in the correct position.")
        print(
            "It is not necessary to include letters in the correct position. "
            "Input should be 0-5 characters. Press enter when done.\n"
        )
        misplaced = _read(lines)
        correct = constraints.apply_round(guess, pattern, misplaced, translate)

    print("You've found the word! Thanks for using the wordle tool!")
    return 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage:\n\t./wordleSolver {encodedWords} {encodingKey}", file=sys.stderr)
        return 1
    try:
        translate = load_key(args[1])
    except OSError:
        print("Can't open encoded key", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    try:
        words = load_words(args[0])
    except OSError:
        print("Can't open encoded words", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    try:
        return _session(words, translate, iter(sys.stdin))
    except EOFError:
        return 1


if __name__ == "__main__":
    raise SystemExit(main())