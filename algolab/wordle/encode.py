"""Build a letter-frequency key for a dictionary and encode its words as ranked integers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Mapping

from algolab.wordle.zipwords import read_words

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
PREFIX = 0x7FFC000000
LETTER_BITS = 5
_MASK64 = (1 << 64) - 1
OUTPUT_DIR = Path("encode")
KEY_FILE = "encodingKey.txt"
WORDS_FILE = "encodedWords.txt"


def _check_letters(word: str) -> None:
    for char in word:
        if char not in ALPHABET:
            raise ValueError(f"{word!r} contains {char!r}, which is not a lower-case letter")


def letter_frequencies(words: Iterable[str]) -> dict[str, int]:
    """Count each letter a-z over all words, in alphabetical order."""
    counts = dict.fromkeys(ALPHABET, 0)
    for word in words:
        _check_letters(word)
        for char in word:
            counts[char] += 1
    return counts


def encoding_key(words: Iterable[str]) -> dict[str, int]:
    """Give each letter its own bit, rarest letters the lowest; ordered rarest first."""
    counts = letter_frequencies(words)
    order = sorted(counts, key=counts.__getitem__)
    return {char: 1 << bit for bit, char in enumerate(order)}


def encode_word(word: str, translation: Mapping[str, int]) -> int:
    """Pack a word's letter set and its letters (5 bits each) into one 64-bit integer."""
    _check_letters(word)
    encoding = PREFIX
    for char in word:
        encoding |= translation[char]
    for char in word:
        encoding = ((encoding << LETTER_BITS) | (ord(char) - ord("a"))) & _MASK64
    return encoding


def encode_dictionary(words: Iterable[str], translation: Mapping[str, int]) -> list[int]:
    """Encode every word and return the encodings from largest to smallest."""
    return sorted((encode_word(word, translation) for word in words), reverse=True)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Encoding requires a newline separated dictionary", file=sys.stderr)
        return 1
    try:
        words = read_words(args[0])
    except OSError:
        print("Can't open dictionary file", file=sys.stderr)
        return 1

    try:
        key = encoding_key(words)
        encodings = encode_dictionary(words, key)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    try:
        with open(OUTPUT_DIR / KEY_FILE, "w") as handle:
            handle.writelines(f"{char} {value}\n" for char, value in key.items())
    except OSError:
        print("Failed to write encoding key file", file=sys.stderr)
        return 1

    try:
        with open(OUTPUT_DIR / WORDS_FILE, "w") as handle:
            handle.writelines(f"{value}\n" for value in encodings)
    except OSError:
        print("Failed to write encoded words file", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())