import pytest

from algolab.wordle.encode import (
    PREFIX,
    encode_dictionary,
    encode_word,
    encoding_key,
    letter_frequencies,
    main,
)
from algolab.wordle.solver import decode_word

WORDS = ["crane", "slate", "apple", "fjord"]


def test_letter_frequencies_counts_every_letter():
    counts = letter_frequencies(["aab", "b"])
    assert counts["a"] == 2
    assert counts["b"] == 2
    assert counts["z"] == 0
    assert list(counts) == sorted(counts)
    assert len(counts) == 26


def test_letter_frequencies_rejects_other_characters():
    with pytest.raises(ValueError):
        letter_frequencies(["Apple"])


def test_encoding_key_assigns_distinct_single_bits():
    key = encoding_key(WORDS)
    values = sorted(key.values())
    assert values == [1 << bit for bit in range(26)]


def test_encoding_key_gives_most_frequent_letter_highest_bit():
    key = encoding_key(["aab"])
    assert key["a"] == 1 << 25
    assert key["b"] == 1 << 24
    counts = letter_frequencies(["aab"])
    ordered = list(key)
    assert [counts[c] for c in ordered] == sorted(counts[c] for c in ordered)


def test_encode_empty_word_is_prefix():
    assert encode_word("", encoding_key(WORDS)) == PREFIX


def test_encode_word_round_trips_through_decode():
    key = encoding_key(WORDS)
    for word in WORDS:
        assert decode_word(encode_word(word, key)) == word


def test_encode_word_carries_letter_set():
    key = encoding_key(WORDS)
    encoded = encode_word("apple", key)
    letter_bits = (encoded >> 25) & ((1 << 26) - 1)
    expected = key["a"] | key["p"] | key["l"] | key["e"]
    assert letter_bits == expected
    assert encoded < 1 << 64


def test_encode_dictionary_is_descending():
    key = encoding_key(WORDS)
    encoded = encode_dictionary(WORDS, key)
    assert encoded == sorted(encoded, reverse=True)
    assert sorted(decode_word(value) for value in encoded) == sorted(WORDS)


def test_main_writes_key_and_words(tmp_path, monkeypatch):
    dictionary = tmp_path / "words.txt"
    dictionary.write_text("crane\r\nslate\r\n")
    monkeypatch.chdir(tmp_path)
    (tmp_path / "encode").mkdir()
    assert main([str(dictionary)]) == 0
    key_lines = (tmp_path / "encode" / "encodingKey.txt").read_text().splitlines()
    assert len(key_lines) == 26
    key = {line.split()[0]: int(line.split()[1]) for line in key_lines}
    assert key == encoding_key(["crane", "slate"])
    encoded = [int(line) for line in (tmp_path / "encode" / "encodedWords.txt").read_text().split()]
    assert encoded == encode_dictionary(["crane", "slate"], key)


def test_main_without_arguments_fails():
    assert main([]) == 1


def test_main_without_output_directory_fails(tmp_path, monkeypatch):
    dictionary = tmp_path / "words.txt"
    dictionary.write_text("crane\n")
    monkeypatch.chdir(tmp_path)
    assert main([str(dictionary)]) == 1