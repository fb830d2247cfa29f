import pytest

from algolab.aoc.day08 import decode_entry, decode_patterns, main, total_output

CANONICAL = {
    "abcefg": 0,
    "cf": 1,
    "acdeg": 2,
    "acdfg": 3,
    "bcdf": 4,
    "abdfg": 5,
    "abdefg": 6,
    "acf": 7,
    "abcdefg": 8,
    "abcdfg": 9,
}

EXAMPLE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf"
)


def test_canonical_wiring():
    assert decode_patterns(CANONICAL) == CANONICAL


def test_scrambled_wiring_maps_back():
    table = str.maketrans("abcdefg", "gfedcba")
    scrambled = {word.translate(table): digit for word, digit in CANONICAL.items()}
    mapping = decode_patterns(scrambled)
    for word, digit in scrambled.items():
        assert mapping["".join(sorted(word))] == digit


def test_example_entry():
    assert decode_entry(EXAMPLE) == 5353


def test_total_output_sums_lines():
    assert total_output([EXAMPLE, "", EXAMPLE]) == 2 * decode_entry(EXAMPLE)


def test_canonical_output_round_trip():
    patterns = " ".join(CANONICAL)
    line = f"{patterns} | acf cf bcdf abcdefg"
    assert decode_entry(line) == 7148


def test_missing_pattern_raises():
    with pytest.raises(ValueError):
        decode_patterns(list(CANONICAL)[:9])


def test_unknown_output_raises():
    with pytest.raises(ValueError):
        decode_entry(" ".join(CANONICAL) + " | abc")


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        decode_entry(" ".join(CANONICAL))


def test_main_output(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"The total is: {decode_entry(EXAMPLE)}\n"