from collections import Counter

import pytest

from algolab.aoc.day14 import (
    element_spread,
    expand,
    main,
    pair_count_spread,
    parse_polymer,
)

EXAMPLE = """NNCB

CH -> B
HH -> N
CB -> H
NH -> C
HB -> C
HC -> B
HN -> C
NN -> C
BH -> H
NC -> B
NB -> B
BN -> B
BB -> N
BC -> B
CC -> N
CN -> C
"""


@pytest.fixture
def example():
    return parse_polymer(EXAMPLE)


def test_parse_reads_template_and_rules(example):
    template, rules = example
    assert template == "NNCB"
    assert len(rules) == 16
    assert rules["CH"] == "B"
    assert rules["CN"] == "C"


def test_parse_strips_carriage_returns():
    template, rules = parse_polymer("AB\r\n\r\nAB -> C\r\n")
    assert template == "AB"
    assert rules == {"AB": "C"}


def test_parse_rejects_malformed_rule():
    with pytest.raises(ValueError):
        parse_polymer("AB\n\nAB => C\n")


def test_parse_rejects_empty_input():
    with pytest.raises(ValueError):
        parse_polymer("")


def test_expand_one_step(example):
    template, rules = example
    assert expand(template, rules, 1) == "NCNBCHB"


@pytest.mark.parametrize("steps", range(6))
def test_expand_length_doubles_gaps(example, steps):
    template, rules = example
    assert len(expand(template, rules, steps)) == (len(template) - 1) * 2**steps + 1


def test_expand_zero_steps_returns_template(example):
    template, rules = example
    assert expand(template, rules, 0) == template


def test_pairs_without_rule_stay_joined():
    assert expand("AB", {}, 3) == "AB"


def test_expand_inserts_rule_character():
    assert expand("AB", {"AB": "C"}, 1) == "ACB"


def test_element_spread_after_ten_steps(example):
    template, rules = example
    assert element_spread(template, rules, 10) == (1749, 161)


@pytest.mark.parametrize("steps", range(11))
def test_pair_counting_agrees_with_building(example, steps):
    template, rules = example
    assert pair_count_spread(template, rules, steps) == element_spread(template, rules, steps)


def test_pair_counting_agrees_without_full_rules():
    rules = {"AB": "A", "BA": "B"}
    for steps in range(6):
        assert pair_count_spread("ABBA", rules, steps) == element_spread("ABBA", rules, steps)


def test_spread_at_zero_steps_counts_template():
    counts = Counter("AAB")
    assert element_spread("AAB", {}, 0) == (max(counts.values()), min(counts.values()))


@pytest.mark.parametrize("func", [expand, element_spread, pair_count_spread])
def test_empty_template_raises(func):
    with pytest.raises(ValueError):
        func("", {}, 1)


@pytest.mark.parametrize("func", [expand, pair_count_spread])
def test_negative_steps_raise(func):
    with pytest.raises(ValueError):
        func("AB", {}, -1)


def test_main_prints_difference(tmp_path, capsys, example):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path), "3", "--part", "1"]) == 0
    template, rules = example
    most, least = element_spread(template, rules, 3)
    assert f"Difference is: {most - least}" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1