import pytest

from algolab.aoc.day12 import count_paths, count_paths_with_revisit, main, parse_caves

EXAMPLE = """start-A
start-b
A-c
A-b
b-d
A-end
b-end
"""


def test_parse_caves_is_symmetric():
    adjacency = parse_caves("start-A\r\nA-end\n\n")
    assert adjacency == {"start": ["A"], "A": ["start", "end"], "end": ["A"]}


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_caves("start\n")
    with pytest.raises(ValueError):
        parse_caves("a-b-c\n")


def test_direct_passage_has_one_path():
    adjacency = parse_caves("start-end\n")
    assert count_paths(adjacency) == 1
    assert count_paths_with_revisit(adjacency) == 1


def test_no_route_to_end():
    adjacency = parse_caves("start-a\n")
    assert count_paths(adjacency) == 0
    assert count_paths_with_revisit(adjacency) == 0


def test_example_paths():
    assert count_paths(parse_caves(EXAMPLE)) == 10


def test_example_paths_with_revisit():
    assert count_paths_with_revisit(parse_caves(EXAMPLE)) == 36


def test_revisit_never_reduces_paths():
    adjacency = parse_caves(EXAMPLE)
    assert count_paths_with_revisit(adjacency) >= count_paths(adjacency)


def test_main(tmp_path, capsys):
    path = tmp_path / "caves.txt"
    path.write_text("start-end\n")
    assert main([str(path), "--part", "1"]) == 0
    assert capsys.readouterr().out == "There were 1 paths through the cave system\n"