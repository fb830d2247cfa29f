import pytest

from algolab.cycle import (
    CycleInfo,
    add_tail_loop,
    brent,
    build_list,
    find_node,
    floyd,
    iter_nodes,
    main,
    read_list,
)


def data(head):
    return [node.data for node in iter_nodes(head)]


def test_build_list_keeps_values_in_order():
    values = [4, 8, 15, 16, 23, 42]
    head = build_list(values)
    assert data(head) == values


def test_build_list_links_back_on_repeat():
    head = build_list([1, 2, 3, 2, 9])
    assert data(head) == [1, 2, 3]
    assert head.next.next.next is head.next


def test_build_list_rejects_empty():
    with pytest.raises(ValueError):
        build_list([])


def test_find_node():
    head = build_list([5, 6, 7])
    assert find_node(head, 6) is head.next
    assert find_node(head, 99) is None


@pytest.mark.parametrize("detect", [floyd, brent])
@pytest.mark.parametrize("loop_dest", range(5))
def test_detects_tail_loop(detect, loop_dest):
    values = [10, 11, 12, 13, 14]
    head = build_list(values)
    add_tail_loop(head, loop_dest)
    assert detect(head) == CycleInfo(start=loop_dest, length=len(values) - loop_dest)


@pytest.mark.parametrize("detect", [floyd, brent])
def test_out_of_range_dest_loops_tail_onto_itself(detect):
    values = [3, 1, 4, 5, 9]
    head = build_list(values)
    add_tail_loop(head, 99)
    assert detect(head) == CycleInfo(start=len(values) - 1, length=1)


def test_detectors_agree_on_repeated_value():
    values = [7, 3, 9, 4, 1, 8, 4]
    head = build_list(values)
    loop_start = values.index(values[-1])
    expected = CycleInfo(loop_start, len(values) - 1 - loop_start)
    assert floyd(head) == expected
    assert brent(head) == expected


@pytest.mark.parametrize("detect", [floyd, brent])
def test_detector_raises_without_loop(detect):
    with pytest.raises(ValueError):
        detect(build_list([1, 2, 3, 4]))


def test_add_tail_loop_rejects_looped_list():
    head = build_list([1, 2, 1])
    with pytest.raises(ValueError):
        add_tail_loop(head, 0)


def test_read_list(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("5 6\n7 8 6\n")
    head = read_list(path)
    assert data(head) == [5, 6, 7, 8]
    assert head.next.next.next.next is head.next


def test_read_list_rejects_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    with pytest.raises(ValueError):
        read_list(path)


def test_main_reports_loop(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("1 2 3 4 5\n")
    assert main(["-f", str(path), "-l2", "-a", "Brent"]) == 0
    out = capsys.readouterr().out
    assert "Brent's algorithm found a loop starting at element index 2 with loop length 3." in out


def test_main_rejects_unknown_algorithm(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("1 2 3\n")
    assert main(["-f", str(path), "-l", "-a", "quick"]) == 1
    assert "Error: Unknown algorithm specified" in capsys.readouterr().out


def test_main_requires_arguments(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_help(capsys):
    assert main(["-h", "-a", "floyd"]) == 0
    assert "specify data stream" in capsys.readouterr().out


def test_main_fails_without_loop(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2 3\n")
    assert main(["-f", str(path)]) == 1