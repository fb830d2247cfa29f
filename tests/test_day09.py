import pytest

from algolab.aoc.day09 import (
    basin_sizes,
    largest_basins_product,
    main,
    parse_heightmap,
    risk_level_sum,
)

EXAMPLE = """2199943210
3987894921
9856789892
8767896789
9899965678
"""


def test_parse_heightmap_reads_digits():
    grid = parse_heightmap("12\r\n\n34\n")
    assert grid == [[1, 2], [3, 4]]


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_heightmap("1a2\n")


def test_parse_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_heightmap("123\n45\n")


def test_example_risk():
    assert risk_level_sum(parse_heightmap(EXAMPLE)) == 15


def test_example_basin_product():
    assert largest_basins_product(parse_heightmap(EXAMPLE)) == 1134


def test_basin_sizes_cover_all_non_edge_cells():
    grid = parse_heightmap(EXAMPLE)
    non_edge = sum(height != 9 for row in grid for height in row)
    assert sum(basin_sizes(grid)) == non_edge


def test_basin_sizes_leave_grid_untouched():
    grid = parse_heightmap(EXAMPLE)
    before = [list(row) for row in grid]
    basin_sizes(grid)
    assert grid == before


def test_all_edges_have_no_basins():
    grid = parse_heightmap("99\n99\n")
    assert basin_sizes(grid) == []
    assert largest_basins_product(grid) == 1


def test_equal_neighbours_are_not_low_points():
    assert risk_level_sum(parse_heightmap("55\n55\n")) == 0


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Total: 15" in out
    assert "Three Largest Basins: 1134" in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1