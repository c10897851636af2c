import pytest

from aocsolve.day06 import Lab, parse_lab, part1, part2

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_parse_lab_finds_guard():
    lab = parse_lab(EXAMPLE)
    r, c = lab.start
    assert EXAMPLE.splitlines()[r][c] == "^"
    assert lab.rows[r][c] == "."
    assert all("^" not in row for row in lab.rows)


def test_parse_lab_dimensions():
    lab = parse_lab(EXAMPLE)
    lines = EXAMPLE.splitlines()
    assert lab.height == len(lines)
    assert lab.width == len(lines[0])


def test_part1_example():
    assert part1(EXAMPLE) == 41


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_patrol_includes_start_and_stays_on_floor():
    lab = parse_lab(EXAMPLE)
    visited = lab.patrol()
    assert lab.start in visited
    assert all(lab.rows[r][c] == "." for r, c in visited)
    assert len(visited) == part1(EXAMPLE)


def test_guard_walks_straight_out():
    lab = parse_lab("...\n.^.\n...\n")
    assert lab.patrol() == {(1, 1), (0, 1)}


def test_loops_bounded_by_path():
    lab = parse_lab(EXAMPLE)
    assert 0 <= lab.loops() <= len(lab.patrol()) - 1


def test_lab_can_be_built_directly():
    lab = Lab(("...", "...", "..."), (2, 1))
    assert lab.patrol() == {(2, 1), (1, 1), (0, 1)}


def test_missing_guard_is_an_error():
    with pytest.raises(ValueError):
        parse_lab("...\n...\n")


def test_empty_map_is_an_error():
    with pytest.raises(ValueError):
        parse_lab("")