import pytest

from aocsolve import day01, day07
from aocsolve.cli import main, solve

DAY01 = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
DAY07 = "190: 10 19\n3267: 81 40 27\n83: 17 5\n292: 11 6 16 20\n"


def test_solve_day01_example():
    assert solve(1, 1, DAY01) == 11


def test_solve_delegates_to_day_module():
    assert solve(7, 2, DAY07) == day07.part2(DAY07)
    assert solve(1, 2, DAY01) == day01.part2(DAY01)


@pytest.mark.parametrize("day, part", [(5, 2), (9, 1), (1, 3), (0, 1)])
def test_solve_unknown_puzzle(day, part):
    with pytest.raises(ValueError):
        solve(day, part, DAY01)


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY01)
    assert main(["1", "1", "--input", str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(day01.part1(DAY01))


def test_main_missing_file(tmp_path, capsys):
    status = main(["1", "1", "--input", str(tmp_path / "absent.txt")])
    assert status == 1
    assert "aocsolve" in capsys.readouterr().err


def test_main_unknown_puzzle(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY01)
    assert main(["9", "1", "-i", str(path)]) == 1
    assert "day 9" in capsys.readouterr().err