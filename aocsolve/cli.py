"""Command line entry: solve one puzzle part for an input file."""

import argparse
import sys
from pathlib import Path

from aocsolve import day01, day02, day03, day04, day05, day06, day07, day08

_SOLVERS = {
    (1, 1): day01.part1,
    (1, 2): day01.part2,
    (2, 1): day02.part1,
    (2, 2): day02.part2,
    (3, 1): day03.part1,
    (3, 2): day03.part2,
    (4, 1): day04.part1,
    (4, 2): day04.part2,
    (5, 1): day05.part1,
    (6, 1): day06.part1,
    (6, 2): day06.part2,
    (7, 1): day07.part1,
    (7, 2): day07.part2,
    (8, 1): day08.part1,
    (8, 2): day08.part2,
}


def solve(day, part, text):
    """Solve the given day and part for the puzzle input text."""
    try:
        solver = _SOLVERS[(day, part)]
    except KeyError:
        raise ValueError(f"no solver for day {day} part {part}") from None
    return solver(text)


def main(argv=None):
    """Read the input file, print the answer and return an exit status."""
    parser = argparse.ArgumentParser(
        prog="aocsolve", description="Solve a puzzle part for an input file."
    )
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int)
    parser.add_argument("-i", "--input", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print(f"aocsolve: {exc}", file=sys.stderr)
        return 1
    try:
        answer = solve(args.day, args.part, text)
    except ValueError as exc:
        print(f"aocsolve: {exc}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())