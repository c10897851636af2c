# aocsolve

This package solves days 1 to 8 of the 2024 Advent of Code puzzles. Each day
has two parts, except day 5, which has one.

## Installation

```
pip install .
```

## Command line

Give the day and the part. Use `-i` or `--input` to give the path of your
puzzle input. Without it, the command reads `input.txt` in the current
directory:

```
aocsolve 1 1
aocsolve 6 2 --input path/to/input.txt
```

The command prints the answer on standard output and exits with status 0.
It prints an error on standard error and exits with status 1 in these cases:

- the input file cannot be read
- there is no solver for the day and part you gave
- the input cannot be parsed

## Library

Each day has its own module, from `aocsolve.day01` to `aocsolve.day08`. Each
module has `part1(text)`, and all of them except day 5 also have
`part2(text)`. These functions take the full puzzle input as a string and
return the answer as an integer:

```python
from aocsolve import day01

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
print(day01.part1(text))  # 11
print(day01.part2(text))  # 31
```

`aocsolve.cli.solve(day, part, text)` chooses the solver from the day and
part numbers. It raises `ValueError` when there is no solver for them.

Some modules have helpers you can use on their own:

- `day01.parse_lists`: reads the two columns of numbers into a left list and
  a right list.
- `day02.parse_reports` and `day02.is_safe`: read the reports and check one.
- `day05.parse_manual`, `day05.is_ordered` and `day05.fix_order`: read the
  rules and updates, check whether an update is in order, and sort an
  update by the rules.
- `day06.parse_lab`: returns a `Lab`. `patrol()` on a `Lab` gives the set of
  positions the guard visits. `loops()` gives the number of places where one
  new obstacle makes the guard walk in a loop.
- `day07.parse_equations` and `day07.concat`: read the equations, and join
  two numbers by their digits.
- `day08.find_antennas`: groups the antenna positions by frequency.

## What it does not do

- There are no solvers after day 8.
- Day 5 has a single answer: `day05.part1` adds up the middle pages of the
  updates that are out of order, after it puts them in order. There is no
  answer that adds up the updates that are already in order.
- Day 8 gives only the count. It does not print the map with the antinodes
  marked.

## Tests

```
pip install .[test]
pytest
```