"""Day 8: antinodes of resonant antennas."""

from collections import defaultdict
from itertools import combinations


def _grid(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise ValueError("empty map")
    return lines


def find_antennas(grid):
    """Map each frequency to its antenna positions in reading order."""
    width = len(grid[0])
    antennas = defaultdict(list)
    for r, row in enumerate(grid):
        for c, ch in enumerate(row[:width]):
            if ch != ".":
                antennas[ch].append((r, c))
    return dict(antennas)


def _bounds(grid):
    height, width = len(grid), len(grid[0])
    return lambda r, c: 0 <= r < height and 0 <= c < width


def part1(text):
    """Count positions one antenna-distance beyond each pair of antennas.

    Positions marked '#' on the map cannot hold an antinode.
    """
    grid = _grid(text)
    inside = _bounds(grid)
    width = len(grid[0])
    blocked = {
        (r, c)
        for r, row in enumerate(grid)
        for c, ch in enumerate(row[:width])
        if ch == "#"
    }
    antinodes = set()
    for positions in find_antennas(grid).values():
        for (ar, ac), (br, bc) in combinations(positions, 2):
            dr, dc = ar - br, ac - bc
            for pos in ((ar + dr, ac + dc), (br - dr, bc - dc)):
                if inside(*pos) and pos not in blocked:
                    antinodes.add(pos)
    return len(antinodes)


def part2(text):
    """Count every grid position in line with a pair of same-frequency antennas."""
    grid = _grid(text)
    inside = _bounds(grid)
    antinodes = set()
    for positions in find_antennas(grid).values():
        if len(positions) >= 2:
            antinodes.update(positions)
        for (ar, ac), (br, bc) in combinations(positions, 2):
            dr, dc = ar - br, ac - bc
            for sign in (1, -1):
                r, c = ar + sign * dr, ac + sign * dc
                while inside(r, c):
                    antinodes.add((r, c))
                    r, c = r + sign * dr, c + sign * dc
    return len(antinodes)