"""Day 4: word search for XMAS."""

_WORD = "XMAS"
_DIRECTIONS = [
    (0, 1),
    (0, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (1, 1),
    (1, -1),
    (-1, -1),
]


def _grid(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise ValueError("empty grid")
    return lines


def part1(text):
    """Count occurrences of XMAS in any of the eight directions."""
    grid = _grid(text)
    rows, cols = len(grid), len(grid[0])
    reach = len(_WORD) - 1

    def spells(r, c, dr, dc):
        if not (0 <= r + reach * dr < rows and 0 <= c + reach * dc < cols):
            return False
        return all(
            grid[r + k * dr][c + k * dc] == ch for k, ch in enumerate(_WORD)
        )

    return sum(
        spells(r, c, dr, dc)
        for r in range(rows)
        for c in range(cols)
        for dr, dc in _DIRECTIONS
    )


def part2(text):
    """Count X shapes of two diagonal MAS words crossing at an A."""
    grid = _grid(text)
    rows, cols = len(grid), len(grid[0])
    pair = {"M", "S"}

    def crossed(r, c):
        return (
            grid[r][c] == "A"
            and {grid[r - 1][c - 1], grid[r + 1][c + 1]} == pair
            and {grid[r - 1][c + 1], grid[r + 1][c - 1]} == pair
        )

    return sum(
        crossed(r, c) for r in range(1, rows - 1) for c in range(1, cols - 1)
    )