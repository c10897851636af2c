"""Day 6: a guard patrolling a lab."""

from dataclasses import dataclass

# Up, right, down, left: the guard turns right on meeting an obstacle.
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass(frozen=True)
class Lab:
    """The lab floor and where the guard starts, facing up."""

    rows: tuple
    start: tuple

    @property
    def height(self):
        return len(self.rows)

    @property
    def width(self):
        return len(self.rows[0])

    def _inside(self, pos):
        r, c = pos
        return 0 <= r < self.height and 0 <= c < self.width

    def _states(self, obstacle=None):
        """Yield the guard's (position, heading) until it leaves the lab."""
        pos, heading = self.start, 0
        while True:
            yield pos, heading
            dr, dc = _HEADINGS[heading]
            ahead = (pos[0] + dr, pos[1] + dc)
            if not self._inside(ahead):
                return
            if ahead != obstacle and self.rows[ahead[0]][ahead[1]] == ".":
                pos = ahead
            else:
                heading = (heading + 1) % 4

    def _loops_with(self, obstacle):
        seen = set()
        for state in self._states(obstacle):
            if state in seen:
                return True
            seen.add(state)
        return False

    def patrol(self):
        """The set of positions the guard visits before leaving."""
        return {pos for pos, _ in self._states()}

    def loops(self):
        """Count the spots where one new obstacle traps the guard in a loop."""
        return sum(
            1
            for pos in self.patrol()
            if pos != self.start
            and self.rows[pos[0]][pos[1]] != "#"
            and self._loops_with(pos)
        )


def parse_lab(text):
    """Read the lab map; the guard's '^' becomes open floor."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise ValueError("empty map")
    start = None
    rows = []
    for r, line in enumerate(lines):
        c = line.rfind("^")
        if c != -1:
            start = (r, c)
        rows.append(line.replace("^", "."))
    if start is None:
        raise ValueError("no guard on the map")
    return Lab(tuple(rows), start)


def part1(text):
    """Number of distinct positions the guard visits."""
    return len(parse_lab(text).patrol())


def part2(text):
    """Number of positions where an obstacle makes the guard loop."""
    return parse_lab(text).loops()