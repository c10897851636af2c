"""Day 2: checking reactor reports for safe level changes."""


def _leading_ints(tokens):
    for token in tokens:
        try:
            yield int(token)
        except ValueError:
            return


def _lines(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_reports(text):
    """Return one list of levels per line of the input."""
    return [list(_leading_ints(line.split())) for line in _lines(text)]


def is_safe(levels):
    """True if the levels move in one direction by steps of 1 to 3.

    The direction is fixed by the first two levels. Reports with fewer than
    two levels have no step to break the rule and count as safe.
    """
    if len(levels) < 2:
        return True
    decreasing = levels[0] > levels[1]
    for a, b in zip(levels, levels[1:]):
        step = a - b if decreasing else b - a
        if not 1 <= step <= 3:
            return False
    return True


def _is_safe_with_dampener(levels):
    if is_safe(levels):
        return True
    return any(
        is_safe(levels[:i] + levels[i + 1:]) for i in range(len(levels))
    )


def part1(text):
    """Count reports of at least two levels that are safe as given."""
    return sum(
        1 for levels in parse_reports(text) if len(levels) >= 2 and is_safe(levels)
    )


def part2(text):
    """Count reports that are safe, or become safe by dropping one level."""
    return sum(
        1 for levels in parse_reports(text) if levels and _is_safe_with_dampener(levels)
    )