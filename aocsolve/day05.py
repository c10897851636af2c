"""Day 5: page ordering rules for safety manual updates."""

import re
from collections import defaultdict
from functools import cmp_to_key

_SEPARATOR = re.compile(r"[^0-9]")


def _lines(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _numbers(line):
    """Numbers separated by single non-digit characters; an empty field reads as 0."""
    pieces = _SEPARATOR.split(line)
    if line and not line[-1].isdigit():
        pieces.pop()
    return [int(piece) if piece else 0 for piece in pieces]


def parse_manual(text):
    """Return the ordering rules and the list of updates.

    Rules map a page to the pages that must come after it. Lines before the
    first empty line are rules, the lines after it are updates.
    """
    rules = defaultdict(list)
    updates = []
    past_rules = False
    for line in _lines(text):
        if not line:
            past_rules = True
            continue
        numbers = _numbers(line)
        if past_rules:
            updates.append(numbers)
        else:
            if len(numbers) < 2:
                raise ValueError(f"rule needs two pages: {line!r}")
            rules[numbers[0]].append(numbers[1])
    return rules, updates


def is_ordered(rules, update):
    """True if no page comes after a page that the rules put after it."""
    seen = set()
    for page in update:
        if any(later in seen for later in rules.get(page, ())):
            return False
        seen.add(page)
    return True


def fix_order(rules, update):
    """Return the update's pages sorted by the ordering rules."""

    def compare(a, b):
        if b in rules.get(a, ()):
            return -1
        if a in rules.get(b, ()):
            return 1
        return 0

    return sorted(update, key=cmp_to_key(compare))


def part1(text):
    """Sum the middle pages of the misordered updates once they are fixed."""
    rules, updates = parse_manual(text)
    total = 0
    for update in updates:
        if not is_ordered(rules, update):
            fixed = fix_order(rules, update)
            total += fixed[len(fixed) // 2]
    return total