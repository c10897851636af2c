"""Day 1: comparing two columns of location ids."""

from collections import Counter


def parse_lists(text):
    """Split whitespace-separated pairs of integers into a left and a right list.

    Reading stops at the first token that is not an integer; a trailing
    token without a partner is ignored.
    """
    left, right = [], []
    tokens = iter(text.split())
    for first, second in zip(tokens, tokens):
        try:
            a, b = int(first), int(second)
        except ValueError:
            break
        left.append(a)
        right.append(b)
    return left, right


def part1(text):
    """Total distance between the columns once both are sorted."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text):
    """Similarity score: each left id times how often it appears on the right."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(num * counts[num] for num in left)