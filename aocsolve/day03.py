"""Day 3: summing mul(x,y) instructions in corrupted memory."""

import re

# Padding keeps every look-ahead window inside the text.
_PAD = "-" * 14
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _to_int(chunk):
    match = _INTEGER.match(chunk)
    if match is None:
        raise ValueError(f"invalid number: {chunk!r}")
    return int(match.group(1))


def _read_number(content, i, delim):
    """Read a number ending at delim within the next four characters.

    Returns the number and the index of the delimiter, or -1 and the
    unchanged index when the delimiter is not found.
    """
    pos = content[i:i + 4].find(delim)
    if pos == -1:
        return -1, i
    return _to_int(content[i:i + pos]), i + pos


def _scan(text, conditional):
    content = text + _PAD
    total = 0
    enabled = True
    i = 0
    while i < len(content):
        if conditional:
            if content.startswith("do()", i):
                enabled = True
                i += 4
            if content.startswith("don't()", i):
                enabled = False
                i += 7
        if enabled and content.startswith("mul(", i):
            i += 4
            x, i = _read_number(content, i, ",")
            if x != -1:
                i += 1
                y, i = _read_number(content, i, ")")
                if y != -1:
                    total += x * y
        i += 1
    return total


def part1(text):
    """Sum the products of all mul(x,y) instructions."""
    return _scan(text, conditional=False)


def part2(text):
    """Sum the products of mul(x,y) instructions not switched off by don't()."""
    return _scan(text, conditional=True)