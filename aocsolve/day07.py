"""Day 7: restoring operators in calibration equations."""

import operator
import re

_NUMBER = re.compile(r"[0-9]+")


def concat(a, b):
    """Join the decimal digits of a and b into one number."""
    shift = 10 ** len(str(abs(b)))
    return a * shift + b


def parse_equations(text):
    """Return (target, operands) for each non-blank line.

    The target is the number before the colon, the operands follow it.
    """
    equations = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        head, colon, tail = line.partition(":")
        before = _NUMBER.findall(head)
        target = int(before[-1]) if before else 0
        operands = [int(n) for n in _NUMBER.findall(tail)] if colon else []
        if not operands:
            raise ValueError(f"equation without operands: {line!r}")
        equations.append((target, operands))
    return equations


def _solvable(target, operands, ops, first_ops):
    totals = {op(0, operands[0]) for op in first_ops}
    for value in operands[1:]:
        totals = {op(total, value) for total in totals for op in ops}
    return target in totals


def _calibration(text, ops, first_ops):
    return sum(
        target
        for target, operands in parse_equations(text)
        if _solvable(target, operands, ops, first_ops)
    )


def part1(text):
    """Sum the targets reachable with + and * evaluated left to right."""
    ops = (operator.add, operator.mul)
    return _calibration(text, ops, (operator.add,))


def part2(text):
    """Sum the targets reachable with +, * and digit concatenation."""
    ops = (operator.add, operator.mul, concat)
    return _calibration(text, ops, ops)