"""Bridge repair: which calibration equations can be made true with operators."""

import operator
import re

_EQUATION = re.compile(r"([0-9]+): ([0-9]+(?:[ \t]+[0-9]+)*)")
_LINE_END = re.compile(r"\r?\n")


def parse(text):
    """Return (target, numbers) pairs for every leading well-formed line."""
    equations = []
    position = 0
    while True:
        match = _EQUATION.match(text, position)
        if match is None:
            break
        numbers = tuple(int(number) for number in match[2].split())
        equations.append((int(match[1]), numbers))
        line_end = _LINE_END.match(text, match.end())
        if line_end is None:
            break
        position = line_end.end()
    if not equations:
        raise ValueError(f"failed to parse equations from {text[:40]!r}")
    return equations


def _concat(left, right):
    return int(f"{left}{right}")


def _solvable(target, numbers, operators):
    values = {numbers[0]}
    for number in numbers[1:]:
        values = {op(value, number) for value in values for op in operators}
    return target in values


def _total(text, operators):
    return sum(
        target
        for target, numbers in parse(text)
        if _solvable(target, numbers, operators)
    )


def part1(text):
    """Sum of targets reachable with + and *, evaluated left to right."""
    return _total(text, (operator.mul, operator.add))


def part2(text):
    """Sum of targets reachable with +, * and digit concatenation."""
    return _total(text, (operator.mul, operator.add, _concat))