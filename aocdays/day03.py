"""Corrupted memory: add up the products of well-formed mul instructions."""

import re

_MUL = "mul("
_DO = "do()"
_DONT = "don't()"
_INT = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _to_int(field):
    if not _INT.fullmatch(field):
        return None
    value = int(field)
    return value if _I64_MIN <= value <= _I64_MAX else None


def _product(inside):
    left, _, right = inside.partition(",")
    a, b = _to_int(left), _to_int(right)
    if a is None or b is None:
        return 0
    return a * b


def _scan(text, conditional):
    data = text
    total = 0
    enabled = True
    while _MUL in data and ")" in data and "," in data:
        data = data[data.index(_MUL):]
        end = data.find(")")
        if end < 0:
            raise ValueError("mul instruction without a closing parenthesis")
        inside = data[len(_MUL):end]
        if "()" in inside or inside.startswith(_MUL) or "," not in inside:
            data = data[3:]
            continue
        if enabled:
            total += _product(inside)
        rest = data[len(_MUL):]
        following = rest.find(_MUL)
        if following < 0:
            break
        if conditional:
            disable_at = rest.find(_DONT)
            if 0 <= disable_at < following:
                enabled = False
            enable_at = rest.find(_DO)
            if 0 <= enable_at < following:
                enabled = True
        data = data[following:]
    return total


def _join_lines(text):
    return "".join(line.removesuffix("\r") for line in text.split("\n"))


def part1(text):
    """Sum of all valid mul products."""
    return _scan(_join_lines(text), conditional=False)


def part2(text):
    """Sum of valid mul products while honouring do() and don't()."""
    return _scan(_join_lines(text), conditional=True)