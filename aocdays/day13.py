"""Claw contraption: fewest tokens needed to win prizes from claw machines."""

import heapq
import re
from dataclasses import dataclass
from fractions import Fraction

COST_A = 3
COST_B = 1
PRIZE_OFFSET = 10_000_000_000_000

_GAME = re.compile(
    r"Button [AB]: X\+([0-9]+), Y\+([0-9]+)\r?\n"
    r"Button [AB]: X\+([0-9]+), Y\+([0-9]+)\r?\n"
    r"Prize: X=([0-9]+), Y=([0-9]+)"
)
_SEPARATOR = re.compile(r"\r?\n\r?\n")


@dataclass(frozen=True)
class ClawMachine:
    """Movement of buttons A and B and the location of the prize, as (x, y)."""

    a: tuple
    b: tuple
    prize: tuple


def _machine(match, offset):
    ax, ay, bx, by, px, py = (int(value) for value in match.groups())
    return ClawMachine(a=(ax, ay), b=(bx, by), prize=(px + offset, py + offset))


def parse(text, offset):
    """Read the blank-line separated machine blocks, shifting every prize by offset."""
    match = _GAME.match(text)
    if match is None:
        raise ValueError(f"invalid blocks in input: {text[:40]!r}")
    machines = []
    while match is not None:
        machines.append(_machine(match, offset))
        separator = _SEPARATOR.match(text, match.end())
        if separator is None:
            break
        match = _GAME.match(text, separator.end())
    return machines


def _cheapest_by_search(machine):
    """Lowest token cost to land exactly on the prize, or None if it cannot be done."""
    prize = machine.prize
    buttons = ((machine.a, COST_A), (machine.b, COST_B))
    queue = [(0, (0, 0))]
    settled = set()
    while queue:
        cost, position = heapq.heappop(queue)
        if position in settled:
            continue
        settled.add(position)
        if position == prize:
            return cost
        if position[0] > prize[0] or position[1] > prize[1]:
            continue
        for (dx, dy), price in buttons:
            following = (position[0] + dx, position[1] + dy)
            if following not in settled:
                heapq.heappush(queue, (cost + price, following))
    return None


def _cost_by_determinants(machine):
    """Token cost from solving the two linear equations, or None without an integer solution."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    determinant = ax * by - ay * bx
    if determinant == 0 or bx == 0:
        return None
    presses_a = Fraction(px * by - py * bx, determinant)
    presses_b = (px - ax * presses_a) / bx
    if presses_a.denominator != 1 or presses_b.denominator != 1:
        return None
    # Negative press counts are treated as zero presses of that button.
    return COST_A * max(int(presses_a), 0) + COST_B * max(int(presses_b), 0)


def part1(text):
    """Total tokens for all winnable prizes, found by searching button presses."""
    costs = (_cheapest_by_search(machine) for machine in parse(text, 0))
    return sum(cost for cost in costs if cost is not None)


def part2(text, offset=PRIZE_OFFSET):
    """Total tokens for all winnable prizes placed offset further away, solved exactly."""
    costs = (_cost_by_determinants(machine) for machine in parse(text, offset))
    return sum(cost for cost in costs if cost is not None)