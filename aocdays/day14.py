"""Restroom redoubt: robots moving on a wrapping grid."""

from collections import Counter
from dataclasses import dataclass
from math import prod

WIDTH = 101
HEIGHT = 103


@dataclass(frozen=True)
class Robot:
    """A robot's starting position and its velocity per second, both as (x, y)."""

    position: tuple
    velocity: tuple

    def position_after(self, seconds, width, height):
        """Position after the given number of seconds, wrapping around the grid edges."""
        x, y = self.position
        dx, dy = self.velocity
        return (x + dx * seconds) % width, (y + dy * seconds) % height


def _pair(field, line):
    values = field[2:].split(",")
    if len(values) != 2:
        raise ValueError(f"malformed robot line: {line!r}")
    return int(values[0]), int(values[1])


def parse(text):
    """Read one robot per line in the form 'p=x,y v=dx,dy'."""
    robots = []
    for line in text.splitlines():
        fields = line.strip().split(" ")
        if len(fields) != 2:
            raise ValueError(f"malformed robot line: {line!r}")
        robots.append(Robot(_pair(fields[0], line), _pair(fields[1], line)))
    return robots


def part1(text, width=WIDTH, height=HEIGHT):
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    mid_x, mid_y = width // 2, height // 2
    quadrants = Counter()
    for robot in parse(text):
        x, y = robot.position_after(100, width, height)
        if x != mid_x and y != mid_y:
            quadrants[(x < mid_x, y < mid_y)] += 1
    corners = ((True, True), (True, False), (False, True), (False, False))
    return prod(quadrants[corner] for corner in corners)


def part2(text, width=WIDTH, height=HEIGHT):
    """First second at which no two robots share a tile, or 0 if that never happens."""
    robots = parse(text)
    for seconds in range(width * height):
        positions = {robot.position_after(seconds, width, height) for robot in robots}
        if len(positions) == len(robots):
            return seconds
    return 0