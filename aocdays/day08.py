"""Resonant collinearity: antinodes produced by pairs of same-frequency antennas."""

from itertools import combinations, groupby


def _lines(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse(text):
    """Return ((x, y), frequency) for every alphanumeric antenna on the map."""
    antennas = [
        ((x, y), char)
        for y, line in enumerate(text.split("\n"))
        for x, char in enumerate(line)
        if char.isascii() and char.isalnum()
    ]
    if not antennas:
        raise ValueError("failed to parse: no antennas found")
    return antennas


def _bounds(text):
    lines = _lines(text)
    if not lines:
        raise ValueError("empty map")
    return len(lines[0]), len(lines)


def _pairs(antennas):
    ordered = sorted(antennas, key=lambda antenna: antenna[1])
    for _, group in groupby(ordered, key=lambda antenna: antenna[1]):
        yield from combinations([position for position, _ in group], 2)


def _count(text, antinodes_of_pair):
    width, height = _bounds(text)
    antennas = parse(text)

    def inside(point):
        return 0 <= point[0] < width and 0 <= point[1] < height

    found = set()
    for a, b in _pairs(antennas):
        found.update(point for point in antinodes_of_pair(a, b, inside) if inside(point))
    return len(found)


def _two_antinodes(a, b, inside):
    dx, dy = a[0] - b[0], a[1] - b[1]
    return (a[0] + dx, a[1] + dy), (b[0] - dx, b[1] - dy)


def _ray(point, dx, dy, inside):
    while inside(point):
        yield point
        point = (point[0] + dx, point[1] + dy)


def _line_antinodes(a, b, inside):
    dx, dy = a[0] - b[0], a[1] - b[1]
    yield from _ray(a, dx, dy, inside)
    yield from _ray(b, -dx, -dy, inside)


def part1(text):
    """Distinct in-bounds antinodes one spacing beyond each antenna pair."""
    return _count(text, _two_antinodes)


def part2(text):
    """Distinct in-bounds grid points on the line through each antenna pair."""
    return _count(text, _line_antinodes)