"""Garden groups: fence prices of connected regions of plants."""

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def parse(text):
    """Map each (x, y) position to the plant growing there."""
    return {
        (x, y): plant
        for y, line in enumerate(text.splitlines())
        for x, plant in enumerate(line)
    }


def _same_neighbours(garden, position):
    x, y = position
    plant = garden[position]
    for dx, dy in _DIRECTIONS:
        neighbour = (x + dx, y + dy)
        if garden.get(neighbour) == plant:
            yield neighbour


def regions(garden):
    """Return the connected regions of identical plants as sets of positions."""
    seen = set()
    found = []
    for start in garden:
        if start in seen:
            continue
        seen.add(start)
        region = {start}
        stack = [start]
        while stack:
            for neighbour in _same_neighbours(garden, stack.pop()):
                if neighbour not in seen:
                    seen.add(neighbour)
                    region.add(neighbour)
                    stack.append(neighbour)
        found.append(region)
    return found


def part1(text):
    """Total fence price: area times perimeter summed over all regions."""
    garden = parse(text)
    total = 0
    for region in regions(garden):
        perimeter = sum(
            4 - sum(1 for _ in _same_neighbours(garden, position)) for position in region
        )
        total += perimeter * len(region)
    return total