"""Plutonian pebbles: count stones after repeated blinking."""

from collections import Counter


def _parse(text):
    stones = []
    for field in text.split():
        value = int(field)
        if value < 0:
            raise ValueError(f"stone numbers must not be negative: {field!r}")
        stones.append(value)
    return stones


def blink(stone):
    """Return the stones that one stone turns into after a single blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return list(divmod(stone, 10**half))
    return [stone * 2024]


def part1(text, blinks):
    """Number of stones after blinks + 1 blinks, simulating every stone."""
    stones = _parse(text)
    for _ in range(blinks + 1):
        stones = [new for stone in stones for new in blink(stone)]
    return len(stones)


def part2(text, blinks):
    """Number of stones after exactly the given number of blinks."""
    counts = Counter(_parse(text))
    for _ in range(blinks):
        following = Counter()
        for stone, count in counts.items():
            for new in blink(stone):
                following[new] += count
        counts = following
    return sum(counts.values())