"""Historian location lists: total distance and similarity score."""

from collections import Counter


def _parse(text):
    """Split the input into the left and right location-id columns."""
    left, right = [], []
    for number, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"line {number}: expected two location ids, got {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part1(text):
    """Sum of distances between the sorted left and right lists."""
    left, right = _parse(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text):
    """Sum of each left value times how often it occurs in the right list."""
    left, right = _parse(text)
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)