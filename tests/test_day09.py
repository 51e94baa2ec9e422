import pytest

from aocdays.day09 import part1, part2


@pytest.mark.parametrize(
    "disk_map, expected",
    [
        ("14113", 16),
        ("133", 6),
        ("252", 5),
        ("2333133121414131402", 1928),
        ("111000000000000000001", 12),
        ("12345", 60),
    ],
)
def test_part1_cases(disk_map, expected):
    assert part1(disk_map) == expected


def test_part2_example():
    assert part2("2333133121414131402") == 2858


def test_part1_ignores_surrounding_whitespace():
    assert part1("  12345\n") == 60


def test_part1_invalid_digit():
    with pytest.raises(ValueError):
        part1("12a")


def test_part2_rejects_empty_file():
    with pytest.raises(ValueError):
        part2("01")


def test_part2_invalid_digit():
    with pytest.raises(ValueError):
        part2("1x1")