import pytest

from aocdays.day02 import UnsafeReport, check_safe, part1, part2

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part1_basic():
    assert part1("44 47 48 49 48\n64 66 68 69 71 72 72") == 0


def test_part2_example():
    assert part2(EXAMPLE) == 4


def test_part2_never_below_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


@pytest.mark.parametrize(
    "report, message",
    [
        ([1], "too short"),
        ([1, 2, 1], "duplicates"),
        ([1, 5], "diff > 3"),
        ([1, 3, 2], "order has changed to ascending"),
        ([5, 3, 4], "order has changed to descending"),
    ],
)
def test_check_safe_reasons(report, message):
    with pytest.raises(UnsafeReport, match=message):
        check_safe(report)


def test_unsafe_report_is_value_error():
    with pytest.raises(ValueError):
        check_safe([])


def test_check_safe_accepts_safe_report():
    assert check_safe([1, 3, 6, 7, 9]) is None