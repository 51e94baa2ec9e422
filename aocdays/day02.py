"""Reactor reports: count those whose levels change safely."""

import logging

logger = logging.getLogger(__name__)


class UnsafeReport(ValueError):
    """Raised when a report breaks one of the safety rules."""


def check_safe(report):
    """Raise UnsafeReport unless the levels are strictly monotonic with steps of 1 to 3."""
    if len(report) < 2:
        raise UnsafeReport("too short")
    if len(set(report)) != len(report):
        raise UnsafeReport("duplicates")
    ascending = report[0] < report[1]
    for a, b in zip(report, report[1:]):
        if abs(a - b) > 3:
            raise UnsafeReport("diff > 3")
        if a < b and not ascending:
            raise UnsafeReport("order has changed to descending")
        if a > b and ascending:
            raise UnsafeReport("order has changed to ascending")


def _is_safe(report):
    try:
        check_safe(report)
    except UnsafeReport:
        return False
    return True


def _parse(text):
    return [[int(level) for level in line.split()] for line in text.splitlines()]


def part1(text):
    """Number of reports that are safe as given."""
    safe = 0
    for report in _parse(text):
        try:
            check_safe(report)
        except UnsafeReport as error:
            logger.debug("unsafe report %s: %s", report, error)
        else:
            safe += 1
    return safe


def part2(text):
    """Number of reports that are safe, or become safe by dropping one level."""
    safe = 0
    for report in _parse(text):
        try:
            check_safe(report)
        except UnsafeReport as error:
            if any(_is_safe(report[:i] + report[i + 1:]) for i in range(len(report))):
                safe += 1
            else:
                logger.debug("unsafe report %s: %s", report, error)
        else:
            safe += 1
    return safe