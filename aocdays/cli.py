"""Command line entry point: run one day's puzzle part on an input file."""

import argparse
import logging
import sys
from functools import partial
from pathlib import Path

from aocdays import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
)

_SOLVERS = {
    (1, 1): day01.part1,
    (1, 2): day01.part2,
    (2, 1): day02.part1,
    (2, 2): day02.part2,
    (3, 1): day03.part1,
    (3, 2): day03.part2,
    (4, 1): day04.part1,
    (4, 2): day04.part2,
    (5, 1): day05.part1,
    (5, 2): day05.part2,
    (6, 1): day06.part1,
    (6, 2): day06.part2,
    (7, 1): day07.part1,
    (7, 2): day07.part2,
    (8, 1): day08.part1,
    (8, 2): day08.part2,
    (9, 1): day09.part1,
    (9, 2): day09.part2,
    (10, 1): day10.part1,
    (10, 2): day10.part2,
    (11, 1): partial(day11.part1, blinks=25 - 1),
    (11, 2): partial(day11.part2, blinks=75),
    (12, 1): day12.part1,
    (13, 1): day13.part1,
    (13, 2): day13.part2,
    (14, 1): day14.part1,
    (14, 2): day14.part2,
    (15, 1): day15.part1,
}

DAYS = sorted({day for day, _ in _SOLVERS})


def solve(day, part, text):
    """Run the given day and part on the puzzle input and return its answer."""
    try:
        solver = _SOLVERS[(day, part)]
    except KeyError:
        raise ValueError(f"no solution for day {day} part {part}") from None
    return solver(text)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="aocdays", description="Solve one part of one day's puzzle."
    )
    parser.add_argument("day", type=int, choices=DAYS, help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="file holding the puzzle input; '-' or nothing reads standard input",
    )
    return parser


def _read_input(source):
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv=None):
    """Parse the arguments, solve the requested part and print the answer."""
    logging.basicConfig(level=logging.WARNING)
    args = _build_parser().parse_args(argv)
    try:
        text = _read_input(args.input)
        result = solve(args.day, args.part, text)
    except (OSError, ValueError) as error:
        print(f"process part {args.part}: {error}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())