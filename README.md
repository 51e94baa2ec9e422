# aocdays

Solvers for fifteen days of daily programming puzzles: list distances,
report safety, corrupted-memory scanning, word search, page ordering, guard
patrols, operator equations, antenna antinodes, disk compaction, trailheads,
splitting stones, garden regions, claw machines, patrolling robots and a
warehouse robot pushing boxes.

Each day is a module, `aocdays.day01` through `aocdays.day15`. Most expose
`part1(text)` and `part2(text)`. They take the raw puzzle input as a string
and return the answer as an integer. The package has no dependencies beyond
the standard library.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Command line

The `aocdays` command solves one part of one day and prints the answer:

    aocdays 1 1 input.txt
    aocdays 11 2 stones.txt
    aocdays 7 2 < equations.txt

The command takes the day, then the part, then the path to the puzzle input.
If the path is left out or given as `-`, the input is read from standard
input. If the file cannot be read, or the input cannot be parsed, the command
prints the error to standard error and exits with status 1.
`python -m aocdays.cli` works the same way.

## Library use

    from aocdays import day01, day11

    day01.part1("3 4\n4 3\n2 5\n1 3\n3 9\n3 3")   # 11
    day01.part2("3 4\n4 3\n2 5\n1 3\n3 9\n3 3")   # 31
    day11.part2("125 17", 25)                   # 55312

`aocdays.cli.solve(day, part, text)` picks the right solver and uses the same
defaults as the command line:

- Day 11 part 1 is called as `day11.part1(text, 24)`. `part1` simulates
  `blinks + 1` blinks, so this runs 25 blinks. Part 2 runs 75 blinks through
  `day11.part2(text, 75)`, which counts stones without simulating each one.
- Day 13 part 2 moves every prize `day13.PRIZE_OFFSET` further away. Pass
  `offset=0` to `day13.part2` to solve the machines as written.
- Day 14 uses a 101 by 103 floor (`day14.WIDTH`, `day14.HEIGHT`). Both parts
  accept `width` and `height` for other floor sizes.

Several days also expose their building blocks:

- `day02.check_safe(report)` raises `UnsafeReport` with the reason a report fails.
- `day05.parse`, `day05.middle_if_ordered` and `day05.reorder`
- `day06.parse_grid`, `day06.find_start` and `day06.is_loop`
- `day07.parse` and `day08.parse`
- `day11.blink(stone)`
- `day12.parse` and `day12.regions`
- `day13.parse(text, offset)` and `day13.ClawMachine`
- `day14.parse` and `day14.Robot.position_after(seconds, width, height)`
- `day15.parse_grid`, `day15.parse_wide_grid`, `day15.parse_moves`,
  `day15.find_robot`, `day15.find_items`, `day15.checksum_grid` and the
  `day15.Warehouse` class with `run()` and `checksum()`

Bad input raises an exception, usually `ValueError`, rather than returning a
status.

## What is not included

- Day 12 has only part 1. There is no solver for the second part of the
  garden puzzle.
- Day 15 has only part 1. `parse_wide_grid` and `checksum_grid` read and
  score the double-width warehouse, but nothing moves the robot through it,
  so there is no part 2 solver.

`aocdays 12 2` and `aocdays 15 2` report that there is no solution for that
part.