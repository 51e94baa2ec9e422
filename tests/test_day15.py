from collections import deque

import pytest

from aocdays.day15 import (
    BOX,
    WALL,
    Warehouse,
    checksum_grid,
    find_items,
    find_robot,
    parse_grid,
    parse_moves,
    parse_wide_grid,
    part1,
)

SMALL_MAP = "\n".join(
    [
        "########",
        "#..O.O.#",
        "##@.O..#",
        "#...O..#",
        "#.#.O..#",
        "#...O..#",
        "#......#",
        "########",
    ]
)
SMALL = SMALL_MAP + "\n\n" + "<^^>>>vv<v>>v<<"

LARGE_MAP = (
    "\n".join(
        [
            "##########",
            "#..O..O.O#",
            "#......O.#",
            "#.OO..O.O#",
            "#..O@..O.#",
            "#O#..O...#",
            "#O..O..O.#",
            "#.OO.O.OO#",
            "#....O...#",
            "##########",
        ]
    )
    + "\n"
)

LARGE_MOVES = "\n".join(
    [
        "<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^><<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^",
        "vvv<<^>^v^^><<>>><>^<<><^vv^^<>vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v",
        "><>vv>v^v^<>><>>>><^^>vv>v<^^^>>v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<",
        "<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^",
        "^><^><>>><>^^<<^^v>>><^<v>^<vv>>v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><",
        "^>><>^v<><^vvv<^^<><v<<<<<><^v<<<><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^",
        ">^>>^v>vv>^<<^v<>><<><<v<<v><>v<^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^",
        "<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>",
        "^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>",
        "v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^",
    ]
)

LARGE = LARGE_MAP + "\n" + LARGE_MOVES

LARGE_DONE = (
    "\n".join(
        [
            "##########",
            "#.O.O.OOO#",
            "#........#",
            "#OO......#",
            "#OO@.....#",
            "#O#.....O#",
            "#O.....OO#",
            "#O.....OO#",
            "#OO....OO#",
            "##########",
        ]
    )
    + "\n"
)


def _from_columns(strings):
    """Build a grid whose y-th column (bottom to top) is strings[y]."""
    return [list(chars) for chars in zip(*strings)]


@pytest.mark.parametrize("text, expected", [(SMALL, 2028), (LARGE, 10092)])
def test_part1(text, expected):
    assert part1(text) == expected


def test_checksum_of_finished_warehouse():
    grid = parse_grid(LARGE_DONE)
    robot = find_robot(grid)
    assert robot == (3, 5)
    warehouse = Warehouse(
        moves=deque(),
        robot=robot,
        boxes=find_items(grid, BOX),
        walls=find_items(grid, WALL),
        grid=grid,
    )
    assert warehouse.checksum() == 10092


def test_find_robot():
    assert find_robot(parse_grid(LARGE_DONE)) == (3, 5)


def test_find_robot_missing():
    with pytest.raises(ValueError):
        find_robot(parse_grid("###\n#.#\n###\n"))


def test_parse_grid_layout():
    grid = parse_grid("#######\n#...O..\n#......\n")
    assert (len(grid), len(grid[0])) == (7, 3)
    assert grid[0][2] == "#"
    assert grid[1][2] == "#"
    assert grid[1][1] == "."
    assert grid[4][1] == "O"
    assert grid[3][1] == "."
    assert grid[5][1] == "."
    assert grid[4][2] == "#"
    assert grid[0][1] == "#"
    assert grid[6][0] == "."


def test_parse_grid_rejects_ragged_lines():
    with pytest.raises(ValueError):
        parse_grid("###\n##\n")


def test_parse_wide_grid():
    grid = parse_wide_grid(LARGE_MAP)
    assert (len(grid), len(grid[0])) == (20, 10)
    player_row = [column[5] for column in grid]
    assert "".join(player_row) == "##....[]@.....[]..##"


def test_find_robot_in_wide_grid():
    grid = parse_wide_grid(SMALL_MAP)
    assert find_robot(grid) == (4, 5)


def test_find_items():
    grid = parse_grid("###\n#O#\n###\n")
    assert find_items(grid, BOX) == {(1, 1)}
    assert len(find_items(grid, WALL)) == 8


def test_checksum_grid_one():
    grid = _from_columns(["##########", "##...[]...", "##........"])
    assert checksum_grid(grid) == 105


def test_checksum_grid_two():
    grid = _from_columns(
        [
            "####################",
            "##[].......[].[][]##",
            "##[]...........[].##",
            "##[]........[][][]##",
            "##[]......[]....[]##",
            "##..##......[]....##",
            "##..[]............##",
            "##..@......[].[][]##",
            "##......[][]..[]..##",
            "####################",
        ]
    )
    assert checksum_grid(grid) == 9021


def test_parse_moves():
    assert parse_moves("^>\nv<") == [(0, 1), (1, 0), (0, -1), (-1, 0)]


def test_parse_moves_rejects_unknown():
    with pytest.raises(ValueError):
        parse_moves("^x")


def test_part1_needs_separator():
    with pytest.raises(ValueError):
        part1("#####\n#@..#\n#####")


def test_run_pushes_box_into_space():
    grid = parse_grid("######\n#@O..#\n######\n")
    warehouse = Warehouse(
        moves=deque(parse_moves(">")),
        robot=find_robot(grid),
        boxes=find_items(grid, BOX),
        walls=find_items(grid, WALL),
        grid=grid,
    )
    warehouse.run()
    assert warehouse.robot == (2, 1)
    assert warehouse.boxes == {(3, 1)}
    assert grid[3][1] == "O"
    assert grid[1][1] == "."