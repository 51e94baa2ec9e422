"""Warehouse woes: a robot pushing boxes around a walled warehouse.

Grids are stored as lists of columns: ``grid[x][y]``, where ``x`` is the
position within a line and ``y`` counts lines upward from the bottom one.
"""

from collections import deque
from dataclasses import dataclass, field

WALL = "#"
BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"
ROBOT = "@"
EMPTY = "."

_MOVES = {
    "^": (0, 1),
    ">": (1, 0),
    "v": (0, -1),
    "<": (-1, 0),
}
_WIDE = {
    "#": "##",
    "O": "[]",
    ".": "..",
    "@": "@.",
}


def _add(a, b):
    return a[0] + b[0], a[1] + b[1]


def _columns(rows):
    """Turn top-to-bottom rows into the column layout described above."""
    if not rows:
        return []
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise ValueError("all grid lines must have the same length")
    bottom_up = rows[::-1]
    return [[row[x] for row in bottom_up] for x in range(width)]


def parse_grid(text):
    """Read the warehouse map into ``grid[x][y]`` form."""
    return _columns(text.splitlines())


def parse_wide_grid(text):
    """Read the map with every tile doubled in width."""
    rows = ["".join(_WIDE.get(char, char) for char in line) for line in text.splitlines()]
    return _columns(rows)


def parse_moves(text):
    """Turn the move characters into (dx, dy) steps, ignoring line breaks."""
    moves = []
    for char in text.replace("\n", ""):
        try:
            moves.append(_MOVES[char])
        except KeyError:
            raise ValueError(f"invalid direction character {char!r}") from None
    return moves


def _parse(text):
    grid_text, separator, moves_text = text.partition("\n\n")
    if not separator:
        raise ValueError("no instructions/grid found")
    return parse_grid(grid_text), parse_moves(moves_text)


def find_robot(grid):
    """Return the (x, y) position of the robot."""
    for x, column in enumerate(grid):
        for y, char in enumerate(column):
            if char == ROBOT:
                return x, y
    raise ValueError("there has to be a robot on the map")


def find_items(grid, item):
    """Return the set of (x, y) positions holding the given character."""
    return {
        (x, y)
        for x, column in enumerate(grid)
        for y, char in enumerate(column)
        if char == item
    }


def checksum_grid(grid):
    """Sum of 100 * y + x over the left halves of all wide boxes."""
    return sum(
        y * 100 + x
        for x, column in enumerate(grid)
        for y, char in enumerate(column)
        if char == BOX_LEFT
    )


@dataclass
class Warehouse:
    """The robot, its queued moves, and the boxes and walls it moves among."""

    moves: deque
    robot: tuple
    boxes: set
    walls: set
    grid: list
    cur_move: tuple = (0, 0)

    def _set(self, position, char):
        self.grid[position[0]][position[1]] = char

    def _get(self, position):
        return self.grid[position[0]][position[1]]

    def _move_robot(self):
        self._set(self.robot, EMPTY)
        self.robot = _add(self.robot, self.cur_move)
        self._set(self.robot, ROBOT)

    def _shift_box(self, box, target):
        self.boxes.discard(box)
        self.boxes.add(target)
        self._set(target, BOX)
        self._set(box, EMPTY)
        return target

    def _move_box(self, box):
        """Push the box one step, along with any boxes in front; its new place or None."""
        target = _add(box, self.cur_move)
        if box in self.walls:
            return None
        if self._get(target) == EMPTY:
            return self._shift_box(box, target)
        pushed = self._move_box(target)
        if pushed is not None and pushed == _add(target, self.cur_move):
            return self._shift_box(box, target)
        return None

    def run(self):
        """Carry out every queued move."""
        while self.moves:
            self.cur_move = self.moves.popleft()
            ahead = _add(self.robot, self.cur_move)
            beyond = _add(ahead, self.cur_move)
            if ahead in self.walls:
                continue
            if ahead not in self.boxes:
                self._move_robot()
            elif beyond not in self.walls and beyond not in self.boxes:
                self._move_box(ahead)
                self._move_robot()
            elif beyond in self.boxes and self._move_box(ahead) is not None:
                self._move_robot()

    def checksum(self):
        """Sum of 100 * row-from-top + x over all boxes."""
        height = len(self.grid[0]) if self.grid else 0
        return sum(x + (height - (y + 1)) * 100 for x, y in self.boxes)


def part1(text):
    """Box checksum after the robot has made all its moves."""
    grid, moves = _parse(text)
    if not moves:
        raise ValueError("no moves given")
    warehouse = Warehouse(
        moves=deque(moves),
        robot=find_robot(grid),
        boxes=find_items(grid, BOX),
        walls=find_items(grid, WALL),
        grid=grid,
        cur_move=moves[0],
    )
    warehouse.run()
    return warehouse.checksum()