"""Guard patrol: cells the guard visits and obstructions that trap it in a loop."""

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_START = "^"
_WALL = "#"
_PLACED = "0"
_OBSTACLES = _WALL + _PLACED
_MARKED = "-|^+"


def parse_grid(text):
    """Turn the map into a list of rows of characters."""
    return [list(line) for line in text.splitlines()]


def find_start(grid):
    """Return the (row, column) of the guard."""
    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            if cell == _START:
                return row, col
    raise ValueError("no starting position found")


def _inside(grid, row, col):
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def _walk(grid, start, obstacles):
    """Yield every cell the guard steps into, until it leaves the map."""
    row, col = start
    turns = 0
    while True:
        d_row, d_col = _DIRECTIONS[turns]
        next_row, next_col = row + d_row, col + d_col
        if not _inside(grid, next_row, next_col):
            return
        if grid[next_row][next_col] in obstacles:
            turns = (turns + 1) % 4
            d_row, d_col = _DIRECTIONS[turns]
            if not _inside(grid, row + d_row, col + d_col):
                return
        else:
            row, col = next_row, next_col
            yield row, col


def is_loop(start, grid):
    """True if the guard starting at start never leaves the grid."""
    seen = set()
    row, col = start
    turns = 0
    while True:
        d_row, d_col = _DIRECTIONS[turns]
        next_row, next_col = row + d_row, col + d_col
        if not _inside(grid, next_row, next_col):
            return False
        state = (next_row, next_col, turns)
        if state in seen:
            return True
        seen.add(state)
        if grid[next_row][next_col] in _OBSTACLES:
            turns = (turns + 1) % 4
            d_row, d_col = _DIRECTIONS[turns]
            if not _inside(grid, row + d_row, col + d_col):
                return False
        else:
            row, col = next_row, next_col


def _with_obstacle(grid, row, col):
    blocked = list(grid)
    blocked[row] = list(grid[row])
    blocked[row][col] = _PLACED
    return blocked


def part1(text):
    """Number of distinct cells the guard visits before leaving."""
    grid = parse_grid(text)
    start = find_start(grid)
    visited = {start}
    for row, col in _walk(grid, start, _WALL):
        if grid[row][col] != _START:
            visited.add((row, col))
    return len(visited)


def part2(text):
    """Number of cells on the path where one new obstruction makes the guard loop."""
    grid = parse_grid(text)
    start = find_start(grid)
    candidates = {
        (row, col)
        for row, col in _walk(grid, start, _OBSTACLES)
        if grid[row][col] not in _MARKED
    }
    candidates.discard(start)
    return sum(
        is_loop(start, _with_obstacle(grid, row, col)) for row, col in candidates
    )