"""Hoof It: score and rate hiking trails on a topographic map."""

from functools import lru_cache

_PEAK = 9
_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _parse(text):
    grid = []
    for line in text.splitlines():
        row = []
        for char in line:
            if not ("0" <= char <= "9"):
                raise ValueError(f"grid cannot contain non-digits: {char!r}")
            row.append(int(char))
        grid.append(row)
    return grid


def _trailheads(grid):
    return [
        (row, col)
        for row, cells in enumerate(grid)
        for col, height in enumerate(cells)
        if height == 0
    ]


def _steps_up(grid, row, col):
    """Yield neighbouring cells exactly one higher than (row, col)."""
    rows, cols = len(grid), len(grid[0])
    height = grid[row][col]
    for d_row, d_col in _MOVES:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols and grid[r][c] == height + 1:
            yield r, c


def _reachable_peaks(grid, start):
    seen = {start}
    stack = [start]
    peaks = set()
    while stack:
        row, col = stack.pop()
        if grid[row][col] == _PEAK:
            peaks.add((row, col))
            continue
        for cell in _steps_up(grid, row, col):
            if cell not in seen:
                seen.add(cell)
                stack.append(cell)
    return peaks


def part1(text):
    """Sum over trailheads of the number of distinct peaks each can reach."""
    grid = _parse(text)
    return sum(len(_reachable_peaks(grid, start)) for start in _trailheads(grid))


def part2(text):
    """Sum over trailheads of the number of distinct trails to any peak."""
    grid = _parse(text)

    @lru_cache(maxsize=None)
    def trails(row, col):
        if grid[row][col] == _PEAK:
            return 1
        return sum(trails(r, c) for r, c in _steps_up(grid, row, col))

    return sum(trails(row, col) for row, col in _trailheads(grid))