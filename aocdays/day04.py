"""Word search: count XMAS occurrences and X-shaped MAS crosses."""

_WORD = "XMAS"
_DIRECTIONS = (
    (-1, 0),
    (0, 1),
    (1, 0),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, -1),
    (-1, 1),
)
_CROSSES = (
    ("M_S", "_A_", "M_S"),
    ("S_M", "_A_", "S_M"),
    ("S_S", "_A_", "M_M"),
    ("M_M", "_A_", "S_S"),
)
_ANY = "_"


def _spells(grid, row, col, d_row, d_col):
    rows, cols = len(grid), len(grid[0])
    for step, letter in enumerate(_WORD):
        r, c = row + d_row * step, col + d_col * step
        if not (0 <= r < rows and 0 <= c < cols) or grid[r][c] != letter:
            return False
    return True


def _matches(grid, pattern, row, col):
    rows, cols = len(grid), len(grid[0])
    for d_row, pattern_row in enumerate(pattern):
        for d_col, letter in enumerate(pattern_row):
            r, c = row + d_row, col + d_col
            if r >= rows or c >= cols:
                return False
            if letter != _ANY and grid[r][c] != letter:
                return False
    return True


def part1(text):
    """Count XMAS in all eight directions."""
    grid = text.splitlines()
    if not grid:
        return 0
    return sum(
        _spells(grid, row, col, d_row, d_col)
        for row in range(len(grid))
        for col in range(len(grid[0]))
        for d_row, d_col in _DIRECTIONS
    )


def part2(text):
    """Count two MAS words crossing in an X."""
    grid = text.splitlines()
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    return sum(
        _matches(grid, pattern, row, col)
        for row in range(max(rows - 2, 1))
        for col in range(max(cols - 2, 1))
        for pattern in _CROSSES
    )