from __future__ import annotations

from typing import List, Tuple

from match3.constants import EMPTY, MATCH_LENGTH
from match3.core.grid import Grid
from match3.core.types import Match, Position


# Stand-in for the contents of cells outside the board. It equals only itself,
# so an off-board probe runs along every row (or column) of that missing line.
_OFF_BOARD = object()


def _cell(grid: Grid, row: int, col: int):
    # Negative indices must not wrap around to the far edge.
    if grid.in_bounds((row, col)):
        return grid.cells[row][col]
    return _OFF_BOARD


def has_match_at(grid: Grid, position: Tuple[int, int]) -> bool:
    """Return True if the piece at position sits in a horizontal or vertical run of 3+.

    A position just off the board holds no piece; every cell of its missing
    column is equally absent, so such a probe matches once the board is at
    least three rows tall.
    """
    row, col = position
    piece = _cell(grid, row, col)
    # Horizontal sweep
    same = 1
    c_left = col - 1
    while c_left >= 0 and _cell(grid, row, c_left) == piece:
        same += 1
        c_left -= 1
    c_right = col + 1
    while c_right < grid.width and _cell(grid, row, c_right) == piece:
        same += 1
        c_right += 1
    if same >= MATCH_LENGTH:
        return True
    # Vertical sweep
    same = 1
    r_up = row - 1
    while r_up >= 0 and _cell(grid, r_up, col) == piece:
        same += 1
        r_up -= 1
    r_down = row + 1
    while r_down < grid.height and _cell(grid, r_down, col) == piece:
        same += 1
        r_down += 1
    return same >= MATCH_LENGTH


def can_swap(grid: Grid, first: Tuple[int, int], second: Tuple[int, int]) -> bool:
    """Return True if swapping first/second is allowed and would create a match.

    The two cells must differ, be on the board and share a row or a column;
    they do not have to be adjacent. The grid is left untouched.
    """
    if tuple(first) == tuple(second):
        return False
    if not (grid.in_bounds(first) and grid.in_bounds(second)):
        return False
    r1, c1 = first
    r2, c2 = second
    if r1 != r2 and c1 != c2:
        return False
    probes = [
        (r1, c1),
        (r2, c2),
        (r1, c1 + 1),
        (r1, c1 - 1),
        (r2, c2 + 1),
        (r2, c2 - 1),
    ]
    grid.swap(first, second)
    try:
        return any(has_match_at(grid, probe) for probe in probes)
    finally:
        grid.swap(first, second)


def find_horizontal_matches(grid: Grid) -> List[Match]:
    """Report every three-cell horizontal window of equal pieces.

    Windows overlap: a run of four yields two matches.
    """
    cells = grid.cells
    matches: List[Match] = []
    for row in range(grid.height):
        for col in range(grid.width - 2):
            piece = cells[row][col]
            if piece == cells[row][col + 1] and piece == cells[row][col + 2]:
                matches.append(Match(
                    matched=piece,
                    positions=(Position(row, col), Position(row, col + 1), Position(row, col + 2)),
                ))
    return matches


def find_vertical_matches(grid: Grid) -> List[Match]:
    """Report every three-cell vertical window of equal pieces, ordered by top cell."""
    cells = grid.cells
    matches: List[Match] = []
    for row in range(grid.height - 2):
        for col in range(grid.width):
            piece = cells[row][col]
            if piece == cells[row + 1][col] and piece == cells[row + 2][col]:
                matches.append(Match(
                    matched=piece,
                    positions=(Position(row, col), Position(row + 1, col), Position(row + 2, col)),
                ))
    return matches


def find_cascading_matches(grid: Grid) -> List[Match]:
    """Predict matches created by pieces falling one row into an empty cell below.

    Rows are probed bottom to top, columns left to right. Each fall is
    simulated on its own and reverted before the next cell is probed, so the
    grid is unchanged afterwards. Each result holds only the landing cell.
    """
    cells = grid.cells
    matches: List[Match] = []
    for row in range(grid.height - 1, -1, -1):
        for col in range(grid.width):
            piece = cells[row][col]
            if piece is EMPTY:
                continue
            if row < grid.height - 1 and cells[row + 1][col] is EMPTY:
                landing = Position(row + 1, col)
                grid.swap((row, col), landing)
                try:
                    if has_match_at(grid, landing):
                        matches.append(Match(matched=piece, positions=(landing,)))
                finally:
                    grid.swap((row, col), landing)
    return matches
