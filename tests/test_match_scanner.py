from match3.core.grid import Grid
from match3.core.types import Match, Position
from match3.core.board_ops import find_horizontal_matches, find_vertical_matches
from match3.generators import board_from_layout, parse_layout


def test_scenario_horizontal_match_after_swap():
    board = board_from_layout(parse_layout("ABAA/BBBC/CCAC/AACA"))
    assert board.move(Position(1, 3), Position(0, 3))
    assert board.piece((1, 3)) == 'A'
    assert board.piece((0, 3)) == 'C'
    assert Match('B', [Position(1, 0), Position(1, 1), Position(1, 2)]) in board.find_horizontal_matches()


def test_uniform_three_by_three_reports_one_window_per_line():
    board = board_from_layout([['X'] * 3 for _ in range(3)])
    horizontal = board.find_horizontal_matches()
    vertical = board.find_vertical_matches()
    assert [list(m.positions) for m in horizontal] == [
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
    ]
    assert [list(m.positions) for m in vertical] == [
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
    ]
    assert all(m.matched == 'X' for m in horizontal + vertical)


def test_run_of_four_yields_overlapping_windows():
    grid = Grid([list("AAAA")], 4, 1)
    matches = find_horizontal_matches(grid)
    assert matches == [
        Match('A', [Position(0, 0), Position(0, 1), Position(0, 2)]),
        Match('A', [Position(0, 1), Position(0, 2), Position(0, 3)]),
    ]


def test_vertical_run_of_four_yields_overlapping_windows():
    grid = Grid([['B'], ['B'], ['B'], ['B']], 1, 4)
    matches = find_vertical_matches(grid)
    assert [list(m.positions) for m in matches] == [
        [(0, 0), (1, 0), (2, 0)],
        [(1, 0), (2, 0), (3, 0)],
    ]


def test_vertical_matches_ordered_by_top_cell_row_major():
    rows = parse_layout("ABCD/EBCA/DBFA/GHIA")
    board = board_from_layout(rows)
    vertical = board.find_vertical_matches()
    assert [(m.matched, m.positions[0]) for m in vertical] == [
        ('B', (0, 1)),
        ('A', (1, 3)),
    ]


def test_scan_is_global():
    board = board_from_layout(parse_layout("AAAB/CDEF/GHIJ/KKKL"))
    assert [m.positions[0] for m in board.find_horizontal_matches()] == [(0, 0), (3, 0)]


def test_narrow_boards_have_no_matches():
    board = board_from_layout(parse_layout("AA/AA"))
    assert board.find_horizontal_matches() == []
    assert board.find_vertical_matches() == []
