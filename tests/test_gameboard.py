import random
from itertools import product

import pytest

from seeschlacht.gameboard import FLEET_LENGTHS, GameBoard


@pytest.fixture(params=[1, 7, 42, 2019])
def board(request):
    return GameBoard(random.Random(request.param))


def _all_cells(board):
    return [cell for ship in board.ships for cell in ship.cells]


def _water_cell(board):
    occupied = set(_all_cells(board))
    return next(c for c in product(range(10), repeat=2) if c not in occupied)


def test_fleet_has_expected_lengths(board):
    assert [len(ship) for ship in board.ships] == list(FLEET_LENGTHS)
    assert FLEET_LENGTHS == (5, 4, 4, 3, 3, 3, 2, 2, 2, 2)


def test_ships_do_not_overlap_and_stay_on_board(board):
    cells = _all_cells(board)
    assert len(cells) == sum(FLEET_LENGTHS)
    assert len(set(cells)) == len(cells)
    assert all(0 <= r < 10 and 0 <= c < 10 for r, c in cells)


def test_own_board_shows_ship_lengths(board):
    for ship in board.ships:
        for row, col in ship.cells:
            assert board.own_board[row][col] == str(len(ship))
    water = sum(cell == "." for row in board.own_board for cell in row)
    assert water == 100 - sum(FLEET_LENGTHS)


def test_enemy_board_starts_empty(board):
    assert all(cell == "." for row in board.enemy_board for cell in row)


def test_miss_marks_open_water(board):
    row, col = _water_cell(board)
    assert board.hit(row, col) is False
    assert board.own_board[row][col] == "O"
    assert board.hit(row, col) is False
    assert board.own_board[row][col] == "O"


def test_hit_damages_ship_and_marks_x(board):
    ship = board.ships[0]
    row, col = ship.cells[0]
    assert board.hit(row, col) is True
    assert board.own_board[row][col] == "X"
    assert ship.is_damaged()
    assert not ship.is_sunk()


def test_sinking_marks_every_part(board):
    ship = board.ships[6]
    for row, col in ship.cells:
        assert board.hit(row, col) is True
    assert ship.is_sunk()
    assert all(board.own_board[r][c] == "S" for r, c in ship.cells)
    assert not board.all_ships_sunk()


def test_all_ships_sunk_after_every_part_hit(board):
    assert not board.all_ships_sunk()
    for row, col in _all_cells(board):
        board.hit(row, col)
    assert board.all_ships_sunk()
    assert all(board.own_board[r][c] == "S" for r, c in _all_cells(board))


def test_mark_records_hits_and_misses(board):
    board.mark(2, 3, True)
    board.mark(4, 5, False)
    assert board.enemy_board[2][3] == "X"
    assert board.enemy_board[4][5] == "O"
    assert board.enemy_board[0][0] == "."


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 10), (10, 10), (3, -2)])
def test_out_of_range_cells_raise(board, row, col):
    with pytest.raises(IndexError):
        board.hit(row, col)
    with pytest.raises(IndexError):
        board.mark(row, col, True)


def test_render_enemy_board_layout(board):
    lines = board.render_enemy_board().split("\n")
    assert len(lines) == 12
    assert lines[0] == "01|" + ". " * 10
    assert lines[9].startswith("10|")
    assert lines[10] == "   " + "--" * 10
    assert lines[11] == "   1 2 3 4 5 6 7 8 9 10"


def test_render_board_adds_trailing_blank_lines(board):
    text = board.render_board()
    assert text.endswith("\n\n\n")
    lines = text.rstrip("\n").split("\n")
    for index, row in enumerate(board.own_board):
        assert lines[index][3:] == "".join(f"{cell} " for cell in row)


def test_render_reflects_marks(board):
    board.mark(0, 0, True)
    board.mark(0, 1, False)
    assert board.render_enemy_board().split("\n")[0].startswith("01|X O . ")


def test_same_seed_gives_same_layout():
    first = GameBoard(random.Random(99))
    second = GameBoard(random.Random(99))
    assert _all_cells(first) == _all_cells(second)
    assert first.own_board == second.own_board


def test_random_place_ships_replaces_fleet_without_overlap(board):
    board.random_place_ships()
    cells = _all_cells(board)
    assert [len(ship) for ship in board.ships] == list(FLEET_LENGTHS)
    assert len(set(cells)) == len(cells)
    assert all(not ship.is_damaged() for ship in board.ships)