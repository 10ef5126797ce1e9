import pytest

from tictactoe.board import SIZE, Board, Cell, Player, cell_at


def test_place_on_empty_cell():
    board = Board()
    assert board.place(Player.PLAYER1, Cell(1, 2)) is True
    assert board[Cell(1, 2)] is Player.PLAYER1


def test_place_on_occupied_cell_is_refused():
    board = Board()
    board.place(Player.PLAYER1, Cell(0, 0))
    assert board.place(Player.PLAYER2, Cell(0, 0)) is False
    assert board[Cell(0, 0)] is Player.PLAYER1


@pytest.mark.parametrize(
    "cell", [Cell(-1, 0), Cell(0, -1), Cell(SIZE, 0), Cell(0, SIZE)]
)
def test_place_out_of_range_is_refused(cell):
    board = Board()
    assert board.place(Player.PLAYER1, cell) is False
    assert list(board.marks()) == []


def _winning_lines():
    lines = [[Cell(r, c) for c in range(SIZE)] for r in range(SIZE)]
    lines += [[Cell(r, c) for r in range(SIZE)] for c in range(SIZE)]
    lines.append([Cell(i, i) for i in range(SIZE)])
    lines.append([Cell(i, SIZE - 1 - i) for i in range(SIZE)])
    return lines


@pytest.mark.parametrize("line", _winning_lines())
def test_full_line_wins(line):
    board = Board()
    for cell in line:
        board.place(Player.PLAYER2, cell)
    assert board.has_won(Player.PLAYER2) is True
    assert board.has_won(Player.PLAYER1) is False


def test_two_in_a_row_does_not_win():
    board = Board()
    board.place(Player.PLAYER1, Cell(0, 0))
    board.place(Player.PLAYER1, Cell(0, 1))
    board.place(Player.PLAYER2, Cell(0, 2))
    assert board.has_won(Player.PLAYER1) is False
    assert board.has_won(Player.PLAYER2) is False


def test_is_full():
    board = Board()
    cells = [Cell(r, c) for r in range(SIZE) for c in range(SIZE)]
    for index, cell in enumerate(cells):
        assert board.is_full() is False
        board.place(Player.PLAYER1 if index % 2 == 0 else Player.PLAYER2, cell)
    assert board.is_full() is True


def test_marks_in_row_order():
    board = Board()
    board.place(Player.PLAYER2, Cell(2, 0))
    board.place(Player.PLAYER1, Cell(0, 1))
    assert list(board.marks()) == [
        (Cell(0, 1), Player.PLAYER1),
        (Cell(2, 0), Player.PLAYER2),
    ]


@pytest.mark.parametrize("x, y", [(0, 0), (332, 1), (333, 666), (998, 500)])
def test_cell_at_contains_point(x, y):
    cell = cell_at(333, x, y)
    assert cell.column * 333 <= x < (cell.column + 1) * 333
    assert cell.row * 333 <= y < (cell.row + 1) * 333


def test_cell_at_origin():
    assert cell_at(333, 0, 0) == Cell(0, 0)


def test_edge_pixel_falls_outside_board():
    board = Board()
    assert board.place(Player.PLAYER1, cell_at(333, 999, 999)) is False