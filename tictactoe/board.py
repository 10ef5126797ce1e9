"""Board model: cells, marks and the win and draw checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

SIZE = 3


class Player(IntEnum):
    """The mark held by a cell, or the player making a move."""

    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2


@dataclass(frozen=True)
class Cell:
    """A position on the board, by row and column."""

    row: int
    column: int


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def cell_at(cell_size: int, x: int, y: int) -> Cell:
    """Return the cell under the pixel (x, y) for square cells of the given size."""
    return Cell(row=_trunc_div(y, cell_size), column=_trunc_div(x, cell_size))


def _empty_grid() -> list[list[Player]]:
    return [[Player.EMPTY] * SIZE for _ in range(SIZE)]


@dataclass
class Board:
    """A square grid of marks."""

    grid: list[list[Player]] = field(default_factory=_empty_grid)

    def __getitem__(self, cell: Cell) -> Player:
        return self.grid[cell.row][cell.column]

    def place(self, player: Player, cell: Cell) -> bool:
        """Put the player's mark on an empty cell; return whether it was placed."""
        if not (0 <= cell.row < SIZE and 0 <= cell.column < SIZE):
            return False
        if self.grid[cell.row][cell.column] is not Player.EMPTY:
            return False
        self.grid[cell.row][cell.column] = player
        return True

    def has_won(self, player: Player) -> bool:
        """Return whether the player fills a row, a column or a diagonal."""
        lines = [list(row) for row in self.grid]
        lines.extend(list(column) for column in zip(*self.grid))
        lines.append([self.grid[i][i] for i in range(SIZE)])
        lines.append([self.grid[i][SIZE - 1 - i] for i in range(SIZE)])
        return any(all(mark == player for mark in line) for line in lines)

    def is_full(self) -> bool:
        """Return whether every cell holds a mark."""
        return all(mark is not Player.EMPTY for row in self.grid for mark in row)

    def marks(self) -> Iterator[tuple[Cell, Player]]:
        """Yield the occupied cells and their marks, row by row."""
        for row_index, row in enumerate(self.grid):
            for column_index, mark in enumerate(row):
                if mark is not Player.EMPTY:
                    yield Cell(row_index, column_index), mark