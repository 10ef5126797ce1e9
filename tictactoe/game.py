"""Game state machine driven by clicks and the passage of time."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from tictactoe.board import SIZE, Board, Player, cell_at
from tictactoe.menu import Button, menu_buttons

WINDOW_SIZE = 1000
OVERLAY_DURATION = 1000
INPUT_DELAY = 200

_TURN_TEXT = {Player.PLAYER1: "PLAYER 1 TURN", Player.PLAYER2: "PLAYER 2 TURN"}
_WIN_TEXT = {
    Player.PLAYER1: ">>>PLAYER 1 WON!!!<<<",
    Player.PLAYER2: ">>>PLAYER 2 WON!!!<<<",
}
DRAW_TEXT = "NO ONE WON!"


class GameState(Enum):
    """The screen the game is on."""

    MENU = auto()
    PLAYING = auto()
    GAMEOVER = auto()


@dataclass
class Game:
    """A two-player game on one screen; times are in milliseconds."""

    window_size: int = WINDOW_SIZE
    board: Board = field(default_factory=Board)
    state: GameState = GameState.MENU
    turn: Player = Player.PLAYER1
    overlay_text: str = ""
    overlay_start: int = 0
    show_overlay: bool = False
    input_locked: bool = False
    input_lock_start: int = 0
    running: bool = True
    buttons: list[Button] = field(init=False)

    def __post_init__(self) -> None:
        self.buttons = menu_buttons(self.window_size)

    @property
    def cell_size(self) -> int:
        return self.window_size // SIZE

    def click(self, x: int, y: int, now: int) -> None:
        """Handle a mouse press at (x, y) at time `now`."""
        if self.state is GameState.MENU:
            play, quit_button = self.buttons
            if play.contains(x, y):
                self.state = GameState.PLAYING
                self.overlay_start = now
                self.show_overlay = True
                self.overlay_text = _TURN_TEXT[Player.PLAYER1]
            elif quit_button.contains(x, y):
                self.running = False
        elif self.state is GameState.PLAYING:
            cell = cell_at(self.cell_size, x, y)
            if self.show_overlay or self.input_locked:
                return
            if not self.board.place(self.turn, cell):
                return
            if self.board.has_won(self.turn):
                self._finish(_WIN_TEXT[self.turn])
            elif self.board.is_full():
                self._finish(DRAW_TEXT)
            else:
                self.input_locked = True
                self.input_lock_start = now
        elif self.state is GameState.GAMEOVER:
            if x or y:
                self.running = False

    def _finish(self, text: str) -> None:
        self.overlay_text = text
        self.show_overlay = False
        self.input_locked = False
        self.state = GameState.GAMEOVER

    def update(self, now: int) -> bool:
        """Advance timers to `now`; return whether the overlay shows this frame."""
        visible = self.state is GameState.GAMEOVER
        if self.show_overlay and self.state is GameState.PLAYING:
            if now - self.overlay_start < OVERLAY_DURATION:
                visible = True
            else:
                self.show_overlay = False
        if self.input_locked and self.state is GameState.PLAYING:
            if now - self.input_lock_start > INPUT_DELAY:
                self.input_locked = False
                self.turn = (
                    Player.PLAYER2 if self.turn is Player.PLAYER1 else Player.PLAYER1
                )
                self.overlay_start = now
                self.show_overlay = True
                self.overlay_text = _TURN_TEXT[self.turn]
        return visible