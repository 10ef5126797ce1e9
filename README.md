# tictactoe

A two-player Tic Tac Toe game played with the mouse in one 1000×1000 window.

## Installing

    pip install .

## Playing

    tictactoe

The game opens on a menu with two buttons:

- **Play Game** starts a match. Player 1 plays X and goes first.
- **Quit** closes the window.

When the match starts, a "PLAYER 1 TURN" box shows for about a second. Click an
empty square to place your mark. After each move there is a 200 ms pause. Then a box
announces the next player's turn for about a second. Clicks are ignored during the
pause and while the box shows.

When a player gets three in a row, the result box appears. It also appears when the
board fills up with no winner ("NO ONE WON!"). After that, a click anywhere in the
window closes the game, except a click on the very top-left pixel. Pressing Escape or
closing the window quits at any time.

Text is drawn with the font at `/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf` by
default. To use a different TrueType font file, pass it with `--font`:

    tictactoe --font path/to/font.ttf

If the font cannot be loaded, the command prints `Font load error: ...` and exits with
status 1.

## Using the pieces

The game logic does not depend on the display, so it can be used on its own:

```python
from tictactoe.board import Board, Player, cell_at

board = Board()
board.place(Player.PLAYER1, cell_at(333, 10, 10))   # True
board.has_won(Player.PLAYER1)                       # False
board.is_full()                                     # False
list(board.marks())                                 # [(Cell(row=0, column=0), Player.PLAYER1)]
```

`tictactoe.game.Game` holds the state of a whole match:

- the phase, which is one of `GameState.MENU`, `PLAYING` or `GAMEOVER`;
- the board and whose turn it is;
- the overlay text and the input delay.

You drive it with `click(x, y, now)` and `update(now)`, where `now` is a time in
milliseconds. `update` returns whether the overlay should be drawn in that frame:

```python
from tictactoe.game import Game, GameState

game = Game()
game.click(500, 255, now=0)      # press "Play Game"
game.state                       # GameState.PLAYING
game.update(now=1500)            # False: the first turn overlay has expired
```

`tictactoe.menu` provides the menu's `Button` (with `bounds()` and `contains(x, y)`)
and `menu_buttons(window_size)`.

`tictactoe.render` holds the pygame drawing functions:

- `draw_borders`, `draw_x`, `draw_o` and `draw_board` draw the grid and the marks;
- `draw_text`, `draw_button` and `draw_menu` draw the menu screen;
- `game_overlay` draws the message box.

`tictactoe.app` provides:

- `load_fonts(path)`, which falls back to pygame's default font when `path` is `None`;
- `render_frame(surface, game, fonts, now)`, which draws one frame;
- `main()`, the entry point of the `tictactoe` command.

## Running the tests

    pip install .[test]
    pytest