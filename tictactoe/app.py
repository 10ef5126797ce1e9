"""Window, fonts and the main event loop."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

import pygame

from tictactoe.game import WINDOW_SIZE, Game, GameState
from tictactoe.render import draw_board, draw_borders, draw_menu, game_overlay

FONT_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
OVERLAY_FONT_SIZE = 32
TITLE_FONT_SIZE = 48
BUTTON_FONT_SIZE = 28
AUTHOR_FONT_SIZE = 11
WINDOW_TITLE = "Tic Tac Toe Game"
FRAME_RATE = 60


@dataclass(frozen=True)
class Fonts:
    """The fonts used by the overlay, the menu title, buttons and footer."""

    overlay: pygame.font.Font
    title: pygame.font.Font
    button: pygame.font.Font
    author: pygame.font.Font


def load_fonts(path: str | None) -> Fonts:
    """Load the game's fonts from a font file, or pygame's default font for None."""
    if not pygame.font.get_init():
        pygame.font.init()
    return Fonts(
        overlay=pygame.font.Font(path, OVERLAY_FONT_SIZE),
        title=pygame.font.Font(path, TITLE_FONT_SIZE),
        button=pygame.font.Font(path, BUTTON_FONT_SIZE),
        author=pygame.font.Font(path, AUTHOR_FONT_SIZE),
    )


def render_frame(surface: pygame.Surface, game: Game, fonts: Fonts, now: int) -> bool:
    """Draw one frame of the game at time `now`; return whether the overlay was drawn."""
    surface.fill((0, 0, 0))
    if game.state is GameState.MENU:
        draw_menu(
            surface,
            game.window_size,
            fonts.title,
            fonts.button,
            fonts.author,
            game.buttons,
        )
    else:
        draw_borders(surface, game.cell_size, game.window_size)
        draw_board(surface, game.board, game.cell_size)
    visible = game.update(now)
    if visible:
        game_overlay(surface, game.window_size, fonts.overlay, game.overlay_text)
    return visible


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="tictactoe", description="Two-player tic-tac-toe.")
    parser.add_argument("--font", default=FONT_PATH, help="path of a TrueType font")
    args = parser.parse_args(argv)

    try:
        fonts = load_fonts(args.font)
    except (OSError, pygame.error) as exc:
        print(f"Font load error: {exc}")
        pygame.quit()
        return 1

    pygame.init()
    try:
        surface = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
    except pygame.error as exc:
        print(f"Window Error: {exc}")
        pygame.quit()
        return 1
    pygame.display.set_caption(WINDOW_TITLE)

    game = Game(window_size=WINDOW_SIZE)
    clock = pygame.time.Clock()
    try:
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    game.running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    game.click(x, y, pygame.time.get_ticks())
            render_frame(surface, game, fonts, pygame.time.get_ticks())
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0