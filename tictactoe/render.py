"""Drawing of the board, the menu and the message overlay onto pygame surfaces."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame

from tictactoe.board import Board, Cell, Player
from tictactoe.menu import Button

WHITE = (255, 255, 255)
MENU_BACKGROUND = (20, 20, 20)
OVERLAY_BACKGROUND = (30, 30, 30)
BUTTON_COLOR = (60, 60, 60)

MARK_OFFSET = 50
CIRCLE_SEGMENTS = 100
OVERLAY_WIDTH = 600
OVERLAY_HEIGHT = 500

TITLE_TEXT = "TIC TAC TOE GAME"
FOOTER_TEXT = "Esc to quit"


def _half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return int(value / 2)


def draw_borders(surface: pygame.Surface, cell_size: int, window_size: int) -> None:
    """Draw the two vertical and two horizontal grid lines."""
    for step in (cell_size, cell_size * 2):
        pygame.draw.line(surface, WHITE, (step, 0), (step, window_size))
        pygame.draw.line(surface, WHITE, (0, step), (window_size, step))


def draw_x(surface: pygame.Surface, cell_size: int, cell: Cell, offset: int) -> None:
    """Draw a cross inside the cell, inset by `offset` pixels."""
    start_x = cell.column * cell_size
    start_y = cell.row * cell_size
    end_x = start_x + cell_size
    end_y = start_y + cell_size
    pygame.draw.line(
        surface, WHITE, (start_x + offset, start_y + offset), (end_x - offset, end_y - offset)
    )
    pygame.draw.line(
        surface, WHITE, (end_x - offset, start_y + offset), (start_x + offset, end_y - offset)
    )


def draw_o(surface: pygame.Surface, cell_size: int, cell: Cell, offset: int) -> None:
    """Draw a circle inside the cell as a polygon of short segments."""
    center_x = cell.column * cell_size + cell_size // 2
    center_y = cell.row * cell_size + cell_size // 2
    radius = cell_size // 2 - offset

    def point(index: int) -> tuple[int, int]:
        theta = 2.0 * math.pi * index / CIRCLE_SEGMENTS
        return (
            int(center_x + radius * math.cos(theta)),
            int(center_y + radius * math.sin(theta)),
        )

    for index in range(CIRCLE_SEGMENTS):
        pygame.draw.line(surface, WHITE, point(index), point(index + 1))


def draw_board(surface: pygame.Surface, board: Board, cell_size: int) -> None:
    """Draw every mark on the board: crosses for player 1, circles for player 2."""
    for cell, mark in board.marks():
        if mark is Player.PLAYER1:
            draw_x(surface, cell_size, cell, MARK_OFFSET)
        elif mark is Player.PLAYER2:
            draw_o(surface, cell_size, cell, MARK_OFFSET)


def draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: Sequence[int],
    container: pygame.Rect | Sequence[int],
) -> pygame.Rect:
    """Draw text centred in the container; return the rectangle it occupies."""
    area = pygame.Rect(container)
    rendered = font.render(text, True, color)
    target = rendered.get_rect()
    target.x = area.x + _half(area.w - target.w)
    target.y = area.y + _half(area.h - target.h)
    surface.blit(rendered, target)
    return target


def draw_button(
    surface: pygame.Surface,
    button: Button,
    font: pygame.font.Font,
    text_color: Sequence[int],
    button_color: Sequence[int],
) -> pygame.Rect:
    """Fill the button's rectangle and centre its label; return the rectangle."""
    rect = pygame.Rect(
        button.x - button.width // 2,
        button.y - button.height // 2,
        button.width,
        button.height,
    )
    red, green, blue = tuple(button_color)[:3]
    pygame.draw.rect(surface, (red, green, blue, 255), rect)
    draw_text(surface, font, button.text, text_color, rect)
    return rect


def draw_menu(
    surface: pygame.Surface,
    window_size: int,
    title_font: pygame.font.Font,
    button_font: pygame.font.Font,
    author_font: pygame.font.Font,
    buttons: Sequence[Button],
) -> None:
    """Draw the menu screen: title, buttons and a footer line."""
    surface.fill(MENU_BACKGROUND)
    draw_text(surface, title_font, TITLE_TEXT, WHITE, (0, 80, window_size, 100))
    for button in buttons:
        draw_button(surface, button, button_font, WHITE, BUTTON_COLOR)
    footer_area = (window_size // 2 - 50, window_size - window_size // 8, 100, 100)
    draw_text(surface, author_font, FOOTER_TEXT, WHITE, footer_area)


def game_overlay(
    surface: pygame.Surface, window_size: int, font: pygame.font.Font, text: str
) -> pygame.Rect:
    """Draw a bordered panel in the middle of the window with centred text."""
    panel = pygame.Rect(
        _half(window_size - OVERLAY_WIDTH),
        _half(window_size - OVERLAY_HEIGHT),
        OVERLAY_WIDTH,
        OVERLAY_HEIGHT,
    )
    pygame.draw.rect(surface, OVERLAY_BACKGROUND, panel)
    pygame.draw.rect(surface, WHITE, panel, 1)
    draw_text(surface, font, text, WHITE, panel)
    return panel