"""Menu buttons and their hit testing."""

from __future__ import annotations

from dataclasses import dataclass

BUTTON_WIDTH = 300
BUTTON_HEIGHT = 70
BUTTON_SPACING = 30
BUTTONS_TOP = 220


@dataclass(frozen=True)
class Button:
    """A labelled rectangle given by its centre and size."""

    x: int
    y: int
    width: int
    height: int
    text: str

    def bounds(self) -> tuple[int, int, int, int]:
        """Return (left, top, right, bottom) of the button."""
        half_width = self.width // 2
        half_height = self.height // 2
        return (
            self.x - half_width,
            self.y - half_height,
            self.x + half_width,
            self.y + half_height,
        )

    def contains(self, x: int, y: int) -> bool:
        """Return whether the point lies on the button, edges included."""
        left, top, right, bottom = self.bounds()
        return left <= x <= right and top <= y <= bottom


def menu_buttons(window_size: int) -> list[Button]:
    """Return the menu's buttons, stacked and centred horizontally."""
    labels = ("Play Game", "Quit")
    return [
        Button(
            x=window_size // 2,
            y=BUTTONS_TOP + index * (BUTTON_HEIGHT + BUTTON_SPACING) + BUTTON_HEIGHT // 2,
            width=BUTTON_WIDTH,
            height=BUTTON_HEIGHT,
            text=label,
        )
        for index, label in enumerate(labels)
    ]