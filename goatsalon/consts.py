"""Shared colours, window settings and the top-level game state."""

from __future__ import annotations

from enum import Enum

Color = tuple[int, int, int]


def _srgb(red: float, green: float, blue: float) -> Color:
    return (round(red * 255), round(green * 255), round(blue * 255))


NORMAL_BUTTON: Color = _srgb(0.40, 0.10, 0.20)
HOVERED_BUTTON: Color = _srgb(0.50, 0.30, 0.20)
BUTTON_BORDER: Color = _srgb(0.70, 0.10, 0.10)
TEXT_COLOR: Color = _srgb(1.0, 0.70, 0.70)
CLEAR_COLOR: Color = (0, 0, 0)

WINDOW_TITLE = "Demon Goat Salon"


class GameState(Enum):
    """The screens the game moves between."""

    MAIN_MENU = "main_menu"
    LOADING = "loading"
    IN_GAME = "in_game"
    GAME_OVER = "game_over"


INITIAL_STATE = GameState.MAIN_MENU