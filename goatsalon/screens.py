"""Main-menu and game-over screens: their buttons, messages and button handling."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

import pygame

from goatsalon.consts import HOVERED_BUTTON, NORMAL_BUTTON, Color, GameState

logger = logging.getLogger(__name__)

RENT = 230
BUTTON_SIZE = (250, 65)
BUTTON_BORDER_WIDTH = 5
BUTTON_FONT_SIZE = 30
MESSAGE_FONT_SIZE = 40


class Interaction(Enum):
    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


class MenuButton(Enum):
    PLAY = "play"


class GameOverButton(Enum):
    RETRY = "retry"
    MAIN_MENU = "main_menu"


@dataclass(eq=False)
class Button:
    """A clickable button; ``rect`` is set once the screen has been laid out."""

    kind: MenuButton | GameOverButton
    label: str
    color: Color = NORMAL_BUTTON
    interaction: Interaction = Interaction.NONE
    rect: pygame.Rect | None = None


_MENU_TARGETS: dict[MenuButton | GameOverButton, GameState] = {
    MenuButton.PLAY: GameState.LOADING,
}

_GAME_OVER_TARGETS: dict[MenuButton | GameOverButton, GameState] = {
    GameOverButton.RETRY: GameState.IN_GAME,
    GameOverButton.MAIN_MENU: GameState.MAIN_MENU,
}

_TRACKS = {True: "win", False: "lose"}


def main_menu_buttons() -> list[Button]:
    return [Button(MenuButton.PLAY, "Play Game")]


def game_over_buttons() -> list[Button]:
    return [
        Button(GameOverButton.RETRY, "Try Again"),
        Button(GameOverButton.MAIN_MENU, "Main Menu"),
    ]


def _survived(total: int) -> bool:
    return total >= RENT


def game_over_message(total: int) -> str:
    """The verdict shown under the game-over buttons."""
    logger.info("Points: %d", total)
    if _survived(total):
        return f"You Survived Hell!!\t\tApples - {total}"
    return f"Hell's Rent is {RENT}  Apples\t\tMissed by {RENT - total}"


def game_over_track(total: int) -> str:
    """Name of the audio track that loops on the game-over screen."""
    survived = _survived(total)
    track = _TRACKS[survived]
    logger.debug("Game over with %d apples, playing %s", total, track)
    return track


def _interact(
    button: Button,
    interaction: Interaction,
    targets: Mapping[MenuButton | GameOverButton, GameState],
    screen: str,
) -> GameState | None:
    if button.kind not in targets:
        raise ValueError(f"{button.label!r} is not a {screen} button")
    if interaction is button.interaction:
        return None
    button.interaction = interaction
    if interaction is Interaction.PRESSED:
        return targets[button.kind]
    button.color = HOVERED_BUTTON if interaction is Interaction.HOVERED else NORMAL_BUTTON
    return None


def handle_menu_interaction(button: Button, interaction: Interaction) -> GameState | None:
    """Apply a changed interaction to a main-menu button; return the state to move to."""
    target = _interact(button, interaction, _MENU_TARGETS, "main-menu")
    if target is not None:
        logger.info("Play Game Button Clicked")
    return target


def handle_game_over_interaction(button: Button, interaction: Interaction) -> GameState | None:
    """Apply a changed interaction to a game-over button; return the state to move to."""
    return _interact(button, interaction, _GAME_OVER_TARGETS, "game-over")