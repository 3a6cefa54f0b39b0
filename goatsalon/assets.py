"""The image and audio files the game needs before a round can start."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import pygame

MENU_FONT = "fonts/UncialAntiqua-Regular.ttf"
TITLE_IMAGE = "ui/name.png"
MENU_MUSIC = "audio/main-menu.ogg"


def _asset(path: str) -> Any:
    return field(metadata={"path": path})


def _paths(cls: type) -> dict[str, str]:
    return {f.name: f.metadata["path"] for f in fields(cls)}


def _check(root: Path, paths: dict[str, str]) -> None:
    missing = [rel for rel in paths.values() if not (root / rel).is_file()]
    if missing:
        raise FileNotFoundError(f"missing assets under {root}: {', '.join(missing)}")


@dataclass(frozen=True)
class ImageAssets:
    """Loaded image surfaces, one per sprite the game draws."""

    imp_idle: pygame.Surface = _asset("images/imp/Imp-IDLE-Sprite-sheet.png")
    imp_walk: pygame.Surface = _asset("images/imp/Imp-WALK-Sprite-sheet.png")
    imp_jump: pygame.Surface = _asset("images/imp/Imp-JUMP-Sprite-sheet.png")
    control_panel: pygame.Surface = _asset("images/salon/control-panel.png")
    background: pygame.Surface = _asset("images/salon/background.png")
    floor: pygame.Surface = _asset("images/salon/floor.png")
    moving_platform: pygame.Surface = _asset("images/salon/platform.png")
    backet_gold_apples: pygame.Surface = _asset("images/salon/Backet-of-Gold-Apples.png")
    joystick: pygame.Surface = _asset("images/salon/joystick.png")
    goat_base: pygame.Surface = _asset("images/goat/goat-base.png")
    goat_body: pygame.Surface = _asset("images/goat/goat-body.png")
    goat_jaw: pygame.Surface = _asset("images/goat/goat-jaw.png")
    goat_ears: pygame.Surface = _asset("images/goat/goat-ears.png")
    hair_top: pygame.Surface = _asset("images/goat/hair/hair-top.png")
    hair1_left: pygame.Surface = _asset("images/goat/hair/hair1-left.png")
    hair1_right: pygame.Surface = _asset("images/goat/hair/hair1-right.png")
    hair2_left: pygame.Surface = _asset("images/goat/hair/hair2-left.png")
    hair2_right: pygame.Surface = _asset("images/goat/hair/hair2-right.png")
    hair3_left: pygame.Surface = _asset("images/goat/hair/hair3-left.png")
    hair3_right: pygame.Surface = _asset("images/goat/hair/hair3-right.png")
    hair4_left: pygame.Surface = _asset("images/goat/hair/hair4-left.png")
    hair4_right: pygame.Surface = _asset("images/goat/hair/hair4-right.png")
    hair5_left: pygame.Surface = _asset("images/goat/hair/hair5-left.png")
    hair5_right: pygame.Surface = _asset("images/goat/hair/hair5-right.png")
    hair6_left: pygame.Surface = _asset("images/goat/hair/hair6-left.png")
    hair6_right: pygame.Surface = _asset("images/goat/hair/hair6-right.png")
    hair7_left: pygame.Surface = _asset("images/goat/hair/hair7-left.png")
    hair7_right: pygame.Surface = _asset("images/goat/hair/hair7-right.png")
    hair8_left: pygame.Surface = _asset("images/goat/hair/hair8-left.png")
    hair8_right: pygame.Surface = _asset("images/goat/hair/hair8-right.png")
    hair9_left: pygame.Surface = _asset("images/goat/hair/hair9-left.png")
    hair9_right: pygame.Surface = _asset("images/goat/hair/hair9-right.png")
    goat_beard: pygame.Surface = _asset("images/goat/hair/beard.png")
    game_over_text: pygame.Surface = _asset("ui/game_over.png")
    golden_apple: pygame.Surface = _asset("ui/Golden-Apple.png")
    lever_vertical: pygame.Surface = _asset("ui/lever-vertical.png")
    lever_horizontal: pygame.Surface = _asset("ui/lever-horizontal.png")

    @classmethod
    def load(cls, root: str | Path) -> ImageAssets:
        """Load every image below ``root``; raise FileNotFoundError if any is absent."""
        root = Path(root)
        paths = _paths(cls)
        _check(root, paths)
        return cls(**{name: pygame.image.load(str(root / rel)) for name, rel in paths.items()})


@dataclass(frozen=True)
class AudioAssets:
    """Locations of the sound tracks, checked to exist."""

    background: Path = _asset("audio/salon-background.ogg")
    win: Path = _asset("audio/win.ogg")
    lose: Path = _asset("audio/lose.ogg")

    @classmethod
    def load(cls, root: str | Path) -> AudioAssets:
        """Resolve every track below ``root``; raise FileNotFoundError if any is absent."""
        root = Path(root)
        paths = _paths(cls)
        _check(root, paths)
        return cls(**{name: root / rel for name, rel in paths.items()})


IMAGE_PATHS: dict[str, str] = _paths(ImageAssets)
AUDIO_PATHS: dict[str, str] = _paths(AudioAssets)