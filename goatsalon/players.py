"""The two imp players: bindings, movement and collision."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import pygame

from goatsalon.animation import (
    FRAME_DURATION,
    AnimatedSprite,
    AnimationClips,
    AnimationEvent,
    AnimationState,
    SpriteAnimState,
    handle_animating,
    prepare_animations,
)
from goatsalon.timer import Timer, TimerMode

GRAVITY = 98.1
WALK_SPEED = 1000.0 * 2048.0
WALK_ACCELERATION = 120.0
AIR_ACCELERATION = 40.0
STOP_ACCELERATION = 100_000_000.0
COYOTE_TIME = 1.0
FREE_FALL_EXTRA_GRAVITY = 60.0
JUMP_HEIGHT = 200.0
JUMP_VELOCITY = math.sqrt(2.0 * GRAVITY * JUMP_HEIGHT)
FALL_EXTRA_GRAVITY = 160.0
JUMP_INPUT_BUFFER = 0.2

CAPSULE_RADIUS = 20.0
CAPSULE_LENGTH = 72.0
PLAYER_WIDTH = 2 * CAPSULE_RADIUS
PLAYER_HEIGHT = CAPSULE_LENGTH + 2 * CAPSULE_RADIUS

_EPSILON = 1e-6


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle given by its centre and size (y points up)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def bottom(self) -> float:
        return self.y - self.height / 2

    @property
    def top(self) -> float:
        return self.y + self.height / 2

    def overlaps(self, other: Box) -> bool:
        return (
            self.left < other.right
            and other.left < self.right
            and self.bottom < other.top
            and other.bottom < self.top
        )

    def inflated(self, dx: float, dy: float) -> Box:
        return Box(self.x, self.y, self.width + 2 * dx, self.height + 2 * dy)


class PlayerId(Enum):
    ONE = 1
    TWO = 2


@dataclass(frozen=True)
class Bindings:
    """Keyboard keys and gamepad controls of one player."""

    move_left: int
    move_right: int
    jump: int
    interact: int
    panel_up: int
    panel_down: int
    panel_left: int
    panel_right: int
    close_panel: int
    interact_pulse: float | None = None
    move_axis: str = "left_stick_x"
    jump_button: str = "left_trigger"
    interact_button: str = "right_trigger"
    panel_axis: str = "left_stick"
    close_button: str = "right_trigger"


PLAYER_ONE_BINDINGS = Bindings(
    move_left=pygame.K_a,
    move_right=pygame.K_d,
    jump=pygame.K_w,
    interact=pygame.K_e,
    panel_up=pygame.K_w,
    panel_down=pygame.K_s,
    panel_left=pygame.K_a,
    panel_right=pygame.K_d,
    close_panel=pygame.K_e,
    interact_pulse=1.0,
)

PLAYER_TWO_BINDINGS = Bindings(
    move_left=pygame.K_LEFT,
    move_right=pygame.K_RIGHT,
    jump=pygame.K_UP,
    interact=pygame.K_RETURN,
    panel_up=pygame.K_UP,
    panel_down=pygame.K_DOWN,
    panel_left=pygame.K_LEFT,
    panel_right=pygame.K_RIGHT,
    close_panel=pygame.K_RETURN,
)


class Player:
    """An imp with a capsule-sized body, walk/jump control and an animated sprite."""

    def __init__(
        self,
        player_id: PlayerId,
        position: tuple[float, float],
        bindings: Bindings,
        clips: AnimationClips | None = None,
    ) -> None:
        self.id = player_id
        self.x, self.y = (float(c) for c in position)
        self.bindings = bindings
        self.clips = clips if clips is not None else prepare_animations()
        self.vx = 0.0
        self.vy = 0.0
        self.facing = 1.0
        self.gamepad: int | None = None
        self.grounded = False
        self.sprite = AnimatedSprite(
            entity=player_id,
            image="imp_idle",
            frames=10,
            anim_state=SpriteAnimState(
                0, 9, Timer.from_seconds(FRAME_DURATION, TimerMode.REPEATING)
            ),
        )
        self._state = AnimationState.IDLE
        self._state_changed = True
        self._desired_vx = 0.0
        self._acceleration = WALK_ACCELERATION
        self._jump_buffer = 0.0
        self._coyote = 0.0
        self._jumping = False

    def __repr__(self) -> str:
        return f"Player({self.id.name}, x={self.x:.1f}, y={self.y:.1f}, state={self._state.name})"

    @property
    def animation_state(self) -> AnimationState:
        return self._state

    @animation_state.setter
    def animation_state(self, state: AnimationState) -> None:
        self._state = state
        self._state_changed = True

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, PLAYER_WIDTH, PLAYER_HEIGHT)

    def walk(self, value: float) -> None:
        """Head right for a positive axis value, left otherwise."""
        self._desired_vx = WALK_SPEED if value > 0.0 else -WALK_SPEED
        self._acceleration = WALK_ACCELERATION
        if self._state is AnimationState.IDLE:
            self.animation_state = AnimationState.WALK
        self.facing = 1.0 if value < 0.0 else -1.0

    def stop(self) -> None:
        self._desired_vx = 0.0
        self._acceleration = STOP_ACCELERATION
        if self._state is AnimationState.WALK:
            self.animation_state = AnimationState.IDLE

    def jump(self) -> None:
        self._jump_buffer = JUMP_INPUT_BUFFER
        if self._state is not AnimationState.JUMP:
            self.animation_state = AnimationState.JUMP

    def update(self, delta: float, solids: Iterable[Box]) -> list[AnimationEvent]:
        """Advance movement and animation by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"cannot update backwards: {delta}")
        solids = list(solids)

        accel = self._acceleration if self.grounded else AIR_ACCELERATION
        step = accel * delta
        self.vx += max(-step, min(step, self._desired_vx - self.vx))

        if self._jump_buffer > 0 and (self.grounded or self._coyote > 0):
            self.vy = JUMP_VELOCITY
            self.grounded = False
            self._coyote = 0.0
            self._jump_buffer = 0.0
            self._jumping = True
        else:
            self._jump_buffer = max(0.0, self._jump_buffer - delta)

        gravity = GRAVITY
        if self.vy < 0:
            gravity += FALL_EXTRA_GRAVITY if self._jumping else FREE_FALL_EXTRA_GRAVITY
        self.vy -= gravity * delta

        self.x += self.vx * delta
        self._resolve_horizontal(solids)
        self.y += self.vy * delta
        self.grounded = self._resolve_vertical(solids)

        if self.grounded:
            self._coyote = COYOTE_TIME
            self._jumping = False
        else:
            self._coyote = max(0.0, self._coyote - delta)

        if self._state_changed:
            handle_animating(self.sprite, self._state, self.clips)
            self._state_changed = False
        event = self.sprite.step(delta)
        return [event] if event is not None else []

    def _resolve_horizontal(self, solids: list[Box]) -> None:
        for solid in solids:
            if not self.box.inflated(0.0, -_EPSILON).overlaps(solid):
                continue
            if self.vx > 0:
                self.x = solid.left - PLAYER_WIDTH / 2
            elif self.vx < 0:
                self.x = solid.right + PLAYER_WIDTH / 2
            self.vx = 0.0

    def _resolve_vertical(self, solids: list[Box]) -> bool:
        landed = False
        for solid in solids:
            if not self.box.inflated(-_EPSILON, 0.0).overlaps(solid):
                continue
            if self.vy <= 0:
                self.y = solid.top + PLAYER_HEIGHT / 2
                landed = True
            else:
                self.y = solid.bottom - PLAYER_HEIGHT / 2
            self.vy = 0.0
        return landed


def spawn_players() -> list[Player]:
    """Create both players at their starting spots on either side of the goat."""
    clips = prepare_animations()
    return [
        Player(PlayerId.ONE, (-256.0, -120.0), PLAYER_ONE_BINDINGS, clips),
        Player(PlayerId.TWO, (256.0, -120.0), PLAYER_TWO_BINDINGS, clips),
    ]