"""Sprite-sheet animation: frame stepping, clips and state switching."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from goatsalon.timer import Timer, TimerMode

FRAME_SIZE = (512, 512)
SPRITE_SIZE = (128.0, 128.0)
FRAME_DURATION = 1.0 / 12.0


class AnimationState(Enum):
    IDLE = "idle"
    WALK = "walk"
    JUMP = "jump"


def _default_timer() -> Timer:
    return Timer.from_seconds(2.0, TimerMode.REPEATING)


@dataclass
class SpriteAnimState:
    """The frame range of the running clip and the timer that paces it."""

    start_index: int = 0
    end_index: int = 0
    timer: Timer = field(default_factory=_default_timer)

    def copy(self) -> SpriteAnimState:
        return SpriteAnimState(self.start_index, self.end_index, replace(self.timer))


@dataclass(frozen=True)
class AnimationEvent:
    """Emitted when a sprite wraps past the last frame of its clip."""

    entity: Hashable
    finished: bool = True


@dataclass(frozen=True)
class AnimationClip:
    image: str
    frames: int
    anim_state: SpriteAnimState
    frame_size: tuple[int, int] = FRAME_SIZE
    custom_size: tuple[float, float] = SPRITE_SIZE


@dataclass
class AnimatedSprite:
    """A sprite drawn from a horizontal sheet; ``frame`` is None for a plain image."""

    entity: Hashable
    image: str
    frame: int | None = 0
    frames: int = 1
    frame_size: tuple[int, int] = FRAME_SIZE
    custom_size: tuple[float, float] | None = SPRITE_SIZE
    anim_state: SpriteAnimState = field(default_factory=SpriteAnimState)

    def step(self, delta: float) -> AnimationEvent | None:
        """Advance the timer; move one frame forward when it fires."""
        timer = self.anim_state.timer
        timer.tick(delta)
        if not timer.finished or self.frame is None:
            return None
        self.frame += 1
        if self.frame > self.anim_state.end_index:
            self.frame = self.anim_state.start_index
            return AnimationEvent(self.entity, True)
        return None

    def play(self, clip: AnimationClip) -> None:
        """Switch to ``clip`` from its first frame."""
        self.anim_state = clip.anim_state.copy()
        self.image = clip.image
        self.frames = clip.frames
        self.frame_size = clip.frame_size
        self.custom_size = clip.custom_size
        self.frame = 0


@dataclass(frozen=True)
class AnimationClips:
    idle: AnimationClip
    walk: AnimationClip
    jump: AnimationClip

    def clip_for(self, state: AnimationState) -> AnimationClip:
        return {
            AnimationState.IDLE: self.idle,
            AnimationState.WALK: self.walk,
            AnimationState.JUMP: self.jump,
        }[state]


def animate_sprites(sprites: Iterable[AnimatedSprite], delta: float) -> list[AnimationEvent]:
    """Step every sprite and collect the events of those that looped."""
    return [event for sprite in sprites if (event := sprite.step(delta)) is not None]


def _clip(image: str, frames: int) -> AnimationClip:
    return AnimationClip(
        image=image,
        frames=frames,
        anim_state=SpriteAnimState(
            start_index=0,
            end_index=frames - 1,
            timer=Timer.from_seconds(FRAME_DURATION, TimerMode.REPEATING),
        ),
    )


def prepare_animations() -> AnimationClips:
    """Build the imp's idle, walk and jump clips."""
    return AnimationClips(
        idle=_clip("imp_idle", 10),
        walk=_clip("imp_walk", 15),
        jump=_clip("imp_jump", 20),
    )


def handle_animating(sprite: AnimatedSprite, state: AnimationState, clips: AnimationClips) -> None:
    """Restart ``sprite`` on the clip that belongs to ``state``."""
    sprite.play(clips.clip_for(state))


def switch_player_animation_states(
    events: Iterable[AnimationEvent], players: Mapping[Hashable, Any]
) -> None:
    """Return each player whose clip just finished to the idle state."""
    for event in events:
        if not event.finished:
            continue
        player = players.get(event.entity)
        if player is not None:
            player.animation_state = AnimationState.IDLE