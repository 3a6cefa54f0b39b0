from types import SimpleNamespace

from goatsalon.animation import (
    AnimatedSprite,
    AnimationEvent,
    AnimationState,
    SpriteAnimState,
    animate_sprites,
    handle_animating,
    prepare_animations,
    switch_player_animation_states,
)
from goatsalon.timer import Timer, TimerMode


def _sprite(entity="imp", frames=3, frame=0):
    return AnimatedSprite(
        entity=entity,
        image="sheet",
        frame=frame,
        frames=frames,
        anim_state=SpriteAnimState(0, frames - 1, Timer.from_seconds(1.0, TimerMode.REPEATING)),
    )


def test_prepared_clips_match_sheets():
    clips = prepare_animations()
    assert clips.idle.image == "imp_idle"
    assert clips.walk.image == "imp_walk"
    assert clips.jump.image == "imp_jump"
    assert clips.idle.anim_state.end_index == 9
    assert clips.walk.anim_state.end_index == 14
    assert clips.jump.anim_state.end_index == 19
    for clip in (clips.idle, clips.walk, clips.jump):
        assert clip.anim_state.end_index == clip.frames - 1
        assert clip.frame_size == (512, 512)


def test_clip_for_state():
    clips = prepare_animations()
    assert clips.clip_for(AnimationState.IDLE) is clips.idle
    assert clips.clip_for(AnimationState.WALK) is clips.walk
    assert clips.clip_for(AnimationState.JUMP) is clips.jump


def test_step_advances_and_wraps_with_event():
    sprite = _sprite()
    assert sprite.step(0.5) is None
    assert sprite.frame == 0
    assert sprite.step(0.5) is None
    assert sprite.frame == 1
    assert sprite.step(1.0) is None
    assert sprite.frame == 2
    event = sprite.step(1.0)
    assert event == AnimationEvent("imp", True)
    assert sprite.frame == 0


def test_step_without_frame_does_nothing():
    sprite = _sprite(frame=None)
    assert sprite.step(5.0) is None
    assert sprite.frame is None


def test_copy_is_independent():
    state = SpriteAnimState(0, 4, Timer.from_seconds(1.0, TimerMode.REPEATING))
    copied = state.copy()
    copied.timer.tick(0.5)
    assert state.timer.elapsed == 0.0
    assert copied.end_index == state.end_index


def test_handle_animating_switches_clip():
    clips = prepare_animations()
    sprite = _sprite(frames=10, frame=7)
    handle_animating(sprite, AnimationState.WALK, clips)
    assert sprite.image == clips.walk.image
    assert sprite.frame == 0
    assert sprite.frames == clips.walk.frames
    assert sprite.anim_state.end_index == clips.walk.anim_state.end_index
    sprite.anim_state.timer.tick(0.01)
    assert clips.walk.anim_state.timer.elapsed == 0.0


def test_animate_sprites_collects_events():
    first = _sprite("a", frames=1)
    second = _sprite("b", frames=3)
    events = animate_sprites([first, second], 1.0)
    assert events == [AnimationEvent("a", True)]


def test_switch_sets_finished_players_idle():
    one = SimpleNamespace(animation_state=AnimationState.JUMP)
    two = SimpleNamespace(animation_state=AnimationState.JUMP)
    events = [AnimationEvent("one", True), AnimationEvent("two", False), AnimationEvent("ghost", True)]
    switch_player_animation_states(events, {"one": one, "two": two})
    assert one.animation_state is AnimationState.IDLE
    assert two.animation_state is AnimationState.JUMP