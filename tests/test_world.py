import pytest

from goatsalon.animation import AnimationState
from goatsalon.goat import ANGER_SECONDS
from goatsalon.hud import POPUP_SECONDS, UiPopup, timer_text
from goatsalon.players import PlayerId
from goatsalon.world import World


def test_new_game_places_players_at_their_spawn_points():
    world = World.new_game()
    assert world.player(PlayerId.ONE).position == (-256.0, -120.0)
    assert world.player(PlayerId.TWO).position == (256.0, -120.0)
    assert world.score.total == 0
    assert world.popups == []


def test_player_lookup_for_missing_player_raises():
    world = World.new_game()
    del world.players[PlayerId.TWO]
    with pytest.raises(KeyError):
        world.player(PlayerId.TWO)


def test_update_counts_down_the_anger_timer():
    world = World.new_game()
    assert world.update(1.0) is False
    assert world.customer.anger_timer.remaining() == pytest.approx(ANGER_SECONDS - 1.0)
    assert world.timer_label == timer_text(world.customer)


def test_round_ends_when_the_timer_runs_out():
    world = World.new_game()
    assert world.game_over is False
    assert world.update(ANGER_SECONDS) is True
    assert world.game_over is True


def test_update_moves_the_jaw_along_its_circle():
    world = World.new_game()
    world.update(0.5)
    world.update(0.25)
    jaw = world.goat.part("jaw")
    assert jaw.position == pytest.approx(jaw.motion.position_at(world.elapsed))


def test_update_keeps_every_hair():
    world = World.new_game()
    before = len(world.goat.hairs())
    world.update(0.1)
    assert len(world.goat.hairs()) == before


def test_expired_popups_are_dropped():
    world = World.new_game()
    world.popups.append(UiPopup((0.0, 0.0, 0.0)))
    world.update(POPUP_SECONDS / 2)
    assert len(world.popups) == 1
    world.update(POPUP_SECONDS)
    assert world.popups == []


def test_negative_delta_is_rejected():
    world = World.new_game()
    with pytest.raises(ValueError):
        world.update(-0.1)


def test_player_one_falls_onto_the_floor():
    world = World.new_game()
    for _ in range(120):
        world.update(1.0 / 60.0)
    player = world.player(PlayerId.ONE)
    assert player.grounded is True
    assert player.box.bottom == pytest.approx(world.salon.floor.box.top)


def test_finished_clip_returns_player_to_idle():
    world = World.new_game()
    player = world.player(PlayerId.ONE)
    player.animation_state = AnimationState.WALK
    world.update(1.0 / 12.0)
    assert player.animation_state is AnimationState.WALK
    for _ in range(40):
        world.update(1.0 / 12.0)
    assert player.animation_state is AnimationState.IDLE