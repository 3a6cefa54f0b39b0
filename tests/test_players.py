import pygame
import pytest

from goatsalon.animation import AnimationEvent, AnimationState
from goatsalon.players import (
    PLAYER_ONE_BINDINGS,
    Box,
    Player,
    PlayerId,
    spawn_players,
)

FLOOR = Box(0.0, -270.0, 2880.0, 135.0)
DT = 1.0 / 60.0


def _settle(player, solids, steps=300):
    for _ in range(steps):
        player.update(DT, solids)


def _grounded_player():
    player = Player(PlayerId.ONE, (-256.0, -120.0), PLAYER_ONE_BINDINGS)
    _settle(player, [FLOOR])
    return player


def test_box_overlaps():
    a = Box(0, 0, 10, 10)
    assert a.overlaps(Box(5, 5, 10, 10))
    assert not a.overlaps(Box(10, 0, 10, 10))
    assert not a.overlaps(Box(0, 20, 10, 10))


def test_spawn_players():
    one, two = spawn_players()
    assert one.id is PlayerId.ONE and one.position == (-256.0, -120.0)
    assert two.id is PlayerId.TWO and two.position == (256.0, -120.0)
    assert one.bindings.move_left == pygame.K_a
    assert two.bindings.interact == pygame.K_RETURN
    assert one.bindings.interact_pulse is not None and two.bindings.interact_pulse is None
    assert one.gamepad is None and one.animation_state is AnimationState.IDLE


def test_player_lands_on_floor():
    player = _grounded_player()
    assert player.grounded
    assert player.box.bottom == pytest.approx(FLOOR.top)
    assert player.vy == 0.0


def test_walk_moves_and_faces():
    player = _grounded_player()
    x0 = player.x
    player.walk(1.0)
    assert player.animation_state is AnimationState.WALK
    assert player.facing == -1.0
    _settle(player, [FLOOR], 60)
    assert player.vx > 0 and player.x > x0
    player.walk(-1.0)
    assert player.facing == 1.0


def test_stop_halts_and_idles():
    player = _grounded_player()
    player.walk(1.0)
    _settle(player, [FLOOR], 30)
    player.stop()
    player.update(DT, [FLOOR])
    assert player.vx == 0.0
    assert player.animation_state is AnimationState.IDLE


def test_jump_from_ground():
    player = _grounded_player()
    y0 = player.y
    player.jump()
    player.update(DT, [FLOOR])
    assert player.animation_state is AnimationState.JUMP
    assert player.vy > 0 and player.y > y0
    assert not player.grounded


def test_no_jump_in_air():
    player = Player(PlayerId.TWO, (0.0, 100.0), PLAYER_ONE_BINDINGS)
    player.jump()
    player.update(DT, [])
    assert player.vy < 0


def test_wall_blocks():
    wall = Box(600.0, 0.0, 128.0, 800.0)
    player = Player(PlayerId.ONE, (500.0, -120.0), PLAYER_ONE_BINDINGS)
    player.walk(1.0)
    _settle(player, [FLOOR, wall], 600)
    assert player.box.right <= wall.left + 1e-9


def test_sprite_follows_state_and_loops():
    player = Player(PlayerId.ONE, (0.0, 0.0), PLAYER_ONE_BINDINGS)
    events = [e for _ in range(10) for e in player.update(1.0 / 12.0, [])]
    assert events == [AnimationEvent(PlayerId.ONE, True)]
    player.walk(1.0)
    player.update(DT, [])
    assert player.sprite.image == "imp_walk"


def test_negative_delta_rejected():
    player = Player(PlayerId.ONE, (0.0, 0.0), PLAYER_ONE_BINDINGS)
    with pytest.raises(ValueError):
        player.update(-DT, [])