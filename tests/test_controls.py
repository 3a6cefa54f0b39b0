import pygame
import pytest

from goatsalon.animation import AnimationState
from goatsalon.controls import (
    Action,
    ControlPanelSession,
    action_values,
    assign_gamepad,
    close_control_panel,
    on_interact,
    on_jump,
    on_move,
    on_move_end,
    on_navigate_platform,
)
from goatsalon.hud import POINTS_PER_HAIR
from goatsalon.platform_control import HORIZONTAL_SPEED
from goatsalon.players import PLAYER_ONE_BINDINGS, PlayerId
from goatsalon.world import World


@pytest.fixture
def world():
    return World.new_game()


def test_move_axis_from_keys():
    assert action_values(PLAYER_ONE_BINDINGS, {pygame.K_d})[Action.MOVE] == 1.0
    assert action_values(PLAYER_ONE_BINDINGS, {pygame.K_a})[Action.MOVE] == -1.0
    assert action_values(PLAYER_ONE_BINDINGS, {pygame.K_a, pygame.K_d})[Action.MOVE] == 0.0


def test_buttons_and_navigation_from_keys():
    values = action_values(PLAYER_ONE_BINDINGS, {pygame.K_w, pygame.K_e})
    assert values[Action.JUMP] is True
    assert values[Action.INTERACT] is True
    assert values[Action.CLOSE_INTERACT] is True
    assert values[Action.NAVIGATE_PLATFORM] == (0.0, 1.0)
    idle = action_values(PLAYER_ONE_BINDINGS, set())
    assert idle[Action.JUMP] is False
    assert idle[Action.NAVIGATE_PLATFORM] == (0.0, 0.0)


def test_move_starts_walking_and_faces_direction(world):
    on_move(world, PlayerId.ONE, 1.0)
    player = world.player(PlayerId.ONE)
    assert player.animation_state is AnimationState.WALK
    assert player.facing == -1.0
    on_move(world, PlayerId.ONE, -1.0)
    assert player.facing == 1.0


def test_move_end_returns_to_idle(world):
    on_move(world, PlayerId.TWO, 1.0)
    on_move_end(world, PlayerId.TWO)
    assert world.player(PlayerId.TWO).animation_state is AnimationState.IDLE


def test_jump_sets_jump_state(world):
    on_jump(world, PlayerId.ONE)
    assert world.player(PlayerId.ONE).animation_state is AnimationState.JUMP


def test_jump_for_missing_player_raises(world):
    del world.players[PlayerId.ONE]
    with pytest.raises(KeyError):
        on_jump(world, PlayerId.ONE)


def test_interact_at_panel_opens_session(world):
    player = world.player(PlayerId.ONE)
    player.x, player.y = world.salon.control_panel.position[:2]
    on_interact(world, PlayerId.ONE)
    session = world.panel_sessions[PlayerId.ONE]
    assert session == ControlPanelSession(PlayerId.ONE, player.bindings)
    assert [prop.image for prop in world.control_panel_ui] == [
        "lever_vertical",
        "lever_horizontal",
    ]


def test_close_control_panel_clears_session_and_levers(world):
    player = world.player(PlayerId.ONE)
    player.x, player.y = world.salon.control_panel.position[:2]
    on_interact(world, PlayerId.ONE)
    close_control_panel(world, PlayerId.ONE)
    assert PlayerId.ONE not in world.panel_sessions
    assert world.control_panel_ui == []


def test_interact_far_away_does_nothing(world):
    player = world.player(PlayerId.ONE)
    player.x, player.y = 500.0, 400.0
    hairs = len(world.goat.hairs())
    assert on_interact(world, PlayerId.ONE) is None
    assert world.score.total == 0
    assert world.popups == []
    assert world.panel_sessions == {}
    assert len(world.goat.hairs()) == hairs


def test_interact_trims_closest_hair(world):
    target = world.goat.part("hair1_left")
    player = world.player(PlayerId.ONE)
    player.x, player.y = target.position[:2]
    hairs = len(world.goat.hairs())
    trimmed = on_interact(world, PlayerId.ONE)
    assert trimmed is target
    assert target not in world.goat.parts
    assert len(world.goat.hairs()) == hairs - 1
    assert world.score.total == POINTS_PER_HAIR
    assert world.popups[0].position == target.position


def test_player_two_has_shorter_reach(world):
    target = world.goat.part("hair1_left")
    x, y, _ = target.position
    two = world.player(PlayerId.TWO)
    two.x, two.y = x + 50.0, y
    assert on_interact(world, PlayerId.TWO) is None
    one = world.player(PlayerId.ONE)
    one.x, one.y = x + 50.0, y
    assert on_interact(world, PlayerId.ONE) is target


def test_navigate_platform_moves_within_track(world):
    x, y, z = world.salon.moving_platform.position
    on_navigate_platform(world, (1.0, 0.0), 0.5)
    assert world.salon.moving_platform.position == pytest.approx(
        (x + HORIZONTAL_SPEED * 0.5, y, z)
    )


def test_navigate_platform_refuses_to_leave_track(world):
    before = world.salon.moving_platform.position
    on_navigate_platform(world, (0.0, -1.0), 1.0)
    assert world.salon.moving_platform.position == before


def test_gamepads_go_to_players_in_order(world):
    players = list(world.players.values())
    first = assign_gamepad(players, 7)
    second = assign_gamepad(players, 8)
    assert first is players[0] and first.gamepad == 7
    assert second is players[1] and second.gamepad == 8
    assert assign_gamepad(players, 9) is None