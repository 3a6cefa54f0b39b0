"""Player actions: walking, jumping, trimming hair and working the control panel."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from enum import Enum

from goatsalon.goat import GoatPart
from goatsalon.hud import POINTS_PER_HAIR, UiPopup
from goatsalon.platform_control import navigate_platform
from goatsalon.players import Bindings, Player, PlayerId
from goatsalon.salon import Prop
from goatsalon.world import World

logger = logging.getLogger(__name__)

PANEL_RADIUS_SQ = 40.0 * 40.0
PLAYER_ONE_HAIR_RADIUS_SQ = 150.0 * 150.0
PLAYER_TWO_HAIR_RADIUS_SQ = PANEL_RADIUS_SQ
LEVER_SIZE = (36.0, 36.0)

Vec3 = tuple[float, float, float]


class Action(Enum):
    MOVE = "move"
    JUMP = "jump"
    INTERACT = "interact"
    NAVIGATE_PLATFORM = "navigate_platform"
    CLOSE_INTERACT = "close_interact"


@dataclass(frozen=True)
class ControlPanelSession:
    """A player standing at the control panel and steering the platform."""

    player_id: PlayerId
    bindings: Bindings


def action_values(bindings: Bindings, pressed: Collection[int]) -> dict[Action, object]:
    """Read every action's value from the set of pressed keys."""
    keys = frozenset(pressed)

    def axis(positive: int, negative: int) -> float:
        return float(positive in keys) - float(negative in keys)

    return {
        Action.MOVE: axis(bindings.move_right, bindings.move_left),
        Action.JUMP: bindings.jump in keys,
        Action.INTERACT: bindings.interact in keys,
        Action.NAVIGATE_PLATFORM: (
            axis(bindings.panel_right, bindings.panel_left),
            axis(bindings.panel_up, bindings.panel_down),
        ),
        Action.CLOSE_INTERACT: bindings.close_panel in keys,
    }


def on_move(world: World, player_id: PlayerId, value: float) -> None:
    world.player(player_id).walk(value)


def on_move_end(world: World, player_id: PlayerId) -> None:
    world.player(player_id).stop()


def on_jump(world: World, player_id: PlayerId) -> None:
    world.player(player_id).jump()


def _distance_sq(a: Vec3, b: Vec3) -> float:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def _player_position(player: Player) -> Vec3:
    return (player.x, player.y, 0.0)


def _open_control_panel(world: World, player: Player) -> None:
    world.panel_sessions[player.id] = ControlPanelSession(player.id, player.bindings)
    world.control_panel_ui.extend(
        [
            Prop(
                "lever_vertical",
                (-367.0, -110.0, -0.1),
                image="lever_vertical",
                size=LEVER_SIZE,
            ),
            Prop(
                "lever_horizontal",
                (-333.0, -110.0, -0.1),
                image="lever_horizontal",
                size=LEVER_SIZE,
            ),
        ]
    )


def _closest_hair(hairs: Iterable[GoatPart], origin: Vec3, limit_sq: float) -> GoatPart | None:
    closest = None
    best = limit_sq
    for hair in hairs:
        distance = _distance_sq(hair.position, origin)
        if distance < best:
            best = distance
            closest = hair
    return closest


def on_interact(world: World, player_id: PlayerId) -> GoatPart | None:
    """Open the control panel if close enough and trim the nearest hair; return the hair cut."""
    logger.info("Player %s pressed interact", player_id.name)
    player = world.player(player_id)
    origin = _player_position(player)
    panel = world.salon.control_panel
    if _distance_sq(panel.position, origin) < PANEL_RADIUS_SQ:
        _open_control_panel(world, player)

    limit = (
        PLAYER_ONE_HAIR_RADIUS_SQ if player_id is PlayerId.ONE else PLAYER_TWO_HAIR_RADIUS_SQ
    )
    hair = _closest_hair(world.goat.hairs(), origin, limit)
    if hair is None:
        return None
    world.popups.append(UiPopup(hair.position))
    world.goat.remove(hair)
    world.score.total += POINTS_PER_HAIR
    return hair


def close_control_panel(world: World, player_id: PlayerId) -> None:
    """Take the levers off screen and hand the player's keys back to walking."""
    world.control_panel_ui.clear()
    world.panel_sessions.pop(player_id, None)


def on_navigate_platform(world: World, value: tuple[float, float], delta: float) -> None:
    """Move the platform by the navigation input, keeping it on its track."""
    platform = world.salon.moving_platform
    x, y, z = platform.position
    new_x, new_y = navigate_platform((x, y), value, delta)
    platform.position = (new_x, new_y, z)


def assign_gamepad(players: Iterable[Player], gamepad_id: int) -> Player | None:
    """Give a newly connected gamepad to the first player without one."""
    for player in players:
        if player.gamepad is None:
            player.gamepad = gamepad_id
            return player
    return None