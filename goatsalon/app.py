"""The game window: screen transitions, input routing, rendering and the main loop."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

import pygame

from goatsalon.assets import MENU_FONT, MENU_MUSIC, TITLE_IMAGE, AudioAssets, ImageAssets
from goatsalon.consts import (
    BUTTON_BORDER,
    CLEAR_COLOR,
    INITIAL_STATE,
    TEXT_COLOR,
    WINDOW_TITLE,
    GameState,
)
from goatsalon.controls import (
    Action,
    action_values,
    assign_gamepad,
    close_control_panel,
    on_interact,
    on_jump,
    on_move,
    on_move_end,
    on_navigate_platform,
)
from goatsalon.players import Player, PlayerId
from goatsalon.screens import (
    BUTTON_BORDER_WIDTH,
    BUTTON_FONT_SIZE,
    BUTTON_SIZE,
    MESSAGE_FONT_SIZE,
    Button,
    Interaction,
    game_over_buttons,
    game_over_message,
    game_over_track,
    handle_game_over_interaction,
    handle_menu_interaction,
    main_menu_buttons,
)
from goatsalon.world import World

logger = logging.getLogger(__name__)

WINDOW_SIZE = (1280, 720)
VIEW_SIZE = (1024.0, 576.0)
FPS = 60
STICK_DEAD_ZONE = 0.2
HUD_FONT_SIZE = 20
TITLE_SIZE = (1130, 192)
GAME_OVER_IMAGE_SIZE = (982, 248)
MESSAGE_SIZE = (900, 50)

Handler = Callable[[Button, Interaction], "GameState | None"]


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


def _dead_zone(value: float) -> float:
    return value if abs(value) >= STICK_DEAD_ZONE else 0.0


def _column(
    window: tuple[int, int], sizes: Sequence[tuple[int, int]], gap: int, margin: int = 0
) -> list[pygame.Rect]:
    width, height = window
    total = margin + sum(h for _, h in sizes) + gap * (len(sizes) - 1)
    y = (height - total) // 2 + margin
    rects = []
    for w, h in sizes:
        rects.append(pygame.Rect((width - w) // 2, y, w, h))
        y += h + gap
    return rects


class Game:
    """The whole game: which screen is showing, the running round and its input."""

    def __init__(
        self, asset_root: str | Path | None = None, window_size: tuple[int, int] = WINDOW_SIZE
    ) -> None:
        self.asset_root = Path(asset_root) if asset_root is not None else None
        self.window_size = window_size
        self.images: ImageAssets | None = None
        self.audio: AudioAssets | None = None
        self.state: GameState | None = None
        self.world: World | None = None
        self.buttons: list[Button] = []
        self.message = ""
        self.track: str | None = None
        self.final_score = 0
        self.running = True
        self._layout: dict[str, pygame.Rect] = {}
        self._pressed: set[int] = set()
        self._joysticks: dict[int, pygame.joystick.JoystickType] = {}
        self._moving: set[PlayerId] = set()
        self._close_held: dict[PlayerId, bool] = {}
        self._interact_block: set[PlayerId] = set()
        self._pulse: dict[PlayerId, float] = {}
        self._sprites: dict[tuple, pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}
        self.set_state(INITIAL_STATE)

    # state transitions

    def set_state(self, state: GameState) -> None:
        if self.state is not None:
            self._exit(self.state)
        self.state = state
        self._enter(state)

    def _exit(self, state: GameState) -> None:
        self._stop_music()
        if state is GameState.MAIN_MENU:
            self.buttons = []
        elif state is GameState.IN_GAME:
            if self.world is not None:
                self.final_score = self.world.score.total
            self._moving.clear()
            self._close_held.clear()
            self._interact_block.clear()
            self._pulse.clear()
        elif state is GameState.GAME_OVER:
            self.buttons = []
            self.world = None
            self.message = ""
            self.track = None

    def _enter(self, state: GameState) -> None:
        if state is GameState.MAIN_MENU:
            self.buttons = main_menu_buttons()
        elif state is GameState.IN_GAME:
            self.world = World.new_game()
            for gamepad_id in self._joysticks:
                assign_gamepad(self.world.players.values(), gamepad_id)
        elif state is GameState.GAME_OVER:
            self.buttons = game_over_buttons()
            self.message = game_over_message(self.final_score)
            self.track = game_over_track(self.final_score)
        self._lay_out()
        self._start_music()

    def _lay_out(self) -> None:
        self._layout = {}
        if self.state is GameState.MAIN_MENU:
            margin = int(0.05 * min(self.window_size))
            title, play = _column(self.window_size, [TITLE_SIZE, BUTTON_SIZE], 10, margin)
            self._layout["title"] = title
            self.buttons[0].rect = play
        elif self.state is GameState.GAME_OVER:
            rects = _column(
                self.window_size,
                [GAME_OVER_IMAGE_SIZE, BUTTON_SIZE, BUTTON_SIZE, MESSAGE_SIZE],
                40,
            )
            self._layout["game_over_text"] = rects[0]
            for button, rect in zip(self.buttons, rects[1:3]):
                button.rect = rect
            self._layout["message"] = rects[3]

    # audio

    def _start_music(self) -> None:
        if self.state is GameState.MAIN_MENU and self.asset_root is not None:
            self._play(self.asset_root / MENU_MUSIC, loops=0)
        elif self.state is GameState.IN_GAME and self.audio is not None:
            self._play(self.audio.background, loops=-1)
        elif self.state is GameState.GAME_OVER and self.audio is not None and self.track:
            self._play(getattr(self.audio, self.track), loops=-1)

    @staticmethod
    def _play(path: Path, loops: int) -> None:
        if not pygame.mixer.get_init() or not path.is_file():
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops)
        except pygame.error as error:
            logger.warning("cannot play %s: %s", path, error)

    @staticmethod
    def _stop_music() -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()

    # events

    def handle_event(self, event: pygame.event.Event) -> None:
        """Feed one window, keyboard, mouse or gamepad event to the game."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self._pressed.add(event.key)
        elif event.type == pygame.KEYUP:
            self._pressed.discard(event.key)
        elif event.type == pygame.MOUSEMOTION:
            self._pointer(event.pos, pressed=False)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pointer(event.pos, pressed=True)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._pointer(event.pos, pressed=False)
        elif event.type == pygame.JOYDEVICEADDED:
            joystick = pygame.joystick.Joystick(event.device_index)
            gamepad_id = joystick.get_instance_id()
            self._joysticks[gamepad_id] = joystick
            if self.world is not None:
                assign_gamepad(self.world.players.values(), gamepad_id)
        elif event.type == pygame.JOYDEVICEREMOVED:
            self._joysticks.pop(event.instance_id, None)
        elif event.type == pygame.VIDEORESIZE:
            self.window_size = tuple(event.size)
            self._lay_out()

    def _pointer(self, pos: tuple[int, int], pressed: bool) -> None:
        handler: Handler
        if self.state is GameState.MAIN_MENU:
            handler = handle_menu_interaction
        elif self.state is GameState.GAME_OVER:
            handler = handle_game_over_interaction
        else:
            return
        for button in list(self.buttons):
            if button.rect is None:
                continue
            inside = button.rect.collidepoint(pos)
            if inside and pressed:
                interaction = Interaction.PRESSED
            elif inside:
                interaction = Interaction.HOVERED
            else:
                interaction = Interaction.NONE
            target = handler(button, interaction)
            if target is not None:
                self.set_state(target)
                return

    # simulation

    def step(self, delta: float) -> None:
        """Advance the current screen by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"cannot step backwards: {delta}")
        if self.state is GameState.LOADING:
            if self.asset_root is not None:
                self.audio = AudioAssets.load(self.asset_root)
                self.images = ImageAssets.load(self.asset_root)
            self.set_state(GameState.IN_GAME)
        elif self.state is GameState.IN_GAME and self.world is not None:
            self._apply_input(self.world, delta)
            if self.world.update(delta):
                self.set_state(GameState.GAME_OVER)

    def _apply_input(self, world: World, delta: float) -> None:
        for player_id, player in world.players.items():
            values = action_values(player.bindings, self._pressed)
            stick = self._stick(player)
            if player_id in world.panel_sessions:
                self._panel_input(world, player_id, values, stick, delta)
            else:
                self._player_input(world, player, values, stick, delta)

    def _stick(self, player: Player) -> tuple[float, float]:
        joystick = self._joysticks.get(player.gamepad) if player.gamepad is not None else None
        if joystick is None or joystick.get_numaxes() < 2:
            return (0.0, 0.0)
        return (_dead_zone(joystick.get_axis(0)), _dead_zone(-joystick.get_axis(1)))

    def _panel_input(
        self,
        world: World,
        player_id: PlayerId,
        values: dict[Action, object],
        stick: tuple[float, float],
        delta: float,
    ) -> None:
        if player_id in self._moving:
            on_move_end(world, player_id)
            self._moving.discard(player_id)
        self._pulse.pop(player_id, None)
        nav_x, nav_y = values[Action.NAVIGATE_PLATFORM]
        nav = (_clamp(nav_x + stick[0]), _clamp(nav_y + stick[1]))
        if nav != (0.0, 0.0):
            on_navigate_platform(world, nav, delta)
        close = bool(values[Action.CLOSE_INTERACT])
        if close and not self._close_held.get(player_id, True):
            close_control_panel(world, player_id)
            self._close_held.pop(player_id, None)
            self._interact_block.add(player_id)
            return
        self._close_held[player_id] = close

    def _player_input(
        self,
        world: World,
        player: Player,
        values: dict[Action, object],
        stick: tuple[float, float],
        delta: float,
    ) -> None:
        player_id = player.id
        move = _clamp(values[Action.MOVE] + stick[0])
        if move != 0.0:
            on_move(world, player_id, move)
            self._moving.add(player_id)
        elif player_id in self._moving:
            on_move_end(world, player_id)
            self._moving.discard(player_id)
        if values[Action.JUMP]:
            on_jump(world, player_id)
        if self._interact_fires(player, bool(values[Action.INTERACT]), delta):
            on_interact(world, player_id)

    def _interact_fires(self, player: Player, held: bool, delta: float) -> bool:
        player_id = player.id
        if not held:
            self._interact_block.discard(player_id)
            self._pulse.pop(player_id, None)
            return False
        if player_id in self._interact_block:
            return False
        pulse = player.bindings.interact_pulse
        if pulse is None:
            return True
        if player_id not in self._pulse:
            self._pulse[player_id] = 0.0
            return True
        self._pulse[player_id] += delta
        if self._pulse[player_id] >= pulse:
            self._pulse[player_id] -= pulse
            return True
        return False

    # rendering

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            path = self.asset_root / MENU_FONT if self.asset_root is not None else None
            if path is not None and path.is_file():
                self._fonts[size] = pygame.font.Font(str(path), size)
            else:
                self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _image(self, name: str) -> pygame.Surface | None:
        return getattr(self.images, name, None) if self.images is not None else None

    def _sprite(
        self,
        name: str,
        size: tuple[int, int],
        frame: int | None = None,
        frame_size: tuple[int, int] | None = None,
        flip: bool = False,
    ) -> pygame.Surface | None:
        key = (name, size, frame, flip)
        if key in self._sprites:
            return self._sprites[key]
        base = self._image(name)
        if base is None:
            return None
        if frame is not None and frame_size is not None:
            fw, fh = frame_size
            if (frame + 1) * fw > base.get_width() or fh > base.get_height():
                return None
            base = base.subsurface((frame * fw, 0, fw, fh))
        sprite = pygame.transform.smoothscale(base, size)
        if flip:
            sprite = pygame.transform.flip(sprite, True, False)
        self._sprites[key] = sprite
        return sprite

    def _view(self) -> tuple[float, float, float]:
        width, height = self.window_size
        scale = min(width / VIEW_SIZE[0], height / VIEW_SIZE[1])
        return scale, width / 2, height / 2

    def _blit_world(
        self,
        surface: pygame.Surface,
        name: str,
        size: tuple[float, float],
        position: tuple[float, float],
        frame: int | None = None,
        frame_size: tuple[int, int] | None = None,
        flip: bool = False,
    ) -> None:
        scale, cx, cy = self._view()
        pixel_size = (max(1, int(size[0] * scale)), max(1, int(size[1] * scale)))
        rect = pygame.Rect((0, 0), pixel_size)
        rect.center = (int(cx + position[0] * scale), int(cy - position[1] * scale))
        sprite = self._sprite(name, pixel_size, frame, frame_size, flip)
        if sprite is None:
            pygame.draw.rect(surface, TEXT_COLOR, rect, 1)
        else:
            surface.blit(sprite, rect)

    def _draw_world(self, surface: pygame.Surface, world: World, full: bool) -> None:
        layers: list[tuple[float, Callable[[], None]]] = []

        def add(z, name, size, pos, **kwargs):
            layers.append((z, lambda: self._blit_world(surface, name, size, pos, **kwargs)))

        for prop in world.salon.props:
            if prop.image and prop.size and (full or prop.persists_into_game_over):
                size = (prop.size[0] * prop.scale[0], prop.size[1] * prop.scale[1])
                add(prop.position[2], prop.image, size, prop.position[:2])
        for part in world.goat.parts:
            add(part.position[2], part.image, part.size, part.position[:2])
        if full:
            for player in world.players.values():
                sprite = player.sprite
                add(
                    0.0,
                    sprite.image,
                    sprite.custom_size or (128.0, 128.0),
                    player.position,
                    frame=sprite.frame,
                    frame_size=sprite.frame_size,
                    flip=player.facing < 0,
                )
            for popup in world.popups:
                add(popup.position[2], popup.image, popup.size, popup.position[:2])
            for prop in world.control_panel_ui:
                if prop.image and prop.size:
                    add(prop.position[2], prop.image, prop.size, prop.position[:2])
        for _, draw in sorted(layers, key=lambda layer: layer[0]):
            draw()

    def _draw_text(self, surface, text, size, **anchor) -> None:
        rendered = self._font(size).render(text.replace("\t", "    "), True, TEXT_COLOR)
        surface.blit(rendered, rendered.get_rect(**anchor))

    def _draw_buttons(self, surface: pygame.Surface) -> None:
        for button in self.buttons:
            if button.rect is None:
                continue
            radius = button.rect.height // 2
            pygame.draw.rect(surface, button.color, button.rect, border_radius=radius)
            pygame.draw.rect(
                surface, BUTTON_BORDER, button.rect, BUTTON_BORDER_WIDTH, border_radius=radius
            )
            self._draw_text(surface, button.label, BUTTON_FONT_SIZE, center=button.rect.center)

    def _draw_image(self, surface: pygame.Surface, image: pygame.Surface | None, key: str) -> None:
        rect = self._layout.get(key)
        if rect is None or image is None:
            return
        surface.blit(pygame.transform.smoothscale(image, rect.size), rect)

    def _draw(self, surface: pygame.Surface) -> None:
        surface.fill(CLEAR_COLOR)
        width = self.window_size[0]
        if self.world is not None and self.state in (GameState.IN_GAME, GameState.GAME_OVER):
            self._draw_world(surface, self.world, full=self.state is GameState.IN_GAME)
        if self.state is GameState.IN_GAME and self.world is not None:
            self._draw_text(
                surface, self.world.timer_label, HUD_FONT_SIZE, topright=(width - 20, 20)
            )
            self._draw_text(
                surface, self.world.score_label, HUD_FONT_SIZE, topright=(width - 20, 60)
            )
        elif self.state is GameState.MAIN_MENU:
            title = None
            if self.asset_root is not None and (self.asset_root / TITLE_IMAGE).is_file():
                title = self._sprites.get(("title",))
                if title is None:
                    title = pygame.image.load(str(self.asset_root / TITLE_IMAGE))
                    self._sprites[("title",)] = title
            self._draw_image(surface, title, "title")
            self._draw_buttons(surface)
        elif self.state is GameState.GAME_OVER:
            self._draw_image(surface, self._image("game_over_text"), "game_over_text")
            self._draw_buttons(surface)
            message = self._layout.get("message")
            if message is not None:
                self._draw_text(surface, self.message, MESSAGE_FONT_SIZE, center=message.center)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            self._start_music()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.step(clock.tick(FPS) / 1000.0)
                self._draw(surface)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="goatsalon", description="Trim the demon goat before it loses its patience."
    )
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    args = parser.parse_args(argv)
    root = Path(args.assets)
    if not root.is_dir():
        parser.error(f"asset directory not found: {root}")
    logging.basicConfig(level=logging.INFO)
    Game(root).run()
    return 0