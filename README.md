# goatsalon

A small two-player arcade game. Two imps run a salon in hell. Their customer
is a demon goat with far too much hair. Trim the hair before the goat's patience
runs out. Each lock you cut earns golden apples, and you need enough of them to
pay hell's rent.

## Installing

```
pip install .
```

This needs Python 3.10 or newer. It installs `pygame`.

## Playing

```
goatsalon --assets path/to/assets
```

`--assets` names the directory that holds the game's images, sounds and font.
It defaults to `assets` in the current directory, and the command stops with an
error if that directory does not exist.

The game opens on the main menu. Click **Play Game** to start a round.

| Action                | Player one | Player two  |
|-----------------------|------------|-------------|
| Move left / right     | `A` / `D`  | `←` / `→`   |
| Jump                  | `W`        | `↑`         |
| Interact / cut hair   | `E`        | `Enter`     |

Player one's interact repeats once a second while `E` is held; player two's
fires on every frame while `Enter` is held.

A connected gamepad is given to the first player in the round who has none yet.
Its left stick moves that player left and right, and steers the platform while
the player holds the control panel.

### Cutting hair

Stand near a lock of the goat's hair and press interact. The nearest lock within
reach comes off and a golden apple appears where it was, drifting downwards for
five seconds. Every lock is worth 10 apples. Player one reaches locks up to 150
units away; player two only up to 40.

### The moving platform

Some of the hair is too high to reach from the floor. Stand at the control panel
on the left and press interact to take the controls. While you hold them, your
movement keys steer the platform (`W`/`A`/`S`/`D` for player one and the arrow
keys for player two). Release interact and press it again to let go. A move that
would take the platform outside its track (x from -456 to 456, y from -360 to
-50) is ignored.

### Ending a round

A timer in the top right shows how long the goat stays calm: 89 seconds. The
round ends when it reaches zero. If you collected at least 230 apples you
survived hell. Otherwise the game over screen shows how far short you fell. From
that screen you can **Try Again** or go back to the **Main Menu**.

## Assets

The `ImageAssets` and `AudioAssets` classes in `goatsalon.assets` list every file
the game expects below the asset directory. Both are loaded when a round is
first started, and a missing file raises `FileNotFoundError`. If the font file
is absent, pygame's default font is used instead; missing menu music is simply
not played.

## Using the game logic directly

The round can be driven without a window. `goatsalon.world.World.new_game()`
sets up the salon, the goat and both players, and `World.update(delta)` advances
it, returning `True` once the goat has lost patience. The functions in
`goatsalon.controls` (`on_move`, `on_move_end`, `on_jump`, `on_interact`,
`close_control_panel`, `on_navigate_platform`) apply player actions to a
`World`. `goatsalon.app.Game` wraps this with screens, input and rendering.

## What it does not do

- Gamepad buttons are not read: jumping, interacting and letting go of the
  control panel work from the keyboard only.
- Movement uses simple box collision against the floor, walls and platform,
  not a full physics engine.

## Running the tests

```
pip install .[test]
pytest
```