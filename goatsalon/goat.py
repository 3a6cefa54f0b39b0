"""The demon goat customer: its layered sprite parts, hair and moving jaw."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from goatsalon.timer import Timer, TimerMode

ANGER_SECONDS = 89.0
SALON_TRACK = "background"

JAW_CENTER = (0.0, -35.0, -13.0)
BEARD_CENTER = (10.0, -230.0, -1.7)
JAW_RADIUS = 12.0
JAW_SPEED = 6.0

Vec3 = tuple[float, float, float]


def _anger_timer() -> Timer:
    return Timer.from_seconds(ANGER_SECONDS, TimerMode.ONCE)


@dataclass
class Customer:
    """The goat's patience: when the timer runs out the round is lost."""

    anger_timer: Timer = field(default_factory=_anger_timer)


@dataclass(frozen=True)
class JawMotion:
    """A circular wobble around a fixed centre."""

    center: Vec3
    radius: float
    speed: float

    def position_at(self, elapsed: float) -> Vec3:
        """Where the moving part sits ``elapsed`` seconds into the round."""
        t = elapsed * self.speed
        cx, cy, cz = self.center
        return (cx + self.radius * math.cos(t), cy + self.radius * math.sin(t), cz)


@dataclass(eq=False)
class GoatPart:
    """One sprite layer of the goat; hair parts can be trimmed off."""

    name: str
    image: str
    size: tuple[float, float]
    position: Vec3
    hair: bool = False
    jaw: bool = False
    body: bool = False
    motion: JawMotion | None = None


@dataclass
class Goat:
    """The customer and every sprite it is built from, back to front as spawned."""

    customer: Customer
    parts: list[GoatPart]

    def hairs(self) -> list[GoatPart]:
        """The parts that can still be trimmed."""
        return [part for part in self.parts if part.hair]

    def part(self, name: str) -> GoatPart:
        for part in self.parts:
            if part.name == name:
                return part
        raise KeyError(name)

    def remove(self, part: GoatPart) -> None:
        """Take ``part`` off the goat; raise ValueError if it is not there."""
        try:
            self.parts.remove(part)
        except ValueError:
            raise ValueError(f"{part.name} is not part of the goat") from None


# name, image, size, position, in the order the hair layers are spawned
_HAIRS: tuple[tuple[str, str, tuple[float, float], Vec3], ...] = (
    ("hair_top", "hair_top", (346.0, 121.0), (0.0, 200.0, -11.81)),
    ("hair1_left", "hair1_left", (166.0, 147.0), (-110.0, 110.0, -11.6)),
    ("hair1_right", "hair1_right", (166.0, 147.0), (110.0, 110.0, -11.6)),
    ("hair2_left", "hair2_left", (207.0, 226.0), (-140.0, 58.0, -11.7)),
    ("hair2_right", "hair2_right", (207.0, 226.0), (140.0, 58.0, -11.7)),
    ("hair3_left", "hair3_left", (234.0, 210.0), (-195.0, 100.0, -11.7)),
    ("hair3_right", "hair3_right", (234.0, 210.0), (195.0, 100.0, -11.7)),
    ("hair5_left", "hair5_left", (143.0, 236.0), (-130.0, 20.0, -11.71)),
    ("hair5_right", "hair5_right", (143.0, 236.0), (130.0, 20.0, -11.71)),
    ("hair6_left", "hair6_left", (137.0, 281.0), (-220.0, -40.0, -11.72)),
    ("hair6_right", "hair6_right", (137.0, 281.0), (220.0, -40.0, -11.72)),
    ("hair7_left", "hair7_left", (95.0, 320.0), (-130.0, -90.0, -11.72)),
    ("hair7_right", "hair7_right", (95.0, 320.0), (130.0, -90.0, -11.72)),
    ("hair8_left", "hair8_left", (76.0, 254.0), (-80.0, -130.0, -11.72)),
    ("hair8_right", "hair8_right", (76.0, 254.0), (80.0, -130.0, -11.72)),
    ("hair9_left", "hair9_left", (76.0, 254.0), (-180.0, -130.0, -11.73)),
    ("hair9_right", "hair9_right", (76.0, 254.0), (180.0, -130.0, -11.73)),
    ("hair10_left", "hair9_left", (76.0, 254.0), (-200.0, -120.0, -11.73)),
    ("hair10_right", "hair9_right", (76.0, 254.0), (200.0, -120.0, -11.73)),
    ("hair11_left", "hair9_left", (76.0, 254.0), (-220.0, -110.0, -11.73)),
    ("hair11_right", "hair9_right", (76.0, 254.0), (220.0, -110.0, -11.73)),
    ("hair12_left", "hair9_left", (76.0, 254.0), (-240.0, -100.0, -11.73)),
    ("hair12_right", "hair9_right", (76.0, 254.0), (240.0, -100.0, -11.73)),
    ("hair4_left", "hair4_left", (112.0, 350.0), (-260.0, -90.0, -11.71)),
    ("hair4_right", "hair4_right", (112.0, 350.0), (260.0, -90.0, -11.71)),
)


def spawn_customer() -> Goat:
    """Build a fresh, fully haired goat with a full anger timer."""
    parts = [
        GoatPart("base", "goat_base", (891.84, 444.8), (0.0, 60.0, -12.0)),
        GoatPart("body", "goat_body", (389.4, 322.8), (0.0, -150.0, -14.0)),
        GoatPart(
            "jaw",
            "goat_jaw",
            (97.92, 320.64),
            JAW_CENTER,
            jaw=True,
            body=True,
            motion=JawMotion(JAW_CENTER, JAW_RADIUS, JAW_SPEED),
        ),
        GoatPart(
            "beard",
            "goat_beard",
            (144.0, 144.0),
            BEARD_CENTER,
            hair=True,
            jaw=True,
            motion=JawMotion(BEARD_CENTER, JAW_RADIUS, JAW_SPEED),
        ),
        GoatPart("ears", "goat_ears", (425.6, 134.08), (0.0, 160.0, -14.0), body=True),
    ]
    parts.extend(
        GoatPart(name, image, size, position, hair=True)
        for name, image, size, position in _HAIRS
    )
    return Goat(Customer(), parts)


def move_jaw(parts: Iterable[GoatPart], elapsed: float) -> None:
    """Place every jaw-attached part on its circle for the given round time."""
    for part in parts:
        if part.jaw and part.motion is not None:
            part.position = part.motion.position_at(elapsed)