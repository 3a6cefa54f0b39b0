"""The salon room: floor, walls, control panel and the moving platform."""

from __future__ import annotations

from dataclasses import dataclass, field

from goatsalon.players import Box

Vec3 = tuple[float, float, float]


@dataclass(eq=False)
class Prop:
    """A piece of the room; it blocks players when it has a collider."""

    name: str
    position: Vec3
    image: str | None = None
    size: tuple[float, float] | None = None
    scale: tuple[float, float] = (1.0, 1.0)
    collider: tuple[float, float] | None = None
    persists_into_game_over: bool = False

    @property
    def box(self) -> Box | None:
        """The collider in world space, scaled like the prop, or None."""
        if self.collider is None:
            return None
        width, height = self.collider
        return Box(
            self.position[0],
            self.position[1],
            width * self.scale[0],
            height * self.scale[1],
        )


@dataclass
class Salon:
    """Every prop of the room in spawn order."""

    props: list[Prop] = field(default_factory=list)

    def prop(self, name: str) -> Prop:
        for prop in self.props:
            if prop.name == name:
                return prop
        raise KeyError(name)

    @property
    def floor(self) -> Prop:
        return self.prop("floor")

    @property
    def control_panel(self) -> Prop:
        return self.prop("control_panel")

    @property
    def moving_platform(self) -> Prop:
        return self.prop("moving_platform")

    def solids(self) -> list[Box]:
        """Collision boxes of every prop that has a collider, at its current place."""
        return [box for prop in self.props if (box := prop.box) is not None]


def spawn_platform() -> Salon:
    """Lay out the salon as a round starts."""
    return Salon(
        [
            Prop(
                "floor",
                (0.0, -270.0, -10.0),
                image="floor",
                size=(720.0, 136.0),
                scale=(2.0, 1.0),
                collider=(1440.0, 135.0),
                persists_into_game_over=True,
            ),
            Prop("right_wall", (600.0, 0.0, 0.0), collider=(128.0, 800.0)),
            Prop("left_wall", (-600.0, 0.0, 0.0), collider=(128.0, 800.0)),
            Prop(
                "control_panel",
                (-350.0, -173.0, -2.0),
                image="control_panel",
                size=(64.0, 64.0),
                persists_into_game_over=True,
            ),
            Prop(
                "apple_basket",
                (420.0, 220.0, 2.0),
                image="backet_gold_apples",
                size=(71.16, 49.16),
            ),
            Prop(
                "left_joystick",
                (-366.0, -141.0, -1.5),
                image="joystick",
                size=(11.8, 27.9),
                persists_into_game_over=True,
            ),
            Prop(
                "right_joystick",
                (-333.0, -141.0, -1.5),
                image="joystick",
                size=(11.8, 27.9),
                persists_into_game_over=True,
            ),
            Prop(
                "background",
                (0.0, 0.0, -20.0),
                image="background",
                size=(1024.0, 576.0),
                persists_into_game_over=True,
            ),
            Prop(
                "moving_platform",
                (300.0, -340.0, -11.0),
                image="moving_platform",
                size=(115.0, 322.0),
                collider=(115.0, 322.0),
                persists_into_game_over=True,
            ),
        ]
    )