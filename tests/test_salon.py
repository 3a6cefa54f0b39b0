import pytest

from goatsalon.salon import Prop, spawn_platform


def test_floor_layout():
    salon = spawn_platform()
    floor = salon.floor
    assert floor.position == (0.0, -270.0, -10.0)
    assert floor.scale == (2.0, 1.0)
    assert floor.collider == (1440.0, 135.0)


def test_control_panel_position():
    assert spawn_platform().control_panel.position == (-350.0, -173.0, -2.0)


def test_moving_platform_start():
    platform = spawn_platform().moving_platform
    assert platform.position == (300.0, -340.0, -11.0)
    assert platform.collider == platform.size


def test_unknown_prop():
    with pytest.raises(KeyError):
        spawn_platform().prop("mirror")


def test_solids_cover_collider_props_only():
    salon = spawn_platform()
    solids = salon.solids()
    assert len(solids) == 4
    with_collider = [p for p in salon.props if p.collider is not None]
    assert len(solids) == len(with_collider)
    assert {(b.x, b.y) for b in solids} == {
        (p.position[0], p.position[1]) for p in with_collider
    }


def test_walls_mirror_each_other():
    salon = spawn_platform()
    left, right = salon.prop("left_wall").box, salon.prop("right_wall").box
    assert left.x == -600.0 and right.x == 600.0
    assert left.width == right.width and left.height == right.height


def test_prop_without_collider_has_no_box():
    prop = Prop("plant", (1.0, 2.0, 0.0), image="plant")
    assert prop.box is None


def test_prop_box_is_scaled():
    prop = Prop("rug", (5.0, 6.0, 0.0), scale=(3.0, 2.0), collider=(10.0, 4.0))
    box = prop.box
    assert (box.x, box.y, box.width, box.height) == (5.0, 6.0, 30.0, 8.0)


def test_solids_follow_the_moving_platform():
    salon = spawn_platform()
    salon.moving_platform.position = (100.0, -200.0, -11.0)
    assert any(b.x == 100.0 and b.y == -200.0 for b in salon.solids())
    assert not any(b.x == 300.0 and b.y == -340.0 for b in salon.solids())


def test_floor_box_spans_floor_sprite_and_more():
    salon = spawn_platform()
    floor = salon.floor
    box = floor.box
    assert box.width >= floor.size[0] * floor.scale[0]
    assert box.top == pytest.approx(floor.position[1] + 135.0 / 2)