import pytest

from quadsim.geometry import Vec2
from quadsim.platformer import Tile, World

E = Tile.EMPTY
S = Tile.SOLID
J = Tile.JUMP_THROUGH

TILE = 8.0
COLS = 4


def world_with_row(row_tile, row=2):
    world = World()
    tiles = [E] * (COLS * row) + [row_tile] * COLS
    world.add_static_tiled_layer(tiles, TILE, TILE, COLS, 1)
    return world


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (E, E, E),
        (J, J, J),
        (J, E, J),
        (E, J, J),
        (S, E, S),
        (E, S, S),
        (J, S, S),
        (Tile.COLLIDER, E, S),
    ],
)
def test_tile_merge(a, b, expected):
    assert a.merge(b) is expected


def test_actor_falls_onto_solid_row():
    world = world_with_row(S)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_v(actor, 100.0) is False
    assert world.actor_pos(actor) == Vec2(0.0, 2 * TILE - 8)
    assert world.collide_check(actor, world.actor_pos(actor) + Vec2(0.0, 1.0))
    assert not world.collide_check(actor, world.actor_pos(actor))


def test_free_vertical_move_succeeds():
    world = world_with_row(S)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_v(actor, 3.0) is True
    assert world.actor_pos(actor) == Vec2(0.0, 3.0)


def test_horizontal_remainder_accumulates():
    world = World()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_h(actor, 0.4)
    assert world.actor_pos(actor) == Vec2(0.0, 0.0)
    assert world.move_h(actor, 0.4)
    assert world.actor_pos(actor) == Vec2(1.0, 0.0)


def test_half_step_rounds_away_from_zero():
    world = World()
    actor = world.add_actor(Vec2(5.0, 0.0), 8, 8)
    world.move_h(actor, 0.5)
    assert world.actor_pos(actor) == Vec2(6.0, 0.0)
    world.move_h(actor, -0.5)
    assert world.actor_pos(actor) == Vec2(5.0, 0.0)


def test_jump_through_blocks_falling_until_descent():
    world = world_with_row(J)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_v(actor, 100.0) is False
    landed = world.actor_pos(actor)
    assert landed == Vec2(0.0, 2 * TILE - 8)

    world.descent(actor)
    assert world.move_v(actor, 24.0) is True
    assert world.actor_pos(actor) == landed + Vec2(0.0, 24.0)
    # out of the wood again: jump-through tiles block once more
    assert world.collide_check(actor, Vec2(0.0, 2 * TILE))


def test_actor_spawned_inside_jump_through_can_pass():
    world = world_with_row(J)
    inside = world.add_actor(Vec2(0.0, 2 * TILE), 8, 8)
    outside = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert not world.collide_check(inside, Vec2(0.0, 2 * TILE))
    assert world.collide_check(outside, Vec2(0.0, 2 * TILE))


def test_collide_solids_reports_solid_collider():
    world = World()
    world.add_solid(Vec2(10.0, 10.0), 4, 4)
    assert world.collide_solids(Vec2(11.0, 11.0), 2, 2) is Tile.COLLIDER
    assert world.collide_solids(Vec2(30.0, 30.0), 2, 2) is Tile.EMPTY


def test_collide_tag_respects_layer_tag():
    world = World()
    world.add_static_tiled_layer([S] * 4, TILE, TILE, COLS, 2)
    assert world.collide_tag(2, Vec2(0.0, 0.0), 8, 8) is S
    assert world.collide_tag(1, Vec2(0.0, 0.0), 8, 8) is E
    assert world.collide_solids(Vec2(0.0, 0.0), 8, 8) is E


def test_wide_box_hits_tile_between_corners():
    world = World()
    tiles = [E, S, E, E]
    world.add_static_tiled_layer(tiles, TILE, TILE, COLS, 1)
    # corners fall in columns 0 and 2, the middle of the box covers column 1
    assert world.collide_tag(1, Vec2(0.0, 0.0), 24, 8) is S


def test_tag_at_and_solid_at():
    world = World()
    world.add_static_tiled_layer([S, E, E, E], TILE, TILE, COLS, 1)
    assert world.solid_at(Vec2(1.0, 1.0))
    assert not world.tag_at(Vec2(1.0, 1.0), 3)
    assert not world.solid_at(Vec2(12.0, 1.0))
    world.add_solid(Vec2(100.0, 100.0), 10, 10)
    assert world.solid_at(Vec2(105.0, 105.0))


def test_solid_carries_rider():
    world = World()
    solid = world.add_solid(Vec2(0.0, 20.0), 16, 8)
    rider = world.add_actor(Vec2(0.0, 12.0), 8, 8)
    world.solid_move(solid, 3.0, 0.0)
    assert world.solid_pos(solid) == Vec2(3.0, 20.0)
    assert world.actor_pos(rider) == Vec2(3.0, 12.0)
    assert not world.squished(rider)


def test_solid_vertical_move():
    world = World()
    solid = world.add_solid(Vec2(0.0, 0.0), 8, 8)
    world.solid_move(solid, 0.0, 2.0)
    assert world.solid_pos(solid) == Vec2(0.0, 2.0)


def test_solid_squishes_actor_against_wall():
    world = World()
    world.add_static_tiled_layer([E, E, E, S], TILE, TILE, COLS, 1)
    actor = world.add_actor(Vec2(16.0, 0.0), 8, 8)
    solid = world.add_solid(Vec2(8.0, 0.0), 8, 8)
    world.solid_move(solid, 1.0, 0.0)
    assert world.squished(actor)
    assert world.actor_pos(actor) == Vec2(16.0, 0.0)
    assert world.solid_pos(solid) == Vec2(9.0, 0.0)


def test_set_actor_size_keeps_bottom_and_centre():
    world = World()
    actor = world.add_actor(Vec2(10.0, 10.0), 8, 8)
    world.set_actor_size(actor, 4, 4)
    assert world.actor_size(actor) == (4, 4)
    assert world.actor_pos(actor) == Vec2(10.0 + (8 - 4) / 2, 10.0 + (8 - 4))


def test_set_actor_position_clears_remainder():
    world = World()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    world.move_h(actor, 0.4)
    world.set_actor_position(actor, Vec2(50.0, 60.0))
    world.move_h(actor, 0.4)
    assert world.actor_pos(actor) == Vec2(50.0, 60.0)


def test_unknown_actor_raises():
    world = World()
    world.add_actor(Vec2(0.0, 0.0), 8, 8)
    from quadsim.platformer import Actor

    with pytest.raises(IndexError):
        world.actor_pos(Actor(5))