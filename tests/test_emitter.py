import random

import pytest

from quadsim.emitter import Emitter, EmittersCache
from quadsim.geometry import Vec2
from quadsim.particle_config import (
    AtlasConfig,
    BlendMode,
    CircleParticle,
    Color,
    ColorCurve,
    Curve,
    EmitterConfig,
    RectEmission,
)


def make(**kwargs):
    return Emitter(EmitterConfig(**kwargs), random.Random(7))


def test_explosive_emitter_spawns_whole_amount():
    emitter = make(explosiveness=1.0, amount=12)
    particles = emitter.step(Vec2(0.0, 0.0), 0.01)
    assert len(particles) == 12


def test_gradual_emission_never_exceeds_amount():
    emitter = make(amount=5)
    for _ in range(50):
        particles = emitter.step(Vec2(0.0, 0.0), 0.05)
        assert len(particles) <= 5


def test_particle_moves_with_initial_velocity_in_world_coords():
    emitter = make(explosiveness=1.0, amount=1)
    pos = Vec2(100.0, 200.0)
    dt = 0.1
    (particle,) = emitter.step(pos, dt)
    assert particle.x == pytest.approx(pos.x)
    assert particle.y == pytest.approx(pos.y - emitter.config.initial_velocity * dt)


def test_local_coords_ignore_emitter_position():
    emitter = make(explosiveness=1.0, amount=1, local_coords=True)
    (particle,) = emitter.step(Vec2(100.0, 200.0), 0.1)
    assert particle.x == pytest.approx(0.0)


def test_one_shot_stops_and_particles_expire():
    emitter = make(explosiveness=1.0, amount=4, one_shot=True, lifetime=0.5)
    assert len(emitter.step(Vec2(0.0, 0.0), 0.01)) == 4
    assert emitter.config.emitting is False
    assert emitter.step(Vec2(0.0, 0.0), 1.0) == []


def test_emit_adds_particles_and_counts_twice():
    emitter = make(emitting=False)
    emitter.emit(Vec2(1.0, 2.0), 3)
    assert len(emitter.particles) == 3
    assert emitter.particles_spawned == 6


def test_emit_beyond_capacity_raises():
    emitter = make(emitting=False)
    with pytest.raises(ValueError):
        emitter.emit(Vec2(0.0, 0.0), Emitter.MAX_PARTICLES + 1)


def test_reset_clears_state():
    emitter = make(explosiveness=1.0)
    emitter.step(Vec2(0.0, 0.0), 0.1)
    emitter.reset()
    assert emitter.particles == []
    assert emitter.particles_spawned == 0
    assert emitter.time_passed == 0.0


def test_new_particle_takes_start_color():
    red = Color(1.0, 0.0, 0.0, 1.0)
    blue = Color(0.0, 0.0, 1.0, 1.0)
    emitter = make(explosiveness=1.0, amount=1, colors_curve=ColorCurve(red, red, blue))
    (particle,) = emitter.step(Vec2(0.0, 0.0), 0.01)
    assert particle.color == red.to_tuple()


def test_atlas_first_frame_uv():
    atlas = AtlasConfig.from_range(4, 4, 8, None)
    emitter = make(explosiveness=1.0, amount=1, atlas=atlas)
    (particle,) = emitter.step(Vec2(0.0, 0.0), 0.01)
    assert particle.frame == 8
    assert particle.uv == pytest.approx((0.0, 8 // 4 / 4, 1 / 4, 1 / 4))


def test_no_atlas_uses_full_texture():
    emitter = make(explosiveness=1.0, amount=1)
    (particle,) = emitter.step(Vec2(0.0, 0.0), 0.01)
    assert particle.uv == (0.0, 0.0, 1.0, 1.0)


def test_size_curve_scales_new_particle():
    curve = Curve(points=[(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)])
    emitter = make(explosiveness=1.0, amount=1, size_curve=curve)
    (particle,) = emitter.step(Vec2(0.0, 0.0), 0.01)
    assert particle.size == pytest.approx(emitter.config.size * curve.batch().get(0.0))


def test_rebuild_size_curve_follows_config():
    emitter = make()
    assert emitter.batched_size_curve is None
    curve = Curve(points=[(0.0, 1.0), (1.0, 2.0)])
    emitter.config.size_curve = curve
    emitter.rebuild_size_curve()
    assert emitter.batched_size_curve == curve.batch()


def test_update_particle_mesh_rebuilds_from_shape():
    emitter = make()
    emitter.config.shape = CircleParticle(6)
    emitter.update_particle_mesh()
    emitter.update(0.01)
    assert emitter.mesh == CircleParticle(6).mesh()
    assert emitter.mesh_dirty is False


def test_gravity_changes_velocity():
    gravity = Vec2(0.0, 10.0)
    emitter = make(explosiveness=1.0, amount=1, gravity=gravity)
    (particle,) = emitter.step(Vec2(0.0, 0.0), 0.5)
    expected = emitter.config.initial_direction * emitter.config.initial_velocity + gravity * 0.5
    assert particle.velocity.x == pytest.approx(expected.x)
    assert particle.velocity.y == pytest.approx(expected.y)


def test_blend_mode_synced_on_step():
    emitter = make()
    emitter.config.blend_mode = BlendMode.ADDITIVE
    emitter.step(Vec2(0.0, 0.0), 0.01)
    assert emitter.blend_mode is BlendMode.ADDITIVE


def test_rect_emission_is_deterministic_and_bounded():
    shape = RectEmission(10.0, 4.0)
    config = dict(explosiveness=1.0, amount=20, local_coords=True, emission_shape=shape,
                  initial_velocity=0.0)
    a = Emitter(EmitterConfig(**config), random.Random(3)).step(Vec2(0.0, 0.0), 0.01)
    b = Emitter(EmitterConfig(**config), random.Random(3)).step(Vec2(0.0, 0.0), 0.01)
    assert [p.position for p in a] == [p.position for p in b]
    for p in a:
        assert -5.0 <= p.x <= 5.0
        assert -2.0 <= p.y <= 2.0


def test_cache_spawn_and_recycle():
    config = EmitterConfig(one_shot=True, explosiveness=1.0, amount=3)
    cache = EmittersCache(config, random.Random(1))
    assert len(cache.cached) == EmittersCache.CACHE_DEFAULT_SIZE
    emitter = cache.spawn(Vec2(5.0, 5.0))
    assert emitter.config.emitting is True
    assert len(cache.active) == 1
    assert len(cache.cached) == EmittersCache.CACHE_DEFAULT_SIZE - 1
    cache.step(0.01)
    assert cache.active == []
    assert len(cache.cached) == EmittersCache.CACHE_DEFAULT_SIZE


def test_cache_creates_emitters_when_empty():
    config = EmitterConfig()
    cache = EmittersCache(config, random.Random(1))
    for _ in range(EmittersCache.CACHE_DEFAULT_SIZE + 2):
        cache.spawn(Vec2(0.0, 0.0))
    assert len(cache.active) == EmittersCache.CACHE_DEFAULT_SIZE + 2
    assert cache.cached == []