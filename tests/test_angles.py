import pytest

from quadsim.angles import CameraControls, angle_lerp, short_angle_dist, wrap_rotation

PAIRS = [(0.0, 90.0), (0.0, 270.0), (350.0, 10.0), (10.0, 350.0), (-40.0, 400.0), (123.0, 123.0)]


def test_short_way_round():
    assert short_angle_dist(0.0, 270.0) == pytest.approx(-90.0)


@pytest.mark.parametrize("a0,a1", PAIRS)
def test_distance_is_shortest_and_congruent(a0, a1):
    d = short_angle_dist(a0, a1)
    assert abs(d) <= 180.0
    diff = (a0 + d - a1) % 360.0
    assert min(diff, 360.0 - diff) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("a0,a1", PAIRS)
def test_lerp_endpoints(a0, a1):
    assert angle_lerp(a0, a1, 0.0) == a0
    end = angle_lerp(a0, a1, 1.0)
    diff = (end - a1) % 360.0
    assert min(diff, 360.0 - diff) == pytest.approx(0.0, abs=1e-9)


def test_wrap_rotation():
    assert wrap_rotation(370.0) == pytest.approx(10.0)
    assert wrap_rotation(-10.0) == pytest.approx(350.0)
    assert wrap_rotation(45.0) == 45.0


def test_wheel_rotation_round_trip():
    cam = CameraControls()
    cam.apply_wheel(-1.0, False)
    assert 180.0 < cam.rotation < 360.0
    cam.apply_wheel(1.0, False)
    assert cam.rotation == pytest.approx(0.0)


def test_wheel_zoom():
    cam = CameraControls()
    cam.apply_wheel(2.0, True)
    assert cam.zoom > 1.0
    assert cam.rotation == 0.0
    cam.apply_wheel(-2.0, True)
    assert cam.zoom == pytest.approx(1.0)


def test_zero_wheel_is_ignored():
    cam = CameraControls(zoom=2.0, rotation=30.0)
    cam.apply_wheel(0.0, True)
    cam.apply_wheel(0.0, False)
    assert cam.zoom == 2.0
    assert cam.rotation == 30.0


def test_smooth_rotation_converges():
    cam = CameraControls(rotation=90.0)
    cam.update()
    assert 0.0 < cam.smooth_rotation < 90.0
    for _ in range(300):
        cam.update()
    assert cam.smooth_rotation == pytest.approx(90.0, abs=1e-6)


def test_smooth_rotation_takes_short_path():
    cam = CameraControls(rotation=10.0, smooth_rotation=350.0)
    cam.update()
    assert cam.smooth_rotation > 350.0