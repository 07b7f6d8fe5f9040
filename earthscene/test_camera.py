"""
Tests for the camera state and the damped orbit controller
"""

import math

import pytest

from earthscene.config import Config
from earthscene.core import CameraState, OrbitController


def test_default_camera_matches_startup():
    camera = CameraState()

    assert camera.position == (0, 0, 4)
    assert camera.axis_distance == 4
    assert camera.fov == 45
    assert camera.near == pytest.approx(0.1)
    assert camera.far == 1000


def test_set_aspect_ignores_zero_height():
    camera = CameraState()

    camera.set_aspect(800, 400)
    assert camera.aspect == 2.0

    camera.set_aspect(800, 0)
    assert camera.aspect == 2.0


def test_update_without_input_does_nothing():
    camera = CameraState()
    controls = OrbitController(camera)

    assert controls.update() is False
    assert camera.position == (0, 0, 4)


@pytest.mark.parametrize("damping", [0.0, -0.1, 1.5])
def test_invalid_damping_rejected(damping):
    with pytest.raises(ValueError):
        OrbitController(CameraState(), damping_factor=damping)


def test_rotation_is_damped_and_converges():
    camera = CameraState()
    controls = OrbitController(camera)
    controls.rotate_left(0.4)

    controls.update()
    first_theta = math.atan2(camera.position[0], camera.position[2])
    assert first_theta == pytest.approx(-0.4 * Config.CONTROLS_DAMPING_FACTOR)

    for _ in range(200):
        controls.update()

    final_theta = math.atan2(camera.position[0], camera.position[2])
    assert final_theta == pytest.approx(-0.4, abs=1e-6)
    assert camera.distance_from_origin == pytest.approx(4.0)
    assert controls.update() is False


def test_dolly_scales_distance():
    camera = CameraState()
    controls = OrbitController(camera)

    controls.dolly_out(0.5)
    controls.update()
    assert camera.position[2] == pytest.approx(8.0)

    controls.dolly_in(0.5)
    controls.update()
    assert camera.position[2] == pytest.approx(4.0)


def test_wheel_zooms_in_and_out():
    camera = CameraState()
    controls = OrbitController(camera)

    controls.handle_wheel(-10)
    controls.update()

    expected = 4.0 / (0.95 ** 10)
    assert camera.axis_distance == pytest.approx(expected)

    controls.handle_wheel(1)
    controls.update()
    assert camera.axis_distance == pytest.approx(expected * 0.95)


def test_zoom_out_far_enough_crosses_asteroid_threshold():
    camera = CameraState()
    controls = OrbitController(camera)

    for _ in range(30):
        controls.handle_wheel(-1)
        controls.update()

    assert camera.axis_distance > Config.ASTEROID_VISIBILITY_DISTANCE


def test_distance_limits():
    camera = CameraState()
    controls = OrbitController(camera, min_distance=2.0, max_distance=6.0)

    controls.dolly_out(0.1)
    controls.update()
    assert camera.distance_from_origin == pytest.approx(6.0)

    controls.dolly_in(0.01)
    controls.update()
    assert camera.distance_from_origin == pytest.approx(2.0)


def test_polar_angle_is_clamped_off_the_pole():
    camera = CameraState()
    controls = OrbitController(camera, damping_factor=1.0)

    # Drag far past the top of the sphere
    controls.rotate_up(10.0)
    controls.update()

    x, y, z = camera.position
    assert y < 4.0
    assert y == pytest.approx(4.0, abs=1e-4)
    assert camera.distance_from_origin == pytest.approx(4.0)


def test_drag_converts_pixels_to_angle():
    camera = CameraState()
    controls = OrbitController(camera, damping_factor=1.0)

    # Dragging the full viewport height is one full turn
    controls.handle_drag(250, 0, 1000)
    controls.update()

    theta = math.atan2(camera.position[0], camera.position[2])
    assert theta == pytest.approx(-math.pi / 2)


def test_drag_ignored_for_empty_viewport():
    controls = OrbitController(CameraState())

    controls.handle_drag(100, 100, 0)

    assert controls.update() is False


def test_reset_restores_default_position():
    camera = CameraState()
    controls = OrbitController(camera)
    controls.dolly_out(0.2)
    controls.rotate_left(1.0)
    controls.update()

    controls.reset()

    assert camera.position == Config.CAMERA_DEFAULT_POSITION
    assert controls.update() is False
