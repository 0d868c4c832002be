import numpy as np
import pytest

from leiengine.camera import Camera, Key, LookMode, look_at, perspective


def _apply(matrix, point):
    result = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return result[:3] / result[3]


def test_defaults_match_engine_constants():
    camera = Camera(1.5)
    assert camera.fov == 45.0
    assert camera.near_plane == pytest.approx(0.1)
    assert camera.far_plane == 1400.0
    assert np.allclose(camera.position, [0.0, 0.0, 3.0])
    assert np.allclose(camera.front, [0.0, 0.0, -1.0])
    assert camera.mode is LookMode.FREE


def test_first_mouse_event_does_not_turn():
    camera = Camera(1.0, yaw=30.0)
    camera.mouse_moved(400, 300)
    assert camera.yaw == pytest.approx(30.0)
    assert camera.pitch == pytest.approx(0.0)


def test_mouse_motion_turns_by_sensitivity():
    camera = Camera(1.0)
    camera.mouse_moved(100, 100)
    camera.mouse_moved(150, 80)
    assert camera.yaw == pytest.approx(50 * Camera.MOUSE_SENSITIVITY)
    assert camera.pitch == pytest.approx(20 * Camera.MOUSE_SENSITIVITY)


def test_pitch_is_clamped():
    camera = Camera(1.0)
    camera.mouse_moved(0, 0)
    camera.mouse_moved(0, -10000)
    assert camera.pitch == Camera.MAX_PITCH
    camera.mouse_moved(0, 20000)
    assert camera.pitch == -Camera.MAX_PITCH


def test_front_and_right_stay_orthonormal():
    camera = Camera(1.0)
    camera.mouse_moved(0, 0)
    camera.mouse_moved(321, -77)
    assert np.linalg.norm(camera.front) == pytest.approx(1.0)
    assert np.linalg.norm(camera.right) == pytest.approx(1.0)
    assert np.dot(camera.front, camera.right) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(camera.up, camera.right) == pytest.approx(0.0, abs=1e-9)


def test_fixed_mode_ignores_mouse():
    camera = Camera(1.0, yaw=10.0, mode=LookMode.FIXED)
    camera.mouse_moved(0, 0)
    camera.mouse_moved(500, 500)
    assert camera.yaw == 10.0
    assert np.allclose(camera.front, [0.0, 0.0, -1.0])


def test_view_matrix_puts_camera_at_origin_looking_down_negative_z():
    camera = Camera(1.0)
    camera.mouse_moved(0, 0)
    camera.mouse_moved(123, 45)
    view = camera.view_matrix()
    assert np.allclose(_apply(view, camera.position), [0.0, 0.0, 0.0])
    assert np.allclose(_apply(view, camera.position + camera.front), [0.0, 0.0, -1.0])


def test_projection_maps_clip_planes_to_depth_range():
    camera = Camera(16 / 9)
    camera.set_clip_planes(0.5, 200.0)
    proj = camera.projection_matrix()
    assert _apply(proj, [0.0, 0.0, -0.5])[2] == pytest.approx(-1.0)
    assert _apply(proj, [0.0, 0.0, -200.0])[2] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(45.0, 0.0, 0.1, 100.0)


def test_look_at_rejects_identical_points():
    with pytest.raises(ValueError):
        look_at([1, 2, 3], [1, 2, 3], [0, 1, 0])


def test_plain_camera_does_not_move_on_keys():
    camera = Camera(1.0)
    before = camera.position.copy()
    camera.poll_movement({Key.W, Key.D}, 0.5)
    assert np.array_equal(camera.position, before)