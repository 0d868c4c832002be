import numpy as np
import pytest

from leiengine.camera import Camera
from leiengine.components import (
    ColorSource,
    DirectionalLight,
    FollowCameraController,
    TimerComponent,
)
from leiengine.entity import Entity


def _timer(target):
    entity = Entity("timer")
    timer = entity.add_component(TimerComponent)
    timer.set_target_time(target)
    fired = []
    timer.on_timer_end(lambda: fired.append(True))
    return timer, fired


def test_timer_does_not_count_before_start():
    timer, fired = _timer(1.0)
    timer.update(5.0)
    assert fired == []
    assert timer.elapsed == 0.0


def test_timer_fires_once_target_reached():
    timer, fired = _timer(1.0)
    timer.start_timer()
    timer.update(0.5)
    assert fired == []
    timer.update(0.5)
    assert fired == [True]
    assert timer.running is False


def test_timer_fires_only_once():
    timer, fired = _timer(0.2)
    timer.start_timer()
    for _ in range(5):
        timer.update(0.1)
    assert len(fired) == 1


def test_entity_update_drives_timer():
    entity = Entity()
    timer = entity.add_component(TimerComponent)
    timer.set_target_time(0.3)
    fired = []
    timer.on_timer_end(lambda: fired.append("done"))
    timer.start_timer()
    entity.update(0.3)
    assert fired == ["done"]


def test_color_source_init_defaults_inactive():
    source = Entity().add_component(ColorSource)
    source.init(4.0, 2.0)
    assert source.radius == 4.0
    assert source.falloff == 2.0
    assert source.active is False


def test_color_source_toggle_round_trip():
    source = Entity().add_component(ColorSource)
    source.init(1.0, 1.0, True)
    source.toggle_active()
    assert source.active is False
    source.toggle_active()
    assert source.active is True


def test_color_source_position_follows_entity():
    entity = Entity()
    source = entity.add_component(ColorSource)
    entity.transform.position = np.array([1.0, 2.0, 3.0])
    assert np.allclose(source.position(), [1.0, 2.0, 3.0])


def test_directional_light_direction_is_normalized():
    light = DirectionalLight((0.1, -0.5, -0.45), (1.0, 1.0, 1.0), 3.0)
    assert np.linalg.norm(light.direction) == pytest.approx(1.0)
    assert light.intensity == 3.0


def test_directional_light_default_points_down():
    light = DirectionalLight()
    assert np.allclose(light.direction, [0.0, -1.0, 0.0])
    assert np.allclose(light.color, [1.0, 1.0, 1.0])


def test_directional_light_cascades_increase_within_far_plane():
    light = DirectionalLight(far_plane=1000.0)
    levels = light.cascade_levels
    assert len(levels) == 3
    assert levels == sorted(levels)
    assert all(0 < level < 1000.0 for level in levels)
    assert levels[2] == pytest.approx(500.0)


def test_directional_light_rejects_zero_direction():
    with pytest.raises(ValueError):
        DirectionalLight((0.0, 0.0, 0.0))


def test_follow_camera_places_camera_at_offset():
    entity = Entity("player")
    entity.transform.position = np.array([5.0, 0.0, -2.0])
    camera = Camera(1.0, yaw=30.0)
    controller = entity.add_component(FollowCameraController)
    controller.init(camera, (0.0, 1.5, 0.0))
    controller.update(0.016)
    assert np.allclose(camera.position, [5.0, 1.5, -2.0])
    assert entity.transform.yaw_rotation == 30.0


def test_follow_camera_requires_init():
    controller = Entity().add_component(FollowCameraController)
    with pytest.raises(RuntimeError):
        controller.update(0.016)