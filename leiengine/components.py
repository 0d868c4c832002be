"""Timer, colour source, directional light and follow-camera components."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from leiengine.camera import Camera
from leiengine.entity import Component, Entity

DEFAULT_FAR_PLANE = 1400.0
_CASCADE_FRACTIONS = (0.067, 0.2, 0.5)


class TimerComponent(Component):
    """Counts frame time once started and fires an event on reaching the target time."""

    def __init__(self, entity: Entity):
        super().__init__(entity)
        self.elapsed = 0.0
        self.running = False
        self.target_time = 0.0
        self._event: Callable[[], None] = lambda: None

    def start_timer(self) -> None:
        """Begin counting time on subsequent updates."""
        self.running = True

    def set_target_time(self, time: float) -> None:
        """Set the elapsed time, in seconds, at which the event fires."""
        self.target_time = float(time)

    def on_timer_end(self, event: Callable[[], None]) -> None:
        """Set the callable run when the timer reaches its target."""
        self._event = event

    def update(self, delta_time: float) -> None:
        if not self.running:
            return
        self.elapsed += delta_time
        if self.elapsed >= self.target_time:
            self._event()
            self.running = False


class ColorSource(Component):
    """A point that restores colour within a radius, fading over a falloff distance."""

    def __init__(self, entity: Entity):
        super().__init__(entity)
        self.radius = 0.0
        self.falloff = 0.0
        self.active = False

    def init(self, radius: float, falloff: float, active: bool = False) -> None:
        """Set the radius, falloff and whether the source starts active."""
        self.radius = float(radius)
        self.falloff = float(falloff)
        self.active = bool(active)

    def toggle_active(self) -> None:
        """Switch the source on if it is off, and off if it is on."""
        self.active = not self.active

    def position(self) -> np.ndarray:
        """World position of the entity this source is attached to."""
        return np.asarray(self.entity.transform.position, dtype=float).copy()


class DirectionalLight:
    """A light shining uniformly in one direction, with shadow cascade split distances."""

    def __init__(self, direction: Sequence[float] = (0.0, -1.0, 0.0),
                 color: Sequence[float] = (1.0, 1.0, 1.0),
                 intensity: float = 1.0,
                 far_plane: float = DEFAULT_FAR_PLANE):
        vec = np.asarray(direction, dtype=float)
        length = np.linalg.norm(vec)
        if length == 0:
            raise ValueError("light direction must be non-zero")
        self.direction = vec / length
        self.color = np.asarray(color, dtype=float)
        self.intensity = float(intensity)
        self.cascade_levels = [far_plane * f for f in _CASCADE_FRACTIONS]
        self.light_space_matrices: list[np.ndarray] = []


class FollowCameraController(Component):
    """Keeps a camera at a fixed offset from an entity and turns the entity with it."""

    def __init__(self, entity: Entity):
        super().__init__(entity)
        self.camera: Camera | None = None
        self.follow_entity = entity
        self.offset = np.zeros(3)

    def init(self, camera: Camera, offset: Sequence[float]) -> None:
        """Attach the camera and its offset from the followed entity."""
        self.camera = camera
        self.offset = np.asarray(offset, dtype=float)

    def update(self, delta_time: float) -> None:
        if self.camera is None:
            raise RuntimeError("follow camera controller has no camera; call init first")
        self.follow_entity.transform.yaw_rotation = self.camera.yaw
        self.camera.position = (
            np.asarray(self.follow_entity.transform.position, dtype=float) + self.offset
        )