"""Camera with flying, no-clip keyboard controls."""

from __future__ import annotations

import numpy as np

from leiengine.camera import Camera, Key


class FlyCamera(Camera):
    """A free camera moved with W/A/S/D, E (up) and Q (down); shift flies faster."""

    MIN_FLY_SPEED = 1.0
    MAX_FLY_SPEED = 200.0
    DEFAULT_FLY_SPEED = 40.0

    def __init__(self, aspect: float, yaw: float = 0.0, pitch: float = 0.0,
                 fly_speed: float = DEFAULT_FLY_SPEED):
        super().__init__(aspect, yaw, pitch)
        self.fly_speed = float(fly_speed)
        self.use_minecraft_controls = False

    def poll_movement(self, keys, delta_time: float) -> None:
        """Move according to the held keys over ``delta_time`` seconds."""
        held = frozenset(keys)
        speed = self.fly_speed
        if Key.LEFT_SHIFT in held:
            speed = min(speed * 10.0, self.MAX_FLY_SPEED)
        step = speed * delta_time

        handlers = {
            Key.W: self._forward,
            Key.S: self._back,
            Key.A: lambda d: self._move(-self.right * d),
            Key.D: lambda d: self._move(self.right * d),
            Key.E: lambda d: self._move(self.up * d),
            Key.Q: lambda d: self._move(-self.up * d),
        }
        for key, handler in handlers.items():
            if key in held:
                handler(step)

    def _move(self, offset: np.ndarray) -> None:
        self.position = self.position + offset

    def _planar_move(self, distance: float) -> np.ndarray:
        if self.use_minecraft_controls:
            flat = np.array([self.front[0], 0.0, self.front[2]])
            length = np.linalg.norm(flat)
            return flat / length * distance if length else np.zeros(3)
        return self.front * distance

    def _forward(self, distance: float) -> None:
        self._move(self.front * distance + self._planar_move(distance))

    def _back(self, distance: float) -> None:
        self._move(-(self.front * distance + self._planar_move(distance)))