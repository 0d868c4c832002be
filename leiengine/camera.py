"""Perspective camera with mouse-driven free look."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np


class LookMode(Enum):
    """How the camera reacts to mouse movement."""

    FREE = auto()
    FIXED = auto()


class Key(Enum):
    """Keys the engine reacts to."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    Q = auto()
    E = auto()
    R = auto()
    P = auto()
    SPACE = auto()
    LEFT_SHIFT = auto()
    TAB = auto()
    ESCAPE = auto()


def _normalize(vec: np.ndarray) -> np.ndarray:
    return vec / np.linalg.norm(vec)


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    center = np.asarray(center, dtype=float)
    up = np.asarray(up, dtype=float)
    forward = center - eye
    if not np.any(forward):
        raise ValueError("eye and center must differ")
    f = _normalize(forward)
    side = np.cross(f, up)
    if not np.any(side):
        raise ValueError("up must not be parallel to the view direction")
    s = _normalize(side)
    u = np.cross(s, f)
    result = np.eye(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result


def perspective(fov_y_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth from -1 to 1."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(math.radians(fov_y_degrees) / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


class Camera:
    """A camera with yaw and pitch, steered by mouse movement in free-look mode."""

    MAX_PITCH = 89.0
    MOUSE_SENSITIVITY = 0.1

    def __init__(self, aspect: float, yaw: float = 0.0, pitch: float = 0.0,
                 mode: LookMode = LookMode.FREE):
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.mode = mode

        self.fov = 45.0
        self.aspect = float(aspect)
        self.near_plane = 0.1
        self.far_plane = 1400.0

        self.position = np.array([0.0, 0.0, 3.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.right = np.array([1.0, 0.0, 0.0])

        self._mouse_entered = True
        self._prev_x = 0
        self._prev_y = 0

    def view_matrix(self) -> np.ndarray:
        """World-to-view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def projection_matrix(self) -> np.ndarray:
        """Perspective projection for the current field of view and clip planes."""
        return perspective(self.fov, self.aspect, self.near_plane, self.far_plane)

    def mouse_moved(self, x: float, y: float) -> None:
        """React to the cursor moving to window position (x, y)."""
        if self.mode is LookMode.FREE:
            self._free_look(float(x), float(y))

    def set_clip_planes(self, near: float, far: float) -> None:
        """Set the near and far clip distances."""
        self.near_plane = float(near)
        self.far_plane = float(far)

    def poll_movement(self, keys, delta_time: float) -> None:
        """Move according to held keys; a plain camera stays where it is."""
        return None

    def _free_look(self, x: float, y: float) -> None:
        if self._mouse_entered:
            self._prev_x, self._prev_y = int(x), int(y)
            self._mouse_entered = False

        x_offset = (x - self._prev_x) * self.MOUSE_SENSITIVITY
        y_offset = (self._prev_y - y) * self.MOUSE_SENSITIVITY
        self._prev_x, self._prev_y = int(x), int(y)

        self.yaw += x_offset
        self.pitch = max(-self.MAX_PITCH, min(self.MAX_PITCH, self.pitch + y_offset))

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = np.array([
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ])
        self.front = _normalize(direction)
        self.right = _normalize(np.cross(self.front, self.up))