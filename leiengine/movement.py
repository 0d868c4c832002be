"""Character movement: ground checks and air-strafing velocity updates."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from leiengine.camera import Key

GROUND_NORMAL_THRESHOLD = -0.95
_FRICTION_EPSILON = 0.1


@dataclass
class MovementSettings:
    """Tunable parameters of the character controller."""

    accel: float = 50.0
    air_accel: float = 1000.0
    max_speed: float = 500.0
    max_air_speed: float = 20.575
    friction: float = 10.0
    jump_power: float = 6.0


class GroundedCheck:
    """Collects contacts of a ground probe and decides whether it touches the ground.

    Contacts with the attached object itself are ignored; any other contact
    whose normal points steeply enough (y below -0.95) counts as ground.
    """

    def __init__(self, attached: Hashable):
        self.attached = attached
        self.grounded = False

    def add_contact(self, other: Hashable, normal: Sequence[float]) -> None:
        """Record a contact with ``other`` whose world normal is ``normal``."""
        is_attached = other is self.attached or other == self.attached
        if not is_attached and float(normal[1]) < GROUND_NORMAL_THRESHOLD:
            self.grounded = True


def _vec(values) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {array.shape}")
    return array


def project_vector(vec, target) -> np.ndarray:
    """Project ``vec`` onto ``target``."""
    vec = _vec(vec)
    target = _vec(target)
    length_squared = float(np.dot(target, target))
    if length_squared == 0.0:
        raise ValueError("cannot project onto a zero vector")
    return target * (float(np.dot(vec, target)) / length_squared)


def wish_direction(keys: Iterable[Key], yaw_degrees: float) -> np.ndarray:
    """Unit direction the player asks to move in, from held keys and facing yaw.

    W/S move along the facing direction, A/D strafe; no net input gives zeros.
    """
    held = frozenset(keys)
    yaw = math.radians(yaw_degrees)
    forward = np.array([math.cos(yaw), 0.0, math.sin(yaw)])
    forward /= np.linalg.norm(forward)
    right = np.array([-math.sin(yaw), 0.0, math.cos(yaw)])
    right /= np.linalg.norm(right)

    wish = np.zeros(3)
    if Key.W in held:
        wish += forward
    if Key.S in held:
        wish -= forward
    if Key.A in held:
        wish -= right
    if Key.D in held:
        wish += right

    length = np.linalg.norm(wish)
    if length != 0.0:
        wish /= length
    return wish


def accelerate(wish_dir, prev_velocity, acceleration: float, max_velocity: float,
               delta_time: float) -> np.ndarray:
    """Accelerate along ``wish_dir`` without letting the speed along it exceed the maximum."""
    wish_dir = _vec(wish_dir)
    prev_velocity = _vec(prev_velocity)
    projected_speed = float(np.dot(prev_velocity, wish_dir))
    wish_speed = acceleration * delta_time
    if projected_speed + wish_speed > max_velocity:
        wish_speed = max_velocity - projected_speed
    return prev_velocity + wish_dir * wish_speed


def air_acceleration(settings: MovementSettings, wish_dir, prev_velocity,
                     delta_time: float) -> np.ndarray:
    """Velocity after one step of air control."""
    return accelerate(wish_dir, prev_velocity, settings.air_accel,
                      settings.max_air_speed, delta_time)


def ground_acceleration(settings: MovementSettings, wish_dir, prev_velocity,
                        delta_time: float) -> np.ndarray:
    """Velocity after one step on the ground; friction applies only without input."""
    wish_dir = _vec(wish_dir)
    velocity = _vec(prev_velocity).copy()
    speed = float(np.linalg.norm(velocity))
    if speed != 0.0 and float(np.linalg.norm(wish_dir)) < _FRICTION_EPSILON:
        drop = speed * settings.friction * delta_time
        velocity *= max(speed - drop, 0.0) / speed
    return accelerate(wish_dir, velocity, settings.accel, settings.max_speed, delta_time)


def step_velocity(settings: MovementSettings, velocity, keys: Iterable[Key],
                  yaw_degrees: float, on_ground: bool, delta_time: float) -> np.ndarray:
    """New character velocity for one physics step, including jumping."""
    held = frozenset(keys)
    wish = wish_direction(held, yaw_degrees)
    if on_ground:
        result = ground_acceleration(settings, wish, velocity, delta_time)
    else:
        result = air_acceleration(settings, wish, velocity, delta_time)
    if on_ground and Key.SPACE in held:
        result = result + np.array([0.0, settings.jump_power, 0.0])
    return result