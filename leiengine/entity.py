"""Entities, their transforms and the component system attached to them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TypeVar

import numpy as np


@dataclass
class Transform:
    """Position, rotation about the vertical axis in degrees, and scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    yaw_rotation: float = 0.0
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))


class Component:
    """Behaviour attached to an entity; subclasses override the hooks they need.

    The base hooks keep track of the component's lifecycle so that callers can
    tell whether it has been started, destroyed, drawn or ticked in the editor.
    """

    def __init__(self, entity: "Entity"):
        self.entity = entity
        self.started = False
        self.destroyed = False
        self.render_count = 0
        self.editor_update_count = 0

    def start(self) -> None:
        """Called when the scene starts playing."""
        self.started = True

    def update(self, delta_time: float) -> None:
        """Called once per frame while the scene plays."""

    def physics_update(self) -> None:
        """Called once per fixed physics step while the scene plays."""

    def render(self) -> None:
        """Called when the entity is drawn."""
        self.render_count += 1

    def on_destroy(self) -> None:
        """Called when the entity is destroyed."""
        self.destroyed = True

    def on_reset(self) -> None:
        """Called when the scene is reset; the component must start again."""
        self.started = False

    def on_editor_update(self) -> None:
        """Called once per frame in the editor."""
        self.editor_update_count += 1


C = TypeVar("C", bound=Component)


class Entity:
    """A named object in a scene holding a transform and components."""

    def __init__(self, name: str = "Unnamed"):
        self.name = name
        self.transform = Transform()
        self.reset_transform = False
        self._components: list[Component] = []

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def _broadcast(self, hook: str, *args) -> None:
        for component in self._components:
            getattr(component, hook)(*args)

    def start(self) -> None:
        self._broadcast("start")

    def update(self, delta_time: float) -> None:
        self._broadcast("update", delta_time)

    def physics_update(self) -> None:
        self._broadcast("physics_update")

    def render(self) -> None:
        self._broadcast("render")

    def on_destroy(self) -> None:
        self._broadcast("on_destroy")

    def on_reset(self) -> None:
        self._broadcast("on_reset")

    def on_editor_update(self) -> None:
        self._broadcast("on_editor_update")

    def translation_matrix(self) -> np.ndarray:
        result = np.eye(4)
        result[:3, 3] = self.transform.position
        return result

    def rotation_matrix(self) -> np.ndarray:
        angle = math.radians(self.transform.yaw_rotation)
        c, s = math.cos(angle), math.sin(angle)
        result = np.eye(4)
        result[0, 0] = c
        result[0, 2] = s
        result[2, 0] = -s
        result[2, 2] = c
        return result

    def scale_matrix(self) -> np.ndarray:
        return np.diag([*np.asarray(self.transform.scale, dtype=float), 1.0])

    def model_matrix(self) -> np.ndarray:
        """Translation, then rotation, then scale, as one matrix."""
        return self.translation_matrix() @ self.rotation_matrix() @ self.scale_matrix()

    def add_component(self, component_type: type[C]) -> C:
        """Create a component of the given type attached to this entity."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a component type")
        component = component_type(self)
        self._components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the first attached component of the given type, or None."""
        return next(
            (c for c in self._components if isinstance(c, component_type)), None
        )