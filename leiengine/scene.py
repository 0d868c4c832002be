"""Scenes: collections of entities with a play, pause and reset life cycle."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto

from leiengine.camera import Camera
from leiengine.components import DirectionalLight
from leiengine.entity import Entity
from leiengine.log import TRACE, get_logger

DEFAULT_ENTITY_NAME = "Unnamed Entity"

HOOK_NAMES = ("load", "unload", "start", "update", "physics_update", "destroy", "reset")


class SceneState(Enum):
    """Where a scene is in its life cycle."""

    PLAYING = auto()
    PAUSED = auto()
    START = auto()


_STATE_TEXT = {
    SceneState.PLAYING: "Playing",
    SceneState.PAUSED: "Paused",
    SceneState.START: "Ready To Start",
}


class Scene:
    """A set of entities with a default camera and light.

    Subclasses fill the scene in ``on_load`` and may react to the other
    ``on_*`` hooks; callables appended to ``hooks[name]`` are run by the
    matching hook, so a scene can also be filled without subclassing.
    """

    def __init__(self, aspect: float = 1.0):
        self.aspect = float(aspect)
        self._entities: list[Entity] = []
        self._name_counts: dict[str, int] = {}
        self.default_camera: Camera | None = None
        self.directional_light: DirectionalLight | None = None
        self.state = SceneState.START
        self.hooks: dict[str, list[Callable[[Scene], None]]] = {
            name: [] for name in HOOK_NAMES
        }

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    @property
    def main_camera(self) -> Camera:
        """The scene's own camera; only present once the scene is loaded."""
        if self.default_camera is None:
            raise RuntimeError("scene has no camera; load it first")
        return self.default_camera

    def load(self) -> None:
        """Create the default camera and light, fill the scene and make it ready to start."""
        self.default_camera = Camera(self.aspect, 90.0, 0.0)
        self.directional_light = DirectionalLight(
            (0.1, -0.5, -0.45), (1.0, 1.0, 1.0), 3.0,
            far_plane=self.default_camera.far_plane,
        )
        self.on_load()
        self.state = SceneState.START

    def unload(self) -> None:
        """Destroy every entity, then tear the scene down."""
        for entity in self._entities:
            entity.on_destroy()
        self._entities.clear()
        self.on_unload()
        self.destroy()

    def add_entity(self, name: str = DEFAULT_ENTITY_NAME) -> Entity:
        """Add a new entity; repeated names get a running number appended."""
        count = self._name_counts.get(name)
        entity_name = name if count is None else f"{name}{count}"
        self._name_counts[name] = (count or 0) + 1
        entity = Entity(entity_name)
        self._entities.append(entity)
        return entity

    def get_entity(self, name: str) -> Entity | None:
        """Return the first entity with the given name, or None."""
        return next((e for e in self._entities if e.name == name), None)

    def play(self) -> None:
        """Start the scene if it is ready to start, then set it playing."""
        if self.state is SceneState.START:
            self.start()
        self.state = SceneState.PLAYING

    def pause(self) -> None:
        self.state = SceneState.PAUSED

    def reset(self) -> None:
        """Return the scene to its ready-to-start state and reset every entity."""
        self.state = SceneState.START
        self.on_reset()
        for entity in self._entities:
            entity.on_reset()

    def start(self) -> None:
        get_logger().log(TRACE, "Scene Start")
        for entity in self._entities:
            entity.start()
        self.on_start()

    def update(self, delta_time: float) -> None:
        """Advance every entity by one frame while the scene plays."""
        if self.state is not SceneState.PLAYING:
            return
        for entity in self._entities:
            entity.update(delta_time)
        self.on_update()

    def physics_update(self) -> None:
        """Advance every entity by one physics step while the scene plays."""
        if self.state is not SceneState.PLAYING:
            return
        for entity in self._entities:
            entity.physics_update()
        self.on_physics_update()

    def destroy(self) -> None:
        get_logger().log(TRACE, "Scene Destroy")
        self.directional_light = None
        self.on_destroy()

    def describe_state(self) -> str:
        """Human-readable name of the current state."""
        return _STATE_TEXT[self.state]

    def entity_names(self) -> list[str]:
        return [entity.name for entity in self._entities]

    def _run_hooks(self, name: str) -> None:
        for callback in list(self.hooks[name]):
            callback(self)

    def on_load(self) -> None:
        """Populate the scene by running the registered load hooks."""
        self._run_hooks("load")

    def on_unload(self) -> None:
        """Run the unload hooks; called after the entities are removed."""
        self._run_hooks("unload")

    def on_start(self) -> None:
        """Run the start hooks; called after every entity has started."""
        self._run_hooks("start")

    def on_update(self) -> None:
        """Run the update hooks; called after every entity has updated."""
        self._run_hooks("update")

    def on_physics_update(self) -> None:
        """Run the physics hooks; called after every entity's physics step."""
        self._run_hooks("physics_update")

    def on_destroy(self) -> None:
        """Run the destroy hooks; called when the scene is torn down."""
        self._run_hooks("destroy")

    def on_reset(self) -> None:
        """Run the reset hooks; called before the entities are reset."""
        self._run_hooks("reset")