"""Registry of the game's scenes and switching between them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from leiengine.log import get_logger
from leiengine.scene import Scene

BUILD_CONFIG_PATH = "data/config/Build.config"


class SceneManager:
    """Builds the scene list from a build configuration and loads scenes on request.

    A scene switch is requested with ``set_scene`` and carried out by
    ``load_next_scene``, so the frame loop can choose when loading happens.
    """

    def __init__(self, constructors: Mapping[str, Callable[[], Scene]] | None = None):
        self.constructors = dict(constructors or {})
        self._scenes: list[tuple[str, Scene]] = []
        self._active: Scene | None = None
        self._next: Scene | None = None
        self.needs_scene_switch = False

    @property
    def scenes(self) -> tuple[tuple[str, Scene], ...]:
        return tuple(self._scenes)

    @property
    def active_scene(self) -> Scene:
        if self._active is None:
            raise RuntimeError("there is no active scene")
        return self._active

    def build_scenes(self, lines: Iterable[str]) -> None:
        """Create one scene for each non-blank line naming a known scene."""
        for line in lines:
            name = line.strip()
            if not name:
                continue
            try:
                constructor = self.constructors[name]
            except KeyError:
                raise KeyError(f"unknown scene: {name!r}") from None
            get_logger().info(name)
            self._scenes.append((name, constructor()))

    def build_scenes_from_file(self, path: str | Path = BUILD_CONFIG_PATH) -> None:
        """Read scene names, one per line, from a build configuration file.

        A missing file leaves the scene list unchanged.
        """
        get_logger().info("LOADING SCENES")
        try:
            with open(path, encoding="utf-8") as stream:
                self.build_scenes(stream)
        except FileNotFoundError:
            get_logger().warning("Scene build file not found: %s", path)

    def has_scenes(self) -> bool:
        return bool(self._scenes)

    def set_scene(self, scene: int | str) -> None:
        """Request a switch to the scene at an index or with a name."""
        if isinstance(scene, int):
            if not 0 <= scene < len(self._scenes):
                raise IndexError("Tried to load scene with out of bounds index.")
            self._set_next(self._scenes[scene][1])
            return
        for name, candidate in self._scenes:
            if name == scene:
                self._set_next(candidate)
                return
        raise KeyError(f"DID NOT FIND SCENE: {scene}")

    def scene_names(self) -> list[str]:
        return [name for name, _ in self._scenes]

    def load_next_scene(self) -> None:
        """Unload the active scene and load the requested one."""
        if self._next is None:
            raise RuntimeError("Cannot load next scene because a scene was not set.")
        if self._active is not None:
            self._active.unload()
        self._active = self._next
        self._active.load()
        self.needs_scene_switch = False

    def _set_next(self, scene: Scene) -> None:
        self._next = scene
        self.needs_scene_switch = True