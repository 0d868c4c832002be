"""Editor view into a scene: choose the viewing camera and drive play state."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from leiengine.camera import Camera, Key
from leiengine.fly_camera import FlyCamera
from leiengine.scene import Scene


class ViewMode(Enum):
    """Whether the scene is seen through the editor's fly camera or the game's camera."""

    SCENE = auto()
    GAME = auto()


class SceneView:
    """Chooses which camera views a scene and toggles between editing and playing."""

    def __init__(self, fly_camera: FlyCamera):
        self.fly_camera = fly_camera
        self.mode = ViewMode.SCENE

    def active_camera(self, scene: Scene) -> Camera:
        if self.mode is ViewMode.SCENE:
            return self.fly_camera
        return scene.main_camera

    def update(self, scene: Scene, keys: Iterable[Key], delta_time: float) -> None:
        """Let the active camera react to the held keys."""
        self.active_camera(scene).poll_movement(keys, delta_time)

    def process_key(self, scene: Scene, key: Key) -> None:
        """Handle a key press: R resets the scene, P toggles play and pause."""
        if key is Key.R:
            self.reset(scene)
        elif key is Key.P:
            self.toggle_play_pause(scene)

    def toggle_play_pause(self, scene: Scene) -> None:
        if self.mode is ViewMode.GAME:
            self.mode = ViewMode.SCENE
            scene.pause()
        else:
            self.mode = ViewMode.GAME
            scene.play()

    def reset(self, scene: Scene) -> None:
        self.mode = ViewMode.SCENE
        scene.reset()