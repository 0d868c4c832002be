# leiengine

The core of a small 3D game engine: cameras, entities and components,
scenes, character movement and a height-mapped ground plane. Matrices and
vectors are NumPy arrays. No window, renderer or physics engine is attached.
The caller drives everything by calling the update methods with a frame
time and a set of held keys.

## Modules

- `leiengine.log`
  - `init_logging()` sets up the `"LEI"` logger at trace level.
  - `get_logger()` returns that logger.
  - `format_mat4(mat)` and `format_vec3(name, vec)` render matrices and vectors as text.
- `leiengine.camera`
  - `look_at(eye, center, up)` and `perspective(fov_y_degrees, aspect, near, far)` build view and projection matrices.
  - `Camera` has yaw and pitch, free mouse-look through `mouse_moved(x, y)` with pitch clamped to ±89°, and `view_matrix()`, `projection_matrix()` and `set_clip_planes(near, far)`.
  - `LookMode` chooses whether the camera follows the mouse (`FREE`) or not (`FIXED`).
  - `Key` names the keys the engine reacts to.
- `leiengine.fly_camera`
  - `FlyCamera` flies with no clipping. W, A, S and D move it, E moves it up and Q down. Left shift multiplies the speed by ten, up to 200.
  - Call `poll_movement(keys, delta_time)` once per frame.
  - Set `use_minecraft_controls` to keep forward and back movement level.
- `leiengine.entity`
  - `Entity` holds a name, a `Transform` (position, yaw in degrees, scale) and a list of `Component`s.
  - `add_component(SomeComponent)` creates and attaches a component. `get_component(SomeComponent)` returns the first component of that type, or `None`.
  - Each entity builds `translation_matrix()`, `rotation_matrix()`, `scale_matrix()` and `model_matrix()`.
  - Lifecycle calls (`start`, `update`, `physics_update`, `render`, `on_reset`, `on_destroy`, `on_editor_update`) are passed on to every component.
- `leiengine.components`
  - `TimerComponent` runs an event once a target time has passed after `start_timer()`.
  - `ColorSource` stores a radius, a falloff and an active flag.
  - `DirectionalLight` stores a normalised direction and shadow cascade split distances.
  - `FollowCameraController` keeps a camera at an offset from its entity and turns the entity to the camera's yaw.
- `leiengine.triggers`
  - `TriggerCollider` runs a contact test each physics step. It calls `on_trigger_enter`, `on_trigger_stay` and `on_trigger_exit` as objects arrive, remain and leave.
  - The world you pass to `init(trigger, world, ignored_colliders)` must provide `contact_test(obj, contacts)`. That method calls `contacts.add_contact(other)` for each overlapping object. `TriggerContacts` skips ignored objects.
  - `LevelSwitchCollider` logs a trace message while something stays in it.
- `leiengine.scene`
  - `Scene` has the states `SceneState.START`, `PLAYING` and `PAUSED`, driven by `play()`, `pause()` and `reset()`.
  - `load()` creates a default camera and light, then runs `on_load()`.
  - `add_entity(name)` appends a running number when a name repeats, so "Box", "Box1", "Box2".
  - Add behaviour by subclassing and overriding the `on_*` hooks, or by appending callables to `scene.hooks["load"]` and the other hook lists.
- `leiengine.scene_manager`
  - `SceneManager(constructors)` maps scene names to factories.
  - `build_scenes(lines)` and `build_scenes_from_file(path)` create one scene per non-blank line. An unknown name raises `KeyError`. A missing file leaves the list unchanged.
  - `set_scene(index_or_name)` requests a switch. `load_next_scene()` unloads the active scene and loads the requested one.
- `leiengine.scene_view`
  - `SceneView` shows a scene through the editor fly camera (`ViewMode.SCENE`) or through the scene's own camera (`ViewMode.GAME`).
  - `process_key(scene, Key.P)` toggles play and pause. `Key.R` resets the scene.
- `leiengine.movement`
  - Quake-style character movement: `wish_direction`, `accelerate`, `ground_acceleration` (friction applies only when there is no input), `air_acceleration` and `step_velocity` (which includes jumping).
  - All of these are tuned by `MovementSettings`.
  - `GroundedCheck` decides from contact normals whether a ground probe is touching the ground.
- `leiengine.terrain`
  - `load_elevation(path)` reads height bytes from an image, flipped vertically.
  - `ground_plane_vertices(elevation, dim)` builds `(x, height, z, u, v)` vertex rows.
  - `ground_plane_indices(dim)` builds the triangle indices, two triangles per grid cell.

## Install

From a checkout of the project:

```
pip install .
```

## Example

```python
from leiengine.scene import Scene
from leiengine.components import TimerComponent

scene = Scene(aspect=16 / 9)
scene.load()

player = scene.add_entity("Player")
timer = player.add_component(TimerComponent)
timer.set_target_time(1.0)
timer.on_timer_end(lambda: print("done"))
timer.start_timer()

scene.play()
for _ in range(120):
    scene.update(1 / 60)
```

Movement is one pure function per physics step:

```python
from leiengine.camera import Key
from leiengine.movement import MovementSettings, step_velocity

settings = MovementSettings()
velocity = step_velocity(settings, (0.0, 0.0, 0.0), {Key.W}, 0.0, True, 0.01)
```

## What it does not do

- It opens no window, reads no input devices, and draws nothing. There is no renderer, skybox or editor interface.
- It plays no audio.
- It has no collision or rigid-body simulation. `TriggerCollider` and `GroundedCheck` only interpret contacts that your own world reports.
- The terrain functions return arrays and do not upload anything to a GPU.
- There is no command to start a game. You write the frame loop yourself.

## Tests

```
pip install ".[test]"
pytest
```