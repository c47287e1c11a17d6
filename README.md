# wirecraft

wirecraft is a small software 3D engine that draws everything as wireframe
lines, using pygame for the window, input and line drawing. It has:

- a free-flying camera. Hold the right mouse button and drag to look around,
  use W/A/S/D to move, and Space or Left Shift to move up or down.
- a player ball that stands on box-shaped platforms and falls under gravity.
  The player can jump, and an orbiting follow camera can track it.
- builders for wireframe cubes, spheres and floor grids.
- an optional text overlay with the camera and player coordinates.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the demo

```
wirecraft
```

The demo opens an 800×600 window with a large floor and a raised platform,
spawns the player on the floor and shows the view from the player's
position. It runs until the window is closed.

```
wirecraft --frames 300
```

stops after the given number of frames (0, the default, means no limit).

| Key | Action |
| --- | --- |
| W / S | move forward / back |
| A / D | strafe |
| Q / E | turn the player |
| Space | jump |
| R | put the player at (2, 3, 4) |
| F | leave the follow camera for the free camera |
| G | remove the player |
| H | respawn the player at its last spawn point |
| right mouse button, drag | turn the view |

## Using the library

```python
from wirecraft.engine import Engine

engine = Engine()
engine.create_window(800, 600, "my scene", True, 60)
engine.set_debug_coords_enabled(True)

scene = engine.scene
scene.add_ground_box(0.0, -0.5, 0.0, 30.0, 0.5, 30.0)
scene.create_player(0.0, 0.45, 0.0, 0.0, 1.0, 0.0)
scene.set_follow_camera_enabled(True)

while engine.is_open():
    dt = engine.tick()
    engine.poll_events()
    if not engine.is_open():
        break
    engine.update_freecam(dt, 60.0, 0.01)
    scene.update_player(dt)

    engine.clear_screen()
    engine.draw_grid3d(30.0, 1.0)
    engine.draw_cube_wire(0.0, 1.0, 0.0, 1.0, 0.0)
    engine.update_screen()
```

The drawing and input methods of `Engine` raise `RuntimeError` once the
window has been closed, so check `is_open()` after `poll_events()`.

### Modules

- `wirecraft.math3d`
  - `Vec3`, an immutable vector with `+`, `-` and scalar `*`
  - `dot`, `cross` and `normalize` (which raises `ValueError` for a zero vector)
  - a `Camera` record
- `wirecraft.geometry`
  - perspective `project`
  - `rotate_x` and `rotate_y`
  - `clip_to_near_plane`, which returns the clipped segment or `None`
  - the yaw direction helpers `yaw_forward` and `yaw_right`
- `wirecraft.input`
  - the `InputKey` and `MouseButton` enums
  - an `InputState` snapshot of held keys, held buttons and cursor position
  - the mappings `to_pygame_key` and `to_pygame_button`; arrow and numpad
    keys have no binding and never read as pressed
- `wirecraft.scene`
  - `Scene`, the window-independent state: camera, player, spawn point,
    follow camera and ground boxes
  - player movement, jumping and gravity; free-camera and follow-camera
    control from an `InputState`
  - `to_view` and `debug_text`
- `wirecraft.wireframe`
  - segment builders: `cube_segments`, `sphere_segments` and `grid_segments`
    (the last raises `ValueError` for a non-positive step)
  - `project_segment`, which maps a world segment to screen coordinates
    through a scene's camera
- `wirecraft.engine`
  - `Engine`, which owns the pygame window, the frame clock and a `Scene`
- `wirecraft.app`
  - the demo: `build_demo`, `handle_input` and `main`

### Behaviour notes

- Points are clipped against a near plane at `z = 1` in camera space and
  projected with a fixed focal factor of 400.
- The frame time given to the player physics and the free camera is capped
  at 0.05 s.
- The player lands on the highest ground-box top under its X/Z position; if
  no box is under it, it lands on `y = 0`.
- The follow camera's pitch stays between -0.7 and 1.2 radians; the free
  camera's pitch stays within ±1.55 radians.
- The coordinate overlay uses a DejaVu font from the usual Linux font
  directories; if none is found, the overlay is not drawn.

## What it does not do

wirecraft only draws lines: there are no filled faces, lighting, textures
or model loading. Ground boxes are only walkable tops; they do not block
the player sideways, and there is no other collision.