# doomview

The engine-side core of a first-person Doom I/II level viewer, in plain Python with no
dependencies outside the standard library.

## What is in the package

- `doomview.vector`: immutable vectors `Vec2`, `Vec3`, `Vec4` (all `Vector`s) with
  addition, subtraction, scaling, `dot`, `norm`, `squared_norm`, `normalized` and
  `is_zero`; `Vec2.cross` (a scalar), `Vec2.angle`, `Vec2.normal`, `Vec2.swapped`, and
  `Vec3.cross`.
- `doomview.line`: `Line2`, an oriented line in the plane, with `signed_distance`,
  `intersect_offset`, `intersect_point`, `at_offset` and `inverted_halfspaces`.
- `doomview.matrix`: `Mat4`, a column-major 4x4 matrix with `identity`, `perspective`,
  `axis_rotation`, `euler_rotation` and `translation` constructors, multiplication,
  addition, subtraction, `transposed`, `get` and `approx_eq`.
- `doomview.camera`: `Camera`, holding position, yaw, pitch and roll plus a perspective
  projection; `modelview()` is recomputed only after the view changes, and
  `update_perspective` changes only the parameters that are not `None`.
- `doomview.sphere`: `Sphere.sweep_triangle`, which sweeps a sphere along a velocity
  against a one-sided triangle and returns the first `ContactInfo` (time as a fraction of
  the sweep, and the contact normal) or `None`.
- `doomview.world`: `World`, a collision volume built through `visit_bsp_root`,
  `visit_bsp_node`, `visit_bsp_leaf`, `visit_bsp_leaf_end`, `visit_bsp_node_end` and the
  floor, ceiling, wall and sky polygon visitors; `sweep_sphere` returns the earliest
  contact across the BSP tree. Only blocking wall quads become collision geometry.
- `doomview.vertex`: `Bounds` of a texture in an atlas, the vertex records
  `StaticVertex`, `SpriteVertex`, `SkyVertex`, and the builders `FlatBufferBuilder`,
  `WallBufferBuilder`, `DecorBufferBuilder` and `SkyBufferBuilder` whose `push` methods
  chain and collect vertices.
- `doomview.controls`: `GameController`, which takes a batch of events (`QuitEvent`,
  `KeyDown`, `KeyUp`, `MouseMotion`) per `update` and answers `poll_gesture` for
  `KeyHold`, `KeyTrigger`, `AnyOf`, `AllOf`, `QuitTrigger` and `NoGesture`, and
  `poll_analog2d` for `MouseLook`, `GestureAxes` and `NoAnalog`.
- `doomview.cli`: `parse_run_mode`, which turns command-line arguments (without the
  program name) into `DisplayHelp`, `Check`, `ListLevelNames` or `Play(GameConfig)`, and
  `parse_window_size` for `WIDTHxHEIGHT` strings.

## A quick look

```python
from doomview.vector import Vec3
from doomview.matrix import Mat4
from doomview.camera import Camera

camera = Camera(65.0, 16 / 9, 0.01, 100.0)
camera.move_by(Vec3(1.0, 0.5, -2.0))
view = camera.modelview()
projection = Mat4.perspective(65.0, 16 / 9, 0.01, 100.0)
```

Sweeping a sphere against a triangle reports the first contact, if any:

```python
from doomview.vector import Vec3
from doomview.sphere import Sphere

floor = (Vec3(-1.0, 0.0, -1.0), Vec3(1.0, 0.0, -1.0), Vec3(0.0, 0.0, 1.0))
ball = Sphere(Vec3(0.0, 1.0, 0.0), 0.25)
contact = ball.sweep_triangle(floor, Vec3(0.0, 1.0, 0.0), Vec3(0.0, -2.0, 0.0))
if contact is not None:
    print(contact.time, contact.normal)
```

Command-line options:

```python
from doomview.cli import parse_run_mode, parse_window_size

assert parse_window_size("1280x720") == (1280, 720)
mode = parse_run_mode(["--iwad", "doom2.wad", "-r", "640x480", "-l", "3"])
print(mode.config.width, mode.config.level_index)
```

The options are `-i/--iwad` (default `doom1.wad`), `-m/--metadata` (default
`doom.toml`), `-r/--resolution` (default `1280x720`), `-l/--level` (default `0`),
`-f/--fov` (default `64`), `--check`, `--list-levels` and `-h/--help`. Malformed options
raise `doomview.errors.GeneralError` with a message describing the problem.

## What it does not do

The package does not read WAD files or metadata, open a window, draw anything, or read
a keyboard or mouse: vertex builders only collect vertex records, and the controller
works on the events it is given. There is no command to run; `parse_run_mode` decides
what a program should do but nothing here carries it out.

## Running the tests

Install the `test` extra and run pytest from the project root.