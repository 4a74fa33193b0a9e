# planar2d

A small 2D game engine. It opens an OpenGL 3.3 window, draws a blue player
rectangle and moves it with keys bound in a JSON file. A camera builds the
view-projection matrix; it can stay fixed, follow a target or pan when the
mouse nears a window edge, and scrolling zooms in and out.

## Installing

```
pip install .
```

## Running

```
planar2d
```

The command takes no options besides `--help`. It reads, from the current
directory:

- `KeyBindings.json`, the key bindings (see below);
- `Shaders/shader.vert` and `Shaders/shader.frag`, the GLSL vertex and
  fragment shaders. The renderer sets the uniforms `model` and `projection`
  (4x4 matrices) and `color` (a vec4), and feeds the quad's corners as a
  2-component attribute at location 0.

Press Escape, or close the window, to stop. The engine's camera is fixed at
the origin; the scroll wheel zooms between the configured limits.

## Key bindings

The bindings file maps sections to actions, and each action to a list of key
codes:

```json
{
  "MOVEMENT": {
    "MOVE_UP": [87, 265],
    "MOVE_DOWN": [83, 264],
    "MOVE_LEFT": [65, 263],
    "MOVE_RIGHT": [68, 262]
  }
}
```

Letters use their upper-case character code (`W` is 87), printable keys below
128 use their character code, and special keys use these codes: Escape 256,
Return 257, Tab 258, Backspace 259, Insert 260, Delete 261, Right 262, Left 263,
Down 264, Up 265, Page Up 266, Page Down 267, Home 268, End 269, F1-F12
290-301, left Shift/Ctrl/Alt 340-342, right Shift/Ctrl/Alt 344-346.

The only section is `MOVEMENT`. The actions are `MOVE_UP`, `MOVE_DOWN`,
`MOVE_LEFT` and `MOVE_RIGHT`. Any other name raises
`planar2d.bindings.UnknownSectionError` or `UnknownActionError`. If an action is
listed twice in a section, the first list wins.

## Using the pieces

The parts that do not draw work without a window:

```python
from planar2d.input import Input, KeyAction
from planar2d.bindings import InputActionMapper, KeySection, Action, parse_bindings
from planar2d.shapes import Player
from planar2d.controller import PlayerController

bindings = parse_bindings({"MOVEMENT": {"MOVE_RIGHT": [68]}})
inp = Input()
mapper = InputActionMapper(inp, bindings)

player = Player(0, 0, 100, 100)
controller = PlayerController(mapper)
controller.control(player)

inp.handle_key(68, KeyAction.PRESS)
controller.update(0.5)
print(player.position)   # [100. 0.]: moved right by 0.5 * 200
```

- `planar2d.input.Input` tracks held keys, keys pressed since the last
  `reset_key_pressed()`, the cursor (`mouse_x`, `mouse_y`, `x_change`,
  `y_change`) and `scroll_y`. `key_pressed` and `key_held` raise `ValueError`
  for a key outside 0-1023.
- `planar2d.bindings` provides `load_bindings(path)` and `parse_bindings(data)`.
  `InputActionMapper(input)` without bindings loads `KeyBindings.json`;
  `keys`, `action_down` and `action_pressed` answer queries, and an action with
  no binding raises `KeyError`.
- `planar2d.controller.PlayerController.update(dt)` moves the controlled
  player; up wins over down and left over right. It raises `RuntimeError` if
  no player is under control.
- `planar2d.shapes` has `Rectangle` (position, size, colour, rotation in
  degrees, pivot), `GameObject` and `Player` (speed 200 units per second).
  `Rectangle.model_matrix()` maps the unit square onto the rectangle.
- `planar2d.camera.Camera2D(move_state, zoom_state)` keeps `view` up to date.
  With `CameraMoveState.FOLLOW` it centres on the target given to
  `set_target`, and raises `RuntimeError` in `update` if there is none. With
  `CameraMoveState.MOUSE` it pans at 300 units per second while the cursor is
  within 150 pixels of an edge. `calculate_zoom(+1 / -1)` steps the zoom by 0.2.
- `planar2d.transform` provides the 4x4 matrix helpers `identity`, `ortho`,
  `translate`, `rotate_z` and `scale`.
- `planar2d.engine.Engine` can be built from these pieces; `update(dt)` advances
  one frame without a window, and `run()` opens the window and loops.
- `planar2d.logger.log(log_type, message)` prints coloured, timestamped lines.

Sizes, speeds and zoom limits live in `planar2d.config`.

## What is not included

The package ships no shader sources and no `KeyBindings.json`; both must be
supplied in the working directory before `planar2d` will start. There is no
scene, level or asset loading: the running engine draws a single player
rectangle.

## Tests

```
pip install .[test]
pytest
```