# quark

Pure-Python building blocks for a small game engine. The package has no
runtime dependencies.

## What is inside

- `quark.animation`: interpolation helpers (`lerp`, `nlerp`, `slerp`,
  `smoothstep`, `berp`, `lerp_transform`) and frame timers
  (`AnimationFrames`, `AnimationFrameTimes`, `ComplexAnimationFrames`, which
  report `FrameStep` and `StateFrameStep` tuples).
- `quark.culling`: `FrustumPlanes`, `plane_point_distance` and
  `is_sphere_visible` for sphere-against-frustum visibility tests.
- `quark.reflection`: `ReflectionParser` and `parse_struct_dump`, which turn
  the lines of a struct dump into a `ReflectionInfo` holding
  `ReflectionFieldInfo` entries.
- `quark.arena`: `Arena`, `TempStack` (also a context manager),
  `begin_temp_stack`, `ArenaPool` and `LinearAllocationTracker` for bump
  allocation, with `align_forward` and `is_power_of_two`. Failures raise
  `AllocationError`.
- `quark.assets`: `AssetServer`, which stores assets per Python type, keyed
  by a 32-bit name hash (`hash_name`). Missing assets raise
  `AssetNotFoundError`.
- `quark.text`: `StringBuilder`, `format_value`, the logging helpers
  `log_message`, `log_warning`, `log_error` and `emit`, and `panic`, which
  raises `PanicError`.
- `quark.files`: `read_entire_file`, `file_size`, `file_exists`,
  `path_exists` and `open_file_or_panic`.
- `quark.input`: input codes (`InputType`, `KeyCode`, `MouseButtonCode`,
  `GamepadButtonCode`, `MouseAxisCode`, `GamepadAxisCode`, `MouseMode`),
  `make_raw_input_id` / `split_input_id`, and `InputDevice`, which tracks
  pressed inputs, mouse movement and scrolling.
- `quark.materials`: `MaterialRegistry`, `MaterialInfo` and `MaterialBatch`,
  which hold material instances and queue drawables per material type.
  Overfilling a batch raises `BatchOverflowError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Interpolation works component-wise on tuples:

```python
from quark.animation import lerp, smoothstep

lerp((0.0, 0.0), (10.0, 4.0), 0.25)   # (2.5, 1.0)
smoothstep(0.5)                       # 0.5
```

Bump allocation in an arena, rolled back with a temp stack:

```python
from quark.arena import Arena, begin_temp_stack

arena = Arena()
offset = arena.copy(b"hello")
arena.read(offset, 5)          # b'hello'

with begin_temp_stack(arena):
    arena.push(64)
arena.position                 # 8, restored on exit
```

Polled input:

```python
from quark.input import InputDevice, KeyCode, MouseAxisCode, MouseMode

device = InputDevice(MouseMode.CAPTURED)
device.press(KeyCode.W)
device.is_input_down(KeyCode.W)            # True

device.mouse_callback(10.0, 0.0)
device.update()
device.mouse_axis(MouseAxisCode.MOVE_LEFT) # 10.0
```

Assets by type and name:

```python
from quark.assets import AssetServer

server = AssetServer()
server.add("greeting", "hello")
server.get(str, "greeting")    # 'hello'
```

## What this package does not do

There is no window, no renderer and no audio: `InputDevice` is fed by
calling `press`, `release`, `mouse_callback` and `scroll_callback` yourself,
and gamepad queries raise `PanicError`. There is no entity component system
and no global resource registry; `MaterialRegistry` only keeps the data for
draw batches and does not draw anything.