# candle

The core of a layered game engine, written in Python on top of numpy. It
covers the parts that sit between a window and a graphics backend.

## What is in it

- **Events** (`candle.events`): `WindowResizeEvent`, `WindowCloseEvent`,
  `AppTickEvent`, `AppUpdateEvent`, `AppRenderEvent`, the key events
  (`KeyPressedEvent`, `KeyReleasedEvent`, `KeyTypedEvent`) and the mouse
  events (`MouseMovedEvent`, `MouseScrolledEvent`,
  `MouseButtonPressedEvent`, `MouseButtonReleasedEvent`). Each event has an
  `EventType` and `EventCategory` flags, which you can check with
  `is_in_category`. `EventDispatcher.dispatch(event_class, handler)` calls
  the handler only when the event is of that class. If the handler returns
  true, the event is marked `handled`.
- **Input** (`candle.input`): the `Keycode`, `MouseButton` and `MouseMode`
  enums, and the polling functions `is_key_pressed`,
  `is_mouse_button_pressed`, `mouse_position`, `mouse_x`, `mouse_y` and
  `set_mouse_mode`. These read an `InputState`, which you feed with
  `press_key`, `release_key`, `press_button`, `release_button` and
  `move_mouse`. Swap it with `set_backend`.
- **Time** (`candle.timestep`): `Timestep`, which holds `seconds` and
  `milliseconds`, and `get_time()`, the number of seconds since the module
  was loaded.
- **Identifiers** (`candle.ids`): `UUID`, an unsigned 64-bit `int`. It is
  random when you give no value, and it raises `ValueError` when the value is
  out of range.
- **Layers** (`candle.layers`): `Layer` and `LayerStack`. Layers are
  inserted before overlays. Plain iteration runs front to back and
  `reversed()` runs back to front. `clear()`, or leaving a `with` block,
  detaches every layer.
- **Logging** (`candle.log`): `init()` sets up the `CANDLE` and `APP`
  loggers, which write to standard output at a custom `TRACE` level.
  `core_logger()` and `client_logger()` return them, or `None` before
  `init()`.
- **Maths** (`candle.mathutil`): 4x4 matrices (`identity`, `perspective`,
  `ortho`, `translate`, `rotate`, `scale`, `look_at`) and `(w, x, y, z)`
  quaternions (`quat_angle_axis`, `quat_multiply`, `quat_rotate`,
  `quat_look_at`, `quat_from_euler`, `quat_to_mat4`).
- **Cameras** (`candle.camera`, `candle.controllers`): a perspective
  `Camera` and an orthographic `Camera2D`, each exposing projection, view and
  view-projection matrices.
  - `Camera2DController` moves with W/A/S/D. It zooms on `MouseScrolledEvent`
    and refits its bounds on `WindowResizeEvent`.
  - `CameraController` is a fly camera. While the right mouse button is held,
    it moves with W/A/S/D/Q/E and turns with the mouse, with pitch clamped to
    [-90, 89.5] degrees. Scrolling changes its speed within [0.1, 10].
- **Vertex layouts** (`candle.buffer`): `ShaderDataType` and
  `shader_data_type_size`, plus `BufferElement` and `BufferLayout`. A layout
  packs element offsets back to back and computes the `stride`.
- **Framebuffer specifications** (`candle.framebuffer`):
  - `FramebufferTextureFormat` and `FramebufferTextureSpecification`.
  - `FramebufferSpecification`, which splits its attachments into colour and
    depth, allows at most 4 colour attachments, and ignores a `resize` to a
    size of 0 or above 8192 (it logs a warning).
  - `is_depth_format`.
- **Shaders** (`candle.shader`):
  - `preprocess()` splits a combined source into `#type vertex` and
    `#type fragment` (or `pixel`) sections, and raises `ShaderSyntaxError`
    on malformed input.
  - `read_source`, `shader_name_from_path` and `shader_type_from_string` are
    helpers for reading files and naming shaders.
  - `Shader` holds the stage sources and the uniform values set on it.
  - `ShaderLibrary` registers shaders under unique names: `add`, `load`,
    `get` and `exists`.
- **Scenes** (`candle.scene`, `candle.components`):
  - `Scene.create_entity` gives each new `Entity` an `IDComponent`, a
    `TransformComponent` and a `TagComponent`. An empty name becomes
    `"Entity"`.
  - You can look entities up with `get_entity_by_name`, which returns a null,
    falsy `Entity` when nothing matches, or with `get_entity_by_uuid`. Remove
    them with `destroy_entity`.
  - `Entity` methods: `add_component`, `add_or_replace_component`,
    `get_component`, `has_component`, `remove_component`, `uuid()` and
    `name()`.
  - There is also a `CameraComponent`.
- **Renderer front end** (`candle.renderer`):
  - `RenderCommand` forwards calls to a `RendererAPI` backend, which you
    choose with `RenderCommand.set_backend`.
  - `Renderer.begin_scene` stores a camera's view-projection.
    `Renderer.submit` writes `u_ViewProjection` and `u_Model` into the
    shader's uniforms and issues a draw.
  - `Renderer.on_window_resized` sets the viewport.
- **Application** (`candle.application`):
  - `Application` ties a `Window`, a `LayerStack` and the renderer together,
    and `run()` loops until `close()`.
  - A `WindowCloseEvent` stops the loop. A zero-sized `WindowResizeEvent`
    pauses layer updates.
  - Only one application may exist at a time. `Application.get()` returns it,
    and `shutdown()` (or leaving a `with` block) releases it.
- **Profiling** (`candle.instrumentor`):
  - `Instrumentor.get()` returns the shared instrumentor. Its `begin_session`
    and `end_session` open and close a Chrome trace-event JSON file.
  - `InstrumentationTimer` records one scope, either until `stop()` or until
    its `with` block ends.
  - `cleanup_output_string` tidies names before they are written.

## What it does not do

Nothing here opens a real window or draws pixels.

- The base `Window` has no native surface. It counts frames in `on_update`
  and passes events given to `emit` on to its callback.
- The base `RendererAPI` only records what it is told: the clear colour, the
  number of clears, the viewport and its draw calls.
- Shaders are not compiled. `Shader` only keeps source text and uniform
  values.
- There are no textures, no image loading, no vertex array objects and no
  immediate-mode UI.

To get real output, plug in your own `Window` and `RendererAPI` subclasses.

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

Events and layers:

```python
from candle.events import EventDispatcher, WindowResizeEvent
from candle.layers import Layer, LayerStack


class Editor(Layer):
    def on_event(self, event):
        EventDispatcher(event).dispatch(WindowResizeEvent, self._resized)

    def _resized(self, event):
        print("resized to", event.width, event.height)
        return False


stack = LayerStack()
stack.push_layer(Editor("Editor"))
for layer in reversed(stack):
    layer.on_event(WindowResizeEvent(800, 600))
```

A main loop that stops itself after three frames:

```python
from candle.application import Application
from candle.layers import Layer


class Counter(Layer):
    def __init__(self):
        super().__init__("Counter")
        self.frames = 0

    def on_update(self, ts):
        self.frames += 1
        if self.frames == 3:
            Application.get().close()


with Application("Demo") as app:
    app.push_layer(Counter())
    app.run()
```

Splitting a combined shader source:

```python
from candle.shader import ShaderType, preprocess

sources = preprocess("#type vertex\nvoid main() {}\n#type fragment\nvoid main() {}\n")
print(sources[ShaderType.VERTEX])
```

Scenes:

```python
from candle.scene import Scene

scene = Scene()
player = scene.create_entity("Player")
assert scene.get_entity_by_name("Player") == player
assert scene.get_entity_by_uuid(player.uuid()) == player
```