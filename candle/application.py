"""The application: window, layer stack and main loop."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from candle.events import Event, EventDispatcher, WindowCloseEvent, WindowResizeEvent
from candle.layers import Layer, LayerStack
from candle.renderer import Renderer
from candle.timestep import Timestep, get_time

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    """Title and size of a window to create."""

    title: str = "Candle Engine"
    width: int = 1280
    height: int = 720


class Window:
    """A desktop window; this base has no native surface and only relays events."""

    def __init__(self, props: WindowProps | None = None) -> None:
        props = props if props is not None else WindowProps()
        self.title = props.title
        self._width = props.width
        self._height = props.height
        self._callback: EventCallback | None = None
        self.vsync = True
        self.frame_count = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    def on_update(self) -> None:
        """Present the frame; this base counts the frames presented."""
        self.frame_count += 1

    def emit(self, event: Event) -> None:
        """Deliver a window-system event, tracking size changes."""
        if isinstance(event, WindowResizeEvent):
            self._width = event.width
            self._height = event.height
        if self._callback is not None:
            self._callback(event)


class Application:
    """The single running application."""

    _instance: ClassVar[Application | None] = None

    def __init__(
        self,
        name: str = "Candle App",
        window: Window | None = None,
        clock: Callable[[], float] = get_time,
    ) -> None:
        if Application._instance is not None:
            raise RuntimeError("Application already exists!")
        Application._instance = self

        self.name = name
        self.window = window if window is not None else Window(WindowProps(name))
        self.window.set_event_callback(self.on_event)
        Renderer.init()

        self.layer_stack = LayerStack()
        self._clock = clock
        self._running = True
        self._minimized = False
        self._last_frame_time = 0.0

    @classmethod
    def get(cls) -> Application:
        if cls._instance is None:
            raise RuntimeError("no application is running")
        return cls._instance

    @property
    def running(self) -> bool:
        return self._running

    @property
    def minimized(self) -> bool:
        return self._minimized

    def on_event(self, event: Event) -> None:
        """Handle window events, then offer the event to layers top-down."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowCloseEvent, self._on_window_close)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resize)
        for layer in reversed(self.layer_stack):
            if event.handled:
                break
            layer.on_event(event)

    def run(self) -> None:
        """Run frames until :meth:`close` is called."""
        while self._running:
            now = self._clock()
            ts = Timestep(now - self._last_frame_time)
            self._last_frame_time = now

            if not self._minimized:
                for layer in self.layer_stack:
                    layer.on_update(ts)

            for layer in self.layer_stack:
                layer.on_imgui_render()

            self.window.on_update()

    def close(self) -> None:
        self._running = False

    def push_layer(self, layer: Layer) -> None:
        self.layer_stack.push_layer(layer)
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        self.layer_stack.push_overlay(overlay)
        overlay.on_attach()

    def shutdown(self) -> None:
        """Shut the renderer down, detach every layer and release the instance."""
        Renderer.shutdown()
        self.layer_stack.clear()
        if Application._instance is self:
            Application._instance = None

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def _on_window_resize(self, event: WindowResizeEvent) -> bool:
        if event.width == 0 or event.height == 0:
            self._minimized = True
            return False
        self._minimized = False
        Renderer.on_window_resized(event.width, event.height)
        return False