"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from candle.events import Event
    from candle.timestep import Timestep


class Layer:
    """A unit of per-frame logic; subclasses override the hooks they need.

    The default hooks only record what they were given, so a plain layer
    reports whether it is attached and what it last saw.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_timestep: Timestep | None = None
        self.last_event: Event | None = None
        self.imgui_frames = 0

    def on_attach(self) -> None:
        self.attached = True

    def on_detach(self) -> None:
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        self.last_timestep = ts

    def on_imgui_render(self) -> None:
        self.imgui_frames += 1

    def on_event(self, event: Event) -> None:
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers in front, overlays behind them, iterated front to back."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def _find(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        index = self._find(layer)
        if index is not None:
            layer.on_detach()
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        index = self._find(overlay)
        if index is not None:
            overlay.on_detach()
            del self._layers[index]

    def clear(self) -> None:
        """Detach every layer in order and empty the stack."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()