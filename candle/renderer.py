"""Render command front end, the backend interface and the scene renderer."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

import numpy as np

from candle import mathutil as mu
from candle.shader import Shader


class API(Enum):
    """Graphics interface a backend talks to."""

    NONE = 0
    OPENGL = 1


class RendererAPI:
    """Backend receiving render commands; this base keeps the state it is given."""

    api: ClassVar[API] = API.OPENGL

    def __init__(self) -> None:
        self.initialized = False
        self.clear_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
        self.clear_count = 0
        self.viewport: tuple[int, int, int, int] = (0, 0, 0, 0)
        self.draw_calls: list[Any] = []

    @classmethod
    def get_api(cls) -> API:
        return cls.api

    def init(self) -> None:
        self.initialized = True

    def set_clear_color(self, color) -> None:
        values = tuple(float(component) for component in color)
        if len(values) != 4:
            raise ValueError(f"clear color needs 4 components, got {len(values)}")
        self.clear_color = values  # type: ignore[assignment]

    def clear(self) -> None:
        self.clear_count += 1

    def draw_indexed(self, vertex_array: Any) -> None:
        self.draw_calls.append(vertex_array)

    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        self.viewport = (int(x), int(y), int(width), int(height))


class RenderCommand:
    """Forwards render commands to the active backend."""

    _backend: ClassVar[RendererAPI] = RendererAPI()

    @classmethod
    def set_backend(cls, backend: RendererAPI) -> RendererAPI:
        """Make ``backend`` active; return the previous one."""
        previous, cls._backend = cls._backend, backend
        return previous

    @classmethod
    def init(cls) -> None:
        cls._backend.init()

    @classmethod
    def set_clear_color(cls, color) -> None:
        cls._backend.set_clear_color(color)

    @classmethod
    def clear(cls) -> None:
        cls._backend.clear()

    @classmethod
    def draw_indexed(cls, vertex_array: Any) -> None:
        cls._backend.draw_indexed(vertex_array)

    @classmethod
    def set_viewport(cls, x: int, y: int, width: int, height: int) -> None:
        cls._backend.set_viewport(x, y, width, height)


class Renderer:
    """Draws submitted geometry with the view-projection of the current scene."""

    _view_projection: ClassVar[np.ndarray] = mu.identity()
    _in_scene: ClassVar[bool] = False

    @classmethod
    def init(cls) -> None:
        RenderCommand.init()

    @classmethod
    def shutdown(cls) -> None:
        cls._view_projection = mu.identity()
        cls._in_scene = False

    @classmethod
    def in_scene(cls) -> bool:
        """Whether a scene has begun and not yet ended."""
        return cls._in_scene

    @classmethod
    def begin_scene(cls, camera) -> None:
        cls._view_projection = np.array(camera.view_projection_matrix, dtype=float)
        cls._in_scene = True

    @classmethod
    def end_scene(cls) -> None:
        cls._in_scene = False

    @classmethod
    def on_window_resized(cls, width: int, height: int) -> None:
        RenderCommand.set_viewport(0, 0, width, height)

    @classmethod
    def submit(cls, shader: Shader, vertex_array: Any, transform=None) -> None:
        """Set the scene and model matrices on ``shader`` and draw ``vertex_array``."""
        model = mu.identity() if transform is None else np.array(transform, dtype=float)
        shader.uniforms["u_ViewProjection"] = cls._view_projection.copy()
        shader.uniforms["u_Model"] = model
        RenderCommand.draw_indexed(vertex_array)

    @classmethod
    def get_api(cls) -> API:
        return RendererAPI.get_api()