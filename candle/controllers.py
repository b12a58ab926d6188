"""Keyboard and mouse driven camera controllers."""

from __future__ import annotations

import math

import numpy as np

from candle import input as candle_input
from candle import log
from candle import mathutil as mu
from candle.camera import Camera, Camera2D
from candle.events import Event, EventDispatcher, MouseScrolledEvent, WindowResizeEvent
from candle.input import Keycode, MouseButton, MouseMode
from candle.timestep import Timestep

_UP = np.array([0.0, 1.0, 0.0])
_FORWARD = np.array([0.0, 0.0, -1.0])
_MAX_PITCH = 89.5
_MIN_PITCH = -90.0


class Camera2DController(Camera2D):
    """Orthographic camera moved with WASD and zoomed with the scroll wheel."""

    def __init__(self, aspect: float, position=(0.0, 0.0, 0.0), zoom: float = 1.0) -> None:
        super().__init__(-aspect, aspect, -zoom, zoom)
        self.zoom = zoom
        self.speed = 3.5
        self.rotation_speed = 5.0
        self._aspect = aspect
        self._camera_position = np.array(position, dtype=float).reshape(3)
        self.set_position(self._camera_position)

    @property
    def aspect(self) -> float:
        return self._aspect

    def update(self, ts: Timestep) -> None:
        step = ts.seconds
        if candle_input.is_key_pressed(Keycode.A):
            self._camera_position = self._camera_position - np.array([1.0, 0.0, 0.0]) * step
        elif candle_input.is_key_pressed(Keycode.D):
            self._camera_position = self._camera_position + np.array([1.0, 0.0, 0.0]) * step

        if candle_input.is_key_pressed(Keycode.W):
            self._camera_position = self._camera_position + np.array([0.0, 1.0, 0.0]) * step
        elif candle_input.is_key_pressed(Keycode.S):
            self._camera_position = self._camera_position - np.array([0.0, 1.0, 0.0]) * step

        self.set_position(self._camera_position)

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resized)
        dispatcher.dispatch(MouseScrolledEvent, self._on_mouse_scroll)

    def resize_bounds(self, width: float, height: float) -> None:
        self._aspect = width / height
        self._apply_projection()

    def _apply_projection(self) -> None:
        self.set_projection(
            -self._aspect * self.zoom, self._aspect * self.zoom, -self.zoom, self.zoom
        )

    def _on_window_resized(self, event: WindowResizeEvent) -> bool:
        self.resize_bounds(event.width, event.height)
        return False

    def _on_mouse_scroll(self, event: MouseScrolledEvent) -> bool:
        self.zoom -= event.y_offset * 0.1
        self._apply_projection()
        return False


class CameraController(Camera):
    """Fly camera: hold the right mouse button, steer with WASD/QE and the mouse."""

    def __init__(
        self,
        fov: float,
        aspect: float,
        z_near: float,
        z_far: float,
        position,
        rotation=None,
    ) -> None:
        pos = np.array(position, dtype=float).reshape(3)
        super().__init__(fov, aspect, z_near, z_far, mu.translate(mu.identity(), pos))
        if rotation is None:
            rotation = mu.quat_look_at(_FORWARD, _UP)
        self.speed = 3.5
        self.mouse_sensitivity = 5.0
        self._fov = fov
        self._aspect = aspect
        self._z_near = z_near
        self._z_far = z_far
        self._pitch = 0.0
        self._position = pos
        self._rotation = np.array(rotation, dtype=float).reshape(4)
        self._forward = mu.quat_rotate(self._rotation, _FORWARD)
        self._last_mouse = np.zeros(2)

    @property
    def position(self) -> tuple[float, float, float]:
        x, y, z = self._position
        return (float(x), float(y), float(z))

    @property
    def forward(self) -> np.ndarray:
        return self._forward.copy()

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @property
    def pitch(self) -> float:
        return self._pitch

    def update(self, ts: Timestep) -> None:
        if not candle_input.is_mouse_button_pressed(MouseButton.RIGHT):
            candle_input.set_mouse_mode(MouseMode.NORMAL)
            self._last_mouse = np.array(candle_input.mouse_position(), dtype=float)
            return
        candle_input.set_mouse_mode(MouseMode.DISABLED)

        moved = False
        right = np.cross(self._forward, _UP)
        step = self.speed * ts.seconds

        if candle_input.is_key_pressed(Keycode.W):
            self._position = self._position + self._forward * step
            moved = True
        elif candle_input.is_key_pressed(Keycode.S):
            self._position = self._position - self._forward * step
            moved = True

        if candle_input.is_key_pressed(Keycode.A):
            self._position = self._position - right * step
            moved = True
        elif candle_input.is_key_pressed(Keycode.D):
            self._position = self._position + right * step
            moved = True

        if candle_input.is_key_pressed(Keycode.E):
            self._position = self._position + _UP * step
            moved = True
        elif candle_input.is_key_pressed(Keycode.Q):
            self._position = self._position - _UP * step
            moved = True

        mouse = np.array(candle_input.mouse_position(), dtype=float)
        delta = mouse - self._last_mouse
        self._last_mouse = mouse

        if delta[0] != 0.0 or delta[1] != 0.0:
            delta = delta * (-self.mouse_sensitivity * ts.seconds)
            target_pitch = self._pitch + delta[1]
            if target_pitch > _MAX_PITCH:
                delta[1] = _MAX_PITCH - self._pitch
                self._pitch = _MAX_PITCH
            elif target_pitch < _MIN_PITCH:
                delta[1] = _MIN_PITCH - self._pitch
                self._pitch = _MIN_PITCH
            else:
                self._pitch = target_pitch

            pitch = mu.quat_angle_axis(math.radians(delta[1]), right)
            yaw = mu.quat_angle_axis(math.radians(delta[0]), _UP)
            self._rotation = mu.quat_multiply(mu.quat_multiply(yaw, pitch), self._rotation)
            moved = True

        if moved:
            self.recalculate_view()

    def recalculate_view(self) -> None:
        self._forward = mu.quat_rotate(self._rotation, _FORWARD)
        self._view = mu.look_at(self._position, self._position + self._forward, _UP)
        self._view_projection = self._projection @ self._view

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resized)
        dispatcher.dispatch(MouseScrolledEvent, self._on_mouse_scroll)

    def _on_window_resized(self, event: WindowResizeEvent) -> bool:
        aspect = event.width / event.height
        logger = log.core_logger()
        if logger is not None:
            logger.log(log.TRACE, "%s", aspect)
        self.set_projection(self._fov, aspect, self._z_near, self._z_far)
        self._view_projection = self._projection @ self._view
        return False

    def _on_mouse_scroll(self, event: MouseScrolledEvent) -> bool:
        self.speed = min(max(self.speed + event.y_offset * 0.1, 0.1), 10.0)
        return True