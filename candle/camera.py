"""Perspective and orthographic cameras."""

from __future__ import annotations

import math

import numpy as np

from candle import mathutil as mu


class Camera:
    """Perspective camera defined by its projection and a world transform."""

    def __init__(
        self,
        fov: float,
        aspect: float,
        z_near: float,
        z_far: float,
        transform: np.ndarray,
    ) -> None:
        self._projection = mu.identity()
        self.set_projection(fov, aspect, z_near, z_far)
        self._view = np.linalg.inv(np.asarray(transform, dtype=float))
        self._view_projection = self._projection @ self._view

    def set_projection(self, fov: float, aspect: float, z_near: float, z_far: float) -> None:
        """Replace the projection; the combined matrix is left as it was."""
        self._projection = mu.perspective(fov, aspect, z_near, z_far)

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection


class Camera2D:
    """Orthographic camera with a position and a rotation about Z in degrees."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = mu.ortho(left, right, bottom, top, -1.0, 1.0)
        self._view = mu.identity()
        self._view_projection = self._projection @ self._view
        self._position = np.zeros(3)
        self._rotation = 0.0

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = mu.ortho(left, right, bottom, top)
        self._view_projection = self._projection @ self._view

    @property
    def position(self) -> tuple[float, float, float]:
        x, y, z = self._position
        return (float(x), float(y), float(z))

    def set_position(self, position) -> None:
        self._position = np.array(position, dtype=float).reshape(3)
        self._recalculate_view()

    @property
    def rotation(self) -> float:
        return self._rotation

    def set_rotation(self, rotation: float) -> None:
        self._rotation = float(rotation)
        self._recalculate_view()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection

    def _recalculate_view(self) -> None:
        transform = mu.translate(mu.identity(), self._position)
        transform = mu.rotate(transform, math.radians(self._rotation), (0.0, 0.0, 1.0))
        self._view = np.linalg.inv(transform)
        self._view_projection = self._projection @ self._view