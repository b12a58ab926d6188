"""Plain data components attached to scene entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from candle import mathutil as mu
from candle.ids import UUID

Vec3 = tuple[float, float, float]


def _vec3(values: Iterable[float]) -> Vec3:
    x, y, z = (float(component) for component in values)
    return (x, y, z)


@dataclass
class IDComponent:
    """Stable identity of an entity; random unless given."""

    id: UUID = field(default_factory=UUID)

    def __post_init__(self) -> None:
        self.id = UUID(self.id)


@dataclass
class TagComponent:
    """Human-readable name of an entity."""

    tag: str = ""


@dataclass
class CameraComponent:
    """Perspective camera settings; the field of view is in degrees."""

    fov: float = 45.0
    near_clip: float = 0.01
    far_clip: float = 160.0


@dataclass
class TransformComponent:
    """Translation, Euler rotation in radians and per-axis scale."""

    translation: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        self.translation = _vec3(self.translation)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale)

    def transform(self) -> np.ndarray:
        """Model matrix: scale, then rotate, then translate."""
        rotation = mu.quat_to_mat4(mu.quat_from_euler(self.rotation))
        return (
            mu.translate(mu.identity(), self.translation)
            @ rotation
            @ mu.scale(mu.identity(), self.scale)
        )