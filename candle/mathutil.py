"""Matrix and quaternion helpers for a right-handed, column-vector convention.

Matrices are 4x4 ``numpy`` arrays indexed ``[row, column]`` and multiply
column vectors from the left, so the translation sits in the last column.
Quaternions are arrays ordered ``(w, x, y, z)``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

Vector = Sequence[float] | np.ndarray


def _vec3(value: Vector) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def identity() -> np.ndarray:
    """A fresh 4x4 identity matrix."""
    return np.eye(4)


def perspective(fov: float, aspect: float, z_near: float, z_far: float) -> np.ndarray:
    """Perspective projection with a vertical field of view in radians.

    Depth in ``[z_near, z_far]`` maps to clip depth ``[-1, 1]``.
    """
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if z_near == z_far:
        raise ValueError("near and far planes must differ")
    focal = 1.0 / math.tan(fov / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = focal / aspect
    result[1, 1] = focal
    result[2, 2] = -(z_far + z_near) / (z_far - z_near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * z_far * z_near) / (z_far - z_near)
    return result


def ortho(
    left: float,
    right: float,
    bottom: float,
    top: float,
    z_near: float = -1.0,
    z_far: float = 1.0,
) -> np.ndarray:
    """Orthographic projection of the given box onto the clip cube."""
    result = np.eye(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (z_far - z_near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(z_far + z_near) / (z_far - z_near)
    return result


def translate(matrix: np.ndarray, offset: Vector) -> np.ndarray:
    """``matrix`` followed by a translation by ``offset`` in its local space."""
    translation = np.eye(4)
    translation[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ translation


def _rotation(angle: float, axis: Vector) -> np.ndarray:
    x, y, z = _normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    result = np.eye(4)
    result[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return result


def rotate(matrix: np.ndarray, angle: float, axis: Vector) -> np.ndarray:
    """``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    return np.asarray(matrix, dtype=float) @ _rotation(angle, axis)


def scale(matrix: np.ndarray, factors: Vector) -> np.ndarray:
    """``matrix`` followed by a per-axis scale."""
    scaling = np.diag([*_vec3(factors), 1.0])
    return np.asarray(matrix, dtype=float) @ scaling


def look_at(eye: Vector, center: Vector, up: Vector) -> np.ndarray:
    """View matrix placing ``eye`` at the origin looking down -Z towards ``center``."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(center) - eye_v)
    side = _normalize(np.cross(forward, _vec3(up)))
    true_up = np.cross(side, forward)
    result = np.eye(4)
    result[0, :3] = side
    result[1, :3] = true_up
    result[2, :3] = -forward
    result[0, 3] = -float(side @ eye_v)
    result[1, 3] = -float(true_up @ eye_v)
    result[2, 3] = float(forward @ eye_v)
    return result


def quat_angle_axis(angle: float, axis: Vector) -> np.ndarray:
    """Quaternion rotating ``angle`` radians about ``axis`` (taken as given, not normalized)."""
    half = angle * 0.5
    return np.array([math.cos(half), *(_vec3(axis) * math.sin(half))])


def quat_multiply(a: Vector, b: Vector) -> np.ndarray:
    """Hamilton product ``a * b``: apply ``b`` first, then ``a``."""
    aw, ax, ay, az = np.asarray(a, dtype=float)
    bw, bx, by, bz = np.asarray(b, dtype=float)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by + ay * bw + az * bx - ax * bz,
            aw * bz + az * bw + ax * by - ay * bx,
        ]
    )


def quat_rotate(q: Vector, vector: Vector) -> np.ndarray:
    """Rotate a 3-vector by a unit quaternion."""
    quat = np.asarray(q, dtype=float)
    w, axis = quat[0], quat[1:]
    v = _vec3(vector)
    uv = np.cross(axis, v)
    uuv = np.cross(axis, uv)
    return v + (uv * w + uuv) * 2.0


def _quat_from_matrix(m: np.ndarray) -> np.ndarray:
    four_x = m[0, 0] - m[1, 1] - m[2, 2]
    four_y = m[1, 1] - m[0, 0] - m[2, 2]
    four_z = m[2, 2] - m[0, 0] - m[1, 1]
    four_w = m[0, 0] + m[1, 1] + m[2, 2]
    candidates = [four_w, four_x, four_y, four_z]
    biggest = max(range(4), key=candidates.__getitem__)
    big = math.sqrt(candidates[biggest] + 1.0) * 0.5
    mult = 0.25 / big
    if biggest == 0:
        return np.array(
            [big, (m[2, 1] - m[1, 2]) * mult, (m[0, 2] - m[2, 0]) * mult, (m[1, 0] - m[0, 1]) * mult]
        )
    if biggest == 1:
        return np.array(
            [(m[2, 1] - m[1, 2]) * mult, big, (m[1, 0] + m[0, 1]) * mult, (m[0, 2] + m[2, 0]) * mult]
        )
    if biggest == 2:
        return np.array(
            [(m[0, 2] - m[2, 0]) * mult, (m[1, 0] + m[0, 1]) * mult, big, (m[2, 1] + m[1, 2]) * mult]
        )
    return np.array(
        [(m[1, 0] - m[0, 1]) * mult, (m[0, 2] + m[2, 0]) * mult, (m[2, 1] + m[1, 2]) * mult, big]
    )


def quat_look_at(direction: Vector, up: Vector) -> np.ndarray:
    """Orientation whose -Z axis points along ``direction`` (assumed unit length)."""
    back = -_vec3(direction)
    right = np.cross(_vec3(up), back)
    right = right / math.sqrt(max(1e-5, float(right @ right)))
    true_up = np.cross(back, right)
    basis = np.column_stack([right, true_up, back])
    return _quat_from_matrix(basis)


def quat_from_euler(angles: Vector) -> np.ndarray:
    """Quaternion for Euler angles in radians, applied X, then Y, then Z."""
    half = _vec3(angles) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def quat_to_mat4(q: Vector) -> np.ndarray:
    """Rotation matrix of a unit quaternion."""
    w, x, y, z = np.asarray(q, dtype=float)
    result = np.eye(4)
    result[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return result