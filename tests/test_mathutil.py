import math

import numpy as np
import pytest

from candle import mathutil as mu


def _point(matrix, p):
    out = matrix @ np.array([*p, 1.0])
    return out[:3] / out[3]


def test_identity_is_fresh_unit_matrix():
    a = mu.identity()
    a[0, 0] = 5.0
    assert np.array_equal(mu.identity(), np.eye(4))


def test_perspective_maps_near_and_far_planes_to_clip_depth():
    proj = mu.perspective(math.radians(50.0), 16 / 9, 0.1, 1000.0)
    assert _point(proj, (0.0, 0.0, -0.1))[2] == pytest.approx(-1.0)
    assert _point(proj, (0.0, 0.0, -1000.0))[2] == pytest.approx(1.0)


def test_perspective_aspect_scales_x_only():
    wide = mu.perspective(1.0, 2.0, 0.1, 10.0)
    square = mu.perspective(1.0, 1.0, 0.1, 10.0)
    assert wide[0, 0] * 2.0 == pytest.approx(square[0, 0])
    assert wide[1, 1] == pytest.approx(square[1, 1])


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        mu.perspective(1.0, 0.0, 0.1, 10.0)


def test_ortho_maps_box_corners_to_clip_cube():
    proj = mu.ortho(-3.0, 5.0, -2.0, 4.0)
    assert np.allclose(_point(proj, (-3.0, -2.0, 0.0))[:2], [-1.0, -1.0])
    assert np.allclose(_point(proj, (5.0, 4.0, 0.0))[:2], [1.0, 1.0])


def test_ortho_default_depth_range_matches_explicit():
    assert np.allclose(mu.ortho(-1, 1, -1, 1), mu.ortho(-1, 1, -1, 1, -1.0, 1.0))


def test_translate_moves_origin_to_offset():
    m = mu.translate(mu.identity(), (1.5, -2.0, 3.0))
    assert np.allclose(_point(m, (0.0, 0.0, 0.0)), [1.5, -2.0, 3.0])


def test_rotate_then_inverse_rotation_is_identity():
    m = mu.rotate(mu.rotate(mu.identity(), 0.7, (1.0, 2.0, 3.0)), -0.7, (1.0, 2.0, 3.0))
    assert np.allclose(m, np.eye(4))


def test_rotate_keeps_axis_fixed_and_preserves_length():
    m = mu.rotate(mu.identity(), 1.2, (0.0, 0.0, 1.0))
    assert np.allclose(_point(m, (0.0, 0.0, 2.0)), [0.0, 0.0, 2.0])
    moved = _point(m, (3.0, 4.0, 0.0))
    assert np.linalg.norm(moved) == pytest.approx(5.0)


def test_scale_multiplies_components():
    m = mu.scale(mu.identity(), (2.0, 3.0, 1.0))
    assert np.allclose(_point(m, (1.0, 1.0, 1.0)), [2.0, 3.0, 1.0])


def test_look_at_puts_eye_at_origin_and_center_on_negative_z():
    eye = (1.0, 2.0, 3.0)
    center = (4.0, -1.0, 0.5)
    view = mu.look_at(eye, center, (0.0, 1.0, 0.0))
    assert np.allclose(_point(view, eye), [0.0, 0.0, 0.0])
    distance = np.linalg.norm(np.subtract(center, eye))
    assert np.allclose(_point(view, center), [0.0, 0.0, -distance])


def test_quat_angle_axis_zero_angle_is_identity():
    assert np.allclose(mu.quat_angle_axis(0.0, (0.3, 0.4, 0.5)), [1.0, 0.0, 0.0, 0.0])


def test_quat_rotate_matches_matrix_rotation():
    q = mu.quat_angle_axis(0.9, np.array([1.0, 1.0, 0.0]) / math.sqrt(2.0))
    m = mu.rotate(mu.identity(), 0.9, (1.0, 1.0, 0.0))
    v = (0.2, -0.7, 1.3)
    assert np.allclose(mu.quat_rotate(q, v), _point(m, v))


def test_quat_multiply_composes_like_matrices():
    a = mu.quat_angle_axis(0.4, (0.0, 1.0, 0.0))
    b = mu.quat_angle_axis(-1.1, (1.0, 0.0, 0.0))
    assert np.allclose(
        mu.quat_to_mat4(mu.quat_multiply(a, b)), mu.quat_to_mat4(a) @ mu.quat_to_mat4(b)
    )


def test_quat_multiply_identity():
    q = mu.quat_angle_axis(0.8, (0.0, 0.0, 1.0))
    assert np.allclose(mu.quat_multiply((1.0, 0.0, 0.0, 0.0), q), q)


def test_quat_look_at_points_negative_z_along_direction():
    direction = np.array([1.0, 0.5, -2.0])
    direction /= np.linalg.norm(direction)
    q = mu.quat_look_at(direction, (0.0, 1.0, 0.0))
    assert np.allclose(mu.quat_rotate(q, (0.0, 0.0, -1.0)), direction)
    assert np.linalg.norm(q) == pytest.approx(1.0)


def test_quat_look_at_default_forward_is_identity_rotation():
    q = mu.quat_look_at((0.0, 0.0, -1.0), (0.0, 1.0, 0.0))
    assert np.allclose(mu.quat_to_mat4(q), np.eye(4))


def test_quat_from_euler_matches_z_y_x_rotation_order():
    angles = (0.3, -0.6, 1.1)
    expected = mu.rotate(
        mu.rotate(mu.rotate(mu.identity(), angles[2], (0, 0, 1)), angles[1], (0, 1, 0)),
        angles[0],
        (1, 0, 0),
    )
    assert np.allclose(mu.quat_to_mat4(mu.quat_from_euler(angles)), expected)


def test_quat_to_mat4_is_orthonormal():
    m = mu.quat_to_mat4(mu.quat_from_euler((0.5, 0.2, -0.9)))
    assert np.allclose(m[:3, :3] @ m[:3, :3].T, np.eye(3))
    assert np.linalg.det(m[:3, :3]) == pytest.approx(1.0)


def test_bad_vector_shape_rejected():
    with pytest.raises(ValueError):
        mu.translate(mu.identity(), (1.0, 2.0))