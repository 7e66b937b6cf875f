import math

import numpy as np
import pytest

from glensh.transforms import look_at, perspective, rotation, scale_uniform, translation

CUBE_POSITIONS = [
    (0.0, 0.0, 0.0),
    (2.0, 5.0, -15.0),
    (-1.5, -2.2, -2.5),
    (-3.8, -2.0, -12.3),
    (2.4, -0.4, -3.5),
    (-1.7, 3.0, -7.5),
    (1.3, -2.0, -2.5),
    (1.5, 2.0, -2.5),
    (1.5, 0.2, -1.5),
    (-1.3, 1.0, -1.5),
]


def _apply(matrix, point):
    result = matrix @ np.array([*point, 1.0])
    return result[:3] / result[3]


@pytest.mark.parametrize("offset", CUBE_POSITIONS)
def test_translation_moves_origin_to_offset(offset):
    assert np.allclose(_apply(translation(offset), (0.0, 0.0, 0.0)), offset)


@pytest.mark.parametrize("offset", CUBE_POSITIONS)
def test_translation_inverse_round_trip(offset):
    back = tuple(-c for c in offset)
    assert np.allclose(translation(back) @ translation(offset), np.identity(4))


def test_facebox_projection_values():
    proj = perspective(math.radians(90.0), 1280.0 / 720.0, 0.1, 100.0)
    assert proj[1, 1] == pytest.approx(1.0)
    assert proj[0, 0] == pytest.approx(720.0 / 1280.0)
    assert proj[3, 2] == -1.0


def test_perspective_maps_near_and_far_planes():
    proj = perspective(math.radians(90.0), 1280.0 / 720.0, 0.1, 100.0)
    assert _apply(proj, (0.0, 0.0, -0.1))[2] == pytest.approx(-1.0)
    assert _apply(proj, (0.0, 0.0, -100.0))[2] == pytest.approx(1.0)


def test_perspective_rejects_degenerate_arguments():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 100.0)
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 1.0, 1.0)


def test_rotation_about_z_turns_x_into_y():
    assert np.allclose(_apply(rotation(math.pi / 2, (0.0, 0.0, 1.0)), (1.0, 0.0, 0.0)), (0.0, 1.0, 0.0))


def test_rotation_axis_is_normalized():
    assert np.allclose(rotation(0.7, (0.0, 5.0, 0.0)), rotation(0.7, (0.0, 1.0, 0.0)))


@pytest.mark.parametrize("axis", [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0), (1.0, 2.0, 3.0)])
def test_rotation_is_orthonormal(axis):
    r = rotation(1.234, axis)[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_scale_uniform_scales_points():
    assert np.allclose(_apply(scale_uniform(2.0), (1.0, -1.0, 0.5)), (2.0, -2.0, 1.0))


@pytest.mark.parametrize("offset", CUBE_POSITIONS)
def test_facebox_model_keeps_centre_at_translation(offset):
    model = (
        translation(offset)
        @ rotation(math.radians(30.0), (1.0, 0.0, 0.0))
        @ rotation(math.radians(45.0), (0.0, 1.0, 0.0))
        @ rotation(math.radians(60.0), (0.0, 0.0, 1.0))
        @ scale_uniform(1.0)
    )
    assert np.allclose(_apply(model, (0.0, 0.0, 0.0)), offset)


def test_look_at_default_orientation_is_identity():
    assert np.allclose(look_at((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0)), np.identity(4))


def test_look_at_puts_eye_at_origin_and_target_ahead():
    eye = (-4.0, -0.4, -9.0)
    target = (-1.05, -1.3, -3.26)
    view = look_at(eye, target, (0.0, 1.0, 0.0))
    assert np.allclose(_apply(view, eye), (0.0, 0.0, 0.0))
    ahead = _apply(view, target)
    assert ahead[2] < 0
    assert np.allclose(ahead[:2], (0.0, 0.0))