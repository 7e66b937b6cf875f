"""4x4 transformation matrices in mathematical layout (``m[row][col]``).

Points are column vectors, so a transform is applied as ``m @ p``.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

Matrix4 = np.ndarray


def _vec3(values: Iterable[float]) -> np.ndarray:
    vector = np.asarray(list(values), dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {vector.shape}")
    return vector


def _normalize(vector: np.ndarray) -> np.ndarray:
    """Return the unit vector; a zero vector stays zero."""
    norm = float(np.linalg.norm(vector))
    if norm == 0.0:
        return np.zeros(3)
    return vector / norm


def look_at(
    eye: Iterable[float], target: Iterable[float], up: Iterable[float]
) -> Matrix4:
    """Right-handed view matrix looking from eye towards target."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(target) - eye_v)
    side = _normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    view = np.identity(4)
    view[0, :3] = side
    view[1, :3] = upward
    view[2, :3] = -forward
    view[0, 3] = -float(np.dot(side, eye_v))
    view[1, 3] = -float(np.dot(upward, eye_v))
    view[2, 3] = float(np.dot(forward, eye_v))
    return view


def perspective(fov_radians: float, aspect: float, near: float, far: float) -> Matrix4:
    """OpenGL perspective projection mapping depth [near, far] to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    focal = 1.0 / np.tan(fov_radians / 2.0)
    depth = near - far
    proj = np.zeros((4, 4))
    proj[0, 0] = focal / aspect
    proj[1, 1] = focal
    proj[2, 2] = (far + near) / depth
    proj[2, 3] = 2.0 * far * near / depth
    proj[3, 2] = -1.0
    return proj


def translation(offset: Iterable[float]) -> Matrix4:
    """Matrix moving points by offset."""
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def rotation(angle_radians: float, axis: Iterable[float]) -> Matrix4:
    """Counter-clockwise rotation about axis (normalized here)."""
    x, y, z = _normalize(_vec3(axis))
    c = float(np.cos(angle_radians))
    s = float(np.sin(angle_radians))
    n = np.array([x, y, z])
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    matrix = np.identity(4)
    matrix[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(n, n) + s * cross
    return matrix


def scale_uniform(factor: float) -> Matrix4:
    """Matrix scaling x, y and z by the same factor."""
    return np.diag([factor, factor, factor, 1.0])