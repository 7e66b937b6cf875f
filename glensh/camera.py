"""Fly camera, point light and frame timing for the viewer."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from glensh.transforms import Matrix4, look_at, perspective

PITCH_LIMIT = 89.99
FOV_MIN = 30.0
FOV_MAX = 120.0
ZOOM_STEP = 2.5
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
VERTICAL_SPEED = 1.0


def _array(*values: float):
    return field(default_factory=lambda: np.array(values, dtype=np.float64))


def _normalize(vector: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(vector))
    return np.zeros(3) if norm == 0.0 else vector / norm


@dataclass(eq=False)
class Camera:
    """First-person camera steered by mouse look, scroll zoom and WASD keys."""

    position: np.ndarray = _array(-4.0, -0.4, -9.0)
    front: np.ndarray = _array(0.0, -1.0, 0.0)
    direction: np.ndarray = _array(0.0, 0.0, 0.0)
    target: np.ndarray = _array(0.0, 0.0, 0.0)
    up: np.ndarray = _array(0.0, 1.0, 0.0)
    fov: float = 70.0
    pitch: float = 0.0
    yaw: float = 0.0
    sensitivity: float = 0.1
    height: float = -0.4
    _last_x: float = field(default=0.0, init=False, repr=False)
    _last_y: float = field(default=0.0, init=False, repr=False)

    def on_cursor(self, xpos: float, ypos: float, captured: bool) -> None:
        """Track the cursor; while captured, turn the camera by its movement."""
        xoffset = (xpos - self._last_x) * self.sensitivity
        yoffset = (ypos - self._last_y) * self.sensitivity
        self._last_x, self._last_y = xpos, ypos
        if not captured:
            return
        self.yaw += xoffset
        self.pitch = min(max(self.pitch + yoffset, -PITCH_LIMIT), PITCH_LIMIT)
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.direction[0] = math.cos(yaw)
        self.direction[2] = math.sin(yaw)
        self.front = _normalize(
            np.array([math.cos(yaw) * math.cos(pitch), -math.sin(pitch), math.sin(yaw) * math.cos(pitch)])
        )

    def zoom(self, yoffset: float) -> None:
        """Widen or narrow the field of view, kept within 30..120 degrees."""
        self.fov = min(max(self.fov + yoffset * ZOOM_STEP, FOV_MIN), FOV_MAX)

    def move(self, keys: Iterable[str], delta: float, speed: float) -> None:
        """Move for delta seconds given the held keys.

        Keys: 'w', 's' (forward/back), 'a', 'd' (strafe), 'space', 'left_shift' (up/down).
        """
        held = set(keys)
        step = speed * delta
        lift = VERTICAL_SPEED * delta
        if "w" in held:
            self.position += self.direction * step
        if "s" in held:
            self.position -= self.direction * step
        if "a" in held or "d" in held:
            right = _normalize(np.cross(self.front, self.up))
            if "a" in held:
                self.position -= right * step
            if "d" in held:
                self.position += right * step
        if "space" in held:
            self.height += lift
            self.position[1] = self.height
        if "left_shift" in held:
            self.height -= lift
            self.position[1] = self.height

    def view_matrix(self) -> Matrix4:
        """Aim at position + front and return the view matrix."""
        self.target = self.position + self.front
        return look_at(self.position, self.target, self.up)

    def projection_matrix(self, aspect: float) -> Matrix4:
        return perspective(math.radians(self.fov), aspect, NEAR_PLANE, FAR_PLANE)


@dataclass(eq=False)
class Light:
    """Point light with Phong colour terms."""

    position: np.ndarray = _array(0.05, -0.5, -7.2)
    ambient: np.ndarray = _array(0.2, 0.2, 0.2)
    diffuse: np.ndarray = _array(0.5, 0.5, 0.5)
    specular: np.ndarray = _array(1.0, 1.0, 1.0)


@dataclass
class FrameClock:
    """Time between successive frames."""

    delta: float = 0.0
    previous: float = 0.0
    current: float = 0.0

    def tick(self, now: float) -> float:
        """Record the time now and return the seconds since the previous tick."""
        self.current = now
        self.delta = self.current - self.previous
        self.previous = self.current
        return self.delta