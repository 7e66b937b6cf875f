"""Example mesh data: a unit cube with normals and texture coordinates."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

FLOATS_PER_VERTEX = 8


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, normal and texture coordinate."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    tex_coord: tuple[float, float]

    def as_tuple(self) -> tuple[float, ...]:
        return (*self.position, *self.normal, *self.tex_coord)


_CUBE_DATA = (
    (-0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 0.0),
    (0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 1.0, 0.0),
    (0.5, 0.5, -0.5, 0.0, 0.0, -1.0, 1.0, 1.0),
    (0.5, 0.5, -0.5, 0.0, 0.0, -1.0, 1.0, 1.0),
    (-0.5, 0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 1.0),
    (-0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 0.0),
    (-0.5, -0.5, 0.5, 0.0, 0.0, 1.0, 0.0, 0.0),
    (0.5, -0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 0.0),
    (0.5, 0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 1.0),
    (0.5, 0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 1.0),
    (-0.5, 0.5, 0.5, 0.0, 0.0, 1.0, 0.0, 1.0),
    (-0.5, -0.5, 0.5, 0.0, 0.0, 1.0, 0.0, 0.0),
    (-0.5, 0.5, 0.5, -1.0, 0.0, 0.0, 1.0, 0.0),
    (-0.5, 0.5, -0.5, -1.0, 0.0, 0.0, 1.0, 1.0),
    (-0.5, -0.5, -0.5, -1.0, 0.0, 0.0, 0.0, 1.0),
    (-0.5, -0.5, -0.5, -1.0, 0.0, 0.0, 0.0, 1.0),
    (-0.5, -0.5, 0.5, -1.0, 0.0, 0.0, 0.0, 0.0),
    (-0.5, 0.5, 0.5, -1.0, 0.0, 0.0, 1.0, 0.0),
    (0.5, 0.5, 0.5, 1.0, 0.0, 0.0, 1.0, 0.0),
    (0.5, 0.5, -0.5, 1.0, 0.0, 0.0, 1.0, 1.0),
    (0.5, -0.5, -0.5, 1.0, 0.0, 0.0, 0.0, 1.0),
    (0.5, -0.5, -0.5, 1.0, 0.0, 0.0, 0.0, 1.0),
    (0.5, -0.5, 0.5, 1.0, 0.0, 0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5, 1.0, 0.0, 0.0, 1.0, 0.0),
    (-0.5, -0.5, -0.5, 0.0, -1.0, 0.0, 0.0, 1.0),
    (0.5, -0.5, -0.5, 0.0, -1.0, 0.0, 1.0, 1.0),
    (0.5, -0.5, 0.5, 0.0, -1.0, 0.0, 1.0, 0.0),
    (0.5, -0.5, 0.5, 0.0, -1.0, 0.0, 1.0, 0.0),
    (-0.5, -0.5, 0.5, 0.0, -1.0, 0.0, 0.0, 0.0),
    (-0.5, -0.5, -0.5, 0.0, -1.0, 0.0, 0.0, 1.0),
    (-0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 0.0, 1.0),
    (0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 1.0, 1.0),
    (0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 1.0, 0.0),
    (0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 1.0, 0.0),
    (-0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 0.0, 0.0),
    (-0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 0.0, 1.0),
)


def cube_vertices() -> tuple[Vertex, ...]:
    """Return the 36 vertices (12 triangles) of a unit cube centred at the origin."""
    return tuple(
        Vertex(position=(px, py, pz), normal=(nx, ny, nz), tex_coord=(u, v))
        for px, py, pz, nx, ny, nz, u, v in _CUBE_DATA
    )


def flatten(vertices: Iterable[Vertex]) -> np.ndarray:
    """Pack vertices into an interleaved float32 array: position, normal, tex coord."""
    rows = [v.as_tuple() for v in vertices]
    if not rows:
        return np.zeros(0, dtype=np.float32)
    return np.asarray(rows, dtype=np.float32).reshape(-1)