"""4x4 matrix helpers for 2D rendering (column-vector convention)."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

Matrix = np.ndarray


def identity() -> Matrix:
    """Return the 4x4 identity matrix."""
    return np.eye(4, dtype=np.float32)


def _vec3(values: Sequence[float], fill: float) -> list[float]:
    components = [float(v) for v in values]
    if len(components) == 2:
        components.append(fill)
    if len(components) != 3:
        raise ValueError(f"expected 2 or 3 components, got {len(components)}")
    return components


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> Matrix:
    """Right-handed orthographic projection mapping the box onto [-1, 1]^3."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic projection planes must not coincide")
    result = identity()
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def translate(matrix: Matrix, offset: Sequence[float]) -> Matrix:
    """Return ``matrix`` followed by a translation; a 2D offset has z = 0."""
    x, y, z = _vec3(offset, 0.0)
    step = identity()
    step[:3, 3] = (x, y, z)
    return (np.asarray(matrix, dtype=np.float32) @ step).astype(np.float32)


def rotate_z(matrix: Matrix, degrees: float) -> Matrix:
    """Return ``matrix`` followed by a rotation about the z axis."""
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    step = identity()
    step[0, 0], step[0, 1] = c, -s
    step[1, 0], step[1, 1] = s, c
    return (np.asarray(matrix, dtype=np.float32) @ step).astype(np.float32)


def scale(matrix: Matrix, factors: Sequence[float]) -> Matrix:
    """Return ``matrix`` followed by a scale; a 2D factor has z = 1."""
    x, y, z = _vec3(factors, 1.0)
    step = np.diag([x, y, z, 1.0]).astype(np.float32)
    return (np.asarray(matrix, dtype=np.float32) @ step).astype(np.float32)