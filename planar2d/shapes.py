"""Drawable rectangles and the game objects built on them."""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

from planar2d.transform import Matrix, identity, rotate_z, scale, translate


class PivotMode(Enum):
    """Point a rectangle rotates about."""

    DEFAULT = "default"
    CENTER = "center"


class Rectangle:
    """An axis-aligned coloured rectangle with an optional rotation."""

    def __init__(
        self,
        pos_x: float = 0,
        pos_y: float = 0,
        width: float = 50,
        height: float = 50,
    ) -> None:
        self.position = np.array([pos_x, pos_y], dtype=np.float32)
        self.size = np.array([width, height], dtype=np.float32)
        self.color = np.array([0.0, 0.0, 1.0, 1.0], dtype=np.float32)
        self.rotation = 0.0
        self.pivot = PivotMode.CENTER

    def model_matrix(self) -> Matrix:
        """Matrix mapping the unit square onto this rectangle."""
        if self.pivot is PivotMode.CENTER:
            origin = self.size * 0.5
        else:
            origin = np.zeros(2, dtype=np.float32)

        model = translate(identity(), self.position + origin)
        model = rotate_z(model, self.rotation)
        model = translate(model, -origin)
        return scale(model, self.size)

    def draw(self, renderer: Any) -> None:
        """Hand this rectangle's model matrix and colour to ``renderer``."""
        renderer.draw(self.model_matrix(), self.color)


class GameObject(Rectangle):
    """A rectangle that takes part in the game world."""


class Player(GameObject):
    """A game object that moves at a fixed speed."""

    speed: int = 200

    def move(self, dt: float, delta_x: int, delta_y: int) -> None:
        """Move by ``speed * dt`` along each unit direction given."""
        step = np.array([delta_x, delta_y], dtype=np.float32) * (dt * self.speed)
        self.position = (self.position + step).astype(np.float32)