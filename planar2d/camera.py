"""A 2D camera producing a combined view-projection matrix."""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

import numpy as np

from planar2d import config
from planar2d.logger import LogType, log
from planar2d.transform import identity, ortho, translate


class CameraMoveState(Enum):
    """How the camera position is driven."""

    STATIC = "static"
    FOLLOW = "follow"
    MOUSE = "mouse"


class CameraZoomState(Enum):
    """Whether scrolling changes the zoom."""

    ZOOM = "zoom"
    NO_ZOOM = "no_zoom"


class Camera2D:
    """Camera whose ``view`` is the projection times the inverse translation."""

    def __init__(
        self,
        move_state: CameraMoveState = CameraMoveState.STATIC,
        zoom_state: CameraZoomState = CameraZoomState.ZOOM,
    ) -> None:
        self.move_state = move_state
        self.zoom_state = zoom_state
        self.position = np.zeros(2, dtype=np.float32)
        self.zoom = config.DEFAULT_ZOOM
        self.target: Any = None

        half_w = config.WINDOW_WIDTH * 0.5
        half_h = config.WINDOW_HEIGHT * 0.5
        self.base_projection = ortho(-half_w, half_w, -half_h, half_h, -1.0, 1.0)
        self.projection = self.base_projection.copy()
        self.view = identity()
        self._calculate_view()

    def set_target(self, target: Any) -> None:
        """Follow ``target``, an object with ``position`` and ``size``."""
        self.target = target

    def update(self, dt: float, position: Sequence[float]) -> None:
        """Move the camera for this frame; ``position`` is the mouse cursor."""
        if self.move_state is CameraMoveState.STATIC:
            self.position = np.zeros(2, dtype=np.float32)
        elif self.move_state is CameraMoveState.FOLLOW:
            if self.target is None:
                message = "Camera state - FOLLOW but no target."
                log(LogType.ERROR, message)
                raise RuntimeError(message)
            target_pos = np.asarray(self.target.position, dtype=np.float32)
            size = np.asarray(self.target.size, dtype=np.float32)
            self.position = (target_pos + size * 0.5).astype(np.float32)
        elif self.move_state is CameraMoveState.MOUSE:
            self._move_with_mouse(dt, position)

        self._calculate_view()

    def _move_with_mouse(self, dt: float, position: Sequence[float]) -> None:
        x, y = float(position[0]), float(position[1])
        delta = np.zeros(2, dtype=np.float32)

        if 0 <= x <= config.MOVE_ZONE:
            delta[0] -= 1.0
        elif config.WINDOW_WIDTH - config.MOVE_ZONE <= x <= config.WINDOW_WIDTH:
            delta[0] += 1.0

        if 0 <= y <= config.MOVE_ZONE:
            delta[1] += 1.0
        elif config.WINDOW_HEIGHT - config.MOVE_ZONE <= y <= config.WINDOW_HEIGHT:
            delta[1] -= 1.0

        if delta.any():
            delta = delta / np.linalg.norm(delta) * config.CAMERA_SPEED * dt
            self.position = (self.position + delta).astype(np.float32)

    def calculate_zoom(self, scroll_direction: float) -> None:
        """Adjust zoom by one step for a scroll of +1 or -1 and rebuild the projection."""
        if self.zoom_state is not CameraZoomState.ZOOM:
            self.projection = self.base_projection.copy()
            return

        if scroll_direction == 1 and self.zoom <= config.MAX_ZOOM:
            self.zoom += config.ZOOM_SPEED
        elif scroll_direction == -1 and self.zoom >= config.MIN_ZOOM:
            self.zoom -= config.ZOOM_SPEED

        width = config.WINDOW_WIDTH * 0.5 / self.zoom
        height = config.WINDOW_HEIGHT * 0.5 / self.zoom
        self.projection = ortho(-width, width, -height, height, -1.0, 1.0)

    def _calculate_view(self) -> None:
        shift = translate(identity(), (-float(self.position[0]), -float(self.position[1]), 0.0))
        self.view = (self.projection @ shift).astype(np.float32)