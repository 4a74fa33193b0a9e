"""Turns movement actions into player motion."""

from __future__ import annotations

from typing import Optional

from planar2d.bindings import Action, InputActionMapper, KeySection
from planar2d.shapes import Player


class PlayerController:
    """Moves the controlled player according to held movement actions."""

    def __init__(self, mapper: InputActionMapper) -> None:
        self.mapper = mapper
        self.player: Optional[Player] = None

    def control(self, player: Player) -> None:
        """Take control of ``player``."""
        self.player = player

    def update(self, dt: float) -> None:
        """Apply this frame's movement to the controlled player."""
        self._update_movement(dt)

    def _down(self, action: Action) -> bool:
        return self.mapper.action_down(KeySection.MOVEMENT, action)

    def _update_movement(self, dt: float) -> None:
        if self.player is None:
            raise RuntimeError("no player under control")

        delta_x = 0
        delta_y = 0

        if self._down(Action.MOVE_UP):
            delta_y = 1
        elif self._down(Action.MOVE_DOWN):
            delta_y = -1

        if self._down(Action.MOVE_LEFT):
            delta_x = -1
        elif self._down(Action.MOVE_RIGHT):
            delta_x = 1

        self.player.move(dt, delta_x, delta_y)