"""Keyboard, mouse and scroll state fed by window callbacks."""

from __future__ import annotations

from enum import IntEnum

from planar2d.logger import LogType, log

KEY_COUNT = 1024
KEY_ESCAPE = 256


class KeyAction(IntEnum):
    """Key event kinds as reported by the windowing layer."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Input:
    """Tracks held keys, keys pressed this frame, cursor and scroll."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()
        self._held: set[int] = set()
        self.close_requested = False

        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.x_change = 0.0
        self.y_change = 0.0
        self.mouse_first_moved = True
        self.scroll_y = 0.0

    @staticmethod
    def _check_key(key: int) -> None:
        if not 0 <= key < KEY_COUNT:
            message = f"{key} is out of range."
            log(LogType.ERROR, message)
            raise ValueError(message)

    def key_pressed(self, key: int) -> bool:
        """True if ``key`` went down since the last reset."""
        self._check_key(key)
        return key in self._pressed

    def key_held(self, key: int) -> bool:
        """True while ``key`` is down."""
        self._check_key(key)
        return key in self._held

    def reset_mouse_scroll(self) -> None:
        self.scroll_y = 0.0

    def reset_key_pressed(self) -> None:
        self._pressed.clear()

    def handle_key(self, key: int, action: int) -> None:
        """Record a key event."""
        action = KeyAction(action)
        if key == KEY_ESCAPE and action is KeyAction.PRESS:
            self.close_requested = True

        if not 0 <= key < KEY_COUNT:
            return
        if action is KeyAction.PRESS:
            if key not in self._held:
                self._pressed.add(key)
            self._held.add(key)
        elif action is KeyAction.RELEASE:
            self._held.discard(key)

    def handle_mouse(self, x_pos: float, y_pos: float) -> None:
        """Record a cursor move; the y change grows upwards."""
        if self.mouse_first_moved:
            self.mouse_x = x_pos
            self.mouse_y = y_pos
            self.mouse_first_moved = False

        self.x_change = x_pos - self.mouse_x
        self.y_change = self.mouse_y - y_pos

        self.mouse_x = x_pos
        self.mouse_y = y_pos

    def handle_scroll(self, x_offset: float, y_offset: float) -> None:
        """Record a vertical scroll offset."""
        self.scroll_y = y_offset