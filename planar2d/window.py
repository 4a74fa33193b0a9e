"""The game window, forwarding its events to an input state."""

from __future__ import annotations

from typing import Any, Optional

from planar2d import config
from planar2d.input import Input, KeyAction
from planar2d.logger import LogType, log

_SPECIAL_KEYS = {
    "ESCAPE": 256,
    "RETURN": 257,
    "TAB": 258,
    "BACKSPACE": 259,
    "INSERT": 260,
    "DELETE": 261,
    "RIGHT": 262,
    "LEFT": 263,
    "DOWN": 264,
    "UP": 265,
    "PAGEUP": 266,
    "PAGEDOWN": 267,
    "HOME": 268,
    "END": 269,
    "F1": 290,
    "F2": 291,
    "F3": 292,
    "F4": 293,
    "F5": 294,
    "F6": 295,
    "F7": 296,
    "F8": 297,
    "F9": 298,
    "F10": 299,
    "F11": 300,
    "F12": 301,
    "LSHIFT": 340,
    "LCTRL": 341,
    "LALT": 342,
    "RSHIFT": 344,
    "RCTRL": 345,
    "RALT": 346,
}


class _KeyMap:
    """Converts window-system key symbols to the engine's key codes."""

    def __init__(self, key_module: Any) -> None:
        self._first_letter = key_module.A
        self._last_letter = key_module.Z
        self._special = {
            getattr(key_module, name): code
            for name, code in _SPECIAL_KEYS.items()
            if hasattr(key_module, name)
        }

    def code(self, symbol: int) -> Optional[int]:
        if self._first_letter <= symbol <= self._last_letter:
            return symbol - self._first_letter + ord("A")
        if 0 <= symbol < 128:
            return symbol
        return self._special.get(symbol)


class Window:
    """A fixed-size OpenGL 3.3 core window."""

    def __init__(
        self,
        input: Input,
        width: float = config.WINDOW_WIDTH,
        height: float = config.WINDOW_HEIGHT,
    ) -> None:
        import pyglet
        from pyglet import gl
        from pyglet.window import key

        self.input = input
        self.width = int(width)
        self.height = int(height)
        self._closed = False
        self._keys = _KeyMap(key)

        gl_config = gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
        )
        try:
            self._window = pyglet.window.Window(
                width=self.width,
                height=self.height,
                caption=config.WINDOW_TITLE,
                resizable=False,
                config=gl_config,
            )
        except Exception as exc:
            log(LogType.ERROR, "Window creation failed.")
            raise RuntimeError("Window creation failed.") from exc

        self._window.switch_to()
        gl.glViewport(0, 0, *self._window.get_framebuffer_size())
        self._install_handlers(pyglet.event.EVENT_HANDLED, gl)

    def _install_handlers(self, handled: Any, gl: Any) -> None:
        window = self._window

        def on_key_press(symbol: int, modifiers: int) -> Any:
            code = self._keys.code(symbol)
            if code is not None:
                self.input.handle_key(code, KeyAction.PRESS)
            return handled

        def on_key_release(symbol: int, modifiers: int) -> Any:
            code = self._keys.code(symbol)
            if code is not None:
                self.input.handle_key(code, KeyAction.RELEASE)
            return handled

        def on_mouse_motion(x: int, y: int, dx: int, dy: int) -> Any:
            # Cursor coordinates are reported with the origin at the top-left.
            self.input.handle_mouse(float(x), float(self.height - y))
            return handled

        def on_mouse_scroll(x: int, y: int, scroll_x: float, scroll_y: float) -> Any:
            self.input.handle_scroll(scroll_x, scroll_y)
            return handled

        def on_resize(width: int, height: int) -> Any:
            gl.glViewport(0, 0, *window.get_framebuffer_size())
            return handled

        def on_close() -> Any:
            self._closed = True
            return handled

        window.push_handlers(
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_mouse_motion=on_mouse_motion,
            on_mouse_scroll=on_mouse_scroll,
            on_resize=on_resize,
            on_close=on_close,
        )

    def should_close(self) -> bool:
        """True once the window was asked to close or escape was pressed."""
        return self._closed or self.input.close_requested

    def swap_buffers(self) -> None:
        self._window.flip()

    def poll_events(self) -> None:
        self._window.dispatch_events()

    def close(self) -> None:
        self._window.close()