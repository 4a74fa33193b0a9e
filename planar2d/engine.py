"""The main loop tying input, camera, player and rendering together."""

from __future__ import annotations

import argparse
import time
from typing import Any, Optional, Sequence

from planar2d.bindings import InputActionMapper
from planar2d.camera import Camera2D
from planar2d.controller import PlayerController
from planar2d.input import Input
from planar2d.logger import LogType, log
from planar2d.renderer import Renderer2D
from planar2d.shapes import Player
from planar2d.window import Window


class Engine:
    """Owns the game state and runs the frame loop."""

    def __init__(
        self,
        input: Optional[Input] = None,
        camera: Optional[Camera2D] = None,
        mapper: Optional[InputActionMapper] = None,
        controller: Optional[PlayerController] = None,
    ) -> None:
        self.input = Input() if input is None else input
        self.camera = Camera2D() if camera is None else camera
        self.mapper = InputActionMapper(self.input) if mapper is None else mapper
        self.controller = PlayerController(self.mapper) if controller is None else controller

    def update(self, dt: float) -> None:
        """Advance one frame and clear per-frame input."""
        self.camera.update(dt, (self.input.mouse_x, self.input.mouse_y))
        self.camera.calculate_zoom(self.input.scroll_y)

        self.controller.update(dt)

        self.input.reset_mouse_scroll()
        self.input.reset_key_pressed()

    def run(self) -> None:
        """Open the window and loop until it is closed."""
        from pyglet import gl

        log(LogType.MESSAGE, "Engine Started.")
        window = Window(self.input)
        renderer: Any = None
        try:
            renderer = Renderer2D(self.camera)
            player = Player(0, 0, 100, 100)
            self.controller.control(player)
            self.camera.set_target(player)

            last_time = time.perf_counter()
            while not window.should_close():
                now = time.perf_counter()
                dt = now - last_time
                last_time = now

                gl.glClear(gl.GL_COLOR_BUFFER_BIT)
                player.draw(renderer)
                self.update(dt)

                window.swap_buffers()
                window.poll_events()
        finally:
            if renderer is not None:
                renderer.close()
            window.close()
            log(LogType.MESSAGE, "Engine Stopped.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the engine."""
    parser = argparse.ArgumentParser(prog="planar2d", description="Run the 2D engine.")
    parser.parse_args(argv)
    Engine().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())