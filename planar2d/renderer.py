"""Draws unit-square quads through a shader and a camera."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from planar2d.shader import Shader

QUAD_VERTICES = (
    0.0, 1.0,
    1.0, 0.0,
    0.0, 0.0,

    0.0, 1.0,
    1.0, 1.0,
    1.0, 0.0,
)

_FLOAT_SIZE = np.dtype(np.float32).itemsize


def _gl() -> Any:
    from pyglet import gl

    return gl


class Renderer2D:
    """Renders coloured quads using the camera's view-projection."""

    def __init__(self, camera: Any, shader: Optional[Any] = None) -> None:
        self.camera = camera
        self.shader = Shader() if shader is None else shader
        self._vao = 0
        self._vbo = 0
        self._closed = False

    def _create_quad(self) -> None:
        gl = _gl()
        vao = gl.GLuint(0)
        vbo = gl.GLuint(0)
        gl.glGenVertexArrays(1, vao)
        gl.glGenBuffers(1, vbo)

        gl.glBindVertexArray(vao.value)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo.value)
        data = (gl.GLfloat * len(QUAD_VERTICES))(*QUAD_VERTICES)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, len(QUAD_VERTICES) * _FLOAT_SIZE, data, gl.GL_STATIC_DRAW
        )

        gl.glEnableVertexAttribArray(0)
        stride = 2 * _FLOAT_SIZE
        gl.glVertexAttribPointer(0, 2, gl.GL_FLOAT, gl.GL_FALSE, stride, None)
        gl.glBindVertexArray(0)

        self._vao = vao.value
        self._vbo = vbo.value

    def draw(self, model: np.ndarray, color: Sequence[float]) -> None:
        """Draw the unit quad transformed by ``model`` in ``color``."""
        if self._closed:
            raise RuntimeError("renderer is closed")

        self.shader.use()
        self.shader.set_mat4("model", model)
        self.shader.set_vec4("color", color)
        self.shader.set_mat4("projection", self.camera.view)

        if not self._vao:
            self._create_quad()
        gl = _gl()
        gl.glBindVertexArray(self._vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, len(QUAD_VERTICES) // 2)
        gl.glBindVertexArray(0)

    def close(self) -> None:
        """Release GPU buffers and the shader; later calls do nothing."""
        if self._closed:
            return
        if self._vao:
            gl = _gl()
            gl.glDeleteVertexArrays(1, gl.GLuint(self._vao))
            gl.glDeleteBuffers(1, gl.GLuint(self._vbo))
            self._vao = 0
            self._vbo = 0
        self.shader.clear()
        self._closed = True