"""GLSL shader programs built from source files."""

from __future__ import annotations

from os import PathLike
from typing import Any, NoReturn, Sequence, Union

import numpy as np

from planar2d import config
from planar2d.logger import LogType, log

PathType = Union[str, "PathLike[str]"]


class ShaderError(RuntimeError):
    """A shader file could not be read, compiled or linked."""


def _shader_module() -> Any:
    from pyglet.graphics import shader

    return shader


def _fail(message: str) -> NoReturn:
    log(LogType.ERROR, message)
    raise ShaderError(message)


def read_shader_file(path: PathType) -> str:
    """Return the file's lines, each followed by a newline."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        message = f"Failed to read {path}"
        log(LogType.ERROR, message)
        raise ShaderError(message) from exc
    return "".join(line + "\n" for line in text.split("\n"))


def _compile_program(vertex_code: str, fragment_code: str) -> Any:
    module = _shader_module()
    stages = []
    try:
        for code, kind in ((vertex_code, "vertex"), (fragment_code, "fragment")):
            try:
                stages.append(module.Shader(code, kind))
            except module.ShaderException as exc:
                _fail("ERROR COMPILE: " + str(exc) + kind)

        try:
            program = module.ShaderProgram(*stages)
        except module.ShaderException as exc:
            _fail("ERROR LINK: " + str(exc))
    finally:
        for stage in stages:
            stage.delete()

    if not program.id:
        _fail("Shader program not created.")
    return program


class Shader:
    """A linked vertex + fragment shader program."""

    def __init__(
        self,
        vertex_path: PathType = config.VERTEX_SHADER_PATH,
        fragment_path: PathType = config.FRAGMENT_SHADER_PATH,
    ) -> None:
        self.program = 0
        self._program: Any = None
        vertex_code = read_shader_file(vertex_path)
        fragment_code = read_shader_file(fragment_path)
        self._program = _compile_program(vertex_code, fragment_code)
        self.program = self._program.id

    def use(self) -> None:
        """Make this program current."""
        if self._program is not None:
            self._program.use()

    def clear(self) -> None:
        """Delete the program if it still exists."""
        if self.program != 0 and self._program is not None:
            self._program.delete()
            self._program = None
            self.program = 0

    def _set_uniform(self, name: str, values: list) -> None:
        if self._program is None:
            return
        module = _shader_module()
        try:
            self._program[name] = values
        except (module.ShaderException, KeyError):
            # An unknown uniform is ignored, as GL does for location -1.
            pass

    def set_mat4(self, name: str, matrix: np.ndarray) -> None:
        """Upload a 4x4 matrix uniform."""
        values = np.asarray(matrix, dtype=np.float32).T.ravel().tolist()
        self._set_uniform(name, values)

    def set_vec4(self, name: str, vector: Sequence[float]) -> None:
        """Upload a 4-component vector uniform."""
        self._set_uniform(name, [float(v) for v in vector])