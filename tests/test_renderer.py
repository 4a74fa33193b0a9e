import numpy as np
import pytest

from planar2d.renderer import Renderer2D


class RecordingShader:
    def __init__(self):
        self.calls = []

    def use(self):
        self.calls.append(("use",))

    def clear(self):
        self.calls.append(("clear",))

    def set_mat4(self, name, matrix):
        self.calls.append(("mat4", name))

    def set_vec4(self, name, vector):
        self.calls.append(("vec4", name))


class StillCamera:
    view = np.eye(4, dtype=np.float32)


def test_renderer_keeps_given_camera_and_shader():
    shader = RecordingShader()
    camera = StillCamera()
    renderer = Renderer2D(camera, shader)
    assert renderer.shader is shader
    assert renderer.camera is camera


def test_close_clears_shader_once():
    shader = RecordingShader()
    renderer = Renderer2D(StillCamera(), shader)
    renderer.close()
    renderer.close()
    assert shader.calls == [("clear",)]


def test_draw_after_close_raises_without_touching_shader():
    shader = RecordingShader()
    renderer = Renderer2D(StillCamera(), shader)
    renderer.close()
    with pytest.raises(RuntimeError):
        renderer.draw(np.eye(4), (0.0, 0.0, 1.0, 1.0))
    assert ("use",) not in shader.calls