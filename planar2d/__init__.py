"""A small 2D game engine: camera, input, key bindings, shapes, shaders and rendering."""

__version__ = "0.1.0"