[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planar2d"
version = "0.1.0"
description = "A small 2D game engine with a camera, key bindings loaded from JSON and a player controller"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "opengl", "camera", "keybindings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
planar2d = "planar2d.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["planar2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
