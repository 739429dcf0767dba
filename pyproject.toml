[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetris3d"
version = "0.1.0"
description = "A small three-dimensional falling-block puzzle game rendered with OpenGL"
requires-python = ">=3.10"
keywords = ["game", "tetris", "3d", "puzzle", "opengl", "pyglet"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tetris3d = "tetris3d.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tetris3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
