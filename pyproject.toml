[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parengine"
version = "0.1.0"
description = "A small 2D game engine on pygame with scenes, layers, components, sprite-sheet animation and a demo with a player and a wandering cat"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "sprite", "animation", "scene", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
parengine = "parengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["parengine"]

[tool.pytest.ini_options]
addopts = "-ra"
