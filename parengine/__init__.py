"""A small 2D game engine on pygame with scenes, layers, components, sprite animation and a demo game."""

__version__ = "0.1.0"