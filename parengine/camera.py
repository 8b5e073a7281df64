"""The camera component and the renderer's main camera."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pygame

from parengine.entity import Component
from parengine.enums import ComponentType
from parengine.transform import Transform
from parengine.vector import Vector2

if TYPE_CHECKING:
    from parengine.gameobject import GameObject


class Camera(Component):
    """Maps world positions to screen positions, centred on its owner."""

    def __init__(self) -> None:
        super().__init__(ComponentType.CAMERA)
        self.target: GameObject | None = None
        self.distance: Vector2 = Vector2.ZERO
        self.resolution: Vector2 = Vector2.ZERO
        self.look_position: Vector2 = Vector2.ZERO

    def calculate_position(self, pos: Vector2) -> Vector2:
        """Convert a world position to a screen position."""
        return pos - self.distance

    def initialize(self) -> None:
        """Take the resolution from the display window, if one is open."""
        surface = pygame.display.get_surface() if pygame.display.get_init() else None
        if surface is not None:
            width, height = surface.get_size()
            self.resolution = Vector2(float(width), float(height))

    def update(self) -> None:
        if self.target is not None:
            target_transform = self.target.get_component(Transform)
            if target_transform is not None:
                self.look_position = target_transform.position
        if self.owner is None:
            raise RuntimeError("camera has no owner")
        own_transform = self.owner.get_component(Transform)
        if own_transform is None:
            raise RuntimeError("camera owner has no transform")
        self.look_position = own_transform.position
        self.distance = self.look_position - (self.resolution / 2.0)

    def render(self, surface: Any) -> None:
        """Cameras draw nothing themselves."""


@dataclass
class _RendererState:
    main_camera: Camera | None = None


_renderer = _RendererState()


def set_main_camera(camera: Camera | None) -> None:
    """Choose the camera through which objects are drawn."""
    _renderer.main_camera = camera


def get_main_camera() -> Camera | None:
    """The camera through which objects are drawn, if any."""
    return _renderer.main_camera