"""Component that draws a whole texture at its owner's position."""

from __future__ import annotations

from typing import Any

from parengine.camera import get_main_camera
from parengine.entity import Component
from parengine.enums import ComponentType
from parengine.texture import Texture, TextureType, _blit_region
from parengine.transform import Transform
from parengine.vector import Vector2

_BMP_COLORKEY = (255, 0, 255)


class SpriteRenderer(Component):
    """Draws a texture with its top-left corner at the owner's position."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SPRITE_RENDERER)
        self.texture: Texture | None = None
        self.size: Vector2 = Vector2.ONE

    def render(self, surface: Any) -> None:
        """Draw the texture; BMP magenta pixels are transparent."""
        if self.texture is None:
            raise ValueError("sprite renderer has no texture")
        if self.owner is None:
            raise RuntimeError("sprite renderer has no owner")
        transform = self.owner.get_component(Transform)
        if transform is None:
            raise RuntimeError("sprite renderer owner has no transform")
        pos = transform.position
        scale = transform.scale
        camera = get_main_camera()
        if camera is not None:
            pos = camera.calculate_position(pos)

        tex = self.texture
        if tex.image is None:
            return
        dest = (
            pos.x,
            pos.y,
            tex.width * self.size.x * scale.x,
            tex.height * self.size.y * scale.y,
        )
        if tex.texture_type is TextureType.BMP:
            area = (0, 0, tex.width * self.size.x, tex.height * self.size.y)
            _blit_region(surface, tex.image, area, dest, colorkey=_BMP_COLORKEY)
        elif tex.texture_type is TextureType.PNG:
            _blit_region(
                surface, tex.image, (0, 0, tex.width, tex.height), dest,
                pivot=(pos.x, pos.y), angle=transform.rotation,
            )