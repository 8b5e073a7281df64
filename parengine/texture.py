"""Image resources loaded from BMP or PNG files."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any

import pygame

from parengine.entity import Resource
from parengine.enums import ResourceType


class TextureType(Enum):
    """The file format a texture was loaded from."""

    BMP = 0
    PNG = 1
    NONE = 2


class TextureLoadError(Exception):
    """Raised when a texture file cannot be read."""


_EXTENSIONS = {"bmp": TextureType.BMP, "png": TextureType.PNG}


class Texture(Resource):
    """An image with its size and format."""

    def __init__(self) -> None:
        super().__init__(ResourceType.TEXTURE)
        self.texture_type: TextureType = TextureType.NONE
        self.image: Any = None
        self.width: int = 0
        self.height: int = 0

    def load(self, path: str | os.PathLike[str]) -> None:
        """Load a ``.bmp`` or ``.png`` file; other extensions are left unloaded."""
        path = os.fspath(path)
        texture_type = _EXTENSIONS.get(path.rsplit(".", 1)[-1])
        if texture_type is None:
            return
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise TextureLoadError(f"cannot load texture {path!r}") from exc
        self.texture_type = texture_type
        self.image = image
        self.width, self.height = image.get_size()
        self.path = path


def _blit_region(
    target: Any,
    image: Any,
    area: tuple[float, float, float, float],
    dest: tuple[float, float, float, float],
    pivot: tuple[float, float] | None = None,
    angle: float = 0.0,
    colorkey: tuple[int, int, int] | None = None,
) -> None:
    """Copy ``area`` of ``image`` into the ``dest`` rectangle of ``target``.

    The copy is stretched to the destination size and, when ``angle`` is
    non-zero, turned clockwise by that many degrees around ``pivot``.
    """
    source = pygame.Rect(*(int(v) for v in area)).clip(image.get_rect())
    dx, dy, dw, dh = dest
    size = (round(dw), round(dh))
    if source.w <= 0 or source.h <= 0 or size[0] <= 0 or size[1] <= 0:
        return
    frame = image.subsurface(source).copy()
    if size != source.size:
        frame = pygame.transform.scale(frame, size)
    if colorkey is not None:
        frame.set_colorkey(colorkey)
    if angle and pivot is not None:
        piv = pygame.math.Vector2(pivot)
        center = pygame.math.Vector2(dx + size[0] / 2.0, dy + size[1] / 2.0)
        rotated = pygame.transform.rotate(frame, -angle)
        new_center = piv + (center - piv).rotate(angle)
        target.blit(rotated, rotated.get_rect(center=(round(new_center.x), round(new_center.y))))
    else:
        target.blit(frame, (round(dx), round(dy)))