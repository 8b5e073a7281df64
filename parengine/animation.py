"""Sprite-sheet animations and the animator component that plays them."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, Callable

from parengine.camera import get_main_camera
from parengine.entity import Component, Resource
from parengine.enums import ComponentType, ResourceType
from parengine.texture import Texture, TextureType, _blit_region
from parengine.timer import Time
from parengine.transform import Transform
from parengine.vector import Vector2


@dataclass
class Sprite:
    """One frame of a sprite sheet."""

    left_top: Vector2 = Vector2.ZERO
    size: Vector2 = Vector2.ZERO
    offset: Vector2 = Vector2.ZERO
    duration: float = 0.0


class Animation(Resource):
    """A sequence of frames cut from one sprite sheet."""

    def __init__(self, clock: Time | None = None) -> None:
        super().__init__(ResourceType.ANIMATION)
        self.animator: Animator | None = None
        self.texture: Texture | None = None
        self.clock = clock
        self._sheet: list[Sprite] = []
        self.index: int = -1
        self.time: float = 0.0
        self.complete: bool = False

    @property
    def sprites(self) -> tuple[Sprite, ...]:
        return tuple(self._sheet)

    @property
    def is_complete(self) -> bool:
        return self.complete

    def load(self, path: str) -> None:
        raise io.UnsupportedOperation("animations are built from sprite sheets, not loaded from files")

    def _delta(self) -> float:
        return (self.clock if self.clock is not None else Time.shared).delta_time

    def update(self) -> None:
        """Advance to the next frame once the current one has lasted its duration."""
        if self.complete:
            return
        self.time += self._delta()
        if self._sheet[self.index].duration < self.time:
            self.time = 0.0
            if self.index < len(self._sheet) - 1:
                self.index += 1
            else:
                self.complete = True

    def render(self, surface: Any) -> None:
        """Draw the current frame centred on the owner's position."""
        if self.texture is None or self.texture.image is None:
            return
        if self.animator is None or self.animator.owner is None:
            raise RuntimeError("animation is not attached to an animated object")
        transform = self.animator.owner.get_component(Transform)
        if transform is None:
            raise RuntimeError("animated object has no transform")
        pos = transform.position
        scale = transform.scale
        camera = get_main_camera()
        if camera is not None:
            pos = camera.calculate_position(pos)

        sprite = self._sheet[self.index]
        area = (sprite.left_top.x, sprite.left_top.y, sprite.size.x, sprite.size.y)
        dest = (
            pos.x - sprite.size.x / 2.0,
            pos.y - sprite.size.y / 2.0,
            sprite.size.x * scale.x,
            sprite.size.y * scale.y,
        )
        if self.texture.texture_type is TextureType.BMP:
            _blit_region(surface, self.texture.image, area, dest)
        elif self.texture.texture_type is TextureType.PNG:
            _blit_region(
                surface, self.texture.image, area, dest,
                pivot=(pos.x, pos.y), angle=transform.rotation,
            )

    def create_animation(
        self,
        name: str,
        sprite_sheet: Texture | None,
        left_top: Vector2,
        size: Vector2,
        offset: Vector2,
        sprite_length: int,
        duration: float,
    ) -> None:
        """Append ``sprite_length`` frames laid out left to right from ``left_top``."""
        self.texture = sprite_sheet
        self._sheet.extend(
            Sprite(
                left_top=Vector2(left_top.x + size.x * i, left_top.y),
                size=size,
                offset=offset,
                duration=duration,
            )
            for i in range(sprite_length)
        )

    def reset(self) -> None:
        """Rewind to the first frame."""
        self.time = 0.0
        self.index = 0
        self.complete = False


@dataclass
class AnimatorEvent:
    """A callback that may be attached to an animation moment."""

    func: Callable[[], None] | None = None

    def __call__(self) -> None:
        if self.func is not None:
            self.func()


@dataclass
class AnimatorEvents:
    """The start, complete and end callbacks of one animation."""

    start: AnimatorEvent = field(default_factory=AnimatorEvent)
    complete: AnimatorEvent = field(default_factory=AnimatorEvent)
    end: AnimatorEvent = field(default_factory=AnimatorEvent)


class Animator(Component):
    """Holds named animations and plays one of them."""

    def __init__(self) -> None:
        super().__init__(ComponentType.ANIMATOR)
        self.animations: dict[str, Animation] = {}
        self.active_animation: Animation | None = None
        self.loop: bool = False
        self.events: dict[str, AnimatorEvents] = {}
        self.clock: Time | None = None

    @property
    def is_complete(self) -> bool:
        if self.active_animation is None:
            raise RuntimeError("no animation is playing")
        return self.active_animation.is_complete

    def update(self) -> None:
        if self.active_animation is None:
            return
        self.active_animation.update()
        if self.active_animation.is_complete and self.loop:
            self.active_animation.reset()

    def render(self, surface: Any) -> None:
        if self.active_animation is not None:
            self.active_animation.render(surface)

    def create_animation(
        self,
        name: str,
        sprite_sheet: Texture | None,
        left_top: Vector2,
        size: Vector2,
        offset: Vector2,
        sprite_length: int,
        duration: float,
    ) -> None:
        """Build and register an animation; an existing name is left as it is."""
        if name in self.animations:
            return
        animation = Animation(self.clock)
        animation.name = name
        animation.create_animation(name, sprite_sheet, left_top, size, offset, sprite_length, duration)
        animation.animator = self
        self.animations[name] = animation

    def find_animation(self, name: str) -> Animation | None:
        return self.animations.get(name)

    def play_animation(self, name: str, loop: bool = True) -> None:
        """Start the named animation from its first frame; unknown names are ignored."""
        animation = self.find_animation(name)
        if animation is None:
            return
        self.active_animation = animation
        animation.reset()
        self.loop = loop