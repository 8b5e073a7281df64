"""The application loop, resource loading and the game's entry point."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Callable

import pygame

from parengine.inputs import Input, KeyCode
from parengine.scene import SceneManager
from parengine.scenes import load_scenes
from parengine.texture import Texture, TextureLoadError
from parengine.timer import Time
from parengine.vector import Vector2

WINDOW_WIDTH = 672
WINDOW_HEIGHT = 846
WINDOW_TITLE = "ParEngine"
DEFAULT_RESOURCES = "Resources"

_CLEAR_COLOR = (255, 255, 255)

_TEXTURE_FILES = {
    "Cat": "ChickenAlpha.bmp",
    "Player": "Player.bmp",
}

_KEYBOARD = {code: getattr(pygame, f"K_{code.name.lower()}") for code in KeyCode if len(code.name) == 1}
_KEYBOARD.update(
    {
        KeyCode.LEFT: pygame.K_LEFT,
        KeyCode.RIGHT: pygame.K_RIGHT,
        KeyCode.DOWN: pygame.K_DOWN,
        KeyCode.UP: pygame.K_UP,
    }
)
_MOUSE_BUTTONS = {KeyCode.LBUTTON: 0, KeyCode.MBUTTON: 1, KeyCode.RBUTTON: 2}

Poll = Callable[[], tuple[Callable[[KeyCode], bool], bool, Vector2]]


def _poll_pygame() -> tuple[Callable[[KeyCode], bool], bool, Vector2]:
    """Read keyboard, mouse and focus state from pygame."""
    pressed = pygame.key.get_pressed()
    buttons = pygame.mouse.get_pressed()

    def is_down(code: KeyCode) -> bool:
        if code in _MOUSE_BUTTONS:
            return bool(buttons[_MOUSE_BUTTONS[code]])
        return bool(pressed[_KEYBOARD[code]])

    x, y = pygame.mouse.get_pos()
    return is_down, bool(pygame.key.get_focused()), Vector2(float(x), float(y))


class Application:
    """Drives input, timing and the active scene, drawing through a back buffer."""

    def __init__(
        self,
        scenes: SceneManager | None = None,
        clock: Time | None = None,
        input: Input | None = None,
        poll: Poll | None = None,
    ) -> None:
        self.scenes = scenes if scenes is not None else SceneManager()
        self.clock = clock if clock is not None else Time.shared
        self.input = input if input is not None else Input.shared
        self._poll = poll if poll is not None else _poll_pygame
        self.surface: Any = None
        self.back_buffer: Any = None
        self.width: int = 0
        self.height: int = 0

    def initialize(self, surface: Any) -> None:
        """Attach the target surface, create the back buffer and start the clock."""
        self.surface = surface
        self.width, self.height = surface.get_size()
        self.back_buffer = pygame.Surface((self.width, self.height))
        self.clock.initialize()

    def run(self, now: float | None = None) -> None:
        """Run one frame."""
        self.update(now)
        self.late_update()
        self.render()

    def update(self, now: float | None = None) -> None:
        is_down, focused, mouse_position = self._poll()
        self.input.update(is_down, focused, mouse_position)
        self.clock.update(now)
        self.scenes.update()

    def late_update(self) -> None:
        self.scenes.late_update()

    def render(self) -> None:
        """Draw the frame into the back buffer, then copy it to the target."""
        if self.surface is None or self.back_buffer is None:
            raise RuntimeError("application is not initialized")
        self.back_buffer.fill(_CLEAR_COLOR)
        self.clock.render(self.back_buffer)
        self.scenes.render(self.back_buffer)
        self.surface.blit(self.back_buffer, (0, 0))


def load_textures(directory: str | os.PathLike[str]) -> dict[str, Texture]:
    """Load the game's textures from a directory, keyed by name."""
    textures: dict[str, Texture] = {}
    for name, filename in _TEXTURE_FILES.items():
        texture = Texture()
        texture.name = name
        texture.load(os.path.join(os.fspath(directory), filename))
        textures[name] = texture
    return textures


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="parengine", description="Run the game.")
    parser.add_argument(
        "--resources", default=DEFAULT_RESOURCES, help="directory holding the texture files"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        app = Application()
        app.initialize(screen)
        try:
            textures = load_textures(args.resources)
        except TextureLoadError as exc:
            print(f"parengine: {exc}", file=sys.stderr)
            return 1
        load_scenes(app.scenes, textures)

        running = True
        while running:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                running = False
                continue
            app.run()
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0