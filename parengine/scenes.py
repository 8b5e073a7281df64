"""The title and play scenes of the game and their registration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

import pygame

from parengine.animation import Animator
from parengine.camera import Camera, set_main_camera
from parengine.cat import Cat, CatScript
from parengine.enums import LayerType
from parengine.gameobject import GameObject
from parengine.inputs import Input, KeyCode
from parengine.player import Player, PlayerScript
from parengine.scene import Scene, SceneManager, instantiate
from parengine.texture import Texture
from parengine.transform import Transform
from parengine.vector import Vector2

TITLE_SCENE = "TitleScene"
PLAY_SCENE = "PlayScene"

_TITLE_TEXT = "Title Scene"
_TEXT_COLOR = (0, 0, 0)
_TEXT_BACKGROUND = (255, 255, 255)
_FONT_SIZE = 18

_CAT_FRAME = Vector2(32.0, 32.0)
_CAT_ANIMATIONS = (
    ("DownWalk", 0.0),
    ("RightWalk", 32.0),
    ("UpWalk", 64.0),
    ("LeftWalk", 96.0),
    ("SitDown", 128.0),
    ("Grooming", 160.0),
    ("LayDown", 192.0),
)


class TitleScene(Scene):
    """The title screen; N switches to the play scene."""

    _font: ClassVar[Any] = None

    def __init__(self, manager: SceneManager, input: Input | None = None) -> None:
        super().__init__()
        self.manager = manager
        self.input = input

    def late_update(self) -> None:
        super().late_update()
        inp = self.input if self.input is not None else Input.shared
        if inp.get_key_down(KeyCode.N):
            self.manager.load_scene(PLAY_SCENE)

    def render(self, surface: Any) -> None:
        super().render(surface)
        if not pygame.font.get_init():
            pygame.font.init()
        if TitleScene._font is None:
            TitleScene._font = pygame.font.Font(None, _FONT_SIZE)
        text = TitleScene._font.render(_TITLE_TEXT, True, _TEXT_COLOR, _TEXT_BACKGROUND)
        surface.blit(text, (0, 0))


class PlayScene(Scene):
    """The play field with a camera, the player and a cat; N returns to the title."""

    def __init__(
        self,
        manager: SceneManager,
        textures: Mapping[str, Texture] | None = None,
        input: Input | None = None,
    ) -> None:
        super().__init__()
        self.manager = manager
        self.textures: Mapping[str, Texture] = textures if textures is not None else {}
        self.input = input
        self.camera: Camera | None = None
        self.player: Player | None = None
        self.cat: Cat | None = None

    def initialize(self) -> None:
        camera_object = instantiate(GameObject, LayerType.NONE, Vector2(344.0, 442.0), self.manager)
        self.camera = camera_object.add_component(Camera)
        set_main_camera(self.camera)

        player = instantiate(Player, LayerType.PLAYER, None, self.manager)
        player.add_component(PlayerScript)
        player_texture = self.textures.get("Player")
        player_animator = player.add_component(Animator)
        player_animator.create_animation(
            "Idle", player_texture,
            Vector2(2000.0, 250.0), Vector2(250.0, 250.0), Vector2.ZERO, 1, 0.1,
        )
        player_animator.create_animation(
            "FrontGiveWater", player_texture,
            Vector2(0.0, 2000.0), Vector2(250.0, 250.0), Vector2.ZERO, 12, 0.1,
        )
        player_animator.play_animation("Idle", False)
        player_transform = player.get_component(Transform)
        assert player_transform is not None
        player_transform.position = Vector2(100.0, 100.0)
        self.player = player

        cat = instantiate(Cat, LayerType.ANIMAL, None, self.manager)
        cat.add_component(CatScript)
        cat_texture = self.textures.get("Cat")
        cat_animator = cat.add_component(Animator)
        for name, top in _CAT_ANIMATIONS:
            cat_animator.create_animation(
                name, cat_texture, Vector2(0.0, top), _CAT_FRAME, Vector2.ZERO, 4, 0.1
            )
        cat_animator.play_animation("SitDown", False)
        cat_transform = cat.get_component(Transform)
        assert cat_transform is not None
        cat_transform.position = Vector2(200.0, 200.0)
        cat_transform.scale = Vector2(2.0, 2.0)
        self.cat = cat

        super().initialize()

    def late_update(self) -> None:
        super().late_update()
        inp = self.input if self.input is not None else Input.shared
        if inp.get_key_down(KeyCode.N):
            self.manager.load_scene(TITLE_SCENE)


def load_scenes(manager: SceneManager, textures: Mapping[str, Texture]) -> None:
    """Create the title and play scenes and start in the play scene."""
    manager.create_scene(TITLE_SCENE, lambda: TitleScene(manager))
    manager.create_scene(PLAY_SCENE, lambda: PlayScene(manager, textures))
    manager.load_scene(PLAY_SCENE)