"""Layers, scenes, the scene manager and object instantiation."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from parengine.entity import Entity
from parengine.enums import LayerType
from parengine.gameobject import GameObject
from parengine.transform import Transform
from parengine.vector import Vector2

G = TypeVar("G", bound=GameObject)


class Layer(Entity):
    """An ordered collection of game objects."""

    def __init__(self) -> None:
        super().__init__()
        self._game_objects: list[GameObject] = []

    @property
    def game_objects(self) -> tuple[GameObject, ...]:
        return tuple(self._game_objects)

    def initialize(self) -> None:
        for obj in self._game_objects:
            obj.initialize()

    def update(self) -> None:
        for obj in self._game_objects:
            obj.update()

    def late_update(self) -> None:
        for obj in self._game_objects:
            obj.late_update()

    def render(self, surface: Any) -> None:
        for obj in self._game_objects:
            obj.render(surface)

    def add_game_object(self, game_object: GameObject | None) -> None:
        """Append a game object; None is ignored."""
        if game_object is None:
            return
        self._game_objects.append(game_object)


class Scene(Entity):
    """A set of layers processed in layer order."""

    def __init__(self) -> None:
        super().__init__()
        self._layers: list[Layer] = [Layer() for _ in range(LayerType.MAX)]
        self.entered: bool = False

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    def initialize(self) -> None:
        for layer in self._layers:
            layer.initialize()

    def update(self) -> None:
        for layer in self._layers:
            layer.update()

    def late_update(self) -> None:
        for layer in self._layers:
            layer.late_update()

    def render(self, surface: Any) -> None:
        for layer in self._layers:
            layer.render(surface)

    def on_enter(self) -> None:
        """Called when the scene becomes active; marks it as entered."""
        self.entered = True

    def on_exit(self) -> None:
        """Called when another scene is being loaded; marks it as left."""
        self.entered = False

    def add_game_object(self, game_object: GameObject, layer_type: LayerType) -> None:
        self._layers[layer_type].add_game_object(game_object)

    def get_layer(self, layer_type: LayerType) -> Layer:
        return self._layers[layer_type]


class SceneManager:
    """Keeps named scenes and drives the active one."""

    def __init__(self) -> None:
        self._scenes: dict[str, Scene] = {}
        self.active_scene: Scene | None = None

    @property
    def scenes(self) -> dict[str, Scene]:
        return dict(self._scenes)

    def create_scene(self, name: str, factory: Callable[[], Scene]) -> Scene:
        """Build a scene, make it active, initialize it and register it.

        A name that is already registered keeps its first scene.
        """
        scene = factory()
        scene.name = name
        self.active_scene = scene
        scene.initialize()
        self._scenes.setdefault(name, scene)
        return scene

    def load_scene(self, name: str) -> Scene | None:
        """Switch to the named scene; return None if it is unknown."""
        if self.active_scene is not None:
            self.active_scene.on_exit()
        scene = self._scenes.get(name)
        if scene is None:
            return None
        self.active_scene = scene
        scene.on_enter()
        return scene

    def _require_active(self) -> Scene:
        if self.active_scene is None:
            raise RuntimeError("no active scene")
        return self.active_scene

    def update(self) -> None:
        self._require_active().update()

    def late_update(self) -> None:
        self._require_active().late_update()

    def render(self, surface: Any) -> None:
        self._require_active().render(surface)


def instantiate(
    cls: Callable[[], G],
    layer_type: LayerType,
    position: Vector2 | None,
    manager: SceneManager,
) -> G:
    """Create a game object in the active scene's layer, optionally placed."""
    scene = manager.active_scene
    if scene is None:
        raise RuntimeError("no active scene")
    game_object = cls()
    scene.get_layer(layer_type).add_game_object(game_object)
    if position is not None:
        transform = game_object.get_component(Transform)
        if transform is not None:
            transform.position = position
    return game_object