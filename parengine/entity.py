"""Base classes: named entities, components, resources and scripts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from parengine.enums import ComponentType, ResourceType

if TYPE_CHECKING:
    from parengine.gameobject import GameObject


class Entity:
    """Something that carries a name."""

    def __init__(self) -> None:
        self.name: str = ""


class Component(Entity):
    """A piece of behaviour or data attached to a game object."""

    def __init__(self, component_type: ComponentType) -> None:
        super().__init__()
        self.owner: GameObject | None = None
        self._component_type = component_type

    @property
    def component_type(self) -> ComponentType:
        return self._component_type

    def initialize(self) -> None:
        """Called once when the component is added."""

    def update(self) -> None:
        """Called once per frame."""

    def late_update(self) -> None:
        """Called once per frame after every update."""

    def render(self, surface: Any) -> None:
        """Draw onto the given surface."""


class Resource(Entity, ABC):
    """A loadable asset such as a texture or sound."""

    def __init__(self, resource_type: ResourceType) -> None:
        super().__init__()
        self._resource_type = resource_type
        self.path: str = ""

    @property
    def resource_type(self) -> ResourceType:
        return self._resource_type

    @abstractmethod
    def load(self, path: str) -> None:
        """Load the resource from a file; raise on failure."""


class Script(Component):
    """Base class for game-specific behaviour components."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SCRIPT)