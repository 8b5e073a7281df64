"""Game objects: containers of components."""

from __future__ import annotations

from typing import Any, TypeVar

from parengine.entity import Component
from parengine.enums import ComponentType
from parengine.transform import Transform

C = TypeVar("C", bound=Component)


class GameObject:
    """An object in a scene, built from at most one component of each type."""

    def __init__(self) -> None:
        self._components: dict[ComponentType, Component] = {}
        self.add_component(Transform)

    @property
    def components(self) -> tuple[Component, ...]:
        """The attached components, in component-type order."""
        return tuple(self._components[t] for t in sorted(self._components))

    def initialize(self) -> None:
        for comp in self.components:
            comp.initialize()

    def update(self) -> None:
        for comp in self.components:
            comp.update()

    def late_update(self) -> None:
        for comp in self.components:
            comp.late_update()

    def render(self, surface: Any) -> None:
        for comp in self.components:
            comp.render(surface)

    def add_component(self, component_type: type[C]) -> C:
        """Create, initialize and attach a component, replacing one of the same kind."""
        comp = component_type()
        comp.initialize()
        comp.owner = self
        self._components[comp.component_type] = comp
        return comp

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the first attached component that is an instance of the class."""
        for comp in self.components:
            if isinstance(comp, component_type):
                return comp
        return None