"""Position, rotation and scale of a game object."""

from parengine.entity import Component
from parengine.enums import ComponentType
from parengine.vector import Vector2


class Transform(Component):
    """Holds where an object is, how it is turned and how big it is."""

    def __init__(self) -> None:
        super().__init__(ComponentType.TRANSFORM)
        self.position: Vector2 = Vector2.ZERO
        self.scale: Vector2 = Vector2.ONE
        self.rotation: float = 0.0