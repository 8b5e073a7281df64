"""The cat game object and the script that wanders it around."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any

from parengine.animation import Animator
from parengine.entity import Script
from parengine.gameobject import GameObject
from parengine.timer import Time
from parengine.transform import Transform
from parengine.vector import Vector2

_SIT_DOWN_SECONDS = 3.0
_WALK_SECONDS = 2.0
_SPEED = 100.0


class Cat(GameObject):
    """A cat; its behaviour comes from an attached CatScript."""


class CatState(Enum):
    """What the cat is doing."""

    SIT_DOWN = 0
    WALK = 1
    SLEEP = 2
    LAY_DOWN = 3
    ATTACK = 4


class Direction(Enum):
    """The way the cat walks."""

    LEFT = 0
    RIGHT = 1
    DOWN = 2
    UP = 3
    END = 4


_WALK_ANIMATIONS = {
    Direction.LEFT: "LeftWalk",
    Direction.RIGHT: "RightWalk",
    Direction.DOWN: "DownWalk",
    Direction.UP: "UpWalk",
}

_STEPS = {
    Direction.LEFT: Vector2(-1.0, 0.0),
    Direction.RIGHT: Vector2(1.0, 0.0),
    Direction.DOWN: Vector2(0.0, 1.0),
    Direction.UP: Vector2(0.0, -1.0),
}


class CatScript(Script):
    """Sits for a while, walks in a random direction, then sits or lies down."""

    def __init__(self) -> None:
        super().__init__()
        self.state: CatState = CatState.SIT_DOWN
        self.animator: Animator | None = None
        self.direction: Direction = Direction.LEFT
        self.time: float = 0.0
        self.clock: Time | None = None
        self.rng: Any = random.Random()

    def _delta(self) -> float:
        return (self.clock if self.clock is not None else Time.shared).delta_time

    def _require_animator(self) -> Animator:
        if self.animator is None:
            raise RuntimeError("cat has no animator")
        return self.animator

    def update(self) -> None:
        if self.owner is None:
            raise RuntimeError("cat script has no owner")
        if self.animator is None:
            self.animator = self.owner.get_component(Animator)
        if self.state is CatState.SIT_DOWN:
            self._sit_down()
        elif self.state is CatState.WALK:
            self._move()

    def _sit_down(self) -> None:
        self.time += self._delta()
        if self.time > _SIT_DOWN_SECONDS:
            self.state = CatState.WALK
            self.direction = Direction(self.rng.randrange(4))
            self.play_walk_animation(self.direction)
            self.time = 0.0

    def _move(self) -> None:
        self.time += self._delta()
        if self.time > _WALK_SECONDS:
            animator = self._require_animator()
            if self.rng.randrange(2):
                self.state = CatState.LAY_DOWN
                animator.play_animation("LayDown", False)
            else:
                self.state = CatState.SIT_DOWN
                animator.play_animation("SitDown", False)

        assert self.owner is not None
        transform = self.owner.get_component(Transform)
        if transform is None:
            raise RuntimeError("cat has no transform")
        self._translate(transform)

    def play_walk_animation(self, direction: Direction) -> None:
        """Play the looping walk animation for a direction."""
        name = _WALK_ANIMATIONS.get(direction)
        if name is None:
            raise ValueError(f"no walk animation for {direction}")
        self._require_animator().play_animation(name, True)

    def _translate(self, transform: Transform) -> None:
        step = _STEPS.get(self.direction)
        if step is None:
            raise ValueError(f"cannot walk towards {self.direction}")
        distance = _SPEED * self._delta()
        pos = transform.position
        transform.position = Vector2(pos.x + step.x * distance, pos.y + step.y * distance)