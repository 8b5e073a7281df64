"""The player game object and the script that controls it."""

from __future__ import annotations

from enum import Enum

from parengine.animation import Animator
from parengine.entity import Script
from parengine.gameobject import GameObject
from parengine.inputs import Input, KeyCode
from parengine.timer import Time
from parengine.transform import Transform
from parengine.vector import Vector2

_SPEED = 100.0


class Player(GameObject):
    """The player; its behaviour comes from an attached PlayerScript."""


class PlayerState(Enum):
    """What the player is doing."""

    IDLE = 0
    WALK = 1
    SLEEP = 2
    GIVE_WATER = 3
    ATTACK = 4


class PlayerScript(Script):
    """Reacts to input: waters on mouse click and walks with W, A, S and D."""

    def __init__(self) -> None:
        super().__init__()
        self.state: PlayerState = PlayerState.IDLE
        self.animator: Animator | None = None
        self.input: Input | None = None
        self.clock: Time | None = None

    def _input(self) -> Input:
        return self.input if self.input is not None else Input.shared

    def _delta(self) -> float:
        return (self.clock if self.clock is not None else Time.shared).delta_time

    def _require_animator(self) -> Animator:
        if self.animator is None:
            raise RuntimeError("player has no animator")
        return self.animator

    def update(self) -> None:
        if self.owner is None:
            raise RuntimeError("player script has no owner")
        if self.animator is None:
            self.animator = self.owner.get_component(Animator)
        if self.state is PlayerState.IDLE:
            self._idle()
        elif self.state is PlayerState.WALK:
            self._move()
        elif self.state is PlayerState.GIVE_WATER:
            self._give_water()

    def _idle(self) -> None:
        if self._input().get_key(KeyCode.LBUTTON):
            self.state = PlayerState.GIVE_WATER
            self._require_animator().play_animation("FrontGiveWater", False)

    def _move(self) -> None:
        assert self.owner is not None
        transform = self.owner.get_component(Transform)
        if transform is None:
            raise RuntimeError("player has no transform")
        inp = self._input()
        distance = _SPEED * self._delta()
        dx = float(inp.get_key(KeyCode.D)) - float(inp.get_key(KeyCode.A))
        dy = float(inp.get_key(KeyCode.S)) - float(inp.get_key(KeyCode.W))
        pos = transform.position
        transform.position = Vector2(pos.x + dx * distance, pos.y + dy * distance)

        if any(inp.get_key_up(code) for code in (KeyCode.D, KeyCode.A, KeyCode.W, KeyCode.S)):
            self.state = PlayerState.IDLE
            self._require_animator().play_animation("SitDown", False)

    def _give_water(self) -> None:
        animator = self._require_animator()
        if animator.is_complete:
            self.state = PlayerState.IDLE
            animator.play_animation("Idle", False)