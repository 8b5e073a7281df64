"""Keyboard and mouse state tracking with per-frame transitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, ClassVar

from parengine.vector import Vector2


class KeyState(Enum):
    """Where a key is in its press cycle this frame."""

    DOWN = 0
    PRESSED = 1
    UP = 2
    NONE = 3


class KeyCode(IntEnum):
    """Keys and mouse buttons the engine tracks."""

    Q = 0
    W = 1
    E = 2
    R = 3
    T = 4
    Y = 5
    U = 6
    I = 7  # noqa: E741
    O = 8  # noqa: E741
    P = 9
    A = 10
    S = 11
    D = 12
    F = 13
    G = 14
    H = 15
    J = 16
    K = 17
    L = 18
    Z = 19
    X = 20
    C = 21
    V = 22
    B = 23
    N = 24
    M = 25
    LEFT = 26
    RIGHT = 27
    DOWN = 28
    UP = 29
    LBUTTON = 30
    MBUTTON = 31
    RBUTTON = 32


@dataclass
class Key:
    """The tracked state of one key."""

    key_code: KeyCode
    state: KeyState = KeyState.NONE
    pressed: bool = False


class Input:
    """Turns raw per-frame "is this key held" readings into down/held/up events."""

    shared: ClassVar["Input"]

    def __init__(self) -> None:
        self.keys: dict[KeyCode, Key] = {code: Key(code) for code in KeyCode}
        self.mouse_position: Vector2 = Vector2.ONE

    def update(
        self,
        is_down: Callable[[KeyCode], bool],
        focused: bool,
        mouse_position: Vector2,
    ) -> None:
        """Advance every key by one frame.

        While the window has focus each key follows ``is_down`` and the mouse
        position is taken over; without focus all keys are released.
        """
        if not focused:
            self._clear_keys()
            return
        for key in self.keys.values():
            if is_down(key.key_code):
                key.state = KeyState.PRESSED if key.pressed else KeyState.DOWN
                key.pressed = True
            else:
                key.state = KeyState.UP if key.pressed else KeyState.NONE
                key.pressed = False
        self.mouse_position = mouse_position

    def _clear_keys(self) -> None:
        for key in self.keys.values():
            if key.state in (KeyState.DOWN, KeyState.PRESSED):
                key.state = KeyState.UP
            elif key.state is KeyState.UP:
                key.state = KeyState.NONE
            key.pressed = False

    def get_key_down(self, code: KeyCode) -> bool:
        """True on the frame the key went down."""
        return self.keys[code].state is KeyState.DOWN

    def get_key_up(self, code: KeyCode) -> bool:
        """True on the frame the key was released."""
        return self.keys[code].state is KeyState.UP

    def get_key(self, code: KeyCode) -> bool:
        """True while the key is held after its first frame."""
        return self.keys[code].state is KeyState.PRESSED


Input.shared = Input()