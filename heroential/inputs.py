"""Keyboard and mouse state tracked from frame to frame."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterable

from heroential.vector import Vec2Int

KEY_TYPE_COUNT = 256


class KeyType(IntEnum):
    """Virtual key codes the game reads."""

    LEFT_MOUSE = 0x01
    RIGHT_MOUSE = 0x02

    UP = 0x26
    DOWN = 0x28
    LEFT = 0x25
    RIGHT = 0x27
    SPACE_BAR = 0x20

    KEY_1 = ord("1")
    KEY_2 = ord("2")
    KEY_3 = ord("3")
    KEY_4 = ord("4")

    Q = ord("Q")
    W = ord("W")
    E = ord("E")
    R = ord("R")
    A = ord("A")
    S = ord("S")
    D = ord("D")
    F = ord("F")
    G = ord("G")


class KeyState(Enum):
    NONE = 0
    PRESS = 1
    DOWN = 2
    UP = 3


_HELD = (KeyState.PRESS, KeyState.DOWN)


def _next_state(state: KeyState, held: bool) -> KeyState:
    was_held = state in _HELD
    if held:
        return KeyState.PRESS if was_held else KeyState.DOWN
    return KeyState.UP if was_held else KeyState.NONE


class InputManager:
    """Tracks per-key state transitions and the mouse position."""

    def __init__(self):
        self._states = [KeyState.NONE] * KEY_TYPE_COUNT
        self.mouse_pos = Vec2Int()

    def update(self, pressed: Iterable[int], mouse_pos) -> None:
        """Advance one frame given the key codes held now and the mouse position."""
        held = frozenset(int(code) for code in pressed)
        self._states = [_next_state(state, code in held) for code, state in enumerate(self._states)]
        self.mouse_pos = Vec2Int(*mouse_pos)

    def state(self, key: int) -> KeyState:
        return self._states[int(key)]

    def button(self, key: int) -> bool:
        """True while a key stays held after its first frame."""
        return self.state(key) is KeyState.PRESS

    def button_down(self, key: int) -> bool:
        """True on the first frame a key is held."""
        return self.state(key) is KeyState.DOWN

    def button_up(self, key: int) -> bool:
        """True on the frame a key is released."""
        return self.state(key) is KeyState.UP