"""Keyboard and mouse button state tracking."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Collection, Optional

import pygame


class KeyType(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    Q = auto()
    W = auto()
    E = auto()
    R = auto()
    T = auto()
    Y = auto()
    U = auto()
    I = auto()  # noqa: E741
    O = auto()  # noqa: E741
    P = auto()
    A = auto()
    S = auto()
    D = auto()
    F = auto()
    G = auto()
    H = auto()
    J = auto()
    K = auto()
    L = auto()
    Z = auto()
    X = auto()
    C = auto()
    V = auto()
    B = auto()
    N = auto()
    M = auto()
    CTRL = auto()
    LALT = auto()
    LSHIFT = auto()
    SPACE = auto()
    ENTER = auto()
    TAB = auto()
    ESC = auto()
    LBUTTON = auto()
    RBUTTON = auto()
    NUM_1 = auto()
    NUM_2 = auto()


class KeyState(Enum):
    NONE = auto()
    DOWN = auto()
    UP = auto()
    PRESS = auto()


_LETTERS = "QWERTYUIOPASDFGHJKLZXCVBNM"

_KEY_CODES: dict[KeyType, tuple[int, ...]] = {
    KeyType.LEFT: (pygame.K_LEFT,),
    KeyType.RIGHT: (pygame.K_RIGHT,),
    KeyType.UP: (pygame.K_UP,),
    KeyType.DOWN: (pygame.K_DOWN,),
    **{KeyType[ch]: (getattr(pygame, f"K_{ch.lower()}"),) for ch in _LETTERS},
    KeyType.CTRL: (pygame.K_LCTRL, pygame.K_RCTRL),
    KeyType.LALT: (pygame.K_LALT,),
    KeyType.LSHIFT: (pygame.K_LSHIFT,),
    KeyType.SPACE: (pygame.K_SPACE,),
    KeyType.ENTER: (pygame.K_RETURN,),
    KeyType.TAB: (pygame.K_TAB,),
    KeyType.ESC: (pygame.K_ESCAPE,),
    KeyType.NUM_1: (pygame.K_1,),
    KeyType.NUM_2: (pygame.K_2,),
}

_MOUSE_BUTTONS: dict[KeyType, int] = {
    KeyType.LBUTTON: 0,
    KeyType.RBUTTON: 2,
}


@dataclass
class _KeyInfo:
    state: KeyState = KeyState.NONE
    held: bool = False


class InputManager:
    """Turns raw "is held" readings into NONE / DOWN / PRESS / UP transitions."""

    def __init__(self) -> None:
        self._keys: dict[KeyType, _KeyInfo] = {key: _KeyInfo() for key in KeyType}
        self.mouse_pos: tuple[int, int] = (0, 0)

    def update(
        self,
        pressed: Collection[KeyType],
        mouse_pos: Optional[tuple[int, int]] = None,
        focused: bool = True,
    ) -> None:
        """Advance one frame given the keys currently held."""
        if not focused:
            for info in self._keys.values():
                info.held = False
                info.state = KeyState.NONE
            return

        for key, info in self._keys.items():
            if key in pressed:
                info.state = KeyState.PRESS if info.held else KeyState.DOWN
                info.held = True
            else:
                info.state = KeyState.UP if info.held else KeyState.NONE
                info.held = False

        if mouse_pos is not None:
            self.mouse_pos = (int(mouse_pos[0]), int(mouse_pos[1]))

    def poll(self) -> None:
        """Read the keyboard and mouse from pygame and update."""
        keys = pygame.key.get_pressed()
        buttons = pygame.mouse.get_pressed()
        pressed = {
            key for key, codes in _KEY_CODES.items() if any(keys[code] for code in codes)
        }
        pressed.update(key for key, index in _MOUSE_BUTTONS.items() if buttons[index])
        self.update(pressed, pygame.mouse.get_pos(), pygame.key.get_focused())

    def get_key(self, key: KeyType) -> KeyState:
        return self._keys[key].state

    def is_down(self, key: KeyType) -> bool:
        return self.get_key(key) is KeyState.DOWN

    def is_up(self, key: KeyType) -> bool:
        return self.get_key(key) is KeyState.UP

    def is_pressed(self, key: KeyType) -> bool:
        return self.get_key(key) is KeyState.PRESS