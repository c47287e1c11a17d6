"""Engine-level input identifiers and their mapping to pygame."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

import pygame


class InputKey(enum.Enum):
    """Keyboard keys the engine understands."""

    A_KEY = enum.auto()
    B_KEY = enum.auto()
    C_KEY = enum.auto()
    D_KEY = enum.auto()
    E_KEY = enum.auto()
    F_KEY = enum.auto()
    G_KEY = enum.auto()
    H_KEY = enum.auto()
    I_KEY = enum.auto()
    J_KEY = enum.auto()
    K_KEY = enum.auto()
    L_KEY = enum.auto()
    M_KEY = enum.auto()
    N_KEY = enum.auto()
    O_KEY = enum.auto()
    P_KEY = enum.auto()
    Q_KEY = enum.auto()
    R_KEY = enum.auto()
    S_KEY = enum.auto()
    T_KEY = enum.auto()
    U_KEY = enum.auto()
    V_KEY = enum.auto()
    W_KEY = enum.auto()
    X_KEY = enum.auto()
    Y_KEY = enum.auto()
    Z_KEY = enum.auto()

    UP_ARROW = enum.auto()
    DOWN_ARROW = enum.auto()
    LEFT_ARROW = enum.auto()
    RIGHT_ARROW = enum.auto()

    NUMPAD_0 = enum.auto()
    NUMPAD_1 = enum.auto()
    NUMPAD_2 = enum.auto()
    NUMPAD_3 = enum.auto()
    NUMPAD_4 = enum.auto()
    NUMPAD_5 = enum.auto()
    NUMPAD_6 = enum.auto()
    NUMPAD_7 = enum.auto()
    NUMPAD_8 = enum.auto()
    NUMPAD_9 = enum.auto()

    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    ENTER = enum.auto()
    ESCAPE = enum.auto()
    LEFT_SHIFT = enum.auto()
    RIGHT_SHIFT = enum.auto()
    LEFT_CONTROL = enum.auto()
    RIGHT_CONTROL = enum.auto()
    LEFT_ALT = enum.auto()
    RIGHT_ALT = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    INSERT = enum.auto()
    SPACE = enum.auto()
    TAB = enum.auto()

    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()


class MouseButton(enum.Enum):
    """Mouse buttons the engine understands."""

    LEFT_MOUSE_BUTTON = enum.auto()
    RIGHT_MOUSE_BUTTON = enum.auto()
    MIDDLE_MOUSE_BUTTON = enum.auto()


def _build_key_map() -> dict[InputKey, int]:
    letters = {
        InputKey[f"{ch}_KEY"]: getattr(pygame, f"K_{ch.lower()}")
        for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    }
    functions = {InputKey[f"F{n}"]: getattr(pygame, f"K_F{n}") for n in range(1, 13)}
    others = {
        InputKey.SPACE: pygame.K_SPACE,
        InputKey.ENTER: pygame.K_RETURN,
        InputKey.ESCAPE: pygame.K_ESCAPE,
        InputKey.BACKSPACE: pygame.K_BACKSPACE,
        InputKey.TAB: pygame.K_TAB,
        InputKey.LEFT_SHIFT: pygame.K_LSHIFT,
        InputKey.RIGHT_SHIFT: pygame.K_RSHIFT,
        InputKey.LEFT_CONTROL: pygame.K_LCTRL,
        InputKey.RIGHT_CONTROL: pygame.K_RCTRL,
        InputKey.LEFT_ALT: pygame.K_LALT,
        InputKey.RIGHT_ALT: pygame.K_RALT,
        InputKey.INSERT: pygame.K_INSERT,
        InputKey.DELETE: pygame.K_DELETE,
        InputKey.HOME: pygame.K_HOME,
        InputKey.END: pygame.K_END,
        InputKey.PAGE_UP: pygame.K_PAGEUP,
        InputKey.PAGE_DOWN: pygame.K_PAGEDOWN,
    }
    return {**letters, **functions, **others}


_KEY_MAP = _build_key_map()

_BUTTON_MAP = {
    MouseButton.LEFT_MOUSE_BUTTON: pygame.BUTTON_LEFT,
    MouseButton.RIGHT_MOUSE_BUTTON: pygame.BUTTON_RIGHT,
    MouseButton.MIDDLE_MOUSE_BUTTON: pygame.BUTTON_MIDDLE,
}


def to_pygame_key(key: InputKey) -> Optional[int]:
    """Return the pygame key code for ``key``, or None if it has no binding.

    Arrow and numpad keys are deliberately unbound and never read as pressed.
    """
    return _KEY_MAP.get(key)


def to_pygame_button(button: MouseButton) -> Optional[int]:
    """Return the pygame button number (1-based) for ``button``."""
    return _BUTTON_MAP.get(button)


@dataclass(frozen=True)
class InputState:
    """A snapshot of keyboard, mouse-button and cursor state for one frame."""

    keys: frozenset[InputKey] = field(default_factory=frozenset)
    buttons: frozenset[MouseButton] = field(default_factory=frozenset)
    mouse_pos: tuple[int, int] = (0, 0)

    def is_key_pressed(self, key: InputKey) -> bool:
        """True when ``key`` was held in this snapshot."""
        return key in self.keys

    def is_button_pressed(self, button: MouseButton) -> bool:
        """True when ``button`` was held in this snapshot."""
        return button in self.buttons