import pygame
import pytest

from wirecraft.input import (
    InputKey,
    InputState,
    MouseButton,
    to_pygame_button,
    to_pygame_key,
)


def test_letter_keys_map_to_pygame_letters():
    assert to_pygame_key(InputKey.A_KEY) == pygame.K_a
    assert to_pygame_key(InputKey.W_KEY) == pygame.K_w
    assert to_pygame_key(InputKey.Z_KEY) == pygame.K_z


def test_special_keys_map():
    assert to_pygame_key(InputKey.ENTER) == pygame.K_RETURN
    assert to_pygame_key(InputKey.LEFT_SHIFT) == pygame.K_LSHIFT
    assert to_pygame_key(InputKey.PAGE_DOWN) == pygame.K_PAGEDOWN
    assert to_pygame_key(InputKey.F12) == pygame.K_F12


@pytest.mark.parametrize(
    "key",
    [
        InputKey.UP_ARROW,
        InputKey.DOWN_ARROW,
        InputKey.LEFT_ARROW,
        InputKey.RIGHT_ARROW,
        InputKey.NUMPAD_0,
        InputKey.NUMPAD_9,
    ],
)
def test_unbound_keys_have_no_code(key):
    assert to_pygame_key(key) is None


def test_bound_keys_map_to_distinct_codes():
    codes = [to_pygame_key(k) for k in InputKey]
    bound = [c for c in codes if c is not None]
    assert len(bound) == len(set(bound))
    assert len(bound) == len(InputKey) - 14


def test_mouse_buttons_map():
    assert to_pygame_button(MouseButton.LEFT_MOUSE_BUTTON) == pygame.BUTTON_LEFT
    assert to_pygame_button(MouseButton.RIGHT_MOUSE_BUTTON) == pygame.BUTTON_RIGHT
    assert to_pygame_button(MouseButton.MIDDLE_MOUSE_BUTTON) == pygame.BUTTON_MIDDLE


def test_input_state_reports_held_keys():
    state = InputState(keys=frozenset({InputKey.W_KEY, InputKey.SPACE}))
    assert state.is_key_pressed(InputKey.W_KEY)
    assert state.is_key_pressed(InputKey.SPACE)
    assert not state.is_key_pressed(InputKey.S_KEY)


def test_input_state_reports_held_buttons():
    state = InputState(buttons=frozenset({MouseButton.RIGHT_MOUSE_BUTTON}), mouse_pos=(10, 20))
    assert state.is_button_pressed(MouseButton.RIGHT_MOUSE_BUTTON)
    assert not state.is_button_pressed(MouseButton.LEFT_MOUSE_BUTTON)
    assert state.mouse_pos == (10, 20)


def test_empty_state_has_nothing_pressed():
    state = InputState()
    assert not any(state.is_key_pressed(k) for k in InputKey)
    assert not any(state.is_button_pressed(b) for b in MouseButton)