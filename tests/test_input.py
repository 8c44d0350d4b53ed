import pygame

from core.input_manager import InputManager


def test_any_bound_key_holds_the_action():
    inputs = InputManager()

    inputs.update({pygame.K_UP: True})
    assert inputs.is_down("move_up")

    inputs.update({pygame.K_w: True})
    assert inputs.is_down("move_up")
    assert not inputs.is_down("move_down")


def test_pressed_and_released_are_edges():
    inputs = InputManager()

    inputs.update({pygame.K_SPACE: True})
    assert inputs.is_pressed("confirm")

    inputs.update({pygame.K_SPACE: True})
    assert inputs.is_down("confirm")
    assert not inputs.is_pressed("confirm")

    inputs.update({})
    assert inputs.is_released("confirm")


def test_switching_between_bound_keys_is_not_a_new_press():
    inputs = InputManager()

    inputs.update({pygame.K_SPACE: True})
    inputs.update({pygame.K_RETURN: True})

    assert not inputs.is_pressed("confirm")


def test_rebind_and_unknown_action():
    inputs = InputManager()
    inputs.bind("quit", pygame.K_q)

    inputs.update({pygame.K_ESCAPE: True})
    assert not inputs.is_down("quit")

    inputs.update({pygame.K_q: True})
    assert inputs.is_pressed("quit")
    assert not inputs.is_down("jump")
