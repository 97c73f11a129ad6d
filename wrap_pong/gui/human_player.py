"""
Keyboard input for human players of Wrap Pong
"""

from collections.abc import Mapping

import pygame

from wrap_pong.core.actions import ACTIONS, validate_action
from wrap_pong.utils.keyboard_layout import get_action_bindings


class KeyboardInputProvider:
    """Input provider reading the held actions from the keyboard"""

    def __init__(self, layout: str | None = None):
        """
        Initialize the keyboard input

        Args:
            layout: Keyboard layout name, the configured one if None
        """
        self.key_mapping = get_action_bindings(layout)
        self.held_actions: dict[str, bool] = {action: False for action in ACTIONS}

    def update_from_keys(self, keys_pressed: Mapping[int, bool]) -> None:
        """Update held actions based on currently pressed keys"""
        for action, key in self.key_mapping.items():
            self.held_actions[action] = bool(keys_pressed.get(key, False))

    def update(self) -> None:
        """Sample the keyboard once for the coming frame"""
        pygame_keys = pygame.key.get_pressed()
        for action, key in self.key_mapping.items():
            self.held_actions[action] = bool(pygame_keys[key])

    def is_action_held(self, action_name: str) -> bool:
        return self.held_actions[validate_action(action_name)]


def handle_event(event: pygame.event.Event) -> str | None:
    """
    Handle pygame events

    Returns:
        String indicating special actions (quit, restart) or None
    """
    if event.type == pygame.QUIT:
        return "quit"
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return "quit"
        elif event.key == pygame.K_r:
            return "restart"
    return None
