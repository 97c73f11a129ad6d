"""
Keyboard layout detection and action bindings for Wrap Pong
"""

import locale
import logging
import os
from dataclasses import dataclass

import pygame

from wrap_pong.core.actions import validate_action
from wrap_pong.utils.config import game_config

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    bindings: dict[str, int]
    display_names: dict[str, str]


_ARROW_BINDINGS = {"p2_up": pygame.K_UP, "p2_down": pygame.K_DOWN}
_ARROW_NAMES = {"p2_up": "↑", "p2_down": "↓"}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        bindings={"p1_up": pygame.K_w, "p1_down": pygame.K_s, **_ARROW_BINDINGS},
        display_names={"p1_up": "W", "p1_down": "S", **_ARROW_NAMES},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        bindings={
            "p1_up": pygame.K_z,  # Z instead of W
            "p1_down": pygame.K_s,
            **_ARROW_BINDINGS,
        },
        display_names={"p1_up": "Z", "p1_down": "S", **_ARROW_NAMES},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        bindings={"p1_up": pygame.K_w, "p1_down": pygame.K_s, **_ARROW_BINDINGS},
        display_names={"p1_up": "W", "p1_down": "S", **_ARROW_NAMES},
    ),
}


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    system_locale = locale.getlocale()[0]
    if not system_locale:
        # Fallback to environment variables
        system_locale = os.environ.get("LANG", "")
    system_locale = system_locale.lower()

    # Map common locales to keyboard layouts
    if system_locale.startswith("fr"):
        return "azerty"
    elif system_locale.startswith("de"):
        return "qwertz"
    return "qwerty"


def get_layout(layout: str | None = None) -> KeyboardLayout:
    """Get a layout by name, the configured one by default"""
    name = layout if layout is not None else game_config.KEYBOARD_LAYOUT
    if name not in KEYBOARD_LAYOUTS:
        raise ValueError(
            f"Unknown keyboard layout '{name}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
        )
    return KEYBOARD_LAYOUTS[name]


def get_action_bindings(layout: str | None = None) -> dict[str, int]:
    """Get the logical action -> pygame key code mapping of a layout"""
    return get_layout(layout).bindings.copy()


def get_key_for_action(action_name: str, layout: str | None = None) -> int:
    """Get the pygame key code bound to a logical action"""
    return get_layout(layout).bindings[validate_action(action_name)]


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def auto_configure_layout() -> str:
    """
    Automatically configure the best keyboard layout

    Returns:
        The selected layout name
    """
    detected = detect_system_layout()
    game_config.KEYBOARD_LAYOUT = detected
    logger.debug("Keyboard layout set to %s", detected)
    return detected


def show_layout_help(layout: str | None = None) -> str:
    """
    Generate help text showing current key mappings

    Returns:
        Formatted help text
    """
    current = get_layout(layout)

    help_text = f"Current keyboard layout: {current.name}\n\n"
    help_text += "Player 1 (left paddle):\n"
    help_text += f"  up: {current.display_names['p1_up']}\n"
    help_text += f"  down: {current.display_names['p1_down']}\n"
    help_text += "\nPlayer 2 (right paddle):\n"
    help_text += f"  up: {current.display_names['p2_up']}\n"
    help_text += f"  down: {current.display_names['p2_down']}\n"

    help_text += f"\nAvailable layouts: {', '.join(list_available_layouts().values())}\n"

    return help_text
