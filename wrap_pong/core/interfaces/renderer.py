"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from wrap_pong.core.entities import Color, Vector2D


class Renderer(Protocol):
    """
    Protocol for renderer implementations.

    Enables multiple rendering backends: Pygame, headless recording, etc.
    """

    def draw_rectangle(self, position: Vector2D, size: Vector2D, color: Color) -> None:
        """
        Draw a filled axis-aligned rectangle.

        Args:
            position: Top-left corner in pixels
            size: Width and height in pixels
            color: Fill color
        """
        ...
