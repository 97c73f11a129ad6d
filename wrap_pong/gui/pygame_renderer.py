"""
PyGame renderer for Wrap Pong game
"""

import pygame

from wrap_pong.core.entities import Color, Vector2D
from wrap_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer for Wrap Pong"""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        surface: pygame.Surface | None = None,
    ):
        """Initialize the PyGame renderer, opening a window unless a surface is given"""
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT
        self.background = game_config.BACKGROUND_COLOR

        if surface is None:
            pygame.init()
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Wrap Pong")
        else:
            self.screen = surface

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background)

    def draw_rectangle(self, position: Vector2D, size: Vector2D, color: Color) -> None:
        """Draw a filled rectangle"""
        rect = pygame.Rect(int(position.x), int(position.y), int(size.x), int(size.y))
        pygame.draw.rect(self.screen, color.rgb, rect)

    def present(self) -> None:
        """Show the frame that was just drawn"""
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.quit()
