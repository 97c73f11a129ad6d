"""
Main game application with PyGame GUI
"""

import logging

import pygame

from wrap_pong.core.game_engine import Game
from wrap_pong.gui.human_player import KeyboardInputProvider, handle_event
from wrap_pong.gui.pygame_renderer import PygameRenderer
from wrap_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PongApp:
    """Frame loop driving one Game: events, step, render, flip"""

    def __init__(
        self,
        renderer: PygameRenderer | None = None,
        input_provider: KeyboardInputProvider | None = None,
    ) -> None:
        """Initialize the application"""
        self.renderer = renderer or PygameRenderer()
        self.input_provider = input_provider or KeyboardInputProvider()
        self.game = Game(self.input_provider, self.renderer)
        self.clock = pygame.time.Clock()
        self.fps = game_config.FPS
        self.max_frame_time = game_config.MAX_FRAME_TIME
        self.running = True

    def process_events(self) -> None:
        """Handle window and control events"""
        for event in pygame.event.get():
            command = handle_event(event)
            if command == "quit":
                self.running = False
            elif command == "restart":
                self.game.reset()

    def tick(self, dt: float) -> None:
        """Run one frame with the given delta time"""
        self.input_provider.update()
        self.game.step(min(dt, self.max_frame_time))
        self.renderer.clear_screen()
        self.game.render()
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting frame loop at %d FPS", self.fps)
        try:
            while self.running:
                dt = self.clock.tick(self.fps) / 1000.0
                self.process_events()
                if not self.running:
                    break
                self.tick(dt)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.renderer.cleanup()
        logger.info("Wrap Pong closed properly.")


def main() -> None:
    """Main entry point"""
    app = PongApp()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
