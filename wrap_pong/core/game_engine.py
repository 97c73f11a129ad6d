"""
Wrap Pong main game engine
"""

import logging
from typing import Any

from wrap_pong.core.entities import SimulationState
from wrap_pong.core.interfaces.input import InputProvider
from wrap_pong.core.interfaces.renderer import Renderer
from wrap_pong.core.physics import PhysicsEngine
from wrap_pong.core.render import render
from wrap_pong.utils.config import GameConfig

logger = logging.getLogger(__name__)


class Game:
    """Owns the simulation state and its collaborators, driven by an outer frame loop"""

    def __init__(
        self,
        input_provider: InputProvider,
        renderer: Renderer,
        state: SimulationState | None = None,
        config: GameConfig | None = None,
    ):
        self.input_provider = input_provider
        self.renderer = renderer
        self.state = state if state is not None else SimulationState.initial(config)
        self.physics_engine = PhysicsEngine(self.state)
        self.last_events: dict[str, Any] = {"paddle_hits": [], "wraps": []}

    def step(self, delta_seconds: float) -> None:
        """Advances the game by one frame"""
        self.last_events = self.physics_engine.step(self.input_provider, delta_seconds)

    def render(self) -> None:
        """Draws the current state"""
        render(self.state, self.renderer.draw_rectangle)
        self.physics_engine.needs_redraw = False

    def reset(self) -> None:
        """Puts paddles and ball back to their initial position"""
        self.physics_engine.reset_game()
        logger.info("Game reset")

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return self.physics_engine.get_game_state()


def run_headless(game: Game, frames: int, dt: float) -> dict[str, Any]:
    """
    Runs a fixed number of frames without any window

    Args:
        game: Game to drive
        frames: Number of step/render cycles
        dt: Delta time fed to every step

    Returns:
        Counts of the events that occurred plus the final game state
    """
    stats = {"paddle_hits": 0, "wraps": 0}
    for _ in range(frames):
        game.step(dt)
        game.render()
        stats["paddle_hits"] += len(game.last_events["paddle_hits"])
        stats["wraps"] += len(game.last_events["wraps"])
    logger.debug("Headless run finished after %d frames: %s", frames, stats)
    return {"events": stats, "game_state": game.get_game_state()}
