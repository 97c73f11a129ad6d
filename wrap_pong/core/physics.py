"""
Physics system for Wrap Pong
"""

import logging
import math
import numbers
from typing import Any

from wrap_pong.core.actions import P1_DOWN, P1_UP, P2_DOWN, P2_UP
from wrap_pong.core.collision import apply_left_bounce, apply_right_bounce, ball_hits_paddle
from wrap_pong.core.entities import Paddle, SimulationState
from wrap_pong.core.errors import InvalidSimulationInput
from wrap_pong.core.interfaces.input import InputProvider

logger = logging.getLogger(__name__)


def validate_delta(dt: float) -> float:
    """Returns dt as a float, raising if it cannot be simulated"""
    if isinstance(dt, bool) or not isinstance(dt, numbers.Real):
        raise InvalidSimulationInput(f"delta_seconds must be a real number, got {dt!r}")
    value = float(dt)
    if not math.isfinite(value) or value < 0:
        raise InvalidSimulationInput(
            f"delta_seconds must be a finite non-negative number, got {dt!r}"
        )
    return value


def wrap_coordinate(value: float, upper: float) -> float:
    """Teleports a coordinate that left [0, upper] to the opposite edge"""
    if value > upper:
        return 0.0
    elif value < 0:
        return float(upper)
    return value


class PhysicsEngine:
    """Main physics engine: advances a SimulationState one frame at a time"""

    def __init__(self, state: SimulationState):
        self.state = state
        self.needs_redraw = False
        self.frame_count = 0
        self.game_time = 0.0

    def step(self, input_provider: InputProvider, dt: float) -> dict[str, Any]:
        """
        Advances the simulation by one frame.

        Stages run in a fixed order and each one sees the positions updated by
        the previous ones: paddles, ball translation, paddle collision, wrap.

        Args:
            input_provider: Source of the held actions for this frame
            dt: Seconds elapsed since the previous frame (>= 0)

        Returns:
            Dictionary with the events that occurred:
            {"paddle_hits": [{"player": 1, "angle": 0.1}], "wraps": ["top"]}

        Raises:
            InvalidSimulationInput: If dt is negative or not finite
        """
        dt = validate_delta(dt)
        state = self.state
        events: dict[str, list] = {"paddle_hits": [], "wraps": []}

        # Paddles
        self._control_paddle(state.paddle_left, input_provider, P1_UP, P1_DOWN, dt)
        self._control_paddle(state.paddle_right, input_provider, P2_UP, P2_DOWN, dt)

        # Ball
        state.ball.update(dt, state.ball_speed)
        self._check_paddle_collisions(events)
        self._wrap_ball(events)

        self.frame_count += 1
        self.game_time += dt
        self.needs_redraw = True
        return events

    def _control_paddle(
        self,
        paddle: Paddle,
        input_provider: InputProvider,
        up_action: str,
        down_action: str,
        dt: float,
    ) -> None:
        """Moves a paddle from its actions, up takes priority over down"""
        # Bounds are checked before the move, a long frame may overshoot them
        y = paddle.position.y
        if input_provider.is_action_held(up_action) and y > 0:
            paddle.move_vertical(-self.state.paddle_speed * dt)
        elif input_provider.is_action_held(down_action) and y < self.state.field_height:
            paddle.move_vertical(self.state.paddle_speed * dt)

    def _check_paddle_collisions(self, events: dict[str, list]) -> None:
        """Reflects the ball off the left paddle, or else off the right one"""
        state = self.state
        if ball_hits_paddle(state.ball, state.paddle_left):
            angle = apply_left_bounce(state.ball, state.paddle_left)
            events["paddle_hits"].append({"player": 1, "angle": angle})
            logger.debug("Ball hit left paddle, angle=%.4f", angle)
        elif ball_hits_paddle(state.ball, state.paddle_right):
            angle = apply_right_bounce(state.ball, state.paddle_right, state.paddle_left)
            events["paddle_hits"].append({"player": 2, "angle": angle})
            logger.debug("Ball hit right paddle, angle=%.4f", angle)

    def _wrap_ball(self, events: dict[str, list]) -> None:
        """Teleports the ball to the opposite edge when it leaves the field"""
        state = self.state
        position = state.ball.position

        y = wrap_coordinate(position.y, state.field_height)
        if y != position.y:
            events["wraps"].append("bottom" if position.y > state.field_height else "top")
            position.y = y

        x = wrap_coordinate(position.x, state.field_width)
        if x != position.x:
            events["wraps"].append("right" if position.x > state.field_width else "left")
            position.x = x

        if events["wraps"]:
            logger.debug("Ball wrapped through %s", ", ".join(events["wraps"]))

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        game_state = self.state.snapshot()
        game_state["frame_count"] = self.frame_count
        game_state["time_elapsed"] = self.game_time
        return game_state

    def reset_game(self) -> None:
        """Resets the state to its initial values"""
        self.state.reset()
        self.frame_count = 0
        self.game_time = 0.0
        self.needs_redraw = True
