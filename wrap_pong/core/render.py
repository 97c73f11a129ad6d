"""
Maps the simulation state to draw calls
"""

from collections.abc import Callable

from wrap_pong.core.entities import Color, SimulationState, Vector2D

DrawRectFn = Callable[[Vector2D, Vector2D, Color], None]

LEFT_PADDLE_COLOR = Color.BLUE
RIGHT_PADDLE_COLOR = Color.RED
BALL_COLOR = Color.BLACK


def render(state: SimulationState, draw_rect_fn: DrawRectFn) -> None:
    """Issues one draw call per entity: left paddle, right paddle, ball"""
    draw_rect_fn(state.paddle_left.position, state.paddle_left.size, LEFT_PADDLE_COLOR)
    draw_rect_fn(state.paddle_right.position, state.paddle_right.size, RIGHT_PADDLE_COLOR)
    draw_rect_fn(state.ball.position, state.ball.size, BALL_COLOR)


class RecordingRenderer:
    """Renderer that keeps the draw calls it receives (headless runs, tests)"""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[float, float], tuple[float, float], Color]] = []

    def draw_rectangle(self, position: Vector2D, size: Vector2D, color: Color) -> None:
        self.calls.append((position.to_tuple(), size.to_tuple(), color))

    def clear(self) -> None:
        self.calls.clear()
