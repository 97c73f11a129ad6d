"""
Wrap Pong game entities: vectors, rectangles, paddles, ball and simulation state
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from wrap_pong.utils.config import GameConfig, game_config


@dataclass
class Vector2D:
    """Simple 2D vector for positions and directions"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2D":
        return self * scalar

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def rotated(self, angle: float) -> "Vector2D":
        """Returns this vector rotated by `angle` radians about the origin"""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2D(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass
class Rect2:
    """Axis-aligned rectangle, position is the top-left corner"""

    position: Vector2D
    size: Vector2D

    @property
    def end(self) -> Vector2D:
        """Bottom-right corner"""
        return self.position + self.size

    def intersects(self, other: "Rect2", include_borders: bool = True) -> bool:
        """
        Checks whether two rectangles overlap on both axes.

        With include_borders, rectangles that only touch along an edge or a
        corner are reported as intersecting (closed intervals). Without it the
        overlap must have a non-zero extent (open intervals).
        """
        a_end = self.end
        b_end = other.end
        if include_borders:
            return (
                self.position.x <= b_end.x
                and other.position.x <= a_end.x
                and self.position.y <= b_end.y
                and other.position.y <= a_end.y
            )
        return (
            self.position.x < b_end.x
            and other.position.x < a_end.x
            and self.position.y < b_end.y
            and other.position.y < a_end.y
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Returns the rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.size.x, self.size.y)


class Color(Enum):
    """Draw colors understood by renderers"""

    BLUE = (0, 0, 255)
    RED = (255, 0, 0)
    BLACK = (0, 0, 0)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.value


class Paddle:
    """Player paddle, only ever moved along the y axis"""

    def __init__(self, x: float, y: float, player_id: int, width: float, height: float):
        self.rect = Rect2(Vector2D(x, y), Vector2D(width, height))
        self.player_id = player_id

    @property
    def position(self) -> Vector2D:
        return self.rect.position

    @property
    def size(self) -> Vector2D:
        return self.rect.size

    def move_vertical(self, dy: float) -> None:
        """Shifts the paddle vertically, the x coordinate is fixed"""
        self.rect.position.y += dy

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return self.rect.to_tuple()


class Ball:
    """Game ball: a square travelling along `direction`"""

    def __init__(self, x: float, y: float, size: float, direction: Vector2D):
        self.rect = Rect2(Vector2D(x, y), Vector2D(size, size))
        # Replaced wholesale on every paddle hit, never normalized
        self.direction = direction

    @property
    def position(self) -> Vector2D:
        return self.rect.position

    @property
    def size(self) -> Vector2D:
        return self.rect.size

    def update(self, dt: float, speed: float) -> None:
        """Updates the ball position"""
        self.rect.position += self.direction * speed * dt

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return self.rect.to_tuple()


class SimulationState:
    """Complete mutable state of one game, owned by the frame loop"""

    def __init__(
        self,
        paddle_left: Paddle,
        paddle_right: Paddle,
        ball: Ball,
        field_width: float,
        field_height: float,
        paddle_speed: float,
        ball_speed: float,
    ):
        self.paddle_left = paddle_left
        self.paddle_right = paddle_right
        self.ball = ball
        self.field_width = field_width
        self.field_height = field_height
        self.paddle_speed = paddle_speed
        self.ball_speed = ball_speed
        self._initial = self._capture()

    def _capture(self) -> dict[str, Any]:
        return {
            "paddle_left": self.paddle_left.position.copy(),
            "paddle_right": self.paddle_right.position.copy(),
            "ball": self.ball.position.copy(),
            "ball_dir": self.ball.direction.copy(),
            "field_width": self.field_width,
            "field_height": self.field_height,
            "paddle_speed": self.paddle_speed,
            "ball_speed": self.ball_speed,
        }

    @classmethod
    def initial(cls, config: GameConfig | None = None) -> "SimulationState":
        """Builds the starting state from a configuration (global one by default)"""
        cfg = config if config is not None else game_config
        paddle_left = Paddle(
            cfg.LEFT_PADDLE_X,
            cfg.PADDLE_START_Y,
            1,
            cfg.PADDLE_WIDTH,
            cfg.PADDLE_HEIGHT,
        )
        paddle_right = Paddle(
            cfg.RIGHT_PADDLE_X,
            cfg.PADDLE_START_Y,
            2,
            cfg.PADDLE_WIDTH,
            cfg.PADDLE_HEIGHT,
        )
        ball = Ball(
            cfg.BALL_START_X,
            cfg.BALL_START_Y,
            cfg.BALL_SIZE,
            Vector2D(*cfg.BALL_START_DIRECTION),
        )
        return cls(
            paddle_left,
            paddle_right,
            ball,
            field_width=cfg.FIELD_WIDTH,
            field_height=cfg.FIELD_HEIGHT,
            paddle_speed=cfg.PADDLE_SPEED,
            ball_speed=cfg.BALL_SPEED,
        )

    def reset(self) -> None:
        """Restores the values the state was built with, keeping the same entity objects"""
        initial = self._initial
        for key, entity in (
            ("paddle_left", self.paddle_left),
            ("paddle_right", self.paddle_right),
            ("ball", self.ball),
        ):
            start = initial[key]
            entity.position.x, entity.position.y = start.x, start.y
        self.ball.direction = initial["ball_dir"].copy()
        self.field_width = initial["field_width"]
        self.field_height = initial["field_height"]
        self.paddle_speed = initial["paddle_speed"]
        self.ball_speed = initial["ball_speed"]

    def snapshot(self) -> dict[str, Any]:
        """Returns the current state as plain tuples"""
        return {
            "paddle_left": self.paddle_left.get_rect(),
            "paddle_right": self.paddle_right.get_rect(),
            "ball": self.ball.get_rect(),
            "ball_dir": self.ball.direction.to_tuple(),
            "ball_velocity": self.ball.direction.magnitude() * self.ball_speed,
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }
