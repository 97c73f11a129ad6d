"""
Core module of Wrap Pong game
"""

from wrap_pong.core.actions import ACTIONS
from wrap_pong.core.actions import KeyStateInput
from wrap_pong.core.entities import Ball
from wrap_pong.core.entities import Color
from wrap_pong.core.entities import Paddle
from wrap_pong.core.entities import Rect2
from wrap_pong.core.entities import SimulationState
from wrap_pong.core.entities import Vector2D
from wrap_pong.core.errors import InvalidSimulationInput
from wrap_pong.core.errors import WrapPongError
from wrap_pong.core.game_engine import Game
from wrap_pong.core.physics import PhysicsEngine
from wrap_pong.core.render import RecordingRenderer
from wrap_pong.core.render import render

__all__ = [
    "ACTIONS",
    "Ball",
    "Color",
    "Game",
    "InvalidSimulationInput",
    "KeyStateInput",
    "Paddle",
    "PhysicsEngine",
    "Rect2",
    "RecordingRenderer",
    "SimulationState",
    "Vector2D",
    "WrapPongError",
    "render",
]
