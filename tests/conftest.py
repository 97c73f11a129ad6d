"""
Shared fixtures for Wrap Pong tests
"""

import os

# Pygame must never try to open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from wrap_pong.core.actions import KeyStateInput  # noqa: E402
from wrap_pong.core.entities import SimulationState  # noqa: E402
from wrap_pong.core.physics import PhysicsEngine  # noqa: E402
from wrap_pong.utils.config import GameConfig  # noqa: E402


@pytest.fixture
def state() -> SimulationState:
    """Fresh state built from the default configuration"""
    return SimulationState.initial(GameConfig())


@pytest.fixture
def engine(state: SimulationState) -> PhysicsEngine:
    return PhysicsEngine(state)


@pytest.fixture
def no_input() -> KeyStateInput:
    return KeyStateInput()
