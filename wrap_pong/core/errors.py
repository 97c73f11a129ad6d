"""
Exceptions raised by the Wrap Pong core
"""


class WrapPongError(Exception):
    """Base class for Wrap Pong errors"""


class InvalidSimulationInput(WrapPongError, ValueError):
    """A step was fed input it cannot simulate (negative delta, unknown action, ...)"""
