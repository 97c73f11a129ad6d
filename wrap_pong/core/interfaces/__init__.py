"""
Protocols for the collaborators consumed by the core
"""

from wrap_pong.core.interfaces.input import InputProvider
from wrap_pong.core.interfaces.renderer import Renderer

__all__ = ["InputProvider", "Renderer"]
