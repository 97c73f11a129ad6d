"""
Input provider protocol - defines interface for input sources (keyboard, scripted, etc.)
"""

from typing import Protocol


class InputProvider(Protocol):
    """
    Protocol that all input sources must implement.

    The physics step only asks whether a logical action is currently held,
    it never sees physical keys or buttons.
    """

    def is_action_held(self, action_name: str) -> bool:
        """
        Check whether a logical action is currently held.

        Args:
            action_name: One of "p1_up", "p1_down", "p2_up", "p2_down"

        Returns:
            True while the action is held

        Raises:
            InvalidSimulationInput: If the action name is unknown
        """
        ...
