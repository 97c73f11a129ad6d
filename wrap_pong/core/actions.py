"""
Logical input actions and simple input providers
"""

from wrap_pong.core.errors import InvalidSimulationInput

P1_UP = "p1_up"
P1_DOWN = "p1_down"
P2_UP = "p2_up"
P2_DOWN = "p2_down"

ACTIONS = (P1_UP, P1_DOWN, P2_UP, P2_DOWN)


def validate_action(action_name: str) -> str:
    """Returns the action name, raising if it is not a known action"""
    if action_name not in ACTIONS:
        raise InvalidSimulationInput(
            f"Unknown action '{action_name}'. Expected one of {list(ACTIONS)}"
        )
    return action_name


class KeyStateInput:
    """Input provider backed by a set of held actions (headless play, tests, replays)"""

    def __init__(self, held: set[str] | None = None):
        self.held: set[str] = set()
        for action_name in held or ():
            self.press(action_name)

    def press(self, action_name: str) -> None:
        self.held.add(validate_action(action_name))

    def release(self, action_name: str) -> None:
        self.held.discard(validate_action(action_name))

    def clear(self) -> None:
        self.held.clear()

    def is_action_held(self, action_name: str) -> bool:
        return validate_action(action_name) in self.held
