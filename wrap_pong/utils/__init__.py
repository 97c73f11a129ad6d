"""
Wrap Pong utility modules
"""

from wrap_pong.utils.config import GameConfig
from wrap_pong.utils.config import game_config
from wrap_pong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig"]
