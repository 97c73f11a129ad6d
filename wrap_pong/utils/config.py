"""
Wrap Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

# Names of the keyboard layouts defined in wrap_pong.utils.keyboard_layout
LAYOUT_NAMES = ("qwerty", "azerty", "qwertz")


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=1280, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=720, gt=0, description="Field height in pixels")

    # Speeds
    PADDLE_SPEED: float = Field(default=500.0, gt=0, description="Paddle speed (px/s)")
    BALL_SPEED: float = Field(default=1000.0, gt=0, description="Ball speed (px/s)")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=25.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    LEFT_PADDLE_X: float = Field(default=100.0, ge=0, description="Left paddle x position")
    RIGHT_PADDLE_X: float = Field(default=1180.0, ge=0, description="Right paddle x position")
    PADDLE_START_Y: float = Field(default=360.0, ge=0, description="Paddles initial y position")

    # Ball
    BALL_SIZE: float = Field(default=15.0, gt=0, description="Ball side length in pixels")
    BALL_START_X: float = Field(default=640.0, ge=0, description="Ball initial x position")
    BALL_START_Y: float = Field(default=360.0, ge=0, description="Ball initial y position")
    BALL_START_DIRECTION: tuple[float, float] = Field(
        default=(1.0, 0.0), description="Ball initial direction"
    )

    # Frame loop
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    MAX_FRAME_TIME: float = Field(
        default=0.25, gt=0, description="Longest delta (s) fed to a single step"
    )

    # Controls
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    BACKGROUND_COLOR: tuple[int, int, int] = Field(
        default=(200, 200, 200), description="RGB color"
    )

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in LAYOUT_NAMES:
            raise ValueError(f"Unknown keyboard layout '{v}'. Available: {list(LAYOUT_NAMES)}")
        return v

    @field_validator("BACKGROUND_COLOR")
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Validate RGB components"""
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"RGB components must be within [0, 255], got {v}")
        return v

    @model_validator(mode="after")
    def validate_positions(self) -> "GameConfig":
        """Validate that the entities start inside the field"""
        for name in ("LEFT_PADDLE_X", "RIGHT_PADDLE_X", "BALL_START_X"):
            if getattr(self, name) > self.FIELD_WIDTH:
                raise ValueError(f"{name} must not exceed FIELD_WIDTH ({self.FIELD_WIDTH})")
        for name in ("PADDLE_START_Y", "BALL_START_Y"):
            if getattr(self, name) > self.FIELD_HEIGHT:
                raise ValueError(f"{name} must not exceed FIELD_HEIGHT ({self.FIELD_HEIGHT})")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "wrap_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "wrap_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        self.__dict__.update(GameConfig().__dict__)


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "wrap_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.warning("Error loading config from %s: %s", filepath, e)
        return False

    # Already validated as a whole, so copy in one go instead of field by field
    game_config.__dict__.update(loaded_config.__dict__)
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording the previous ones"""
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # Restore in reverse order so cross-field checks see consistent values
        for name in reversed(list(old_values)):
            setattr(game_config, name, old_values[name])
