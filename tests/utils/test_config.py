"""
Unit tests for configuration validation

Tests the configuration system including:
- Default values and field constraints
- Cross-field validation
- JSON save/load
- Context manager for temporary config changes
"""

import json

import pytest
from pydantic import ValidationError

from wrap_pong.utils.config import (
    LAYOUT_NAMES,
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_defaults(self):
        """Test the default constants"""
        config = GameConfig()
        assert config.FIELD_WIDTH == 1280
        assert config.FIELD_HEIGHT == 720
        assert config.PADDLE_SPEED == 500
        assert config.BALL_SPEED == 1000
        assert config.BALL_START_DIRECTION == (1.0, 0.0)
        assert config.KEYBOARD_LAYOUT in LAYOUT_NAMES

    @pytest.mark.parametrize(
        "field,value",
        [
            ("FIELD_WIDTH", 0),
            ("FIELD_HEIGHT", -720),
            ("PADDLE_SPEED", -1.0),
            ("BALL_SPEED", 0.0),
            ("PADDLE_HEIGHT", 0.0),
            ("BALL_SIZE", -15.0),
            ("FPS", 0),
        ],
    )
    def test_non_positive_values_rejected(self, field, value):
        """Test that Field constraints reject non positive values"""
        with pytest.raises(ValidationError):
            GameConfig(**{field: value})

    def test_assignment_is_validated(self):
        """Test that validate_assignment applies constraints on mutation"""
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.PADDLE_SPEED = -100.0
        assert config.PADDLE_SPEED == 500.0

    def test_unknown_keyboard_layout(self):
        """Test layout name validation"""
        with pytest.raises(ValidationError, match="Unknown keyboard layout"):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    def test_invalid_color(self):
        """Test RGB component validation"""
        with pytest.raises(ValidationError):
            GameConfig(BACKGROUND_COLOR=(0, 300, 0))

    def test_paddle_outside_field(self):
        """Test that entities must start inside the field"""
        with pytest.raises(ValidationError, match="RIGHT_PADDLE_X"):
            GameConfig(FIELD_WIDTH=800)

    def test_smaller_field_with_matching_positions(self):
        """Test that a consistent smaller field is accepted"""
        config = GameConfig(
            FIELD_WIDTH=800,
            FIELD_HEIGHT=600,
            RIGHT_PADDLE_X=700.0,
            BALL_START_X=400.0,
            BALL_START_Y=300.0,
            PADDLE_START_Y=250.0,
        )
        assert config.FIELD_WIDTH == 800

    def test_reset_to_defaults(self):
        """Test resetting every field"""
        config = GameConfig(PADDLE_SPEED=250.0, FPS=30)
        config.reset_to_defaults()
        assert config.model_dump() == GameConfig().model_dump()

    def test_reset_to_defaults_from_larger_field(self):
        """Test resetting when the current positions lie outside the default field"""
        config = GameConfig(FIELD_WIDTH=2000, RIGHT_PADDLE_X=1900.0, BALL_START_X=1500.0)
        config.reset_to_defaults()
        assert config.FIELD_WIDTH == 1280
        assert config.RIGHT_PADDLE_X == 1180.0
        assert config.BALL_START_X == 640.0


class TestConfigFiles:
    """Test JSON persistence of the configuration"""

    def test_save_and_load(self, tmp_path):
        """Test that a saved file loads back to the same config"""
        path = tmp_path / "config.json"
        config = GameConfig(PADDLE_SPEED=250.0, KEYBOARD_LAYOUT="azerty")
        config.save_to_file(str(path))

        assert json.loads(path.read_text())["PADDLE_SPEED"] == 250.0
        assert GameConfig.load_from_file(str(path)).model_dump() == config.model_dump()

    def test_load_missing_file(self, tmp_path):
        """Test that loading a missing file raises"""
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global(self, tmp_path):
        """Test loading a file into the global configuration"""
        path = tmp_path / "config.json"
        GameConfig(BALL_SPEED=750.0).save_to_file(str(path))
        try:
            assert load_config_from_file(str(path))
            assert game_config.BALL_SPEED == 750.0
        finally:
            game_config.reset_to_defaults()

    def test_load_resized_field_into_global(self, tmp_path):
        """Test loading a config whose positions only fit the new field size"""
        path = tmp_path / "config.json"
        GameConfig(FIELD_WIDTH=2000, RIGHT_PADDLE_X=1900.0).save_to_file(str(path))
        try:
            assert load_config_from_file(str(path))
            assert game_config.FIELD_WIDTH == 2000
            assert game_config.RIGHT_PADDLE_X == 1900.0
            # Assignment is still validated afterwards
            with pytest.raises(ValidationError):
                game_config.PADDLE_SPEED = -1.0
        finally:
            game_config.reset_to_defaults()
        assert game_config.FIELD_WIDTH == 1280

    def test_load_missing_into_global(self, tmp_path):
        """Test that a missing file leaves the global config untouched"""
        assert not load_config_from_file(str(tmp_path / "missing.json"))
        assert game_config.BALL_SPEED == 1000.0

    def test_load_invalid_into_global(self, tmp_path):
        """Test that invalid content is reported and ignored"""
        bad_json = tmp_path / "bad.json"
        bad_json.write_text("{not json")
        bad_values = tmp_path / "bad_values.json"
        bad_values.write_text(json.dumps({"PADDLE_SPEED": -5}))

        assert not load_config_from_file(str(bad_json))
        assert not load_config_from_file(str(bad_values))
        assert game_config.PADDLE_SPEED == 500.0


class TestConfigContextManager:
    """Test temporary configuration changes"""

    def test_values_restored(self):
        """Test that values come back after the block"""
        with game_config_tmp(PADDLE_SPEED=100.0, FPS=30):
            assert game_config.PADDLE_SPEED == 100.0
            assert game_config.FPS == 30
        assert game_config.PADDLE_SPEED == 500.0
        assert game_config.FPS == 60

    def test_values_restored_on_error(self):
        """Test that values come back when the block raises"""
        with pytest.raises(RuntimeError):
            with game_config_tmp(BALL_SPEED=10.0):
                raise RuntimeError("boom")
        assert game_config.BALL_SPEED == 1000.0

    def test_partial_change_restored_on_invalid_value(self):
        """Test that a rejected value does not leave earlier ones changed"""
        with pytest.raises(ValidationError):
            with game_config_tmp(FPS=30, PADDLE_SPEED=-1.0):
                pass
        assert game_config.FPS == 60

    def test_dependent_fields(self):
        """Test shrinking the field together with the positions"""
        with game_config_tmp(RIGHT_PADDLE_X=700.0, BALL_START_X=400.0, FIELD_WIDTH=800):
            assert game_config.FIELD_WIDTH == 800
        assert game_config.FIELD_WIDTH == 1280
        assert game_config.RIGHT_PADDLE_X == 1180.0
