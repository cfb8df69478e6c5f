"""
Tests for the configuration module.
"""

import pytest
from src.config import ToyRobotConfig, create_config, get_default_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TOYROBOT_TABLE_WIDTH",
        "TOYROBOT_TABLE_HEIGHT",
        "TOYROBOT_COMMANDS_FILE",
        "TOYROBOT_SHOW_TABLE",
        "TOYROBOT_LOG_LEVEL",
        "TOYROBOT_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestToyRobotConfig:
    """Tests for ToyRobotConfig."""

    def test_defaults(self):
        config = ToyRobotConfig()
        assert (config.width, config.height) == (5, 5)
        assert config.commands_file == "commands.txt"
        assert config.show_table is False
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TOYROBOT_TABLE_WIDTH", "7")
        monkeypatch.setenv("TOYROBOT_TABLE_HEIGHT", "3")
        monkeypatch.setenv("TOYROBOT_SHOW_TABLE", "True")
        monkeypatch.setenv("TOYROBOT_LOG_LEVEL", "DEBUG")
        config = get_default_config()
        assert (config.width, config.height) == (7, 3)
        assert config.show_table is True
        assert config.log_level == "DEBUG"

    def test_validate_rejects_empty_table(self):
        config = ToyRobotConfig()
        config.width = 0
        with pytest.raises(ValueError, match="positive"):
            config.validate()

    def test_validate_rejects_unknown_log_level(self):
        config = ToyRobotConfig()
        config.log_level = "LOUD"
        with pytest.raises(ValueError, match="log level"):
            config.validate()

    def test_dict_round_trip(self):
        config = create_config(width=6, height=4, commands_file="batches.txt", show_table=True)
        restored = ToyRobotConfig.from_dict(config.to_dict())
        assert restored.to_dict() == config.to_dict()

    def test_from_partial_dict(self):
        config = ToyRobotConfig.from_dict({"table": {"width": 9}})
        assert (config.width, config.height) == (9, 5)

    @pytest.mark.parametrize("value,expected", [
        ("false", False),
        ("False", False),
        ("true", True),
        ("TRUE", True),
        (True, True),
        (False, False),
    ])
    def test_from_dict_show_table(self, value, expected):
        config = ToyRobotConfig.from_dict({"show_table": value})
        assert config.show_table is expected


class TestCreateConfig:
    """Tests for create_config."""

    def test_overrides(self):
        config = create_config(width=3, height=2, log_level="INFO")
        assert (config.width, config.height) == (3, 2)
        assert config.log_level == "INFO"

    def test_invalid_overrides(self):
        with pytest.raises(ValueError):
            create_config(width=-1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
