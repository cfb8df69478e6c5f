"""
Toy Robot Configuration Module

Handles all configuration settings for the simulator.
Supports environment variables, .env files, and programmatic configuration.

Configuration can be set via:
1. Environment variables (TOYROBOT_TABLE_WIDTH, TOYROBOT_COMMANDS_FILE, etc.)
2. .env file in the working directory
3. Programmatic configuration via create_config()
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class ToyRobotConfig:
    """
    Configuration for the toy robot simulator.

    Example usage:
        # From environment variables
        config = ToyRobotConfig()

        # Programmatic configuration
        config = create_config(width=8, height=8, show_table=True)
    """

    # Table size
    width: int = field(
        default_factory=lambda: int(os.getenv("TOYROBOT_TABLE_WIDTH", "5"))
    )
    height: int = field(
        default_factory=lambda: int(os.getenv("TOYROBOT_TABLE_HEIGHT", "5"))
    )

    # Input file read by the command line driver
    commands_file: str = field(
        default_factory=lambda: os.getenv("TOYROBOT_COMMANDS_FILE", "commands.txt")
    )

    # Print the table after every batch
    show_table: bool = field(
        default_factory=lambda: os.getenv("TOYROBOT_SHOW_TABLE", "false").lower() == "true"
    )

    # Logging settings
    log_level: str = field(
        default_factory=lambda: os.getenv("TOYROBOT_LOG_LEVEL", "WARNING")
    )
    log_file: Optional[str] = field(
        default_factory=lambda: os.getenv("TOYROBOT_LOG_FILE")
    )

    def validate(self) -> None:
        """
        Validate configuration, raise if invalid.

        Raises:
            ValueError: If the table size or log level is not usable
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Table dimensions must be positive, got {self.width}x{self.height}. "
                "Set TOYROBOT_TABLE_WIDTH / TOYROBOT_TABLE_HEIGHT or pass width/height."
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "ToyRobotConfig":
        """Create configuration from environment variables."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ToyRobotConfig":
        """
        Create configuration from a dictionary.

        Keys missing from the dictionary fall back to the environment.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            ToyRobotConfig instance
        """
        config = cls()
        table_cfg = config_dict.get("table", {})

        config.width = int(table_cfg.get("width", config.width))
        config.height = int(table_cfg.get("height", config.height))
        config.commands_file = config_dict.get("commands_file", config.commands_file)
        show_table = config_dict.get("show_table", config.show_table)
        if isinstance(show_table, str):
            show_table = show_table.lower() == "true"
        config.show_table = bool(show_table)
        config.log_level = config_dict.get("log_level", config.log_level)
        config.log_file = config_dict.get("log_file", config.log_file)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration to dictionary."""
        return {
            "table": {
                "width": self.width,
                "height": self.height,
            },
            "commands_file": self.commands_file,
            "show_table": self.show_table,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }


def get_default_config() -> ToyRobotConfig:
    """Get the default configuration from environment."""
    return ToyRobotConfig.from_env()


def create_config(
    width: Optional[int] = None,
    height: Optional[int] = None,
    commands_file: Optional[str] = None,
    **kwargs
) -> ToyRobotConfig:
    """
    Convenience function to create a configuration.

    Args:
        width: Table width
        height: Table height
        commands_file: Path to the command batches file
        **kwargs: show_table, log_level, log_file

    Returns:
        Configured ToyRobotConfig
    """
    config = ToyRobotConfig()

    if width is not None:
        config.width = width
    if height is not None:
        config.height = height
    if commands_file:
        config.commands_file = commands_file

    if "show_table" in kwargs:
        config.show_table = kwargs["show_table"]
    if "log_level" in kwargs:
        config.log_level = kwargs["log_level"]
    if "log_file" in kwargs:
        config.log_file = kwargs["log_file"]

    config.validate()
    return config


def setup_logging(config: ToyRobotConfig) -> None:
    """Configure the root logger from the log settings."""
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
