"""
ToyRobot - Toy Robot Simulator

A toy robot moving on a bounded table. It accepts PLACE, MOVE, LEFT,
RIGHT and REPORT commands and never falls off the edge.
"""

from .src.simulation import (
    Table,
    Robot,
    RobotState,
    Direction,
    Rotation,
    Command,
    RobotError,
    OutOfBoundsError,
    InvalidDirectionError,
    InvalidPositionError,
    InvalidPositionShapeError,
    TableVisualizer,
)
from .src.driver import (
    CommandRunner,
    BatchResult,
    split_batches,
    parse_command,
)
from .src.config import ToyRobotConfig, create_config

__version__ = "0.1.0"

__all__ = [
    # Simulation
    "Table",
    "Robot",
    "RobotState",
    "Direction",
    "Rotation",
    "Command",
    "TableVisualizer",
    # Errors
    "RobotError",
    "OutOfBoundsError",
    "InvalidDirectionError",
    "InvalidPositionError",
    "InvalidPositionShapeError",
    # Driver
    "CommandRunner",
    "BatchResult",
    "split_batches",
    "parse_command",
    # Configuration
    "ToyRobotConfig",
    "create_config",
]
