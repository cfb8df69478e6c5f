"""
Simulation Module - Table, Robot and Visualization

The table bounds the robot; the robot interprets commands
against its own state and the table it was placed on.
"""

from .table import Table, RobotError, InvalidPositionError, InvalidPositionShapeError
from .robot import (
    Robot,
    RobotState,
    Direction,
    Rotation,
    Command,
    OutOfBoundsError,
    InvalidDirectionError,
    parse_place_args,
)
from .visualizer import TableVisualizer

__all__ = [
    "Table",
    "Robot",
    "RobotState",
    "Direction",
    "Rotation",
    "Command",
    "RobotError",
    "OutOfBoundsError",
    "InvalidDirectionError",
    "InvalidPositionError",
    "InvalidPositionShapeError",
    "parse_place_args",
    "TableVisualizer",
]
