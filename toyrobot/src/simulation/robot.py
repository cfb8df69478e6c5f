"""
Robot

A toy robot that interprets PLACE, MOVE, LEFT, RIGHT and REPORT
against the table it was placed on.

Every operation returns the robot so commands can be chained:

    robot.place(table, 0, 0, Direction.NORTH).move().rotate(Rotation.RIGHT).report()

Until the robot has been placed, every command except PLACE is ignored.
Moves that would take it off the table are dropped.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from .table import RobotError, Table

logger = logging.getLogger(__name__)


class OutOfBoundsError(RobotError):
    """Raised when the robot is placed outside the table."""

    def __init__(self, position: Tuple[object, object]):
        super().__init__("Robot is outside the table.")
        self.position = position


class InvalidDirectionError(RobotError):
    """Raised when a heading is not one of the four compass directions."""

    def __init__(self, direction: object):
        super().__init__(f'Given direction "{direction}" is invalid.')
        self.direction = direction


class Direction(Enum):
    """Compass headings, in clockwise order, with their unit step."""
    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    def right(self) -> "Direction":
        """The heading 90 degrees clockwise."""
        members = list(Direction)
        return members[(members.index(self) + 1) % len(members)]

    def left(self) -> "Direction":
        """The heading 90 degrees counter-clockwise."""
        members = list(Direction)
        return members[(members.index(self) + len(members) - 1) % len(members)]

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """
        Resolve a heading from a Direction or its exact name.

        Raises:
            InvalidDirectionError: If value names no direction
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls.__members__:
            return cls[value]
        raise InvalidDirectionError(value)


class Rotation(Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class Command(Enum):
    PLACE = "PLACE"
    MOVE = "MOVE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPORT = "REPORT"


@dataclass
class RobotState:
    """
    Position and heading of the robot.

    When placed is False the other fields carry no meaning.
    """
    x: int = 0
    y: int = 0
    direction: Direction = Direction.NORTH
    placed: bool = False

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def report(self) -> str:
        if not self.placed:
            return ""
        return f"{self.x},{self.y},{self.direction.name}"


class Robot:
    """
    Stateful command interpreter for a single robot.

    Attributes:
        state: Current RobotState
        table: Table the robot was last placed on (None until then)
        history: Positions visited since the last successful placement
    """

    def __init__(self, output: Optional[Callable[[str], None]] = None):
        """
        Initialize an unplaced robot.

        Args:
            output: Sink for REPORT lines (defaults to print)
        """
        self.state = RobotState()
        self.table: Optional[Table] = None
        self.history: List[Tuple[int, int]] = []
        self._output = output or print

    @property
    def is_placed(self) -> bool:
        return self.state.placed

    def place(self, table: Table, x: int, y: int, direction: Union[Direction, str]) -> "Robot":
        """
        Put the robot on a table.

        The position is checked before the heading, so a command that is
        wrong on both counts reports the position.

        Args:
            table: Table to place the robot on
            x: Column
            y: Row
            direction: Direction or its exact name

        Raises:
            OutOfBoundsError: If (x, y) is not on the table
            InvalidDirectionError: If direction is not a compass heading
        """
        if not table.is_in_bounds((x, y)):
            raise OutOfBoundsError((x, y))
        heading = Direction.parse(direction)

        self.table = table
        self.state = RobotState(x=x, y=y, direction=heading, placed=True)
        self.history = [self.state.position]
        return self

    def move(self) -> "Robot":
        """Move one unit forward, unless that would leave the table."""
        if not self.state.placed:
            return self

        dx, dy = self.state.direction.value
        target = (self.state.x + dx, self.state.y + dy)

        if self.table.is_in_bounds(target):
            self.state.x, self.state.y = target
            self.history.append(target)
        else:
            logger.debug(f"Ignoring move to {target}: off the table")
        return self

    def rotate(self, rotation: Rotation) -> "Robot":
        """Turn 90 degrees left or right without moving."""
        if not self.state.placed:
            return self

        if rotation == Rotation.LEFT:
            self.state.direction = self.state.direction.left()
        elif rotation == Rotation.RIGHT:
            self.state.direction = self.state.direction.right()
        return self

    def report(self) -> str:
        """Return "x,y,HEADING", or an empty string if not placed."""
        return self.state.report()

    def execute(self, command: str, args: Optional[str] = None, table: Optional[Table] = None) -> "Robot":
        """
        Execute a textual command.

        Args:
            command: One of PLACE, MOVE, LEFT, RIGHT, REPORT
            args: For PLACE, "x,y,HEADING"
            table: Table for PLACE (defaults to the one already bound)

        Unknown commands are ignored. REPORT writes to the output sink.
        """
        try:
            cmd = Command(command)
        except ValueError:
            logger.debug(f"Ignoring unknown command: {command!r}")
            return self

        if cmd == Command.PLACE:
            target = table or self.table
            if target is None:
                logger.debug("Ignoring PLACE: no table to place on")
                return self
            x, y, direction = parse_place_args(args)
            self.place(target, x, y, direction)
        elif cmd == Command.MOVE:
            self.move()
        elif cmd == Command.LEFT:
            self.rotate(Rotation.LEFT)
        elif cmd == Command.RIGHT:
            self.rotate(Rotation.RIGHT)
        elif cmd == Command.REPORT:
            self._output(self.report())

        return self


def parse_place_args(args: Optional[str]) -> Tuple[int, int, str]:
    """
    Split PLACE arguments "x,y,HEADING" into their fields.

    The heading is returned verbatim for Robot.place to validate.

    Raises:
        OutOfBoundsError: If x or y is not an integer
    """
    fields = (args or "").split(",")
    fields += [""] * (3 - len(fields))
    raw_x, raw_y, direction = fields[0], fields[1], fields[2]

    try:
        x, y = int(raw_x), int(raw_y)
    except ValueError:
        raise OutOfBoundsError((raw_x, raw_y)) from None

    return x, y, direction
