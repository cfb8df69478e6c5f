"""
Table

The bounded rectangular surface the robot moves on.
Answers bounds queries only; it never changes after construction.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple


class RobotError(Exception):
    """Base class for all toy robot errors."""


class InvalidPositionError(RobotError):
    """
    Raised when a position is not a well-formed (x, y) pair of integers.

    Normal command parsing never produces one of these.
    """

    def __init__(self, position=None):
        super().__init__("Invalid position")
        self.position = position


InvalidPositionShapeError = InvalidPositionError


@dataclass(frozen=True)
class Table:
    """
    A fixed-size table with the origin (0, 0) at the south-west corner.

    Attributes:
        width: Number of columns (x axis)
        height: Number of rows (y axis)
    """
    width: int = 5
    height: int = 5

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"Table {name} must be a positive integer, got {value!r}")

    def dimensions(self) -> Tuple[int, int]:
        """Return the (width, height) of the table."""
        return (self.width, self.height)

    def is_in_bounds(self, position: Sequence[int]) -> bool:
        """
        Check if a position lies on the table.

        Args:
            position: (x, y) pair

        Returns:
            True if 0 <= x < width and 0 <= y < height

        Raises:
            InvalidPositionError: If position is not a pair of integers
        """
        try:
            size = len(position)
        except TypeError:
            raise InvalidPositionError(position) from None
        if isinstance(position, str) or size != 2:
            raise InvalidPositionError(position)

        x, y = position
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPositionError(position)
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every position, top row first, west to east."""
        for y in range(self.height - 1, -1, -1):
            for x in range(self.width):
                yield (x, y)
