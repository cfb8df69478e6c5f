"""
Table Visualizer

ASCII rendering of the table, the robot and the path it has taken.
"""

from typing import List

from .robot import Direction, Robot
from .table import Table


class TableVisualizer:
    """
    Renders a table with north at the top.
    """

    DIRECTION_ARROWS = {
        Direction.NORTH: "△",
        Direction.EAST: "▷",
        Direction.SOUTH: "▽",
        Direction.WEST: "◁",
    }

    def __init__(self, table: Table):
        self.table = table

    def render(self, robot: Robot) -> str:
        """
        Render the table with the robot on it.

        Args:
            robot: Robot to draw; an unplaced robot leaves the table empty

        Returns:
            Boxed ASCII grid followed by the robot's report line
        """
        state = robot.state
        path = set(robot.history) if state.placed else set()

        lines: List[str] = []
        lines.append("┌" + "─" * (self.table.width * 2 + 1) + "┐")

        row = "│ "
        for x, y in self.table.cells():
            if state.placed and (x, y) == state.position:
                row += self.DIRECTION_ARROWS[state.direction]
            elif (x, y) in path:
                row += "•"
            else:
                row += "."
            row += " "

            if x == self.table.width - 1:
                lines.append(row + "│")
                row = "│ "

        lines.append("└" + "─" * (self.table.width * 2 + 1) + "┘")
        lines.append(robot.report() or "(not placed)")
        return "\n".join(lines)
