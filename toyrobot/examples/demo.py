#!/usr/bin/env python3
"""
Toy Robot Demo

This script walks a robot through a few command batches
and draws the table after each one.
"""

import sys
from pathlib import Path

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import create_config
from src.driver import CommandRunner
from src.simulation.robot import Direction, Robot, Rotation
from src.simulation.table import Table
from src.simulation.visualizer import TableVisualizer


def print_separator(title: str = ""):
    """Print a visual separator."""
    print("\n" + "=" * 40)
    if title:
        print(f"  {title}")
        print("=" * 40)


def demo_chained_calls():
    """Drive the robot through the Python API."""
    print_separator("CHAINED CALLS")

    table = Table()
    robot = (
        Robot()
        .place(table, 0, 0, Direction.NORTH)
        .move()
        .rotate(Rotation.RIGHT)
        .move()
        .rotate(Rotation.RIGHT)
        .move()
        .rotate(Rotation.RIGHT)
        .move()
        .rotate(Rotation.RIGHT)
    )
    print(TableVisualizer(table).render(robot))


def demo_command_batches():
    """Run textual command batches, one fresh robot per batch."""
    print_separator("COMMAND BATCHES")

    commands = "\n".join([
        "PLACE 0,0,NORTH",
        "MOVE",
        "REPORT",
        "",
        "PLACE 0,4,NORTH",
        "MOVE",
        "REPORT",
        "",
        "MOVE",
        "LEFT",
        "REPORT",
        "",
        "PLACE -1,-1,NORTH",
        "PLACE 1,2,EAST",
        "MOVE",
        "MOVE",
        "LEFT",
        "MOVE",
        "REPORT",
    ])

    runner = CommandRunner(config=create_config(show_table=True))
    for i, result in enumerate(runner.run_text(commands), start=1):
        status = "✅" if result.success else "❌ " + "; ".join(result.errors)
        print(f"Batch {i}: {result.final_report or '(not placed)'} {status}")


if __name__ == "__main__":
    demo_chained_calls()
    demo_command_batches()
