"""
Toy Robot Driver - Command Batch Runner

Reads command batches and feeds them to a fresh table and robot.

Input format:
- batches are separated by blank lines
- one command per line: NAME or NAME ARGS
- PLACE takes x,y,HEADING with no spaces, e.g. PLACE 0,0,NORTH

Usage:
    toyrobot [commands_file]
    python -m toyrobot.src.driver [commands_file]
"""

import argparse
import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import ToyRobotConfig, get_default_config, setup_logging
from .simulation.robot import Robot
from .simulation.table import RobotError, Table
from .simulation.visualizer import TableVisualizer

logger = logging.getLogger(__name__)

_BLANK_LINE = re.compile(r"\n[ \t]*\n")


def split_batches(text: str) -> List[str]:
    """Split input text into command batches on blank lines."""
    text = text.replace("\r\n", "\n")
    return [batch.strip("\n") for batch in _BLANK_LINE.split(text) if batch.strip()]


def parse_command(line: str) -> Optional[Tuple[str, Optional[str]]]:
    """
    Parse a command line into (name, args).

    Returns:
        None for a blank line, otherwise the command name and its
        argument string (None if there is none)
    """
    parts = line.split(None, 1)
    if not parts:
        return None
    name = parts[0]
    args = parts[1].strip() if len(parts) > 1 else None
    return name, args


@dataclass
class BatchResult:
    """
    Outcome of running one command batch.
    """
    commands: List[str] = field(default_factory=list)
    reports: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    final_report: str = ""

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Export result to dictionary."""
        return {
            "commands": self.commands,
            "reports": self.reports,
            "errors": self.errors,
            "final_report": self.final_report,
            "success": self.success,
        }


class CommandRunner:
    """
    Runs command batches, one fresh table and robot per batch.

    Example:
        runner = CommandRunner()
        results = runner.run_text("PLACE 0,0,NORTH\\nMOVE\\nREPORT")
        # prints 0,1,NORTH
    """

    def __init__(
        self,
        config: Optional[ToyRobotConfig] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize the runner.

        Args:
            config: Simulator configuration (defaults to the environment)
            output: Sink for REPORT lines and table renderings (defaults to print)
        """
        self.config = config or get_default_config()
        self.config.validate()
        self.output = output or print

    def run_batch(self, batch: str) -> BatchResult:
        """
        Run a single batch of commands.

        A command that raises RobotError is logged and recorded,
        then the batch carries on with the next command.
        """
        result = BatchResult()
        table = Table(self.config.width, self.config.height)

        def sink(line: str) -> None:
            result.reports.append(line)
            self.output(line)

        robot = Robot(output=sink)

        for line in batch.splitlines():
            parsed = parse_command(line)
            if parsed is None:
                continue
            name, args = parsed
            result.commands.append(line.strip())

            try:
                robot.execute(name, args, table)
            except RobotError as e:
                logger.warning(f"Command {line.strip()!r} failed: {e}")
                result.errors.append(f"{line.strip()}: {e}")

        result.final_report = robot.report()
        if self.config.show_table:
            self.output(TableVisualizer(table).render(robot))
        return result

    def run_text(self, text: str) -> List[BatchResult]:
        """Run every batch in the given text."""
        batches = split_batches(text)
        logger.info(f"Running {len(batches)} batch(es)")
        return [self.run_batch(batch) for batch in batches]

    def run_file(self, path: str) -> List[BatchResult]:
        """Read a commands file and run every batch in it."""
        text = Path(path).read_text(encoding="utf-8")
        logger.info(f"Loaded commands from {path}")
        return self.run_text(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    parser = argparse.ArgumentParser(
        prog="toyrobot",
        description="Run toy robot command batches from a file",
    )
    parser.add_argument("commands_file", nargs="?",
                        help="Commands file (default: TOYROBOT_COMMANDS_FILE or commands.txt)")
    args = parser.parse_args(argv)

    try:
        config = get_default_config()
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    setup_logging(config)

    path = args.commands_file or config.commands_file
    if not Path(path).is_file():
        logger.error(f"Commands file not found: {path}")
        return 1

    try:
        CommandRunner(config).run_file(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read commands file {path}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
