"""CSV logging for kiwi drive commands.

Each drive call produces a KinematicsSolution; this module writes one row per
solution with the inputs, the intent vector before and after rotation, and
the raw and normalized wheel speeds.
"""

import csv
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TextIO

from .config import TERM_BLUE, TERM_RESET
from .kiwi import KinematicsSolution

DRIVE_COMMAND_HEADER = [
    "timestamp",
    "strafe",
    "forward",
    "turn",
    "heading",
    "intent_x",
    "intent_y",
    "rotated_x",
    "rotated_y",
    "heading_angle",
    "raw_left",
    "raw_right",
    "raw_slide",
    "left",
    "right",
    "slide",
]


class DataCollector:
    """Manages the CSV file for drive command logging.

    Attributes:
        run_dir: Directory path for this run's output files.
        commands_output_path: Path of the drive command CSV.
    """

    def __init__(self, output_dir: str = ".", run_dir: Optional[str] = None) -> None:
        """Initialize the data collector.

        Args:
            output_dir: Base directory for output files (default: current directory).
            run_dir: Optional specific run directory. If None, creates timestamped
                directory. Can also be set via RUN_DIR environment variable.

        Raises:
            ValueError: If output_dir is not a valid directory.
        """
        output_path = Path(output_dir)
        if output_path.exists() and not output_path.is_dir():
            raise ValueError(f"Output path exists but is not a directory: {output_dir}")

        self.commands_csv_file: Optional[TextIO] = None
        self.commands_csv_writer: Any = None

        if run_dir:
            self.run_dir: Path = Path(run_dir)
        elif env_run_dir := os.environ.get("RUN_DIR"):
            self.run_dir = Path(env_run_dir)
        else:
            # results/run_YYYYMMDD_HHMMSS/
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.run_dir = output_path / "results" / f"run_{timestamp}"

        self.run_dir.mkdir(parents=True, exist_ok=True)
        self.commands_output_path: Path = self.run_dir / "drive_commands.csv"

    def setup(self) -> None:
        """Open the CSV file and write its header. Must be called before logging."""
        self.commands_csv_file = open(self.commands_output_path, "w", newline="")
        self.commands_csv_writer = csv.writer(self.commands_csv_file)
        self.commands_csv_writer.writerow(DRIVE_COMMAND_HEADER)
        self.commands_csv_file.flush()

        logging.info(f"{TERM_BLUE}✓ Initialized data collection to {self.run_dir}{TERM_RESET}")

    def log_solution(self, timestamp: float, solution: KinematicsSolution) -> None:
        """Log one drive command to CSV.

        Args:
            timestamp: Time of the command (seconds).
            solution: Result of the drive call.

        Raises:
            RuntimeError: If setup() has not been called.
        """
        if self.commands_csv_writer is None:
            raise RuntimeError("DataCollector.setup() must be called before logging")

        values = solution.to_dict()
        self.commands_csv_writer.writerow(
            [timestamp] + [values[column] for column in DRIVE_COMMAND_HEADER[1:]]
        )
        if self.commands_csv_file:
            self.commands_csv_file.flush()

    def cleanup(self) -> None:
        """Close the CSV file and log the output location."""
        if self.commands_csv_file:
            self.commands_csv_file.close()
            self.commands_csv_file = None
            self.commands_csv_writer = None

        logging.info(f"{TERM_BLUE}✓ Saved drive commands to {self.commands_output_path}{TERM_RESET}")

    def __enter__(self) -> "DataCollector":
        self.setup()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.cleanup()
