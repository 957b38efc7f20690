#!/usr/bin/env python3
"""
Command-line interface for kiwi drive kinematics.

Computes and prints the wheel commands for a single robot-centric or
field-centric drive command, driving three simulated motors. Optionally logs
the command to CSV and plots the wheel layout and heading response.
"""

import argparse
import logging
import math
import sys
import time
from typing import List, Optional

from .config import LOG_DATE_FORMAT, TERM_BLUE, TERM_ORANGE, TERM_RESET
from .data_collector import DataCollector
from .exceptions import KiwiDriveError
from .geometry import WheelGeometry, WheelRole
from .kiwi import KiwiDrive
from .motor import SimulatedMotor


class CustomFormatter(logging.Formatter):
    """Custom logging formatter that removes timestamps from INFO messages.

    INFO messages are printed bare for clean console output, while WARNING,
    ERROR and DEBUG messages keep their timestamp and level.
    """

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        else:
            return f"{self.formatTime(record, self.datefmt)} - {record.levelname} - {record.getMessage()}"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose: If True, show all levels with timestamps. If False, show INFO
                 without timestamps and WARNING/ERROR with timestamps.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt=LOG_DATE_FORMAT,
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(CustomFormatter(datefmt=LOG_DATE_FORMAT))
        logger = logging.getLogger()
        logger.setLevel(logging.INFO)
        logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute kiwi drive wheel commands for a velocity command",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Pure forward, robot-centric
  python -m kiwi_drive --forward 1

  # Field-centric strafe with the robot turned 90 degrees
  python -m kiwi_drive --strafe 0.5 --heading-deg 90

  # Log the command to CSV and save a plot
  python -m kiwi_drive --forward 0.8 --turn 0.3 --log --save-plot summary.png
        """,
    )
    parser.add_argument("--strafe", type=float, default=0.0, help="Strafe command (default: 0)")
    parser.add_argument("--forward", type=float, default=0.0, help="Forward command (default: 0)")
    parser.add_argument("--turn", type=float, default=0.0, help="Rotation command (default: 0)")

    heading = parser.add_mutually_exclusive_group()
    heading.add_argument(
        "--heading", type=float, default=None,
        help="Robot heading in radians for field-centric driving",
    )
    heading.add_argument(
        "--heading-deg", type=float, default=None,
        help="Robot heading in degrees for field-centric driving",
    )

    parser.add_argument(
        "--max-speed", type=float, default=None, help="Max output multiplier (default: 1.0)"
    )
    parser.add_argument(
        "--range", type=float, nargs=2, metavar=("MIN", "MAX"), default=None,
        help="Input clipping range (default: -1 1)",
    )
    parser.add_argument(
        "--angles", type=float, nargs=3, metavar=("LEFT", "RIGHT", "SLIDE"), default=None,
        help="Wheel mounting angles in radians (default: pi/3 2pi/3 3pi/2)",
    )
    parser.add_argument("--log", action="store_true", help="Write the command to a CSV file")
    parser.add_argument(
        "--output-dir", type=str, default=".", help="Base directory for CSV output (default: .)"
    )
    parser.add_argument("--plot", action="store_true", help="Show the drive summary plot")
    parser.add_argument(
        "--save-plot", type=str, default=None, help="Save the drive summary plot to PATH"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging with timestamps"
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute one drive command from parsed arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    motors = [SimulatedMotor(role.name.lower()) for role in WheelRole]
    geometry = WheelGeometry(*args.angles) if args.angles else None
    drive = KiwiDrive(motors, geometry)

    if args.range:
        drive.set_range(*args.range)
    if args.max_speed is not None:
        drive.set_max_speed(args.max_speed)

    if args.heading_deg is not None:
        heading: Optional[float] = math.radians(args.heading_deg)
    else:
        heading = args.heading

    if heading is None:
        solution = drive.drive_robot_centric(args.strafe, args.forward, args.turn)
        mode = "robot-centric"
    else:
        solution = drive.drive_field_centric(args.strafe, args.forward, args.turn, heading)
        mode = f"field-centric, heading={heading:.3f} rad"

    logging.info(
        f"{TERM_BLUE}Command ({mode}): strafe={solution.strafe_speed:.3f} "
        f"forward={solution.forward_speed:.3f} turn={solution.turn:.3f}{TERM_RESET}"
    )
    for motor in motors:
        logging.info(f"{TERM_ORANGE}  {motor.name:<6} {motor.speed:+.3f}{TERM_RESET}")

    if args.log:
        with DataCollector(output_dir=args.output_dir) as collector:
            collector.log_solution(time.time(), solution)

    if args.plot or args.save_plot:
        from .visualization import plot_drive_summary

        try:
            plot_drive_summary(
                drive,
                strafe_speed=args.strafe,
                forward_speed=args.forward,
                turn=args.turn,
                save_path=args.save_plot,
                show=args.plot,
            )
        except OSError as e:
            logging.error(f"Error saving plot: {e}")
            return 1
        if args.save_plot:
            logging.info(f"{TERM_BLUE}✓ Saved plot to {args.save_plot}{TERM_RESET}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        return run(args)
    except KiwiDriveError as e:
        logging.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
