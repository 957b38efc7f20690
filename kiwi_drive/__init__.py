"""Kiwi Drive - Kinematics for Three-Wheel Holonomic Drivetrains

Converts a desired translational velocity and rotation rate into normalized
commands for the three omni wheels of a kiwi drivetrain, in either
robot-centric or field-centric mode.

## Pipeline

Each drive call runs a fixed sequence of steps:

1. Input clipping: strafe and forward commands are clipped to the configured
   range (default [-1, 1]).
2. Intent vector: (forward, strafe) becomes a 2D vector, forward on the x-axis.
3. Heading rotation: field-centric commands are rotated counter-clockwise by
   the robot heading. Robot-centric commands use heading 0.
4. Projection: each wheel speed is the scalar projection of the vector onto
   the wheel's drive direction, plus the turn command.
5. Normalization: if any wheel exceeds full scale, all wheels are scaled
   down by the same factor.
6. Dispatch: speeds are multiplied by the max output and sent to the motors.

## Modules

- `config.py` - Default geometry, ranges and display settings
- `vector.py` - Immutable 2D vector (rotation, angle, projection)
- `geometry.py` - Wheel roles and mounting angles
- `robot_drive.py` - Range clipping, max output and normalization
- `kiwi.py` - The kiwi drivebase and its kinematics
- `motor.py` - Motor protocol and simulated motor
- `data_collector.py` - CSV logging of drive commands
- `visualization.py` - Wheel layout and heading response plots
- `cli.py` - Command-line interface

## Quick Start

```python
from kiwi_drive import KiwiDrive, SimulatedMotor

drive = KiwiDrive.from_roles(SimulatedMotor("left"), SimulatedMotor("right"),
                             SimulatedMotor("slide"))
drive.drive_robot_centric(strafe_speed=0.0, forward_speed=1.0, turn=0.0)
```

Or use the command-line interface:
```bash
python -m kiwi_drive --forward 1 --heading-deg 45
```
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfigurationError,
    DegenerateGeometryError,
    DegenerateVectorError,
    InvalidCommandError,
    KiwiDriveError,
)
from .geometry import DEFAULT_GEOMETRY, WheelGeometry, WheelRole
from .kiwi import KinematicsSolution, KiwiDrive, WheelSpeeds
from .motor import Motor, SimulatedMotor
from .robot_drive import RobotDrive
from .vector import Vector2d

__all__ = [
    "Vector2d",
    "WheelRole",
    "WheelGeometry",
    "DEFAULT_GEOMETRY",
    "RobotDrive",
    "KiwiDrive",
    "KinematicsSolution",
    "WheelSpeeds",
    "Motor",
    "SimulatedMotor",
    "KiwiDriveError",
    "ConfigurationError",
    "DegenerateGeometryError",
    "DegenerateVectorError",
    "InvalidCommandError",
]
