"""Kiwi (three-wheel holonomic) drivebase kinematics.

This module converts a desired translational velocity and rotation rate into
normalized commands for the three wheels of a kiwi drivetrain.

For each wheel w with unit drive direction u_w:
    speed_w = scalar_project(v, u_w) + turn

where v is the commanded (forward, strafe) vector, rotated by the robot
heading when driving field-centric. The three speeds are then normalized so
none exceeds full scale, multiplied by the configured max output and sent to
the motors.
"""

import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, NamedTuple, Optional, Sequence, Tuple

from .config import WHEEL_COUNT
from .exceptions import ConfigurationError, InvalidCommandError
from .geometry import DEFAULT_GEOMETRY, WheelGeometry, WheelRole
from .motor import Motor
from .robot_drive import RobotDrive
from .vector import Vector2d


class WheelSpeeds(NamedTuple):
    """Per-wheel speeds in role order."""

    left: float
    right: float
    slide: float

    def for_role(self, role: WheelRole) -> float:
        return self[role]

    def max_abs(self) -> float:
        return max(abs(s) for s in self)


@dataclass(frozen=True)
class KinematicsSolution:
    """Everything computed during one drive call.

    Attributes:
        strafe_speed: Strafe input after range clipping.
        forward_speed: Forward input after range clipping.
        turn: Rotation command added to every wheel.
        heading: Heading used to rotate the intent (radians, 0 for robot-centric).
        intent: (forward, strafe) vector before rotation.
        rotated: Intent rotated by heading into the robot frame.
        raw_speeds: Wheel speeds before normalization.
        speeds: Normalized wheel speeds in [-1, 1].
    """

    strafe_speed: float
    forward_speed: float
    turn: float
    heading: float
    intent: Vector2d
    rotated: Vector2d
    raw_speeds: WheelSpeeds
    speeds: WheelSpeeds

    @property
    def heading_angle(self) -> float:
        """Polar angle of the rotated intent (radians). Diagnostic only."""
        return self.rotated.angle()

    def to_dict(self) -> Dict[str, float]:
        """Flatten the solution for logging and CSV output."""
        return {
            "strafe": self.strafe_speed,
            "forward": self.forward_speed,
            "turn": self.turn,
            "heading": self.heading,
            "intent_x": self.intent.x,
            "intent_y": self.intent.y,
            "rotated_x": self.rotated.x,
            "rotated_y": self.rotated.y,
            "heading_angle": self.heading_angle,
            **{f"raw_{k}": v for k, v in self.raw_speeds._asdict().items()},
            **self.speeds._asdict(),
        }


class KiwiDrive(RobotDrive):
    """Three-wheel holonomic drivebase.

    Motors are held in role order (left, right, slide). The wheel geometry
    and motor handles are fixed at construction; only the inherited range
    and max output can change afterwards.

    Attributes:
        motors: The three motors in role order.
        geometry: Wheel mounting angles.
    """

    def __init__(self, motors: Sequence[Motor], geometry: Optional[WheelGeometry] = None) -> None:
        """Initialize the drivebase.

        Args:
            motors: Exactly three motors in order (left, right, slide).
            geometry: Wheel mounting angles. Default: π/3, 2π/3, 3π/2.

        Raises:
            ConfigurationError: If the number of motors is not three, or a
                motor lacks ``set``/``stop_motor``.
        """
        super().__init__()
        if len(motors) != WHEEL_COUNT:
            raise ConfigurationError(
                f"Kiwi drive requires exactly {WHEEL_COUNT} motors, got {len(motors)}"
            )
        for role, motor in zip(WheelRole, motors):
            if not isinstance(motor, Motor):
                raise ConfigurationError(
                    f"{role.name.lower()} motor must provide set() and stop_motor(), got {motor!r}"
                )

        self.motors: Tuple[Motor, ...] = tuple(motors)
        self.geometry: WheelGeometry = geometry if geometry is not None else DEFAULT_GEOMETRY
        self._wheel_vectors = self.geometry.unit_vectors()

    @classmethod
    def from_roles(cls, left: Motor, right: Motor, slide: Motor) -> "KiwiDrive":
        """Build a drivebase from role-named motors with the default geometry."""
        return cls((left, right, slide))

    @classmethod
    def from_geometry(
        cls,
        left: Motor,
        right: Motor,
        slide: Motor,
        left_angle: float,
        right_angle: float,
        slide_angle: float,
    ) -> "KiwiDrive":
        """Build a drivebase from role-named motors and explicit wheel angles (radians)."""
        return cls((left, right, slide), WheelGeometry(left_angle, right_angle, slide_angle))

    def motor_for(self, role: WheelRole) -> Motor:
        return self.motors[role]

    def compute_wheel_speeds(
        self, strafe_speed: float, forward_speed: float, turn: float, heading: float = 0.0
    ) -> KinematicsSolution:
        """Compute normalized wheel speeds without commanding the motors.

        Args:
            strafe_speed: Sideways command, positive to the left.
            forward_speed: Forward command.
            turn: Rotation command, positive counter-clockwise.
            heading: Robot heading in radians (CCW positive). 0 = robot-centric.

        Returns:
            KinematicsSolution with raw and normalized speeds.

        Raises:
            InvalidCommandError: If any input is NaN or infinite.
        """
        for name, value in (
            ("strafe_speed", strafe_speed),
            ("forward_speed", forward_speed),
            ("turn", turn),
            ("heading", heading),
        ):
            if not math.isfinite(value):
                raise InvalidCommandError(f"{name} must be finite, got {value}")

        logging.debug(
            f"KiwiDrive command - strafe_speed={strafe_speed:.3f} "
            f"forward_speed={forward_speed:.3f} turn={turn:.3f} heading={heading:.3f}"
        )

        strafe_speed = self.clip_range(strafe_speed)
        forward_speed = self.clip_range(forward_speed)

        # Forward is the x-axis, strafe the y-axis
        intent = Vector2d(forward_speed, strafe_speed)
        logging.debug(f"KiwiDrive before-rotate - x={intent.x:.3f} y={intent.y:.3f}")

        rotated = intent.rotate_by(heading)
        logging.debug(f"KiwiDrive after-rotate - x={rotated.x:.3f} y={rotated.y:.3f}")

        raw_speeds = WheelSpeeds(
            *(rotated.scalar_project(wheel) + turn for wheel in self._wheel_vectors)
        )
        speeds = WheelSpeeds(*self.normalize(raw_speeds))
        logging.debug(
            f"KiwiDrive speeds - left={speeds.left:.3f} right={speeds.right:.3f} "
            f"slide={speeds.slide:.3f}"
        )

        return KinematicsSolution(
            strafe_speed=strafe_speed,
            forward_speed=forward_speed,
            turn=turn,
            heading=heading,
            intent=intent,
            rotated=rotated,
            raw_speeds=raw_speeds,
            speeds=speeds,
        )

    def drive_field_centric(
        self, strafe_speed: float, forward_speed: float, turn: float, heading: float
    ) -> KinematicsSolution:
        """Drive relative to the field.

        The (forward, strafe) command is rotated by the robot heading so that
        it is expressed in the robot frame before being split across wheels.

        Args:
            strafe_speed: Sideways command relative to the field.
            forward_speed: Forward command relative to the field.
            turn: Rotation command, positive counter-clockwise.
            heading: Robot heading in radians, counter-clockwise positive.

        Returns:
            The KinematicsSolution that was dispatched.

        Raises:
            InvalidCommandError: If any input is NaN or infinite. No motor is
                commanded in that case.
        """
        solution = self.compute_wheel_speeds(strafe_speed, forward_speed, turn, heading)
        self._dispatch(solution.speeds)
        return solution

    def drive_robot_centric(
        self, strafe_speed: float, forward_speed: float, turn: float
    ) -> KinematicsSolution:
        """Drive relative to the robot's own forward axis."""
        return self.drive_field_centric(strafe_speed, forward_speed, turn, 0.0)

    def _dispatch(self, speeds: WheelSpeeds) -> None:
        outputs = [speed * self.max_output for speed in speeds]
        try:
            for motor, output in zip(self.motors, outputs):
                motor.set(output)
        except Exception:
            logging.error("KiwiDrive motor command failed, stopping all motors")
            for motor in self.motors:
                try:
                    motor.stop_motor()
                except Exception as e:
                    logging.error(f"KiwiDrive failed to stop {motor!r}: {e}")
            raise

    def stop(self) -> None:
        """Send a stop command to every motor."""
        for motor in self.motors:
            motor.stop_motor()

    def get_diagnostics(self) -> Dict[str, float]:
        """Get the current drive configuration for logging and debugging."""
        return {
            "range_min": self.range_min,
            "range_max": self.range_max,
            "max_output": self.max_output,
            **asdict(self.geometry),
        }
