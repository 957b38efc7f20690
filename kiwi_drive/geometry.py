"""Wheel geometry for a three-wheel holonomic (kiwi) drivetrain.

Each wheel is described by the angle of its drive direction, measured
counter-clockwise from the robot's forward axis. The drive direction is the
unit vector (cos θ, sin θ) used for projecting the commanded velocity.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .config import DEFAULT_LEFT_ANGLE, DEFAULT_RIGHT_ANGLE, DEFAULT_SLIDE_ANGLE
from .exceptions import DegenerateGeometryError
from .vector import Vector2d


class WheelRole(IntEnum):
    """Wheel positions, used as indices into motor and speed triples."""

    LEFT = 0
    RIGHT = 1
    SLIDE = 2


@dataclass(frozen=True)
class WheelGeometry:
    """Mounting angles of the three wheels (radians).

    Angles are not checked for distinctness: coincident or antiparallel
    wheels give an uncontrollable drivetrain and are the caller's problem.
    Non-finite angles are rejected since they cannot produce a direction.

    Attributes:
        left_angle: Left wheel drive direction (default: π/3)
        right_angle: Right wheel drive direction (default: 2π/3)
        slide_angle: Slide wheel drive direction (default: 3π/2)
    """

    left_angle: float = DEFAULT_LEFT_ANGLE
    right_angle: float = DEFAULT_RIGHT_ANGLE
    slide_angle: float = DEFAULT_SLIDE_ANGLE

    def __post_init__(self) -> None:
        for role, angle in zip(WheelRole, self.angles()):
            if not math.isfinite(angle):
                raise DegenerateGeometryError(
                    f"{role.name.lower()} wheel angle must be finite, got {angle}"
                )

    def angles(self) -> Tuple[float, float, float]:
        """Return the angles in role order (left, right, slide)."""
        return (self.left_angle, self.right_angle, self.slide_angle)

    def angle_for(self, role: WheelRole) -> float:
        return self.angles()[role]

    def unit_vectors(self) -> Tuple[Vector2d, Vector2d, Vector2d]:
        """Return each wheel's unit drive direction in role order."""
        left, right, slide = (Vector2d.from_angle(angle) for angle in self.angles())
        return (left, right, slide)


DEFAULT_GEOMETRY = WheelGeometry()
"""Standard kiwi layout: wheels at 60°, 120° and 270°."""
