"""Immutable 2D vector used for velocity intents and wheel directions."""

import math
from dataclasses import dataclass

from .exceptions import DegenerateVectorError


@dataclass(frozen=True)
class Vector2d:
    """Immutable 2D vector.

    Attributes:
        x: Component along the robot's forward axis.
        y: Component along the robot's left (strafe) axis.
    """

    x: float
    y: float

    @staticmethod
    def from_angle(theta: float, length: float = 1.0) -> "Vector2d":
        """Create a vector pointing along ``theta`` radians from the +x axis."""
        return Vector2d(math.cos(theta) * length, math.sin(theta) * length)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: "Vector2d") -> float:
        return self.x * other.x + self.y * other.y

    def angle(self) -> float:
        """Polar angle in radians, range (-π, π]."""
        return math.atan2(self.y, self.x)

    def rotate_by(self, theta: float) -> "Vector2d":
        """Return this vector rotated counter-clockwise by ``theta`` radians.

        Rotation preserves magnitude:
            x' = x * cos(theta) - y * sin(theta)
            y' = x * sin(theta) + y * cos(theta)
        """
        cos_theta = math.cos(theta)
        sin_theta = math.sin(theta)
        return Vector2d(
            self.x * cos_theta - self.y * sin_theta,
            self.x * sin_theta + self.y * cos_theta,
        )

    def scalar_project(self, other: "Vector2d") -> float:
        """Signed length of this vector's component along ``other``.

        Computed as ``dot(other) / |other|``.

        Args:
            other: Vector to project onto. Must have non-zero magnitude.

        Returns:
            Scalar projection of this vector onto ``other``.

        Raises:
            DegenerateVectorError: If ``other`` has zero magnitude.
        """
        magnitude = other.magnitude()
        if magnitude == 0.0:
            raise DegenerateVectorError(f"Cannot project onto zero-magnitude vector {other}")
        return self.dot(other) / magnitude
