"""Base drivebase providing input clipping, output scaling and normalization.

Concrete drivetrains (``KiwiDrive``) inherit the range and max-output
configuration from ``RobotDrive`` and only implement their own kinematics
and ``stop``.
"""

import math
from abc import ABC, abstractmethod
from typing import Sequence, Tuple

import numpy as np

from .config import (
    DEFAULT_MAX_OUTPUT,
    DEFAULT_RANGE_MAX,
    DEFAULT_RANGE_MIN,
    NORMALIZATION_THRESHOLD,
)
from .exceptions import ConfigurationError


class RobotDrive(ABC):
    """Shared configuration for all drivebases.

    Attributes:
        range_min: Lower clip bound for drive inputs (default: -1.0)
        range_max: Upper clip bound for drive inputs (default: 1.0)
        max_output: Multiplier applied to wheel speeds before dispatch (default: 1.0)
    """

    def __init__(self) -> None:
        self.range_min: float = DEFAULT_RANGE_MIN
        self.range_max: float = DEFAULT_RANGE_MAX
        self.max_output: float = DEFAULT_MAX_OUTPUT

    def set_range(self, minimum: float, maximum: float) -> None:
        """Set the range inputs are clipped to.

        Args:
            minimum: Lower bound of the range.
            maximum: Upper bound of the range. Must be greater than minimum.

        Raises:
            ConfigurationError: If either bound is not finite or minimum >= maximum.
        """
        if not (math.isfinite(minimum) and math.isfinite(maximum)):
            raise ConfigurationError(f"Range bounds must be finite, got [{minimum}, {maximum}]")
        if minimum >= maximum:
            raise ConfigurationError(
                f"Range minimum must be below maximum, got [{minimum}, {maximum}]"
            )
        self.range_min = minimum
        self.range_max = maximum

    def set_max_speed(self, value: float) -> None:
        """Set the multiplier applied to every wheel speed before dispatch.

        Args:
            value: Maximum output, non-negative. 1.0 allows full speed.

        Raises:
            ConfigurationError: If value is negative or not finite.
        """
        if not math.isfinite(value) or value < 0.0:
            raise ConfigurationError(f"Max speed must be a finite value >= 0, got {value}")
        self.max_output = value

    def clip_range(self, value: float) -> float:
        """Clip value to [range_min, range_max]."""
        return max(self.range_min, min(self.range_max, value))

    @staticmethod
    def normalize(
        wheel_speeds: Sequence[float], magnitude: float = NORMALIZATION_THRESHOLD
    ) -> Tuple[float, ...]:
        """Scale wheel speeds down so none exceeds ``magnitude`` in absolute value.

        If the largest absolute speed is above ``magnitude`` every speed is
        divided by the same factor, preserving the ratios between wheels.
        Otherwise the speeds are returned unchanged. The input is never
        modified.

        Args:
            wheel_speeds: Raw wheel speeds.
            magnitude: Largest absolute speed allowed (default: 1.0).

        Returns:
            Tuple of normalized speeds, same order as the input.
        """
        speeds = np.asarray(wheel_speeds, dtype=float)
        if speeds.size == 0:
            return ()

        max_magnitude = float(np.max(np.abs(speeds)))
        if max_magnitude > magnitude:
            speeds = speeds / max_magnitude * magnitude

        return tuple(float(s) for s in speeds)

    @staticmethod
    def square_input(value: float) -> float:
        """Square an input while keeping its sign, for finer control near zero."""
        return math.copysign(value * value, value)

    @abstractmethod
    def stop(self) -> None:
        """Stop every motor of the drivebase."""
