"""Motor actuator interface and an in-memory simulated motor.

The drive code only depends on the ``Motor`` protocol: anything with
``set(speed)`` and ``stop_motor()`` can be driven, whether it is a real
speed controller binding or the ``SimulatedMotor`` below.
"""

from typing import List, Optional, Protocol, runtime_checkable

from .config import MOTOR_OUTPUT_MAX, MOTOR_OUTPUT_MIN


@runtime_checkable
class Motor(Protocol):
    """Actuator that accepts a normalized speed command."""

    def set(self, speed: float) -> None:
        ...

    def stop_motor(self) -> None:
        ...


class SimulatedMotor:
    """Motor stand-in that records every command it receives.

    Commands are clipped to [MOTOR_OUTPUT_MIN, MOTOR_OUTPUT_MAX] the way a
    speed controller saturates its duty cycle.

    Attributes:
        name: Label used in logs and plots.
        inverted: If True, commands are negated before being applied.
        speed: Currently applied output.
        history: Every applied output, in order.
        stop_count: Number of times ``stop_motor`` has been called.
    """

    def __init__(self, name: str = "motor", inverted: bool = False) -> None:
        self.name = name
        self.inverted = inverted
        self.speed: float = 0.0
        self.history: List[float] = []
        self.stop_count: int = 0

    def set(self, speed: float) -> None:
        """Apply a normalized speed command.

        Args:
            speed: Requested output, nominally in [-1, 1].
        """
        if self.inverted:
            speed = -speed
        self.speed = max(MOTOR_OUTPUT_MIN, min(MOTOR_OUTPUT_MAX, speed))
        self.history.append(self.speed)

    def stop_motor(self) -> None:
        self.speed = 0.0
        self.stop_count += 1

    @property
    def last_command(self) -> Optional[float]:
        """Most recent applied output, or None if never commanded."""
        return self.history[-1] if self.history else None

    def __repr__(self) -> str:
        return f"SimulatedMotor(name={self.name!r}, speed={self.speed:.3f})"
