"""Exception types raised by the kiwi drive package.

All errors derive from ``ValueError`` so callers that already validate
arguments by catching ``ValueError`` keep working.
"""


class KiwiDriveError(ValueError):
    """Base class for all kiwi drive errors."""


class ConfigurationError(KiwiDriveError):
    """Raised when the drivetrain is configured with invalid parameters.

    Examples: a motor count other than three, an empty input range, or a
    negative maximum output.
    """


class DegenerateGeometryError(ConfigurationError):
    """Raised when a wheel angle cannot produce a unit direction vector."""


class DegenerateVectorError(KiwiDriveError):
    """Raised when projecting onto a vector with zero magnitude."""


class InvalidCommandError(KiwiDriveError):
    """Raised when a drive command contains NaN or infinite values."""
