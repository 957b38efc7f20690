"""Configuration parameters for the kiwi drive package.

This module centralizes all configuration parameters including:
- Wheel geometry (mounting angles)
- Drive input range and output scaling
- Motor output limits
- Visualization and terminal settings

All parameters are documented with their purpose and valid ranges.
"""

import numpy as np

# ============================================================================
# Wheel Geometry
# ============================================================================

WHEEL_COUNT = 3
"""Number of driven wheels on a kiwi drivetrain.
Fixed by the three-wheel holonomic design."""

DEFAULT_LEFT_ANGLE = np.pi / 3
"""Mounting angle of the left wheel (radians).

Angle of the wheel's drive direction measured counter-clockwise from the
robot's forward (+x) axis. π/3 = 60°."""

DEFAULT_RIGHT_ANGLE = 2 * np.pi / 3
"""Mounting angle of the right wheel (radians). 2π/3 = 120°."""

DEFAULT_SLIDE_ANGLE = 3 * np.pi / 2
"""Mounting angle of the slide wheel (radians). 3π/2 = 270°.

The slide wheel drives perpendicular to the forward axis, so it contributes
nothing to pure forward motion."""


# ============================================================================
# Drive Input and Output Scaling
# ============================================================================

DEFAULT_RANGE_MIN = -1.0
"""Lower bound for clipping strafe and forward inputs (range: (-inf, max))."""

DEFAULT_RANGE_MAX = 1.0
"""Upper bound for clipping strafe and forward inputs (range: (min, inf))."""

DEFAULT_MAX_OUTPUT = 1.0
"""Multiplier applied to every normalized wheel speed before dispatch.

Range [0, 1] for normal use. Values below 1 limit the top speed of the
drivetrain without changing the steering ratios between wheels."""

NORMALIZATION_THRESHOLD = 1.0
"""Largest absolute wheel speed allowed after normalization.

Speed sets whose largest magnitude exceeds this value are scaled down
uniformly. Sets already within the bound are passed through unchanged."""


# ============================================================================
# Motor Output Limits
# ============================================================================

MOTOR_OUTPUT_MIN = -1.0
"""Minimum normalized motor command (full reverse)."""

MOTOR_OUTPUT_MAX = 1.0
"""Maximum normalized motor command (full forward)."""


# ============================================================================
# Visualization
# ============================================================================

# Brand colors (hex codes for matplotlib)
COLOR_LEFT = "#f74823"
"""Left wheel trace color (orange)."""

COLOR_RIGHT = "#2374f7"
"""Right wheel trace color (blue)."""

COLOR_SLIDE = "#ffa726"
"""Slide wheel trace color (yellow-orange)."""

COLOR_GUIDE = "#686a5f"
"""Neutral color for guides, grids, and the robot outline."""

COLOR_BACKGROUND = "#fffdee"
"""Light background color for figures."""

RESPONSE_SWEEP_SAMPLES = 361
"""Number of heading samples in [0, 2π) used by the heading response plot.
361 gives one sample per degree plus the closing point."""


# ============================================================================
# Terminal Output and Logging
# ============================================================================

TERM_ORANGE = "\033[38;2;247;72;35m"
"""Terminal color code for orange (RGB: 247, 72, 35)."""

TERM_BLUE = "\033[38;2;35;116;247m"
"""Terminal color code for blue (RGB: 35, 116, 247)."""

TERM_RESET = "\033[0m"
"""Terminal color reset code."""

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Timestamp format for WARNING/ERROR log lines and verbose mode."""
