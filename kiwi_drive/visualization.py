"""
Visualization utilities for kiwi drive kinematics.

This module provides functions to plot the wheel layout of a drivetrain and
how each wheel's commanded speed varies as the robot heading sweeps through a
full turn for a fixed field-centric command.
"""

from pathlib import Path
from typing import Dict, Optional, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .config import (
    COLOR_BACKGROUND,
    COLOR_GUIDE,
    COLOR_LEFT,
    COLOR_RIGHT,
    COLOR_SLIDE,
    RESPONSE_SWEEP_SAMPLES,
)
from .geometry import WheelGeometry, WheelRole
from .kiwi import KiwiDrive

WHEEL_COLORS = {
    WheelRole.LEFT: COLOR_LEFT,
    WheelRole.RIGHT: COLOR_RIGHT,
    WheelRole.SLIDE: COLOR_SLIDE,
}


def heading_sweep(
    drive: KiwiDrive,
    strafe_speed: float = 0.0,
    forward_speed: float = 1.0,
    turn: float = 0.0,
    samples: int = RESPONSE_SWEEP_SAMPLES,
) -> Dict[str, np.ndarray]:
    """Compute normalized wheel speeds for headings spanning [0, 2π].

    Motors are not commanded; only ``compute_wheel_speeds`` is used.

    Args:
        drive: Drivebase whose geometry and range are used.
        strafe_speed: Field-centric strafe command.
        forward_speed: Field-centric forward command.
        turn: Rotation command.
        samples: Number of headings, including both endpoints.

    Returns:
        Dictionary with keys 'heading', 'left', 'right', 'slide'.
        Each value is a numpy array of length ``samples``.

    Raises:
        ValueError: If samples is less than 2.
    """
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")

    headings = np.linspace(0.0, 2.0 * np.pi, samples)
    speeds = np.zeros((samples, 3))

    for i, heading in enumerate(headings):
        solution = drive.compute_wheel_speeds(strafe_speed, forward_speed, turn, float(heading))
        speeds[i, :] = solution.speeds

    return {
        "heading": headings,
        "left": speeds[:, WheelRole.LEFT],
        "right": speeds[:, WheelRole.RIGHT],
        "slide": speeds[:, WheelRole.SLIDE],
    }


def _style_axis(ax: Axes, title: str) -> None:
    ax.set_title(title, fontweight="bold")
    ax.set_facecolor(COLOR_BACKGROUND)
    ax.grid(True, color=COLOR_GUIDE, alpha=0.3)


def plot_heading_response(sweep: Dict[str, np.ndarray], ax: Optional[Axes] = None) -> Figure:
    """Plot each wheel's normalized speed against robot heading.

    Args:
        sweep: Output of ``heading_sweep``.
        ax: Optional axes to draw on. A new figure is created if None.

    Returns:
        The figure containing the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    heading_deg = np.degrees(sweep["heading"])
    for role, color in WHEEL_COLORS.items():
        name = role.name.lower()
        ax.plot(heading_deg, sweep[name], color=color, linewidth=2, label=name)

    ax.axhline(1.0, color=COLOR_GUIDE, linestyle="--", linewidth=1)
    ax.axhline(-1.0, color=COLOR_GUIDE, linestyle="--", linewidth=1)
    ax.set_xlim(0.0, 360.0)
    ax.set_ylim(-1.1, 1.1)
    ax.set_xlabel("Heading (deg)")
    ax.set_ylabel("Normalized wheel speed")
    ax.legend(loc="upper right")
    _style_axis(ax, "Wheel Speed vs Heading")

    return fig


def plot_wheel_layout(geometry: WheelGeometry, ax: Optional[Axes] = None) -> Figure:
    """Plot the drive direction of each wheel as an arrow from the robot center.

    Args:
        geometry: Wheel mounting angles.
        ax: Optional axes to draw on. A new figure is created if None.

    Returns:
        The figure containing the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))
    else:
        fig = ax.figure

    ax.add_patch(plt.Circle((0.0, 0.0), 1.0, fill=False, color=COLOR_GUIDE, linestyle=":"))

    for role, unit in zip(WheelRole, geometry.unit_vectors()):
        color = WHEEL_COLORS[role]
        ax.arrow(
            0.0, 0.0, unit.x, unit.y,
            color=color, width=0.02, length_includes_head=True,
        )
        angle_deg = np.degrees(geometry.angle_for(role))
        ax.annotate(
            f"{role.name.lower()} ({angle_deg:.0f}°)",
            xy=(unit.x * 1.15, unit.y * 1.15),
            color=color,
            ha="center",
            va="center",
        )

    # Robot forward axis
    ax.arrow(0.0, 0.0, 0.5, 0.0, color=COLOR_GUIDE, width=0.01, length_includes_head=True)

    ax.set_xlim(-1.5, 1.5)
    ax.set_ylim(-1.5, 1.5)
    ax.set_aspect("equal")
    ax.set_xlabel("Forward (x)")
    ax.set_ylabel("Strafe (y)")
    _style_axis(ax, "Wheel Layout")

    return fig


def plot_drive_summary(
    drive: KiwiDrive,
    strafe_speed: float = 0.0,
    forward_speed: float = 1.0,
    turn: float = 0.0,
    save_path: Optional[Union[str, Path]] = None,
    show: bool = False,
) -> Figure:
    """Plot the wheel layout and heading response side by side.

    Args:
        drive: Drivebase to visualize.
        strafe_speed: Field-centric strafe command for the sweep.
        forward_speed: Field-centric forward command for the sweep.
        turn: Rotation command for the sweep.
        save_path: If given, the figure is saved as PNG to this path.
        show: If True, display the figure interactively.

    Returns:
        The summary figure.
    """
    fig, (layout_ax, response_ax) = plt.subplots(
        1, 2, figsize=(13, 5), gridspec_kw={"width_ratios": [1, 2]}
    )
    plot_wheel_layout(drive.geometry, ax=layout_ax)
    plot_heading_response(
        heading_sweep(drive, strafe_speed, forward_speed, turn), ax=response_ax
    )
    fig.suptitle(
        f"Kiwi Drive - strafe={strafe_speed:.2f} forward={forward_speed:.2f} turn={turn:.2f}",
        fontweight="bold",
    )
    fig.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, dpi=150)
    if show:
        plt.show()

    return fig
