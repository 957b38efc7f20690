"""Shared fixtures for kiwi drive tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from kiwi_drive import KiwiDrive, SimulatedMotor


@pytest.fixture
def motors():
    return [SimulatedMotor("left"), SimulatedMotor("right"), SimulatedMotor("slide")]


@pytest.fixture
def drive(motors):
    return KiwiDrive(motors)
