"""Tests for the kiwi drivebase kinematics."""

import itertools
import math

import numpy as np
import pytest

from kiwi_drive import (
    ConfigurationError,
    DegenerateGeometryError,
    InvalidCommandError,
    KiwiDrive,
    SimulatedMotor,
    WheelGeometry,
    WheelRole,
)


class FailingMotor(SimulatedMotor):
    def set(self, speed):
        raise RuntimeError("speed controller fault")


def speeds_of(motors):
    return [motor.speed for motor in motors]


# ============================================================================
# Construction
# ============================================================================


@pytest.mark.parametrize("count", [0, 2, 4])
def test_wrong_motor_count_rejected(count):
    with pytest.raises(ConfigurationError, match="exactly 3"):
        KiwiDrive([SimulatedMotor() for _ in range(count)])


def test_from_roles_orders_motors(motors):
    drive = KiwiDrive.from_roles(*motors)
    assert drive.motor_for(WheelRole.LEFT) is motors[0]
    assert drive.motor_for(WheelRole.RIGHT) is motors[1]
    assert drive.motor_for(WheelRole.SLIDE) is motors[2]
    assert drive.geometry == WheelGeometry()


def test_from_geometry_sets_angles(motors):
    drive = KiwiDrive.from_geometry(*motors, 0.0, 2 * math.pi / 3, 4 * math.pi / 3)
    assert drive.geometry.angles() == (0.0, 2 * math.pi / 3, 4 * math.pi / 3)


def test_from_geometry_rejects_non_finite_angle(motors):
    with pytest.raises(DegenerateGeometryError):
        KiwiDrive.from_geometry(*motors, 0.0, math.inf, 1.0)


# ============================================================================
# Kinematics
# ============================================================================


def test_pure_forward(drive, motors):
    solution = drive.drive_robot_centric(0.0, 1.0, 0.0)

    assert solution.raw_speeds == pytest.approx((0.5, -0.5, 0.0), abs=1e-12)
    assert solution.speeds == solution.raw_speeds
    assert speeds_of(motors) == pytest.approx([0.5, -0.5, 0.0], abs=1e-12)


def test_pure_turn(drive, motors):
    solution = drive.drive_robot_centric(0.0, 0.0, 1.0)

    assert solution.raw_speeds == (1.0, 1.0, 1.0)
    assert solution.speeds == (1.0, 1.0, 1.0)
    assert speeds_of(motors) == [1.0, 1.0, 1.0]


def test_pure_strafe(drive):
    solution = drive.drive_robot_centric(1.0, 0.0, 0.0)
    s = math.sqrt(3) / 2
    assert solution.speeds == pytest.approx((s, s, -1.0))


def test_turn_saturation_is_normalized(drive):
    solution = drive.drive_robot_centric(0.0, 1.0, 1.0)

    assert solution.raw_speeds == pytest.approx((1.5, 0.5, 1.0))
    assert solution.speeds == pytest.approx((1.0, 1 / 3, 2 / 3))


def test_inputs_clipped_before_rotation(drive):
    solution = drive.drive_field_centric(2.0, 2.0, 0.0, math.pi / 4)

    assert (solution.strafe_speed, solution.forward_speed) == (1.0, 1.0)
    assert solution.rotated.magnitude() == pytest.approx(math.sqrt(2))
    s = math.sqrt(3) / 2
    assert solution.speeds == pytest.approx((s, s, -1.0))


def test_intent_axis_convention(drive):
    solution = drive.compute_wheel_speeds(0.25, 0.75, 0.0)
    assert (solution.intent.x, solution.intent.y) == (0.75, 0.25)


def test_field_centric_rotates_intent(drive):
    field = drive.compute_wheel_speeds(0.0, 1.0, 0.0, math.pi / 2)
    robot = drive.compute_wheel_speeds(1.0, 0.0, 0.0)
    assert field.speeds == pytest.approx(robot.speeds, abs=1e-12)


def test_heading_angle_is_diagnostic_only(drive):
    solution = drive.compute_wheel_speeds(0.0, 1.0, 0.0, math.pi / 2)
    assert solution.heading_angle == pytest.approx(math.pi / 2)


@pytest.mark.parametrize(
    "strafe, forward, turn",
    [(0.0, 0.0, 0.0), (0.3, -0.8, 0.2), (-1.0, 1.0, -0.5), (0.9, 0.1, 1.0)],
)
def test_robot_centric_matches_field_centric_at_zero_heading(strafe, forward, turn):
    robot_motors = [SimulatedMotor() for _ in range(3)]
    field_motors = [SimulatedMotor() for _ in range(3)]

    robot = KiwiDrive(robot_motors).drive_robot_centric(strafe, forward, turn)
    field = KiwiDrive(field_motors).drive_field_centric(strafe, forward, turn, 0.0)

    assert robot.speeds == field.speeds
    assert speeds_of(robot_motors) == speeds_of(field_motors)


@pytest.mark.parametrize("heading", [-2.0, 0.0, 0.6, math.pi, 4.0])
def test_heading_is_periodic(drive, heading):
    base = drive.compute_wheel_speeds(0.4, -0.7, 0.1, heading)
    wrapped = drive.compute_wheel_speeds(0.4, -0.7, 0.1, heading + 2 * math.pi)
    assert wrapped.speeds == pytest.approx(base.speeds, abs=1e-9)


def test_translation_output_within_full_scale(drive):
    grid = np.linspace(-1.0, 1.0, 9)
    for strafe, forward, heading in itertools.product(grid, grid, [0.0, 0.5, 2.0, -1.3]):
        solution = drive.compute_wheel_speeds(float(strafe), float(forward), 0.0, heading)
        assert solution.speeds.max_abs() <= 1.0 + 1e-12


def test_output_within_full_scale_with_turn(drive):
    for turn in [-2.0, -1.0, 0.5, 3.0]:
        solution = drive.compute_wheel_speeds(1.0, -1.0, turn, 0.3)
        assert solution.speeds.max_abs() == pytest.approx(1.0)


def test_custom_geometry_projection(motors):
    drive = KiwiDrive.from_geometry(*motors, 0.0, math.pi / 2, math.pi)
    solution = drive.drive_robot_centric(0.5, 0.5, 0.0)
    assert solution.speeds == pytest.approx((0.5, 0.5, -0.5), abs=1e-12)


# ============================================================================
# Dispatch and configuration
# ============================================================================


def test_max_output_scales_dispatch_only(drive, motors):
    drive.set_max_speed(0.5)
    solution = drive.drive_robot_centric(0.0, 1.0, 0.0)

    assert solution.speeds.left == pytest.approx(0.5)
    assert speeds_of(motors) == pytest.approx([0.25, -0.25, 0.0], abs=1e-12)


def test_set_range_limits_inputs(drive):
    drive.set_range(-0.5, 0.5)
    solution = drive.drive_robot_centric(0.0, 1.0, 0.0)
    assert solution.forward_speed == 0.5
    assert solution.speeds.left == pytest.approx(0.25)


def test_compute_does_not_command_motors(drive, motors):
    drive.compute_wheel_speeds(0.2, 0.4, 0.1, 1.0)
    assert all(motor.history == [] for motor in motors)


@pytest.mark.parametrize(
    "command",
    [
        (math.nan, 0.0, 0.0, 0.0),
        (0.0, math.inf, 0.0, 0.0),
        (0.0, 0.0, -math.inf, 0.0),
        (0.0, 0.0, 0.0, math.nan),
    ],
)
def test_non_finite_command_rejected_without_dispatch(drive, motors, command):
    with pytest.raises(InvalidCommandError):
        drive.drive_field_centric(*command)
    assert all(motor.history == [] for motor in motors)


def test_motor_failure_stops_all_motors():
    motors = [SimulatedMotor("left"), FailingMotor("right"), SimulatedMotor("slide")]
    drive = KiwiDrive(motors)

    with pytest.raises(RuntimeError, match="speed controller fault"):
        drive.drive_robot_centric(0.0, 1.0, 0.0)

    assert [motor.stop_count for motor in motors] == [1, 1, 1]
    assert speeds_of(motors) == [0.0, 0.0, 0.0]


def test_stop_calls_each_motor_once(drive, motors):
    drive.drive_robot_centric(0.3, 0.6, 0.2)
    drive.stop()

    assert [motor.stop_count for motor in motors] == [1, 1, 1]
    assert speeds_of(motors) == [0.0, 0.0, 0.0]


def test_stop_is_idempotent_and_keeps_configuration(drive, motors):
    drive.set_range(-0.5, 0.5)
    drive.set_max_speed(0.8)

    drive.stop()
    drive.stop()

    assert [motor.stop_count for motor in motors] == [2, 2, 2]
    assert (drive.range_min, drive.range_max, drive.max_output) == (-0.5, 0.5, 0.8)


def test_solution_to_dict(drive):
    values = drive.compute_wheel_speeds(0.0, 1.0, 0.0).to_dict()
    assert values["intent_x"] == 1.0
    assert values["raw_left"] == pytest.approx(0.5)
    assert values["slide"] == pytest.approx(0.0, abs=1e-12)
    assert "heading_angle" in values


def test_diagnostics(drive):
    diagnostics = drive.get_diagnostics()
    assert diagnostics["max_output"] == 1.0
    assert diagnostics["slide_angle"] == pytest.approx(3 * math.pi / 2)


def test_debug_logging(drive, caplog):
    with caplog.at_level("DEBUG"):
        drive.drive_robot_centric(0.0, 1.0, 0.0)
    assert "before-rotate" in caplog.text
    assert "after-rotate" in caplog.text


class StuckMotor(SimulatedMotor):
    def stop_motor(self):
        raise OSError("stop fault")


def test_stop_failure_during_recovery_keeps_original_error():
    slide = SimulatedMotor("slide")
    slide.set(0.9)
    motors = [StuckMotor("left"), FailingMotor("right"), slide]
    drive = KiwiDrive(motors)

    with pytest.raises(RuntimeError, match="speed controller fault"):
        drive.drive_robot_centric(0.0, 1.0, 0.0)

    assert slide.stop_count == 1
    assert slide.speed == 0.0
    assert motors[1].stop_count == 1


def test_object_without_motor_methods_rejected():
    with pytest.raises(ConfigurationError, match="slide motor"):
        KiwiDrive([SimulatedMotor(), SimulatedMotor(), object()])


def test_wheel_speeds_for_role(drive):
    speeds = drive.compute_wheel_speeds(0.0, 1.0, 1.0).speeds
    assert speeds.for_role(WheelRole.LEFT) == speeds.left
    assert speeds.for_role(WheelRole.SLIDE) == speeds.slide
