import logging
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mecabot.odometry import (
    EncoderFrames,
    EncoderParseError,
    PassiveWheelOdometry,
    Pose2D,
    Quaternion,
    parse_rotary_encoders,
    quaternion_from_yaw,
)

NAMES = ["encoder_left", "encoder_right", "encoder_front"]


def test_quaternion_of_zero_yaw_is_identity():
    assert quaternion_from_yaw(0.0) == Quaternion(0.0, 0.0, 0.0, 1.0)


@given(st.floats(min_value=-10.0, max_value=10.0))
def test_quaternion_is_unit(yaw):
    q = quaternion_from_yaw(yaw)
    assert q.x == 0.0 and q.y == 0.0
    assert q.z**2 + q.w**2 == pytest.approx(1.0)


def test_parse_applies_scale_and_signs():
    readings = parse_rotary_encoders(NAMES, [10.0, 10.0, 10.0], EncoderFrames())
    assert readings.x_left == pytest.approx(-1.0)
    assert readings.x_right == pytest.approx(1.0)
    assert readings.y_front == pytest.approx(-1.0)


def test_parse_ignores_order_and_other_joints():
    names = ["wheel_fl", "encoder_front", "encoder_left", "encoder_right"]
    first = parse_rotary_encoders(names, [5.0, 3.0, 1.0, 2.0], EncoderFrames())
    second = parse_rotary_encoders(NAMES, [1.0, 2.0, 3.0], EncoderFrames())
    assert first == second


def test_parse_custom_frames():
    frames = EncoderFrames(left="a", right="b", front="c")
    readings = parse_rotary_encoders(["c", "b", "a"], [0.0, 10.0, 0.0], frames)
    assert readings.x_right == pytest.approx(1.0)
    assert readings.x_left == 0.0


def test_parse_missing_encoder_raises_with_partial_readings():
    with pytest.raises(EncoderParseError) as info:
        parse_rotary_encoders(NAMES[:2], [10.0, 10.0], EncoderFrames())
    assert info.value.missing == ["encoder_front"]
    assert info.value.readings.x_right == pytest.approx(1.0)
    assert info.value.readings.y_front == 0.0


def test_first_update_at_zero_stays_at_origin():
    odometry = PassiveWheelOdometry()
    transform = odometry.update(NAMES, [0.0, 0.0, 0.0], stamp=42)
    assert transform.frame_id == "world"
    assert transform.child_frame_id == "base_link"
    assert transform.stamp == 42
    assert (transform.translation_x, transform.translation_y) == (0.0, 0.0)
    assert odometry.pose() == Pose2D()


def test_straight_forward_motion():
    odometry = PassiveWheelOdometry()
    odometry.update(NAMES, [-10.0, 10.0, 0.0])
    pose = odometry.pose()
    assert pose.x == pytest.approx(1.0)
    assert pose.y == pytest.approx(0.0)
    assert pose.theta == pytest.approx(0.0)


def test_forward_then_back_returns_to_origin():
    odometry = PassiveWheelOdometry()
    odometry.update(NAMES, [-10.0, 10.0, 4.0])
    odometry.update(NAMES, [0.0, 0.0, 0.0])
    pose = odometry.pose()
    assert pose.x == pytest.approx(0.0)
    assert pose.y == pytest.approx(0.0)
    assert pose.theta == pytest.approx(0.0)


def test_pose_returns_copy():
    odometry = PassiveWheelOdometry()
    odometry.update(NAMES, [-10.0, 10.0, 0.0])
    snapshot = odometry.pose()
    snapshot.x = 100.0
    assert odometry.pose().x == pytest.approx(1.0)


def test_missing_encoder_logs_and_continues(caplog):
    odometry = PassiveWheelOdometry()
    with caplog.at_level(logging.ERROR, logger="mecabot.odometry"):
        transform = odometry.update(NAMES[:2], [-10.0, 10.0])
    assert any("failed to be parsed" in r.getMessage() for r in caplog.records)
    assert transform.translation_x == pytest.approx(1.0)


@given(st.floats(min_value=-50.0, max_value=50.0))
def test_translation_matches_pose(position):
    odometry = PassiveWheelOdometry()
    transform = odometry.update(NAMES, [position, 0.5 * position, -position])
    pose = odometry.pose()
    assert transform.translation_x == pose.x
    assert transform.translation_y == pose.y
    assert math.isfinite(pose.theta)