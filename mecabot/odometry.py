"""Dead reckoning from three passive omni wheels with rotary encoders."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any

logger = logging.getLogger(__name__)

_ENCODER_SCALE = 0.1
_ENC_X_TO_CENTER = 0.4
_ENC_Y_TO_CENTER = 0.4


@dataclass
class Pose2D:
    """Planar pose: position and heading."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0


@dataclass(frozen=True)
class EncoderFrames:
    """Joint names of the three encoders."""

    left: str = "encoder_left"
    right: str = "encoder_right"
    front: str = "encoder_front"


@dataclass(frozen=True)
class EncoderReadings:
    """Scaled encoder distances: left and right along X, front along Y."""

    x_left: float = 0.0
    x_right: float = 0.0
    y_front: float = 0.0


class EncoderParseError(ValueError):
    """Raised when one or more encoders are missing from a joint state."""

    def __init__(self, missing: list[str], readings: EncoderReadings) -> None:
        super().__init__(f"encoder(s) not found: {', '.join(missing)}")
        self.missing = missing
        self.readings = readings


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class TransformStamped:
    """A planar transform from the origin frame to the robot base."""

    stamp: Any
    frame_id: str
    child_frame_id: str
    translation_x: float
    translation_y: float
    rotation: Quaternion = field(default_factory=Quaternion)


def quaternion_from_yaw(yaw: float) -> Quaternion:
    """Return the quaternion for a rotation of ``yaw`` about Z."""
    half = yaw / 2
    return Quaternion(0.0, 0.0, math.sin(half), math.cos(half))


def parse_rotary_encoders(
    names: Sequence[str], positions: Sequence[float], frames: EncoderFrames
) -> EncoderReadings:
    """Pick the three encoder readings out of a joint state.

    Left and front readings are negated so they advance in the robot's
    positive directions. Raises EncoderParseError if any encoder is absent;
    the error carries the readings that were found.
    """
    found: dict[str, float] = {}
    for joint, position in zip(names, positions):
        if joint == frames.left:
            found["left"] = position * -_ENCODER_SCALE
        elif joint == frames.right:
            found["right"] = position * _ENCODER_SCALE
        elif joint == frames.front:
            found["front"] = position * -_ENCODER_SCALE
        if len(found) == 3:
            break

    readings = EncoderReadings(
        x_left=found.get("left", 0.0),
        x_right=found.get("right", 0.0),
        y_front=found.get("front", 0.0),
    )
    missing = [
        frame
        for key, frame in (("left", frames.left), ("right", frames.right), ("front", frames.front))
        if key not in found
    ]
    if missing:
        raise EncoderParseError(missing, readings)
    return readings


class PassiveWheelOdometry:
    """Integrates encoder readings into a global pose."""

    def __init__(
        self,
        origin_frame: str = "world",
        base_link_frame: str = "base_link",
        frames: EncoderFrames | None = None,
    ) -> None:
        self.origin_frame = origin_frame
        self.base_link_frame = base_link_frame
        self.frames = frames if frames is not None else EncoderFrames()
        self._previous = EncoderReadings()
        self._pose = Pose2D()

    def update(
        self, names: Sequence[str], positions: Sequence[float], stamp: Any = None
    ) -> TransformStamped:
        """Integrate one joint state and return the resulting transform."""
        try:
            readings = parse_rotary_encoders(names, positions, self.frames)
        except EncoderParseError as error:
            logger.error("[Rotary Parser]: Encoder(s) failed to be parsed!")
            logger.error("encoder_left: %s", self.frames.left)
            logger.error("encoder_right: %s", self.frames.right)
            logger.error("encoder_front: %s", self.frames.front)
            readings = error.readings

        delta_x1 = readings.x_left - self._previous.x_left
        delta_x2 = readings.x_right - self._previous.x_right
        delta_y = readings.y_front - self._previous.y_front

        local_x = (delta_x1 + delta_x2) / 2
        # Negated to match the robot's orientation convention.
        local_theta = -(delta_x2 - delta_x1) / (_ENC_X_TO_CENTER * 2)
        local_y = delta_y - _ENC_Y_TO_CENTER * local_theta

        self._previous = readings

        pose = self._pose
        pose.theta += local_theta
        cos_orient = math.cos(pose.theta)
        sin_orient = math.sin(pose.theta)
        pose.x += local_x * cos_orient - local_y * sin_orient
        pose.y += local_x * sin_orient + local_y * cos_orient

        return TransformStamped(
            stamp=stamp,
            frame_id=self.origin_frame,
            child_frame_id=self.base_link_frame,
            translation_x=pose.x,
            translation_y=pose.y,
            rotation=quaternion_from_yaw(pose.theta),
        )

    def pose(self) -> Pose2D:
        """Return a copy of the current global pose."""
        return replace(self._pose)