"""Mecanum drive kinematics: velocity commands to normalised wheel speeds."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Twist:
    """Planar velocity command in the robot frame."""

    linear_x: float = 0.0
    linear_y: float = 0.0
    angular_z: float = 0.0


@dataclass(frozen=True)
class WheelVelocities:
    """Velocities of the four mecanum wheels."""

    front_left: float = 0.0
    front_right: float = 0.0
    rear_left: float = 0.0
    rear_right: float = 0.0

    def scaled(self, factor: float) -> WheelVelocities:
        """Return the velocities multiplied by ``factor``."""
        return WheelVelocities(
            self.front_left * factor,
            self.front_right * factor,
            self.rear_left * factor,
            self.rear_right * factor,
        )

    def as_list(self) -> list[float]:
        """Return the velocities in controller order: FL, FR, RL, RR."""
        return [self.front_left, self.front_right, self.rear_left, self.rear_right]


def calc_wheel_velocity(magnitude: float, heading: float, angular: float) -> WheelVelocities:
    """Compute wheel velocities from a polar linear command and a rotation rate.

    The result is normalised so that no wheel exceeds 1 in magnitude when the
    combined command is larger than 1.
    """
    vector_a = magnitude * math.cos(heading)
    vector_b = magnitude * math.sin(heading)

    velocities = WheelVelocities(
        front_left=vector_a - angular,
        front_right=vector_b + angular,
        rear_left=vector_b - angular,
        rear_right=vector_a + angular,
    )

    sum_magnitude = magnitude + math.fabs(angular)
    if sum_magnitude > 1:
        velocities = velocities.scaled(1 / sum_magnitude)
    return velocities


def wheel_velocities_from_twist(twist: Twist) -> WheelVelocities:
    """Compute wheel velocities for a Cartesian velocity command."""
    heading = math.atan2(twist.linear_y, twist.linear_x) + math.pi / 4
    magnitude = math.hypot(twist.linear_x, twist.linear_y)
    return calc_wheel_velocity(magnitude, heading, twist.angular_z)


@dataclass
class KinematicsWorker:
    """Holds the latest command and produces scaled wheel commands on each step."""

    speed_multiplier: float = 1.0
    command: Twist = field(default_factory=Twist)

    def __init__(self, speed_multiplier: float = 1.0) -> None:
        self.speed_multiplier = speed_multiplier
        self.command = Twist()

    def on_command(self, twist: Twist) -> None:
        """Store the most recent velocity command."""
        self.command = twist

    def step(self) -> list[float]:
        """Return the wheel command for the current velocity command."""
        velocities = wheel_velocities_from_twist(self.command)
        return velocities.scaled(self.speed_multiplier).as_list()