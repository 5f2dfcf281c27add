"""Mecanum drive kinematics and passive omni-wheel dead reckoning."""

__version__ = "0.1.0"
__all__ = ["kinematics", "odometry"]