# mecabot

Motion maths for a four-wheel mecanum robot. There are two modules:

- `mecabot.kinematics` takes a velocity command (linear x/y, angular z) and
  turns it into four wheel speeds. When the command is large, the speeds are
  normalised so that they stay within [-1, 1].
- `mecabot.odometry` estimates the robot's planar pose by dead reckoning. It
  uses three passive omni wheels with rotary encoders: one on the left and one
  on the right for X, and one at the front for Y.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Kinematics

```python
from mecabot.kinematics import KinematicsWorker, Twist

worker = KinematicsWorker(speed_multiplier=1.0)
worker.on_command(Twist(linear_x=1.0, linear_y=0.0, angular_z=0.0))
print(worker.step())  # [front_left, front_right, rear_left, rear_right]
```

- `Twist(linear_x, linear_y, angular_z)` is a frozen velocity command. Every
  field defaults to 0.
- `calc_wheel_velocity(magnitude, heading, angular)` takes a command in polar
  form and returns a `WheelVelocities`. If `magnitude + abs(angular)` is
  greater than 1, all four speeds are divided by that sum.
- `wheel_velocities_from_twist(twist)` converts a `Twist` to polar form and
  passes it to `calc_wheel_velocity`. The magnitude is the hypotenuse of the
  linear components, and the heading is their angle plus π/4.
- `WheelVelocities` has the fields `front_left`, `front_right`, `rear_left`
  and `rear_right`. `scaled(factor)` returns a copy with every speed
  multiplied by `factor`. `as_list()` returns the speeds in the order FL, FR,
  RL, RR.
- `KinematicsWorker(speed_multiplier)` keeps the most recent command, which
  `on_command(twist)` sets. Before any command arrives, it is a zero `Twist`.
  `step()` returns the wheel speeds for that command, multiplied by
  `speed_multiplier`, as a list.

## Odometry

```python
from mecabot.odometry import EncoderFrames, PassiveWheelOdometry

odom = PassiveWheelOdometry(
    origin_frame="world",
    base_link_frame="base_link",
    frames=EncoderFrames(),  # encoder_left, encoder_right, encoder_front
)

transform = odom.update(
    names=["encoder_left", "encoder_right", "encoder_front"],
    positions=[-1.0, 1.0, 0.0],
    stamp=0.0,
)
print(transform.translation_x, transform.translation_y, transform.rotation)
print(odom.pose())
```

### Reading the encoders

`parse_rotary_encoders(names, positions, frames)` finds the three encoders by
joint name and returns an `EncoderReadings` with the fields `x_left`,
`x_right` and `y_front`.

- Each position is scaled by 0.1.
- The left and front readings are negated.
- If any encoder is missing, the function raises `EncoderParseError`, which
  is a `ValueError`. Its `missing` attribute lists the joint names that were
  not found. Its `readings` attribute holds the readings that were found, with
  0 for the missing ones.

### Integrating the pose

`PassiveWheelOdometry.update(names, positions, stamp)` does the following:

1. Reads the encoders.
2. Computes the change since the previous reading. Both the X and the Y
   encoders are taken to be 0.4 m from the robot's centre.
3. Adds that change to the global pose.
4. Returns a `TransformStamped` with the fields `stamp`, `frame_id` (the
   origin frame), `child_frame_id` (the base-link frame), `translation_x`,
   `translation_y` and `rotation`. The rotation is a `Quaternion` built by
   `quaternion_from_yaw`.

If an encoder is missing, `update` logs the error through the
`mecabot.odometry` logger and carries on. It integrates the partial readings
it has, using 0 for each missing encoder.

`pose()` returns a copy of the current `Pose2D`, which has the fields `x`, `y`
and `theta`.

## What this package does not do

The package only does the calculations. It does not:

- subscribe to velocity commands or joint states;
- publish wheel commands or transforms;
- run a timer loop;
- provide a command-line program.

Your own code must feed commands and joint states into `KinematicsWorker` and
`PassiveWheelOdometry`, and send the results wherever they are needed.