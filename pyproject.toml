[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mecabot"
version = "0.1.0"
description = "Mecanum drive kinematics and passive omni-wheel dead reckoning for a four-wheel mecanum robot"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "mecanum", "kinematics", "odometry", "dead-reckoning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["mecabot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
