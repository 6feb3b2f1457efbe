[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hovercontrol"
version = "0.1.0"
description = "Blower, sensor and PID state control for a small hovercraft"
requires-python = ">=3.10"
dependencies = []
keywords = ["hovercraft", "pid", "pwm", "blower", "tof", "gyro", "control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hovercontrol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
