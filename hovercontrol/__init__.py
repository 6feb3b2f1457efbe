"""Blower, sensor, logging and PID state control for a small hovercraft."""

__version__ = "0.1.0"