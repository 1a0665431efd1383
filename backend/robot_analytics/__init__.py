"""Telemetry API for a single cleanup robot."""

__version__ = "1.0.0"
