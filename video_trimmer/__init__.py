"""Trim videos by typed start/end timestamps without re-encoding."""

__version__ = "0.1.0"
