"""Composable intensity patterns, shapes, random patterns and a device driver."""

__version__ = "0.1.0"

__all__ = ["driver", "pattern", "randomness", "shapes"]