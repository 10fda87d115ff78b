"""Geometry types stored as flat coordinate arrays."""

__version__ = "0.1.0"