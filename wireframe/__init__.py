"""Isometric wireframe rendering of height maps, with small text, buffer and list helpers."""

__version__ = "0.1.0"