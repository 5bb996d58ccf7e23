"""Rendering components for the boids window."""

from .points import PointRenderer
from .text import TextRenderer

__all__ = ["PointRenderer", "TextRenderer"]
