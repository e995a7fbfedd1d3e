"""Frames, text and images laid out in a true-colour terminal."""

__version__ = "0.1.0"
__all__ = ["style", "functions", "element", "frame", "text", "image"]