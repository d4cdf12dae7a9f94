"""Animated WebP rendering of a GitHub contribution calendar eaten by a worm."""

__version__ = "1.0.0"

__all__ = ["__version__"]