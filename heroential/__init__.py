"""A tile-based top-down action role-playing game built on pygame."""

__version__ = "0.1.0"