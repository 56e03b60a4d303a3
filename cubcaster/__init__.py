"""A textured grid raycaster for .cub scene files, with its scene parser and text helpers."""

__version__ = "0.1.0"

__all__ = ["__version__"]