"""Isometric wireframe rendering of height-map files, with a window viewer."""

__version__ = "0.1.0"