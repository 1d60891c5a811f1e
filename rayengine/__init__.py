"""A small 3D application framework with window, software renderer and logging, and the RayForge application."""

__version__ = "0.1.0"