"""Isometric wireframe viewer for height-map files: parsing, projection, rasterising and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]