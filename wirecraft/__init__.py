"""Wireframe 3D engine on pygame with free and follow cameras and a player on box platforms."""

__version__ = "0.1.0"
__all__ = ["__version__"]