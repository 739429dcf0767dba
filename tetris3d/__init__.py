"""A three-dimensional falling-block puzzle game with an OpenGL window."""

__version__ = "0.1.0"
__all__ = ["__version__"]