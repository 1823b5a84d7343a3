"""Create, print and simulate 2D averaging stencil matrices stored in a binary file format."""

__version__ = "0.1.0"
__all__ = ["matrix", "make2d", "print2d", "simulate"]