"""A terminal diary that keeps entries both as Morse code and as plain text."""

__version__ = "0.1.0"
__all__ = ["__version__"]