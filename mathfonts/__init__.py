"""KaTeX font-face style injection."""

__version__ = "0.1.0"
