"""Printf-style formatting and classic string, character and memory helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "printf"]