"""Character, byte-buffer, NUL-terminated string and file-descriptor output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "text"]