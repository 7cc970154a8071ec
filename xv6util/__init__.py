"""Minimal Unix-style tools, a shell parser, printf formatting, an allocator and kernel format helpers."""

__version__ = "0.1.0"