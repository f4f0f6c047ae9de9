"""Small study programs and teaching helpers."""

__version__ = "0.1.0"