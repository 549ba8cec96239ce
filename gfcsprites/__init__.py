"""Sprite geometry, motion, hit tests, animation bookkeeping and sprite-sheet selection."""

__version__ = "0.1.0"
__all__ = ["geometry", "sheet", "properties", "sprite"]