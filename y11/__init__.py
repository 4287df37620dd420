"""A small widget toolkit with Column/Row layouts, keyframe animations, an event loop and a pygame backend."""

__version__ = "0.1.0"