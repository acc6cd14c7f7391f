"""A terminal snake game with walled stages, items, gates and missions."""

__version__ = "1.0.0"