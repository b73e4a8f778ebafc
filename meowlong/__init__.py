"""A tile-based puzzle game: collect every meal, then reach the exit."""

__version__ = "1.0.0"