"""Small classic data structures and exercises: trees, linked lists, fixed vectors,
storage, statistics, geometry, lawn pricing, time sheets and a pooled game loop."""

__version__ = "0.1.0"