"""
Digger package root.

A small text adventure: wander a sparse 3D grid of rooms, dig new ones with a
sledge, and shuffle a handful of objects between the floor and your pockets.
Game rules live in ``world``, ``state`` and ``commands``; ``engine`` wires
them to a line-based read/print loop.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
