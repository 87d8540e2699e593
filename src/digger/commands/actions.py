from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from ..world.spatial import Direction


class Command(Enum):
    """Abstract commands the player can issue.

    User-typed words are resolved to these through the alias table, so the
    game logic never deals with raw strings.
    """

    NORTH = auto()
    SOUTH = auto()
    WEST = auto()
    EAST = auto()
    DOWN = auto()
    UP = auto()
    HELP = auto()
    DIG = auto()
    LOOK = auto()
    INVENTORY = auto()
    TAKE = auto()
    DROP = auto()
    EQUIP = auto()
    UNEQUIP = auto()
    ALIAS = auto()

    @property
    def direction(self) -> Optional[Direction]:
        """The direction a movement command walks in, None for other commands."""
        return _MOVES.get(self)


_MOVES = {
    Command.NORTH: Direction.NORTH,
    Command.SOUTH: Direction.SOUTH,
    Command.WEST: Direction.WEST,
    Command.EAST: Direction.EAST,
    Command.DOWN: Direction.DOWN,
    Command.UP: Direction.UP,
}


__all__ = ["Command"]
