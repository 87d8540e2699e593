from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Container, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """Integer position of a room in the dungeon.

    Hashable value type; rooms are keyed by it. ``y`` grows southwards and
    ``z`` grows downwards.
    """

    x: int
    y: int
    z: int

    def __add__(self, other: "Coordinate") -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


ORIGIN = Coordinate(0, 0, 0)


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"
    DOWN = "down"
    UP = "up"

    def __str__(self) -> str:
        return self.value


# Order matters: exits are always listed in this order.
DIRECTION_DELTAS: Tuple[Tuple[Direction, Coordinate], ...] = (
    (Direction.NORTH, Coordinate(0, -1, 0)),
    (Direction.SOUTH, Coordinate(0, 1, 0)),
    (Direction.WEST, Coordinate(-1, 0, 0)),
    (Direction.EAST, Coordinate(1, 0, 0)),
    (Direction.DOWN, Coordinate(0, 0, 1)),
    (Direction.UP, Coordinate(0, 0, -1)),
)

_DELTA_BY_DIRECTION = dict(DIRECTION_DELTAS)


def direction_to_delta(direction: Direction) -> Coordinate:
    return _DELTA_BY_DIRECTION[direction]


def parse_direction(token: str) -> Optional[Direction]:
    """Return the direction named by ``token`` or None.

    Matching is exact; callers lower-case user input beforehand.
    """
    try:
        return Direction(token)
    except ValueError:
        return None


def exits(rooms: Container[Coordinate], coord: Coordinate) -> List[Direction]:
    """List the directions from ``coord`` that lead to an existing room.

    Args:
        rooms: Anything supporting ``in`` for coordinates (the dungeon itself
            or a plain set/dict of coordinates).
        coord: The room to probe around.

    Returns:
        Directions in table order (north, south, west, east, down, up).
    """
    found = [d for d, delta in DIRECTION_DELTAS if (coord + delta) in rooms]
    logger.debug("Exits from %s: %s", coord, [d.value for d in found])
    return found


__all__ = [
    "Coordinate",
    "ORIGIN",
    "Direction",
    "DIRECTION_DELTAS",
    "direction_to_delta",
    "parse_direction",
    "exits",
]
