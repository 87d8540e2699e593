from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from ..exceptions import MissingRoomError
from .objects import GameObject
from .room import Room
from .spatial import ORIGIN, Coordinate, Direction, exits

logger = logging.getLogger(__name__)

START_DESCRIPTION = "The room where it all started..."
TREASURE_LOCATION = Coordinate(1, 1, 5)
TREASURE_DESCRIPTION = "You found it! Lots of gold!"


class Dungeon:
    """
    Sparse room store keyed by coordinate. A coordinate with no entry simply
    has no room. Rooms are added, never removed or replaced.
    """

    def __init__(self, rooms: Optional[Mapping[Coordinate, Room]] = None) -> None:
        self._rooms: Dict[Coordinate, Room] = dict(rooms or {})

    @classmethod
    def default(cls) -> "Dungeon":
        """Create the starting world: the entrance and the far-away treasure room."""
        return cls(
            {
                ORIGIN: Room()
                .with_description(START_DESCRIPTION)
                .with_objects([GameObject.LADDER, GameObject.SLEDGE]),
                TREASURE_LOCATION: Room().with_description(TREASURE_DESCRIPTION),
            }
        )

    def __contains__(self, coord: object) -> bool:
        return coord in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._rooms)

    def contains(self, coord: Coordinate) -> bool:
        return coord in self._rooms

    def get(self, coord: Coordinate) -> Room:
        """Return the room at ``coord``.

        Raises MissingRoomError if there is none; callers only ask for rooms
        they already know exist, so this is an internal fault.
        """
        try:
            return self._rooms[coord]
        except KeyError:
            logger.error("No room at %s; dungeon state is inconsistent", coord)
            raise MissingRoomError(f"No room at {coord}") from None

    def ensure(self, coord: Coordinate, factory: Callable[[], Room]) -> Tuple[Room, bool]:
        """Return the room at ``coord``, creating it with ``factory`` if absent.

        Returns:
            (room, created) where ``created`` is True only if a new room was
            inserted. An existing room is never overwritten.
        """
        room = self._rooms.get(coord)
        if room is not None:
            return room, False
        room = factory()
        self._rooms[coord] = room
        logger.info("Created room at %s (%d rooms total)", coord, len(self._rooms))
        return room, True

    def exits(self, coord: Coordinate) -> List[Direction]:
        return exits(self._rooms, coord)

    def __repr__(self) -> str:
        return f"Dungeon(rooms={len(self._rooms)})"


__all__ = [
    "Dungeon",
    "START_DESCRIPTION",
    "TREASURE_LOCATION",
    "TREASURE_DESCRIPTION",
]
