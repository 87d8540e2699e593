from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Set

from ..core.rng import RandomSource
from .objects import GameObject
from .spatial import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_OBJECT_CHANCE = 0.33

# Draw order for freshly dug rooms; one draw per object.
RANDOM_OBJECT_ORDER = (GameObject.SLEDGE, GameObject.LADDER, GameObject.GOLD)


@dataclass
class Room:
    """A room in the dungeon.

    Rooms are never destroyed. Their floor is a set, so an object is either
    present or not.
    """

    description: Optional[str] = None
    objects: Set[GameObject] = field(default_factory=set)

    def describe(self, coord: Coordinate) -> str:
        """Return the fixed description, or a default naming ``coord``."""
        if self.description is not None:
            return self.description
        return f"Room at {coord}."

    def with_description(self, description: str) -> "Room":
        self.description = description
        return self

    def with_objects(self, objects: Iterable[GameObject]) -> "Room":
        self.objects.update(objects)
        return self

    def with_random_objects(self, rng: RandomSource, chance: float = DEFAULT_OBJECT_CHANCE) -> "Room":
        """Independently drop each object on the floor with probability ``chance``."""
        for obj in RANDOM_OBJECT_ORDER:
            if rng.random() < chance:
                self.objects.add(obj)
        logger.debug("Random room objects: %s", sorted(o.value for o in self.objects))
        return self


__all__ = ["Room", "DEFAULT_OBJECT_CHANCE", "RANDOM_OBJECT_ORDER"]
