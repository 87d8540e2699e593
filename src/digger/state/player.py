from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Set

from ..world.objects import GameObject
from ..world.spatial import ORIGIN, Coordinate

logger = logging.getLogger(__name__)


@dataclass
class Player:
    """
    The single adventurer.

    ``location`` must always name an existing room; it is only ever changed
    to coordinates already checked against the dungeon. ``equipped`` holds
    at most one object and equip only picks from the inventory, but dropping
    an object does not clear the slot.
    """

    location: Coordinate = ORIGIN
    inventory: Set[GameObject] = field(default_factory=lambda: {GameObject.SLEDGE})
    equipped: Optional[GameObject] = None

    def move_to(self, target: Coordinate) -> None:
        logger.debug("Player moves %s -> %s", self.location, target)
        self.location = target

    def equip(self, obj: GameObject) -> bool:
        """Equip ``obj`` if carried. Returns False when it is not in the inventory."""
        if obj not in self.inventory:
            return False
        self.equipped = obj
        logger.debug("Equipped %s", obj.value)
        return True

    def unequip(self) -> bool:
        """Clear the equip slot. Returns False if it was already empty."""
        if self.equipped is None:
            return False
        logger.debug("Unequipped %s", self.equipped.value)
        self.equipped = None
        return True


__all__ = ["Player"]
