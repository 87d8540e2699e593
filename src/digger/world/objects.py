from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional


class GameObject(Enum):
    """Things that can lie on a room floor or be carried.

    The enum value is the canonical lowercase name used when parsing
    commands. Declaration order is the order objects are listed in.
    """

    LADDER = "ladder"
    SLEDGE = "sledge"
    GOLD = "gold"

    @property
    def display(self) -> str:
        return _DISPLAY[self]

    def __str__(self) -> str:
        return self.display


_DISPLAY = {
    GameObject.LADDER: "a ladder",
    GameObject.SLEDGE: "a sledge",
    GameObject.GOLD: "some gold",
}


def parse_object(token: str) -> Optional[GameObject]:
    """Case-sensitive lookup of an object by its canonical name."""
    try:
        return GameObject(token)
    except ValueError:
        return None


def display(obj: GameObject) -> str:
    return obj.display


def ordered(objects: Iterable[GameObject]) -> List[GameObject]:
    """Return ``objects`` sorted in catalog order."""
    present = set(objects)
    return [o for o in GameObject if o in present]


def describe(objects: Iterable[GameObject]) -> str:
    """Join display phrases, e.g. ``"a ladder, a sledge"``."""
    return ", ".join(o.display for o in ordered(objects))


__all__ = ["GameObject", "parse_object", "display", "ordered", "describe"]
