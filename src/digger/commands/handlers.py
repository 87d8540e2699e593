"""Action handlers, one per command.

Each handler mutates the player and/or dungeon it is given and returns the
line to show the player. A handful of cases return None and print nothing:
taking or dropping a known object that simply is not there.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..core.rng import RandomSource
from ..state.player import Player
from ..world.dungeon import Dungeon
from ..world.objects import GameObject, describe, parse_object
from ..world.room import DEFAULT_OBJECT_CHANCE, Room
from ..world.spatial import Direction, direction_to_delta, parse_direction
from .aliases import CommandAliases

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "You need a sledge to dig rooms and ladders to go upwards.\n"
    "Valid commands are: directions (north, south...), dig, take, drop, equip, inventory and look.\n"
    "Additionally you can tag rooms with the 'name' command and alias commands with 'alias'.\n"
    "Have fun!"
)

UNKNOWN_COMMAND = "I don't know what you mean."


def help_() -> str:
    return HELP_TEXT


def look(player: Player, dungeon: Dungeon) -> str:
    """Describe the current room: description, floor objects, then exits."""
    room = dungeon.get(player.location)
    parts: List[str] = [room.describe(player.location)]

    if room.objects:
        parts.append(f" On the floor you can see: {describe(room.objects)}.")

    room_exits = dungeon.exits(player.location)
    if not room_exits:
        parts.append(" There are no exits in this room.")
    elif len(room_exits) == 1:
        parts.append(f" There is one exit: {room_exits[0]}.")
    else:
        parts.append(f" Exits: {', '.join(str(d) for d in room_exits)}.")
    return "".join(parts)


def inventory(player: Player) -> str:
    if not player.inventory:
        return "You are not carrying anything"
    return f"You are carrying: {describe(player.inventory)}"


def take(player: Player, dungeon: Dungeon, args: Sequence[str]) -> Optional[str]:
    if not args:
        return "To take something: take OBJECT|all"
    room = dungeon.get(player.location)
    if not room.objects:
        return "There is nothing to take here"
    if args[0] == "all":
        player.inventory.update(room.objects)
        room.objects.clear()
        logger.debug("Took everything at %s", player.location)
        return "All items taken"
    obj = parse_object(args[0])
    if obj is None:
        return "You can't see anything like that here"
    if obj not in room.objects:
        return None
    room.objects.discard(obj)
    player.inventory.add(obj)
    logger.debug("Took %s at %s", obj.value, player.location)
    return "Taken"


def drop(player: Player, dungeon: Dungeon, args: Sequence[str]) -> Optional[str]:
    if not args:
        return "To drop something: drop OBJECT|all"
    if not player.inventory:
        return "You are not carrying anything"
    room = dungeon.get(player.location)
    if args[0] == "all":
        room.objects.update(player.inventory)
        player.inventory.clear()
        logger.debug("Dropped everything at %s", player.location)
        return "All items dropped"
    obj = parse_object(args[0])
    if obj is None:
        return "You don't have anything like that"
    if obj not in player.inventory:
        return None
    player.inventory.discard(obj)
    room.objects.add(obj)
    logger.debug("Dropped %s at %s", obj.value, player.location)
    return "Dropped"


def dig(
    player: Player,
    dungeon: Dungeon,
    rng: RandomSource,
    args: Sequence[str],
    object_chance: float = DEFAULT_OBJECT_CHANCE,
) -> str:
    """Dig a new room next to the player using the equipped sledge.

    The new room gets a random selection of objects from ``rng``. An existing
    room in that direction is left untouched.
    """
    if not args:
        return "To dig a tunnel: dig DIRECTION"
    direction = parse_direction(args[0])
    if direction is None:
        return "That is not a direction I recognize"
    if player.equipped is None:
        return "With your bare hands?"
    if player.equipped is not GameObject.SLEDGE:
        return f"You cannot dig with {player.equipped}"

    target = player.location + direction_to_delta(direction)
    _, created = dungeon.ensure(target, lambda: Room().with_random_objects(rng, object_chance))
    if not created:
        return "There is already an exit, there!"
    logger.debug("Dug %s from %s to %s", direction.value, player.location, target)
    return f"There is now an exit {direction}ward"


def goto(player: Player, dungeon: Dungeon, direction: Direction) -> str:
    """Walk one room in ``direction`` and describe where the player ends up.

    Going north means climbing, which needs a ladder on the current floor.
    """
    here = dungeon.get(player.location)
    if direction is Direction.NORTH and GameObject.LADDER not in here.objects:
        return "You can't go upwards without a ladder!"
    target = player.location + direction_to_delta(direction)
    if target not in dungeon:
        return "There's no exit in that direction!"
    player.move_to(target)
    return look(player, dungeon)


def equip(player: Player, args: Sequence[str]) -> str:
    if not args:
        return "To equip something: equip OBJECT"
    obj = parse_object(args[0])
    if obj is None or not player.equip(obj):
        return "You don't have such object"
    return "Item equipped"


def unequip(player: Player) -> str:
    if player.unequip():
        return "Unequipped"
    return "You are already not using anything"


def alias(aliases: CommandAliases, args: Sequence[str]) -> str:
    if len(args) < 2:
        return "To assign an alias: alias CMQ NEW_ALIAS"
    existing = args[0].lower()
    new_alias = args[1].lower()
    if aliases.add_alias(existing, new_alias):
        return f'You can use "{new_alias}" in lieu of "{existing}"'
    return f'The commands "{existing}" does not exist'


__all__ = [
    "HELP_TEXT",
    "UNKNOWN_COMMAND",
    "help_",
    "look",
    "inventory",
    "take",
    "drop",
    "dig",
    "goto",
    "equip",
    "unequip",
    "alias",
]
