from __future__ import annotations

import logging
from typing import List, Optional

from ..commands import handlers
from ..commands.actions import Command
from ..commands.aliases import CommandAliases
from ..core.rng import RNG, RandomSource
from ..core.settings import Settings
from ..state.player import Player
from ..world.dungeon import Dungeon
from ..world.room import DEFAULT_OBJECT_CHANCE

logger = logging.getLogger(__name__)

BANNER = "Grab the sledge and make your way to room 1,1,5 for a non-existant prize!\n"


def tokenize(line: str) -> List[str]:
    """Case-fold a raw input line and split it on whitespace."""
    return line.strip().lower().split()


class Game:
    """One play session: the dungeon, the player, the alias table and the RNG.

    All mutable state lives here and is handed to the command handlers
    explicitly; nothing is kept at module level.
    """

    def __init__(
        self,
        dungeon: Optional[Dungeon] = None,
        player: Optional[Player] = None,
        aliases: Optional[CommandAliases] = None,
        rng: Optional[RandomSource] = None,
        object_chance: float = DEFAULT_OBJECT_CHANCE,
    ) -> None:
        self.dungeon = dungeon if dungeon is not None else Dungeon.default()
        self.player = player if player is not None else Player()
        self.aliases = aliases if aliases is not None else CommandAliases.default()
        self.rng: RandomSource = rng if rng is not None else RNG()
        self.object_chance = object_chance
        # The player must start somewhere real.
        self.dungeon.get(self.player.location)
        logger.info("New game: %r, player at %s", self.dungeon, self.player.location)

    @classmethod
    def from_settings(cls, settings: Settings, seed: Optional[int] = None) -> "Game":
        """Build a session from loaded settings; an explicit ``seed`` wins."""
        game = cls(
            rng=RNG(seed if seed is not None else settings.seed),
            object_chance=settings.dig.object_chance,
        )
        for existing, words in settings.aliases.items():
            for word in words:
                if not game.aliases.add_alias(existing, word):
                    logger.warning("Ignoring alias '%s': unknown command '%s'", word, existing)
        return game

    def execute(self, line: str) -> Optional[str]:
        """Run one input line and return the reply, or None when nothing is said.

        Blank lines are ignored entirely.
        """
        tokens = tokenize(line)
        if not tokens:
            return None
        command = self.aliases.resolve(tokens[0])
        args = tokens[1:]
        logger.debug("Input %r -> %s %s", line, command.name if command else None, args)
        return self.dispatch(command, args)

    def dispatch(self, command: Optional[Command], args: List[str]) -> Optional[str]:
        if command is None:
            return handlers.UNKNOWN_COMMAND
        if command.direction is not None:
            return handlers.goto(self.player, self.dungeon, command.direction)
        if command is Command.HELP:
            return handlers.help_()
        if command is Command.ALIAS:
            return handlers.alias(self.aliases, args)
        if command is Command.LOOK:
            return handlers.look(self.player, self.dungeon)
        if command is Command.TAKE:
            return handlers.take(self.player, self.dungeon, args)
        if command is Command.DROP:
            return handlers.drop(self.player, self.dungeon, args)
        if command is Command.INVENTORY:
            return handlers.inventory(self.player)
        if command is Command.DIG:
            return handlers.dig(self.player, self.dungeon, self.rng, args, self.object_chance)
        if command is Command.EQUIP:
            return handlers.equip(self.player, args)
        if command is Command.UNEQUIP:
            return handlers.unequip(self.player)
        return handlers.UNKNOWN_COMMAND


__all__ = ["Game", "BANNER", "tokenize"]
