from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set, Tuple

from .actions import Command

logger = logging.getLogger(__name__)


class CommandAliases:
    """Runtime-extensible mapping from typed words to commands.

    Stored as an ordered list of (alias set, command) pairs. Lookup scans the
    pairs in order and the first set containing the word wins, so duplicate
    aliases across commands resolve to the earliest entry. Words are
    normalized to lowercase on the way in.

    Example usage:
        aliases = CommandAliases.default()
        aliases.resolve("N")            # -> Command.NORTH
        aliases.add_alias("take", "grab")
        aliases.resolve("grab")         # -> Command.TAKE
    """

    def __init__(self, entries: Optional[Iterable[Tuple[Iterable[str], Command]]] = None) -> None:
        self._entries: List[Tuple[Set[str], Command]] = []
        if entries:
            for words, command in entries:
                self.register(words, command)

    @staticmethod
    def _normalize(word: str) -> str:
        return word.strip().lower()

    # ---------- Registration ----------
    def register(self, words: Iterable[str], command: Command) -> None:
        """Append a new (alias set, command) pair at the end of the table."""
        self._entries.append(({self._normalize(w) for w in words}, command))

    def add_alias(self, existing: str, new_alias: str) -> bool:
        """Make ``new_alias`` resolve like ``existing``.

        Every entry whose set contains ``existing`` gains ``new_alias``.
        Returns False if no entry knows ``existing``.
        """
        existing = self._normalize(existing)
        new_alias = self._normalize(new_alias)
        found = False
        for words, command in self._entries:
            if existing in words:
                words.add(new_alias)
                found = True
                logger.debug("Alias '%s' added for %s", new_alias, command.name)
        if not found:
            logger.debug("Cannot alias '%s': no such command", existing)
        return found

    # ---------- Lookup ----------
    def resolve(self, word: str) -> Optional[Command]:
        """Translate a typed word into a command, or None if unknown."""
        word = self._normalize(word)
        for words, command in self._entries:
            if word in words:
                return command
        return None

    def aliases_for(self, command: Command) -> Set[str]:
        """Every word that appears in an entry for ``command``."""
        result: Set[str] = set()
        for words, cmd in self._entries:
            if cmd is command:
                result.update(words)
        return result

    def __len__(self) -> int:
        return len(self._entries)

    # ---------- Defaults ----------
    @classmethod
    def default(cls) -> "CommandAliases":
        return cls(
            [
                (["n", "north"], Command.NORTH),
                (["s", "south"], Command.SOUTH),
                (["w", "west"], Command.WEST),
                (["e", "east"], Command.EAST),
                (["d", "down"], Command.DOWN),
                (["u", "up"], Command.UP),
                (["help"], Command.HELP),
                (["dig"], Command.DIG),
                (["l", "look"], Command.LOOK),
                (["i", "inventory"], Command.INVENTORY),
                (["take"], Command.TAKE),
                (["drop"], Command.DROP),
                (["equip"], Command.EQUIP),
                (["unequip"], Command.UNEQUIP),
                (["alias"], Command.ALIAS),
            ]
        )


__all__ = ["CommandAliases"]
