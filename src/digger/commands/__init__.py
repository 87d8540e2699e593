"""
Command layer for Digger.

Exposes:
- Command: Abstract commands the game understands.
- CommandAliases: Runtime-extensible table from typed words to commands.
- handlers: One function per command.
"""
from .actions import Command
from .aliases import CommandAliases
from . import handlers

__all__ = [
    "Command",
    "CommandAliases",
    "handlers",
]
