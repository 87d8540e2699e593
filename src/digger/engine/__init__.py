from .game import Game
from .loop import CommandLoop, LoopConfig

__all__ = ["Game", "CommandLoop", "LoopConfig"]
