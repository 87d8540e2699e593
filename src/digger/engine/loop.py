from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from ..commands.handlers import HELP_TEXT
from ..exceptions import InputClosedError
from .game import BANNER, Game

logger = logging.getLogger(__name__)

LineReader = Callable[[], str]
LineWriter = Callable[[str], None]


def stdin_reader() -> str:
    return sys.stdin.readline()


@dataclass
class LoopConfig:
    """Configuration for the command loop.

    Attributes:
        max_steps: If provided and > 0, stop after this many input lines. The
            game itself has no quit command; this exists for tests and scripted runs.
        show_banner: Print the greeting and help text before the first prompt.
    """

    max_steps: Optional[int] = None
    show_banner: bool = True


class CommandLoop:
    """Blocking read-eval-print loop around a :class:`Game`.

    Reading and writing are injected so the loop can be driven from tests.
    ``reader`` follows ``file.readline`` semantics: an empty string means the
    stream is exhausted, which is fatal.
    """

    def __init__(
        self,
        game: Game,
        reader: LineReader = stdin_reader,
        writer: LineWriter = print,
        config: Optional[LoopConfig] = None,
    ) -> None:
        self.game = game
        self.reader = reader
        self.writer = writer
        self.config = config or LoopConfig()
        self._step = 0

    @property
    def step(self) -> int:
        return self._step

    def read_line(self) -> str:
        try:
            line = self.reader()
        except EOFError as exc:
            raise InputClosedError("Cannot read from stdin") from exc
        if line == "":
            raise InputClosedError("Cannot read from stdin")
        return line

    def run_once(self) -> Optional[str]:
        """Read one line, execute it and write the reply if there is one."""
        line = self.read_line()
        self._step += 1
        reply = self.game.execute(line)
        if reply is not None:
            self.writer(reply)
        return reply

    def run(self) -> None:
        """Run until ``max_steps`` is reached; otherwise only a closed input ends it."""
        if self.config.show_banner:
            self.writer(BANNER)
            self.writer(HELP_TEXT)
        logger.info("Command loop started (max_steps=%s)", self.config.max_steps)
        while True:
            if self.config.max_steps is not None and 0 < self.config.max_steps <= self._step:
                logger.info("Loop complete (steps=%d)", self._step)
                return
            self.run_once()
