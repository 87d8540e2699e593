from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0.0, 1.0).

    Dig handlers only depend on this, so tests can pass a scripted source.
    """

    def random(self) -> float:  # pragma: no cover - protocol method
        ...


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Allows injecting a fixed seed for reproducible digs without touching
    Python's global RNG.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        return self._rng.random()
