"""Seeded random stream shared by every draw in a run."""
from __future__ import annotations

from random import Random
from typing import MutableSequence, Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """
    Single source of randomness for a run.

    Bar cuts, action shuffles, encounter options, event outcomes, relic rolls
    and enemy targeting all pull from one instance, so replaying a seed with
    the same commands replays the same run. ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Inclusive integer draw, used for event branches and option types."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Float in [0.0, 1.0): bar cuts, lock positions and relic rolls."""
        return self._random.random()

    def choice(self, seq: Sequence[T_co]) -> T_co:
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def shuffle(self, seq: MutableSequence[T_co]) -> None:
        """Permute action types in place."""
        self._random.shuffle(seq)
