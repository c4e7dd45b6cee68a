from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

from relicbar.core.rng import RNG

T = TypeVar("T")


class ScriptedRNG(RNG):
    """RNG that replays scripted draws first and then falls back to a seeded stream."""

    def __init__(
        self,
        *,
        floats: Iterable[float] = (),
        ints: Iterable[int] = (),
        choice_indices: Iterable[int] = (),
        seed: int = 0,
    ) -> None:
        super().__init__(seed)
        self._floats: List[float] = list(floats)
        self._ints: List[int] = list(ints)
        self._choice_indices: List[int] = list(choice_indices)

    def random(self) -> float:
        if self._floats:
            return self._floats.pop(0)
        return super().random()

    def randint(self, a: int, b: int) -> int:
        if self._ints:
            value = self._ints.pop(0)
            assert a <= value <= b
            return value
        return super().randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        if self._choice_indices:
            return seq[self._choice_indices.pop(0)]
        return super().choice(seq)

    def push_floats(self, *values: float) -> None:
        self._floats.extend(values)

    def push_choice_indices(self, *indices: int) -> None:
        self._choice_indices.extend(indices)
