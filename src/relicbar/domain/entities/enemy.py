"""Enemy runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Enemy:
    """Represents a spawned enemy ready for battle."""

    name: str
    max_hp: int
    base_attack: int
    current_hp: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.max_hp <= 0:
            raise ValueError("max_hp must be positive.")
        if self.current_hp < 0:
            self.current_hp = self.max_hp
        self.current_hp = min(self.current_hp, self.max_hp)

    @property
    def is_alive(self) -> bool:
        return self.current_hp > 0

    def take_damage(self, amount: int) -> int:
        if amount <= 0:
            return 0
        before = self.current_hp
        self.current_hp = max(0, self.current_hp - amount)
        return before - self.current_hp
