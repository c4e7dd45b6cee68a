"""Party member runtime model."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class PartyMember:
    """A hero in the fixed run roster."""

    name: str
    max_hp: int
    current_hp: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.max_hp <= 0:
            raise ValueError("max_hp must be positive.")
        if self.current_hp < 0:
            self.current_hp = self.max_hp
        self.current_hp = min(self.current_hp, self.max_hp)

    @property
    def is_down(self) -> bool:
        return self.current_hp <= 0

    def take_damage(self, amount: int) -> int:
        """Apply damage, flooring HP at zero. Returns the HP actually lost."""
        if amount <= 0:
            return 0
        before = self.current_hp
        self.current_hp = max(0, self.current_hp - amount)
        return before - self.current_hp

    def heal(self, amount: int) -> int:
        """Restore HP up to max_hp. Returns the HP actually restored."""
        if amount <= 0:
            return 0
        before = self.current_hp
        self.current_hp = min(self.max_hp, self.current_hp + amount)
        return self.current_hp - before
