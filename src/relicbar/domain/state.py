"""Domain-level run state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from relicbar.core.rng import RNG
from relicbar.core.types import GamePhase, MessageKind
from relicbar.domain.action_bar import ActionBar
from relicbar.domain.encounters import EncounterOption, EnemyEncounter
from relicbar.domain.entities import PartyMember
from relicbar.domain.messages import GameMessage, MessageLog
from relicbar.domain.relics import Relic

# Fixed roster: (name, max hp) in turn order.
STARTING_ROSTER: Tuple[Tuple[str, int], ...] = (
    ("Vera", 24),
    ("Roland", 22),
    ("Mira", 20),
)
STARTING_LEVEL = 1


def create_party() -> List[PartyMember]:
    return [PartyMember(name=name, max_hp=max_hp) for name, max_hp in STARTING_ROSTER]


@dataclass
class RunState:
    """Everything one game instance owns. The rng is never shared."""

    rng: RNG
    phase: GamePhase = "awaiting_command"
    level: int = STARTING_LEVEL
    party: List[PartyMember] = field(default_factory=create_party)
    relics: List[Relic] = field(default_factory=list)
    options: List[EncounterOption] = field(default_factory=list)
    messages: MessageLog = field(default_factory=MessageLog)
    encounter: EnemyEncounter | None = None
    action_bar: ActionBar | None = None
    last_turn_log: Tuple[GameMessage, ...] = ()
    last_lock_position: float | None = None

    def add_message(self, text: str, kind: MessageKind = "info") -> None:
        self.messages.add(GameMessage(text, kind))

    def party_wiped(self) -> bool:
        return all(member.is_down for member in self.party)
