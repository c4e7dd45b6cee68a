"""Encounter options and the enemy encounter payload."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from relicbar.core.rng import RNG
from relicbar.core.types import EncounterType
from relicbar.domain.entities import Enemy

ENCOUNTER_CANDIDATES: Tuple[EncounterType, ...] = ("normal", "event", "shop", "elite")
OPTION_COUNT = 3


@dataclass(frozen=True, slots=True)
class EncounterOption:
    """A navigable choice offered between fights."""

    encounter_type: EncounterType
    label: str


@dataclass(slots=True)
class EnemyEncounter:
    """An active fight. The only encounter payload the game has today."""

    name: str
    encounter_type: EncounterType
    enemy: Enemy

    @classmethod
    def for_enemy(cls, enemy: Enemy, encounter_type: EncounterType) -> "EnemyEncounter":
        return cls(name=enemy.name, encounter_type=encounter_type, enemy=enemy)


def option_label(encounter_type: EncounterType, level: int) -> str:
    if encounter_type == "normal":
        return f"Bandit Gang Lv{level}"
    if encounter_type == "elite":
        return f"Guardian Lv{level + 1}"
    if encounter_type == "event":
        return "Mysterious Altar"
    if encounter_type == "shop":
        return "Wandering Merchant"
    raise ValueError(f"Unknown encounter type: {encounter_type}")


def generate_options(rng: RNG, level: int) -> List[EncounterOption]:
    """
    Draw three options uniformly from the candidate pool.

    If no normal fight has been drawn by the last slot, the last slot becomes a
    normal fight so there is always a winnable path forward.
    """
    options: List[EncounterOption] = []
    normal_count = 0
    while len(options) < OPTION_COUNT:
        encounter_type = rng.choice(ENCOUNTER_CANDIDATES)
        if encounter_type == "normal":
            normal_count += 1
        if len(options) == OPTION_COUNT - 1 and normal_count == 0:
            encounter_type = "normal"
        options.append(EncounterOption(encounter_type, option_label(encounter_type, level)))
    return options
