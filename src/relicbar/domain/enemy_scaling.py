"""Deterministic enemy stat scaling helpers."""
from __future__ import annotations

from relicbar.core.types import EncounterType
from relicbar.domain.entities import Enemy

# Stats are linear in the run level.
# Normal: hp 18 + 2L, attack 5 + L. Elite: hp 28 + 3L, attack 8 + L.
NORMAL_BASE_HP = 18
NORMAL_HP_PER_LEVEL = 2
NORMAL_BASE_ATTACK = 5
ELITE_BASE_HP = 28
ELITE_HP_PER_LEVEL = 3
ELITE_BASE_ATTACK = 8
ATTACK_PER_LEVEL = 1

NORMAL_ENEMY_NAME = "Bandit Scout"
ELITE_ENEMY_NAME = "Ironclad Guardian"


def scale_enemy(encounter_type: EncounterType, *, level: int) -> Enemy:
    if encounter_type == "normal":
        return Enemy(
            name=NORMAL_ENEMY_NAME,
            max_hp=NORMAL_BASE_HP + NORMAL_HP_PER_LEVEL * level,
            base_attack=NORMAL_BASE_ATTACK + ATTACK_PER_LEVEL * level,
        )
    if encounter_type == "elite":
        return Enemy(
            name=ELITE_ENEMY_NAME,
            max_hp=ELITE_BASE_HP + ELITE_HP_PER_LEVEL * level,
            base_attack=ELITE_BASE_ATTACK + ATTACK_PER_LEVEL * level,
        )
    raise ValueError(f"Encounter type '{encounter_type}' has no enemy.")
