"""Factory for creating enemy encounters from an option type."""
from __future__ import annotations

from relicbar.core.types import EncounterType
from relicbar.domain.encounters import EnemyEncounter
from relicbar.domain.enemy_scaling import scale_enemy
from relicbar.services.errors import FactoryError


def create_enemy_encounter(encounter_type: EncounterType, *, level: int) -> EnemyEncounter:
    """Instantiate the enemy for a fight option at the given run level."""
    try:
        enemy = scale_enemy(encounter_type, level=level)
    except ValueError as exc:
        raise FactoryError(f"Cannot create an enemy for '{encounter_type}' encounters.") from exc
    return EnemyEncounter.for_enemy(enemy, encounter_type)
