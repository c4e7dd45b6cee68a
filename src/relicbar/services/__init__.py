"""Service layer exports."""

from .errors import FactoryError
from .battle_service import BattleService, TurnResult
from .encounter_service import EncounterService

__all__ = [
    "FactoryError",
    "BattleService",
    "EncounterService",
    "TurnResult",
]
