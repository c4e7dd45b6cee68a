"""Shared type aliases for the core and domain layers."""
from typing import Literal

GamePhase = Literal["awaiting_command", "selecting_encounter", "combat", "game_over"]
EncounterType = Literal["normal", "elite", "event", "shop"]
ActionType = Literal["attack", "skill", "rest"]
MessageKind = Literal["info", "warning", "success", "danger"]
RelicKind = Literal["attack_boost", "overlap_charm"]

__all__ = ["ActionType", "EncounterType", "GamePhase", "MessageKind", "RelicKind"]
