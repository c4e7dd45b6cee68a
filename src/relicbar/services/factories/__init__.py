"""Factory helpers for runtime entities."""

from .action_bar_factory import build_action_bar, build_track
from .enemy_factory import create_enemy_encounter

__all__ = [
    "build_action_bar",
    "build_track",
    "create_enemy_encounter",
]
