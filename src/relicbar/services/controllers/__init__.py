"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .game_controller import OptionChoiceResult, RogueliteGame

__all__ = [
    "OptionChoiceResult",
    "RogueliteGame",
]
