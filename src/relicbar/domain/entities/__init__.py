"""Runtime entity exports."""

from .enemy import Enemy
from .party_member import PartyMember

__all__ = [
    "Enemy",
    "PartyMember",
]
