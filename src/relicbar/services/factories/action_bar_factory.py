"""Factory for building the per-turn action bar."""
from __future__ import annotations

from typing import Sequence

from relicbar.core.rng import RNG
from relicbar.domain.action_bar import ActionBar, ActionTrack, generate_segments
from relicbar.domain.entities import PartyMember
from relicbar.domain.relics import Relic, apply_relics


def build_track(member: PartyMember, relics: Sequence[Relic], rng: RNG) -> ActionTrack:
    segments = apply_relics(relics, member, generate_segments(rng))
    return ActionTrack(member=member, segments=tuple(segments))


def build_action_bar(party: Sequence[PartyMember], relics: Sequence[Relic], rng: RNG) -> ActionBar:
    """Build a fresh track for every member, downed ones included."""
    return ActionBar(tracks=tuple(build_track(member, relics, rng) for member in party))
