"""Relic definitions and the segment modifier pipeline."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence

from relicbar.core.rng import RNG
from relicbar.core.types import RelicKind
from relicbar.domain.action_bar import ActionSegment
from relicbar.domain.entities import PartyMember

ATTACK_BOOST_BONUS = 2
ATTACK_BOOST_ROLL_CHANCE = 0.6
OVERLAP_LEFT_EXTENSION = 0.05
OVERLAP_RIGHT_EXTENSION = 0.08


@dataclass(frozen=True, slots=True)
class Relic:
    """Immutable run modifier."""

    kind: RelicKind
    name: str
    description: str


RELIC_LIBRARY: Dict[RelicKind, Relic] = {
    "attack_boost": Relic(
        kind="attack_boost",
        name="Keen Edge Crest",
        description="Attacks hit slightly harder.",
    ),
    "overlap_charm": Relic(
        kind="overlap_charm",
        name="Windmill of Hours",
        description="Stretches the attack segment so it overlaps its neighbours.",
    ),
}


def get_relic(kind: RelicKind) -> Relic:
    try:
        return RELIC_LIBRARY[kind]
    except KeyError as exc:
        raise ValueError(f"Unknown relic kind: {kind}") from exc


def roll_relic(rng: RNG) -> Relic:
    """Draw a relic: 60% Attack Boost, 40% Overlap Charm."""
    if rng.random() < ATTACK_BOOST_ROLL_CHANCE:
        return get_relic("attack_boost")
    return get_relic("overlap_charm")


def apply_relic(
    kind: RelicKind, member: PartyMember, segments: Sequence[ActionSegment]
) -> List[ActionSegment]:
    """
    Return the segment list after a single relic has had its turn.

    The input is never mutated. Attack Boost has no geometric effect; its bonus
    is read at attack time through has_attack_boost.
    """
    del member
    if kind == "attack_boost":
        return list(segments)
    if kind == "overlap_charm":
        return _widen_first_attack(segments)
    raise ValueError(f"Unknown relic kind: {kind}")


def apply_relics(
    relics: Iterable[Relic], member: PartyMember, segments: Sequence[ActionSegment]
) -> List[ActionSegment]:
    """Run every owned relic over the segments in acquisition order."""
    result = list(segments)
    for relic in relics:
        result = apply_relic(relic.kind, member, result)
    return result


def has_attack_boost(relics: Iterable[Relic]) -> bool:
    return any(relic.kind == "attack_boost" for relic in relics)


def _widen_first_attack(segments: Sequence[ActionSegment]) -> List[ActionSegment]:
    # Only the first attack segment is widened; the list is not re-sorted.
    result = list(segments)
    for index, segment in enumerate(result):
        if segment.action != "attack":
            continue
        result[index] = replace(
            segment,
            start=max(0.0, segment.start - OVERLAP_LEFT_EXTENSION),
            end=min(1.0, segment.end + OVERLAP_RIGHT_EXTENSION),
            stack=segment.stack + 1,
        )
        break
    return result
