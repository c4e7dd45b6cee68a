"""Action bar models: segments, per-member tracks and lock-position evaluation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from relicbar.core.rng import RNG
from relicbar.core.types import ActionType
from relicbar.domain.entities import PartyMember

ACTION_TYPES: Tuple[ActionType, ...] = ("attack", "skill", "rest")
MIN_SEGMENT_WIDTH = 0.05


def clamp_position(position: float) -> float:
    return min(1.0, max(0.0, position))


@dataclass(frozen=True, slots=True)
class ActionSegment:
    """A closed sub-interval of [0, 1] that fires `stack` copies of an action."""

    start: float
    end: float
    action: ActionType
    stack: int = 1

    def __post_init__(self) -> None:
        if self.action not in ACTION_TYPES:
            raise ValueError(f"Unknown action type: {self.action}")
        if not 0.0 <= self.start < self.end <= 1.0:
            raise ValueError(f"Invalid segment bounds: [{self.start}, {self.end}]")
        if self.stack < 1:
            raise ValueError("Segment stack must be at least 1.")

    @property
    def width(self) -> float:
        return self.end - self.start

    def contains(self, position: float) -> bool:
        return self.start <= position <= self.end


@dataclass(slots=True)
class ActionTrack:
    """One party member's timeline for the current turn."""

    member: PartyMember
    segments: Tuple[ActionSegment, ...]

    def actions_at(self, position: float) -> List[ActionType]:
        """Expand every segment covering the position; fall back to a single rest."""
        actions: List[ActionType] = []
        for segment in self.segments:
            if segment.contains(position):
                actions.extend([segment.action] * max(1, segment.stack))
        if not actions:
            actions.append("rest")
        return actions


@dataclass(frozen=True, slots=True)
class ActionExecution:
    member: PartyMember
    actions: Tuple[ActionType, ...]


@dataclass(frozen=True, slots=True)
class ActionEvaluation:
    position: float
    executions: Tuple[ActionExecution, ...]


@dataclass(slots=True)
class ActionBar:
    """The full set of tracks for one combat turn."""

    tracks: Tuple[ActionTrack, ...]

    def evaluate(self, position: float) -> ActionEvaluation:
        """Resolve a lock position into the ordered actions for each member."""
        locked = clamp_position(position)
        executions = tuple(
            ActionExecution(member=track.member, actions=tuple(track.actions_at(locked)))
            for track in self.tracks
        )
        return ActionEvaluation(position=locked, executions=executions)


def generate_segments(rng: RNG) -> List[ActionSegment]:
    """
    Split [0, 1] into three segments with a random action permutation.

    Draw order is two cut points followed by one shuffle. Each segment is at
    least MIN_SEGMENT_WIDTH wide: the right edge is pushed forward first, and
    when that would pass 1.0 the start is pulled back instead.
    """
    cuts = sorted([rng.random(), rng.random()])
    points = [0.0, cuts[0], cuts[1], 1.0]

    actions: List[ActionType] = list(ACTION_TYPES)
    rng.shuffle(actions)

    segments: List[ActionSegment] = []
    for index in range(3):
        start = min(points[index], 1.0 - MIN_SEGMENT_WIDTH)
        end = min(1.0, max(points[index + 1], start + MIN_SEGMENT_WIDTH))
        segments.append(ActionSegment(start=start, end=end, action=actions[index]))
    segments.sort(key=lambda segment: segment.start)
    return segments
