"""Tests for CLI rendering utilities."""
from relicbar.domain.action_bar import ActionSegment, ActionTrack
from relicbar.domain.entities import PartyMember
from relicbar.domain.messages import GameMessage
from relicbar.presentation.cli.render import format_message, format_segments, format_track


def _track(*segments: ActionSegment) -> ActionTrack:
    return ActionTrack(member=PartyMember(name="Vera", max_hp=24), segments=segments)


def test_format_track_draws_each_segment() -> None:
    track = _track(
        ActionSegment(0.0, 0.25, "attack"),
        ActionSegment(0.25, 0.5, "skill"),
        ActionSegment(0.5, 1.0, "rest"),
    )
    assert format_track(track, width=8) == "AASSRRRR"


def test_format_track_marks_overlap_and_gaps() -> None:
    track = _track(ActionSegment(0.0, 0.5, "attack"), ActionSegment(0.25, 0.5, "skill"))
    assert format_track(track, width=4) == "A*.."


def test_format_segments_shows_stack() -> None:
    track = _track(ActionSegment(0.1, 0.6, "attack", 2))
    assert format_segments(track) == "attack 10%-60% x2"


def test_format_message_uses_kind_prefix() -> None:
    assert format_message(GameMessage.danger("Ouch")) == "x Ouch"
    assert format_message(GameMessage.info("Hi")) == "- Hi"
