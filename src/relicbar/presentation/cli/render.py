"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from relicbar.domain.action_bar import ActionBar, ActionTrack
from relicbar.domain.messages import GameMessage

BAR_WIDTH = 40

_ACTION_GLYPHS = {"attack": "A", "skill": "S", "rest": "R"}
_KIND_PREFIXES = {"info": "-", "warning": "!", "success": "+", "danger": "x"}


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def format_message(message: GameMessage) -> str:
    return f"{_KIND_PREFIXES.get(message.kind, '-')} {message.text}"


def render_messages(messages: Iterable[GameMessage]) -> None:
    for message in messages:
        print(format_message(message))


def format_track(track: ActionTrack, width: int = BAR_WIDTH) -> str:
    """
    Draw a track as a fixed-width strip of action glyphs.

    Each cell shows the first segment covering its midpoint; overlapping cells
    show '*' and uncovered cells show '.'.
    """
    cells: List[str] = []
    for index in range(width):
        midpoint = (index + 0.5) / width
        covering = [segment for segment in track.segments if segment.contains(midpoint)]
        if not covering:
            cells.append(".")
        elif len(covering) > 1:
            cells.append("*")
        else:
            cells.append(_ACTION_GLYPHS[covering[0].action])
    return "".join(cells)


def format_segments(track: ActionTrack) -> str:
    parts = []
    for segment in track.segments:
        stack = f" x{segment.stack}" if segment.stack > 1 else ""
        parts.append(f"{segment.action} {segment.start:.0%}-{segment.end:.0%}{stack}")
    return ", ".join(parts)


def render_action_bar(bar: ActionBar, *, show_segments: bool = False) -> None:
    render_heading("Action Bar")
    print(f"{'':<8}|0%{' ' * (BAR_WIDTH - 6)}100%|")
    for track in bar.tracks:
        status = " (down)" if track.member.is_down else ""
        print(f"{track.member.name:<8}|{format_track(track)}|{status}")
        if show_segments:
            print(f"{'':<8} {format_segments(track)}")
