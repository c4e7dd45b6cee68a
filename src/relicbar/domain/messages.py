"""Game message models and the capped run log."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, Tuple

from relicbar.core.types import MessageKind

MAX_MESSAGES = 200


@dataclass(frozen=True, slots=True)
class GameMessage:
    """A single line of player-facing text."""

    text: str
    kind: MessageKind = "info"

    @classmethod
    def info(cls, text: str) -> "GameMessage":
        return cls(text, "info")

    @classmethod
    def warn(cls, text: str) -> "GameMessage":
        return cls(text, "warning")

    @classmethod
    def success(cls, text: str) -> "GameMessage":
        return cls(text, "success")

    @classmethod
    def danger(cls, text: str) -> "GameMessage":
        return cls(text, "danger")


class MessageLog:
    """FIFO log that keeps only the most recent entries."""

    def __init__(self, capacity: int = MAX_MESSAGES) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive.")
        self._entries: Deque[GameMessage] = deque(maxlen=capacity)
        self._appended = 0

    @property
    def appended_count(self) -> int:
        """Total entries ever added, including evicted ones."""
        return self._appended

    def add(self, message: GameMessage) -> None:
        self._entries.append(message)
        self._appended += 1

    def extend(self, messages: Iterable[GameMessage]) -> None:
        for message in messages:
            self.add(message)

    def entries_since(self, mark: int) -> Tuple[GameMessage, ...]:
        """Return retained entries added after `mark` (a previous appended_count)."""
        new_count = min(max(0, self._appended - mark), len(self._entries))
        if new_count == 0:
            return ()
        return tuple(self._entries)[-new_count:]

    def snapshot(self) -> Tuple[GameMessage, ...]:
        """Return the retained entries, oldest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[GameMessage]:
        return iter(tuple(self._entries))
