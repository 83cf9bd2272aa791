"""Events produced by a bot and the queue they wait in until polled."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class EventType(IntEnum):
    """Kinds of event a bot reports."""

    NONE = 0
    JOIN = 1
    DISCONNECT = 2


@dataclass(frozen=True)
class Event:
    """Something that happened to the bot; disconnects carry a reason."""

    type: EventType
    reason: str | None = None


class EventQueue:
    """First-in, first-out queue of pending events."""

    def __init__(self) -> None:
        self._events: deque[Event] = deque()

    def push(self, event: Event) -> None:
        """Add an event at the back of the queue."""
        self._events.append(event)

    def poll(self) -> Event | None:
        """Remove and return the oldest event, or None when the queue is empty."""
        return self._events.popleft() if self._events else None

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        """Yield pending events oldest first, removing each as it is yielded."""
        while self._events:
            yield self._events.popleft()