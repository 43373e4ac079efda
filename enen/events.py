"""
Event observers.

The game delivers every GameEvent synchronously to a single callback.
These helpers are ready-made callbacks: one forwards to a logger, one
records events in memory, and ``fan_out`` lets several of them share the
single hook without changing delivery order.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

from enen.models import EventType, GameEvent, PuzzleType

EventCallback = Callable[[GameEvent], None]


def logging_observer(logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> EventCallback:
    """
    Build a callback that writes each event to ``logger``.

    Failed outcomes are logged one level higher so they stand out.
    """
    target = logger or logging.getLogger("enen.events")

    def observe(event: GameEvent) -> None:
        event_level = level
        if event.type is EventType.OUTCOME and not event.success:
            event_level = min(level + 10, logging.CRITICAL)
        puzzle = event.puzzle.number if event.puzzle else "-"
        target.log(event_level, f"[puzzle {puzzle}] {event.type.value}: {event.message}")

    return observe


def fan_out(*callbacks: EventCallback) -> EventCallback:
    """Deliver each event to every callback, in the order given."""

    def observe(event: GameEvent) -> None:
        for callback in callbacks:
            callback(event)

    return observe


class EventRecorder:
    """Collects events in emission order."""

    def __init__(self) -> None:
        self.events: List[GameEvent] = []

    def __call__(self, event: GameEvent) -> None:
        self.events.append(event)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[GameEvent]:
        return iter(self.events)

    def of_type(self, event_type: EventType) -> List[GameEvent]:
        return [e for e in self.events if e.type is event_type]

    def for_puzzle(self, puzzle: PuzzleType) -> List[GameEvent]:
        return [e for e in self.events if e.puzzle is puzzle]

    def outcomes(self) -> List[bool]:
        return [e.success for e in self.of_type(EventType.OUTCOME)]

    def clear(self) -> None:
        self.events.clear()

    def to_dicts(self) -> List[dict]:
        return [e.to_dict() for e in self.events]
