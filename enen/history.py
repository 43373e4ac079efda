"""Rolling window of recent trial results for display."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List

MAX_ENTRIES = 4


@dataclass(frozen=True)
class HistoryEntry:
    trial_number: int
    correct: bool
    summary: str

    def render(self) -> str:
        mark = "[OK]" if self.correct else "[X]"
        return f"Trial {self.trial_number}: {mark} {self.summary}"


class TrialHistory:
    """Keeps the last ``max_entries`` trials; older ones are dropped."""

    def __init__(self, max_entries: int = MAX_ENTRIES):
        self.max_entries = max_entries
        self._entries: Deque[HistoryEntry] = deque(maxlen=max_entries)

    def add(self, trial_number: int, correct: bool, summary: str) -> HistoryEntry:
        entry = HistoryEntry(trial_number=trial_number, correct=correct, summary=summary)
        self._entries.append(entry)
        return entry

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> List[HistoryEntry]:
        """Oldest first."""
        return list(self._entries)

    def most_recent_first(self) -> List[HistoryEntry]:
        return list(reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
