"""Core data models for the enen puzzle engine."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PuzzleType(Enum):
    """The five puzzles, in the order they are played."""

    GENERALIZATION = "generalization"
    FEATURE_SELECTION = "feature_selection"
    XOR_CONTEXT = "xor_context"
    SEQUENCE = "sequence"
    COMPOSITION = "composition"

    @property
    def number(self) -> int:
        """1-based puzzle number shown to the viewer."""
        return list(PuzzleType).index(self) + 1

    @property
    def title(self) -> str:
        titles = {
            "generalization": "Generalization",
            "feature_selection": "Feature Selection",
            "xor_context": "XOR",
            "sequence": "Sequence",
            "composition": "Composition",
        }
        return titles[self.value]

    @property
    def display(self) -> str:
        return f"Puzzle {self.number}: {self.title}"

    @property
    def uses_gauntlet(self) -> bool:
        """Scored by the gauntlet instead of the mastery validator."""
        return self is PuzzleType.COMPOSITION

    @property
    def has_adversarial_opening(self) -> bool:
        return self in (PuzzleType.GENERALIZATION, PuzzleType.FEATURE_SELECTION)

    @classmethod
    def from_string(cls, value: str) -> PuzzleType:
        """Create PuzzleType from its value or its 1-based number."""
        if value.isdigit():
            index = int(value) - 1
            puzzles = list(PuzzleType)
            if 0 <= index < len(puzzles):
                return puzzles[index]
            raise ValueError(f"Invalid puzzle: {value}")
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Invalid puzzle: {value}")

    def next_puzzle(self) -> Optional[PuzzleType]:
        puzzles = list(PuzzleType)
        current_index = puzzles.index(self)
        if current_index < len(puzzles) - 1:
            return puzzles[current_index + 1]
        return None


NUM_PUZZLES = len(PuzzleType)


class EventType(Enum):
    """Kinds of events the game emits."""

    TRIAL_START = "trial_start"
    CHOICE_MADE = "choice_made"
    OUTCOME = "outcome"
    LEARNING = "learning"
    PUZZLE_COMPLETE = "puzzle_complete"


@dataclass(frozen=True)
class GameEvent:
    """A single event delivered to the observer."""

    type: EventType
    message: str
    success: bool = False  # meaningful for OUTCOME events
    puzzle: Optional[PuzzleType] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "message": self.message,
            "success": self.success,
            "puzzle": self.puzzle.value if self.puzzle else None,
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict())
