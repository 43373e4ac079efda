"""
enen Puzzle Engine

Five small guess-feedback-adapt puzzles played by a pluggable learner,
with deterministic trial generation, mastery validation and a scored
gauntlet.
"""

from enen.config import EnenConfig, configure_logging
from enen.events import EventRecorder, fan_out, logging_observer
from enen.exceptions import (
    ConfigurationError,
    EnenError,
    GenerationError,
    LearnerError,
)
from enen.game import Game, GameState
from enen.history import HistoryEntry, TrialHistory
from enen.learners import (
    LEARNER_SHAPES,
    Learner,
    LearnerShape,
    LearnerTable,
    interpret_bool,
    scale_to_u8,
)
from enen.models import NUM_PUZZLES, EventType, GameEvent, PuzzleType
from enen.puzzles import (
    Button,
    CompositionTrial,
    SequencePuzzle,
    SequenceState,
    ShapeTrial,
    SizeTrial,
    XorTrial,
)
from enen.rng import XorShift32
from enen.scoring import GauntletState, LearningValidator

__version__ = "0.1.0"
__all__ = [
    # Models
    "PuzzleType",
    "EventType",
    "GameEvent",
    "NUM_PUZZLES",
    # Config
    "EnenConfig",
    "configure_logging",
    # Exceptions
    "EnenError",
    "GenerationError",
    "ConfigurationError",
    "LearnerError",
    # RNG and trials
    "XorShift32",
    "SizeTrial",
    "ShapeTrial",
    "XorTrial",
    "CompositionTrial",
    "Button",
    "SequencePuzzle",
    "SequenceState",
    # Scoring
    "LearningValidator",
    "GauntletState",
    # Learners
    "Learner",
    "LearnerShape",
    "LearnerTable",
    "LEARNER_SHAPES",
    "scale_to_u8",
    "interpret_bool",
    # Game
    "Game",
    "GameState",
    # Events and history
    "EventRecorder",
    "logging_observer",
    "fan_out",
    "TrialHistory",
    "HistoryEntry",
]
