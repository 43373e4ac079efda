"""
Mastery validation and gauntlet scoring.

Puzzles 1-4 use LearningValidator: a puzzle counts as learned once the
learner has seen at least MIN_TRIALS trials and is on a streak of
REQUIRED_STREAK correct answers. The first trial of puzzles 1 and 2 is
adversarial, so an early lucky streak still has to survive it.

Puzzle 5 uses GauntletState: WARMUP_TRIALS trials where the learner trains
but is not scored, then SCORED_TRIALS that count toward the final percentage.
"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# MASTERY
# =============================================================================

MIN_TRIALS = 5
REQUIRED_STREAK = 4


@dataclass
class LearningValidator:
    """Tracks outcomes for one validator-driven puzzle."""

    total_trials: int = 0
    successes: int = 0  # consecutive, reset on any failure
    failures: int = 0

    def record_outcome(self, success: bool) -> None:
        self.total_trials += 1
        if success:
            self.successes += 1
        else:
            self.failures += 1
            self.successes = 0

    def has_learned(self) -> bool:
        return self.total_trials >= MIN_TRIALS and self.successes >= self.required_successes

    @property
    def required_successes(self) -> int:
        return REQUIRED_STREAK

    def is_first_trial(self) -> bool:
        """True before any outcome; the next trial is then adversarial."""
        return self.total_trials == 0

    def reset(self) -> None:
        self.total_trials = 0
        self.successes = 0
        self.failures = 0


# =============================================================================
# GAUNTLET
# =============================================================================


@dataclass
class GauntletState:
    """Warmup-then-scored counter for the composition puzzle."""

    WARMUP_TRIALS = 10
    SCORED_TRIALS = 20
    TOTAL_TRIALS = WARMUP_TRIALS + SCORED_TRIALS

    warmup_completed: int = 0
    scored_completed: int = 0
    correct: int = 0

    def in_warmup(self) -> bool:
        return self.warmup_completed < self.WARMUP_TRIALS

    def record_outcome(self, success: bool) -> None:
        if self.in_warmup():
            # Learner still trains on warmup trials; outcome is not scored
            self.warmup_completed += 1
        else:
            self.scored_completed += 1
            if success:
                self.correct += 1

    def is_complete(self) -> bool:
        return self.scored_completed >= self.SCORED_TRIALS

    def score_percent(self) -> int:
        if self.scored_completed == 0:
            return 0
        return (self.correct * 100) // self.scored_completed

    @property
    def current_score(self) -> int:
        return self.correct

    @property
    def current_trials(self) -> int:
        return self.warmup_completed + self.scored_completed

    def reset(self) -> None:
        self.warmup_completed = 0
        self.scored_completed = 0
        self.correct = 0
