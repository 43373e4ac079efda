"""
Game logic for the enen puzzles.

Separated from any UI so a full run can be driven and tested headless.
One Game owns one GameState; nothing is shared between games, so parallel
runs need their own Game instances.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from enen.config import EnenConfig
from enen.events import EventCallback
from enen.history import TrialHistory
from enen.learners import (
    LearnersArg,
    LearnerTable,
    action_target,
    bool_target,
    choose_a,
    choose_action,
    interpret_bool,
)
from enen.models import EventType, GameEvent, PuzzleType
from enen.puzzles import (
    Button,
    CompositionTrial,
    SequencePuzzle,
    ShapeTrial,
    SizeTrial,
    XorTrial,
)
from enen.puzzles.shapes import color_name, is_blue, is_circle, shape_name
from enen.rng import XorShift32
from enen.scoring import GauntletState, LearningValidator

logger = logging.getLogger(__name__)


class GameState:
    """Everything one run of the demo mutates."""

    def __init__(self, learners: LearnerTable, seed: int, history_size: int = 4):
        self.current_puzzle = PuzzleType.GENERALIZATION
        self.puzzle_complete = False
        self.demo_complete = False

        # Puzzles 1-4
        self.validator = LearningValidator()
        # Puzzle 5
        self.gauntlet = GauntletState()

        self.learners = learners
        self.seq_puzzle = SequencePuzzle()
        self.rng = XorShift32(seed)

        # Last generated trial of each kind, kept for display
        self.current_mushroom: Optional[SizeTrial] = None
        self.current_shape: Optional[ShapeTrial] = None
        self.current_xor: Optional[XorTrial] = None
        self.current_composition: Optional[CompositionTrial] = None

        self.history = TrialHistory(history_size)

    def reset(self) -> None:
        """Restart scoring for the current puzzle; learners are untouched."""
        self.validator.reset()
        self.gauntlet.reset()
        self.seq_puzzle.reset()
        self.history.clear()
        self.puzzle_complete = False

    @property
    def trials_played(self) -> int:
        """Resolved trials on the current puzzle."""
        if self.current_puzzle.uses_gauntlet:
            return self.gauntlet.current_trials
        return self.validator.total_trials

    def next_puzzle(self) -> bool:
        upcoming = self.current_puzzle.next_puzzle()
        if upcoming is None:
            self.demo_complete = True
            return False
        self.current_puzzle = upcoming
        self.reset()
        return True

    def total_model_bytes(self) -> int:
        return self.learners.total_model_bytes()

    def total_parameters(self) -> int:
        return self.learners.total_parameters()


class Game:
    """Runs puzzles one trial at a time and emits events."""

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        learners: LearnersArg,
        config: Optional[EnenConfig] = None,
        on_event: Optional[EventCallback] = None,
    ):
        """
        Initialize the game.

        Args:
            seed: RNG seed. Defaults to ``config.seed``.
            learners: A LearnerTable, a mapping of PuzzleType to learner, or
                a factory called once per LearnerShape.
            config: Run configuration. Defaults to EnenConfig().
            on_event: Observer for the event stream.
        """
        self.config = config or EnenConfig()
        resolved_seed = self.config.seed if seed is None else seed
        self._state = GameState(
            LearnerTable.coerce(learners),
            seed=resolved_seed,
            history_size=self.config.history_size,
        )
        self._callback = on_event
        self._runners: dict[PuzzleType, Callable[[], bool]] = {
            PuzzleType.GENERALIZATION: self._run_generalization_trial,
            PuzzleType.FEATURE_SELECTION: self._run_feature_selection_trial,
            PuzzleType.XOR_CONTEXT: self._run_xor_trial,
            PuzzleType.SEQUENCE: self._run_sequence_trial,
            PuzzleType.COMPOSITION: self._run_composition_trial,
        }
        logger.debug(f"Game created with seed {resolved_seed}")

    @property
    def state(self) -> GameState:
        return self._state

    def set_event_callback(self, callback: Optional[EventCallback]) -> None:
        self._callback = callback

    def _emit(self, event_type: EventType, message: str, success: bool = False) -> None:
        if self._callback is not None:
            self._callback(GameEvent(event_type, message, success, self._state.current_puzzle))

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def run_trial(self) -> bool:
        """Run one trial of the current puzzle. Returns True once it is complete."""
        return self._runners[self._state.current_puzzle]()

    def reset_puzzle(self, seed: Optional[int] = None) -> None:
        """
        Restart the current puzzle from scratch, including its learner.

        Args:
            seed: Seed for the learner's new weights. Drawn from the game
                RNG when omitted so runs stay reproducible.
        """
        s = self._state
        s.reset()
        learner_seed = s.rng.next() if seed is None else seed
        s.learners.reset(s.current_puzzle, learner_seed)
        logger.info(f"Reset {s.current_puzzle.display} (learner seed {learner_seed})")
        self._emit(EventType.TRIAL_START, "--- RESET ---")

    def next_puzzle(self) -> bool:
        """Advance to the next puzzle. False (and demo complete) after the last one."""
        advanced = self._state.next_puzzle()
        if advanced:
            logger.info(f"Advanced to {self._state.current_puzzle.display}")
        else:
            logger.info("All puzzles finished; demo complete")
        return advanced

    def run_puzzle_to_completion(self, max_trials: Optional[int] = None) -> Optional[int]:
        """
        Run the current puzzle until it completes.

        Args:
            max_trials: Trial budget. Defaults to ``config.max_trials_per_puzzle``.

        Returns:
            Number of trials taken, or None if the budget ran out first.
        """
        if max_trials is None:
            max_trials = self.config.max_trials_per_puzzle
        self._state.reset()
        for i in range(max_trials):
            if self.run_trial():
                return i + 1
        logger.warning(
            f"{self._state.current_puzzle.display} did not complete in {max_trials} trials "
            f"({self._state.trials_played} resolved)"
        )
        return None

    def run_full_demo(self, max_trials_per_puzzle: Optional[int] = None) -> bool:
        """Run every remaining puzzle in order. False on the first one that does not converge."""
        while True:
            trials = self.run_puzzle_to_completion(max_trials_per_puzzle)
            if trials is None:
                return False
            logger.info(f"{self._state.current_puzzle.display} completed in {trials} trials")
            if not self.next_puzzle():
                return True

    def total_model_bytes(self) -> int:
        return self._state.total_model_bytes()

    def total_parameters(self) -> int:
        return self._state.total_parameters()

    # -------------------------------------------------------------------------
    # Shared steps
    # -------------------------------------------------------------------------

    def _learn(self, puzzle: PuzzleType, features: Sequence[int], target: Sequence[int], note: str) -> None:
        self._state.learners.learn(puzzle, features, target)
        self._emit(EventType.LEARNING, note)

    def _record_validated(self, correct: bool, summary: str, lesson: str) -> bool:
        s = self._state
        s.validator.record_outcome(correct)
        s.history.add(s.validator.total_trials, correct, summary)
        logger.debug(
            f"{s.current_puzzle.display} trial {s.validator.total_trials}: "
            f"{'correct' if correct else 'wrong'} (streak {s.validator.successes})"
        )
        if s.validator.has_learned():
            s.puzzle_complete = True
            logger.info(f"{s.current_puzzle.display} learned after {s.validator.total_trials} trials")
            self._emit(EventType.PUZZLE_COMPLETE, lesson)
            return True
        return False

    # -------------------------------------------------------------------------
    # Puzzle 1: Generalization
    # -------------------------------------------------------------------------

    def _run_generalization_trial(self) -> bool:
        s = self._state
        puzzle = PuzzleType.GENERALIZATION

        # First trial is adversarial; it is still judged honestly
        adversarial = puzzle.has_adversarial_opening and s.validator.is_first_trial()
        trial = SizeTrial.generate(s.rng, adversarial, max_draws=self.config.max_rejection_draws)
        s.current_mushroom = trial

        chose_a = choose_a(s.learners.predict(puzzle, trial.features()))
        correct = chose_a == trial.correct_is_a

        self._emit(EventType.TRIAL_START, f"enen sees {trial.describe()}")
        self._emit(EventType.CHOICE_MADE, f"enen picks {'A (left)' if chose_a else 'B (right)'}")
        if correct:
            self._emit(EventType.OUTCOME, "CORRECT! The bigger one was safe.", True)
        else:
            self._emit(EventType.OUTCOME, "WRONG! Picked the smaller one.", False)

        self._learn(
            puzzle,
            trial.features(),
            bool_target(trial.correct_is_a),
            f"enen learns: {'A' if trial.correct_is_a else 'B'} was the bigger one",
        )
        return self._record_validated(
            correct,
            trial.describe(),
            "* enen learned: pick the bigger one. Color doesn't matter.",
        )

    # -------------------------------------------------------------------------
    # Puzzle 2: Feature interaction
    # -------------------------------------------------------------------------

    def _run_feature_selection_trial(self) -> bool:
        s = self._state
        puzzle = PuzzleType.FEATURE_SELECTION

        # Opens with a blue square against a circle
        adversarial = puzzle.has_adversarial_opening and s.validator.is_first_trial()
        trial = ShapeTrial.generate(s.rng, adversarial, max_draws=self.config.max_rejection_draws)
        s.current_shape = trial

        chose_a = choose_a(s.learners.predict(puzzle, trial.features()))
        correct = chose_a == trial.correct_is_a
        picked_color, picked_shape = trial.option(chose_a)

        self._emit(EventType.TRIAL_START, f"enen sees {trial.describe()}")
        self._emit(
            EventType.CHOICE_MADE,
            f"enen picks {'A' if chose_a else 'B'} ({color_name(picked_color)} {shape_name(picked_shape)})",
        )
        if not correct:
            self._emit(EventType.OUTCOME, "DANGER! Wrong choice.", False)
        elif not is_circle(picked_shape) and is_blue(picked_color):
            self._emit(EventType.OUTCOME, "SAFE! Blue square is the best choice.", True)
        elif is_circle(picked_shape):
            self._emit(EventType.OUTCOME, "SAFE! Circle is a good choice.", True)
        else:
            self._emit(EventType.OUTCOME, "SAFE! Correct choice.", True)

        self._learn(
            puzzle,
            trial.features(),
            bool_target(trial.correct_is_a),
            f"enen learns: rank {trial.rank_a} vs rank {trial.rank_b}",
        )
        return self._record_validated(
            correct,
            trial.describe(),
            "* enen learned: circles are safe, but blue squares are even better.",
        )

    # -------------------------------------------------------------------------
    # Puzzle 3: XOR
    # -------------------------------------------------------------------------

    def _run_xor_trial(self) -> bool:
        s = self._state
        puzzle = PuzzleType.XOR_CONTEXT

        trial = XorTrial.generate(s.rng)
        s.current_xor = trial

        outputs = s.learners.predict(puzzle, trial.features())
        predicted_safe = interpret_bool(outputs[0])
        correct = predicted_safe == trial.is_safe

        self._emit(EventType.TRIAL_START, trial.describe())
        self._emit(EventType.CHOICE_MADE, f"enen predicts: {'SAFE' if predicted_safe else 'DANGER'}")
        if correct:
            self._emit(EventType.OUTCOME, "Correct prediction!", True)
        else:
            self._emit(EventType.OUTCOME, "Wrong prediction!", False)

        self._learn(
            puzzle,
            trial.features(),
            bool_target(trial.is_safe),
            f"enen learns: this path was {'safe' if trial.is_safe else 'dangerous'}",
        )
        return self._record_validated(
            correct,
            trial.describe(),
            "* enen learned: the light changes which path is safe.",
        )

    # -------------------------------------------------------------------------
    # Puzzle 4: Sequence
    # -------------------------------------------------------------------------

    def _run_sequence_trial(self) -> bool:
        s = self._state
        puzzle = PuzzleType.SEQUENCE

        if not s.seq_puzzle.in_progress():
            self._emit(EventType.TRIAL_START, f"Attempt {s.validator.total_trials + 1}: the door is locked")

        last = s.seq_puzzle.last_action_input()
        action = choose_action(s.learners.predict(puzzle, (last,)))
        button = Button(action)
        self._emit(EventType.CHOICE_MADE, f"enen presses {button.label}")

        s.seq_puzzle.press(button)

        if s.seq_puzzle.is_success():
            self._emit(EventType.OUTCOME, "SUCCESS! Door opens!", True)
            self._learn(puzzle, (last,), action_target(action, True), f"enen learns: {button.label} worked here")
            s.seq_puzzle.reset()
            return self._record_validated(True, "A then B", "* enen learned: press A first, then press B.")

        if s.seq_puzzle.is_fail():
            self._emit(EventType.OUTCOME, "FAIL! Wrong order!", False)
            self._learn(puzzle, (last,), action_target(action, False), f"enen learns: not {button.label} here")
            s.seq_puzzle.reset()
            # A failure zeroes the streak, so it can never complete the puzzle
            s.validator.record_outcome(False)
            s.history.add(s.validator.total_trials, False, f"pressed {button.label} out of order")
            return False

        # Pressed A; B still needed. Learned from but not scored.
        self._emit(EventType.OUTCOME, "Good start - now press B", True)
        self._learn(puzzle, (last,), action_target(action, True), f"enen learns: {button.label} is a good start")
        return False

    # -------------------------------------------------------------------------
    # Puzzle 5: Composition gauntlet
    # -------------------------------------------------------------------------

    def _run_composition_trial(self) -> bool:
        s = self._state
        puzzle = PuzzleType.COMPOSITION
        gauntlet = s.gauntlet

        if gauntlet.is_complete():
            s.puzzle_complete = True
            return True

        trial = CompositionTrial.generate(s.rng, max_draws=self.config.max_rejection_draws)
        s.current_composition = trial

        chose_a = choose_a(s.learners.predict(puzzle, trial.features()))
        correct = chose_a == trial.correct_is_a

        if gauntlet.in_warmup():
            phase = f"Warmup {gauntlet.warmup_completed + 1}/{GauntletState.WARMUP_TRIALS}"
        else:
            phase = f"Scored {gauntlet.scored_completed + 1}/{GauntletState.SCORED_TRIALS}"
        self._emit(EventType.TRIAL_START, f"{phase}: {trial.describe()}")
        self._emit(EventType.CHOICE_MADE, f"enen picks {'A' if chose_a else 'B'}")
        self._emit(EventType.OUTCOME, "CORRECT!" if correct else "WRONG!", correct)

        # Warmup and scored trials both train
        self._learn(
            puzzle,
            trial.features(),
            bool_target(trial.correct_is_a),
            f"enen learns: light {'ON' if trial.light_on else 'OFF'} wanted {'A' if trial.correct_is_a else 'B'}",
        )

        gauntlet.record_outcome(correct)
        s.history.add(gauntlet.current_trials, correct, phase)
        logger.debug(f"{phase}: {'correct' if correct else 'wrong'}")

        if gauntlet.is_complete():
            s.puzzle_complete = True
            message = (
                f"GAUNTLET COMPLETE! Score: {gauntlet.correct}/{GauntletState.SCORED_TRIALS} "
                f"({gauntlet.score_percent()}%)"
            )
            logger.info(message)
            self._emit(EventType.PUZZLE_COMPLETE, message)
            return True
        return False
