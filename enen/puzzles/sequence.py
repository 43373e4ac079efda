"""Puzzle 4: Sequence - press A, then B, to open the door."""

from __future__ import annotations

from enum import Enum


class Button(Enum):
    FIRST = 0   # A
    SECOND = 1  # B

    @property
    def label(self) -> str:
        return "A" if self is Button.FIRST else "B"


class SequenceState(Enum):
    START = "start"
    PRESSED_FIRST = "pressed_first"
    SUCCESS = "success"
    FAIL = "fail"

    @property
    def is_terminal(self) -> bool:
        return self in (SequenceState.SUCCESS, SequenceState.FAIL)


# Learner input for each state; START and FAIL both read as "nothing pressed"
LAST_ACTION_NONE = 0
LAST_ACTION_FIRST = 64


class SequencePuzzle:
    """Two-step automaton. SUCCESS and FAIL hold until ``reset()``."""

    def __init__(self) -> None:
        self.state = SequenceState.START

    def press(self, button: Button) -> bool:
        """
        Apply one button press.

        Returns:
            True if the press was valid (progress or success), False on a
            wrong press or when the attempt is already resolved.
        """
        if self.state is SequenceState.START:
            if button is Button.FIRST:
                self.state = SequenceState.PRESSED_FIRST
                return True
            self.state = SequenceState.FAIL
            return False

        if self.state is SequenceState.PRESSED_FIRST:
            if button is Button.SECOND:
                self.state = SequenceState.SUCCESS
                return True
            self.state = SequenceState.FAIL
            return False

        return False

    def is_success(self) -> bool:
        return self.state is SequenceState.SUCCESS

    def is_fail(self) -> bool:
        return self.state is SequenceState.FAIL

    def in_progress(self) -> bool:
        return self.state is SequenceState.PRESSED_FIRST

    def reset(self) -> None:
        self.state = SequenceState.START

    def last_action_input(self) -> int:
        if self.state is SequenceState.PRESSED_FIRST:
            return LAST_ACTION_FIRST
        return LAST_ACTION_NONE
