"""Tests for event observers, event records and trial history."""

from __future__ import annotations

import json
import logging

from enen.events import EventRecorder, fan_out, logging_observer
from enen.history import TrialHistory
from enen.models import EventType, GameEvent, PuzzleType


class TestGameEvent:
    def test_to_dict(self):
        event = GameEvent(EventType.OUTCOME, "CORRECT!", True, PuzzleType.XOR_CONTEXT)
        assert event.to_dict() == {
            "type": "outcome",
            "message": "CORRECT!",
            "success": True,
            "puzzle": "xor_context",
        }
        assert json.loads(event.to_json())["puzzle"] == "xor_context"


class TestObservers:
    def test_recorder_filters(self):
        recorder = EventRecorder()
        recorder(GameEvent(EventType.TRIAL_START, "go", puzzle=PuzzleType.SEQUENCE))
        recorder(GameEvent(EventType.OUTCOME, "ok", True, PuzzleType.SEQUENCE))
        recorder(GameEvent(EventType.OUTCOME, "no", False, PuzzleType.COMPOSITION))
        assert len(recorder) == 3
        assert recorder.outcomes() == [True, False]
        assert len(recorder.for_puzzle(PuzzleType.SEQUENCE)) == 2
        recorder.clear()
        assert len(recorder) == 0

    def test_fan_out_preserves_order(self):
        seen = []
        observe = fan_out(lambda e: seen.append(("first", e.message)), lambda e: seen.append(("second", e.message)))
        observe(GameEvent(EventType.LEARNING, "a"))
        observe(GameEvent(EventType.LEARNING, "b"))
        assert seen == [("first", "a"), ("second", "a"), ("first", "b"), ("second", "b")]

    def test_logging_observer(self, caplog):
        logger = logging.getLogger("enen.test_events")
        observe = logging_observer(logger)
        with caplog.at_level(logging.INFO, logger="enen.test_events"):
            observe(GameEvent(EventType.OUTCOME, "WRONG!", False, PuzzleType.GENERALIZATION))
            observe(GameEvent(EventType.CHOICE_MADE, "enen picks A", puzzle=PuzzleType.GENERALIZATION))
        assert [r.levelno for r in caplog.records] == [logging.WARNING, logging.INFO]
        assert "[puzzle 1] outcome: WRONG!" in caplog.records[0].getMessage()


class TestTrialHistory:
    def test_keeps_last_entries(self):
        history = TrialHistory(max_entries=4)
        for i in range(1, 7):
            history.add(i, i % 2 == 0, f"trial {i}")
        assert [e.trial_number for e in history.entries] == [3, 4, 5, 6]
        assert [e.trial_number for e in history.most_recent_first()] == [6, 5, 4, 3]

    def test_render_and_clear(self):
        history = TrialHistory()
        entry = history.add(1, False, "red(40) vs blue(100)")
        assert entry.render() == "Trial 1: [X] red(40) vs blue(100)"
        assert history
        history.clear()
        assert not history
