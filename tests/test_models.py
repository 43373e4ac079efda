"""Tests for PuzzleType ordering helpers."""

from __future__ import annotations

import pytest

from enen.models import NUM_PUZZLES, PuzzleType


class TestPuzzleType:
    def test_order_and_numbers(self):
        assert [p.number for p in PuzzleType] == [1, 2, 3, 4, 5]
        assert NUM_PUZZLES == 5

    def test_next_puzzle(self):
        assert PuzzleType.GENERALIZATION.next_puzzle() is PuzzleType.FEATURE_SELECTION
        assert PuzzleType.COMPOSITION.next_puzzle() is None

    def test_protocol_flags(self):
        assert [p for p in PuzzleType if p.uses_gauntlet] == [PuzzleType.COMPOSITION]
        assert [p for p in PuzzleType if p.has_adversarial_opening] == [
            PuzzleType.GENERALIZATION,
            PuzzleType.FEATURE_SELECTION,
        ]

    def test_from_string(self):
        assert PuzzleType.from_string("XOR_CONTEXT") is PuzzleType.XOR_CONTEXT
        assert PuzzleType.from_string("4") is PuzzleType.SEQUENCE
        with pytest.raises(ValueError):
            PuzzleType.from_string("6")
        with pytest.raises(ValueError):
            PuzzleType.from_string("maze")

    def test_display(self):
        assert PuzzleType.SEQUENCE.display == "Puzzle 4: Sequence"
