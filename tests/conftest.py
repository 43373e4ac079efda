"""Pytest fixtures for enen tests."""

from __future__ import annotations

from typing import Sequence

import pytest

from enen.events import EventRecorder
from enen.learners import LearnerShape
from enen.rng import XorShift32


class MemoryLearner:
    """
    Replays the closest remembered example.

    Predicts the target of the stored input nearest (L1) to the query,
    preferring the most recent on ties. Good enough to converge on every
    puzzle without any numeric training.
    """

    def __init__(self, shape: LearnerShape):
        self.shape = shape
        self.history: list[tuple[list[int], list[int]]] = []
        self.learn_calls = 0
        self.reset_seeds: list[int] = []

    def predict(self, inputs: Sequence[int]) -> list[int]:
        if not self.history:
            return [0] * self.shape.outputs
        nearest = min(
            reversed(self.history),
            key=lambda sample: sum(abs(a - b) for a, b in zip(sample[0], inputs)),
        )
        return list(nearest[1])

    def learn(self, inputs: Sequence[int], target: Sequence[int]) -> None:
        self.learn_calls += 1
        self.history.append((list(inputs), list(target)))

    def reset(self, seed: int) -> None:
        self.reset_seeds.append(seed)
        self.history.clear()

    def parameter_count(self) -> int:
        return self.shape.inputs * self.shape.outputs

    def model_size_bytes(self) -> int:
        return self.parameter_count()


class ConstantLearner:
    """Always gives the same outputs and never changes."""

    def __init__(self, shape: LearnerShape, value: int = 0):
        self.shape = shape
        self.value = value
        self.seen: list[tuple[list[int], list[int]]] = []

    def predict(self, inputs: Sequence[int]) -> list[int]:
        return [self.value] * self.shape.outputs

    def learn(self, inputs: Sequence[int], target: Sequence[int]) -> None:
        self.seen.append((list(inputs), list(target)))

    def reset(self, seed: int) -> None:
        self.seen.clear()

    def parameter_count(self) -> int:
        return 0

    def model_size_bytes(self) -> int:
        return 0


class StuckRNG(XorShift32):
    """RNG that only ever returns zero, so every rejection loop spins."""

    def next(self) -> int:
        return 0


@pytest.fixture
def recorder() -> EventRecorder:
    """Fresh in-memory event recorder."""
    return EventRecorder()


@pytest.fixture
def stuck_rng() -> XorShift32:
    return StuckRNG(1)


@pytest.fixture
def memory_factory():
    """Factory building one MemoryLearner per puzzle shape."""
    return MemoryLearner


@pytest.fixture
def constant_factory():
    """Factory building one ConstantLearner per puzzle shape."""
    return ConstantLearner
