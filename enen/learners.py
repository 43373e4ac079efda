"""
Learner boundary.

The engine never trains anything itself. Each puzzle is handed to a learner
that satisfies the Learner protocol; the engine only encodes inputs, reads
outputs and decides what to teach next.

Encoding:
    Inputs are small magnitudes (0-127) doubled into the learner's 0-255
    range. A single boolean output is true when it is above 128, the
    midpoint of that range. Boolean targets are 255 (true) and 0 (false).
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Callable, Iterable, Protocol, Sequence, Union

from enen.exceptions import ConfigurationError, LearnerError
from enen.models import PuzzleType

U8_MAX = 255
BOOL_THRESHOLD = 128
TARGET_TRUE = U8_MAX
TARGET_FALSE = 0


class Learner(Protocol):
    """Protocol for a per-puzzle learner."""

    def predict(self, inputs: Sequence[int]) -> Sequence[int]:
        """Outputs for ``inputs`` without changing the learner."""
        ...

    def learn(self, inputs: Sequence[int], target: Sequence[int]) -> None:
        """Shift future predictions for ``inputs`` toward ``target``."""
        ...

    def reset(self, seed: int) -> None:
        """Reinitialise to random weights and drop training history."""
        ...

    def parameter_count(self) -> int:
        ...

    def model_size_bytes(self) -> int:
        ...


@dataclass(frozen=True)
class LearnerShape:
    """Input/output width a puzzle expects from its learner."""

    puzzle: PuzzleType
    inputs: int
    outputs: int
    hidden: tuple[int, ...] = ()

    @property
    def layout(self) -> str:
        return "->".join(str(n) for n in (self.inputs, *self.hidden, self.outputs))


LEARNER_SHAPES: dict[PuzzleType, LearnerShape] = {
    PuzzleType.GENERALIZATION: LearnerShape(PuzzleType.GENERALIZATION, 4, 1, (8,)),
    PuzzleType.FEATURE_SELECTION: LearnerShape(PuzzleType.FEATURE_SELECTION, 4, 1, (8,)),
    PuzzleType.XOR_CONTEXT: LearnerShape(PuzzleType.XOR_CONTEXT, 2, 1, (4,)),
    PuzzleType.SEQUENCE: LearnerShape(PuzzleType.SEQUENCE, 1, 2, (4,)),
    PuzzleType.COMPOSITION: LearnerShape(PuzzleType.COMPOSITION, 3, 1, (8, 4)),
}


def scale_to_u8(value: int) -> int:
    """Map a 0-127 magnitude onto 0-255, clamped."""
    return min(max(value * 2, 0), U8_MAX)


def encode_inputs(values: Iterable[int]) -> list[int]:
    return [scale_to_u8(v) for v in values]


def interpret_bool(output: int) -> bool:
    return output > BOOL_THRESHOLD


def bool_target(value: bool) -> list[int]:
    return [TARGET_TRUE if value else TARGET_FALSE]


def action_target(action: int, success: bool) -> list[int]:
    """
    Two-score target for the sequence learner.

    Success reinforces the chosen action; failure reinforces the other one.
    """
    reinforced = action if success else 1 - action
    return [TARGET_TRUE if i == reinforced else TARGET_FALSE for i in range(2)]


LearnerFactory = Callable[[LearnerShape], Learner]


class LearnerTable:
    """One learner per puzzle, looked up by PuzzleType."""

    def __init__(self, learners: Mapping[PuzzleType, Learner]):
        missing = [p.value for p in PuzzleType if p not in learners]
        if missing:
            raise ConfigurationError(
                f"No learner configured for: {', '.join(missing)}",
                config_key="learners",
            )
        self._learners = dict(learners)

    @classmethod
    def from_factory(cls, factory: LearnerFactory) -> LearnerTable:
        """Build a table by calling ``factory`` once per puzzle shape."""
        return cls({puzzle: factory(shape) for puzzle, shape in LEARNER_SHAPES.items()})

    @classmethod
    def coerce(cls, learners: Union[LearnerTable, Mapping[PuzzleType, Learner], LearnerFactory]) -> LearnerTable:
        if isinstance(learners, LearnerTable):
            return learners
        if isinstance(learners, Mapping):
            return cls(learners)
        if callable(learners):
            return cls.from_factory(learners)
        raise ConfigurationError(
            f"Unsupported learners argument: {type(learners).__name__}",
            config_key="learners",
        )

    def __getitem__(self, puzzle: PuzzleType) -> Learner:
        return self._learners[puzzle]

    def __iter__(self):
        return iter(self._learners.items())

    def predict(self, puzzle: PuzzleType, features: Iterable[int]) -> list[int]:
        """Encode ``features`` and query the puzzle's learner."""
        shape = LEARNER_SHAPES[puzzle]
        outputs = list(self._learners[puzzle].predict(encode_inputs(features)))
        if len(outputs) < shape.outputs:
            raise LearnerError(
                f"{puzzle.title} learner returned {len(outputs)} outputs, expected {shape.outputs}",
                puzzle=puzzle.value,
                outputs=outputs,
            )
        return outputs

    def learn(self, puzzle: PuzzleType, features: Iterable[int], target: Sequence[int]) -> None:
        self._learners[puzzle].learn(encode_inputs(features), list(target))

    def reset(self, puzzle: PuzzleType, seed: int) -> None:
        self._learners[puzzle].reset(seed)

    def total_model_bytes(self) -> int:
        return sum(learner.model_size_bytes() for _, learner in self)

    def total_parameters(self) -> int:
        return sum(learner.parameter_count() for _, learner in self)


LearnersArg = Union[LearnerTable, Mapping[PuzzleType, Learner], LearnerFactory]


def choose_a(outputs: Sequence[int]) -> bool:
    return interpret_bool(outputs[0])


def choose_action(outputs: Sequence[int]) -> int:
    """0 (A) or 1 (B); A wins ties."""
    return 0 if outputs[0] >= outputs[1] else 1
