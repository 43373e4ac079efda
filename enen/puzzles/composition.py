"""
Puzzle 5: Composition - light-gated size comparison.

Light ON: pick the larger mushroom. Light OFF: pick the smaller one.
"""

from __future__ import annotations

from dataclasses import dataclass

from enen.puzzles.mushroom import draw_distinct_sizes
from enen.puzzles.sampling import MAX_REJECTION_DRAWS
from enen.puzzles.xor import OFF, ON
from enen.rng import XorShift32


@dataclass(frozen=True)
class CompositionTrial:
    light_on: bool
    size_a: int
    size_b: int
    correct_is_a: bool

    @classmethod
    def generate(cls, rng: XorShift32, max_draws: int = MAX_REJECTION_DRAWS) -> CompositionTrial:
        light_on = rng.coin()
        size_a, size_b = draw_distinct_sizes(rng, max_draws)
        a_is_larger = size_a > size_b
        return cls(
            light_on=light_on,
            size_a=size_a,
            size_b=size_b,
            correct_is_a=a_is_larger if light_on else not a_is_larger,
        )

    def light_input(self) -> int:
        return ON if self.light_on else OFF

    def features(self) -> tuple[int, int, int]:
        return (self.light_input(), self.size_a, self.size_b)

    def describe(self) -> str:
        return f"Light {'ON' if self.light_on else 'OFF'}, sizes {self.size_a} vs {self.size_b}"
