"""
Puzzle 1: Generalization - mushroom size comparison.

Two mushrooms, each with a size and a colour. The larger one is safe;
colour is noise the learner has to learn to ignore.
"""

from __future__ import annotations

from dataclasses import dataclass

from enen.puzzles.sampling import MAX_REJECTION_DRAWS, redraw_until
from enen.rng import XorShift32

MIN_SIZE = 32
SIZE_SPAN = 96  # sizes 32-127
COLOR_SPAN = 128
MIN_SIZE_GAP = 20

# Colour bands are 16 wide across 0-127
COLOR_NAMES = ("red", "orange", "yellow", "green", "cyan", "blue", "purple", "pink")


def draw_size(rng: XorShift32) -> int:
    return MIN_SIZE + rng.randrange(SIZE_SPAN)


def draw_distinct_sizes(rng: XorShift32, max_draws: int = MAX_REJECTION_DRAWS) -> tuple[int, int]:
    """Draw two sizes at least ``MIN_SIZE_GAP`` apart, redrawing the second."""
    size_a = draw_size(rng)
    size_b = redraw_until(
        draw_size(rng),
        lambda b: abs(size_a - b) >= MIN_SIZE_GAP,
        lambda: draw_size(rng),
        trial_kind="size comparison",
        max_draws=max_draws,
    )
    return size_a, size_b


@dataclass(frozen=True)
class SizeTrial:
    """One size-comparison trial. Larger mushroom is correct."""

    size_a: int
    size_b: int
    color_a: int
    color_b: int
    correct_is_a: bool

    @classmethod
    def generate(
        cls,
        rng: XorShift32,
        adversarial: bool = False,
        max_draws: int = MAX_REJECTION_DRAWS,
    ) -> SizeTrial:
        if adversarial:
            return cls.generate_adversarial(rng)

        size_a, size_b = draw_distinct_sizes(rng, max_draws)
        color_a = rng.randrange(COLOR_SPAN)
        color_b = rng.randrange(COLOR_SPAN)
        return cls(
            size_a=size_a,
            size_b=size_b,
            color_a=color_a,
            color_b=color_b,
            correct_is_a=size_a > size_b,
        )

    @classmethod
    def generate_adversarial(cls, rng: XorShift32) -> SizeTrial:
        """
        Large dull mushroom against a small bright one.

        A policy that mixes colour into its decision picks the bright
        mushroom; the large one on the left is always correct.
        """
        return cls(
            size_a=90 + rng.randrange(38),   # 90-127
            size_b=32 + rng.randrange(38),   # 32-69
            color_a=10 + rng.randrange(30),  # 10-39
            color_b=90 + rng.randrange(38),  # 90-127
            correct_is_a=True,
        )

    def features(self) -> tuple[int, int, int, int]:
        return (self.size_a, self.size_b, self.color_a, self.color_b)

    @staticmethod
    def color_name(color: int) -> str:
        index = min(max(color, 0) // 16, len(COLOR_NAMES) - 1)
        return COLOR_NAMES[index]

    def describe(self) -> str:
        return (
            f"{self.color_name(self.color_a)}({self.size_a}) vs "
            f"{self.color_name(self.color_b)}({self.size_b})"
        )
