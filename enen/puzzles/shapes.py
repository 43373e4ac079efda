"""
Puzzle 2: Feature interaction - circles are safe, blue squares are safest.

Ranking: blue square (2) > any circle (1) > non-blue square (0).
"""

from __future__ import annotations

from dataclasses import dataclass

from enen.puzzles.sampling import MAX_REJECTION_DRAWS, redraw_until
from enen.rng import XorShift32

SQUARE = 0
CIRCLE = 127
COLOR_SPAN = 128
BLUE_LIMIT = 26  # colours 0-25 are blue

RANK_BLUE_SQUARE = 2
RANK_CIRCLE = 1
RANK_SQUARE = 0


def is_circle(shape: int) -> bool:
    return shape > 64


def is_blue(color: int) -> bool:
    return color < BLUE_LIMIT


def rank(color: int, shape: int) -> int:
    """Rank an option; higher is safer."""
    if is_circle(shape):
        return RANK_CIRCLE
    if is_blue(color):
        return RANK_BLUE_SQUARE
    return RANK_SQUARE


def shape_name(shape: int) -> str:
    return "circle" if is_circle(shape) else "square"


def color_name(color: int) -> str:
    if color < 26:
        return "blue"
    if color < 52:
        return "green"
    if color < 78:
        return "yellow"
    if color < 104:
        return "red"
    return "purple"


def _draw_shape(rng: XorShift32) -> int:
    return CIRCLE if rng.coin() else SQUARE


@dataclass(frozen=True)
class ShapeTrial:
    """One ranking trial. The higher-ranked option is correct; ranks never tie."""

    color_a: int
    shape_a: int
    color_b: int
    shape_b: int
    correct_is_a: bool

    @classmethod
    def generate(
        cls,
        rng: XorShift32,
        adversarial: bool = False,
        max_draws: int = MAX_REJECTION_DRAWS,
    ) -> ShapeTrial:
        if adversarial:
            return cls.generate_adversarial(rng)

        shape_a = _draw_shape(rng)
        shape_b = _draw_shape(rng)
        color_a = rng.randrange(COLOR_SPAN)
        color_b = rng.randrange(COLOR_SPAN)
        rank_a = rank(color_a, shape_a)

        def redraw_b() -> tuple[int, int]:
            color = rng.randrange(COLOR_SPAN)
            return color, _draw_shape(rng)

        color_b, shape_b = redraw_until(
            (color_b, shape_b),
            lambda option: rank(*option) != rank_a,
            redraw_b,
            trial_kind="ranking",
            max_draws=max_draws,
        )
        return cls(
            color_a=color_a,
            shape_a=shape_a,
            color_b=color_b,
            shape_b=shape_b,
            correct_is_a=rank_a > rank(color_b, shape_b),
        )

    @classmethod
    def generate_adversarial(cls, rng: XorShift32) -> ShapeTrial:
        """Blue square against a bright circle; circles usually win, not here."""
        color_a = 5 + rng.randrange(20)   # blue 5-24
        color_b = 80 + rng.randrange(48)  # bright non-blue
        return cls(
            color_a=color_a,
            shape_a=SQUARE,
            color_b=color_b,
            shape_b=CIRCLE,
            correct_is_a=True,
        )

    @property
    def rank_a(self) -> int:
        return rank(self.color_a, self.shape_a)

    @property
    def rank_b(self) -> int:
        return rank(self.color_b, self.shape_b)

    def features(self) -> tuple[int, int, int, int]:
        return (self.color_a, self.shape_a, self.color_b, self.shape_b)

    def option(self, choose_a: bool) -> tuple[int, int]:
        """(color, shape) of the chosen option."""
        return (self.color_a, self.shape_a) if choose_a else (self.color_b, self.shape_b)

    def describe(self) -> str:
        return (
            f"{color_name(self.color_a)} {shape_name(self.shape_a)} vs "
            f"{color_name(self.color_b)} {shape_name(self.shape_b)}"
        )
