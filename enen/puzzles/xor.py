"""Puzzle 3: XOR - the light decides which path is safe."""

from __future__ import annotations

from dataclasses import dataclass

from enen.rng import XorShift32

ON = 127
OFF = 0


@dataclass(frozen=True)
class XorTrial:
    light_on: bool
    choosing_right: bool
    is_safe: bool

    @classmethod
    def generate(cls, rng: XorShift32) -> XorTrial:
        light_on = rng.coin()
        choosing_right = rng.coin()
        # Safe when the two differ
        return cls(light_on=light_on, choosing_right=choosing_right, is_safe=light_on != choosing_right)

    def light_input(self) -> int:
        return ON if self.light_on else OFF

    def path_input(self) -> int:
        return ON if self.choosing_right else OFF

    def features(self) -> tuple[int, int]:
        return (self.light_input(), self.path_input())

    def describe(self) -> str:
        return (
            f"Light is {'ON' if self.light_on else 'OFF'}, "
            f"path is {'RIGHT' if self.choosing_right else 'LEFT'}"
        )
