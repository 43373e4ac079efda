"""Deterministic xorshift32 generator shared by every trial generator."""

from __future__ import annotations

MASK_32 = 0xFFFFFFFF
DEFAULT_SEED = 12345


class XorShift32:
    """Small reproducible RNG (Marsaglia xorshift, 13/17/5 triple)."""

    __slots__ = ("state",)

    def __init__(self, seed: int = DEFAULT_SEED):
        self.state = seed & MASK_32

    def next(self) -> int:
        x = self.state
        x ^= (x << 13) & MASK_32
        x ^= x >> 17
        x ^= (x << 5) & MASK_32
        self.state = x
        return x

    def randrange(self, n: int) -> int:
        """Draw in ``[0, n)`` by modulo, matching the generators' ranges."""
        return self.next() % n

    def coin(self) -> bool:
        return self.next() % 2 == 1

    def __repr__(self) -> str:
        return f"XorShift32(state={self.state:#010x})"
