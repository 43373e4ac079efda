"""Bounded rejection sampling used by the trial generators."""

from __future__ import annotations

from typing import Callable, TypeVar

from enen.exceptions import GenerationError

T = TypeVar("T")

MAX_REJECTION_DRAWS = 10_000


def redraw_until(
    value: T,
    accept: Callable[[T], bool],
    redraw: Callable[[], T],
    trial_kind: str,
    max_draws: int = MAX_REJECTION_DRAWS,
) -> T:
    """
    Redraw ``value`` until ``accept(value)`` holds.

    Args:
        value: The first draw.
        accept: Constraint the returned value must satisfy.
        redraw: Produces a fresh candidate from the caller's RNG.
        trial_kind: Name used in the error if the cap is hit.
        max_draws: Maximum number of redraws before giving up.

    Returns:
        The first accepted value.

    Raises:
        GenerationError: If no accepted value appears within ``max_draws``.
    """
    draws = 0
    while not accept(value):
        if draws >= max_draws:
            raise GenerationError(trial_kind, max_draws)
        value = redraw()
        draws += 1
    return value
