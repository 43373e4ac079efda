"""Custom exceptions for the enen puzzle engine."""

from __future__ import annotations

from typing import Optional


class EnenError(Exception):
    """Base exception for all enen errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class GenerationError(EnenError):
    """Raised when a rejection loop runs past its draw cap."""

    def __init__(self, trial_kind: str, max_draws: int):
        self.trial_kind = trial_kind
        self.max_draws = max_draws
        super().__init__(
            f"{trial_kind} generation gave up after {max_draws} rejected draws",
            {"trial_kind": trial_kind, "max_draws": max_draws},
        )


class ConfigurationError(EnenError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None, cause: Optional[Exception] = None):
        self.config_key = config_key
        self.cause = cause
        details = {"config_key": config_key}
        if cause:
            details["cause"] = str(cause)
        super().__init__(message, details)


class LearnerError(EnenError):
    """Raised when a learner returns something the engine cannot interpret."""

    def __init__(self, message: str, puzzle: Optional[str] = None, outputs: Optional[list] = None):
        self.puzzle = puzzle
        self.outputs = outputs
        super().__init__(message, {"puzzle": puzzle, "outputs": outputs})
