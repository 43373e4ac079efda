"""enen configuration management."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml  # type: ignore

from enen.exceptions import ConfigurationError
from enen.history import MAX_ENTRIES
from enen.puzzles.sampling import MAX_REJECTION_DRAWS
from enen.rng import DEFAULT_SEED, MASK_32

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EnenConfig:
    """Configuration for a game run."""

    # Reproducibility
    seed: int = DEFAULT_SEED

    # Batch-run safety valve (trials before a puzzle counts as not converging)
    max_trials_per_puzzle: int = 1000

    # Cap on redraws inside a generator's rejection loop
    max_rejection_draws: int = MAX_REJECTION_DRAWS

    # Display
    history_size: int = MAX_ENTRIES

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.log_level = str(self.log_level).upper()
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError on the first invalid value."""
        for key in ("seed", "max_trials_per_puzzle", "max_rejection_draws", "history_size"):
            value = getattr(self, key)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(
                    f"{key} must be an integer, got {type(value).__name__}: {value!r}",
                    config_key=key,
                )
        if not 0 <= self.seed <= MASK_32:
            raise ConfigurationError(f"seed must fit in 32 bits, got {self.seed}", config_key="seed")
        for key in ("max_trials_per_puzzle", "max_rejection_draws", "history_size"):
            if getattr(self, key) < 1:
                raise ConfigurationError(f"{key} must be positive, got {getattr(self, key)}", config_key=key)
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}. Valid levels: {', '.join(LOG_LEVELS)}",
                config_key="log_level",
            )

    @classmethod
    def from_env(cls) -> EnenConfig:
        """Load configuration from environment variables."""
        try:
            return cls(
                seed=int(os.getenv("ENEN_SEED", str(DEFAULT_SEED))),
                max_trials_per_puzzle=int(os.getenv("ENEN_MAX_TRIALS", "1000")),
                max_rejection_draws=int(os.getenv("ENEN_MAX_REJECTION_DRAWS", str(MAX_REJECTION_DRAWS))),
                history_size=int(os.getenv("ENEN_HISTORY_SIZE", str(MAX_ENTRIES))),
                log_level=os.getenv("ENEN_LOG_LEVEL", "WARNING"),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric environment value: {e}", cause=e)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> EnenConfig:
        """
        Load configuration from a YAML mapping.

        Unknown keys are ignored so a shared file can carry other sections.

        Raises:
            ConfigurationError: If the file is missing, unparsable or not a mapping.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file: {path}", cause=e)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file: {path}", cause=e)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")

        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            "seed": self.seed,
            "max_trials_per_puzzle": self.max_trials_per_puzzle,
            "max_rejection_draws": self.max_rejection_draws,
            "history_size": self.history_size,
            "log_level": self.log_level,
        }


def configure_logging(config: Optional[EnenConfig] = None) -> None:
    """Apply the configured level to the ``enen`` logger hierarchy."""
    config = config or EnenConfig()
    logging.basicConfig(format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logging.getLogger("enen").setLevel(config.log_level)
