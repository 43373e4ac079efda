"""Tests for EnenConfig."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from enen.config import EnenConfig, configure_logging
from enen.exceptions import ConfigurationError


class TestDefaults:
    def test_defaults(self):
        config = EnenConfig()
        assert config.to_dict() == {
            "seed": 12345,
            "max_trials_per_puzzle": 1000,
            "max_rejection_draws": 10_000,
            "history_size": 4,
            "log_level": "WARNING",
        }

    def test_log_level_normalised(self):
        assert EnenConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"seed": -1},
            {"seed": 2**32},
            {"max_trials_per_puzzle": 0},
            {"max_rejection_draws": 0},
            {"history_size": 0},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError):
            EnenConfig(**kwargs)


class TestFromEnv:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ENEN_SEED", "42")
        monkeypatch.setenv("ENEN_MAX_TRIALS", "250")
        monkeypatch.setenv("ENEN_LOG_LEVEL", "info")
        config = EnenConfig.from_env()
        assert config.seed == 42
        assert config.max_trials_per_puzzle == 250
        assert config.log_level == "INFO"

    def test_bad_number(self, monkeypatch):
        monkeypatch.setenv("ENEN_SEED", "not-a-number")
        with pytest.raises(ConfigurationError):
            EnenConfig.from_env()


class TestFromYaml:
    def test_loads_known_keys(self, tmp_path: Path):
        path = tmp_path / "enen.yaml"
        path.write_text("seed: 7\nmax_trials_per_puzzle: 300\nrenderer:\n  width: 80\n", encoding="utf-8")
        config = EnenConfig.from_yaml(path)
        assert config.seed == 7
        assert config.max_trials_per_puzzle == 300
        assert config.history_size == 4

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert EnenConfig.from_yaml(path) == EnenConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            EnenConfig.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("seed: [1, 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            EnenConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            EnenConfig.from_yaml(path)

    @pytest.mark.parametrize(
        "text,key",
        [
            ('seed: "abc"\n', "seed"),
            ("max_trials_per_puzzle: null\n", "max_trials_per_puzzle"),
            ("max_rejection_draws: 2.5\n", "max_rejection_draws"),
            ("history_size: true\n", "history_size"),
        ],
    )
    def test_wrong_value_type(self, tmp_path: Path, text, key):
        """Non-integer values are configuration errors, not TypeErrors."""
        path = tmp_path / "typed.yaml"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must be an integer") as exc_info:
            EnenConfig.from_yaml(path)
        assert exc_info.value.config_key == key


def test_configure_logging_sets_level():
    configure_logging(EnenConfig(log_level="DEBUG"))
    assert logging.getLogger("enen").level == logging.DEBUG
    configure_logging(EnenConfig())
    assert logging.getLogger("enen").level == logging.WARNING
