"""Tests for environment driven settings."""
from __future__ import annotations

import pytest

from statement_engine.core.config import GenerationTuning, Settings, get_settings
from statement_engine.exceptions import ConfigurationError

ENV_NAMES = (
    "STATEMENT_EXTRA_CREDIT_PROBABILITY",
    "STATEMENT_RESAMPLE_ATTEMPTS",
    "STATEMENT_NEGATIVE_BUFFER",
    "STATEMENT_DAY_START_HOUR",
    "STATEMENT_DAY_END_HOUR",
    "STATEMENT_LOG_LEVEL",
    "STATEMENT_LOG_DIR",
    "STATEMENT_DEFAULT_SEED",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_match_tuning_defaults() -> None:
    settings = Settings.from_env()

    assert settings.tuning == GenerationTuning()
    assert settings.tuning.extra_credit_probability == 0.3
    assert settings.tuning.negative_balance_buffer == 5000
    assert settings.logging.level == "INFO"
    assert settings.logging.directory is None
    assert settings.default_seed == 42


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("STATEMENT_EXTRA_CREDIT_PROBABILITY", "0.5")
    monkeypatch.setenv("STATEMENT_RESAMPLE_ATTEMPTS", "4")
    monkeypatch.setenv("STATEMENT_LOG_LEVEL", "debug")
    monkeypatch.setenv("STATEMENT_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("STATEMENT_DEFAULT_SEED", "7")

    settings = get_settings()

    assert settings.tuning.extra_credit_probability == 0.5
    assert settings.tuning.resample_attempts == 4
    assert settings.logging.level == "DEBUG"
    assert settings.logging.directory == tmp_path
    assert settings.default_seed == 7
    assert get_settings() is settings


@pytest.mark.parametrize(
    "name, value",
    [
        ("STATEMENT_EXTRA_CREDIT_PROBABILITY", "often"),
        ("STATEMENT_EXTRA_CREDIT_PROBABILITY", "1.5"),
        ("STATEMENT_RESAMPLE_ATTEMPTS", "ten"),
        ("STATEMENT_DAY_START_HOUR", "22"),
    ],
)
def test_malformed_values_raise(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError) as excinfo:
        Settings.from_env()
    assert excinfo.value.name in (name, "STATEMENT_DAY_START_HOUR")
