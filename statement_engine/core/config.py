"""Configuration for the statement engine, loaded from the environment."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..exceptions import ConfigurationError

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True, slots=True)
class GenerationTuning:
    """Heuristic thresholds used while placing transactions.

    The defaults reproduce the behaviour of the mobile generator. They are
    tuning knobs rather than derived constants, so every one of them can be
    overridden from the environment.
    """

    extra_credit_probability: float = 0.3
    salary_blackout_before_days: int = 3
    salary_blackout_after_days: int = 1
    cash_deposit_blackout_before_days: int = 5
    cash_deposit_blackout_after_days: int = 1
    resample_attempts: int = 10
    negative_balance_buffer: int = 5000
    closing_epsilon: str = "0"
    day_start_hour: int = 9
    day_end_hour: int = 21


@dataclass(frozen=True, slots=True)
class LogSettings:
    """Logging options read by the CLI."""

    level: str = "INFO"
    directory: Optional[Path] = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Top-level configuration container."""

    tuning: GenerationTuning = field(default_factory=GenerationTuning)
    logging: LogSettings = field(default_factory=LogSettings)
    default_seed: int = 42

    @classmethod
    def from_env(cls) -> "Settings":
        """Load configuration values from environment variables."""

        defaults = GenerationTuning()

        def _get_env(name: str, default: str) -> str:
            return os.getenv(name, default)

        def _int(name: str, default: int) -> int:
            raw = _get_env(name, str(default)).strip()
            try:
                return int(raw)
            except ValueError:
                raise ConfigurationError(name, raw, "integer") from None

        def _probability(name: str, default: float) -> float:
            raw = _get_env(name, str(default)).strip()
            try:
                value = float(raw)
            except ValueError:
                raise ConfigurationError(name, raw, "probability") from None
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(name, raw, "probability")
            return value

        tuning = GenerationTuning(
            extra_credit_probability=_probability(
                "STATEMENT_EXTRA_CREDIT_PROBABILITY", defaults.extra_credit_probability
            ),
            salary_blackout_before_days=_int(
                "STATEMENT_SALARY_BLACKOUT_BEFORE", defaults.salary_blackout_before_days
            ),
            salary_blackout_after_days=_int(
                "STATEMENT_SALARY_BLACKOUT_AFTER", defaults.salary_blackout_after_days
            ),
            cash_deposit_blackout_before_days=_int(
                "STATEMENT_CASH_BLACKOUT_BEFORE", defaults.cash_deposit_blackout_before_days
            ),
            cash_deposit_blackout_after_days=_int(
                "STATEMENT_CASH_BLACKOUT_AFTER", defaults.cash_deposit_blackout_after_days
            ),
            resample_attempts=_int("STATEMENT_RESAMPLE_ATTEMPTS", defaults.resample_attempts),
            negative_balance_buffer=_int(
                "STATEMENT_NEGATIVE_BUFFER", defaults.negative_balance_buffer
            ),
            day_start_hour=_int("STATEMENT_DAY_START_HOUR", defaults.day_start_hour),
            day_end_hour=_int("STATEMENT_DAY_END_HOUR", defaults.day_end_hour),
        )
        if not 0 <= tuning.day_start_hour < tuning.day_end_hour <= 24:
            raise ConfigurationError(
                "STATEMENT_DAY_START_HOUR",
                f"{tuning.day_start_hour}-{tuning.day_end_hour}",
                "daytime window",
            )

        log_dir = _get_env("STATEMENT_LOG_DIR", "").strip()
        log_settings = LogSettings(
            level=_get_env("STATEMENT_LOG_LEVEL", "INFO").upper(),
            directory=Path(log_dir) if log_dir else None,
        )
        return cls(
            tuning=tuning,
            logging=log_settings,
            default_seed=_int("STATEMENT_DEFAULT_SEED", 42),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    settings = Settings.from_env()

    # Import locally to avoid circular dependencies during module import time.
    from .log import get_logger

    logger = get_logger(__name__)
    logger.debug(
        "Settings initialised",
        extra={
            "tuning": {
                "extra_credit_probability": settings.tuning.extra_credit_probability,
                "resample_attempts": settings.tuning.resample_attempts,
                "negative_balance_buffer": settings.tuning.negative_balance_buffer,
            },
            "log_level": settings.logging.level,
        },
    )
    return settings
