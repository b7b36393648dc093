"""Engine-wide logging utilities with rich console output."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from datetime import datetime, date
from pathlib import Path
from threading import RLock
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from .context import ContextFilter, log_context
from .timing import timeit

if TYPE_CHECKING:
    from ..config import LogSettings

__all__ = [
    "LoggingConfig",
    "init_logging",
    "get_logger",
    "shutdown_logging",
    "log_context",
    "timeit",
]


@dataclass
class LoggingConfig:
    """Runtime configuration for the logging subsystem."""

    app_name: str = "statement_engine"
    level: str | int = "INFO"
    log_dir: Optional[Path] = None
    console: bool = True
    rich_tracebacks: bool = False

    @classmethod
    def from_settings(cls, settings: "LogSettings", **overrides: object) -> "LoggingConfig":
        """Build a config from ``STATEMENT_LOG_*`` settings; keyword overrides win."""

        values: dict[str, object] = {"level": settings.level, "log_dir": settings.directory}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)  # type: ignore[arg-type]


_config_lock = RLock()
_config: LoggingConfig | None = None
_context_filter = ContextFilter()


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


class DailyFileHandler(logging.FileHandler):
    """Append to one ``<prefix>_<date>.log`` file per day, switching at midnight."""

    def __init__(
        self,
        directory: Path,
        *,
        prefix: str = "statement_engine",
        encoding: str = "utf-8",
        date_format: str = "%Y_%m_%d",
    ) -> None:
        self.directory = directory
        self.prefix = prefix
        self.date_format = date_format
        self.directory.mkdir(parents=True, exist_ok=True)
        self._current_date: date = datetime.now().date()
        super().__init__(
            self._path_for_date(self._current_date),
            mode="a",
            encoding=encoding,
        )

    def _path_for_date(self, target_date: date) -> Path:
        return self.directory / f"{self.prefix}_{target_date.strftime(self.date_format)}.log"

    def _switch_file(self) -> None:
        if self.stream:
            try:
                self.stream.flush()
            finally:
                self.stream.close()
        self.baseFilename = os.fspath(self._path_for_date(self._current_date))
        self.stream = self._open()

    def emit(self, record: logging.LogRecord) -> None:
        record_date = datetime.fromtimestamp(record.created).date()
        if record_date != self._current_date:
            self._current_date = record_date
            self._switch_file()
        super().emit(record)


def _build_handlers(cfg: LoggingConfig, level: int) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if cfg.rich_tracebacks:
        install_rich_traceback(show_locals=False)

    if cfg.console:
        rich_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=cfg.rich_tracebacks,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="%Y-%m-%d %H:%M:%S",
        )
        rich_handler.setLevel(level)
        rich_handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
        rich_handler.addFilter(_context_filter)
        handlers.append(rich_handler)

    if cfg.log_dir:
        file_handler = DailyFileHandler(Path(cfg.log_dir), prefix=cfg.app_name)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler.addFilter(_context_filter)
        handlers.append(file_handler)

    return handlers


def init_logging(config: Optional[LoggingConfig] = None, **kwargs: object) -> None:
    """Initialise the shared logging configuration.

    ``config`` supplies the base options (see :meth:`LoggingConfig.from_settings`);
    keyword arguments override individual fields.

    The function is idempotent; repeated calls reuse the existing configuration
    unless explicit keyword arguments request a different log level or other
    options. Handlers are attached to the ``statement_engine`` logger rather
    than the root logger so host applications keep control of their own
    logging tree.
    """

    with _config_lock:
        global _config

        cfg = replace(config) if config is not None else LoggingConfig()
        for key, value in kwargs.items():
            if hasattr(cfg, key):
                setattr(cfg, key, value)  # type: ignore[arg-type]

        if _config is not None:
            if _config == cfg:
                return
            _teardown_locked()
        level = _parse_level(cfg.level)

        base = logging.getLogger(cfg.app_name)
        base.setLevel(level)
        base.propagate = False
        for handler in list(base.handlers):
            base.removeHandler(handler)

        for handler in _build_handlers(cfg, level):
            base.addHandler(handler)

        _config = cfg


def _teardown_locked() -> None:
    global _config
    app_name = _config.app_name if _config else LoggingConfig.app_name
    _config = None
    base = logging.getLogger(app_name)
    base.propagate = True
    base.setLevel(logging.NOTSET)
    for handler in list(base.handlers):
        base.removeHandler(handler)
        handler.close()


def shutdown_logging() -> None:
    """Detach the handlers installed by :func:`init_logging`."""

    with _config_lock:
        _teardown_locked()


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the engine namespace.

    No handlers are installed here; applications call :func:`init_logging`.
    """

    cfg = _config or LoggingConfig()
    return logging.getLogger(name or cfg.app_name)

