"""Tests for the logging helpers."""
from __future__ import annotations

import logging
from datetime import date

from rich.logging import RichHandler

from statement_engine.core.config import LogSettings
from statement_engine.core.log import (
    DailyFileHandler,
    LoggingConfig,
    get_logger,
    init_logging,
    log_context,
    shutdown_logging,
    timeit,
)
from statement_engine.core.log.context import ContextFilter


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def _capture(name: str) -> tuple[logging.Logger, _ListHandler]:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = _ListHandler()
    handler.addFilter(ContextFilter())
    logger.addHandler(handler)
    return logger, handler


def test_scoped_context_is_rendered_and_restored() -> None:
    logger, handler = _capture("statement_engine.tests.context")
    log_context.clear()
    with log_context.scoped(template="HDFC", seed=42, empty=None):
        logger.info("inside")
    logger.info("outside")

    assert handler.records[0].context == "template=HDFC seed=42 "
    assert handler.records[1].context == ""
    assert log_context.as_dict() == {}


def test_bind_and_unbind() -> None:
    log_context.clear()
    log_context.bind(job="generate", user_type="salaried")
    log_context.unbind("job")
    assert log_context.as_dict() == {"user_type": "salaried"}
    log_context.clear()


def test_timeit_reports_throughput() -> None:
    logger, handler = _capture("statement_engine.tests.timer")
    with timeit("Statement build", logger=logger, unit="rows") as timer:
        timer.add(60)

    message = handler.records[-1].getMessage()
    assert message.startswith("Statement build completed in")
    assert "60 rows" in message


def test_timeit_logs_failures() -> None:
    logger, handler = _capture("statement_engine.tests.failure")
    try:
        with timeit("Statement build", logger=logger):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert handler.records[-1].levelno == logging.ERROR
    assert "failed after" in handler.records[-1].getMessage()


def test_logging_config_from_settings(tmp_path) -> None:
    settings = LogSettings(level="DEBUG", directory=tmp_path)

    cfg = LoggingConfig.from_settings(settings)
    assert cfg.level == "DEBUG"
    assert cfg.log_dir == tmp_path

    overridden = LoggingConfig.from_settings(settings, level="WARNING", log_dir=None)
    assert overridden.level == "WARNING"
    assert overridden.log_dir == tmp_path


def test_daily_file_handler_writes_prefixed_file(tmp_path) -> None:
    handler = DailyFileHandler(tmp_path, prefix="engine")
    try:
        assert handler.baseFilename.endswith(f"engine_{date.today():%Y_%m_%d}.log")
    finally:
        handler.close()


def test_get_logger_installs_no_handlers() -> None:
    shutdown_logging()
    logger = get_logger("statement_engine.tests.library")
    base = logging.getLogger("statement_engine")

    assert logger.name == "statement_engine.tests.library"
    assert base.handlers == []
    assert base.propagate is True


def test_init_logging_attaches_console_handler() -> None:
    shutdown_logging()
    try:
        init_logging(LoggingConfig(level="DEBUG"))
        base = logging.getLogger("statement_engine")
        assert [type(handler) for handler in base.handlers] == [RichHandler]
        assert base.level == logging.DEBUG
        assert base.propagate is False
    finally:
        shutdown_logging()
    assert logging.getLogger("statement_engine").handlers == []
