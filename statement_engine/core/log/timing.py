"""Timing helpers to log duration and throughput of operations."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass
class _Timer:
    label: str
    logger: logging.Logger
    level: int
    unit: str
    count: int = 0
    start: float = field(default_factory=perf_counter)

    def add(self, amount: int = 1) -> None:
        self.count += amount

    def finish(self, success: bool = True) -> None:
        elapsed = perf_counter() - self.start
        total = self.count

        if success:
            message = f"{self.label} completed in {elapsed:.3f}s"
            if total:
                message += f" ({total:,} {self.unit}"
                if elapsed > 0:
                    rate = total / elapsed
                    message += f" @ {rate:,.0f} {self.unit}/s"
                message += ")"
            self.logger.log(self.level, message)
        else:
            fail_message = f"{self.label} failed after {elapsed:.3f}s"
            if total:
                fail_message += f" ({total:,} {self.unit})"
            self.logger.error(fail_message)


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    unit: str = "items",
) -> Iterator[_Timer]:
    """Context manager for timing operations.

    Args:
        label: Description of the operation being timed
        logger: Logger instance to use (defaults to "statement_engine.timer")
        level: Logging level for the timing message
        unit: Unit for throughput calculation (e.g., "transactions")
    """
    log = logger or logging.getLogger("statement_engine.timer")
    timer = _Timer(label=label, logger=log, level=level, unit=unit)

    try:
        yield timer
    except Exception:
        timer.finish(success=False)
        raise
    else:
        timer.finish(success=True)
