"""Run-scoped state threaded through one statement build."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from faker import Faker

from .core.config import GenerationTuning
from .rng import SeededRng

DEFAULT_CITY = "BHOPAL"
DEFAULT_BRANCH_LOCATION = "Main Branch"
NAME_LOCALE = "en_IN"


def _branch_location(branch_address: Optional[str]) -> str:
    if not branch_address:
        return DEFAULT_BRANCH_LOCATION
    words = [word for word in re.split(r"[,\s]+", branch_address) if len(word) > 2]
    return " ".join(words[:3]).upper() or DEFAULT_BRANCH_LOCATION


@dataclass(slots=True)
class GenerationContext:
    """Everything a generator may touch while building one statement.

    A fresh context is created for every build, so nothing here leaks between
    two statements even when they are generated concurrently.
    """

    rng: SeededRng
    tuning: GenerationTuning = field(default_factory=GenerationTuning)
    user_city: str = DEFAULT_CITY
    branch_location: str = DEFAULT_BRANCH_LOCATION
    used_names: set[str] = field(default_factory=set)
    _faker: Optional[Faker] = None

    @classmethod
    def for_build(
        cls,
        seed: int,
        *,
        city: Optional[str] = None,
        branch_address: Optional[str] = None,
        tuning: Optional[GenerationTuning] = None,
    ) -> "GenerationContext":
        return cls(
            rng=SeededRng(seed),
            tuning=tuning or GenerationTuning(),
            user_city=(city or "").strip().upper() or DEFAULT_CITY,
            branch_location=_branch_location(branch_address),
        )

    @property
    def faker(self) -> Faker:
        """Faker bound to this build's stream (created on first use)."""

        if self._faker is None:
            faker = Faker(NAME_LOCALE)
            faker.random = self.rng
            self._faker = faker
        return self._faker

    def unique_name(self, pool: Sequence[str]) -> str:
        """Pick a name not used earlier in this statement.

        Once the pool is exhausted the set is cleared and any name may repeat.
        """

        available = [name for name in pool if name not in self.used_names]
        if not available:
            self.used_names.clear()
            return self.rng.pick(pool)
        name = self.rng.pick(available)
        self.used_names.add(name)
        return name

    def person_name(self) -> str:
        """Upper-case Indian style name for narrations."""

        return f"{self.faker.first_name()} {self.faker.last_name()}".upper()
