"""Shared fixtures for assessment tests."""

from collections.abc import Sequence
from datetime import date
from typing import Any

import pytest

from adapters.storage import InMemoryHistoryStore
from assessment.domain.errors import PersistenceError
from assessment.domain.models import Submission, Tier


class FixedClock:
    """Clock test double whose day can be moved by the test."""

    def __init__(self, day: date) -> None:
        self.day = day

    def today(self) -> date:
        return self.day


class FailingStore(InMemoryHistoryStore):
    """Store double that fails to load and/or save."""

    def __init__(self, fail_load: bool = False, fail_save: bool = False) -> None:
        super().__init__()
        self.fail_load = fail_load
        self.fail_save = fail_save

    def load(self) -> list[dict[str, Any]]:
        if self.fail_load:
            raise OSError("storage unavailable")
        return super().load()

    def save(self, records: Sequence[dict[str, Any]]) -> None:
        if self.fail_save:
            raise PersistenceError("disk full")
        super().save(records)


def make_submission(day: date, raw_score: int = 14) -> Submission:
    normalized = round((raw_score - 2) / 24 * 10, 1)
    if normalized <= 3.0:
        tier = Tier.HIGH_NEED
    elif normalized <= 7.0:
        tier = Tier.MODERATE_NEED
    else:
        tier = Tier.LOW_NEED
    return Submission(day=day, raw_score=raw_score, normalized_score=normalized, tier=tier)


@pytest.fixture
def store() -> InMemoryHistoryStore:
    return InMemoryHistoryStore()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(date(2024, 3, 10))
