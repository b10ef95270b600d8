"""
Per-day history ledger of submitted self-assessments.

Key patterns:
- Protocol-based dependency injection for the persistence collaborator
- Result type for the expected "already submitted today" failure
- Save-then-commit so a failed save never leaves a phantom entry in memory
- Stored records are written back untouched, including ones that fail to parse
"""

from collections.abc import Sequence
from datetime import date
from typing import Any, Protocol

import structlog
from pydantic import ValidationError

from assessment.domain.errors import IdempotencyViolation, PersistenceError
from assessment.domain.models import Submission
from assessment.domain.result import Result
from assessment.logging_config import configure_logging

configure_logging()

logger = structlog.get_logger(__name__)


class HistoryStore(Protocol):
    """
    Key-value persistence for the history records.

    Both operations are synchronous and all-or-nothing. ``load`` returns an empty
    list on first run; ``save`` raises PersistenceError when the write fails.
    """

    def load(self) -> list[dict[str, Any]]: ...

    def save(self, records: Sequence[dict[str, Any]]) -> None: ...


class HistoryLedger:
    """
    Append-only history holding at most one Submission per calendar day.

    The ledger is the only component allowed to mutate the persisted history.
    It never drops what it found in the store: records it cannot parse, and
    later records for an already-seen day, stay in the saved list as they were.
    If the store could not be read at all, the ledger starts empty and refuses
    to save, so a failed read never overwrites the stored history.
    """

    def __init__(self, store: HistoryStore) -> None:
        self.store = store
        self.logger = logger.bind(component="history_ledger")
        self._entries: list[Submission] = []
        self._by_day: dict[date, Submission] = {}
        self._stored: list[Any] = []
        self.load_failed = False
        self._load()

    def _load(self) -> None:
        try:
            records = self.store.load()
        except Exception as e:
            self.load_failed = True
            self.logger.warning("history_load_failed", error=str(e))
            return

        if not isinstance(records, list):
            self.load_failed = True
            self.logger.warning("history_load_failed", error="stored history is not a list")
            return

        self._stored = list(records)
        for index, record in enumerate(records):
            try:
                submission = Submission.model_validate(record)
            except ValidationError as e:
                self.logger.warning(
                    "history_record_skipped", index=index, error_count=e.error_count()
                )
                continue

            if submission.day in self._by_day:
                self.logger.warning(
                    "history_duplicate_day_ignored", index=index, day=submission.day.isoformat()
                )
                continue

            self._entries.append(submission)
            self._by_day[submission.day] = submission

        self.logger.info(
            "history_loaded",
            entries=len(self._entries),
            unreadable=len(self._stored) - len(self._entries),
        )

    def __len__(self) -> int:
        return len(self._entries)

    def has_entry_for(self, day: date) -> bool:
        return day in self._by_day

    def entry_for(self, day: date) -> Submission | None:
        return self._by_day.get(day)

    def all(self) -> tuple[Submission, ...]:
        """All submissions in submission order."""
        return tuple(self._entries)

    def append(self, submission: Submission) -> Result[Submission, IdempotencyViolation]:
        """
        Record a submission for its day.

        Returns:
            Result with the stored submission, or IdempotencyViolation carrying the
            existing entry when the day is already recorded.

        Raises:
            PersistenceError: the store failed to save, or could not be read when the
                ledger was built; the ledger is left unchanged.
        """
        existing = self._by_day.get(submission.day)
        if existing is not None:
            self.logger.info("duplicate_submission_rejected", day=submission.day.isoformat())
            return Result.err(IdempotencyViolation(submission.day, existing))

        if self.load_failed:
            self.logger.error("history_save_refused", day=submission.day.isoformat())
            raise PersistenceError(
                "Stored history could not be read; refusing to overwrite it"
            )

        stored = [*self._stored, submission.to_record()]
        try:
            self.store.save(stored)
        except PersistenceError:
            self.logger.error("history_save_failed", day=submission.day.isoformat())
            raise
        except Exception as e:
            self.logger.error("history_save_failed", day=submission.day.isoformat(), error=str(e))
            raise PersistenceError(f"Failed to save history: {e}") from e

        self._stored = stored
        self._entries.append(submission)
        self._by_day[submission.day] = submission
        self.logger.info(
            "submission_recorded",
            day=submission.day.isoformat(),
            raw_score=submission.raw_score,
            normalized_score=submission.normalized_score,
            tier=submission.tier.name,
        )
        return Result.ok(submission)
