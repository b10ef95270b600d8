"""
Daily check-in pipeline: answers in, one recorded Submission per day out.

Flow:
1. Validate the answer set against the catalog
2. Score, normalize and classify
3. Append to the ledger, guarded by the one-per-day rule

Looking up today's result is a pure read of the ledger; it never rescores or writes.
"""

from collections.abc import Sequence
from datetime import UTC, date, datetime
from typing import Protocol

import structlog

from assessment.config import AppConfig, get_config
from assessment.domain.errors import AnswerValidationError, IdempotencyViolation
from assessment.domain.models import ProgressPoint, Submission
from assessment.domain.result import Result
from assessment.services.catalog import QuestionCatalog
from assessment.services.classification import RecommendationClassifier
from assessment.services.ledger import HistoryLedger, HistoryStore
from assessment.services.progress import ProgressAggregator
from assessment.services.scoring import Normalizer, ScoringEngine

logger = structlog.get_logger(__name__)


class Clock(Protocol):
    """Source of the current calendar day."""

    def today(self) -> date: ...


class SystemClock:
    """Calendar day of the current UTC timestamp."""

    def today(self) -> date:
        return datetime.now(UTC).date()


class DailyCheckInService:
    """Runs the scoring pipeline and records at most one result per day."""

    def __init__(
        self,
        ledger: HistoryLedger,
        catalog: QuestionCatalog | None = None,
        clock: Clock | None = None,
        window_size: int | None = None,
    ) -> None:
        self.ledger = ledger
        self.catalog = catalog or QuestionCatalog()
        self.clock = clock or SystemClock()
        self.engine = ScoringEngine()
        self.normalizer = Normalizer(self.catalog.min_raw, self.catalog.max_raw)
        self.classifier = RecommendationClassifier()
        if window_size is None:
            self.aggregator = ProgressAggregator(self.classifier)
        else:
            self.aggregator = ProgressAggregator(self.classifier, default_size=window_size)
        self.logger = logger.bind(component="daily_checkin")

    @classmethod
    def from_config(
        cls,
        store: HistoryStore,
        config: AppConfig | None = None,
        clock: Clock | None = None,
    ) -> "DailyCheckInService":
        config = config or get_config()
        return cls(
            HistoryLedger(store),
            clock=clock,
            window_size=config.progress.window_size,
        )

    def evaluate(
        self, answers: Sequence[int], day: date | None = None
    ) -> Result[Submission, AnswerValidationError]:
        """Score an answer set without recording it."""
        validated = self.catalog.validate(answers)
        if validated.is_err():
            return Result.err(validated.unwrap_err())

        raw_score = self.engine.score(validated.unwrap())
        normalized_score = self.normalizer.normalize(raw_score)
        return Result.ok(
            Submission(
                day=day or self.clock.today(),
                raw_score=raw_score,
                normalized_score=normalized_score,
                tier=self.classifier.classify(normalized_score),
            )
        )

    def submit(
        self, answers: Sequence[int]
    ) -> Result[Submission, AnswerValidationError | IdempotencyViolation]:
        """
        Score today's answers and record them.

        A day that already has an entry is rejected before any scoring happens;
        the returned IdempotencyViolation carries the existing submission.

        Raises:
            PersistenceError: the history could not be saved.
        """
        today = self.clock.today()

        existing = self.ledger.entry_for(today)
        if existing is not None:
            self.logger.info("checkin_already_completed", day=today.isoformat())
            return Result.err(IdempotencyViolation(today, existing))

        evaluated = self.evaluate(answers, day=today)
        if evaluated.is_err():
            error = evaluated.unwrap_err()
            self.logger.info(
                "checkin_answers_rejected", question_id=error.question_id, reason=error.reason
            )
            return Result.err(error)

        appended = self.ledger.append(evaluated.unwrap())
        if appended.is_err():
            return Result.err(appended.unwrap_err())
        return Result.ok(appended.unwrap())

    def has_completed_today(self) -> bool:
        return self.ledger.has_entry_for(self.clock.today())

    def today_result(self) -> Submission | None:
        return self.ledger.entry_for(self.clock.today())

    def progress(self, size: int | None = None) -> list[ProgressPoint]:
        return self.aggregator.window(self.ledger, size)
