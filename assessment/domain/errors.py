"""Error kinds raised or returned by the assessment engine."""

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assessment.domain.models import Submission


class AssessmentError(Exception):
    """Base class for assessment engine errors."""


class AnswerValidationError(AssessmentError, ValueError):
    """An answer set is malformed or holds an answer outside its question's domain."""

    def __init__(self, question_id: int | None, reason: str) -> None:
        self.question_id = question_id
        self.reason = reason
        prefix = f"question {question_id}: " if question_id is not None else ""
        super().__init__(f"{prefix}{reason}")


class ScoreRangeError(AssessmentError, ValueError):
    """A score lies outside the range the catalog can produce."""


class IdempotencyViolation(AssessmentError):
    """A second submission was attempted for a day that already has one."""

    def __init__(self, day: date, existing: "Submission | None" = None) -> None:
        self.day = day
        self.existing = existing
        super().__init__(f"a submission for {day.isoformat()} is already recorded")


class PersistenceError(AssessmentError):
    """The history store failed to save."""
