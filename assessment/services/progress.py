"""Bounded trend window over the history ledger."""

from assessment.config import DEFAULT_WINDOW_SIZE
from assessment.domain.models import ProgressPoint
from assessment.services.classification import RecommendationClassifier
from assessment.services.ledger import HistoryLedger


class ProgressAggregator:
    """Selects the most recent ledger entries for the progress chart."""

    def __init__(
        self,
        classifier: RecommendationClassifier | None = None,
        default_size: int = DEFAULT_WINDOW_SIZE,
    ) -> None:
        if default_size <= 0:
            raise ValueError(f"default_size must be positive, got {default_size}")
        self.classifier = classifier or RecommendationClassifier()
        self.default_size = default_size

    def window(self, ledger: HistoryLedger, size: int | None = None) -> list[ProgressPoint]:
        """
        Return the last ``size`` entries in ascending (chronological) order.

        Older entries are truncated; a shorter ledger is returned whole.
        """
        size = self.default_size if size is None else size
        if size <= 0:
            raise ValueError(f"window size must be positive, got {size}")

        recent = ledger.all()[-size:]
        return [
            ProgressPoint(
                submission=submission,
                color=self.classifier.color_for(submission.normalized_score),
            )
            for submission in recent
        ]
